"""
Application common module.

Contains base classes for the application layer:
- Pagination / PaginatedResult: list query parameters and results
- UnitOfWork: transaction boundary that publishes events after commit
- EventPublisherProtocol / EventSource: event dispatch ports
"""

from .event_publisher import EventPublisherProtocol, EventSource
from .pagination import PaginatedResult, Pagination
from .unit_of_work import UnitOfWork

__all__ = [
    "EventPublisherProtocol",
    "EventSource",
    "PaginatedResult",
    "Pagination",
    "UnitOfWork",
]
