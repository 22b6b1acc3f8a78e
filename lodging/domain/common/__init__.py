"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- EventRecorder: Per-aggregate buffer of domain events
- DomainEvent: Notifications of significant domain occurrences
"""

from .domain_event import DomainEvent, EventRecorder
from .entity import Entity, EntityId
from .exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
    InvalidInputError,
    InvalidOperationError,
    InvalidStateError,
)
from .identifiers import IdGenerator, default_id_generator
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "EventRecorder",
    "IdGenerator",
    "InvalidInputError",
    "InvalidOperationError",
    "InvalidStateError",
    "ValueObject",
    "default_id_generator",
]
