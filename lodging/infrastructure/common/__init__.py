from .event_bus import InMemoryEventBus
from .row_tracker import RowTracker
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["InMemoryEventBus", "RowTracker", "SqlAlchemyUnitOfWork"]
