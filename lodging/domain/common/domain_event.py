"""
Domain Events and the recorder aggregates use to buffer them.

Domain Events represent something significant that happened in the domain.
They are immutable records of past occurrences that other parts of the
system can react to.

Example:
    @dataclass(frozen=True)
    class HotelRoomCreatedEvent(DomainEvent):
        room_type_id: RoomTypeId
        hotel_room_id: HotelRoomId
        room_number: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Domain Events are:
    - Immutable (frozen dataclass)
    - Named in past tense (AccommodationApproved, not ApproveAccommodation)
    - Self-contained (carry all data needed to understand what happened)
    - Timestamped (when the event occurred)

    Base fields are keyword-only so subclasses can declare required
    positional attributes.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif isinstance(value, Enum):
                result[key] = value.value
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result


class EventRecorder:
    """
    Append-only buffer of domain events owned by one aggregate instance.

    Aggregates embed a recorder instead of inheriting event bookkeeping.
    Events are drained exactly once by the unit of work after the
    aggregate is successfully persisted.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def record(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def pull(self) -> list[DomainEvent]:
        """Return recorded events in recording order and clear the buffer."""
        events, self._events = self._events, []
        return events

    @property
    def pending(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
