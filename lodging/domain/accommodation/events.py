"""Domain events recorded by the Accommodation aggregate."""

from dataclasses import dataclass

from lodging.domain.common.domain_event import DomainEvent
from lodging.domain.common.value_objects import AccommodationId, UserId

from .value_objects.enums import AccommodationType


@dataclass(frozen=True)
class AccommodationCreatedEvent(DomainEvent):
    accommodation_id: AccommodationId
    owner_id: UserId
    type: AccommodationType


@dataclass(frozen=True)
class AccommodationApprovedEvent(DomainEvent):
    accommodation_id: AccommodationId
    approved_by: UserId


@dataclass(frozen=True)
class AccommodationRejectedEvent(DomainEvent):
    accommodation_id: AccommodationId
    rejected_by: UserId


@dataclass(frozen=True)
class AccommodationActivatedEvent(DomainEvent):
    accommodation_id: AccommodationId


@dataclass(frozen=True)
class AccommodationSuspendedEvent(DomainEvent):
    accommodation_id: AccommodationId
