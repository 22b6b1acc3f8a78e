"""Domain events recorded by the Room and RoomType aggregates."""

from dataclasses import dataclass

from lodging.domain.common.domain_event import DomainEvent
from lodging.domain.common.value_objects import AccommodationId, HotelRoomId, RoomId, RoomTypeId


@dataclass(frozen=True)
class RoomCreatedEvent(DomainEvent):
    room_id: RoomId
    accommodation_id: AccommodationId


@dataclass(frozen=True)
class RoomDeactivatedEvent(DomainEvent):
    room_id: RoomId


@dataclass(frozen=True)
class RoomTypeCreatedEvent(DomainEvent):
    room_type_id: RoomTypeId
    hotel_id: AccommodationId


@dataclass(frozen=True)
class RoomTypeInventoryAdjustedEvent(DomainEvent):
    room_type_id: RoomTypeId
    previous_inventory: int
    new_inventory: int


@dataclass(frozen=True)
class HotelRoomCreatedEvent(DomainEvent):
    room_type_id: RoomTypeId
    hotel_room_id: HotelRoomId
    room_number: str
