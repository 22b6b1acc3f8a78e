"""Common value objects shared across all domain modules."""

from .enums import DomainEnum
from .ids import (
    AccommodationId,
    FloorId,
    HotelRoomId,
    RoomId,
    RoomTypeId,
    UserId,
)
from .money import Money

__all__ = [
    # IDs
    "AccommodationId",
    "FloorId",
    "HotelRoomId",
    "RoomId",
    "RoomTypeId",
    "UserId",
    # Shared values
    "DomainEnum",
    "Money",
]
