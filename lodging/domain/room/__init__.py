"""Room module domain layer: homestay rooms, hotel room types and hotel rooms."""

from .entities import HotelRoom, Room, RoomType
from .services import RoomAvailabilityService

__all__ = ["HotelRoom", "Room", "RoomAvailabilityService", "RoomType"]
