from .hotel_room import HotelRoom
from .room import Room
from .room_type import RoomType

__all__ = ["HotelRoom", "Room", "RoomType"]
