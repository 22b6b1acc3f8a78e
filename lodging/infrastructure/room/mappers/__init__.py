from .hotel_room_mapper import HotelRoomMapper
from .room_mapper import RoomMapper
from .room_type_mapper import RoomTypeMapper

__all__ = ["HotelRoomMapper", "RoomMapper", "RoomTypeMapper"]
