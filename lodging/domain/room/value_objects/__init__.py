"""Room value objects."""

from .enums import BedType, HotelRoomStatus, RoomCategory, RoomImageType, RoomStatus
from .guest_capacity import GuestCapacity
from .room_image import RoomImage
from .room_inventory import RoomInventory
from .room_number import RoomNumber

__all__ = [
    "BedType",
    "GuestCapacity",
    "HotelRoomStatus",
    "RoomCategory",
    "RoomImage",
    "RoomImageType",
    "RoomInventory",
    "RoomNumber",
    "RoomStatus",
]
