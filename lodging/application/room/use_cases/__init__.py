from .create_room_type_use_case import CreateRoomTypeUseCase
from .create_room_use_case import CreateRoomUseCase
from .hotel_room_status_use_case import HotelRoomStatusUseCase
from .room_management_use_case import RoomManagementUseCase
from .room_queries_use_case import RoomQueriesUseCase
from .room_type_management_use_case import RoomTypeManagementUseCase

__all__ = [
    "CreateRoomTypeUseCase",
    "CreateRoomUseCase",
    "HotelRoomStatusUseCase",
    "RoomManagementUseCase",
    "RoomQueriesUseCase",
    "RoomTypeManagementUseCase",
]
