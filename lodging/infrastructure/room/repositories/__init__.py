from .room_repository import RoomRepository
from .room_type_repository import RoomTypeRepository

__all__ = ["RoomRepository", "RoomTypeRepository"]
