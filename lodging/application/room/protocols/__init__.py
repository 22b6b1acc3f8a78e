from .room_repository import RoomRepositoryProtocol
from .room_type_repository import RoomTypeRepositoryProtocol

__all__ = ["RoomRepositoryProtocol", "RoomTypeRepositoryProtocol"]
