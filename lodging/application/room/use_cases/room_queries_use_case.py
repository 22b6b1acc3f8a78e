"""Use case for reading rooms, room types and hotel rooms."""

from lodging.application.common.pagination import PaginatedResult, Pagination
from lodging.application.room.protocols.room_repository import RoomRepositoryProtocol
from lodging.application.room.protocols.room_type_repository import RoomTypeRepositoryProtocol
from lodging.domain.common.value_objects import (
    AccommodationId,
    FloorId,
    HotelRoomId,
    RoomId,
    RoomTypeId,
)
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room import Room
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.exceptions import (
    HotelRoomNotFoundError,
    RoomNotFoundError,
    RoomTypeNotFoundError,
)
from lodging.domain.room.value_objects import HotelRoomStatus, RoomStatus


class RoomQueriesUseCase:
    """Read-only access to the room module."""

    def __init__(
        self,
        room_repository: RoomRepositoryProtocol,
        room_type_repository: RoomTypeRepositoryProtocol,
    ) -> None:
        self.room_repository = room_repository
        self.room_type_repository = room_type_repository

    def get_room(self, room_id: RoomId) -> Room:
        room = self.room_repository.find_by_id(room_id)
        if not room:
            raise RoomNotFoundError(room_id)
        return room

    def get_room_type(self, room_type_id: RoomTypeId) -> RoomType:
        room_type = self.room_type_repository.find_by_id(room_type_id)
        if not room_type:
            raise RoomTypeNotFoundError(room_type_id)
        return room_type

    def get_hotel_room(self, hotel_room_id: HotelRoomId) -> HotelRoom:
        hotel_room = self.room_type_repository.find_hotel_room_by_id(hotel_room_id)
        if not hotel_room:
            raise HotelRoomNotFoundError(hotel_room_id)
        return hotel_room

    def list_homestay_rooms(
        self,
        pagination: Pagination,
        accommodation_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> PaginatedResult[Room]:
        items = self.room_repository.find_many(
            pagination.limit,
            pagination.offset,
            accommodation_id=accommodation_id,
            status=status,
        )
        total = self.room_repository.count(accommodation_id=accommodation_id, status=status)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def list_room_types(
        self,
        pagination: Pagination,
        hotel_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> PaginatedResult[RoomType]:
        items = self.room_type_repository.find_many(
            pagination.limit, pagination.offset, hotel_id=hotel_id, status=status
        )
        total = self.room_type_repository.count(hotel_id=hotel_id, status=status)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def list_hotel_rooms(
        self,
        pagination: Pagination,
        room_type_id: RoomTypeId | None = None,
        floor_id: FloorId | None = None,
        status: HotelRoomStatus | None = None,
    ) -> PaginatedResult[HotelRoom]:
        """List hotel rooms ordered by room number."""
        items = self.room_type_repository.find_many_hotel_rooms(
            pagination.limit,
            pagination.offset,
            room_type_id=room_type_id,
            floor_id=floor_id,
            status=status,
        )
        total = self.room_type_repository.count_hotel_rooms(
            room_type_id=room_type_id, floor_id=floor_id, status=status
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)
