"""Protocol for the hotel RoomType repository, including its hotel rooms."""

from typing import Protocol

from lodging.domain.common.value_objects import AccommodationId, FloorId, HotelRoomId, RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import HotelRoomStatus, RoomStatus


class RoomTypeRepositoryProtocol(Protocol):
    """Protocol for RoomType aggregates and their HotelRoom children."""

    def save(self, room_type: RoomType) -> RoomType:
        """
        Save a room type together with all attached hotel rooms.

        Args:
            room_type: The aggregate to persist

        Returns:
            The saved aggregate
        """
        ...

    def find_by_id(self, room_type_id: RoomTypeId) -> RoomType | None:
        """
        Find a room type with its hotel rooms, without locking.

        Returns:
            RoomType if found, None otherwise
        """
        ...

    def lock_by_id(self, room_type_id: RoomTypeId) -> RoomType | None:
        """
        Find a room type and hold a write lock until the transaction ends.

        The inventory cap is only safe when hotel rooms are created on an
        aggregate loaded this way.
        """
        ...

    def find_by_hotel_id(self, hotel_id: AccommodationId) -> list[RoomType]:
        """Get all room types of a hotel, oldest first."""
        ...

    def find_many(
        self,
        limit: int,
        offset: int,
        hotel_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> list[RoomType]:
        """List room types matching the filters, oldest first."""
        ...

    def count(
        self,
        hotel_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> int:
        """Count room types matching the filters."""
        ...

    def save_hotel_room(self, hotel_room: HotelRoom) -> HotelRoom:
        """
        Save a single hotel room whose room type already exists.

        Used for status changes that do not touch the parent aggregate.
        """
        ...

    def find_hotel_room_by_id(self, hotel_room_id: HotelRoomId) -> HotelRoom | None:
        """Find a hotel room by ID without locking."""
        ...

    def lock_hotel_room_by_id(self, hotel_room_id: HotelRoomId) -> HotelRoom | None:
        """Find a hotel room and hold a write lock until the transaction ends."""
        ...

    def find_hotel_rooms_by_type(self, room_type_id: RoomTypeId) -> list[HotelRoom]:
        """Get all hotel rooms of a room type, ordered by room number."""
        ...

    def find_many_hotel_rooms(
        self,
        limit: int,
        offset: int,
        room_type_id: RoomTypeId | None = None,
        floor_id: FloorId | None = None,
        status: HotelRoomStatus | None = None,
    ) -> list[HotelRoom]:
        """List hotel rooms matching the filters, ordered by room number."""
        ...

    def count_hotel_rooms(
        self,
        room_type_id: RoomTypeId | None = None,
        floor_id: FloorId | None = None,
        status: HotelRoomStatus | None = None,
    ) -> int:
        """Count hotel rooms matching the filters."""
        ...
