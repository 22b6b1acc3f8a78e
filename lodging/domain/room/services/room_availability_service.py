"""
Domain service for availability checks before a room is sold or assigned.

This is a pure domain service with no infrastructure dependencies; callers
load the aggregates and pass them in.
"""

from lodging.domain.common.exceptions import InvalidOperationError, InvalidStateError
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room import Room
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import HotelRoomStatus, RoomStatus


class RoomAvailabilityService:
    """Guards used by booking and assignment flows."""

    def ensure_homestay_room_is_bookable(self, room: Room) -> None:
        """
        Raises:
            InvalidStateError: If the room listing is inactive
        """
        if not room.is_active():
            raise InvalidStateError(
                "Room is not active for booking",
                current_state=room.status.value,
                required_state=RoomStatus.ACTIVE.value,
                operation="book",
            )

    def ensure_room_type_has_inventory(self, room_type: RoomType) -> None:
        """
        Raises:
            InvalidStateError: If the room type is inactive
            InvalidOperationError: If every inventory slot already has a hotel room
        """
        if not room_type.is_active():
            raise InvalidStateError(
                "Room type is not active for booking",
                current_state=room_type.status.value,
                required_state=RoomStatus.ACTIVE.value,
                operation="book",
            )
        if not room_type.has_available_inventory():
            raise InvalidOperationError(
                "Room type inventory exhausted",
                operation="book",
                reason="inventory exhausted",
            )

    def ensure_hotel_room_is_assignable(self, hotel_room: HotelRoom) -> None:
        """
        Raises:
            InvalidStateError: If the hotel room is not AVAILABLE
        """
        if not hotel_room.is_available():
            raise InvalidStateError(
                "Hotel room is not available",
                current_state=hotel_room.status.value,
                required_state=HotelRoomStatus.AVAILABLE.value,
                operation="assign",
            )
