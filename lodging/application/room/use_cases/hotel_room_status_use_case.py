"""Use case for housekeeping and occupancy status of hotel rooms."""

import structlog

from lodging.application.common.unit_of_work import UnitOfWork
from lodging.application.room.protocols.room_type_repository import RoomTypeRepositoryProtocol
from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_objects import HotelRoomId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.exceptions import HotelRoomNotFoundError
from lodging.domain.room.services import RoomAvailabilityService

logger = structlog.get_logger(__name__)

# Action name -> HotelRoom method
_ACTIONS = {
    "occupy": HotelRoom.mark_occupied,
    "clean": HotelRoom.mark_clean,
    "dirty": HotelRoom.mark_dirty,
    "maintenance": HotelRoom.mark_maintenance,
    "out_of_order": HotelRoom.mark_out_of_order,
    "release": HotelRoom.release,
}


class HotelRoomStatusUseCase:
    """Changes the operational status of one hotel room under a row lock."""

    def __init__(
        self,
        room_type_repository: RoomTypeRepositoryProtocol,
        unit_of_work: UnitOfWork,
        availability_service: RoomAvailabilityService,
    ) -> None:
        self.room_type_repository = room_type_repository
        self.unit_of_work = unit_of_work
        self.availability_service = availability_service

    def change_status(self, hotel_room_id: HotelRoomId, action: str) -> HotelRoom:
        """
        Apply a status action to a hotel room.

        Args:
            hotel_room_id: Room to update
            action: One of occupy, clean, dirty, maintenance, out_of_order, release

        Returns:
            Updated hotel room

        Raises:
            InvalidInputError: If the action is unknown
            HotelRoomNotFoundError: If the hotel room does not exist
            InvalidStateError: If release is requested from a non-releasable status
        """
        transition = _ACTIONS.get(action)
        if transition is None:
            raise InvalidInputError(
                f"Unsupported hotel room action '{action}'. "
                f"Expected one of: {', '.join(_ACTIONS)}",
                field="action",
                value=action,
            )

        with self.unit_of_work:
            hotel_room = self.room_type_repository.lock_hotel_room_by_id(hotel_room_id)
            if not hotel_room:
                raise HotelRoomNotFoundError(hotel_room_id)
            previous = hotel_room.status
            transition(hotel_room)
            hotel_room = self.room_type_repository.save_hotel_room(hotel_room)
            self.unit_of_work.commit()

        logger.info(
            "hotel_room_status_changed",
            hotel_room_id=str(hotel_room_id),
            previous_status=previous.value,
            status=hotel_room.status.value,
        )
        return hotel_room

    def assign_hotel_room(self, hotel_room_id: HotelRoomId) -> HotelRoom:
        """
        Hand an AVAILABLE room to an arriving guest and mark it OCCUPIED.

        Unlike the "occupy" action, which housekeeping may apply from any
        status, assignment refuses rooms that are not ready.

        Raises:
            HotelRoomNotFoundError: If the hotel room does not exist
            InvalidStateError: If the room is not AVAILABLE
        """
        with self.unit_of_work:
            hotel_room = self.room_type_repository.lock_hotel_room_by_id(hotel_room_id)
            if not hotel_room:
                raise HotelRoomNotFoundError(hotel_room_id)
            self.availability_service.ensure_hotel_room_is_assignable(hotel_room)
            hotel_room.mark_occupied()
            hotel_room = self.room_type_repository.save_hotel_room(hotel_room)
            self.unit_of_work.commit()

        logger.info("hotel_room_assigned", hotel_room_id=str(hotel_room_id))
        return hotel_room

    def update_details(
        self,
        hotel_room_id: HotelRoomId,
        room_number: str | None = None,
        notes: str | None = None,
    ) -> HotelRoom:
        """Rename a hotel room or replace its notes; arguments left as None are kept."""
        with self.unit_of_work:
            hotel_room = self.room_type_repository.lock_hotel_room_by_id(hotel_room_id)
            if not hotel_room:
                raise HotelRoomNotFoundError(hotel_room_id)
            if room_number is not None:
                hotel_room.update_room_number(room_number)
            if notes is not None:
                hotel_room.set_notes(notes)
            hotel_room = self.room_type_repository.save_hotel_room(hotel_room)
            self.unit_of_work.commit()

        logger.info("hotel_room_updated", hotel_room_id=str(hotel_room_id))
        return hotel_room
