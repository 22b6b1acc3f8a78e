"""Use case for editing homestay rooms and their inventory."""

from collections.abc import Callable

import structlog

from lodging.application.common.pricing import DEFAULT_CURRENCY, PriceInput, to_money
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.application.room.protocols.room_repository import RoomRepositoryProtocol
from lodging.domain.common.value_objects import RoomId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.exceptions import RoomNotFoundError
from lodging.domain.room.value_objects import RoomImage

logger = structlog.get_logger(__name__)


class RoomManagementUseCase:
    """
    Attribute, status and inventory changes for homestay rooms.

    Inventory and status changes load the room with lock_by_id. Plain attribute
    edits load without a lock and write only the columns they change.
    """

    def __init__(
        self,
        room_repository: RoomRepositoryProtocol,
        unit_of_work: UnitOfWork,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.room_repository = room_repository
        self.unit_of_work = unit_of_work
        self.default_currency = default_currency

    def _apply(self, room_id: RoomId, change: Callable[[Room], None], lock: bool) -> Room:
        with self.unit_of_work:
            load = self.room_repository.lock_by_id if lock else self.room_repository.find_by_id
            room = load(room_id)
            if not room:
                raise RoomNotFoundError(room_id)
            change(room)
            room = self.room_repository.save(room)
            self.unit_of_work.track(room)
            self.unit_of_work.commit()
        return room

    def update_room(
        self,
        room_id: RoomId,
        description: str | None = None,
        amenities: list[str] | None = None,
        images: list[RoomImage] | None = None,
        base_price: PriceInput | None = None,
    ) -> Room:
        """
        Apply the given changes; arguments left as None are kept.

        Raises:
            RoomNotFoundError: If the room does not exist
            InvalidInputError: If a change breaks a room rule
        """

        def change(room: Room) -> None:
            if description is not None:
                room.update_description(description)
            if amenities is not None:
                room.update_amenities(amenities)
            if images is not None:
                room.update_images(images)
            if base_price is not None:
                room.update_base_price(to_money(base_price, self.default_currency))

        room = self._apply(room_id, change, lock=False)
        logger.info("room_updated", room_id=str(room_id))
        return room

    def activate_room(self, room_id: RoomId) -> Room:
        room = self._apply(room_id, lambda r: r.activate(), lock=True)
        logger.info("room_activated", room_id=str(room_id))
        return room

    def deactivate_room(self, room_id: RoomId) -> Room:
        """
        Raises:
            RoomNotFoundError: If the room does not exist
            InvalidStateError: If the room still manages more than one unit
        """
        room = self._apply(room_id, lambda r: r.deactivate(), lock=True)
        logger.info("room_deactivated", room_id=str(room_id))
        return room

    def adjust_inventory(self, room_id: RoomId, inventory: int) -> Room:
        """
        Set the number of identical units.

        Raises:
            RoomNotFoundError: If the room does not exist
            InvalidInputError: If inventory is below 1
        """
        room = self._apply(room_id, lambda r: r.adjust_inventory(inventory), lock=True)
        logger.info("room_inventory_adjusted", room_id=str(room_id), inventory=inventory)
        return room

    def increase_inventory(self, room_id: RoomId, by: int = 1) -> Room:
        room = self._apply(room_id, lambda r: r.increase_inventory(by), lock=True)
        logger.info(
            "room_inventory_increased", room_id=str(room_id), inventory=room.inventory.value
        )
        return room

    def decrease_inventory(self, room_id: RoomId, by: int = 1) -> Room:
        room = self._apply(room_id, lambda r: r.decrease_inventory(by), lock=True)
        logger.info(
            "room_inventory_decreased", room_id=str(room_id), inventory=room.inventory.value
        )
        return room
