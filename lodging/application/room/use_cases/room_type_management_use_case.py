"""Use case for hotel room types and the hotel rooms built under them."""

from collections.abc import Callable

import structlog

from lodging.application.accommodation.protocols.floor_repository import FloorRepositoryProtocol
from lodging.application.common.pricing import DEFAULT_CURRENCY, PriceInput, to_money
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.application.room.protocols.room_type_repository import RoomTypeRepositoryProtocol
from lodging.domain.accommodation.exceptions import FloorNotFoundError
from lodging.domain.common.exceptions import InvalidOperationError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import FloorId, RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.exceptions import RoomTypeNotFoundError
from lodging.domain.room.value_objects import RoomImage, RoomNumber

logger = structlog.get_logger(__name__)


class RoomTypeManagementUseCase:
    """
    Hotel room creation, inventory and attribute changes on a RoomType.

    Hotel room creation and inventory changes lock the room type first so
    concurrent callers cannot exceed the inventory cap.
    """

    def __init__(
        self,
        room_type_repository: RoomTypeRepositoryProtocol,
        floor_repository: FloorRepositoryProtocol,
        unit_of_work: UnitOfWork,
        id_generator: IdGenerator = default_id_generator,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.room_type_repository = room_type_repository
        self.floor_repository = floor_repository
        self.unit_of_work = unit_of_work
        self.id_generator = id_generator
        self.default_currency = default_currency

    def _load(self, room_type_id: RoomTypeId, lock: bool) -> RoomType:
        load = (
            self.room_type_repository.lock_by_id if lock else self.room_type_repository.find_by_id
        )
        room_type = load(room_type_id)
        if not room_type:
            raise RoomTypeNotFoundError(room_type_id)
        return room_type

    def _apply(
        self, room_type_id: RoomTypeId, change: Callable[[RoomType], None], lock: bool
    ) -> RoomType:
        with self.unit_of_work:
            room_type = self._load(room_type_id, lock)
            change(room_type)
            room_type = self.room_type_repository.save(room_type)
            self.unit_of_work.track(room_type)
            self.unit_of_work.commit()
        return room_type

    def _ensure_floor_in_hotel(self, floor_id: FloorId, room_type: RoomType) -> None:
        floor = self.floor_repository.find_by_id(floor_id)
        if not floor:
            raise FloorNotFoundError(floor_id)
        if floor.hotel_id != room_type.hotel_id:
            raise InvalidOperationError(
                "Floor belongs to a different hotel",
                operation="create_hotel_room",
                reason=f"floor hotel_id={floor.hotel_id}",
            )
        if not floor.is_room_floor() or floor.is_blocked():
            raise InvalidOperationError(
                "Hotel rooms can only be placed on active room floors",
                operation="create_hotel_room",
                reason=f"floor type={floor.floor_type.value} status={floor.status.value}",
            )

    def create_hotel_room(
        self,
        room_type_id: RoomTypeId,
        room_number: str,
        floor_id: FloorId | None = None,
        notes: str | None = None,
    ) -> HotelRoom:
        """
        Create a physical room under a room type.

        Args:
            room_type_id: Parent room type
            room_number: Door label, at most 32 characters
            floor_id: Optional floor of the same hotel
            notes: Optional housekeeping notes

        Returns:
            Created hotel room, status AVAILABLE

        Raises:
            RoomTypeNotFoundError: If the room type does not exist
            FloorNotFoundError: If the floor does not exist
            InvalidOperationError: If the inventory is exhausted or the floor is unusable
            InvalidInputError: If the room number is blank or too long
        """
        number = RoomNumber(room_number)
        with self.unit_of_work:
            room_type = self._load(room_type_id, lock=True)
            if floor_id is not None:
                self._ensure_floor_in_hotel(floor_id, room_type)

            hotel_room = room_type.create_hotel_room(
                number, floor_id=floor_id, notes=notes, id_generator=self.id_generator
            )
            self.room_type_repository.save(room_type)
            self.unit_of_work.track(room_type)
            self.unit_of_work.commit()

        logger.info(
            "hotel_room_created",
            hotel_room_id=str(hotel_room.id),
            room_type_id=str(room_type_id),
            room_number=number.value,
        )
        return hotel_room

    def adjust_inventory(self, room_type_id: RoomTypeId, inventory: int) -> RoomType:
        """
        Change the declared room cap.

        Raises:
            RoomTypeNotFoundError: If the room type does not exist
            InvalidOperationError: If the cap is below the existing room count
            InvalidInputError: If inventory is below 1
        """
        room_type = self._apply(
            room_type_id, lambda rt: rt.adjust_inventory(inventory), lock=True
        )
        logger.info(
            "room_type_inventory_adjusted", room_type_id=str(room_type_id), inventory=inventory
        )
        return room_type

    def update_room_type(
        self,
        room_type_id: RoomTypeId,
        description: str | None = None,
        amenities: list[str] | None = None,
        images: list[RoomImage] | None = None,
        base_price: PriceInput | None = None,
    ) -> RoomType:
        """Apply the given changes; arguments left as None are kept."""

        def change(room_type: RoomType) -> None:
            if description is not None:
                room_type.update_description(description)
            if amenities is not None:
                room_type.update_amenities(amenities)
            if images is not None:
                room_type.update_images(images)
            if base_price is not None:
                room_type.update_base_price(to_money(base_price, self.default_currency))

        room_type = self._apply(room_type_id, change, lock=False)
        logger.info("room_type_updated", room_type_id=str(room_type_id))
        return room_type

    def activate_room_type(self, room_type_id: RoomTypeId) -> RoomType:
        room_type = self._apply(room_type_id, lambda rt: rt.activate(), lock=True)
        logger.info("room_type_activated", room_type_id=str(room_type_id))
        return room_type

    def deactivate_room_type(self, room_type_id: RoomTypeId) -> RoomType:
        room_type = self._apply(room_type_id, lambda rt: rt.deactivate(), lock=True)
        logger.info("room_type_deactivated", room_type_id=str(room_type_id))
        return room_type
