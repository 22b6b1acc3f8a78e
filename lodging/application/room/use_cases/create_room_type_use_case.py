"""Use case for creating hotel room types."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.common.pricing import DEFAULT_CURRENCY, PriceInput, to_money
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.application.room.protocols.room_type_repository import RoomTypeRepositoryProtocol
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.common.exceptions import InvalidOperationError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
)

logger = structlog.get_logger(__name__)


class CreateRoomTypeUseCase:
    """Use case for adding a room category to a hotel."""

    def __init__(
        self,
        room_type_repository: RoomTypeRepositoryProtocol,
        accommodation_repository: AccommodationRepositoryProtocol,
        unit_of_work: UnitOfWork,
        id_generator: IdGenerator = default_id_generator,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.room_type_repository = room_type_repository
        self.accommodation_repository = accommodation_repository
        self.unit_of_work = unit_of_work
        self.id_generator = id_generator
        self.default_currency = default_currency

    def create_room_type(
        self,
        hotel_id: AccommodationId,
        name: str,
        category: RoomCategory | str,
        area: float,
        capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType | str,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: int,
        base_price: PriceInput,
        view_direction: str | None = None,
    ) -> RoomType:
        """
        Create an active room type with no hotel rooms yet.

        A bare amount for base_price is read in the configured default currency.

        Raises:
            AccommodationNotFoundError: If the hotel does not exist
            InvalidOperationError: If the accommodation is not a hotel
            InvalidInputError: If any attribute breaks a room type rule
        """
        with self.unit_of_work:
            hotel = self.accommodation_repository.find_by_id(hotel_id)
            if not hotel:
                raise AccommodationNotFoundError(hotel_id)
            if not hotel.is_hotel():
                raise InvalidOperationError(
                    "Room types can only be added to hotels",
                    operation="create_room_type",
                    reason=f"accommodation type is {hotel.type.value}",
                )

            room_type = RoomType.create(
                hotel_id=hotel_id,
                name=name,
                category=RoomCategory.parse(category, field="category"),
                area=area,
                capacity=capacity,
                bed_count=bed_count,
                bed_type=BedType.parse(bed_type, field="bed_type"),
                description=description,
                amenities=amenities,
                images=images,
                inventory=RoomInventory(inventory),
                base_price=to_money(base_price, self.default_currency),
                view_direction=view_direction,
                id_generator=self.id_generator,
            )
            room_type = self.room_type_repository.save(room_type)
            self.unit_of_work.track(room_type)
            self.unit_of_work.commit()

        logger.info(
            "room_type_created",
            room_type_id=str(room_type.id),
            hotel_id=str(hotel_id),
            inventory=inventory,
        )
        return room_type
