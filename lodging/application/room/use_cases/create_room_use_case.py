"""Use case for creating homestay rooms."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.common.pricing import DEFAULT_CURRENCY, PriceInput, to_money
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.application.room.protocols.room_repository import RoomRepositoryProtocol
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.common.exceptions import InvalidOperationError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
)

logger = structlog.get_logger(__name__)


class CreateRoomUseCase:
    """Use case for adding a sellable room to a homestay."""

    def __init__(
        self,
        room_repository: RoomRepositoryProtocol,
        accommodation_repository: AccommodationRepositoryProtocol,
        unit_of_work: UnitOfWork,
        id_generator: IdGenerator = default_id_generator,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.room_repository = room_repository
        self.accommodation_repository = accommodation_repository
        self.unit_of_work = unit_of_work
        self.id_generator = id_generator
        self.default_currency = default_currency

    def create_room(
        self,
        accommodation_id: AccommodationId,
        name: str,
        category: RoomCategory | str,
        area: float,
        guest_capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType | str,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: int = 1,
        base_price: PriceInput | None = None,
    ) -> Room:
        """
        Create an active homestay room.

        Args:
            accommodation_id: Homestay the room belongs to
            name: Display name
            category: Room category
            area: Floor area in square meters
            guest_capacity: Adults and children it sleeps
            bed_count: Number of beds
            bed_type: Bed configuration
            description: Free text
            amenities: Amenity labels
            images: 2-10 gallery images
            inventory: Number of identical units
            base_price: Optional nightly price; a bare amount uses the default currency

        Returns:
            Created room

        Raises:
            AccommodationNotFoundError: If the accommodation does not exist
            InvalidOperationError: If the accommodation is not a homestay
            InvalidInputError: If any attribute breaks a room rule
        """
        with self.unit_of_work:
            accommodation = self.accommodation_repository.find_by_id(accommodation_id)
            if not accommodation:
                raise AccommodationNotFoundError(accommodation_id)
            if not accommodation.is_homestay():
                raise InvalidOperationError(
                    "Standalone rooms can only be added to homestays",
                    operation="create_room",
                    reason=f"accommodation type is {accommodation.type.value}",
                )

            room = Room.create(
                accommodation_id=accommodation_id,
                name=name,
                category=RoomCategory.parse(category, field="category"),
                area=area,
                guest_capacity=guest_capacity,
                bed_count=bed_count,
                bed_type=BedType.parse(bed_type, field="bed_type"),
                description=description,
                amenities=amenities,
                images=images,
                inventory=RoomInventory(inventory),
                base_price=(
                    to_money(base_price, self.default_currency)
                    if base_price is not None
                    else None
                ),
                id_generator=self.id_generator,
            )
            room = self.room_repository.save(room)
            self.unit_of_work.track(room)
            self.unit_of_work.commit()

        logger.info(
            "room_created",
            room_id=str(room.id),
            accommodation_id=str(accommodation_id),
            inventory=inventory,
        )
        return room
