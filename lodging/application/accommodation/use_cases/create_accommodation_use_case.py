"""Use case for registering a new accommodation."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import (
    AccommodationType,
    Address,
    CancellationPolicy,
    HotelProfile,
    Location,
    Policies,
)
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)


class CreateAccommodationUseCase:
    """Use case for creating accommodations awaiting approval."""

    def __init__(
        self,
        accommodation_repository: AccommodationRepositoryProtocol,
        unit_of_work: UnitOfWork,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.accommodation_repository = accommodation_repository
        self.unit_of_work = unit_of_work
        self.id_generator = id_generator

    def create_accommodation(
        self,
        owner_id: UserId,
        accommodation_type: AccommodationType | str,
        name: str,
        address: Address,
        location: Location,
        description: str,
        images: list[str],
        amenities: list[str],
        policies: Policies,
        cancellation_policy: CancellationPolicy,
        hotel_profile: HotelProfile | None = None,
    ) -> Accommodation:
        """
        Create a new PENDING accommodation.

        Args:
            owner_id: User registering the property
            accommodation_type: "homestay" or "hotel"
            name: Display name
            address: Postal address
            location: Coordinates
            description: Free text
            images: Gallery URLs (3-20 for homestays, 5-50 for hotels)
            amenities: Amenity labels
            policies: House rules
            cancellation_policy: Refund terms
            hotel_profile: Hotel-only facts, rejected for homestays

        Returns:
            Created accommodation

        Raises:
            InvalidInputError: If any attribute breaks an accommodation rule
        """
        with self.unit_of_work:
            accommodation = Accommodation.create(
                type=AccommodationType.parse(accommodation_type, field="type"),
                name=name,
                owner_id=owner_id,
                address=address,
                location=location,
                description=description,
                images=images,
                amenities=amenities,
                policies=policies,
                cancellation_policy=cancellation_policy,
                hotel_profile=hotel_profile,
                id_generator=self.id_generator,
            )
            accommodation = self.accommodation_repository.save(accommodation)
            self.unit_of_work.track(accommodation)
            self.unit_of_work.commit()

        logger.info(
            "accommodation_created",
            accommodation_id=str(accommodation.id),
            owner_id=str(owner_id),
            type=accommodation.type.value,
        )
        return accommodation
