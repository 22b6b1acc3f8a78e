"""Use case for managing the floors of a hotel."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.accommodation.protocols.floor_repository import FloorRepositoryProtocol
from lodging.application.accommodation.protocols.user_authorization import UserAuthorizationPort
from lodging.application.accommodation.use_cases.access import ensure_owner_or_super_admin
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError, FloorNotFoundError
from lodging.domain.accommodation.services import FloorManagementService
from lodging.domain.accommodation.value_objects import FloorType
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId, FloorId, UserId

logger = structlog.get_logger(__name__)


class FloorManagementUseCase:
    """Create, edit, block and remove hotel floors on behalf of the hotel owner."""

    def __init__(
        self,
        floor_repository: FloorRepositoryProtocol,
        accommodation_repository: AccommodationRepositoryProtocol,
        user_authorization: UserAuthorizationPort,
        floor_service: FloorManagementService,
        unit_of_work: UnitOfWork,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.floor_repository = floor_repository
        self.accommodation_repository = accommodation_repository
        self.user_authorization = user_authorization
        self.floor_service = floor_service
        self.unit_of_work = unit_of_work
        self.id_generator = id_generator

    def _load_hotel(self, hotel_id: AccommodationId, actor_id: UserId) -> Accommodation:
        hotel = self.accommodation_repository.find_by_id(hotel_id)
        if not hotel:
            raise AccommodationNotFoundError(hotel_id)
        ensure_owner_or_super_admin(hotel, actor_id, self.user_authorization, action="manage")
        return hotel

    def _load_floor(self, floor_id: FloorId, actor_id: UserId) -> Floor:
        floor = self.floor_repository.find_by_id(floor_id)
        if not floor:
            raise FloorNotFoundError(floor_id)
        self._load_hotel(floor.hotel_id, actor_id)
        return floor

    def create_floor(
        self,
        hotel_id: AccommodationId,
        actor_id: UserId,
        floor_number: int,
        name: str,
        floor_type: FloorType | str,
        description: str | None = None,
        amenities: list[str] | None = None,
    ) -> Floor:
        """
        Add a floor to a hotel.

        Raises:
            AccommodationNotFoundError: If the hotel does not exist
            AuthorizationError: If the actor is neither owner nor super admin
            InvalidOperationError: If the accommodation is not a hotel
            InvalidInputError: If the floor attributes are invalid
        """
        with self.unit_of_work:
            hotel = self._load_hotel(hotel_id, actor_id)
            self.floor_service.ensure_can_have_floors(hotel)

            floor = Floor.create(
                hotel_id=hotel_id,
                floor_number=floor_number,
                name=name,
                floor_type=FloorType.parse(floor_type, field="floor_type"),
                description=description,
                amenities=amenities,
                id_generator=self.id_generator,
            )
            floor = self.floor_repository.save(floor)
            self.unit_of_work.commit()

        logger.info(
            "floor_created",
            floor_id=str(floor.id),
            hotel_id=str(hotel_id),
            floor_number=floor_number,
        )
        return floor

    def update_floor(
        self,
        floor_id: FloorId,
        actor_id: UserId,
        name: str | None = None,
        description: str | None = None,
        amenities: list[str] | None = None,
    ) -> Floor:
        """Edit floor attributes; arguments left as None are kept."""
        with self.unit_of_work:
            floor = self._load_floor(floor_id, actor_id)
            if name is not None:
                floor.update_name(name)
            if description is not None:
                floor.update_description(description)
            if amenities is not None:
                floor.update_amenities(amenities)
            floor = self.floor_repository.save(floor)
            self.unit_of_work.commit()

        logger.info("floor_updated", floor_id=str(floor_id))
        return floor

    def block_floor(self, floor_id: FloorId, actor_id: UserId, close: bool = False) -> Floor:
        """Put a floor under maintenance, or close it when `close` is set."""
        with self.unit_of_work:
            floor = self._load_floor(floor_id, actor_id)
            self.floor_service.block_floor(floor, close=close)
            floor = self.floor_repository.save(floor)
            self.unit_of_work.commit()

        logger.info("floor_blocked", floor_id=str(floor_id), status=floor.status.value)
        return floor

    def activate_floor(self, floor_id: FloorId, actor_id: UserId) -> Floor:
        with self.unit_of_work:
            floor = self._load_floor(floor_id, actor_id)
            self.floor_service.activate_floor(floor)
            floor = self.floor_repository.save(floor)
            self.unit_of_work.commit()

        logger.info("floor_activated", floor_id=str(floor_id))
        return floor

    def delete_floor(self, floor_id: FloorId, actor_id: UserId) -> None:
        """
        Raises:
            FloorNotFoundError: If the floor does not exist
            AuthorizationError: If the actor is neither owner nor super admin
        """
        with self.unit_of_work:
            self._load_floor(floor_id, actor_id)
            self.floor_repository.delete(floor_id)
            self.unit_of_work.commit()

        logger.info("floor_deleted", floor_id=str(floor_id))

    def list_floors(self, hotel_id: AccommodationId) -> list[Floor]:
        """Floors of a hotel ordered by floor number."""
        return self.floor_repository.find_by_hotel_id(hotel_id)
