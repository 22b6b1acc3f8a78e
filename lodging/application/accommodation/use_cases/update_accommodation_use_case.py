"""Use case for editing accommodation attributes."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.accommodation.protocols.user_authorization import UserAuthorizationPort
from lodging.application.accommodation.use_cases.access import ensure_owner_or_super_admin
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.accommodation.value_objects import (
    Address,
    CancellationPolicy,
    Location,
    Policies,
)
from lodging.domain.common.value_objects import AccommodationId, UserId

logger = structlog.get_logger(__name__)


class UpdateAccommodationUseCase:
    """
    Use case for attribute updates.

    Loads without a lock. Only the columns an edit changes are written, so a
    concurrent edit of the same column is last-write-wins while status changes
    committed meanwhile survive.
    """

    def __init__(
        self,
        accommodation_repository: AccommodationRepositoryProtocol,
        user_authorization: UserAuthorizationPort,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.accommodation_repository = accommodation_repository
        self.user_authorization = user_authorization
        self.unit_of_work = unit_of_work

    def update_accommodation(
        self,
        accommodation_id: AccommodationId,
        actor_id: UserId,
        name: str | None = None,
        description: str | None = None,
        images: list[str] | None = None,
        amenities: list[str] | None = None,
        address: Address | None = None,
        location: Location | None = None,
        policies: Policies | None = None,
        cancellation_policy: CancellationPolicy | None = None,
        star_rating: int | None = None,
    ) -> Accommodation:
        """
        Apply the given changes; arguments left as None are kept.

        Raises:
            AccommodationNotFoundError: If the accommodation does not exist
            AuthorizationError: If the actor is neither owner nor super admin
            InvalidInputError: If a change breaks an accommodation rule
        """
        with self.unit_of_work:
            accommodation = self.accommodation_repository.find_by_id(accommodation_id)
            if not accommodation:
                raise AccommodationNotFoundError(accommodation_id)

            ensure_owner_or_super_admin(
                accommodation, actor_id, self.user_authorization, action="update"
            )

            accommodation.update(
                name=name,
                description=description,
                images=images,
                amenities=amenities,
                address=address,
                location=location,
                policies=policies,
                cancellation_policy=cancellation_policy,
                star_rating=star_rating,
            )
            accommodation = self.accommodation_repository.save(accommodation)
            self.unit_of_work.track(accommodation)
            self.unit_of_work.commit()

        logger.info(
            "accommodation_updated",
            accommodation_id=str(accommodation_id),
            actor_id=str(actor_id),
        )
        return accommodation
