"""Use case for deleting an accommodation."""

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.accommodation.protocols.booking_policy import BookingPolicyPort
from lodging.application.accommodation.protocols.user_authorization import UserAuthorizationPort
from lodging.application.accommodation.use_cases.access import (
    ensure_owner_or_super_admin,
    ensure_super_admin,
)
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.accommodation.services import AccommodationLifecycleService
from lodging.domain.common.value_objects import AccommodationId, UserId

logger = structlog.get_logger(__name__)

DEFAULT_LOOKAHEAD_DAYS = 30


class DeleteAccommodationUseCase:
    """Use case for removing an accommodation after ownership and booking checks."""

    def __init__(
        self,
        accommodation_repository: AccommodationRepositoryProtocol,
        user_authorization: UserAuthorizationPort,
        booking_policy: BookingPolicyPort,
        lifecycle_service: AccommodationLifecycleService,
        unit_of_work: UnitOfWork,
        lookahead_days: int = DEFAULT_LOOKAHEAD_DAYS,
    ) -> None:
        self.accommodation_repository = accommodation_repository
        self.user_authorization = user_authorization
        self.booking_policy = booking_policy
        self.lifecycle_service = lifecycle_service
        self.unit_of_work = unit_of_work
        self.lookahead_days = lookahead_days

    def delete_accommodation(
        self,
        accommodation_id: AccommodationId,
        actor_id: UserId,
        force: bool = False,
    ) -> None:
        """
        Delete an accommodation.

        Args:
            accommodation_id: Accommodation to remove
            actor_id: Acting user, owner or super admin
            force: Skip the rejected/suspended status rule; super admins only

        Raises:
            AccommodationNotFoundError: If the accommodation does not exist
            AuthorizationError: If the actor may not delete it, or forces without being a
                super admin
            InvalidStateError: If the status is neither rejected nor suspended
            InvalidOperationError: If bookings start within the lookahead window
        """
        with self.unit_of_work:
            accommodation = self.accommodation_repository.lock_by_id(accommodation_id)
            if not accommodation:
                raise AccommodationNotFoundError(accommodation_id)

            ensure_owner_or_super_admin(
                accommodation, actor_id, self.user_authorization, action="delete"
            )
            if force:
                ensure_super_admin(actor_id, self.user_authorization, action="force delete")

            has_upcoming_bookings = self.booking_policy.has_upcoming_bookings(
                accommodation_id, self.lookahead_days
            )
            self.lifecycle_service.ensure_deletable(
                accommodation, has_upcoming_bookings=has_upcoming_bookings, force=force
            )

            self.accommodation_repository.delete(accommodation_id)
            self.unit_of_work.commit()

        logger.info(
            "accommodation_deleted",
            accommodation_id=str(accommodation_id),
            actor_id=str(actor_id),
            forced=force,
        )
