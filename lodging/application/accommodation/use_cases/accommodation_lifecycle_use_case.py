"""Use case for approval workflow transitions."""

from collections.abc import Callable

import structlog

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.accommodation.protocols.user_authorization import UserAuthorizationPort
from lodging.application.accommodation.use_cases.access import (
    ensure_owner_or_super_admin,
    ensure_super_admin,
)
from lodging.application.common.unit_of_work import UnitOfWork
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.accommodation.services import AccommodationLifecycleService
from lodging.domain.common.value_objects import AccommodationId, UserId

logger = structlog.get_logger(__name__)


class AccommodationLifecycleUseCase:
    """
    Use case for approve/reject/activate/suspend.

    Every transition loads the accommodation with lock_by_id so two
    concurrent transitions cannot both start from the same status.
    Approve, reject and suspend are reserved to super admins; owners may
    activate their own approved accommodation.
    """

    def __init__(
        self,
        accommodation_repository: AccommodationRepositoryProtocol,
        user_authorization: UserAuthorizationPort,
        lifecycle_service: AccommodationLifecycleService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.accommodation_repository = accommodation_repository
        self.user_authorization = user_authorization
        self.lifecycle_service = lifecycle_service
        self.unit_of_work = unit_of_work

    def _transition(
        self,
        accommodation_id: AccommodationId,
        apply: Callable[[Accommodation], None],
    ) -> Accommodation:
        with self.unit_of_work:
            accommodation = self.accommodation_repository.lock_by_id(accommodation_id)
            if not accommodation:
                raise AccommodationNotFoundError(accommodation_id)
            apply(accommodation)
            accommodation = self.accommodation_repository.save(accommodation)
            self.unit_of_work.track(accommodation)
            self.unit_of_work.commit()
        return accommodation

    def approve_accommodation(
        self, accommodation_id: AccommodationId, admin_id: UserId
    ) -> Accommodation:
        """
        Approve a pending accommodation.

        Raises:
            AuthorizationError: If the actor is not a super admin
            AccommodationNotFoundError: If the accommodation does not exist
            InvalidStateError: If the accommodation is not pending
        """
        ensure_super_admin(admin_id, self.user_authorization, action="approve")
        accommodation = self._transition(
            accommodation_id, lambda a: self.lifecycle_service.approve(a, admin_id)
        )
        logger.info(
            "accommodation_approved",
            accommodation_id=str(accommodation_id),
            approved_by=str(admin_id),
        )
        return accommodation

    def reject_accommodation(
        self, accommodation_id: AccommodationId, admin_id: UserId
    ) -> Accommodation:
        """Reject a pending accommodation. Same errors as approve."""
        ensure_super_admin(admin_id, self.user_authorization, action="reject")
        accommodation = self._transition(
            accommodation_id, lambda a: self.lifecycle_service.reject(a, admin_id)
        )
        logger.info(
            "accommodation_rejected",
            accommodation_id=str(accommodation_id),
            rejected_by=str(admin_id),
        )
        return accommodation

    def activate_accommodation(
        self, accommodation_id: AccommodationId, actor_id: UserId
    ) -> Accommodation:
        """
        Open an approved accommodation for business.

        Raises:
            AuthorizationError: If the actor is neither owner nor super admin
            AccommodationNotFoundError: If the accommodation does not exist
            InvalidStateError: If the accommodation is not approved
        """

        def activate(accommodation: Accommodation) -> None:
            ensure_owner_or_super_admin(
                accommodation, actor_id, self.user_authorization, action="activate"
            )
            self.lifecycle_service.activate(accommodation)

        accommodation = self._transition(accommodation_id, activate)
        logger.info(
            "accommodation_activated",
            accommodation_id=str(accommodation_id),
            actor_id=str(actor_id),
        )
        return accommodation

    def suspend_accommodation(
        self, accommodation_id: AccommodationId, admin_id: UserId
    ) -> Accommodation:
        """Suspend an active accommodation. Super admins only."""
        ensure_super_admin(admin_id, self.user_authorization, action="suspend")
        accommodation = self._transition(accommodation_id, self.lifecycle_service.suspend)
        logger.info(
            "accommodation_suspended",
            accommodation_id=str(accommodation_id),
            suspended_by=str(admin_id),
        )
        return accommodation
