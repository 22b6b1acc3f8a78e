"""Ownership checks shared by accommodation-scoped use cases."""

from lodging.application.accommodation.protocols.user_authorization import UserAuthorizationPort
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.common.exceptions import AuthorizationError
from lodging.domain.common.value_objects import UserId


def ensure_owner_or_super_admin(
    accommodation: Accommodation,
    actor_id: UserId,
    user_authorization: UserAuthorizationPort,
    action: str,
) -> None:
    """
    Raises:
        AuthorizationError: If the actor neither owns the accommodation nor is a super admin
    """
    if accommodation.is_owned_by(actor_id):
        return
    if user_authorization.is_super_admin(actor_id):
        return
    raise AuthorizationError(f"You do not have permission to {action} this accommodation")


def ensure_super_admin(
    actor_id: UserId, user_authorization: UserAuthorizationPort, action: str
) -> None:
    """
    Raises:
        AuthorizationError: If the actor is not a super admin
    """
    if not user_authorization.is_super_admin(actor_id):
        raise AuthorizationError(f"Only super admins can {action} accommodations")
