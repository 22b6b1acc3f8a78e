"""Port answering authorization questions owned by the identity system."""

from typing import Protocol

from lodging.domain.common.value_objects import UserId


class UserAuthorizationPort(Protocol):
    def is_super_admin(self, user_id: UserId) -> bool:
        """
        Check whether a user holds the super admin capability.

        Args:
            user_id: The acting user

        Returns:
            True if the user may act on any accommodation
        """
        ...
