"""Protocol for the Accommodation repository."""

from typing import Protocol

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import AccommodationStatus, AccommodationType
from lodging.domain.common.value_objects import AccommodationId, UserId


class AccommodationRepositoryProtocol(Protocol):
    """Protocol for Accommodation persistence and locking."""

    def save(self, accommodation: Accommodation) -> Accommodation:
        """
        Save an accommodation (create or update).

        Args:
            accommodation: The aggregate to persist

        Returns:
            The saved aggregate
        """
        ...

    def find_by_id(self, accommodation_id: AccommodationId) -> Accommodation | None:
        """
        Find an accommodation by ID without locking.

        Args:
            accommodation_id: The accommodation ID

        Returns:
            Accommodation if found, None otherwise
        """
        ...

    def lock_by_id(self, accommodation_id: AccommodationId) -> Accommodation | None:
        """
        Find an accommodation and hold a write lock until the transaction ends.

        Required before any status transition so two concurrent transitions
        cannot both start from the same state.

        Args:
            accommodation_id: The accommodation ID

        Returns:
            Accommodation if found, None otherwise
        """
        ...

    def find_by_owner_id(
        self, owner_id: UserId, limit: int | None = None, offset: int = 0
    ) -> list[Accommodation]:
        """
        List accommodations owned by a user, newest first.

        Args:
            owner_id: The owner's user ID
            limit: Maximum number of results, None for all
            offset: Number of results to skip
        """
        ...

    def find_by_type(
        self, accommodation_type: AccommodationType, limit: int | None = None, offset: int = 0
    ) -> list[Accommodation]:
        """List accommodations of one type, newest first."""
        ...

    def find_all(
        self,
        limit: int | None = None,
        offset: int = 0,
        status: AccommodationStatus | None = None,
    ) -> list[Accommodation]:
        """List all accommodations, optionally filtered by status, newest first."""
        ...

    def count(
        self,
        owner_id: UserId | None = None,
        accommodation_type: AccommodationType | None = None,
        status: AccommodationStatus | None = None,
    ) -> int:
        """
        Count accommodations matching every given filter.

        Returns:
            Number of matching accommodations
        """
        ...

    def delete(self, accommodation_id: AccommodationId) -> bool:
        """
        Delete an accommodation.

        Returns:
            True if deleted, False if not found
        """
        ...
