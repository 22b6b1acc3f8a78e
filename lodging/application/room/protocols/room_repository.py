"""Protocol for the homestay Room repository."""

from typing import Protocol

from lodging.domain.common.value_objects import AccommodationId, RoomId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.value_objects import RoomStatus


class RoomRepositoryProtocol(Protocol):
    """Protocol for Room persistence and locking."""

    def save(self, room: Room) -> Room:
        """Save a room (create or update)."""
        ...

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """
        Find a room by ID without locking.

        Returns:
            Room if found, None otherwise
        """
        ...

    def lock_by_id(self, room_id: RoomId) -> Room | None:
        """
        Find a room and hold a write lock until the transaction ends.

        Required before inventory adjustments.
        """
        ...

    def find_by_accommodation_id(self, accommodation_id: AccommodationId) -> list[Room]:
        """Get all rooms of a homestay, oldest first."""
        ...

    def find_many(
        self,
        limit: int,
        offset: int,
        accommodation_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> list[Room]:
        """
        List rooms matching the filters, oldest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
            accommodation_id: Restrict to one homestay
            status: Restrict to one status
        """
        ...

    def count(
        self,
        accommodation_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> int:
        """Count rooms matching the filters."""
        ...
