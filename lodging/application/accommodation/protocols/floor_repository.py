"""Protocol for the Floor repository."""

from typing import Protocol

from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.common.value_objects import AccommodationId, FloorId


class FloorRepositoryProtocol(Protocol):
    """Protocol for Floor persistence."""

    def save(self, floor: Floor) -> Floor:
        """Save a floor (create or update)."""
        ...

    def find_by_id(self, floor_id: FloorId) -> Floor | None:
        """
        Find a floor by ID.

        Returns:
            Floor if found, None otherwise
        """
        ...

    def find_by_hotel_id(self, hotel_id: AccommodationId) -> list[Floor]:
        """
        Get all floors of a hotel.

        Returns:
            Floors ordered by floor number
        """
        ...

    def delete(self, floor_id: FloorId) -> bool:
        """
        Delete a floor.

        Returns:
            True if deleted, False if not found
        """
        ...
