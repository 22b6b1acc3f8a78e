"""Port answering booking questions owned by the reservation system."""

from typing import Protocol

from lodging.domain.common.value_objects import AccommodationId


class BookingPolicyPort(Protocol):
    def has_upcoming_bookings(self, accommodation_id: AccommodationId, within_days: int) -> bool:
        """
        Check whether guests are booked at the accommodation soon.

        Args:
            accommodation_id: Accommodation about to be deleted
            within_days: Lookahead window in days from today

        Returns:
            True if at least one booking starts within the window
        """
        ...
