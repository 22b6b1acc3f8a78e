"""
Domain service for the accommodation approval and deletion workflow.

This is a pure domain service with no infrastructure dependencies. Answers
from external policy ports are passed in as plain values.
"""

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import AccommodationStatus
from lodging.domain.common.exceptions import InvalidOperationError, InvalidStateError
from lodging.domain.common.value_objects import UserId


class AccommodationLifecycleService:
    """Moves accommodations through their status workflow."""

    def approve(self, accommodation: Accommodation, approved_by: UserId) -> None:
        accommodation.approve(approved_by)

    def reject(self, accommodation: Accommodation, rejected_by: UserId) -> None:
        accommodation.reject(rejected_by)

    def activate(self, accommodation: Accommodation) -> None:
        accommodation.activate()

    def suspend(self, accommodation: Accommodation) -> None:
        accommodation.suspend()

    def ensure_deletable(
        self,
        accommodation: Accommodation,
        has_upcoming_bookings: bool,
        force: bool = False,
    ) -> None:
        """
        Verify an accommodation may be removed.

        Args:
            accommodation: Accommodation about to be deleted
            has_upcoming_bookings: Answer of the booking policy for the lookahead window
            force: Skip the status rule (upcoming bookings still block deletion)

        Raises:
            InvalidStateError: If the status is neither rejected nor suspended
            InvalidOperationError: If guests are booked within the lookahead window
        """
        if not force and not accommodation.can_be_deleted():
            raise InvalidStateError(
                "Only rejected or suspended accommodations can be deleted",
                current_state=accommodation.status.value,
                required_state=(
                    f"{AccommodationStatus.REJECTED.value}|{AccommodationStatus.SUSPENDED.value}"
                ),
                operation="delete",
            )
        if has_upcoming_bookings:
            raise InvalidOperationError(
                "Cannot delete accommodation with upcoming bookings",
                operation="delete",
                reason="upcoming_bookings",
            )
