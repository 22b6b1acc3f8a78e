"""Domain service enforcing which accommodations may define floors."""

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.common.exceptions import InvalidOperationError


class FloorManagementService:
    """
    Floors are a hotel concept; homestays are modelled without them.

    Floor itself holds only a reference to its hotel, so the cross-aggregate
    check lives here.
    """

    def can_have_floors(self, accommodation: Accommodation) -> bool:
        return accommodation.is_hotel()

    def ensure_can_have_floors(self, accommodation: Accommodation) -> None:
        """
        Raises:
            InvalidOperationError: If the accommodation is not a hotel
        """
        if not self.can_have_floors(accommodation):
            raise InvalidOperationError(
                "Only hotels can have floors",
                operation="create_floor",
                reason=f"accommodation type is {accommodation.type.value}",
            )

    def block_floor(self, floor: Floor, close: bool = False) -> None:
        """Put a floor under maintenance, or close it entirely when `close` is set."""
        if close:
            floor.close()
        else:
            floor.block_for_maintenance()

    def activate_floor(self, floor: Floor) -> None:
        floor.activate()
