"""Room inventory value object."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class RoomInventory(ValueObject):
    """
    Number of identical sellable units behind a listing.

    For homestay rooms these are fungible units; for hotel room types it is
    the cap on physical hotel rooms.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 1:
            raise InvalidInputError(
                "Inventory must be a positive integer", field="inventory", value=self.value
            )

    def __int__(self) -> int:
        return self.value

    @staticmethod
    def _ensure_step(by: int) -> None:
        if isinstance(by, bool) or not isinstance(by, int) or by < 1:
            raise InvalidInputError(
                "Inventory adjustment must be a positive integer", field="by", value=by
            )

    def increase(self, by: int = 1) -> "RoomInventory":
        self._ensure_step(by)
        return RoomInventory(self.value + by)

    def decrease(self, by: int = 1) -> "RoomInventory":
        """
        Raises:
            InvalidInputError: If the result would drop below one unit
        """
        self._ensure_step(by)
        if self.value - by < 1:
            raise InvalidInputError(
                "Inventory cannot go below 1 unit", field="inventory", value=self.value - by
            )
        return RoomInventory(self.value - by)
