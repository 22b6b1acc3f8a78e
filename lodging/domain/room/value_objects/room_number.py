"""Room number value object."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject

MAX_ROOM_NUMBER_LENGTH = 32


@dataclass(frozen=True)
class RoomNumber(ValueObject):
    """
    Door label of a physical hotel room, e.g. "101" or "B-12".

    Stored trimmed; must fit the 32 character column.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidInputError(
                "Room number is required", field="room_number", value=self.value
            )
        trimmed = self.value.strip()
        if len(trimmed) > MAX_ROOM_NUMBER_LENGTH:
            raise InvalidInputError(
                f"Room number cannot exceed {MAX_ROOM_NUMBER_LENGTH} characters",
                field="room_number",
                value=self.value,
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
