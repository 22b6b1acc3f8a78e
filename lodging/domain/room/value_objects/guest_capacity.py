"""Guest capacity value object."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GuestCapacity(ValueObject):
    """How many adults and children a room sleeps."""

    max_adults: int
    max_children: int = 0

    def __post_init__(self) -> None:
        if not _is_int(self.max_adults) or self.max_adults < 1:
            raise InvalidInputError(
                "Room must accommodate at least one adult",
                field="max_adults",
                value=self.max_adults,
            )
        if not _is_int(self.max_children) or self.max_children < 0:
            raise InvalidInputError(
                "Children capacity must be zero or a positive integer",
                field="max_children",
                value=self.max_children,
            )

    @property
    def total_capacity(self) -> int:
        return self.max_adults + self.max_children

    def to_primitive(self) -> dict[str, int]:
        return {"max_adults": self.max_adults, "max_children": self.max_children}
