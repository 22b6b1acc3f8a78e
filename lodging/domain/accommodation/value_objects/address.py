"""Address value object."""

from dataclasses import dataclass, fields

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Address(ValueObject):
    """Postal address of an accommodation. Every component is required."""

    street: str
    ward: str
    district: str
    province: str
    country: str

    def __post_init__(self) -> None:
        for component in fields(self):
            raw = getattr(self, component.name)
            if not isinstance(raw, str) or not raw.strip():
                raise InvalidInputError(
                    f"Address {component.name} is required", field=component.name, value=raw
                )
            object.__setattr__(self, component.name, raw.strip())

    @property
    def full_address(self) -> str:
        """Single-line rendering, most specific component first."""
        return f"{self.street}, {self.ward}, {self.district}, {self.province}, {self.country}"
