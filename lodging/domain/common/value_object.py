"""
Base class for Value Objects.

Value objects are frozen dataclasses compared by their fields. They validate
in ``__post_init__`` and raise InvalidInputError naming the offending field.

Example:
    @dataclass(frozen=True)
    class RoomNumber(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if not self.value.strip():
                raise InvalidInputError("Room number cannot be empty", field="room_number")
"""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum


def _primitive(value: object) -> object:
    if isinstance(value, ValueObject):
        return value.to_primitive()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, list | tuple):
        return [_primitive(item) for item in value]
    return value


class ValueObject:
    """
    Base for immutable domain values.

    Subclasses are decorated with ``@dataclass(frozen=True)``, which supplies
    equality, hashing and repr from the declared fields.
    """

    def to_primitive(self) -> object:
        """
        Convert to JSON-friendly Python types.

        Single-field values collapse to that field; others become a dict
        keyed by field name. Enums, Decimals and nested value objects are
        converted recursively.
        """
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} must be a dataclass")
        values = {f.name: _primitive(getattr(self, f.name)) for f in fields(self)}
        if len(values) == 1:
            return next(iter(values.values()))
        return values
