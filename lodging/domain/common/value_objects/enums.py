"""Validating base for enum-typed domain values."""

from enum import StrEnum
from typing import Self

from ..exceptions import InvalidInputError


class DomainEnum(StrEnum):
    """
    String enum whose parsing failures surface as InvalidInputError.

    Persistence and request layers hand raw strings to `parse`; an unknown
    value never leaks out as a bare ValueError.
    """

    @classmethod
    def parse(cls, value: "str | Self", field: str | None = None) -> Self:
        """Parse a raw value into this enum."""
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidInputError(
                f"Unsupported {cls.__name__} '{value}'. Expected one of: {allowed}",
                field=field,
                value=value,
            ) from exc
