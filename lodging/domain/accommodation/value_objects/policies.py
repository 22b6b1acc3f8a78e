"""House policies value object."""

import re
from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


@dataclass(frozen=True)
class Policies(ValueObject):
    """Check-in/out times (HH:MM, 24h) and house rules."""

    check_in_time: str
    check_out_time: str
    children_allowed: bool = False
    pets_allowed: bool = False
    smoking_allowed: bool = False

    def __post_init__(self) -> None:
        for name in ("check_in_time", "check_out_time"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
                raise InvalidInputError(f"{name} must use HH:MM format", field=name, value=value)
