"""Location value object (GPS coordinates)."""

import math
from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Location(ValueObject):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not _is_number(self.latitude) or not -90 <= self.latitude <= 90:
            raise InvalidInputError(
                "Latitude must be between -90 and 90", field="latitude", value=self.latitude
            )
        if not _is_number(self.longitude) or not -180 <= self.longitude <= 180:
            raise InvalidInputError(
                "Longitude must be between -180 and 180", field="longitude", value=self.longitude
            )
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))


def _is_number(value: object) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and not math.isnan(value)
    )
