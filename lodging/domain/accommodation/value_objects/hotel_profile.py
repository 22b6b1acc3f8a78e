"""Hotel-only descriptive attributes of an accommodation."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject

MIN_STAR_RATING = 1
MAX_STAR_RATING = 5


@dataclass(frozen=True)
class HotelProfile(ValueObject):
    """
    Optional hotel facts: classification, size and contact channels.

    Every attribute is optional; whatever is present must be coherent.
    """

    star_rating: int | None = None
    total_floors: int | None = None
    total_rooms: int | None = None
    year_built: int | None = None
    year_renovated: int | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    website: str | None = None

    def __post_init__(self) -> None:
        if self.star_rating is not None and not (
            MIN_STAR_RATING <= self.star_rating <= MAX_STAR_RATING
        ):
            raise InvalidInputError(
                f"Star rating must be between {MIN_STAR_RATING} and {MAX_STAR_RATING}",
                field="star_rating",
                value=self.star_rating,
            )
        for name in ("total_floors", "total_rooms"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidInputError(f"{name} cannot be negative", field=name, value=value)
        if (
            self.year_built is not None
            and self.year_renovated is not None
            and self.year_renovated < self.year_built
        ):
            raise InvalidInputError(
                "Renovation year cannot precede construction year",
                field="year_renovated",
                value=self.year_renovated,
            )
        if self.contact_email is not None and "@" not in self.contact_email:
            raise InvalidInputError(
                "Invalid contact email", field="contact_email", value=self.contact_email
            )
