"""Attribute rules shared by homestay rooms and hotel room types."""

from lodging.domain.common.exceptions import InvalidInputError


def ensure_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidInputError("Room name cannot be empty", field="name", value=name)
    return name.strip()


def ensure_area(area: float) -> float:
    if isinstance(area, bool) or not isinstance(area, int | float) or area <= 0:
        raise InvalidInputError("Room area must be positive", field="area", value=area)
    return float(area)


def ensure_bed_count(bed_count: int) -> int:
    if isinstance(bed_count, bool) or not isinstance(bed_count, int) or bed_count < 1:
        raise InvalidInputError(
            "Room must have at least one bed", field="bed_count", value=bed_count
        )
    return bed_count


def ensure_description(description: str) -> str:
    if not isinstance(description, str) or not description.strip():
        raise InvalidInputError("Description cannot be empty", field="description")
    return description.strip()


def normalize_amenities(amenities: list[str]) -> list[str]:
    """Trim and de-duplicate amenity labels, keeping first-seen order."""
    seen: dict[str, None] = {}
    for item in amenities:
        label = item.strip()
        if label:
            seen.setdefault(label, None)
    return list(seen)
