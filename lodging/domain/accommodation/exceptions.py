"""Accommodation module domain exceptions."""

from lodging.domain.common.exceptions import EntityNotFoundError


class AccommodationNotFoundError(EntityNotFoundError):
    """Raised when an accommodation cannot be found."""

    def __init__(self, accommodation_id: object) -> None:
        super().__init__("Accommodation", accommodation_id)


class FloorNotFoundError(EntityNotFoundError):
    """Raised when a floor cannot be found."""

    def __init__(self, floor_id: object) -> None:
        super().__init__("Floor", floor_id)
