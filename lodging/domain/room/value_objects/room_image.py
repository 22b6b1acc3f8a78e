"""Room gallery image value object."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject

from .enums import RoomImageType


@dataclass(frozen=True)
class RoomImage(ValueObject):
    """
    One picture in a room gallery.

    URL is trimmed; order is the zero-based position hint used by galleries.
    """

    url: str
    type: RoomImageType = RoomImageType.INTERIOR
    order: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidInputError("Room images require a valid URL", field="url", value=self.url)
        if isinstance(self.order, bool) or not isinstance(self.order, int) or self.order < 0:
            raise InvalidInputError(
                "Image order must be a non-negative integer", field="order", value=self.order
            )
        object.__setattr__(self, "url", self.url.strip())
        object.__setattr__(self, "type", RoomImageType.parse(self.type, field="type"))

    def to_primitive(self) -> dict[str, object]:
        return {"url": self.url, "type": self.type.value, "order": self.order}

    @classmethod
    def from_primitive(cls, data: dict[str, object]) -> "RoomImage":
        """Build an image from its stored JSON shape."""
        return cls(
            url=str(data["url"]),
            type=RoomImageType.parse(str(data.get("type", RoomImageType.INTERIOR.value))),
            order=int(data.get("order", 0)),  # type: ignore[call-overload]
        )
