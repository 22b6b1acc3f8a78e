from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier (owners and approvers)."""


@dataclass(frozen=True)
class AccommodationId(EntityId):
    """Strongly-typed accommodation identifier."""


@dataclass(frozen=True)
class FloorId(EntityId):
    """Strongly-typed floor identifier."""


@dataclass(frozen=True)
class RoomId(EntityId):
    """Strongly-typed homestay room identifier."""


@dataclass(frozen=True)
class RoomTypeId(EntityId):
    """Strongly-typed hotel room type identifier."""


@dataclass(frozen=True)
class HotelRoomId(EntityId):
    """Strongly-typed physical hotel room identifier."""
