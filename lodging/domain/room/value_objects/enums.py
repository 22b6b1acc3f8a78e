"""Enumerations for the room module."""

from lodging.domain.common.value_objects.enums import DomainEnum


class RoomCategory(DomainEnum):
    """Room categories shared by homestay rooms and hotel room types."""

    SINGLE = "single"
    DOUBLE = "double"
    TWIN = "twin"
    FAMILY = "family"
    SUITE = "suite"
    PENTHOUSE = "penthouse"
    DORMITORY = "dormitory"
    VILLA = "villa"


class BedType(DomainEnum):
    SINGLE = "single"
    DOUBLE = "double"
    QUEEN = "queen"
    KING = "king"
    SOFA_BED = "sofa_bed"
    BUNK = "bunk"


class RoomStatus(DomainEnum):
    """Listing status of a homestay room or hotel room type."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    def is_active(self) -> bool:
        return self is RoomStatus.ACTIVE


class HotelRoomStatus(DomainEnum):
    """Operational state of a physical hotel room."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    DIRTY = "dirty"
    CLEAN = "clean"
    MAINTENANCE = "maintenance"
    OUT_OF_ORDER = "out_of_order"

    def is_in_service(self) -> bool:
        return self in (HotelRoomStatus.AVAILABLE, HotelRoomStatus.CLEAN)

    def is_blocked(self) -> bool:
        return self in (HotelRoomStatus.MAINTENANCE, HotelRoomStatus.OUT_OF_ORDER)

    def is_releasable(self) -> bool:
        return self in (HotelRoomStatus.OCCUPIED, HotelRoomStatus.MAINTENANCE)


class RoomImageType(DomainEnum):
    INTERIOR = "interior"
    BATHROOM = "bathroom"
    VIEW = "view"
    AMENITY = "amenity"
