"""Enumerations for the accommodation module."""

from lodging.domain.common.value_objects.enums import DomainEnum


class AccommodationType(DomainEnum):
    HOMESTAY = "homestay"
    HOTEL = "hotel"


class AccommodationStatus(DomainEnum):
    """Approval and operating workflow of an accommodation."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    ACTIVE = "active"
    SUSPENDED = "suspended"

    def can_be_deleted(self) -> bool:
        return self in (AccommodationStatus.REJECTED, AccommodationStatus.SUSPENDED)


class CancellationPolicyType(DomainEnum):
    FLEXIBLE = "flexible"
    MODERATE = "moderate"
    STRICT = "strict"
    NON_REFUNDABLE = "non_refundable"


class FloorStatus(DomainEnum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    CLOSED = "closed"

    def is_blocked(self) -> bool:
        return self in (FloorStatus.MAINTENANCE, FloorStatus.CLOSED)


class FloorType(DomainEnum):
    ROOM_FLOOR = "room_floor"
    RESTAURANT_FLOOR = "restaurant_floor"
    SPA_FLOOR = "spa_floor"
    GYM_FLOOR = "gym_floor"
    POOL_FLOOR = "pool_floor"
    MEETING_FLOOR = "meeting_floor"
    BUSINESS_FLOOR = "business_floor"
    MIXED_FLOOR = "mixed_floor"
    LOBBY_FLOOR = "lobby_floor"

    def is_room_floor(self) -> bool:
        return self in (FloorType.ROOM_FLOOR, FloorType.MIXED_FLOOR)

    def is_service_floor(self) -> bool:
        return self in (
            FloorType.RESTAURANT_FLOOR,
            FloorType.SPA_FLOOR,
            FloorType.GYM_FLOOR,
            FloorType.POOL_FLOOR,
            FloorType.MEETING_FLOOR,
            FloorType.BUSINESS_FLOOR,
        )
