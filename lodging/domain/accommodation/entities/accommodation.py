"""
Accommodation aggregate root.

Encapsulates the approval workflow and the physical/policy attributes of a
homestay or hotel.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from lodging.domain.accommodation.events import (
    AccommodationActivatedEvent,
    AccommodationApprovedEvent,
    AccommodationCreatedEvent,
    AccommodationRejectedEvent,
    AccommodationSuspendedEvent,
)
from lodging.domain.accommodation.value_objects import (
    AccommodationStatus,
    AccommodationType,
    Address,
    CancellationPolicy,
    HotelProfile,
    Location,
    Policies,
)
from lodging.domain.common.domain_event import DomainEvent, EventRecorder
from lodging.domain.common.entity import Entity
from lodging.domain.common.exceptions import InvalidInputError, InvalidStateError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId, UserId

# Inclusive (min, max) number of gallery images per property type
IMAGE_LIMITS: dict[AccommodationType, tuple[int, int]] = {
    AccommodationType.HOMESTAY: (3, 20),
    AccommodationType.HOTEL: (5, 50),
}


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(eq=False)
class Accommodation(Entity[AccommodationId]):
    """
    Accommodation aggregate root.

    Business Rules:
    - Homestays carry 3-20 images, hotels 5-50, on creation and on every update
    - Name cannot be blank
    - Only hotels may carry a HotelProfile
    - PENDING -> APPROVED | REJECTED, APPROVED -> ACTIVE, ACTIVE -> SUSPENDED
    - Deletable only once REJECTED or SUSPENDED
    """

    # Identity
    id: AccommodationId
    type: AccommodationType
    owner_id: UserId

    # Descriptive attributes
    name: str
    status: AccommodationStatus
    address: Address
    location: Location
    description: str
    images: list[str]
    amenities: list[str]
    policies: Policies
    cancellation_policy: CancellationPolicy

    # Approval metadata
    approved_by: UserId | None = None
    approved_at: datetime | None = None

    # Hotel-only attributes
    hotel_profile: HotelProfile | None = None

    # Timestamps
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    _events: EventRecorder = field(
        default_factory=EventRecorder, repr=False, compare=False, kw_only=True
    )

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._ensure_name(self.name)
        self._ensure_images(self.type, self.images)
        self._ensure_profile_allowed(self.type, self.hotel_profile)

    # Invariant helpers

    @staticmethod
    def _ensure_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidInputError("Accommodation name cannot be empty", field="name", value=name)

    @staticmethod
    def _ensure_images(accommodation_type: AccommodationType, images: list[str]) -> None:
        minimum, maximum = IMAGE_LIMITS[accommodation_type]
        if not minimum <= len(images) <= maximum:
            raise InvalidInputError(
                f"{accommodation_type.value.capitalize()} must have between "
                f"{minimum} and {maximum} images",
                field="images",
                value=len(images),
            )
        for url in images:
            if not isinstance(url, str) or not url.strip():
                raise InvalidInputError("Image URL cannot be empty", field="images", value=url)

    @staticmethod
    def _ensure_profile_allowed(
        accommodation_type: AccommodationType, profile: HotelProfile | None
    ) -> None:
        if profile is not None and accommodation_type is not AccommodationType.HOTEL:
            raise InvalidInputError(
                "Only hotels can define hotel profile attributes",
                field="hotel_profile",
            )

    def _transition(
        self,
        required: AccommodationStatus,
        target: AccommodationStatus,
        operation: str,
    ) -> None:
        if self.status is not required:
            raise InvalidStateError(
                f"Only {required.value} accommodations can be {target.value}",
                current_state=self.status.value,
                required_state=required.value,
                operation=operation,
            )
        self.status = target
        self.updated_at = _now()

    # Query methods

    def is_hotel(self) -> bool:
        return self.type is AccommodationType.HOTEL

    def is_homestay(self) -> bool:
        return self.type is AccommodationType.HOMESTAY

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def can_be_deleted(self) -> bool:
        """
        Whether the status allows deletion.

        Booking-based restrictions are evaluated by the caller through the
        booking policy port; this predicate only covers the lifecycle rule.
        """
        return self.status.can_be_deleted()

    @property
    def star_rating(self) -> int | None:
        return self.hotel_profile.star_rating if self.hotel_profile else None

    # Workflow

    def approve(self, approved_by: UserId) -> None:
        """
        Approve a pending accommodation.

        Raises:
            InvalidStateError: If the accommodation is not pending
        """
        self._transition(AccommodationStatus.PENDING, AccommodationStatus.APPROVED, "approve")
        self.approved_by = approved_by
        self.approved_at = self.updated_at
        self._events.record(AccommodationApprovedEvent(self.id, approved_by))

    def reject(self, rejected_by: UserId) -> None:
        """
        Reject a pending accommodation.

        Raises:
            InvalidStateError: If the accommodation is not pending
        """
        self._transition(AccommodationStatus.PENDING, AccommodationStatus.REJECTED, "reject")
        self.approved_by = rejected_by
        self.approved_at = self.updated_at
        self._events.record(AccommodationRejectedEvent(self.id, rejected_by))

    def activate(self) -> None:
        """Open an approved accommodation for business."""
        self._transition(AccommodationStatus.APPROVED, AccommodationStatus.ACTIVE, "activate")
        self._events.record(AccommodationActivatedEvent(self.id))

    def suspend(self) -> None:
        """Take an active accommodation offline."""
        self._transition(AccommodationStatus.ACTIVE, AccommodationStatus.SUSPENDED, "suspend")
        self._events.record(AccommodationSuspendedEvent(self.id))

    # Attribute updates

    def update_name(self, name: str) -> None:
        self._ensure_name(name)
        self.name = name.strip()
        self.updated_at = _now()

    def update_address(self, address: Address) -> None:
        self.address = address
        self.updated_at = _now()

    def update_description(self, description: str) -> None:
        self.description = description
        self.updated_at = _now()

    def update_images(self, images: list[str]) -> None:
        """
        Replace the image gallery.

        Raises:
            InvalidInputError: If the count is outside the bounds for this type
        """
        self._ensure_images(self.type, images)
        self.images = list(images)
        self.updated_at = _now()

    def update(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        images: list[str] | None = None,
        amenities: list[str] | None = None,
        address: Address | None = None,
        location: Location | None = None,
        policies: Policies | None = None,
        cancellation_policy: CancellationPolicy | None = None,
        star_rating: int | None = None,
    ) -> None:
        """
        Apply any subset of attribute changes. Arguments left as None are kept.

        All checks run before any attribute is assigned, so a failing update
        leaves the aggregate untouched.

        Raises:
            InvalidInputError: On blank name, image bounds, or hotel-only
                attributes given to a homestay
        """
        if name is not None:
            self._ensure_name(name)
        if images is not None:
            self._ensure_images(self.type, images)
        profile = self.hotel_profile
        if star_rating is not None:
            self._ensure_profile_allowed(self.type, HotelProfile(star_rating=star_rating))
            profile = replace(profile or HotelProfile(), star_rating=star_rating)

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if images is not None:
            self.images = list(images)
        if amenities is not None:
            self.amenities = list(amenities)
        if address is not None:
            self.address = address
        if location is not None:
            self.location = location
        if policies is not None:
            self.policies = policies
        if cancellation_policy is not None:
            self.cancellation_policy = cancellation_policy
        self.hotel_profile = profile
        self.updated_at = _now()

    # Events

    def pull_domain_events(self) -> list[DomainEvent]:
        """Drain recorded events; called once after a successful persist."""
        return self._events.pull()

    @property
    def pending_events(self) -> list[DomainEvent]:
        return self._events.pending

    # Factory methods

    @classmethod
    def create(
        cls,
        type: AccommodationType,
        name: str,
        owner_id: UserId,
        address: Address,
        location: Location,
        description: str,
        images: list[str],
        amenities: list[str],
        policies: Policies,
        cancellation_policy: CancellationPolicy,
        hotel_profile: HotelProfile | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> "Accommodation":
        """Register a new accommodation awaiting approval."""
        accommodation = cls(
            id=AccommodationId.generate(id_generator),
            type=AccommodationType.parse(type, field="type"),
            owner_id=owner_id,
            name=name.strip(),
            status=AccommodationStatus.PENDING,
            address=address,
            location=location,
            description=description,
            images=list(images),
            amenities=list(amenities),
            policies=policies,
            cancellation_policy=cancellation_policy,
            hotel_profile=hotel_profile,
        )
        accommodation._events.record(
            AccommodationCreatedEvent(accommodation.id, owner_id, accommodation.type)
        )
        return accommodation

    @classmethod
    def create_with_id(
        cls,
        id: AccommodationId,
        type: AccommodationType,
        name: str,
        status: AccommodationStatus,
        owner_id: UserId,
        address: Address,
        location: Location,
        description: str,
        images: list[str],
        amenities: list[str],
        policies: Policies,
        cancellation_policy: CancellationPolicy,
        created_at: datetime,
        updated_at: datetime,
        approved_by: UserId | None = None,
        approved_at: datetime | None = None,
        hotel_profile: HotelProfile | None = None,
    ) -> "Accommodation":
        """Reconstitute an accommodation from persistence (records no events)."""
        return cls(
            id=id,
            type=type,
            name=name,
            status=status,
            owner_id=owner_id,
            address=address,
            location=location,
            description=description,
            images=list(images),
            amenities=list(amenities),
            policies=policies,
            cancellation_policy=cancellation_policy,
            approved_by=approved_by,
            approved_at=approved_at,
            hotel_profile=hotel_profile,
            created_at=created_at,
            updated_at=updated_at,
        )
