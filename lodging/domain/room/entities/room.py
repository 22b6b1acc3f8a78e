"""
Room aggregate root for homestays.

A Room is a listing of 1..N identical, fungible units. It has no child
entities; the unit count lives in its RoomInventory.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lodging.domain.common.domain_event import DomainEvent, EventRecorder
from lodging.domain.common.entity import Entity
from lodging.domain.common.exceptions import InvalidInputError, InvalidStateError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId, Money, RoomId
from lodging.domain.room import rules
from lodging.domain.room.events import RoomCreatedEvent, RoomDeactivatedEvent
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
    RoomStatus,
)

MIN_ROOM_IMAGES = 2
MAX_ROOM_IMAGES = 10


@dataclass(eq=False)
class Room(Entity[RoomId]):
    """
    Homestay room aggregate root.

    Business Rules:
    - Created with 2-10 images, positive area and at least one bed
    - Amenities are trimmed and de-duplicated
    - Deactivation is idempotent and only allowed while inventory is exactly 1
    - Inventory never drops below 1
    """

    id: RoomId
    accommodation_id: AccommodationId
    name: str
    category: RoomCategory
    area: float
    guest_capacity: GuestCapacity
    bed_count: int
    bed_type: BedType
    description: str
    amenities: list[str]
    images: list[RoomImage]
    inventory: RoomInventory
    status: RoomStatus = RoomStatus.ACTIVE
    base_price: Money | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _events: EventRecorder = field(
        default_factory=EventRecorder, repr=False, compare=False, kw_only=True
    )

    def __post_init__(self) -> None:
        """Validate invariants."""
        rules.ensure_name(self.name)
        rules.ensure_area(self.area)
        rules.ensure_bed_count(self.bed_count)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # Query methods

    def is_active(self) -> bool:
        return self.status.is_active()

    def belongs_to(self, accommodation_id: AccommodationId) -> bool:
        return self.accommodation_id == accommodation_id

    # Attribute updates

    def update_description(self, description: str) -> None:
        self.description = rules.ensure_description(description)
        self._touch()

    def update_amenities(self, amenities: list[str]) -> None:
        """
        Raises:
            InvalidInputError: If no amenity is given
        """
        if not amenities:
            raise InvalidInputError("Rooms require at least one amenity", field="amenities")
        self.amenities = rules.normalize_amenities(amenities)
        self._touch()

    def update_images(self, images: list[RoomImage]) -> None:
        if not images:
            raise InvalidInputError("Rooms require at least one image", field="images")
        self.images = list(images)
        self._touch()

    def update_base_price(self, price: Money | None) -> None:
        self.base_price = price
        self._touch()

    # Status

    def activate(self) -> None:
        if self.status is RoomStatus.ACTIVE:
            return
        self.status = RoomStatus.ACTIVE
        self._touch()

    def deactivate(self) -> None:
        """
        Take the listing offline.

        No-op when already inactive.

        Raises:
            InvalidStateError: If more than one unit is still in inventory
        """
        if self.status is RoomStatus.INACTIVE:
            return
        if self.inventory.value > 1:
            raise InvalidStateError(
                "Cannot deactivate room that manages multiple inventory units",
                current_state=f"inventory={self.inventory.value}",
                required_state="inventory=1",
                operation="deactivate",
            )
        self.status = RoomStatus.INACTIVE
        self._touch()
        self._events.record(RoomDeactivatedEvent(self.id))

    # Inventory

    def adjust_inventory(self, inventory: RoomInventory | int) -> None:
        self.inventory = (
            inventory if isinstance(inventory, RoomInventory) else RoomInventory(inventory)
        )
        self._touch()

    def increase_inventory(self, by: int = 1) -> None:
        self.adjust_inventory(self.inventory.increase(by))

    def decrease_inventory(self, by: int = 1) -> None:
        self.adjust_inventory(self.inventory.decrease(by))

    # Events

    def pull_domain_events(self) -> list[DomainEvent]:
        return self._events.pull()

    @property
    def pending_events(self) -> list[DomainEvent]:
        return self._events.pending

    # Factory methods

    @classmethod
    def create(
        cls,
        accommodation_id: AccommodationId,
        name: str,
        category: RoomCategory,
        area: float,
        guest_capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: RoomInventory,
        base_price: Money | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> "Room":
        """
        Create a new active homestay room.

        Raises:
            InvalidInputError: If images are outside 2-10, area is not positive
                or there is no bed
        """
        if not MIN_ROOM_IMAGES <= len(images) <= MAX_ROOM_IMAGES:
            raise InvalidInputError(
                f"Homestay rooms require between {MIN_ROOM_IMAGES} and "
                f"{MAX_ROOM_IMAGES} images",
                field="images",
                value=len(images),
            )
        room = cls(
            id=RoomId.generate(id_generator),
            accommodation_id=accommodation_id,
            name=rules.ensure_name(name),
            category=RoomCategory.parse(category, field="category"),
            area=rules.ensure_area(area),
            guest_capacity=guest_capacity,
            bed_count=bed_count,
            bed_type=BedType.parse(bed_type, field="bed_type"),
            description=description,
            amenities=rules.normalize_amenities(amenities),
            images=list(images),
            inventory=inventory,
            base_price=base_price,
        )
        room._events.record(RoomCreatedEvent(room.id, accommodation_id))
        return room

    @classmethod
    def create_with_id(
        cls,
        id: RoomId,
        accommodation_id: AccommodationId,
        name: str,
        category: RoomCategory,
        area: float,
        guest_capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: RoomInventory,
        status: RoomStatus,
        base_price: Money | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Room":
        """Reconstitute a room from persistence (records no events)."""
        return cls(
            id=id,
            accommodation_id=accommodation_id,
            name=name,
            category=category,
            area=area,
            guest_capacity=guest_capacity,
            bed_count=bed_count,
            bed_type=bed_type,
            description=description,
            amenities=list(amenities),
            images=list(images),
            inventory=inventory,
            status=status,
            base_price=base_price,
            created_at=created_at,
            updated_at=updated_at,
        )
