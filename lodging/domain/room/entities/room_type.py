"""
RoomType aggregate root for hotels.

A RoomType is a sellable category (e.g. "Deluxe King") that owns the physical
HotelRooms built for it, bounded by its declared inventory.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lodging.domain.common.domain_event import DomainEvent, EventRecorder
from lodging.domain.common.entity import Entity
from lodging.domain.common.exceptions import InvalidInputError, InvalidOperationError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import (
    AccommodationId,
    FloorId,
    HotelRoomId,
    Money,
    RoomTypeId,
)
from lodging.domain.room import rules
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.events import (
    HotelRoomCreatedEvent,
    RoomTypeCreatedEvent,
    RoomTypeInventoryAdjustedEvent,
)
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
    RoomNumber,
    RoomStatus,
)

MIN_ROOM_TYPE_IMAGES = 3


@dataclass(eq=False)
class RoomType(Entity[RoomTypeId]):
    """
    Hotel room type aggregate root.

    Business Rules:
    - Created with at least 3 images and inventory of at least 1
    - Number of hotel rooms never exceeds inventory
    - Inventory cannot be lowered below the number of existing hotel rooms
    - Hotel rooms are only created and attached through this aggregate
    """

    id: RoomTypeId
    hotel_id: AccommodationId
    name: str
    category: RoomCategory
    area: float
    capacity: GuestCapacity
    bed_count: int
    bed_type: BedType
    description: str
    amenities: list[str]
    images: list[RoomImage]
    inventory: RoomInventory
    base_price: Money
    status: RoomStatus = RoomStatus.ACTIVE
    view_direction: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # Insertion-ordered children keyed by id
    _rooms: dict[HotelRoomId, HotelRoom] = field(
        default_factory=dict, repr=False, compare=False, kw_only=True
    )
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

    # Hotel rooms

    def get_rooms(self) -> list[HotelRoom]:
        """Return hotel rooms in the order they were attached."""
        return list(self._rooms.values())

    def get_room(self, hotel_room_id: HotelRoomId) -> HotelRoom | None:
        return self._rooms.get(hotel_room_id)

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    def available_slots(self) -> int:
        """Number of hotel rooms that can still be created."""
        return self.inventory.value - len(self._rooms)

    def has_available_inventory(self) -> bool:
        return self.available_slots() > 0

    def attach_room(self, room: HotelRoom) -> None:
        """
        Attach an existing hotel room, used when rebuilding from persistence.

        Raises:
            InvalidOperationError: If the room belongs to another room type
        """
        if room.room_type_id != self.id:
            raise InvalidOperationError(
                "Hotel room belongs to a different room type",
                operation="attach_room",
                reason=f"room_type_id={room.room_type_id}",
            )
        self._rooms[room.id] = room

    def create_hotel_room(
        self,
        room_number: RoomNumber | str,
        floor_id: FloorId | None = None,
        notes: str | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> HotelRoom:
        """
        Build a new AVAILABLE hotel room under this type.

        The cap check and the insert happen in this one call. Across
        transactions, load the aggregate with the repository's lock_by_id.

        Args:
            room_number: Door label of the new room
            floor_id: Optional floor the room is on
            notes: Optional housekeeping notes
            id_generator: Source of the new identifier

        Returns:
            The attached HotelRoom

        Raises:
            InvalidOperationError: If the declared inventory is exhausted
        """
        number = room_number if isinstance(room_number, RoomNumber) else RoomNumber(room_number)
        if len(self._rooms) >= self.inventory.value:
            raise InvalidOperationError(
                "Cannot create more rooms than declared inventory",
                operation="create_hotel_room",
                reason="inventory exhausted",
            )
        room = HotelRoom.create(
            room_type_id=self.id,
            room_number=number,
            floor_id=floor_id,
            notes=notes,
            id_generator=id_generator,
        )
        self._rooms[room.id] = room
        self._touch()
        self._events.record(HotelRoomCreatedEvent(self.id, room.id, number.value))
        return room

    # Attribute updates

    def adjust_inventory(self, inventory: RoomInventory | int) -> None:
        """
        Change the declared room cap.

        Raises:
            InvalidOperationError: If the new cap is below the existing room count
        """
        next_inventory = (
            inventory if isinstance(inventory, RoomInventory) else RoomInventory(inventory)
        )
        if next_inventory.value < len(self._rooms):
            raise InvalidOperationError(
                f"Inventory cannot be lower than the {len(self._rooms)} existing hotel rooms",
                operation="adjust_inventory",
                reason="below existing room count",
            )
        previous = self.inventory.value
        self.inventory = next_inventory
        self._touch()
        if previous != next_inventory.value:
            self._events.record(
                RoomTypeInventoryAdjustedEvent(self.id, previous, next_inventory.value)
            )

    def update_base_price(self, price: Money) -> None:
        self.base_price = price
        self._touch()

    def update_description(self, description: str) -> None:
        self.description = rules.ensure_description(description)
        self._touch()

    def update_amenities(self, amenities: list[str]) -> None:
        if not amenities:
            raise InvalidInputError("Room type requires at least one amenity", field="amenities")
        self.amenities = rules.normalize_amenities(amenities)
        self._touch()

    def update_images(self, images: list[RoomImage]) -> None:
        if not images:
            raise InvalidInputError("Room type requires at least one image", field="images")
        self.images = list(images)
        self._touch()

    def activate(self) -> None:
        if self.status is RoomStatus.ACTIVE:
            return
        self.status = RoomStatus.ACTIVE
        self._touch()

    def deactivate(self) -> None:
        if self.status is RoomStatus.INACTIVE:
            return
        self.status = RoomStatus.INACTIVE
        self._touch()

    def is_active(self) -> bool:
        return self.status.is_active()

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
        hotel_id: AccommodationId,
        name: str,
        category: RoomCategory,
        area: float,
        capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: RoomInventory,
        base_price: Money,
        view_direction: str | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> "RoomType":
        """
        Create a new active room type with no hotel rooms yet.

        Raises:
            InvalidInputError: If fewer than 3 images are given
        """
        if len(images) < MIN_ROOM_TYPE_IMAGES:
            raise InvalidInputError(
                f"Room types require at least {MIN_ROOM_TYPE_IMAGES} images",
                field="images",
                value=len(images),
            )
        room_type = cls(
            id=RoomTypeId.generate(id_generator),
            hotel_id=hotel_id,
            name=rules.ensure_name(name),
            category=RoomCategory.parse(category, field="category"),
            area=rules.ensure_area(area),
            capacity=capacity,
            bed_count=bed_count,
            bed_type=BedType.parse(bed_type, field="bed_type"),
            description=description,
            amenities=rules.normalize_amenities(amenities),
            images=list(images),
            inventory=inventory,
            base_price=base_price,
            view_direction=view_direction,
        )
        room_type._events.record(RoomTypeCreatedEvent(room_type.id, hotel_id))
        return room_type

    @classmethod
    def create_with_id(
        cls,
        id: RoomTypeId,
        hotel_id: AccommodationId,
        name: str,
        category: RoomCategory,
        area: float,
        capacity: GuestCapacity,
        bed_count: int,
        bed_type: BedType,
        description: str,
        amenities: list[str],
        images: list[RoomImage],
        inventory: RoomInventory,
        base_price: Money,
        status: RoomStatus,
        view_direction: str | None,
        created_at: datetime,
        updated_at: datetime,
        rooms: list[HotelRoom] | None = None,
    ) -> "RoomType":
        """Reconstitute a room type and its hotel rooms from persistence."""
        room_type = cls(
            id=id,
            hotel_id=hotel_id,
            name=name,
            category=category,
            area=area,
            capacity=capacity,
            bed_count=bed_count,
            bed_type=bed_type,
            description=description,
            amenities=list(amenities),
            images=list(images),
            inventory=inventory,
            base_price=base_price,
            status=status,
            view_direction=view_direction,
            created_at=created_at,
            updated_at=updated_at,
        )
        for room in rooms or []:
            room_type.attach_room(room)
        return room_type
