"""Floor entity for hotel-type accommodations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lodging.domain.accommodation.value_objects import FloorStatus, FloorType
from lodging.domain.common.entity import Entity
from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId, FloorId


@dataclass(eq=False)
class Floor(Entity[FloorId]):
    """
    A level of a hotel.

    Business Rules:
    - Floor number is zero (ground) or positive
    - Name cannot be blank
    - New floors start ACTIVE
    - The owning accommodation must be a hotel (checked by FloorManagementService)
    """

    id: FloorId
    hotel_id: AccommodationId
    floor_number: int
    name: str
    floor_type: FloorType
    status: FloorStatus = FloorStatus.ACTIVE
    description: str | None = None
    amenities: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if isinstance(self.floor_number, bool) or not isinstance(self.floor_number, int):
            raise InvalidInputError(
                "Floor number must be an integer", field="floor_number", value=self.floor_number
            )
        if self.floor_number < 0:
            raise InvalidInputError(
                "Floor number cannot be negative", field="floor_number", value=self.floor_number
            )
        self._ensure_name(self.name)

    @staticmethod
    def _ensure_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidInputError("Floor name cannot be empty", field="name", value=name)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def is_blocked(self) -> bool:
        """Check if the floor is unavailable for guests (maintenance or closed)."""
        return self.status.is_blocked()

    def is_room_floor(self) -> bool:
        return self.floor_type.is_room_floor()

    def update_name(self, name: str) -> None:
        self._ensure_name(name)
        self.name = name.strip()
        self._touch()

    def update_description(self, description: str | None) -> None:
        self.description = description
        self._touch()

    def update_amenities(self, amenities: list[str]) -> None:
        self.amenities = list(amenities)
        self._touch()

    def block_for_maintenance(self) -> None:
        self.status = FloorStatus.MAINTENANCE
        self._touch()

    def close(self) -> None:
        self.status = FloorStatus.CLOSED
        self._touch()

    def activate(self) -> None:
        self.status = FloorStatus.ACTIVE
        self._touch()

    @classmethod
    def create(
        cls,
        hotel_id: AccommodationId,
        floor_number: int,
        name: str,
        floor_type: FloorType,
        description: str | None = None,
        amenities: list[str] | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> "Floor":
        """
        Create a new active floor.

        Args:
            hotel_id: Accommodation the floor belongs to
            floor_number: Level, 0 for the ground floor
            name: Display name, e.g. "Lobby" or "Floor 3"
            floor_type: Usage classification
            description: Optional free text
            amenities: Optional amenity labels
            id_generator: Source of the new identifier

        Returns:
            New Floor instance
        """
        return cls(
            id=FloorId.generate(id_generator),
            hotel_id=hotel_id,
            floor_number=floor_number,
            name=name.strip() if isinstance(name, str) else name,
            floor_type=FloorType.parse(floor_type, field="floor_type"),
            description=description,
            amenities=list(amenities or []),
        )

    @classmethod
    def create_with_id(
        cls,
        id: FloorId,
        hotel_id: AccommodationId,
        floor_number: int,
        name: str,
        floor_type: FloorType,
        status: FloorStatus,
        description: str | None,
        amenities: list[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Floor":
        """Reconstitute a floor from persistence."""
        return cls(
            id=id,
            hotel_id=hotel_id,
            floor_number=floor_number,
            name=name,
            floor_type=floor_type,
            status=status,
            description=description,
            amenities=list(amenities),
            created_at=created_at,
            updated_at=updated_at,
        )
