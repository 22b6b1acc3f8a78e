"""HotelRoom entity: a physical room under a hotel room type."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lodging.domain.common.entity import Entity
from lodging.domain.common.exceptions import InvalidStateError
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import FloorId, HotelRoomId, RoomTypeId
from lodging.domain.room.value_objects import HotelRoomStatus, RoomNumber


@dataclass(eq=False)
class HotelRoom(Entity[HotelRoomId]):
    """
    Physical hotel room.

    Business Rules:
    - Starts AVAILABLE
    - occupied/clean/dirty/maintenance/out_of_order can be set from any status
    - release() only from OCCUPIED or MAINTENANCE, always back to AVAILABLE
    - Created only through RoomType.create_hotel_room so the inventory cap holds
    """

    id: HotelRoomId
    room_type_id: RoomTypeId
    room_number: RoomNumber
    status: HotelRoomStatus = HotelRoomStatus.AVAILABLE
    floor_id: FloorId | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def _set_status(self, status: HotelRoomStatus) -> None:
        self.status = status
        self.updated_at = datetime.now(UTC)

    def is_available(self) -> bool:
        return self.status is HotelRoomStatus.AVAILABLE

    def mark_occupied(self) -> None:
        self._set_status(HotelRoomStatus.OCCUPIED)

    def mark_clean(self) -> None:
        self._set_status(HotelRoomStatus.CLEAN)

    def mark_dirty(self) -> None:
        self._set_status(HotelRoomStatus.DIRTY)

    def mark_maintenance(self) -> None:
        self._set_status(HotelRoomStatus.MAINTENANCE)

    def mark_out_of_order(self) -> None:
        self._set_status(HotelRoomStatus.OUT_OF_ORDER)

    def release(self) -> None:
        """
        Return the room to AVAILABLE after a stay or a repair.

        Raises:
            InvalidStateError: If the room is neither occupied nor under maintenance
        """
        if not self.status.is_releasable():
            raise InvalidStateError(
                "Only occupied or maintenance rooms can be released",
                current_state=self.status.value,
                required_state=(
                    f"{HotelRoomStatus.OCCUPIED.value}|{HotelRoomStatus.MAINTENANCE.value}"
                ),
                operation="release",
            )
        self._set_status(HotelRoomStatus.AVAILABLE)

    def update_room_number(self, room_number: RoomNumber | str) -> None:
        self.room_number = (
            room_number if isinstance(room_number, RoomNumber) else RoomNumber(room_number)
        )
        self.updated_at = datetime.now(UTC)

    def set_notes(self, notes: str | None) -> None:
        self.notes = notes
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(
        cls,
        room_type_id: RoomTypeId,
        room_number: RoomNumber,
        floor_id: FloorId | None = None,
        notes: str | None = None,
        id_generator: IdGenerator = default_id_generator,
    ) -> "HotelRoom":
        """Create an AVAILABLE hotel room. Use RoomType.create_hotel_room instead."""
        return cls(
            id=HotelRoomId.generate(id_generator),
            room_type_id=room_type_id,
            room_number=room_number,
            floor_id=floor_id,
            notes=notes,
        )

    @classmethod
    def create_with_id(
        cls,
        id: HotelRoomId,
        room_type_id: RoomTypeId,
        room_number: RoomNumber,
        status: HotelRoomStatus,
        floor_id: FloorId | None,
        notes: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "HotelRoom":
        """Reconstitute a hotel room from persistence."""
        return cls(
            id=id,
            room_type_id=room_type_id,
            room_number=room_number,
            status=status,
            floor_id=floor_id,
            notes=notes,
            created_at=created_at,
            updated_at=updated_at,
        )
