from datetime import UTC, datetime

import pytest

from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.accommodation.value_objects import FloorStatus, FloorType
from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_objects import AccommodationId, FloorId


def _make_floor(floor_number: int = 3, name: str = "Floor 3") -> Floor:
    return Floor.create(
        hotel_id=AccommodationId.generate(),
        floor_number=floor_number,
        name=name,
        floor_type=FloorType.ROOM_FLOOR,
    )


class TestFloor:
    def test_new_floor_is_active(self) -> None:
        floor = _make_floor()

        assert floor.status is FloorStatus.ACTIVE
        assert floor.is_room_floor()
        assert not floor.is_blocked()
        assert floor.amenities == []

    def test_ground_floor_is_zero(self) -> None:
        assert _make_floor(floor_number=0, name="Lobby").floor_number == 0

    def test_negative_floor_number(self) -> None:
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            _make_floor(floor_number=-1)

    def test_floor_number_must_be_int(self) -> None:
        with pytest.raises(InvalidInputError, match="must be an integer"):
            _make_floor(floor_number=True)

    def test_blank_name(self) -> None:
        with pytest.raises(InvalidInputError, match="Floor name cannot be empty"):
            _make_floor(name="  ")

    def test_block_close_and_activate(self) -> None:
        floor = _make_floor()

        floor.block_for_maintenance()
        assert floor.status is FloorStatus.MAINTENANCE
        assert floor.is_blocked()

        floor.close()
        assert floor.status is FloorStatus.CLOSED

        floor.activate()
        assert floor.status is FloorStatus.ACTIVE

    def test_update_name_trims(self) -> None:
        floor = _make_floor()

        floor.update_name("  Executive Floor ")

        assert floor.name == "Executive Floor"

    def test_create_with_id_keeps_state(self) -> None:
        now = datetime.now(UTC)
        floor_id = FloorId.generate()

        floor = Floor.create_with_id(
            id=floor_id,
            hotel_id=AccommodationId.generate(),
            floor_number=7,
            name="Spa",
            floor_type=FloorType.SPA_FLOOR,
            status=FloorStatus.CLOSED,
            description=None,
            amenities=["sauna"],
            created_at=now,
            updated_at=now,
        )

        assert floor.id == floor_id
        assert floor.is_blocked()
        assert not floor.is_room_floor()
