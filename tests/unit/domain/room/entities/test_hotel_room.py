import pytest

from lodging.domain.common.exceptions import InvalidStateError
from lodging.domain.common.value_objects import RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.value_objects import HotelRoomStatus, RoomNumber


def _make_hotel_room() -> HotelRoom:
    return HotelRoom.create(room_type_id=RoomTypeId.generate(), room_number=RoomNumber("101"))


class TestHotelRoom:
    def test_starts_available(self) -> None:
        hotel_room = _make_hotel_room()

        assert hotel_room.is_available()
        assert hotel_room.floor_id is None

    def test_status_marks_from_any_status(self) -> None:
        hotel_room = _make_hotel_room()

        hotel_room.mark_out_of_order()
        hotel_room.mark_dirty()
        hotel_room.mark_clean()

        assert hotel_room.status is HotelRoomStatus.CLEAN

    @pytest.mark.parametrize("mark", ["mark_occupied", "mark_maintenance"])
    def test_release_returns_to_available(self, mark: str) -> None:
        hotel_room = _make_hotel_room()
        getattr(hotel_room, mark)()

        hotel_room.release()

        assert hotel_room.status is HotelRoomStatus.AVAILABLE

    @pytest.mark.parametrize("mark", ["mark_clean", "mark_dirty", "mark_out_of_order"])
    def test_release_from_other_status_fails(self, mark: str) -> None:
        hotel_room = _make_hotel_room()
        getattr(hotel_room, mark)()
        status_before = hotel_room.status

        with pytest.raises(InvalidStateError) as exc_info:
            hotel_room.release()

        assert exc_info.value.operation == "release"
        assert hotel_room.status is status_before

    def test_release_when_available_fails(self) -> None:
        with pytest.raises(InvalidStateError, match="occupied or maintenance"):
            _make_hotel_room().release()

    def test_update_room_number_and_notes(self) -> None:
        hotel_room = _make_hotel_room()

        hotel_room.update_room_number(" 101A ")
        hotel_room.set_notes("Needs new curtains")

        assert hotel_room.room_number == RoomNumber("101A")
        assert hotel_room.notes == "Needs new curtains"
