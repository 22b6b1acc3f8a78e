from collections.abc import Callable
from decimal import Decimal

import pytest

from lodging.domain.common.exceptions import InvalidInputError, InvalidStateError
from lodging.domain.common.value_objects import Money
from lodging.domain.room.entities.room import Room
from lodging.domain.room.events import RoomCreatedEvent, RoomDeactivatedEvent
from lodging.domain.room.value_objects import RoomInventory, RoomStatus

MakeRoom = Callable[..., Room]


class TestRoomCreation:
    def test_new_room_is_active_with_event(self, make_room: MakeRoom) -> None:
        room = make_room()

        assert room.status is RoomStatus.ACTIVE
        assert room.is_active()
        events = room.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], RoomCreatedEvent)
        assert events[0].accommodation_id == room.accommodation_id

    @pytest.mark.parametrize("count", [1, 11])
    def test_image_bounds(
        self, make_room: MakeRoom, make_room_images: Callable[[int], list], count: int
    ) -> None:
        with pytest.raises(InvalidInputError, match="between 2 and 10 images"):
            make_room(images=make_room_images(count))

    def test_area_must_be_positive(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError, match="area must be positive"):
            make_room(area=0)

    def test_needs_a_bed(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError, match="at least one bed"):
            make_room(bed_count=0)

    def test_amenities_are_trimmed_and_deduplicated(self, make_room: MakeRoom) -> None:
        room = make_room(amenities=[" wifi", "wifi ", "tv", "  "])

        assert room.amenities == ["wifi", "tv"]

    def test_unknown_category(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError, match="Unsupported RoomCategory"):
            make_room(category="igloo")


class TestRoomDeactivation:
    def test_single_unit_room_deactivates_once(self, make_room: MakeRoom) -> None:
        room = make_room(inventory=1)
        room.pull_domain_events()

        room.deactivate()
        room.deactivate()

        assert room.status is RoomStatus.INACTIVE
        events = room.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], RoomDeactivatedEvent)

    def test_multi_unit_room_cannot_deactivate(self, make_room: MakeRoom) -> None:
        room = make_room(inventory=3)

        with pytest.raises(InvalidStateError, match="multiple inventory units"):
            room.deactivate()

        assert room.is_active()

    def test_reactivate(self, make_room: MakeRoom) -> None:
        room = make_room()
        room.deactivate()

        room.activate()

        assert room.is_active()


class TestRoomInventoryChanges:
    def test_increase_then_decrease(self, make_room: MakeRoom) -> None:
        room = make_room(inventory=1)

        room.increase_inventory(2)
        assert room.inventory == RoomInventory(3)

        room.decrease_inventory()
        assert room.inventory == RoomInventory(2)

    def test_decrease_below_one(self, make_room: MakeRoom) -> None:
        room = make_room(inventory=1)

        with pytest.raises(InvalidInputError, match="below 1 unit"):
            room.decrease_inventory()

    def test_adjust_accepts_int(self, make_room: MakeRoom) -> None:
        room = make_room()

        room.adjust_inventory(4)

        assert room.inventory.value == 4


class TestRoomUpdates:
    def test_update_images_after_creation_allows_fewer(
        self, make_room: MakeRoom, make_room_images: Callable[[int], list]
    ) -> None:
        room = make_room()

        room.update_images(make_room_images(1))

        assert len(room.images) == 1

    def test_update_images_rejects_empty(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError):
            make_room().update_images([])

    def test_update_amenities_rejects_empty(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError, match="at least one amenity"):
            make_room().update_amenities([])

    def test_update_description_rejects_blank(self, make_room: MakeRoom) -> None:
        with pytest.raises(InvalidInputError, match="Description cannot be empty"):
            make_room().update_description("   ")

    def test_base_price(self, make_room: MakeRoom) -> None:
        room = make_room()

        room.update_base_price(Money(amount=Decimal("450000"), currency="VND"))

        assert room.base_price == Money.of(450000, "VND")
