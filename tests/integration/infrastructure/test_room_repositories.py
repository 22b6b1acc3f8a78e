"""Tests for the homestay room and hotel room type repositories."""

from collections.abc import Callable
from decimal import Decimal

import pytest
from sqlalchemy import update
from sqlalchemy.orm import Session

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.accommodation.value_objects import AccommodationType, FloorType
from lodging.domain.common.identifiers import sequential_id_generator
from lodging.domain.common.value_objects import Money, RoomTypeId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import (
    HotelRoomStatus,
    RoomImageType,
    RoomInventory,
    RoomStatus,
)
from lodging.infrastructure.accommodation.repositories import (
    AccommodationRepository,
    FloorRepository,
)
from lodging.infrastructure.room.mappers.hotel_room_mapper import HotelRoomMapper
from lodging.infrastructure.room.mappers.room_mapper import RoomMapper
from lodging.infrastructure.room.mappers.room_type_mapper import RoomTypeMapper
from lodging.infrastructure.room.repositories import RoomRepository, RoomTypeRepository
from lodging.models import HotelRoom as HotelRoomORM

from tests.conftest import stored_columns


@pytest.fixture
def homestay(
    db_session: Session, make_accommodation: Callable[..., Accommodation]
) -> Accommodation:
    return AccommodationRepository(db_session).save(make_accommodation())


@pytest.fixture
def hotel(db_session: Session, make_accommodation: Callable[..., Accommodation]) -> Accommodation:
    return AccommodationRepository(db_session).save(
        make_accommodation(accommodation_type=AccommodationType.HOTEL)
    )


@pytest.fixture
def room_repository(db_session: Session) -> RoomRepository:
    return RoomRepository(db_session)


@pytest.fixture
def room_type_repository(db_session: Session) -> RoomTypeRepository:
    return RoomTypeRepository(db_session)


class TestRoomRepository:
    def test_round_trip(
        self,
        db_session: Session,
        fresh_session: Session,
        room_repository: RoomRepository,
        homestay: Accommodation,
        make_room: Callable[..., Room],
    ) -> None:
        room = make_room(
            accommodation_id=homestay.id,
            inventory=2,
            base_price=Money(amount=Decimal("350000"), currency="VND"),
        )
        room_repository.save(room)
        db_session.commit()

        found = RoomRepository(fresh_session).find_by_id(room.id)

        assert found is not None
        mapper = RoomMapper()
        assert stored_columns(mapper.to_orm(found)) == stored_columns(mapper.to_orm(room))
        assert found == room
        assert found.name == room.name
        assert found.guest_capacity == room.guest_capacity
        assert found.images == room.images
        assert found.images[0].type is RoomImageType.INTERIOR
        assert found.inventory == RoomInventory(2)
        assert found.base_price == Money.of("350000.00", "VND")
        assert found.amenities == room.amenities

    def test_room_without_price(
        self,
        room_repository: RoomRepository,
        homestay: Accommodation,
        make_room: Callable[..., Room],
    ) -> None:
        room = room_repository.save(make_room(accommodation_id=homestay.id))

        found = room_repository.lock_by_id(room.id)

        assert found is not None
        assert found.base_price is None

    def test_filters_and_counts(
        self,
        room_repository: RoomRepository,
        homestay: Accommodation,
        make_room: Callable[..., Room],
    ) -> None:
        active = room_repository.save(make_room(accommodation_id=homestay.id, name="Loft"))
        inactive = make_room(accommodation_id=homestay.id, name="Attic")
        inactive.deactivate()
        room_repository.save(inactive)

        assert {r.id for r in room_repository.find_by_accommodation_id(homestay.id)} == {
            active.id,
            inactive.id,
        }
        assert room_repository.count(accommodation_id=homestay.id) == 2
        only_active = room_repository.find_many(
            limit=10, offset=0, accommodation_id=homestay.id, status=RoomStatus.ACTIVE
        )
        assert [r.id for r in only_active] == [active.id]
        assert room_repository.count(status=RoomStatus.INACTIVE) == 1


class TestRoomTypeRepository:
    def test_room_type_loads_with_hotel_rooms_in_creation_order(
        self,
        db_session: Session,
        fresh_session: Session,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = make_room_type(hotel_id=hotel.id, inventory=3)
        room_type_repository.save(room_type)
        id_generator = sequential_id_generator()
        for number in ("305", "301", "303"):
            room_type.create_hotel_room(number, id_generator=id_generator)
        room_type_repository.save(room_type)
        db_session.commit()

        found = RoomTypeRepository(fresh_session).find_by_id(room_type.id)

        assert found is not None
        mapper = RoomTypeMapper()
        assert stored_columns(mapper.to_orm(found)) == stored_columns(mapper.to_orm(room_type))
        hotel_room_mapper = HotelRoomMapper()
        assert [stored_columns(hotel_room_mapper.to_orm(r)) for r in found.get_rooms()] == [
            stored_columns(hotel_room_mapper.to_orm(r)) for r in room_type.get_rooms()
        ]
        assert [room.room_number.value for room in found.get_rooms()] == ["305", "301", "303"]
        assert found.base_price == room_type.base_price
        assert found.capacity == room_type.capacity
        assert not found.has_available_inventory()

    def test_locked_aggregate_enforces_inventory(
        self,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = make_room_type(hotel_id=hotel.id, inventory=1)
        room_type.create_hotel_room("101")
        room_type_repository.save(room_type)

        locked = room_type_repository.lock_by_id(room_type.id)

        assert locked is not None
        assert locked.room_count == 1
        assert locked.available_slots() == 0

    def test_saving_room_type_leaves_stored_hotel_rooms_untouched(
        self,
        db_session: Session,
        fresh_session: Session,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = make_room_type(hotel_id=hotel.id, inventory=2)
        first = room_type.create_hotel_room("101")
        room_type_repository.save(room_type)
        db_session.commit()
        locked = room_type_repository.lock_by_id(room_type.id)
        assert locked is not None
        db_session.execute(
            update(HotelRoomORM)
            .where(HotelRoomORM.id == first.id.value)
            .values(status=HotelRoomStatus.OCCUPIED.value, notes="Late checkout")
        )

        second = locked.create_hotel_room("102")
        room_type_repository.save(locked)
        db_session.commit()

        repository = RoomTypeRepository(fresh_session)
        stored_first = repository.find_hotel_room_by_id(first.id)
        assert stored_first is not None
        assert stored_first.status is HotelRoomStatus.OCCUPIED
        assert stored_first.notes == "Late checkout"
        assert repository.find_hotel_room_by_id(second.id) is not None

    def test_hotel_room_queries(
        self,
        db_session: Session,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        floor = Floor.create(
            hotel_id=hotel.id, floor_number=2, name="Floor 2", floor_type=FloorType.ROOM_FLOOR
        )
        FloorRepository(db_session).save(floor)
        room_type = make_room_type(hotel_id=hotel.id, inventory=3)
        on_floor = room_type.create_hotel_room("202", floor_id=floor.id)
        room_type.create_hotel_room("201", floor_id=floor.id)
        lobby_side = room_type.create_hotel_room("100")
        room_type_repository.save(room_type)

        by_type = room_type_repository.find_hotel_rooms_by_type(room_type.id)
        assert [room.room_number.value for room in by_type] == ["100", "201", "202"]

        on_floor_rooms = room_type_repository.find_many_hotel_rooms(
            limit=10, offset=0, floor_id=floor.id
        )
        assert [room.room_number.value for room in on_floor_rooms] == ["201", "202"]
        assert room_type_repository.count_hotel_rooms(room_type_id=room_type.id) == 3

        on_floor.mark_occupied()
        room_type_repository.save_hotel_room(on_floor)
        locked = room_type_repository.lock_hotel_room_by_id(on_floor.id)
        assert locked is not None
        assert locked.status is HotelRoomStatus.OCCUPIED
        assert room_type_repository.count_hotel_rooms(status=HotelRoomStatus.OCCUPIED) == 1

        found = room_type_repository.find_hotel_room_by_id(lobby_side.id)
        assert found is not None
        assert found.floor_id is None

    def test_filters_and_counts(
        self,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        id_generator = sequential_id_generator()
        standard = room_type_repository.save(
            make_room_type(hotel_id=hotel.id, name="Standard", id_generator=id_generator)
        )
        suite = make_room_type(hotel_id=hotel.id, name="Suite", id_generator=id_generator)
        suite.deactivate()
        room_type_repository.save(suite)

        assert [rt.id for rt in room_type_repository.find_by_hotel_id(hotel.id)] == [
            standard.id,
            suite.id,
        ]
        inactive = room_type_repository.find_many(
            limit=10, offset=0, hotel_id=hotel.id, status=RoomStatus.INACTIVE
        )
        assert [rt.id for rt in inactive] == [suite.id]
        assert room_type_repository.count(hotel_id=hotel.id) == 2
        assert room_type_repository.find_by_id(RoomTypeId.generate()) is None

    def test_deleting_floor_detaches_its_hotel_rooms(
        self,
        db_session: Session,
        room_type_repository: RoomTypeRepository,
        hotel: Accommodation,
        make_room_type: Callable[..., RoomType],
    ) -> None:
        floor_repository = FloorRepository(db_session)
        floor = floor_repository.save(
            Floor.create(
                hotel_id=hotel.id, floor_number=3, name="Floor 3", floor_type=FloorType.ROOM_FLOOR
            )
        )
        room_type = make_room_type(hotel_id=hotel.id, inventory=1)
        hotel_room = room_type.create_hotel_room("301", floor_id=floor.id)
        room_type_repository.save(room_type)

        floor_repository.delete(floor.id)
        db_session.expire_all()

        found = room_type_repository.find_hotel_room_by_id(hotel_room.id)
        assert found is not None
        assert found.floor_id is None
