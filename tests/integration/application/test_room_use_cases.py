"""Tests for homestay room and hotel room type use cases against the database."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.orm import Session

from lodging.application.common.pagination import Pagination
from lodging.application.room.use_cases import (
    CreateRoomTypeUseCase,
    CreateRoomUseCase,
    HotelRoomStatusUseCase,
    RoomManagementUseCase,
    RoomQueriesUseCase,
    RoomTypeManagementUseCase,
)
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError, FloorNotFoundError
from lodging.domain.accommodation.value_objects import AccommodationType, FloorType
from lodging.domain.common import DomainEvent
from lodging.domain.common.exceptions import (
    InvalidInputError,
    InvalidOperationError,
    InvalidStateError,
)
from lodging.domain.common.value_objects import (
    AccommodationId,
    HotelRoomId,
    Money,
    RoomId,
    RoomTypeId,
)
from lodging.domain.room.entities.room import Room
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.events import (
    HotelRoomCreatedEvent,
    RoomCreatedEvent,
    RoomDeactivatedEvent,
    RoomTypeCreatedEvent,
    RoomTypeInventoryAdjustedEvent,
)
from lodging.domain.room.exceptions import (
    HotelRoomNotFoundError,
    RoomNotFoundError,
    RoomTypeNotFoundError,
)
from lodging.domain.room.services import RoomAvailabilityService
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    HotelRoomStatus,
    RoomCategory,
    RoomImage,
    RoomStatus,
)
from lodging.infrastructure.accommodation.repositories import (
    AccommodationRepository,
    FloorRepository,
)
from lodging.infrastructure.common import SqlAlchemyUnitOfWork
from lodging.infrastructure.room.repositories import RoomRepository, RoomTypeRepository


@pytest.fixture
def accommodation_repository(db_session: Session) -> AccommodationRepository:
    return AccommodationRepository(db_session)


@pytest.fixture
def floor_repository(db_session: Session) -> FloorRepository:
    return FloorRepository(db_session)


@pytest.fixture
def room_repository(db_session: Session) -> RoomRepository:
    return RoomRepository(db_session)


@pytest.fixture
def room_type_repository(db_session: Session) -> RoomTypeRepository:
    return RoomTypeRepository(db_session)


@pytest.fixture
def homestay(
    db_session: Session,
    accommodation_repository: AccommodationRepository,
    make_accommodation: Callable[..., Accommodation],
) -> Accommodation:
    accommodation = accommodation_repository.save(make_accommodation())
    db_session.commit()
    return accommodation


@pytest.fixture
def hotel(
    db_session: Session,
    accommodation_repository: AccommodationRepository,
    make_accommodation: Callable[..., Accommodation],
) -> Accommodation:
    accommodation = accommodation_repository.save(
        make_accommodation(accommodation_type=AccommodationType.HOTEL)
    )
    db_session.commit()
    return accommodation


@pytest.fixture
def add_floor(db_session: Session, floor_repository: FloorRepository) -> Callable[..., Floor]:
    def add(
        hotel_id: AccommodationId,
        floor_number: int,
        floor_type: FloorType = FloorType.ROOM_FLOOR,
    ) -> Floor:
        floor = Floor.create(
            hotel_id=hotel_id,
            floor_number=floor_number,
            name=f"Floor {floor_number}",
            floor_type=floor_type,
        )
        floor = floor_repository.save(floor)
        db_session.commit()
        return floor

    return add


@pytest.fixture
def room_type_management(
    room_type_repository: RoomTypeRepository,
    floor_repository: FloorRepository,
    unit_of_work: SqlAlchemyUnitOfWork,
) -> RoomTypeManagementUseCase:
    return RoomTypeManagementUseCase(room_type_repository, floor_repository, unit_of_work)


@pytest.fixture
def stored_room_type(
    db_session: Session,
    room_type_repository: RoomTypeRepository,
    hotel: Accommodation,
    make_room_type: Callable[..., RoomType],
) -> Callable[..., RoomType]:
    def store(inventory: int = 2, **kwargs: object) -> RoomType:
        room_type = room_type_repository.save(
            make_room_type(hotel_id=hotel.id, inventory=inventory, **kwargs)
        )
        room_type.pull_domain_events()
        db_session.commit()
        return room_type

    return store


def _create_room_kwargs(images: list[RoomImage]) -> dict[str, Any]:
    return {
        "name": "Bamboo Suite",
        "category": "suite",
        "area": 40,
        "guest_capacity": GuestCapacity(max_adults=2, max_children=2),
        "bed_count": 2,
        "bed_type": "double",
        "description": "Opens onto the garden",
        "amenities": ["wifi", " wifi ", "fan"],
        "images": images,
    }


class TestCreateRoom:
    def test_creates_room_in_homestay(
        self,
        room_repository: RoomRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        published_events: list[DomainEvent],
        homestay: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomUseCase(room_repository, accommodation_repository, unit_of_work)

        room = use_case.create_room(
            homestay.id,
            inventory=3,
            base_price=Money.of("450000", "VND"),
            **_create_room_kwargs(make_room_images(2)),
        )

        assert room.category is RoomCategory.SUITE
        assert room.bed_type is BedType.DOUBLE
        assert room.amenities == ["wifi", "fan"]
        found = room_repository.find_by_id(room.id)
        assert found is not None
        assert found.inventory.value == 3
        assert found.base_price == Money(amount=Decimal("450000"), currency="VND")
        assert [type(event) for event in published_events] == [RoomCreatedEvent]

    def test_hotel_cannot_have_standalone_rooms(
        self,
        room_repository: RoomRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        hotel: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomUseCase(room_repository, accommodation_repository, unit_of_work)

        with pytest.raises(InvalidOperationError):
            use_case.create_room(
                hotel.id, **_create_room_kwargs(make_room_images(2))
            )

        assert room_repository.count() == 0

    def test_image_bounds(
        self,
        room_repository: RoomRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        homestay: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomUseCase(room_repository, accommodation_repository, unit_of_work)

        with pytest.raises(InvalidInputError):
            use_case.create_room(
                homestay.id, **_create_room_kwargs(make_room_images(11))
            )

    def test_missing_accommodation(
        self,
        room_repository: RoomRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomUseCase(room_repository, accommodation_repository, unit_of_work)

        with pytest.raises(AccommodationNotFoundError):
            use_case.create_room(
                AccommodationId.generate(),
                **_create_room_kwargs(make_room_images(2)),
            )


class TestRoomManagement:
    @pytest.fixture
    def stored_room(
        self,
        db_session: Session,
        room_repository: RoomRepository,
        homestay: Accommodation,
        make_room: Callable[..., Room],
    ) -> Callable[..., Room]:
        def store(inventory: int = 1) -> Room:
            room = room_repository.save(
                make_room(accommodation_id=homestay.id, inventory=inventory)
            )
            room.pull_domain_events()
            db_session.commit()
            return room

        return store

    def test_deactivate_single_unit_room(
        self,
        room_repository: RoomRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        published_events: list[DomainEvent],
        stored_room: Callable[..., Room],
    ) -> None:
        room = stored_room()
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        use_case.deactivate_room(room.id)
        use_case.deactivate_room(room.id)

        found = room_repository.find_by_id(room.id)
        assert found is not None
        assert found.status is RoomStatus.INACTIVE
        assert [type(event) for event in published_events] == [RoomDeactivatedEvent]

    def test_cannot_deactivate_multi_unit_room(
        self,
        room_repository: RoomRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        stored_room: Callable[..., Room],
    ) -> None:
        room = stored_room(inventory=2)
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        with pytest.raises(InvalidStateError):
            use_case.deactivate_room(room.id)

        found = room_repository.find_by_id(room.id)
        assert found is not None
        assert found.is_active()

    def test_inventory_changes(
        self,
        room_repository: RoomRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        stored_room: Callable[..., Room],
    ) -> None:
        room = stored_room()
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        assert use_case.increase_inventory(room.id, by=3).inventory.value == 4
        assert use_case.decrease_inventory(room.id).inventory.value == 3
        assert use_case.adjust_inventory(room.id, 1).inventory.value == 1
        with pytest.raises(InvalidInputError):
            use_case.decrease_inventory(room.id)

        found = room_repository.find_by_id(room.id)
        assert found is not None
        assert found.inventory.value == 1

    def test_update_and_reactivate(
        self,
        room_repository: RoomRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        stored_room: Callable[..., Room],
    ) -> None:
        room = stored_room()
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        use_case.update_room(room.id, description="Now with a balcony", amenities=["balcony"])
        use_case.deactivate_room(room.id)
        reactivated = use_case.activate_room(room.id)

        assert reactivated.is_active()
        found = room_repository.find_by_id(room.id)
        assert found is not None
        assert found.description == "Now with a balcony"
        assert found.amenities == ["balcony"]

    def test_bare_price_uses_default_currency(
        self,
        room_repository: RoomRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        stored_room: Callable[..., Room],
    ) -> None:
        room = stored_room()
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        updated = use_case.update_room(room.id, base_price="350000")

        assert updated.base_price == Money.of("350000", "VND")

    def test_missing_room(
        self, room_repository: RoomRepository, unit_of_work: SqlAlchemyUnitOfWork
    ) -> None:
        use_case = RoomManagementUseCase(room_repository, unit_of_work)

        with pytest.raises(RoomNotFoundError):
            use_case.activate_room(RoomId.generate())


class TestCreateRoomType:
    def test_creates_room_type_in_hotel(
        self,
        room_type_repository: RoomTypeRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        published_events: list[DomainEvent],
        hotel: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomTypeUseCase(
            room_type_repository, accommodation_repository, unit_of_work
        )

        room_type = use_case.create_room_type(
            hotel_id=hotel.id,
            name="Executive Twin",
            category="twin",
            area=28.0,
            capacity=GuestCapacity(max_adults=2),
            bed_count=2,
            bed_type="single",
            description="High floor, two beds",
            amenities=["wifi"],
            images=make_room_images(3),
            inventory=5,
            base_price=Money.of(1500000, "VND"),
            view_direction="river",
        )

        found = room_type_repository.find_by_id(room_type.id)
        assert found is not None
        assert found.inventory.value == 5
        assert found.room_count == 0
        assert found.view_direction == "river"
        assert [type(event) for event in published_events] == [RoomTypeCreatedEvent]

    def test_bare_price_uses_configured_currency(
        self,
        room_type_repository: RoomTypeRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        hotel: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomTypeUseCase(
            room_type_repository, accommodation_repository, unit_of_work, default_currency="EUR"
        )

        room_type = use_case.create_room_type(
            hotel_id=hotel.id,
            name="Budget Single",
            category="single",
            area=14.0,
            capacity=GuestCapacity(max_adults=1),
            bed_count=1,
            bed_type="single",
            description="Compact room",
            amenities=["wifi"],
            images=make_room_images(3),
            inventory=2,
            base_price=75,
        )

        assert room_type.base_price == Money.of("75.00", "EUR")

    def test_homestay_cannot_have_room_types(
        self,
        room_type_repository: RoomTypeRepository,
        accommodation_repository: AccommodationRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        homestay: Accommodation,
        make_room_images: Callable[[int], list[RoomImage]],
    ) -> None:
        use_case = CreateRoomTypeUseCase(
            room_type_repository, accommodation_repository, unit_of_work
        )

        with pytest.raises(InvalidOperationError):
            use_case.create_room_type(
                hotel_id=homestay.id,
                name="Garden Room",
                category=RoomCategory.DOUBLE,
                area=20.0,
                capacity=GuestCapacity(max_adults=2),
                bed_count=1,
                bed_type=BedType.QUEEN,
                description="Ground floor",
                amenities=["wifi"],
                images=make_room_images(3),
                inventory=1,
                base_price=Money.of(500000, "VND"),
            )

        assert room_type_repository.count() == 0


class TestRoomTypeManagement:
    def test_hotel_rooms_fill_inventory_then_stop(
        self,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        published_events: list[DomainEvent],
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type(inventory=2)

        room_type_management.create_hotel_room(room_type.id, "101")
        room_type_management.create_hotel_room(room_type.id, "102")
        with pytest.raises(InvalidOperationError):
            room_type_management.create_hotel_room(room_type.id, "103")

        found = room_type_repository.find_by_id(room_type.id)
        assert found is not None
        assert [room.room_number.value for room in found.get_rooms()] == ["101", "102"]
        assert all(room.status is HotelRoomStatus.AVAILABLE for room in found.get_rooms())
        assert [type(event) for event in published_events] == [
            HotelRoomCreatedEvent,
            HotelRoomCreatedEvent,
        ]

    def test_raising_inventory_allows_more_rooms(
        self,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        published_events: list[DomainEvent],
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type(inventory=1)
        room_type_management.create_hotel_room(room_type.id, "201")

        room_type_management.adjust_inventory(room_type.id, 2)
        room_type_management.create_hotel_room(room_type.id, "202")

        assert room_type_repository.count_hotel_rooms(room_type_id=room_type.id) == 2
        adjusted = [e for e in published_events if isinstance(e, RoomTypeInventoryAdjustedEvent)]
        assert len(adjusted) == 1
        assert (adjusted[0].previous_inventory, adjusted[0].new_inventory) == (1, 2)

    def test_inventory_cannot_drop_below_existing_rooms(
        self,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type(inventory=2)
        room_type_management.create_hotel_room(room_type.id, "301")
        room_type_management.create_hotel_room(room_type.id, "302")

        with pytest.raises(InvalidOperationError):
            room_type_management.adjust_inventory(room_type.id, 1)

        found = room_type_repository.find_by_id(room_type.id)
        assert found is not None
        assert found.inventory.value == 2

    def test_hotel_room_on_room_floor(
        self,
        room_type_management: RoomTypeManagementUseCase,
        hotel: Accommodation,
        add_floor: Callable[..., Floor],
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        floor = add_floor(hotel.id, 4)
        room_type = stored_room_type()

        hotel_room = room_type_management.create_hotel_room(
            room_type.id, "401", floor_id=floor.id, notes="Corner room"
        )

        assert hotel_room.floor_id == floor.id
        assert hotel_room.notes == "Corner room"

    def test_floor_must_exist(
        self,
        room_type_management: RoomTypeManagementUseCase,
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type()
        missing = Floor.create(
            hotel_id=room_type.hotel_id, floor_number=9, name="Ghost", floor_type="room_floor"
        )

        with pytest.raises(FloorNotFoundError):
            room_type_management.create_hotel_room(room_type.id, "901", floor_id=missing.id)

    def test_floor_of_another_hotel_is_rejected(
        self,
        db_session: Session,
        accommodation_repository: AccommodationRepository,
        room_type_management: RoomTypeManagementUseCase,
        add_floor: Callable[..., Floor],
        stored_room_type: Callable[..., RoomType],
        make_accommodation: Callable[..., Accommodation],
    ) -> None:
        other_hotel = accommodation_repository.save(
            make_accommodation(accommodation_type=AccommodationType.HOTEL)
        )
        db_session.commit()
        foreign_floor = add_floor(other_hotel.id, 1)
        room_type = stored_room_type()

        with pytest.raises(InvalidOperationError):
            room_type_management.create_hotel_room(room_type.id, "101", floor_id=foreign_floor.id)

    def test_service_or_blocked_floor_is_rejected(
        self,
        db_session: Session,
        floor_repository: FloorRepository,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        hotel: Accommodation,
        add_floor: Callable[..., Floor],
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        spa = add_floor(hotel.id, 0, floor_type=FloorType.SPA_FLOOR)
        closed = add_floor(hotel.id, 5)
        closed.close()
        floor_repository.save(closed)
        db_session.commit()
        room_type = stored_room_type()

        with pytest.raises(InvalidOperationError):
            room_type_management.create_hotel_room(room_type.id, "001", floor_id=spa.id)
        with pytest.raises(InvalidOperationError):
            room_type_management.create_hotel_room(room_type.id, "501", floor_id=closed.id)

        assert room_type_repository.count_hotel_rooms(room_type_id=room_type.id) == 0

    def test_blank_room_number(
        self,
        room_type_management: RoomTypeManagementUseCase,
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type()

        with pytest.raises(InvalidInputError):
            room_type_management.create_hotel_room(room_type.id, "   ")

    def test_update_and_status(
        self,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type()

        room_type_management.update_room_type(
            room_type.id,
            description="Refreshed decor",
            base_price=Money.of(1350000, "VND"),
        )
        room_type_management.deactivate_room_type(room_type.id)

        found = room_type_repository.find_by_id(room_type.id)
        assert found is not None
        assert found.description == "Refreshed decor"
        assert found.base_price == Money.of(1350000, "VND")
        assert found.status is RoomStatus.INACTIVE
        assert room_type_management.activate_room_type(room_type.id).is_active()

    def test_bare_price_uses_configured_currency(
        self,
        room_type_repository: RoomTypeRepository,
        floor_repository: FloorRepository,
        unit_of_work: SqlAlchemyUnitOfWork,
        stored_room_type: Callable[..., RoomType],
    ) -> None:
        room_type = stored_room_type()
        use_case = RoomTypeManagementUseCase(
            room_type_repository, floor_repository, unit_of_work, default_currency="USD"
        )

        updated = use_case.update_room_type(room_type.id, base_price=Decimal("89.5"))

        assert updated.base_price == Money.of("89.50", "USD")

    def test_missing_room_type(self, room_type_management: RoomTypeManagementUseCase) -> None:
        with pytest.raises(RoomTypeNotFoundError):
            room_type_management.create_hotel_room(RoomTypeId.generate(), "101")


class TestHotelRoomStatus:
    @pytest.fixture
    def hotel_room_id(
        self,
        room_type_management: RoomTypeManagementUseCase,
        stored_room_type: Callable[..., RoomType],
    ) -> HotelRoomId:
        room_type = stored_room_type()
        return room_type_management.create_hotel_room(room_type.id, "707").id

    @pytest.fixture
    def status_use_case(
        self, room_type_repository: RoomTypeRepository, unit_of_work: SqlAlchemyUnitOfWork
    ) -> HotelRoomStatusUseCase:
        return HotelRoomStatusUseCase(
            room_type_repository, unit_of_work, RoomAvailabilityService()
        )

    def test_occupy_then_release(
        self,
        room_type_repository: RoomTypeRepository,
        status_use_case: HotelRoomStatusUseCase,
        hotel_room_id: HotelRoomId,
    ) -> None:
        occupied = status_use_case.change_status(hotel_room_id, "occupy")
        assert occupied.status is HotelRoomStatus.OCCUPIED

        released = status_use_case.change_status(hotel_room_id, "release")

        assert released.status is HotelRoomStatus.AVAILABLE
        found = room_type_repository.find_hotel_room_by_id(hotel_room_id)
        assert found is not None
        assert found.is_available()

    def test_housekeeping_cycle(
        self, status_use_case: HotelRoomStatusUseCase, hotel_room_id: HotelRoomId
    ) -> None:
        assert status_use_case.change_status(hotel_room_id, "dirty").status is (
            HotelRoomStatus.DIRTY
        )
        assert status_use_case.change_status(hotel_room_id, "clean").status is (
            HotelRoomStatus.CLEAN
        )
        assert status_use_case.change_status(hotel_room_id, "out_of_order").status is (
            HotelRoomStatus.OUT_OF_ORDER
        )

    def test_release_requires_occupied_or_maintenance(
        self,
        room_type_repository: RoomTypeRepository,
        status_use_case: HotelRoomStatusUseCase,
        hotel_room_id: HotelRoomId,
    ) -> None:
        status_use_case.change_status(hotel_room_id, "dirty")

        with pytest.raises(InvalidStateError):
            status_use_case.change_status(hotel_room_id, "release")

        found = room_type_repository.find_hotel_room_by_id(hotel_room_id)
        assert found is not None
        assert found.status is HotelRoomStatus.DIRTY

    def test_maintenance_release(
        self, status_use_case: HotelRoomStatusUseCase, hotel_room_id: HotelRoomId
    ) -> None:
        status_use_case.change_status(hotel_room_id, "maintenance")

        assert status_use_case.change_status(hotel_room_id, "release").is_available()

    def test_unknown_action(
        self, status_use_case: HotelRoomStatusUseCase, hotel_room_id: HotelRoomId
    ) -> None:
        with pytest.raises(InvalidInputError, match="Unsupported hotel room action"):
            status_use_case.change_status(hotel_room_id, "teleport")

    def test_missing_hotel_room(self, status_use_case: HotelRoomStatusUseCase) -> None:
        with pytest.raises(HotelRoomNotFoundError):
            status_use_case.change_status(HotelRoomId.generate(), "occupy")
        with pytest.raises(HotelRoomNotFoundError):
            status_use_case.assign_hotel_room(HotelRoomId.generate())

    def test_assign_available_room(
        self,
        room_type_repository: RoomTypeRepository,
        status_use_case: HotelRoomStatusUseCase,
        hotel_room_id: HotelRoomId,
    ) -> None:
        assigned = status_use_case.assign_hotel_room(hotel_room_id)

        assert assigned.status is HotelRoomStatus.OCCUPIED
        found = room_type_repository.find_hotel_room_by_id(hotel_room_id)
        assert found is not None
        assert found.status is HotelRoomStatus.OCCUPIED

    def test_assign_refuses_room_that_is_not_ready(
        self,
        room_type_repository: RoomTypeRepository,
        status_use_case: HotelRoomStatusUseCase,
        hotel_room_id: HotelRoomId,
    ) -> None:
        status_use_case.change_status(hotel_room_id, "dirty")

        with pytest.raises(InvalidStateError):
            status_use_case.assign_hotel_room(hotel_room_id)

        found = room_type_repository.find_hotel_room_by_id(hotel_room_id)
        assert found is not None
        assert found.status is HotelRoomStatus.DIRTY

    def test_update_details(
        self,
        room_type_repository: RoomTypeRepository,
        status_use_case: HotelRoomStatusUseCase,
        hotel_room_id: HotelRoomId,
    ) -> None:
        status_use_case.update_details(hotel_room_id, room_number="708", notes="Renumbered")

        found = room_type_repository.find_hotel_room_by_id(hotel_room_id)
        assert found is not None
        assert found.room_number.value == "708"
        assert found.notes == "Renumbered"


class TestRoomQueries:
    def test_get_and_list(
        self,
        db_session: Session,
        room_repository: RoomRepository,
        room_type_repository: RoomTypeRepository,
        room_type_management: RoomTypeManagementUseCase,
        homestay: Accommodation,
        hotel: Accommodation,
        stored_room_type: Callable[..., RoomType],
        make_room: Callable[..., Room],
    ) -> None:
        room = room_repository.save(make_room(accommodation_id=homestay.id))
        db_session.commit()
        room_type = stored_room_type(inventory=3)
        for number in ("12", "10", "11"):
            room_type_management.create_hotel_room(room_type.id, number)
        queries = RoomQueriesUseCase(room_repository, room_type_repository)

        assert queries.get_room(room.id) == room
        assert queries.get_room_type(room_type.id).room_count == 3

        rooms = queries.list_homestay_rooms(Pagination(), accommodation_id=homestay.id)
        assert rooms.total == 1
        room_types = queries.list_room_types(Pagination(), hotel_id=hotel.id)
        assert [rt.id for rt in room_types.items] == [room_type.id]

        first_page = queries.list_hotel_rooms(
            Pagination(page=1, page_size=2), room_type_id=room_type.id
        )
        assert [hr.room_number.value for hr in first_page.items] == ["10", "11"]
        assert first_page.total == 3
        assert first_page.has_next
        hotel_room = queries.get_hotel_room(first_page.items[0].id)
        assert hotel_room.room_type_id == room_type.id

    def test_missing_entities(
        self, room_repository: RoomRepository, room_type_repository: RoomTypeRepository
    ) -> None:
        queries = RoomQueriesUseCase(room_repository, room_type_repository)

        with pytest.raises(RoomNotFoundError):
            queries.get_room(RoomId.generate())
        with pytest.raises(RoomTypeNotFoundError):
            queries.get_room_type(RoomTypeId.generate())
        with pytest.raises(HotelRoomNotFoundError):
            queries.get_hotel_room(HotelRoomId.generate())
