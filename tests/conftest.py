"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.orm import Session, sessionmaker

from lodging import models  # noqa: F401  (registers tables on Base.metadata)
from lodging.database import Base, create_database_engine
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import (
    AccommodationType,
    Address,
    CancellationPolicy,
    CancellationPolicyType,
    Location,
    Policies,
)
from lodging.domain.common import DomainEvent
from lodging.domain.common.identifiers import IdGenerator, default_id_generator
from lodging.domain.common.value_objects import AccommodationId, Money, UserId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
)
from lodging.infrastructure.common import InMemoryEventBus, SqlAlchemyUnitOfWork
from lodging.infrastructure.common.row_tracker import column_values

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_database_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fresh_session(db_session: Session) -> Generator[Session, None, None]:
    """A second session on the test database, with an empty identity map."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


def stored_columns(row: Base) -> dict[str, Any]:
    """
    Column values of a mapped row, with datetimes as naive UTC.

    SQLite drops tzinfo, so values read back are compared on their UTC wall time.
    """
    values = column_values(row)
    for name, value in values.items():
        if isinstance(value, datetime) and value.tzinfo is not None:
            values[name] = value.astimezone(UTC).replace(tzinfo=None)
    return values


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def published_events(event_bus: InMemoryEventBus) -> list[DomainEvent]:
    """Every event published on the bus during the test, in order."""
    received: list[DomainEvent] = []
    event_bus.subscribe(DomainEvent, received.append)
    return received


@pytest.fixture
def unit_of_work(db_session: Session, event_bus: InMemoryEventBus) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(db_session, event_publisher=event_bus)


class FakeUserAuthorization:
    """Authorization port answering from a fixed set of super admins."""

    def __init__(self) -> None:
        self.super_admins: set[UserId] = set()

    def is_super_admin(self, user_id: UserId) -> bool:
        return user_id in self.super_admins


class FakeBookingPolicy:
    """Booking policy port answering from a fixed set of booked accommodations."""

    def __init__(self) -> None:
        self.booked: set[AccommodationId] = set()
        self.calls: list[tuple[AccommodationId, int]] = []

    def has_upcoming_bookings(self, accommodation_id: AccommodationId, within_days: int) -> bool:
        self.calls.append((accommodation_id, within_days))
        return accommodation_id in self.booked


@pytest.fixture
def user_authorization() -> FakeUserAuthorization:
    return FakeUserAuthorization()


@pytest.fixture
def booking_policy() -> FakeBookingPolicy:
    return FakeBookingPolicy()


# Domain object builders


def build_accommodation(
    accommodation_type: AccommodationType = AccommodationType.HOMESTAY,
    owner_id: UserId | None = None,
    name: str = "Hoi An Riverside",
    id_generator: IdGenerator = default_id_generator,
    **overrides: Any,
) -> Accommodation:
    image_count = 3 if accommodation_type is AccommodationType.HOMESTAY else 5
    values: dict[str, Any] = {
        "type": accommodation_type,
        "name": name,
        "owner_id": owner_id or UserId.generate(),
        "address": Address(
            street="12 Bach Dang",
            ward="Minh An",
            district="Hoi An",
            province="Quang Nam",
            country="Vietnam",
        ),
        "location": Location(latitude=15.877, longitude=108.326),
        "description": "Quiet rooms by the river",
        "images": [f"https://img.example.com/{i}.jpg" for i in range(image_count)],
        "amenities": ["wifi", "breakfast"],
        "policies": Policies(check_in_time="14:00", check_out_time="12:00"),
        "cancellation_policy": CancellationPolicy(
            type=CancellationPolicyType.MODERATE,
            free_cancellation_days=3,
            refund_percentage=50,
        ),
        "id_generator": id_generator,
    }
    values.update(overrides)
    return Accommodation.create(**values)


def room_images(count: int) -> list[RoomImage]:
    return [RoomImage(url=f"https://img.example.com/room-{i}.jpg", order=i) for i in range(count)]


def build_room(
    accommodation_id: AccommodationId | None = None,
    inventory: int = 1,
    id_generator: IdGenerator = default_id_generator,
    **overrides: Any,
) -> Room:
    values: dict[str, Any] = {
        "accommodation_id": accommodation_id or AccommodationId.generate(),
        "name": "Garden Double",
        "category": RoomCategory.DOUBLE,
        "area": 24.5,
        "guest_capacity": GuestCapacity(max_adults=2, max_children=1),
        "bed_count": 1,
        "bed_type": BedType.QUEEN,
        "description": "Opens onto the garden",
        "amenities": ["wifi", "air conditioning"],
        "images": room_images(2),
        "inventory": RoomInventory(inventory),
        "id_generator": id_generator,
    }
    values.update(overrides)
    return Room.create(**values)


def build_room_type(
    hotel_id: AccommodationId | None = None,
    inventory: int = 2,
    id_generator: IdGenerator = default_id_generator,
    **overrides: Any,
) -> RoomType:
    values: dict[str, Any] = {
        "hotel_id": hotel_id or AccommodationId.generate(),
        "name": "Deluxe King",
        "category": RoomCategory.DOUBLE,
        "area": 32.0,
        "capacity": GuestCapacity(max_adults=2),
        "bed_count": 1,
        "bed_type": BedType.KING,
        "description": "City view, king bed",
        "amenities": ["wifi", "minibar"],
        "images": room_images(3),
        "inventory": RoomInventory(inventory),
        "base_price": Money(amount=Decimal("1200000"), currency="VND"),
        "id_generator": id_generator,
    }
    values.update(overrides)
    return RoomType.create(**values)


@pytest.fixture
def make_accommodation() -> Callable[..., Accommodation]:
    return build_accommodation


@pytest.fixture
def make_room() -> Callable[..., Room]:
    return build_room


@pytest.fixture
def make_room_type() -> Callable[..., RoomType]:
    return build_room_type


@pytest.fixture
def make_room_images() -> Callable[[int], list[RoomImage]]:
    return room_images
