"""Database models."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from lodging.database import Base


class TimestampMixin:
    """Timestamps are owned by the domain objects; server defaults cover raw inserts."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )


class Accommodation(TimestampMixin, Base):
    """Homestay or hotel with its approval workflow and policies."""

    __tablename__ = "accommodations"
    __table_args__ = (Index("ix_accommodations_type_status", "type", "status"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    # Address
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    ward: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(255), nullable=False)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False)

    # Location
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    amenities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Policies
    check_in_time: Mapped[str] = mapped_column(String(5), nullable=False)
    check_out_time: Mapped[str] = mapped_column(String(5), nullable=False)
    children_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pets_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    smoking_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Cancellation policy
    cancellation_type: Mapped[str] = mapped_column(String(20), nullable=False)
    free_cancellation_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    refund_percentage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Approval
    approved_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Hotel profile
    star_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_floors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_rooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_built: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_renovated: Mapped[int | None] = mapped_column(Integer, nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Accommodation(id={self.id}, type='{self.type}', status='{self.status}')>"


class Floor(TimestampMixin, Base):
    """Level of a hotel."""

    __tablename__ = "floors"
    __table_args__ = (UniqueConstraint("hotel_id", "floor_number", name="uq_floors_hotel_number"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    floor_number: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    floor_type: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amenities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Floor(id={self.id}, hotel_id={self.hotel_id}, number={self.floor_number})>"


class RoomAttributesMixin:
    """Columns shared by homestay rooms and hotel room types."""

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    area: Mapped[float] = mapped_column(Float, nullable=False)
    max_adults: Mapped[int] = mapped_column(Integer, nullable=False)
    max_children: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bed_count: Mapped[int] = mapped_column(Integer, nullable=False)
    bed_type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    amenities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # [{"url": ..., "type": ..., "order": ...}]
    images: Mapped[list[dict[str, object]]] = mapped_column(JSON, nullable=False, default=list)
    inventory: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)


class Room(TimestampMixin, RoomAttributesMixin, Base):
    """Homestay room listing of one or more identical units."""

    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    accommodation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    base_price_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    base_price_currency: Mapped[str | None] = mapped_column(String(3), nullable=True)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, name='{self.name}', inventory={self.inventory})>"


class RoomType(TimestampMixin, RoomAttributesMixin, Base):
    """Hotel room category; owns hotel_rooms up to its inventory."""

    __tablename__ = "room_types"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    base_price_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    base_price_currency: Mapped[str] = mapped_column(String(3), nullable=False)
    view_direction: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<RoomType(id={self.id}, name='{self.name}', inventory={self.inventory})>"


class HotelRoom(TimestampMixin, Base):
    """Physical hotel room."""

    __tablename__ = "hotel_rooms"
    __table_args__ = (Index("ix_hotel_rooms_type_number", "room_type_id", "room_number"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    room_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("room_types.id", ondelete="CASCADE"), nullable=False, index=True
    )
    room_number: Mapped[str] = mapped_column(String(32), nullable=False)
    floor_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("floors.id", ondelete="SET NULL"), nullable=True, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<HotelRoom(id={self.id}, number='{self.room_number}', status='{self.status}')>"
