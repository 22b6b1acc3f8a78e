"""Create accommodations, floors, rooms, room_types and hotel_rooms tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
    ]


def _room_attributes() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("area", sa.Float(), nullable=False),
        sa.Column("max_adults", sa.Integer(), nullable=False),
        sa.Column("max_children", sa.Integer(), nullable=False),
        sa.Column("bed_count", sa.Integer(), nullable=False),
        sa.Column("bed_type", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("inventory", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
    ]


def upgrade() -> None:
    """Create lodging inventory tables."""
    op.create_table(
        "accommodations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("ward", sa.String(255), nullable=False),
        sa.Column("district", sa.String(255), nullable=False),
        sa.Column("province", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("check_in_time", sa.String(5), nullable=False),
        sa.Column("check_out_time", sa.String(5), nullable=False),
        sa.Column("children_allowed", sa.Boolean(), nullable=False),
        sa.Column("pets_allowed", sa.Boolean(), nullable=False),
        sa.Column("smoking_allowed", sa.Boolean(), nullable=False),
        sa.Column("cancellation_type", sa.String(20), nullable=False),
        sa.Column("free_cancellation_days", sa.Integer(), nullable=False),
        sa.Column("refund_percentage", sa.Integer(), nullable=False),
        sa.Column("approved_by", sa.Uuid(), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("star_rating", sa.Integer(), nullable=True),
        sa.Column("total_floors", sa.Integer(), nullable=True),
        sa.Column("total_rooms", sa.Integer(), nullable=True),
        sa.Column("year_built", sa.Integer(), nullable=True),
        sa.Column("year_renovated", sa.Integer(), nullable=True),
        sa.Column("contact_phone", sa.String(32), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_accommodations_status"), "accommodations", ["status"], unique=False
    )
    op.create_index(
        op.f("ix_accommodations_owner_id"), "accommodations", ["owner_id"], unique=False
    )
    op.create_index(
        "ix_accommodations_type_status", "accommodations", ["type", "status"], unique=False
    )

    op.create_table(
        "floors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("hotel_id", sa.Uuid(), nullable=False),
        sa.Column("floor_number", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("floor_type", sa.String(30), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("amenities", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["hotel_id"], ["accommodations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("hotel_id", "floor_number", name="uq_floors_hotel_number"),
    )
    op.create_index(op.f("ix_floors_hotel_id"), "floors", ["hotel_id"], unique=False)

    op.create_table(
        "rooms",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("accommodation_id", sa.Uuid(), nullable=False),
        *_room_attributes(),
        sa.Column("base_price_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("base_price_currency", sa.String(3), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["accommodation_id"], ["accommodations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rooms_accommodation_id"), "rooms", ["accommodation_id"], unique=False)
    op.create_index(op.f("ix_rooms_status"), "rooms", ["status"], unique=False)

    op.create_table(
        "room_types",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("hotel_id", sa.Uuid(), nullable=False),
        *_room_attributes(),
        sa.Column("base_price_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("base_price_currency", sa.String(3), nullable=False),
        sa.Column("view_direction", sa.String(100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["hotel_id"], ["accommodations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_room_types_hotel_id"), "room_types", ["hotel_id"], unique=False)
    op.create_index(op.f("ix_room_types_status"), "room_types", ["status"], unique=False)

    op.create_table(
        "hotel_rooms",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("room_type_id", sa.Uuid(), nullable=False),
        sa.Column("room_number", sa.String(32), nullable=False),
        sa.Column("floor_id", sa.Uuid(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["room_type_id"], ["room_types.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["floor_id"], ["floors.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_hotel_rooms_room_type_id"), "hotel_rooms", ["room_type_id"], unique=False
    )
    op.create_index(op.f("ix_hotel_rooms_floor_id"), "hotel_rooms", ["floor_id"], unique=False)
    op.create_index(op.f("ix_hotel_rooms_status"), "hotel_rooms", ["status"], unique=False)
    op.create_index(
        "ix_hotel_rooms_type_number", "hotel_rooms", ["room_type_id", "room_number"], unique=False
    )


def downgrade() -> None:
    """Drop lodging inventory tables."""
    op.drop_index("ix_hotel_rooms_type_number", table_name="hotel_rooms")
    op.drop_index(op.f("ix_hotel_rooms_status"), table_name="hotel_rooms")
    op.drop_index(op.f("ix_hotel_rooms_floor_id"), table_name="hotel_rooms")
    op.drop_index(op.f("ix_hotel_rooms_room_type_id"), table_name="hotel_rooms")
    op.drop_table("hotel_rooms")
    op.drop_index(op.f("ix_room_types_status"), table_name="room_types")
    op.drop_index(op.f("ix_room_types_hotel_id"), table_name="room_types")
    op.drop_table("room_types")
    op.drop_index(op.f("ix_rooms_status"), table_name="rooms")
    op.drop_index(op.f("ix_rooms_accommodation_id"), table_name="rooms")
    op.drop_table("rooms")
    op.drop_index(op.f("ix_floors_hotel_id"), table_name="floors")
    op.drop_table("floors")
    op.drop_index("ix_accommodations_type_status", table_name="accommodations")
    op.drop_index(op.f("ix_accommodations_owner_id"), table_name="accommodations")
    op.drop_index(op.f("ix_accommodations_status"), table_name="accommodations")
    op.drop_table("accommodations")
