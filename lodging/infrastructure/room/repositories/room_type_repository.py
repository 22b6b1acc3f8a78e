"""Repository for hotel RoomType aggregates and their hotel rooms."""

import uuid
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lodging.domain.common.value_objects import AccommodationId, FloorId, HotelRoomId, RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import HotelRoomStatus, RoomStatus
from lodging.infrastructure.common.row_tracker import RowTracker
from lodging.infrastructure.room.mappers.hotel_room_mapper import HotelRoomMapper
from lodging.infrastructure.room.mappers.room_type_mapper import RoomTypeMapper
from lodging.models import HotelRoom as HotelRoomORM
from lodging.models import RoomType as RoomTypeORM


class RoomTypeRepository:
    """
    SQLAlchemy repository for RoomType aggregates.

    A RoomType is always loaded with all of its hotel rooms, in creation
    order, because the inventory cap is checked against them. Saving a room
    type inserts its new hotel rooms but never rewrites existing ones; those
    change only through save_hotel_room under their own row lock.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = RoomTypeMapper()
        self.hotel_room_mapper = HotelRoomMapper()
        self.rows = RowTracker(db)

    def _hotel_room_to_domain(self, orm_model: HotelRoomORM) -> HotelRoom:
        hotel_room = self.hotel_room_mapper.to_domain(orm_model)
        self.rows.remember(self.hotel_room_mapper.to_orm(hotel_room))
        return hotel_room

    def _to_domain(self, orm_model: RoomTypeORM) -> RoomType:
        return self._to_domain_many([orm_model])[0]

    def _to_domain_many(self, orm_models: Sequence[RoomTypeORM]) -> list[RoomType]:
        """Map room types, loading their hotel rooms in one query."""
        if not orm_models:
            return []
        ids = [orm.id for orm in orm_models]
        stmt = (
            select(HotelRoomORM)
            .where(HotelRoomORM.room_type_id.in_(ids))
            .order_by(HotelRoomORM.created_at, HotelRoomORM.id)
        )
        rooms_by_type: dict[uuid.UUID, list[HotelRoom]] = {type_id: [] for type_id in ids}
        for room_orm in self.db.execute(stmt).scalars().all():
            rooms_by_type[room_orm.room_type_id].append(self._hotel_room_to_domain(room_orm))
        room_types = []
        for orm in orm_models:
            room_type = self.mapper.to_domain(orm, rooms_by_type[orm.id])
            self.rows.remember(self.mapper.to_orm(room_type))
            room_types.append(room_type)
        return room_types

    # Room types

    def save(self, room_type: RoomType) -> RoomType:
        """
        Persist a room type and insert hotel rooms created on it.

        Hotel rooms already stored are left as they are in the database.

        Returns the same aggregate instance so pending domain events survive.
        """
        self.rows.save(self.mapper.to_orm(room_type))
        # Parent row must exist before its hotel rooms reference it
        self.db.flush()
        for hotel_room in room_type.get_rooms():
            self.rows.insert_if_new(self.hotel_room_mapper.to_orm(hotel_room))
        self.db.flush()
        return room_type

    def find_by_id(self, room_type_id: RoomTypeId) -> RoomType | None:
        stmt = select(RoomTypeORM).where(RoomTypeORM.id == room_type_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def lock_by_id(self, room_type_id: RoomTypeId) -> RoomType | None:
        """
        Load a room type with SELECT ... FOR UPDATE.

        Concurrent hotel room creation on the same type serializes on this lock,
        so the room count read here stays valid until commit.
        """
        stmt = (
            select(RoomTypeORM)
            .where(RoomTypeORM.id == room_type_id.value)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def find_by_hotel_id(self, hotel_id: AccommodationId) -> list[RoomType]:
        stmt = (
            select(RoomTypeORM)
            .where(RoomTypeORM.hotel_id == hotel_id.value)
            .order_by(RoomTypeORM.created_at, RoomTypeORM.id)
        )
        return self._to_domain_many(self.db.execute(stmt).scalars().all())

    def find_many(
        self,
        limit: int,
        offset: int,
        hotel_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> list[RoomType]:
        stmt = select(RoomTypeORM)
        if hotel_id is not None:
            stmt = stmt.where(RoomTypeORM.hotel_id == hotel_id.value)
        if status is not None:
            stmt = stmt.where(RoomTypeORM.status == status.value)
        stmt = stmt.order_by(RoomTypeORM.created_at, RoomTypeORM.id).offset(offset).limit(limit)
        return self._to_domain_many(self.db.execute(stmt).scalars().all())

    def count(
        self,
        hotel_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> int:
        stmt = select(func.count(RoomTypeORM.id))
        if hotel_id is not None:
            stmt = stmt.where(RoomTypeORM.hotel_id == hotel_id.value)
        if status is not None:
            stmt = stmt.where(RoomTypeORM.status == status.value)
        return self.db.execute(stmt).scalar_one()

    # Hotel rooms

    def save_hotel_room(self, hotel_room: HotelRoom) -> HotelRoom:
        """
        Persist one hotel room whose room type already exists.

        Only columns changed since the room was loaded are written.
        """
        self.rows.save(self.hotel_room_mapper.to_orm(hotel_room))
        self.db.flush()
        return hotel_room

    def find_hotel_room_by_id(self, hotel_room_id: HotelRoomId) -> HotelRoom | None:
        stmt = select(HotelRoomORM).where(HotelRoomORM.id == hotel_room_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._hotel_room_to_domain(orm_model) if orm_model else None

    def lock_hotel_room_by_id(self, hotel_room_id: HotelRoomId) -> HotelRoom | None:
        stmt = (
            select(HotelRoomORM)
            .where(HotelRoomORM.id == hotel_room_id.value)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._hotel_room_to_domain(orm_model) if orm_model else None

    def find_hotel_rooms_by_type(self, room_type_id: RoomTypeId) -> list[HotelRoom]:
        stmt = (
            select(HotelRoomORM)
            .where(HotelRoomORM.room_type_id == room_type_id.value)
            .order_by(HotelRoomORM.room_number)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._hotel_room_to_domain(orm) for orm in orm_models]

    def find_many_hotel_rooms(
        self,
        limit: int,
        offset: int,
        room_type_id: RoomTypeId | None = None,
        floor_id: FloorId | None = None,
        status: HotelRoomStatus | None = None,
    ) -> list[HotelRoom]:
        stmt = select(HotelRoomORM)
        if room_type_id is not None:
            stmt = stmt.where(HotelRoomORM.room_type_id == room_type_id.value)
        if floor_id is not None:
            stmt = stmt.where(HotelRoomORM.floor_id == floor_id.value)
        if status is not None:
            stmt = stmt.where(HotelRoomORM.status == status.value)
        stmt = stmt.order_by(HotelRoomORM.room_number, HotelRoomORM.id).offset(offset).limit(limit)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._hotel_room_to_domain(orm) for orm in orm_models]

    def count_hotel_rooms(
        self,
        room_type_id: RoomTypeId | None = None,
        floor_id: FloorId | None = None,
        status: HotelRoomStatus | None = None,
    ) -> int:
        stmt = select(func.count(HotelRoomORM.id))
        if room_type_id is not None:
            stmt = stmt.where(HotelRoomORM.room_type_id == room_type_id.value)
        if floor_id is not None:
            stmt = stmt.where(HotelRoomORM.floor_id == floor_id.value)
        if status is not None:
            stmt = stmt.where(HotelRoomORM.status == status.value)
        return self.db.execute(stmt).scalar_one()
