"""Repository for homestay Room aggregates."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lodging.domain.common.value_objects import AccommodationId, RoomId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.value_objects import RoomStatus
from lodging.infrastructure.common.row_tracker import RowTracker
from lodging.infrastructure.room.mappers.room_mapper import RoomMapper
from lodging.models import Room as RoomORM


class RoomRepository:
    """SQLAlchemy repository for homestay Room aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = RoomMapper()
        self.rows = RowTracker(db)

    def _to_domain(self, orm_model: RoomORM) -> Room:
        room = self.mapper.to_domain(orm_model)
        self.rows.remember(self.mapper.to_orm(room))
        return room

    def save(self, room: Room) -> Room:
        """
        Persist a room (insert, or update of the columns changed since it was loaded).

        Returns the same aggregate instance so pending domain events survive.
        """
        self.rows.save(self.mapper.to_orm(room))
        self.db.flush()
        return room

    def find_by_id(self, room_id: RoomId) -> Room | None:
        stmt = select(RoomORM).where(RoomORM.id == room_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def lock_by_id(self, room_id: RoomId) -> Room | None:
        """Load a room with SELECT ... FOR UPDATE for inventory and status changes."""
        stmt = (
            select(RoomORM)
            .where(RoomORM.id == room_id.value)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def find_by_accommodation_id(self, accommodation_id: AccommodationId) -> list[Room]:
        """Get all rooms of a homestay, oldest first."""
        stmt = (
            select(RoomORM)
            .where(RoomORM.accommodation_id == accommodation_id.value)
            .order_by(RoomORM.created_at, RoomORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._to_domain(orm) for orm in orm_models]

    def find_many(
        self,
        limit: int,
        offset: int,
        accommodation_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> list[Room]:
        stmt = select(RoomORM)
        if accommodation_id is not None:
            stmt = stmt.where(RoomORM.accommodation_id == accommodation_id.value)
        if status is not None:
            stmt = stmt.where(RoomORM.status == status.value)
        stmt = stmt.order_by(RoomORM.created_at, RoomORM.id).offset(offset).limit(limit)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._to_domain(orm) for orm in orm_models]

    def count(
        self,
        accommodation_id: AccommodationId | None = None,
        status: RoomStatus | None = None,
    ) -> int:
        stmt = select(func.count(RoomORM.id))
        if accommodation_id is not None:
            stmt = stmt.where(RoomORM.accommodation_id == accommodation_id.value)
        if status is not None:
            stmt = stmt.where(RoomORM.status == status.value)
        return self.db.execute(stmt).scalar_one()
