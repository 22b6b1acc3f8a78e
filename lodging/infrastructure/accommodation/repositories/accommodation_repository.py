"""Repository for Accommodation aggregates."""

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import AccommodationStatus, AccommodationType
from lodging.domain.common.value_objects import AccommodationId, UserId
from lodging.infrastructure.accommodation.mappers.accommodation_mapper import AccommodationMapper
from lodging.infrastructure.common.row_tracker import RowTracker
from lodging.models import Accommodation as AccommodationORM


class AccommodationRepository:
    """
    SQLAlchemy repository for Accommodation aggregates.

    Writes are flushed, never committed; the unit of work owns the transaction.
    A save writes only the columns the aggregate changed since it was loaded.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AccommodationMapper()
        self.rows = RowTracker(db)

    def _to_domain(self, orm_model: AccommodationORM) -> Accommodation:
        accommodation = self.mapper.to_domain(orm_model)
        self.rows.remember(self.mapper.to_orm(accommodation))
        return accommodation

    def _paginate(
        self, stmt: Select[tuple[AccommodationORM]], limit: int | None, offset: int
    ) -> list[Accommodation]:
        stmt = stmt.order_by(AccommodationORM.created_at.desc(), AccommodationORM.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._to_domain(orm) for orm in orm_models]

    def save(self, accommodation: Accommodation) -> Accommodation:
        """
        Persist an accommodation (insert or update).

        Returns the same aggregate instance so pending domain events survive.
        """
        self.rows.save(self.mapper.to_orm(accommodation))
        self.db.flush()
        return accommodation

    def find_by_id(self, accommodation_id: AccommodationId) -> Accommodation | None:
        stmt = select(AccommodationORM).where(AccommodationORM.id == accommodation_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def lock_by_id(self, accommodation_id: AccommodationId) -> Accommodation | None:
        """
        Load an accommodation with SELECT ... FOR UPDATE.

        The row stays locked until the surrounding transaction commits or
        rolls back. Backends without row locks (SQLite) ignore the clause.
        """
        stmt = (
            select(AccommodationORM)
            .where(AccommodationORM.id == accommodation_id.value)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def find_by_owner_id(
        self, owner_id: UserId, limit: int | None = None, offset: int = 0
    ) -> list[Accommodation]:
        stmt = select(AccommodationORM).where(AccommodationORM.owner_id == owner_id.value)
        return self._paginate(stmt, limit, offset)

    def find_by_type(
        self, accommodation_type: AccommodationType, limit: int | None = None, offset: int = 0
    ) -> list[Accommodation]:
        stmt = select(AccommodationORM).where(AccommodationORM.type == accommodation_type.value)
        return self._paginate(stmt, limit, offset)

    def find_all(
        self,
        limit: int | None = None,
        offset: int = 0,
        status: AccommodationStatus | None = None,
    ) -> list[Accommodation]:
        stmt = select(AccommodationORM)
        if status is not None:
            stmt = stmt.where(AccommodationORM.status == status.value)
        return self._paginate(stmt, limit, offset)

    def count(
        self,
        owner_id: UserId | None = None,
        accommodation_type: AccommodationType | None = None,
        status: AccommodationStatus | None = None,
    ) -> int:
        stmt = select(func.count(AccommodationORM.id))
        if owner_id is not None:
            stmt = stmt.where(AccommodationORM.owner_id == owner_id.value)
        if accommodation_type is not None:
            stmt = stmt.where(AccommodationORM.type == accommodation_type.value)
        if status is not None:
            stmt = stmt.where(AccommodationORM.status == status.value)
        return self.db.execute(stmt).scalar_one()

    def delete(self, accommodation_id: AccommodationId) -> bool:
        """
        Hard delete an accommodation.

        Floors, rooms and room types go with it through ON DELETE CASCADE.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(AccommodationORM, accommodation_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.flush()
        return True
