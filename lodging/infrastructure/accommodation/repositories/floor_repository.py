"""Repository for hotel Floor entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.common.value_objects import AccommodationId, FloorId
from lodging.infrastructure.accommodation.mappers.floor_mapper import FloorMapper
from lodging.infrastructure.common.row_tracker import RowTracker
from lodging.models import Floor as FloorORM


class FloorRepository:
    """SQLAlchemy repository for Floor entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FloorMapper()
        self.rows = RowTracker(db)

    def _to_domain(self, orm_model: FloorORM) -> Floor:
        floor = self.mapper.to_domain(orm_model)
        self.rows.remember(self.mapper.to_orm(floor))
        return floor

    def save(self, floor: Floor) -> Floor:
        """Persist a floor (insert or update)."""
        self.rows.save(self.mapper.to_orm(floor))
        self.db.flush()
        return floor

    def find_by_id(self, floor_id: FloorId) -> Floor | None:
        stmt = select(FloorORM).where(FloorORM.id == floor_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def find_by_hotel_id(self, hotel_id: AccommodationId) -> list[Floor]:
        """
        Get all floors of a hotel.

        Returns:
            Floors ordered by floor number, ground floor first
        """
        stmt = (
            select(FloorORM)
            .where(FloorORM.hotel_id == hotel_id.value)
            .order_by(FloorORM.floor_number)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._to_domain(orm) for orm in orm_models]

    def delete(self, floor_id: FloorId) -> bool:
        """
        Delete a floor. Hotel rooms on it keep existing with no floor.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(FloorORM, floor_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.flush()
        return True
