"""Mapper for Floor ORM ↔ Domain conversion."""

from lodging.domain.accommodation.entities.floor import Floor
from lodging.domain.accommodation.value_objects import FloorStatus, FloorType
from lodging.domain.common.value_objects import AccommodationId, FloorId
from lodging.models import Floor as FloorORM


class FloorMapper:
    """Mapper for Floor ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FloorORM) -> Floor:
        return Floor.create_with_id(
            id=FloorId(orm_model.id),
            hotel_id=AccommodationId(orm_model.hotel_id),
            floor_number=orm_model.floor_number,
            name=orm_model.name,
            floor_type=FloorType.parse(orm_model.floor_type, field="floor_type"),
            status=FloorStatus.parse(orm_model.status, field="status"),
            description=orm_model.description,
            amenities=list(orm_model.amenities or []),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Floor, orm_model: FloorORM | None = None) -> FloorORM:
        if orm_model is None:
            orm_model = FloorORM(id=domain_entity.id.value)

        orm_model.hotel_id = domain_entity.hotel_id.value
        orm_model.floor_number = domain_entity.floor_number
        orm_model.name = domain_entity.name
        orm_model.floor_type = domain_entity.floor_type.value
        orm_model.status = domain_entity.status.value
        orm_model.description = domain_entity.description
        orm_model.amenities = list(domain_entity.amenities)
        orm_model.created_at = domain_entity.created_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
