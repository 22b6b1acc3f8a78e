"""Mapper for homestay Room ORM ↔ Domain conversion."""

from lodging.domain.common.value_objects import AccommodationId, Money, RoomId
from lodging.domain.room.entities.room import Room
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
    RoomStatus,
)
from lodging.models import Room as RoomORM


class RoomMapper:
    """Mapper for Room ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: RoomORM) -> Room:
        base_price = None
        if orm_model.base_price_amount is not None and orm_model.base_price_currency:
            base_price = Money(
                amount=orm_model.base_price_amount, currency=orm_model.base_price_currency
            )
        return Room.create_with_id(
            id=RoomId(orm_model.id),
            accommodation_id=AccommodationId(orm_model.accommodation_id),
            name=orm_model.name,
            category=RoomCategory.parse(orm_model.category, field="category"),
            area=orm_model.area,
            guest_capacity=GuestCapacity(
                max_adults=orm_model.max_adults, max_children=orm_model.max_children
            ),
            bed_count=orm_model.bed_count,
            bed_type=BedType.parse(orm_model.bed_type, field="bed_type"),
            description=orm_model.description,
            amenities=list(orm_model.amenities or []),
            images=[RoomImage.from_primitive(image) for image in orm_model.images or []],
            inventory=RoomInventory(orm_model.inventory),
            status=RoomStatus.parse(orm_model.status, field="status"),
            base_price=base_price,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Room, orm_model: RoomORM | None = None) -> RoomORM:
        if orm_model is None:
            orm_model = RoomORM(id=domain_entity.id.value)

        orm_model.accommodation_id = domain_entity.accommodation_id.value
        orm_model.name = domain_entity.name
        orm_model.category = domain_entity.category.value
        orm_model.area = domain_entity.area
        orm_model.max_adults = domain_entity.guest_capacity.max_adults
        orm_model.max_children = domain_entity.guest_capacity.max_children
        orm_model.bed_count = domain_entity.bed_count
        orm_model.bed_type = domain_entity.bed_type.value
        orm_model.description = domain_entity.description
        orm_model.amenities = list(domain_entity.amenities)
        orm_model.images = [image.to_primitive() for image in domain_entity.images]
        orm_model.inventory = domain_entity.inventory.value
        orm_model.status = domain_entity.status.value
        price = domain_entity.base_price
        orm_model.base_price_amount = price.amount if price else None
        orm_model.base_price_currency = price.currency if price else None
        orm_model.created_at = domain_entity.created_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
