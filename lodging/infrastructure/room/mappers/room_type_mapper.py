"""Mapper for RoomType ORM ↔ Domain conversion."""

from lodging.domain.common.value_objects import AccommodationId, Money, RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.entities.room_type import RoomType
from lodging.domain.room.value_objects import (
    BedType,
    GuestCapacity,
    RoomCategory,
    RoomImage,
    RoomInventory,
    RoomStatus,
)
from lodging.models import RoomType as RoomTypeORM


class RoomTypeMapper:
    """
    Mapper for RoomType ORM ↔ Domain conversion.

    Hotel rooms live in their own table; the repository maps them with
    HotelRoomMapper and passes them in for reconstitution.
    """

    def to_domain(
        self, orm_model: RoomTypeORM, hotel_rooms: list[HotelRoom] | None = None
    ) -> RoomType:
        return RoomType.create_with_id(
            id=RoomTypeId(orm_model.id),
            hotel_id=AccommodationId(orm_model.hotel_id),
            name=orm_model.name,
            category=RoomCategory.parse(orm_model.category, field="category"),
            area=orm_model.area,
            capacity=GuestCapacity(
                max_adults=orm_model.max_adults, max_children=orm_model.max_children
            ),
            bed_count=orm_model.bed_count,
            bed_type=BedType.parse(orm_model.bed_type, field="bed_type"),
            description=orm_model.description,
            amenities=list(orm_model.amenities or []),
            images=[RoomImage.from_primitive(image) for image in orm_model.images or []],
            inventory=RoomInventory(orm_model.inventory),
            base_price=Money(
                amount=orm_model.base_price_amount, currency=orm_model.base_price_currency
            ),
            status=RoomStatus.parse(orm_model.status, field="status"),
            view_direction=orm_model.view_direction,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            rooms=hotel_rooms,
        )

    def to_orm(self, domain_entity: RoomType, orm_model: RoomTypeORM | None = None) -> RoomTypeORM:
        if orm_model is None:
            orm_model = RoomTypeORM(id=domain_entity.id.value)

        orm_model.hotel_id = domain_entity.hotel_id.value
        orm_model.name = domain_entity.name
        orm_model.category = domain_entity.category.value
        orm_model.area = domain_entity.area
        orm_model.max_adults = domain_entity.capacity.max_adults
        orm_model.max_children = domain_entity.capacity.max_children
        orm_model.bed_count = domain_entity.bed_count
        orm_model.bed_type = domain_entity.bed_type.value
        orm_model.description = domain_entity.description
        orm_model.amenities = list(domain_entity.amenities)
        orm_model.images = [image.to_primitive() for image in domain_entity.images]
        orm_model.inventory = domain_entity.inventory.value
        orm_model.base_price_amount = domain_entity.base_price.amount
        orm_model.base_price_currency = domain_entity.base_price.currency
        orm_model.status = domain_entity.status.value
        orm_model.view_direction = domain_entity.view_direction
        orm_model.created_at = domain_entity.created_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
