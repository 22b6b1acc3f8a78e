"""Mapper for HotelRoom ORM ↔ Domain conversion."""

from lodging.domain.common.value_objects import FloorId, HotelRoomId, RoomTypeId
from lodging.domain.room.entities.hotel_room import HotelRoom
from lodging.domain.room.value_objects import HotelRoomStatus, RoomNumber
from lodging.models import HotelRoom as HotelRoomORM


class HotelRoomMapper:
    """Mapper for HotelRoom ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: HotelRoomORM) -> HotelRoom:
        return HotelRoom.create_with_id(
            id=HotelRoomId(orm_model.id),
            room_type_id=RoomTypeId(orm_model.room_type_id),
            room_number=RoomNumber(orm_model.room_number),
            status=HotelRoomStatus.parse(orm_model.status, field="status"),
            floor_id=FloorId(orm_model.floor_id) if orm_model.floor_id else None,
            notes=orm_model.notes,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: HotelRoom, orm_model: HotelRoomORM | None = None
    ) -> HotelRoomORM:
        if orm_model is None:
            orm_model = HotelRoomORM(id=domain_entity.id.value)

        orm_model.room_type_id = domain_entity.room_type_id.value
        orm_model.room_number = domain_entity.room_number.value
        orm_model.floor_id = domain_entity.floor_id.value if domain_entity.floor_id else None
        orm_model.status = domain_entity.status.value
        orm_model.notes = domain_entity.notes
        orm_model.created_at = domain_entity.created_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
