"""Room module domain exceptions."""

from lodging.domain.common.exceptions import EntityNotFoundError


class RoomNotFoundError(EntityNotFoundError):
    """Raised when a homestay room cannot be found."""

    def __init__(self, room_id: object) -> None:
        super().__init__("Room", room_id)


class RoomTypeNotFoundError(EntityNotFoundError):
    """Raised when a hotel room type cannot be found."""

    def __init__(self, room_type_id: object) -> None:
        super().__init__("RoomType", room_type_id)


class HotelRoomNotFoundError(EntityNotFoundError):
    """Raised when a physical hotel room cannot be found."""

    def __init__(self, hotel_room_id: object) -> None:
        super().__init__("HotelRoom", hotel_room_id)
