from .accommodation_repository import AccommodationRepositoryProtocol
from .booking_policy import BookingPolicyPort
from .floor_repository import FloorRepositoryProtocol
from .user_authorization import UserAuthorizationPort

__all__ = [
    "AccommodationRepositoryProtocol",
    "BookingPolicyPort",
    "FloorRepositoryProtocol",
    "UserAuthorizationPort",
]
