"""Accommodation value objects."""

from .address import Address
from .cancellation_policy import CancellationPolicy
from .enums import (
    AccommodationStatus,
    AccommodationType,
    CancellationPolicyType,
    FloorStatus,
    FloorType,
)
from .hotel_profile import HotelProfile
from .location import Location
from .policies import Policies

__all__ = [
    "AccommodationStatus",
    "AccommodationType",
    "Address",
    "CancellationPolicy",
    "CancellationPolicyType",
    "FloorStatus",
    "FloorType",
    "HotelProfile",
    "Location",
    "Policies",
]
