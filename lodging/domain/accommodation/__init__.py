"""Accommodation module domain layer."""

from .entities import Accommodation, Floor
from .services import AccommodationLifecycleService, FloorManagementService

__all__ = [
    "Accommodation",
    "AccommodationLifecycleService",
    "Floor",
    "FloorManagementService",
]
