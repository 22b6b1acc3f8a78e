from .accommodation_repository import AccommodationRepository
from .floor_repository import FloorRepository

__all__ = ["AccommodationRepository", "FloorRepository"]
