from .accommodation_mapper import AccommodationMapper
from .floor_mapper import FloorMapper

__all__ = ["AccommodationMapper", "FloorMapper"]
