from .accommodation_lifecycle_service import AccommodationLifecycleService
from .floor_management_service import FloorManagementService

__all__ = ["AccommodationLifecycleService", "FloorManagementService"]
