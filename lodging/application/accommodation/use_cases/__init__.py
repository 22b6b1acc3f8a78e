from .accommodation_lifecycle_use_case import AccommodationLifecycleUseCase
from .accommodation_queries_use_case import AccommodationQueriesUseCase
from .create_accommodation_use_case import CreateAccommodationUseCase
from .delete_accommodation_use_case import DeleteAccommodationUseCase
from .floor_management_use_case import FloorManagementUseCase
from .update_accommodation_use_case import UpdateAccommodationUseCase

__all__ = [
    "AccommodationLifecycleUseCase",
    "AccommodationQueriesUseCase",
    "CreateAccommodationUseCase",
    "DeleteAccommodationUseCase",
    "FloorManagementUseCase",
    "UpdateAccommodationUseCase",
]
