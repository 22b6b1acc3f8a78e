from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lodging.application.accommodation.use_cases.accommodation_lifecycle_use_case import (
    AccommodationLifecycleUseCase,
)
from lodging.application.accommodation.use_cases.accommodation_queries_use_case import (
    AccommodationQueriesUseCase,
)
from lodging.application.accommodation.use_cases.create_accommodation_use_case import (
    CreateAccommodationUseCase,
)
from lodging.application.accommodation.use_cases.delete_accommodation_use_case import (
    DeleteAccommodationUseCase,
)
from lodging.application.accommodation.use_cases.floor_management_use_case import (
    FloorManagementUseCase,
)
from lodging.application.accommodation.use_cases.update_accommodation_use_case import (
    UpdateAccommodationUseCase,
)
from lodging.application.room.use_cases.create_room_type_use_case import CreateRoomTypeUseCase
from lodging.application.room.use_cases.create_room_use_case import CreateRoomUseCase
from lodging.application.room.use_cases.hotel_room_status_use_case import HotelRoomStatusUseCase
from lodging.application.room.use_cases.room_management_use_case import RoomManagementUseCase
from lodging.application.room.use_cases.room_queries_use_case import RoomQueriesUseCase
from lodging.application.room.use_cases.room_type_management_use_case import (
    RoomTypeManagementUseCase,
)
from lodging.config import get_settings
from lodging.domain.accommodation.services.accommodation_lifecycle_service import (
    AccommodationLifecycleService,
)
from lodging.domain.accommodation.services.floor_management_service import (
    FloorManagementService,
)
from lodging.domain.common.identifiers import default_id_generator
from lodging.domain.room.services.room_availability_service import RoomAvailabilityService
from lodging.infrastructure.accommodation.repositories import (
    AccommodationRepository,
    FloorRepository,
)
from lodging.infrastructure.common import InMemoryEventBus, SqlAlchemyUnitOfWork
from lodging.infrastructure.room.repositories import RoomRepository, RoomTypeRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Callable(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Ports implemented outside this package (identity and booking systems)
    user_authorization = providers.Dependency()
    booking_policy = providers.Dependency()

    id_generator = providers.Object(default_id_generator)

    # Events and transactions
    event_bus = providers.Singleton(InMemoryEventBus)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, session=db, event_publisher=event_bus)

    # Repositories
    accommodation_repository = providers.Factory(AccommodationRepository, db=db)
    floor_repository = providers.Factory(FloorRepository, db=db)
    room_repository = providers.Factory(RoomRepository, db=db)
    room_type_repository = providers.Factory(RoomTypeRepository, db=db)

    # Domain services (pure domain logic, no db)
    accommodation_lifecycle_service = providers.Factory(AccommodationLifecycleService)
    floor_management_service = providers.Factory(FloorManagementService)
    room_availability_service = providers.Factory(RoomAvailabilityService)

    # Accommodation module, application use cases
    create_accommodation_use_case = providers.Factory(
        CreateAccommodationUseCase,
        accommodation_repository=accommodation_repository,
        unit_of_work=unit_of_work,
        id_generator=id_generator,
    )
    update_accommodation_use_case = providers.Factory(
        UpdateAccommodationUseCase,
        accommodation_repository=accommodation_repository,
        user_authorization=user_authorization,
        unit_of_work=unit_of_work,
    )
    accommodation_lifecycle_use_case = providers.Factory(
        AccommodationLifecycleUseCase,
        accommodation_repository=accommodation_repository,
        user_authorization=user_authorization,
        lifecycle_service=accommodation_lifecycle_service,
        unit_of_work=unit_of_work,
    )
    delete_accommodation_use_case = providers.Factory(
        DeleteAccommodationUseCase,
        accommodation_repository=accommodation_repository,
        user_authorization=user_authorization,
        booking_policy=booking_policy,
        lifecycle_service=accommodation_lifecycle_service,
        unit_of_work=unit_of_work,
        lookahead_days=settings.provided.UPCOMING_BOOKING_LOOKAHEAD_DAYS,
    )
    accommodation_queries_use_case = providers.Factory(
        AccommodationQueriesUseCase,
        accommodation_repository=accommodation_repository,
    )
    floor_management_use_case = providers.Factory(
        FloorManagementUseCase,
        floor_repository=floor_repository,
        accommodation_repository=accommodation_repository,
        user_authorization=user_authorization,
        floor_service=floor_management_service,
        unit_of_work=unit_of_work,
        id_generator=id_generator,
    )

    # Room module, application use cases
    create_room_use_case = providers.Factory(
        CreateRoomUseCase,
        room_repository=room_repository,
        accommodation_repository=accommodation_repository,
        unit_of_work=unit_of_work,
        id_generator=id_generator,
        default_currency=settings.provided.DEFAULT_CURRENCY,
    )
    room_management_use_case = providers.Factory(
        RoomManagementUseCase,
        room_repository=room_repository,
        unit_of_work=unit_of_work,
        default_currency=settings.provided.DEFAULT_CURRENCY,
    )
    create_room_type_use_case = providers.Factory(
        CreateRoomTypeUseCase,
        room_type_repository=room_type_repository,
        accommodation_repository=accommodation_repository,
        unit_of_work=unit_of_work,
        id_generator=id_generator,
        default_currency=settings.provided.DEFAULT_CURRENCY,
    )
    room_type_management_use_case = providers.Factory(
        RoomTypeManagementUseCase,
        room_type_repository=room_type_repository,
        floor_repository=floor_repository,
        unit_of_work=unit_of_work,
        id_generator=id_generator,
        default_currency=settings.provided.DEFAULT_CURRENCY,
    )
    hotel_room_status_use_case = providers.Factory(
        HotelRoomStatusUseCase,
        room_type_repository=room_type_repository,
        unit_of_work=unit_of_work,
        availability_service=room_availability_service,
    )
    room_queries_use_case = providers.Factory(
        RoomQueriesUseCase,
        room_repository=room_repository,
        room_type_repository=room_type_repository,
    )


# Initialize container
container = Container()
