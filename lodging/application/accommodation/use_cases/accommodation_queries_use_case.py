"""Use case for reading accommodations."""

from lodging.application.accommodation.protocols.accommodation_repository import (
    AccommodationRepositoryProtocol,
)
from lodging.application.common.pagination import PaginatedResult, Pagination
from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.exceptions import AccommodationNotFoundError
from lodging.domain.accommodation.value_objects import AccommodationStatus, AccommodationType
from lodging.domain.common.value_objects import AccommodationId, UserId


class AccommodationQueriesUseCase:
    """Read-only access to accommodations."""

    def __init__(self, accommodation_repository: AccommodationRepositoryProtocol) -> None:
        self.accommodation_repository = accommodation_repository

    def get_accommodation(self, accommodation_id: AccommodationId) -> Accommodation:
        """
        Raises:
            AccommodationNotFoundError: If the accommodation does not exist
        """
        accommodation = self.accommodation_repository.find_by_id(accommodation_id)
        if not accommodation:
            raise AccommodationNotFoundError(accommodation_id)
        return accommodation

    def list_accommodations(
        self,
        pagination: Pagination,
        owner_id: UserId | None = None,
        accommodation_type: AccommodationType | None = None,
        status: AccommodationStatus | None = None,
    ) -> PaginatedResult[Accommodation]:
        """
        List accommodations one page at a time.

        At most one of owner_id / accommodation_type selects the listing;
        owner takes precedence. Status only narrows the unfiltered listing.
        """
        if owner_id is not None:
            items = self.accommodation_repository.find_by_owner_id(
                owner_id, limit=pagination.limit, offset=pagination.offset
            )
            total = self.accommodation_repository.count(owner_id=owner_id)
        elif accommodation_type is not None:
            items = self.accommodation_repository.find_by_type(
                accommodation_type, limit=pagination.limit, offset=pagination.offset
            )
            total = self.accommodation_repository.count(accommodation_type=accommodation_type)
        else:
            items = self.accommodation_repository.find_all(
                limit=pagination.limit, offset=pagination.offset, status=status
            )
            total = self.accommodation_repository.count(status=status)
        return PaginatedResult(items=items, total=total, pagination=pagination)
