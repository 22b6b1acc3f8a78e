"""
Paging for list use cases.

Example:
    pagination = Pagination(page=2, page_size=10)
    items = room_repository.find_many(pagination.limit, pagination.offset)
    return PaginatedResult(items=items, total=room_repository.count(), pagination=pagination)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from lodging.domain.common.exceptions import InvalidInputError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """1-indexed page request; page_size is capped at MAX_PAGE_SIZE."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidInputError("Page must be at least 1", field="page", value=self.page)
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise InvalidInputError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}",
                field="page_size",
                value=self.page_size,
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of items plus the total matching the same filters."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        full, remainder = divmod(self.total, self.page_size)
        return full + (1 if remainder else 0)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
