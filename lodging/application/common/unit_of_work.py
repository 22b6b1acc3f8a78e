"""
Unit of Work interface.

The Unit of Work maintains the aggregates touched by a use case, commits
their changes as one transaction and publishes their domain events only
after the commit succeeded.

Example:
    class ApproveAccommodation:
        def __init__(self, repo: AccommodationRepositoryProtocol, uow: UnitOfWork) -> None:
            self._repo = repo
            self._uow = uow

        def approve(self, accommodation_id: AccommodationId, admin_id: UserId) -> None:
            with self._uow:
                accommodation = self._repo.lock_by_id(accommodation_id)
                accommodation.approve(admin_id)
                self._repo.save(accommodation)
                self._uow.track(accommodation)
                self._uow.commit()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Self

from lodging.domain.common import DomainEvent

from .event_publisher import EventSource


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Holds pessimistic locks taken by repositories until commit/rollback
    - Collects and dispatches domain events after a successful commit
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    def __init__(self) -> None:
        self._tracked: list[EventSource] = []
        self._handlers: list[Callable[[DomainEvent], None]] = []

    @abstractmethod
    def _commit_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _rollback_transaction(self) -> None:
        raise NotImplementedError

    def track(self, aggregate: EventSource) -> None:
        """Register an aggregate whose events are published on commit."""
        if not any(tracked is aggregate for tracked in self._tracked):
            self._tracked.append(aggregate)

    def commit(self) -> None:
        """
        Commit the current transaction, then dispatch collected events.

        Events are drained only after the transaction succeeded, so a failed
        commit leaves them buffered on the aggregates.
        """
        self._commit_transaction()
        for event in self.collect_events():
            for handler in self._handlers:
                handler(event)

    def rollback(self) -> None:
        """
        Rollback the current transaction.

        Events of tracked aggregates are discarded with the changes.
        """
        self._rollback_transaction()
        for aggregate in self._tracked:
            aggregate.pull_domain_events()
        self._tracked.clear()

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()

    def collect_events(self) -> list[DomainEvent]:
        """
        Drain domain events from tracked aggregates.

        Order follows tracking order, and recording order within each aggregate.
        """
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.pull_domain_events())
        self._tracked.clear()
        return events

    def register_event_handler(self, handler: Callable[[DomainEvent], None]) -> None:
        """
        Register a handler to be called for domain events.

        Events are dispatched after successful commit.
        """
        self._handlers.append(handler)
