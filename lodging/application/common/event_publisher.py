"""Ports for handing drained domain events to the outside world."""

from typing import Protocol

from lodging.domain.common import DomainEvent


class EventSource(Protocol):
    """Anything that buffers domain events: every aggregate root."""

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return buffered events in recording order and clear the buffer."""
        ...


class EventPublisherProtocol(Protocol):
    """Protocol for the event bus the unit of work publishes to."""

    def publish(self, event: DomainEvent) -> None:
        """
        Deliver one event to every subscribed handler.

        Args:
            event: Domain event drained from a committed aggregate
        """
        ...
