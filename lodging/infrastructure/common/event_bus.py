"""In-process, synchronous domain event bus."""

from collections import defaultdict
from collections.abc import Callable

import structlog

from lodging.domain.common import DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventBus:
    """
    Dispatches domain events to handlers subscribed by event class.

    Publishing happens after the transaction committed, so a failing handler
    is logged and does not stop the remaining handlers.

    Example:
        bus = InMemoryEventBus()
        bus.subscribe(AccommodationApprovedEvent, notify_owner)
        bus.publish(event)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register a handler for an event class and its subclasses."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)

    def handlers_for(self, event: DomainEvent) -> list[EventHandler]:
        return [
            handler
            for event_type, handlers in self._handlers.items()
            if isinstance(event, event_type)
            for handler in handlers
        ]

    def publish(self, event: DomainEvent) -> None:
        handlers = self.handlers_for(event)
        logger.info(
            "domain_event_published",
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "domain_event_handler_failed",
                    event_type=event.event_type,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )
