"""Process-local event bus.

Subscribers are kept per exact event class and run concurrently on publish.
A subscriber that raises is logged and skipped; the publisher never sees it.
Registrations happen once at startup in ``mintlite.core.container.events``.
"""

import asyncio
from collections import defaultdict

from mintlite.domain.events.base_event import DomainEvent
from mintlite.domain.protocols.event_bus_protocol import EventHandler
from mintlite.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """EventBusProtocol adapter backed by a dict of subscriber lists.

    Single event loop only; not thread-safe. Subscribing the same handler
    twice runs it twice.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Run every subscriber of ``type(event)``; subclasses are not matched."""
        handlers = self._handlers.get(type(event))
        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )
        await asyncio.gather(*(self._deliver(handler, event) for handler in handlers))

    async def _deliver(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler(event)
        except Exception as e:
            self._logger.warning(
                "event_handler_failed",
                event_type=type(event).__name__,
                event_id=str(event.event_id),
                handler_name=getattr(handler, "__name__", repr(handler)),
                error_type=type(e).__name__,
                error_message=str(e),
            )
