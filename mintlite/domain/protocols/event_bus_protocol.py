"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides the adapter (InMemoryEventBus)
    - Container provides the app-scoped singleton (get_event_bus)

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(HoldingPriceRefreshed, handler.handle_holding_price_refreshed)
    >>> await event_bus.publish(HoldingPriceRefreshed(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from mintlite.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open**: One handler failure must NOT prevent other handlers
           from executing, and must never propagate to the publisher.
        2. **Async handlers**: All handlers are coroutines.
        3. **Exact type routing**: Handlers receive only the event type they
           subscribed to (no inheritance matching).
        4. **No ordering guarantees** between handlers.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async function accepting the event and returning None.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Never raises. No registered handlers is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...
