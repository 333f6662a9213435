"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: In-process event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for holding/portfolio events

Usage:
    >>> from mintlite.infrastructure.events import InMemoryEventBus
    >>> from mintlite.infrastructure.events.handlers import LoggingEventHandler
    >>>
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> logging_handler = LoggingEventHandler(logger=logger)
    >>> event_bus.subscribe(
    ...     HoldingPriceRefreshed, logging_handler.handle_holding_price_refreshed
    ... )
"""

from mintlite.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
