"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired once, when the bus is first created.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from mintlite.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from mintlite.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - HoldingPriceRefreshed -> LoggingEventHandler
        - PortfolioPricesRefreshed -> LoggingEventHandler

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(HoldingPriceRefreshed(...))
    """
    from mintlite.domain.events.holding_events import (
        HoldingPriceRefreshed,
        PortfolioPricesRefreshed,
    )
    from mintlite.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from mintlite.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    event_bus.subscribe(
        HoldingPriceRefreshed,
        logging_handler.handle_holding_price_refreshed,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PortfolioPricesRefreshed,
        logging_handler.handle_portfolio_prices_refreshed,  # type: ignore[arg-type]
    )

    return event_bus
