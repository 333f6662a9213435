"""Domain events package."""

from mintlite.domain.events.base_event import DomainEvent
from mintlite.domain.events.holding_events import (
    HoldingPriceRefreshed,
    PortfolioPricesRefreshed,
)

__all__ = [
    "DomainEvent",
    "HoldingPriceRefreshed",
    "PortfolioPricesRefreshed",
]
