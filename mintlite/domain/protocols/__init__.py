"""Domain protocols (ports).

Structural interfaces implemented by infrastructure adapters.
"""

from mintlite.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from mintlite.domain.protocols.holding_repository import HoldingRepository
from mintlite.domain.protocols.logger_protocol import LoggerProtocol
from mintlite.domain.protocols.market_data_protocol import MarketDataProtocol

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "HoldingRepository",
    "LoggerProtocol",
    "MarketDataProtocol",
]
