"""Market data adapters implementing MarketDataProtocol.

Adapters:
    - HttpMarketDataProvider: Remote quote API over httpx
    - InMemoryMarketDataProvider: Static quote table (dev/tests)
"""

from mintlite.infrastructure.market_data.http_provider import HttpMarketDataProvider
from mintlite.infrastructure.market_data.in_memory_provider import (
    InMemoryMarketDataProvider,
)

__all__ = [
    "HttpMarketDataProvider",
    "InMemoryMarketDataProvider",
]
