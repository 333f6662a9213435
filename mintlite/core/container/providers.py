"""Market data adapter factory.

Container owns adapter selection (composition root), based on
``MARKET_DATA_PROVIDER``:
    - 'http': HttpMarketDataProvider (remote quote API)
    - 'static': InMemoryMarketDataProvider (quote table from settings)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from mintlite.core.config import settings

if TYPE_CHECKING:
    from mintlite.domain.protocols.market_data_protocol import MarketDataProtocol


@lru_cache()
def get_market_data_provider() -> "MarketDataProtocol":
    """Get market data adapter singleton (app-scoped).

    Returns:
        Adapter implementing MarketDataProtocol.
    """
    if settings.market_data_provider == "static":
        from mintlite.infrastructure.market_data.in_memory_provider import (
            InMemoryMarketDataProvider,
        )

        return InMemoryMarketDataProvider(settings.market_data_static_quotes)

    from mintlite.infrastructure.market_data.http_provider import (
        HttpMarketDataProvider,
    )

    return HttpMarketDataProvider(
        base_url=settings.market_data_base_url,
        api_key=settings.market_data_api_key,
        timeout=settings.market_data_timeout,
    )
