"""MarketDataProtocol for current price lookups.

Port for the external market data collaborator. Called once per holding
during a price refresh. Adapters return ``Result`` values so that a failure
for one symbol stays a per-holding outcome rather than an exception that
would abort the batch.

Implementations:
    - HttpMarketDataProvider: mintlite/infrastructure/market_data/http_provider.py
    - InMemoryMarketDataProvider: mintlite/infrastructure/market_data/in_memory_provider.py
"""

from decimal import Decimal
from typing import Protocol

from mintlite.core.result import Result
from mintlite.domain.errors import ProviderError


class MarketDataProtocol(Protocol):
    """Market data provider protocol (port)."""

    async def get_current_price(self, symbol: str) -> Result[Decimal, ProviderError]:
        """Fetch the latest price for a symbol.

        The returned Decimal is passed through as received; range checks
        (negative prices) are applied by the holding when the price is used.

        Args:
            symbol: Ticker symbol (upper-case).

        Returns:
            Success(Decimal): Latest price.
            Failure(SymbolNotFoundError): Provider has no such symbol.
            Failure(ProviderUnavailableError): Timeout, 5xx or rate limit.
            Failure(ProviderInvalidResponseError): Unusable payload.
        """
        ...
