"""In-memory market data adapter.

Serves prices from a static quote table. Used when
``MARKET_DATA_PROVIDER=static`` and as a test double.
"""

from decimal import Decimal

from mintlite.core.enums import ErrorCode
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.errors import (
    ProviderError,
    ProviderUnavailableError,
    SymbolNotFoundError,
)


class InMemoryMarketDataProvider:
    """Static quote table implementing MarketDataProtocol.

    Example:
        >>> provider = InMemoryMarketDataProvider({"MSFT": Decimal("310.00")})
        >>> await provider.get_current_price("msft")
        Success(value=Decimal('310.00'))
    """

    provider_name = "static"

    def __init__(self, quotes: dict[str, Decimal] | None = None) -> None:
        self._quotes: dict[str, Decimal] = {
            symbol.upper(): price for symbol, price in (quotes or {}).items()
        }
        self._unavailable: set[str] = set()

    def set_price(self, symbol: str, price: Decimal) -> None:
        """Add or replace a quote."""
        self._quotes[symbol.upper()] = price
        self._unavailable.discard(symbol.upper())

    def mark_unavailable(self, symbol: str) -> None:
        """Make lookups for ``symbol`` fail as if the provider were down."""
        self._unavailable.add(symbol.upper())

    async def get_current_price(self, symbol: str) -> Result[Decimal, ProviderError]:
        key = symbol.upper()

        if key in self._unavailable:
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Quote source unavailable for {key}",
                    provider_name=self.provider_name,
                )
            )

        price = self._quotes.get(key)
        if price is None:
            return Failure(
                error=SymbolNotFoundError(
                    code=ErrorCode.SYMBOL_NOT_FOUND,
                    message=f"No quote available for symbol {key}",
                    provider_name=self.provider_name,
                    symbol=key,
                )
            )

        return Success(value=price)
