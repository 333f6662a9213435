"""Unit tests for InMemoryMarketDataProvider."""

from decimal import Decimal

import pytest

from mintlite.core.result import Failure, Success
from mintlite.domain.errors import ProviderUnavailableError, SymbolNotFoundError
from mintlite.infrastructure.market_data.in_memory_provider import (
    InMemoryMarketDataProvider,
)


@pytest.mark.unit
class TestInMemoryMarketDataProvider:
    """Test static quote table lookups."""

    async def test_known_symbol_case_insensitive(self):
        provider = InMemoryMarketDataProvider({"msft": Decimal("310.00")})

        result = await provider.get_current_price("MSFT")

        assert isinstance(result, Success)
        assert result.value == Decimal("310.00")

    async def test_unknown_symbol(self):
        provider = InMemoryMarketDataProvider()

        result = await provider.get_current_price("ZZZZ")

        assert isinstance(result, Failure)
        assert isinstance(result.error, SymbolNotFoundError)
        assert result.error.symbol == "ZZZZ"
        assert result.error.provider_name == "static"

    async def test_set_price_replaces_quote(self):
        provider = InMemoryMarketDataProvider({"MSFT": Decimal("310.00")})
        provider.set_price("msft", Decimal("320.00"))

        result = await provider.get_current_price("MSFT")

        assert isinstance(result, Success)
        assert result.value == Decimal("320.00")

    async def test_mark_unavailable(self):
        provider = InMemoryMarketDataProvider({"MSFT": Decimal("310.00")})
        provider.mark_unavailable("MSFT")

        result = await provider.get_current_price("MSFT")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)

    async def test_set_price_clears_unavailable(self):
        provider = InMemoryMarketDataProvider()
        provider.mark_unavailable("MSFT")
        provider.set_price("MSFT", Decimal("1.00"))

        result = await provider.get_current_price("MSFT")

        assert isinstance(result, Success)
