"""Unit tests for the dependency container.

Tests cover:
- get_market_data_provider() adapter selection
- get_logger() singleton and renderer selection
- get_event_bus() singleton and handler subscriptions
- Request-scoped handler factories

Architecture:
- Settings patched at the module that reads them
- Factories use local imports, so the built objects are real adapters
"""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from mintlite.application.commands.handlers.create_holding_handler import (
    CreateHoldingHandler,
)
from mintlite.application.commands.handlers.refresh_portfolio_prices_handler import (
    RefreshPortfolioPricesHandler,
)
from mintlite.application.queries.handlers.list_holdings_handler import (
    ListHoldingsHandler,
)
from mintlite.core.container import (
    get_create_holding_handler,
    get_event_bus,
    get_list_holdings_handler,
    get_logger,
    get_market_data_provider,
    get_refresh_portfolio_prices_handler,
)
from mintlite.domain.events.holding_events import (
    HoldingPriceRefreshed,
    PortfolioPricesRefreshed,
)
from mintlite.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from mintlite.infrastructure.market_data.http_provider import HttpMarketDataProvider
from mintlite.infrastructure.market_data.in_memory_provider import (
    InMemoryMarketDataProvider,
)


@pytest.mark.unit
class TestGetMarketDataProvider:
    """Test get_market_data_provider() adapter selection."""

    def setup_method(self):
        get_market_data_provider.cache_clear()

    def teardown_method(self):
        get_market_data_provider.cache_clear()

    def test_static_provider(self):
        with patch("mintlite.core.container.providers.settings") as mock_settings:
            mock_settings.market_data_provider = "static"
            mock_settings.market_data_static_quotes = {"MSFT": Decimal("310.00")}

            provider = get_market_data_provider()

        assert isinstance(provider, InMemoryMarketDataProvider)

    def test_http_provider(self):
        with patch("mintlite.core.container.providers.settings") as mock_settings:
            mock_settings.market_data_provider = "http"
            mock_settings.market_data_base_url = "https://quotes.example.test"
            mock_settings.market_data_api_key = "key"
            mock_settings.market_data_timeout = 3.0

            provider = get_market_data_provider()

        assert isinstance(provider, HttpMarketDataProvider)
        assert provider._base_url == "https://quotes.example.test"
        assert provider._timeout == 3.0

    def test_singleton(self):
        with patch("mintlite.core.container.providers.settings") as mock_settings:
            mock_settings.market_data_provider = "static"
            mock_settings.market_data_static_quotes = {}

            assert get_market_data_provider() is get_market_data_provider()


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    def setup_method(self):
        get_logger.cache_clear()

    def teardown_method(self):
        get_logger.cache_clear()

    @pytest.mark.parametrize(("is_development", "use_json"), [(True, False), (False, True)])
    def test_renderer_follows_environment(self, is_development, use_json):
        with (
            patch("mintlite.core.container.infrastructure.settings") as mock_settings,
            patch(
                "mintlite.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_adapter_cls,
        ):
            mock_settings.is_development = is_development
            mock_settings.log_level = "DEBUG"

            logger = get_logger()

        mock_adapter_cls.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger is mock_adapter_cls.return_value

    def test_singleton(self):
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetEventBus:
    """Test get_event_bus() container function."""

    def setup_method(self):
        get_event_bus.cache_clear()

    def teardown_method(self):
        get_event_bus.cache_clear()

    def test_subscribes_logging_handlers(self):
        with patch("mintlite.core.container.events.get_logger", return_value=MagicMock()):
            event_bus = get_event_bus()

        assert isinstance(event_bus, InMemoryEventBus)
        assert len(event_bus._handlers[HoldingPriceRefreshed]) == 1
        assert len(event_bus._handlers[PortfolioPricesRefreshed]) == 1

    def test_singleton(self):
        with patch("mintlite.core.container.events.get_logger", return_value=MagicMock()):
            assert get_event_bus() is get_event_bus()


@pytest.mark.unit
class TestHoldingHandlerFactories:
    """Test request-scoped handler factories."""

    async def test_create_holding_handler(self):
        handler = await get_create_holding_handler(session=MagicMock())

        assert isinstance(handler, CreateHoldingHandler)

    async def test_list_holdings_handler_uses_configured_staleness(self):
        with patch("mintlite.core.container.holding_handlers.settings") as mock_settings:
            mock_settings.price_staleness_minutes = 30

            handler = await get_list_holdings_handler(session=MagicMock())

        assert isinstance(handler, ListHoldingsHandler)
        assert handler._price_staleness == timedelta(minutes=30)

    async def test_refresh_handler_wires_app_singletons(self):
        market_data = InMemoryMarketDataProvider()
        event_bus = MagicMock()
        logger = MagicMock()

        with (
            patch(
                "mintlite.core.container.holding_handlers.get_market_data_provider",
                return_value=market_data,
            ),
            patch(
                "mintlite.core.container.holding_handlers.get_event_bus",
                return_value=event_bus,
            ),
            patch(
                "mintlite.core.container.holding_handlers.get_logger",
                return_value=logger,
            ),
        ):
            handler = await get_refresh_portfolio_prices_handler(session=MagicMock())

        assert isinstance(handler, RefreshPortfolioPricesHandler)
        assert handler._market_data is market_data
        assert handler._event_bus is event_bus
        assert handler._logger is logger
