"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from mintlite.core.container import get_logger, get_create_holding_handler

The container is organized into modules by concern:
- infrastructure: Core services (database, logging)
- events: Event bus and subscriptions
- providers: Market data adapter
- holding_handlers: Holding and portfolio handler factories
"""

# Infrastructure services
from mintlite.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Event bus
from mintlite.core.container.events import get_event_bus

# Market data
from mintlite.core.container.providers import get_market_data_provider

# Holding and portfolio handlers
from mintlite.core.container.holding_handlers import (
    get_create_holding_handler,
    get_delete_holding_handler,
    get_get_holding_handler,
    get_get_portfolio_return_handler,
    get_get_portfolio_value_handler,
    get_list_holdings_handler,
    get_refresh_portfolio_prices_handler,
    get_update_holding_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "get_event_bus",
    # Market data
    "get_market_data_provider",
    # Handlers
    "get_create_holding_handler",
    "get_delete_holding_handler",
    "get_get_holding_handler",
    "get_get_portfolio_return_handler",
    "get_get_portfolio_value_handler",
    "get_list_holdings_handler",
    "get_refresh_portfolio_prices_handler",
    "get_update_holding_handler",
]
