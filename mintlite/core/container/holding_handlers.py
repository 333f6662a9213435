"""Holding handler dependency factories.

Request-scoped handler instances for holding and portfolio operations:
- Holding commands (create, update, delete, refresh prices)
- Holding queries (get, list)
- Portfolio queries (value, return)

Each factory builds a HoldingRepository on the request's session, so all
writes of one request share one transaction.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mintlite.core.config import settings
from mintlite.core.container.events import get_event_bus
from mintlite.core.container.infrastructure import get_db_session, get_logger
from mintlite.core.container.providers import get_market_data_provider
from mintlite.infrastructure.persistence.repositories import HoldingRepository

if TYPE_CHECKING:
    from mintlite.application.commands.handlers.create_holding_handler import (
        CreateHoldingHandler,
    )
    from mintlite.application.commands.handlers.delete_holding_handler import (
        DeleteHoldingHandler,
    )
    from mintlite.application.commands.handlers.refresh_portfolio_prices_handler import (
        RefreshPortfolioPricesHandler,
    )
    from mintlite.application.commands.handlers.update_holding_handler import (
        UpdateHoldingHandler,
    )
    from mintlite.application.queries.handlers.get_holding_handler import (
        GetHoldingHandler,
    )
    from mintlite.application.queries.handlers.get_portfolio_return_handler import (
        GetPortfolioReturnHandler,
    )
    from mintlite.application.queries.handlers.get_portfolio_value_handler import (
        GetPortfolioValueHandler,
    )
    from mintlite.application.queries.handlers.list_holdings_handler import (
        ListHoldingsHandler,
    )


def _price_staleness() -> timedelta:
    return timedelta(minutes=settings.price_staleness_minutes)


# ============================================================================
# Holding Commands
# ============================================================================


async def get_create_holding_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateHoldingHandler":
    """Get CreateHolding command handler (request-scoped).

    Returns:
        CreateHoldingHandler instance.
    """
    from mintlite.application.commands.handlers.create_holding_handler import (
        CreateHoldingHandler,
    )

    return CreateHoldingHandler(
        holding_repo=HoldingRepository(session=session),
        price_staleness=_price_staleness(),
    )


async def get_update_holding_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateHoldingHandler":
    """Get UpdateHolding command handler (request-scoped).

    Creates handler with:
    - HoldingRepository (request-scoped)
    - EventBus (app-scoped)

    Returns:
        UpdateHoldingHandler instance.
    """
    from mintlite.application.commands.handlers.update_holding_handler import (
        UpdateHoldingHandler,
    )

    return UpdateHoldingHandler(
        holding_repo=HoldingRepository(session=session),
        event_bus=get_event_bus(),
        price_staleness=_price_staleness(),
    )


async def get_delete_holding_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteHoldingHandler":
    """Get DeleteHolding command handler (request-scoped)."""
    from mintlite.application.commands.handlers.delete_holding_handler import (
        DeleteHoldingHandler,
    )

    return DeleteHoldingHandler(holding_repo=HoldingRepository(session=session))


async def get_refresh_portfolio_prices_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshPortfolioPricesHandler":
    """Get RefreshPortfolioPrices command handler (request-scoped).

    Creates handler with:
    - HoldingRepository (request-scoped)
    - Market data adapter (app-scoped)
    - EventBus (app-scoped)
    - Logger (app-scoped)

    Returns:
        RefreshPortfolioPricesHandler instance.
    """
    from mintlite.application.commands.handlers.refresh_portfolio_prices_handler import (
        RefreshPortfolioPricesHandler,
    )

    return RefreshPortfolioPricesHandler(
        holding_repo=HoldingRepository(session=session),
        market_data=get_market_data_provider(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


# ============================================================================
# Holding Queries
# ============================================================================


async def get_get_holding_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetHoldingHandler":
    """Get GetHolding query handler (request-scoped)."""
    from mintlite.application.queries.handlers.get_holding_handler import (
        GetHoldingHandler,
    )

    return GetHoldingHandler(
        holding_repo=HoldingRepository(session=session),
        price_staleness=_price_staleness(),
    )


async def get_list_holdings_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListHoldingsHandler":
    """Get ListHoldings query handler (request-scoped)."""
    from mintlite.application.queries.handlers.list_holdings_handler import (
        ListHoldingsHandler,
    )

    return ListHoldingsHandler(
        holding_repo=HoldingRepository(session=session),
        price_staleness=_price_staleness(),
    )


# ============================================================================
# Portfolio Queries
# ============================================================================


async def get_get_portfolio_value_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetPortfolioValueHandler":
    """Get GetPortfolioValue query handler (request-scoped)."""
    from mintlite.application.queries.handlers.get_portfolio_value_handler import (
        GetPortfolioValueHandler,
    )

    return GetPortfolioValueHandler(holding_repo=HoldingRepository(session=session))


async def get_get_portfolio_return_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetPortfolioReturnHandler":
    """Get GetPortfolioReturn query handler (request-scoped)."""
    from mintlite.application.queries.handlers.get_portfolio_return_handler import (
        GetPortfolioReturnHandler,
    )

    return GetPortfolioReturnHandler(holding_repo=HoldingRepository(session=session))
