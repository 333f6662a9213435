"""RefreshPortfolioPrices command handler.

Re-prices every holding a user owns from the market data provider and
reports a per-holding outcome. Blocking operation: returns once every
holding has been attempted.

Failure isolation:
    Each holding is refreshed independently. A provider failure, a rejected
    price or a lost version check is recorded as that holding's outcome and
    the batch moves on. A failed holding keeps its stored price.

Flow:
    1. Load the user's holdings
    2. For each holding:
       a. Fetch the current price (MarketDataProtocol)
       b. Apply it via Holding.refresh_price (stale -> current)
       c. Save (version-guarded single-row write)
       d. Publish HoldingPriceRefreshed
    3. Re-run the portfolio aggregator over the resulting holdings
    4. Publish PortfolioPricesRefreshed
"""

import copy

from mintlite.application.commands.holding_commands import RefreshPortfolioPrices
from mintlite.application.dtos.holding_dtos import (
    HoldingRefreshOutcome,
    PortfolioReturnResult,
    RefreshPortfolioPricesResult,
)
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.entities.holding import Holding
from mintlite.domain.errors import (
    ConcurrentModificationError,
    InvalidPriceError,
    ProviderError,
    ProviderUnavailableError,
    SymbolNotFoundError,
)
from mintlite.domain.events.holding_events import (
    HoldingPriceRefreshed,
    PortfolioPricesRefreshed,
)
from mintlite.domain.protocols.event_bus_protocol import EventBusProtocol
from mintlite.domain.protocols.holding_repository import HoldingRepository
from mintlite.domain.protocols.logger_protocol import LoggerProtocol
from mintlite.domain.protocols.market_data_protocol import MarketDataProtocol
from mintlite.domain.services.valuation import (
    calculate_portfolio_return,
    calculate_portfolio_value,
)


class RefreshOutcomeCode:
    """Per-holding failure codes reported by a bulk refresh."""

    INVALID_PRICE = "invalid_price"
    SYMBOL_NOT_FOUND = "symbol_not_found"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    CONCURRENT_MODIFICATION = "concurrent_modification"


def _provider_error_code(error: ProviderError) -> str:
    if isinstance(error, SymbolNotFoundError):
        return RefreshOutcomeCode.SYMBOL_NOT_FOUND
    if isinstance(error, ProviderUnavailableError):
        return RefreshOutcomeCode.PROVIDER_UNAVAILABLE
    return RefreshOutcomeCode.INVALID_PRICE


class RefreshPortfolioPricesHandler:
    """Handler for RefreshPortfolioPrices command.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding lookup and persistence
        - MarketDataProtocol: Current price source
        - EventBusProtocol: For price refresh events
        - LoggerProtocol: Structured logging

    Returns:
        Result[RefreshPortfolioPricesResult, str]: Always Success; per-holding
        failures are part of the result.
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        market_data: MarketDataProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            holding_repo: Holding repository.
            market_data: Market data provider adapter.
            event_bus: For publishing domain events.
            logger: Structured logger.
        """
        self._holding_repo = holding_repo
        self._market_data = market_data
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: RefreshPortfolioPrices
    ) -> Result[RefreshPortfolioPricesResult, str]:
        """Handle RefreshPortfolioPrices command.

        Args:
            cmd: RefreshPortfolioPrices command with user_id.

        Returns:
            Success(RefreshPortfolioPricesResult): One outcome per holding,
                counts, summary message and the recomputed portfolio figures.
        """
        log = self._logger.bind(user_id=str(cmd.user_id))

        holdings = await self._holding_repo.find_by_user(cmd.user_id)
        log.info("portfolio_price_refresh_started", holdings_count=len(holdings))

        outcomes: list[HoldingRefreshOutcome] = []
        final_holdings: list[Holding] = []

        for holding in holdings:
            outcome, final = await self._refresh_holding(holding, log)
            outcomes.append(outcome)
            final_holdings.append(final)

        total = len(outcomes)
        updated = sum(1 for outcome in outcomes if outcome.success)
        failed = total - updated

        portfolio_value = calculate_portfolio_value(final_holdings)
        portfolio_return = calculate_portfolio_return(final_holdings)

        await self._event_bus.publish(
            PortfolioPricesRefreshed(
                user_id=cmd.user_id,
                total_count=total,
                updated_count=updated,
                failed_count=failed,
                portfolio_value=portfolio_value,
            )
        )

        log.info(
            "portfolio_price_refresh_completed",
            total_count=total,
            updated_count=updated,
            failed_count=failed,
            portfolio_value=str(portfolio_value),
        )

        return Success(
            value=RefreshPortfolioPricesResult(
                total_count=total,
                updated_count=updated,
                failed_count=failed,
                portfolio_value=portfolio_value,
                portfolio_return=PortfolioReturnResult(
                    amount=portfolio_return.amount,
                    percentage=portfolio_return.percentage,
                    total_cost_basis=portfolio_return.total_cost_basis,
                    total_market_value=portfolio_return.total_market_value,
                ),
                message=f"{updated} of {total} holdings updated",
                results=outcomes,
            )
        )

    async def _refresh_holding(
        self, holding: Holding, log: LoggerProtocol
    ) -> tuple[HoldingRefreshOutcome, Holding]:
        """Refresh one holding.

        The price is applied to a copy so that ``holding`` stays untouched
        when the refresh fails after the price was applied (lost version
        check).

        Args:
            holding: Holding as loaded from the repository.
            log: Logger bound to the requesting user.

        Returns:
            Tuple of (outcome, holding state to aggregate over).
        """
        previous_price = holding.current_price

        price_result = await self._market_data.get_current_price(holding.symbol)
        if isinstance(price_result, Failure):
            return (
                self._failed(
                    holding,
                    _provider_error_code(price_result.error),
                    price_result.error.message,
                    log,
                ),
                holding,
            )

        candidate = copy.copy(holding)
        try:
            candidate.refresh_price(price_result.value)
        except InvalidPriceError as e:
            return (
                self._failed(holding, RefreshOutcomeCode.INVALID_PRICE, str(e), log),
                holding,
            )

        try:
            saved = await self._holding_repo.save(candidate)
        except ConcurrentModificationError as e:
            return (
                self._failed(
                    holding, RefreshOutcomeCode.CONCURRENT_MODIFICATION, str(e), log
                ),
                holding,
            )

        await self._event_bus.publish(
            HoldingPriceRefreshed(
                user_id=saved.user_id,
                holding_id=saved.id,
                symbol=saved.symbol,
                previous_price=previous_price,
                current_price=saved.current_price,
                market_value=saved.market_value,
                source="market_data",
            )
        )

        log.debug(
            "holding_price_refreshed",
            holding_id=str(saved.id),
            symbol=saved.symbol,
            previous_price=str(previous_price),
            current_price=str(saved.current_price),
        )

        outcome = HoldingRefreshOutcome(
            holding_id=saved.id,
            symbol=saved.symbol,
            success=True,
            previous_price=previous_price,
            current_price=saved.current_price,
        )
        return outcome, saved

    @staticmethod
    def _failed(
        holding: Holding,
        error_code: str,
        error: str,
        log: LoggerProtocol,
    ) -> HoldingRefreshOutcome:
        log.warning(
            "holding_price_refresh_failed",
            holding_id=str(holding.id),
            symbol=holding.symbol,
            error_code=error_code,
            error=error,
        )
        return HoldingRefreshOutcome(
            holding_id=holding.id,
            symbol=holding.symbol,
            success=False,
            previous_price=holding.current_price,
            current_price=holding.current_price,
            error_code=error_code,
            error=error,
        )
