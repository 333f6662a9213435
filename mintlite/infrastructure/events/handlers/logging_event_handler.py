"""Logging event handler for domain events.

Structured logging for the price refresh workflow.

Log Levels:
    - INFO: HoldingPriceRefreshed, PortfolioPricesRefreshed with no failures
    - WARNING: PortfolioPricesRefreshed where some holdings failed

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - user_id, holding_id, symbol: Identity of what changed
    - Decimal amounts are logged as strings
"""

from mintlite.domain.events.holding_events import (
    HoldingPriceRefreshed,
    PortfolioPricesRefreshed,
)
from mintlite.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(
        ...     HoldingPriceRefreshed, handler.handle_holding_price_refreshed
        ... )
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_holding_price_refreshed(
        self,
        event: HoldingPriceRefreshed,
    ) -> None:
        """Log a holding price change (INFO level).

        Args:
            event: HoldingPriceRefreshed event.
        """
        self._logger.info(
            "holding_price_refreshed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            holding_id=str(event.holding_id),
            symbol=event.symbol,
            previous_price=str(event.previous_price),
            current_price=str(event.current_price),
            market_value=str(event.market_value),
            source=event.source,
        )

    async def handle_portfolio_prices_refreshed(
        self,
        event: PortfolioPricesRefreshed,
    ) -> None:
        """Log completion of a bulk refresh.

        WARNING when any holding failed, INFO otherwise.

        Args:
            event: PortfolioPricesRefreshed event.
        """
        context = {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
            "user_id": str(event.user_id),
            "total_count": event.total_count,
            "updated_count": event.updated_count,
            "failed_count": event.failed_count,
            "portfolio_value": str(event.portfolio_value),
        }
        if event.failed_count:
            self._logger.warning("portfolio_prices_refreshed", **context)
        else:
            self._logger.info("portfolio_prices_refreshed", **context)
