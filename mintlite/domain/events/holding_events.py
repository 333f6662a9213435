"""Holding and portfolio domain events.

Emission points of the valuation workflow:

- HoldingPriceRefreshed: one holding's price was applied and written
  (bulk refresh or manual price edit)
- PortfolioPricesRefreshed: a bulk refresh for a user completed; carries the
  per-batch counts and the recomputed portfolio value

Both are published once the write is flushed, inside the request transaction
and before it commits. A commit failing afterwards does not retract them, so
subscribers treat them as notifications rather than a durable record.
Subscribers cannot fail the workflow (the event bus is fail-open).
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from mintlite.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class HoldingPriceRefreshed(DomainEvent):
    """A holding's current price was updated and derived figures recomputed.

    Attributes:
        user_id: Owner of the holding.
        holding_id: Holding that changed.
        symbol: Ticker symbol.
        previous_price: Price before the refresh.
        current_price: Price after the refresh.
        market_value: Recomputed market value.
        source: Where the price came from ("market_data" or "manual").
    """

    user_id: UUID
    holding_id: UUID
    symbol: str
    previous_price: Decimal
    current_price: Decimal
    market_value: Decimal
    source: str


@dataclass(frozen=True, kw_only=True, slots=True)
class PortfolioPricesRefreshed(DomainEvent):
    """A bulk price refresh finished for a user.

    Attributes:
        user_id: User whose holdings were refreshed.
        total_count: Holdings attempted.
        updated_count: Holdings successfully refreshed.
        failed_count: Holdings that failed (price unchanged).
        portfolio_value: Portfolio value recomputed after the batch.
    """

    user_id: UUID
    total_count: int
    updated_count: int
    failed_count: int
    portfolio_value: Decimal
