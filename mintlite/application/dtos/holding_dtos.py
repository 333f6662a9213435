"""Holding and portfolio DTOs.

Result dataclasses returned by the holding and portfolio handlers.

DTOs:
    - HoldingResult: One holding with derived figures and price status
    - HoldingListResult: A user's holdings
    - PortfolioValueResult: Total market value of a user's holdings
    - PortfolioReturnResult: Aggregate unrealized return
    - HoldingRefreshOutcome: Per-holding outcome of a bulk refresh
    - RefreshPortfolioPricesResult: Bulk refresh summary
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from mintlite.domain.entities.holding import Holding


@dataclass
class HoldingResult:
    """Single holding DTO.

    Attributes:
        id: Holding ID.
        account_id: Account ID.
        symbol: Ticker symbol.
        name: Display name.
        asset_class: Asset class value (e.g. "stock").
        quantity: Units held.
        cost_basis: Total cost of the position.
        current_price: Latest price per unit.
        currency: ISO 4217 currency code.
        market_value: quantity * current_price.
        unrealized_gain: market_value - cost_basis.
        return_percentage: Gain as a percentage of cost basis.
        is_profitable: Whether the position has an unrealized gain.
        price_status: "current" or "stale".
        last_price_update_at: Last price refresh timestamp.
        metadata: Free-form user data.
        version: Optimistic concurrency version.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    account_id: UUID
    symbol: str
    name: str
    asset_class: str
    quantity: Decimal
    cost_basis: Decimal
    current_price: Decimal
    currency: str
    market_value: Decimal
    unrealized_gain: Decimal
    return_percentage: Decimal
    is_profitable: bool
    price_status: str
    last_price_update_at: datetime | None
    metadata: dict[str, Any] | None
    version: int
    created_at: datetime
    updated_at: datetime


def to_holding_result(holding: Holding, *, fresh_since: datetime) -> HoldingResult:
    """Map a Holding entity to its DTO.

    Args:
        holding: Holding entity.
        fresh_since: Cutoff for classifying the price as current.

    Returns:
        HoldingResult DTO.
    """
    return HoldingResult(
        id=holding.id,
        account_id=holding.account_id,
        symbol=holding.symbol,
        name=holding.name,
        asset_class=holding.asset_class.value,
        quantity=holding.quantity,
        cost_basis=holding.cost_basis,
        current_price=holding.current_price,
        currency=holding.currency,
        market_value=holding.market_value,
        unrealized_gain=holding.unrealized_gain,
        return_percentage=holding.return_percentage,
        is_profitable=holding.is_profitable(),
        price_status=holding.price_status(fresh_since).value,
        last_price_update_at=holding.last_price_update_at,
        metadata=holding.metadata,
        version=holding.version,
        created_at=holding.created_at,
        updated_at=holding.updated_at,
    )


@dataclass
class HoldingListResult:
    """Holdings owned by a user.

    Attributes:
        holdings: Holding DTOs, newest first.
        total_count: Number of holdings.
    """

    holdings: list[HoldingResult]
    total_count: int


@dataclass
class PortfolioValueResult:
    """Total market value of a user's holdings.

    Attributes:
        total_value: Sum of rounded per-holding market values.
        holdings_count: Number of holdings valued.
        currency: Currency the total is reported in.
    """

    total_value: Decimal
    holdings_count: int
    currency: str


@dataclass
class PortfolioReturnResult:
    """Aggregate unrealized return of a user's holdings.

    Attributes:
        amount: Total unrealized gain.
        percentage: amount / total_cost_basis * 100.
        total_cost_basis: Sum of cost bases.
        total_market_value: Sum of market values.
    """

    amount: Decimal
    percentage: Decimal
    total_cost_basis: Decimal
    total_market_value: Decimal


@dataclass
class HoldingRefreshOutcome:
    """Outcome of refreshing one holding's price.

    On failure ``current_price`` equals ``previous_price`` (the stored price
    is unchanged) and ``error_code``/``error`` describe the cause.

    Attributes:
        holding_id: Holding attempted.
        symbol: Ticker symbol.
        success: Whether the new price was applied and persisted.
        previous_price: Price before the attempt.
        current_price: Price after the attempt.
        error_code: invalid_price, symbol_not_found, provider_unavailable or
            concurrent_modification.
        error: Human-readable failure message.
    """

    holding_id: UUID
    symbol: str
    success: bool
    previous_price: Decimal
    current_price: Decimal
    error_code: str | None = None
    error: str | None = None


@dataclass
class RefreshPortfolioPricesResult:
    """Result of a bulk price refresh.

    Attributes:
        results: One outcome per holding, in repository order.
        total_count: Holdings attempted.
        updated_count: Holdings refreshed.
        failed_count: Holdings that failed.
        portfolio_value: Portfolio value after the batch.
        portfolio_return: Portfolio return after the batch.
        message: Human-readable summary ("N of M holdings updated").
    """

    total_count: int
    updated_count: int
    failed_count: int
    portfolio_value: Decimal
    portfolio_return: PortfolioReturnResult
    message: str
    results: list[HoldingRefreshOutcome] = field(default_factory=list)
