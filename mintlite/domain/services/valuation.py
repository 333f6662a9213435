"""Holding valuation primitives and portfolio aggregation.

Pure, deterministic functions over ``Decimal`` values. Nothing here touches
storage, the clock or the network, so every figure the service reports can be
reproduced from a holding's quantity, cost basis and current price.

Rounding:
    Market values and percentages are quantized to 2 dp with ROUND_HALF_EVEN
    (banker's rounding). Portfolio totals are sums of the already-rounded
    per-holding values, so a portfolio total always equals the sum of the
    figures displayed for its holdings.

Zero cost basis:
    ``calculate_unrealized_gain`` returns the full market value as gain and
    ``calculate_return_percentage`` returns 0. The two policies are
    intentionally left asymmetric.

Usage:
    >>> calculate_market_value(Decimal("100"), Decimal("50.25"))
    Decimal('5025.00')
    >>> calculate_unrealized_gain(Decimal("5025.00"), Decimal("4500.00"))
    Decimal('525.00')
    >>> calculate_return_percentage(Decimal("525.00"), Decimal("4500.00"))
    Decimal('11.67')
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Protocol

from mintlite.core.constants import HUNDRED, MONEY_QUANTUM
from mintlite.domain.errors import InvalidInputError

# Wide enough for Numeric(19, 8) * Numeric(19, 4) without precision loss.
_PRECISION = 60


class ValuedPosition(Protocol):
    """Anything carrying the three inputs needed to value a position.

    ``Holding`` satisfies this structurally.
    """

    quantity: Decimal
    cost_basis: Decimal
    current_price: Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class HoldingValuation:
    """Derived figures for one holding.

    Attributes:
        market_value: quantity * current_price (2 dp).
        unrealized_gain: market_value - cost_basis.
        return_percentage: unrealized_gain / cost_basis * 100 (2 dp).
    """

    market_value: Decimal
    unrealized_gain: Decimal
    return_percentage: Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class PortfolioReturn:
    """Aggregate return across a set of holdings.

    Attributes:
        amount: Sum of per-holding unrealized gains.
        percentage: amount / total_cost_basis * 100 (2 dp), 0 without cost.
        total_cost_basis: Sum of cost bases.
        total_market_value: Sum of rounded market values.
    """

    amount: Decimal
    percentage: Decimal
    total_cost_basis: Decimal
    total_market_value: Decimal


# =============================================================================
# Input validation
# =============================================================================


def _require_decimal(value: object, field: str) -> Decimal:
    """Return ``value`` as a finite Decimal or raise InvalidInputError.

    Ints are accepted. Floats and bools are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidInputError(
            f"{field} must be a Decimal, got {type(value).__name__}",
            field=field,
        )
    result = Decimal(value)
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be a finite number", field=field)
    return result


def require_non_negative(value: object, field: str) -> Decimal:
    """Return ``value`` as a finite, non-negative Decimal.

    Raises:
        InvalidInputError: If the value is negative, non-finite or not a
            Decimal/int.
    """
    result = _require_decimal(value, field)
    if result < 0:
        raise InvalidInputError(f"{field} cannot be negative", field=field)
    return result


def _round_money(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)


# =============================================================================
# Holding Valuation Primitives
# =============================================================================


def calculate_market_value(quantity: Decimal, current_price: Decimal) -> Decimal:
    """Calculate the market value of a position.

    Args:
        quantity: Units held (>= 0).
        current_price: Price per unit (>= 0).

    Returns:
        quantity * current_price rounded half-even to 2 dp. Exactly 0 when
        quantity is 0, regardless of price.

    Raises:
        InvalidInputError: If either input is negative or not a finite Decimal.
    """
    quantity = require_non_negative(quantity, "quantity")
    current_price = require_non_negative(current_price, "current_price")

    if quantity == 0:
        return Decimal("0.00")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return _round_money(quantity * current_price)


def calculate_unrealized_gain(market_value: Decimal, cost_basis: Decimal) -> Decimal:
    """Calculate unrealized gain (negative for a loss).

    Args:
        market_value: Current market value of the position (>= 0).
        cost_basis: Total amount paid for the position (>= 0).

    Returns:
        market_value - cost_basis, or market_value unchanged when cost_basis
        is 0 (nothing was paid, so the whole value is gain).

    Raises:
        InvalidInputError: If either input is negative or not a finite Decimal.
    """
    market_value = require_non_negative(market_value, "market_value")
    cost_basis = require_non_negative(cost_basis, "cost_basis")

    if cost_basis == 0:
        return market_value

    return market_value - cost_basis


def calculate_return_percentage(unrealized_gain: Decimal, cost_basis: Decimal) -> Decimal:
    """Calculate return as a percentage of cost basis.

    Args:
        unrealized_gain: Gain (or loss) on the position.
        cost_basis: Total amount paid for the position (>= 0).

    Returns:
        unrealized_gain / cost_basis * 100 rounded half-even to 2 dp.
        Exactly 0 when cost_basis is 0.

    Raises:
        InvalidInputError: If cost_basis is negative or an input is not a
            finite Decimal.
    """
    unrealized_gain = _require_decimal(unrealized_gain, "unrealized_gain")
    cost_basis = require_non_negative(cost_basis, "cost_basis")

    if cost_basis == 0:
        return Decimal("0.00")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return _round_money(unrealized_gain / cost_basis * HUNDRED)


def value_holding(
    quantity: Decimal, cost_basis: Decimal, current_price: Decimal
) -> HoldingValuation:
    """Compute all derived figures for one holding.

    Args:
        quantity: Units held.
        cost_basis: Total cost of the position.
        current_price: Price per unit.

    Returns:
        HoldingValuation with market value, gain and return percentage.

    Raises:
        InvalidInputError: If any input is negative or not a finite Decimal.
    """
    market_value = calculate_market_value(quantity, current_price)
    unrealized_gain = calculate_unrealized_gain(market_value, cost_basis)
    return HoldingValuation(
        market_value=market_value,
        unrealized_gain=unrealized_gain,
        return_percentage=calculate_return_percentage(unrealized_gain, cost_basis),
    )


# =============================================================================
# Portfolio Aggregator
# =============================================================================


def calculate_portfolio_value(holdings: Iterable[ValuedPosition]) -> Decimal:
    """Sum the rounded market values of a user's holdings.

    The caller is responsible for passing only holdings owned by one user.

    Args:
        holdings: Holdings to aggregate.

    Returns:
        Sum of per-holding ``calculate_market_value`` results; 0 when empty.
    """
    total = Decimal("0.00")
    for holding in holdings:
        total += calculate_market_value(holding.quantity, holding.current_price)
    return total


def calculate_portfolio_return(holdings: Iterable[ValuedPosition]) -> PortfolioReturn:
    """Calculate the aggregate return of a user's holdings.

    The percentage is total gain over total cost basis, not the mean of the
    per-holding percentages, so large positions weigh more than small ones.

    Args:
        holdings: Holdings to aggregate.

    Returns:
        PortfolioReturn with amount, percentage and the totals behind them.
    """
    total_gain = Decimal("0.00")
    total_cost = Decimal("0.00")
    total_value = Decimal("0.00")

    for holding in holdings:
        market_value = calculate_market_value(holding.quantity, holding.current_price)
        total_gain += calculate_unrealized_gain(market_value, holding.cost_basis)
        total_cost += holding.cost_basis
        total_value += market_value

    return PortfolioReturn(
        amount=total_gain,
        percentage=calculate_return_percentage(total_gain, total_cost),
        total_cost_basis=total_cost,
        total_market_value=total_value,
    )
