"""Domain services (pure business logic, no infrastructure)."""

from mintlite.domain.services.valuation import (
    HoldingValuation,
    PortfolioReturn,
    calculate_market_value,
    calculate_portfolio_return,
    calculate_portfolio_value,
    calculate_return_percentage,
    calculate_unrealized_gain,
    require_non_negative,
    value_holding,
)

__all__ = [
    "HoldingValuation",
    "PortfolioReturn",
    "calculate_market_value",
    "calculate_portfolio_return",
    "calculate_portfolio_value",
    "calculate_return_percentage",
    "calculate_unrealized_gain",
    "require_non_negative",
    "value_holding",
]
