"""Queries - Read operations that never change state."""

from mintlite.application.queries.holding_queries import GetHolding, ListHoldings
from mintlite.application.queries.portfolio_queries import (
    GetPortfolioReturn,
    GetPortfolioValue,
)

__all__ = [
    "GetHolding",
    "GetPortfolioReturn",
    "GetPortfolioValue",
    "ListHoldings",
]
