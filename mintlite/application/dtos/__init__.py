"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Note:
    DTOs are NOT the same as API schemas (Pydantic models in
    ``mintlite.schemas``), which convert DTOs with ``from_dto``.
"""

from mintlite.application.dtos.holding_dtos import (
    HoldingListResult,
    HoldingRefreshOutcome,
    HoldingResult,
    PortfolioReturnResult,
    PortfolioValueResult,
    RefreshPortfolioPricesResult,
    to_holding_result,
)

__all__ = [
    "HoldingListResult",
    "HoldingRefreshOutcome",
    "HoldingResult",
    "PortfolioReturnResult",
    "PortfolioValueResult",
    "RefreshPortfolioPricesResult",
    "to_holding_result",
]
