"""Holding request and response schemas.

Pydantic schemas for the investments endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

Decimal fields are rendered as JSON strings, so monetary values keep their
exact scale (e.g. "5025.00").
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from mintlite.application.dtos.holding_dtos import (
    HoldingListResult,
    HoldingRefreshOutcome,
    HoldingResult,
    PortfolioReturnResult,
    PortfolioValueResult,
    RefreshPortfolioPricesResult,
)
from mintlite.core.constants import DEFAULT_CURRENCY
from mintlite.domain.enums.asset_class import AssetClass


# =============================================================================
# Request Schemas
# =============================================================================


class CreateHoldingRequest(BaseModel):
    """Request body for recording a holding manually.

    Range checks (negative quantity, cost basis or price) are applied by the
    holding itself and reported as 400.
    """

    account_id: UUID = Field(..., description="Account the position is held in")
    symbol: str = Field(
        ..., min_length=1, max_length=50, description="Ticker symbol", examples=["AAPL"]
    )
    name: str = Field(
        ..., min_length=1, max_length=255, description="Display name", examples=["Apple Inc."]
    )
    asset_class: AssetClass = Field(..., description="Kind of security")
    quantity: Decimal = Field(..., description="Units held", examples=["100"])
    cost_basis: Decimal = Field(
        ..., description="Total cost of the position", examples=["4500.00"]
    )
    current_price: Decimal = Field(
        ..., description="Price per unit", examples=["50.25"]
    )
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code",
    )
    metadata: dict[str, Any] | None = Field(None, description="Free-form user data")


class UpdateHoldingRequest(BaseModel):
    """Request body for a partial holding update.

    Omitted fields are left unchanged. ``current_price`` re-prices the
    holding and stamps ``last_price_update_at``.
    """

    expected_version: int | None = Field(
        None, description="Version last read by the client (optimistic concurrency)"
    )
    account_id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    asset_class: AssetClass | None = None
    quantity: Decimal | None = None
    cost_basis: Decimal | None = None
    current_price: Decimal | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    metadata: dict[str, Any] | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class HoldingResponse(BaseModel):
    """Single holding response."""

    id: UUID = Field(..., description="Holding unique identifier")
    account_id: UUID = Field(..., description="Account ID")
    symbol: str = Field(..., description="Ticker symbol", examples=["AAPL"])
    name: str = Field(..., description="Display name")
    asset_class: str = Field(..., description="Asset class", examples=["stock", "etf"])
    quantity: Decimal = Field(..., description="Units held")
    cost_basis: Decimal = Field(..., description="Total cost paid")
    current_price: Decimal = Field(..., description="Latest price per unit")
    currency: str = Field(..., description="ISO 4217 currency code", examples=["USD"])
    market_value: Decimal = Field(..., description="quantity * current_price")
    unrealized_gain: Decimal = Field(..., description="market_value - cost_basis")
    return_percentage: Decimal = Field(
        ..., description="Unrealized gain as a percentage of cost basis"
    )
    is_profitable: bool = Field(..., description="Whether the position is in profit")
    price_status: str = Field(..., description="current or stale")
    last_price_update_at: datetime | None = Field(
        None, description="Last price refresh timestamp"
    )
    metadata: dict[str, Any] | None = Field(None, description="Free-form user data")
    version: int = Field(..., description="Optimistic concurrency version")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: HoldingResult) -> "HoldingResponse":
        """Convert application DTO to response schema.

        Args:
            dto: HoldingResult from handler.

        Returns:
            HoldingResponse for API response.
        """
        return cls(
            id=dto.id,
            account_id=dto.account_id,
            symbol=dto.symbol,
            name=dto.name,
            asset_class=dto.asset_class,
            quantity=dto.quantity,
            cost_basis=dto.cost_basis,
            current_price=dto.current_price,
            currency=dto.currency,
            market_value=dto.market_value,
            unrealized_gain=dto.unrealized_gain,
            return_percentage=dto.return_percentage,
            is_profitable=dto.is_profitable,
            price_status=dto.price_status,
            last_price_update_at=dto.last_price_update_at,
            metadata=dto.metadata,
            version=dto.version,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class HoldingListResponse(BaseModel):
    """Holding list response."""

    holdings: list[HoldingResponse] = Field(..., description="Holdings, newest first")
    total_count: int = Field(..., description="Total holding count")

    @classmethod
    def from_dto(cls, dto: HoldingListResult) -> "HoldingListResponse":
        """Convert list DTO to response schema."""
        return cls(
            holdings=[HoldingResponse.from_dto(h) for h in dto.holdings],
            total_count=dto.total_count,
        )


class PortfolioValueResponse(BaseModel):
    """Total market value of the user's holdings."""

    total_value: Decimal = Field(..., examples=["86750.00"])
    holdings_count: int
    currency: str = Field(..., examples=["USD"])

    @classmethod
    def from_dto(cls, dto: PortfolioValueResult) -> "PortfolioValueResponse":
        return cls(
            total_value=dto.total_value,
            holdings_count=dto.holdings_count,
            currency=dto.currency,
        )


class PortfolioReturnResponse(BaseModel):
    """Aggregate unrealized return of the user's holdings.

    ``percentage`` is total gain over total cost basis, not an average of the
    per-holding percentages.
    """

    amount: Decimal
    percentage: Decimal
    total_cost_basis: Decimal
    total_market_value: Decimal

    @classmethod
    def from_dto(cls, dto: PortfolioReturnResult) -> "PortfolioReturnResponse":
        return cls(
            amount=dto.amount,
            percentage=dto.percentage,
            total_cost_basis=dto.total_cost_basis,
            total_market_value=dto.total_market_value,
        )


class HoldingRefreshOutcomeResponse(BaseModel):
    """Per-holding outcome of a bulk price refresh."""

    holding_id: UUID
    symbol: str
    success: bool
    previous_price: Decimal
    current_price: Decimal
    error_code: str | None = Field(
        None,
        description="invalid_price, symbol_not_found, provider_unavailable "
        "or concurrent_modification",
    )
    error: str | None = None

    @classmethod
    def from_dto(cls, dto: HoldingRefreshOutcome) -> "HoldingRefreshOutcomeResponse":
        return cls(
            holding_id=dto.holding_id,
            symbol=dto.symbol,
            success=dto.success,
            previous_price=dto.previous_price,
            current_price=dto.current_price,
            error_code=dto.error_code,
            error=dto.error,
        )


class RefreshPortfolioPricesResponse(BaseModel):
    """Bulk price refresh response.

    Attributes:
        results: One entry per holding.
        total_count: Holdings attempted.
        updated_count: Holdings refreshed.
        failed_count: Holdings left unchanged.
        portfolio_value: Portfolio value after the refresh.
        portfolio_return: Portfolio return after the refresh.
        message: Summary, e.g. "2 of 3 holdings updated".
    """

    results: list[HoldingRefreshOutcomeResponse]
    total_count: int
    updated_count: int
    failed_count: int
    portfolio_value: Decimal
    portfolio_return: PortfolioReturnResponse
    message: str

    @classmethod
    def from_dto(
        cls, dto: RefreshPortfolioPricesResult
    ) -> "RefreshPortfolioPricesResponse":
        """Convert bulk refresh DTO to response schema."""
        return cls(
            results=[HoldingRefreshOutcomeResponse.from_dto(r) for r in dto.results],
            total_count=dto.total_count,
            updated_count=dto.updated_count,
            failed_count=dto.failed_count,
            portfolio_value=dto.portfolio_value,
            portfolio_return=PortfolioReturnResponse.from_dto(dto.portfolio_return),
            message=dto.message,
        )
