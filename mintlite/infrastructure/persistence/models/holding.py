"""Holding database model.

Architecture:
    - One row per manually recorded position, owned by one user
    - Amounts stored as Numeric with a separate currency column
    - Derived figures (market value, gain, return) stored denormalized and
      rewritten together with the price on every update
    - ``version`` is the mapper's version counter: every UPDATE carries
      ``WHERE version = :loaded`` and bumps it (optimistic concurrency)
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import DateTime, Index, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from mintlite.infrastructure.persistence.base import BaseMutableModel


class Holding(BaseMutableModel):
    """Holding model for investment position storage.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        user_id: Owner of the holding
        account_id: Account the position is held in
        symbol: Ticker symbol (upper case)
        name: Display name
        asset_class: stock, etf, crypto, bond, mutual_fund or other
        quantity: Units held
        cost_basis: Total cost of the position
        current_price: Latest price per unit
        currency: ISO 4217 currency code
        market_value: quantity * current_price
        unrealized_gain: market_value - cost_basis
        return_percentage: unrealized_gain / cost_basis * 100
        last_price_update_at: Last price refresh timestamp
        holding_metadata: Free-form user data (column "metadata")
        version: Optimistic concurrency counter

    Indexes:
        - ix_holdings_user_id: Ownership lookups
        - ix_holdings_symbol: Security lookup
        - idx_holdings_user_created: Newest-first listing per user
    """

    __tablename__ = "holdings"

    # =========================================================================
    # Ownership
    # =========================================================================

    user_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Owner of the holding",
    )

    account_id: Mapped[UUID] = mapped_column(
        nullable=False,
        comment="Account the position is held in",
    )

    # =========================================================================
    # Security Details
    # =========================================================================

    symbol: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Ticker symbol (MSFT, BTC, etc.)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    asset_class: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Asset class (stock, etf, crypto, bond, mutual_fund, other)",
    )

    # =========================================================================
    # Position Details
    # =========================================================================

    # 8 decimal places for crypto/fractional shares
    quantity: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=8),
        nullable=False,
        comment="Units held",
    )

    cost_basis: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        comment="Total cost paid for this position",
    )

    current_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Latest price per unit",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="USD",
        comment="ISO 4217 currency code",
    )

    # =========================================================================
    # Derived Valuation
    # =========================================================================

    market_value: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        comment="quantity * current_price",
    )

    unrealized_gain: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        comment="market_value - cost_basis",
    )

    return_percentage: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        comment="unrealized_gain / cost_basis * 100",
    )

    last_price_update_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Last price refresh timestamp",
    )

    # =========================================================================
    # Metadata and Concurrency
    # =========================================================================

    # "metadata" is reserved on declarative classes
    holding_metadata: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata",
        JSONB,
        nullable=True,
        comment="Free-form user data",
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Optimistic concurrency counter",
    )

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index(
            "idx_holdings_user_created",
            "user_id",
            "created_at",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Holding("
            f"id={self.id}, "
            f"symbol={self.symbol!r}, "
            f"quantity={self.quantity}, "
            f"market_value={self.market_value}, "
            f"version={self.version}"
            f")>"
        )
