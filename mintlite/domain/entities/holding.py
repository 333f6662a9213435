"""Holding (investment position) domain entity.

Represents one manually recorded position in a user's brokerage or financial
account, together with its cached valuation figures.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Derived figures (market value, unrealized gain, return percentage) are
      recomputed from quantity, cost basis and current price on every change
    - Price changes go through ``refresh_price`` (stale -> current transition)
    - Domain events are emitted by the application layer, not the entity

Usage:
    from uuid_extensions import uuid7
    from mintlite.domain.entities import Holding
    from mintlite.domain.enums import AssetClass
    from decimal import Decimal

    holding = Holding(
        id=uuid7(),
        user_id=user_id,
        account_id=account_id,
        symbol="MSFT",
        name="Microsoft Corporation",
        asset_class=AssetClass.STOCK,
        quantity=Decimal("50"),
        cost_basis=Decimal("15000.00"),
        current_price=Decimal("310.00"),
    )
    holding.market_value  # Decimal('15500.00')
"""

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from mintlite.core.constants import (
    DEFAULT_CURRENCY,
    MONEY_QUANTUM,
    PRICE_QUANTUM,
    QUANTITY_QUANTUM,
)
from mintlite.domain.enums.asset_class import AssetClass
from mintlite.domain.enums.price_status import PriceStatus
from mintlite.domain.errors import InvalidInputError, InvalidPriceError
from mintlite.domain.services.valuation import require_non_negative, value_holding

# Exchange tickers plus the share-class, index and FX punctuation quote feeds use.
_SYMBOL_PATTERN = re.compile(r"[A-Z0-9.\-^=/]{1,50}")


def _limit_scale(value: Decimal, quantum: Decimal) -> Decimal:
    """Round ``value`` half-even to ``quantum`` only if it is more precise."""
    if value.as_tuple().exponent < quantum.as_tuple().exponent:  # type: ignore[operator]
        return value.quantize(quantum, rounding=ROUND_HALF_EVEN)
    return value


def parse_price(raw: object, *, symbol: str | None = None) -> Decimal:
    """Convert a raw price value into a validated Decimal.

    Accepts Decimal, int and numeric strings. Floats are refused.

    Args:
        raw: Price as received (manual edit or market data payload).
        symbol: Symbol the price belongs to (for error context).

    Returns:
        Non-negative, finite Decimal limited to 4 dp.

    Raises:
        InvalidPriceError: If the value is non-numeric, non-finite or negative.
    """
    if isinstance(raw, bool) or not isinstance(raw, (Decimal, int, str)):
        raise InvalidPriceError(
            f"Price must be numeric, got {type(raw).__name__}",
            symbol=symbol,
            price=raw,
        )
    try:
        price = Decimal(raw.strip()) if isinstance(raw, str) else Decimal(raw)
    except InvalidOperation:
        raise InvalidPriceError(
            f"Price is not numeric: {raw!r}", symbol=symbol, price=raw
        ) from None

    if not price.is_finite():
        raise InvalidPriceError("Price must be finite", symbol=symbol, price=raw)
    if price < 0:
        raise InvalidPriceError("Price cannot be negative", symbol=symbol, price=raw)

    return _limit_scale(price, PRICE_QUANTUM)


@dataclass
class Holding:
    """Investment holding owned by one user through one account.

    Financial Precision:
        All amounts are ``Decimal``. Cost basis is normalized to 2 dp, prices
        to at most 4 dp and quantities to at most 8 dp (the storage scales).

    Attributes:
        id: Unique holding identifier.
        user_id: Owner of the holding.
        account_id: Account the position is held in.
        symbol: Ticker symbol, upper-cased (e.g. "MSFT").
        name: Display name (e.g. "Microsoft Corporation").
        asset_class: Kind of security.
        quantity: Units held (>= 0).
        cost_basis: Total cost of the position (>= 0).
        current_price: Latest known price per unit (>= 0).
        currency: ISO 4217 currency code.
        metadata: Free-form user data.
        last_price_update_at: When current_price was last refreshed.
        version: Optimistic concurrency version (0 until first persisted).
        market_value: Derived, quantity * current_price.
        unrealized_gain: Derived, market_value - cost_basis.
        return_percentage: Derived, gain / cost_basis * 100.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> holding = Holding(
        ...     id=uuid7(),
        ...     user_id=user_id,
        ...     account_id=account_id,
        ...     symbol="acme",
        ...     name="Acme Corp",
        ...     asset_class=AssetClass.STOCK,
        ...     quantity=Decimal("100"),
        ...     cost_basis=Decimal("4500.00"),
        ...     current_price=Decimal("50.25"),
        ... )
        >>> holding.symbol, holding.market_value, holding.return_percentage
        ('ACME', Decimal('5025.00'), Decimal('11.67'))
    """

    # =========================================================================
    # Required Fields
    # =========================================================================

    id: UUID
    user_id: UUID
    account_id: UUID
    symbol: str
    name: str
    asset_class: AssetClass
    quantity: Decimal
    cost_basis: Decimal
    current_price: Decimal

    # =========================================================================
    # Optional Fields
    # =========================================================================

    currency: str = DEFAULT_CURRENCY
    metadata: dict[str, Any] | None = None
    last_price_update_at: datetime | None = None
    version: int = 0

    # =========================================================================
    # Timestamps
    # =========================================================================

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # =========================================================================
    # Derived (recomputed, never passed in)
    # =========================================================================

    market_value: Decimal = field(init=False)
    unrealized_gain: Decimal = field(init=False)
    return_percentage: Decimal = field(init=False)

    # =========================================================================
    # Validation
    # =========================================================================

    def __post_init__(self) -> None:
        """Validate and normalize the holding, then compute derived figures.

        Raises:
            InvalidInputError: If required fields are invalid.
        """
        if not self.symbol or not self.symbol.strip():
            raise InvalidInputError("Symbol cannot be empty", field="symbol")
        self.symbol = self.symbol.strip().upper()
        if not _SYMBOL_PATTERN.fullmatch(self.symbol):
            raise InvalidInputError(
                f"Invalid ticker symbol: {self.symbol!r}", field="symbol"
            )

        if not self.name or not self.name.strip():
            raise InvalidInputError("Name cannot be empty", field="name")
        self.name = self.name.strip()

        self.asset_class = self._validate_asset_class(self.asset_class)
        self.currency = self._validate_currency(self.currency)

        self.quantity = _limit_scale(
            require_non_negative(self.quantity, "quantity"), QUANTITY_QUANTUM
        )
        self.cost_basis = require_non_negative(self.cost_basis, "cost_basis").quantize(
            MONEY_QUANTUM, rounding=ROUND_HALF_EVEN
        )
        self.current_price = _limit_scale(
            require_non_negative(self.current_price, "current_price"), PRICE_QUANTUM
        )

        if self.version < 0:
            raise InvalidInputError("Version cannot be negative", field="version")

        self._recalculate()

    @staticmethod
    def _validate_asset_class(value: AssetClass | str) -> AssetClass:
        try:
            return AssetClass(value)
        except ValueError:
            raise InvalidInputError(
                f"Unknown asset class: {value!r}", field="asset_class"
            ) from None

    @staticmethod
    def _validate_currency(currency: str) -> str:
        code = (currency or "").strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise InvalidInputError(
                f"Invalid ISO 4217 currency code: {currency!r}", field="currency"
            )
        return code

    def _recalculate(self) -> None:
        valuation = value_holding(self.quantity, self.cost_basis, self.current_price)
        self.market_value = valuation.market_value
        self.unrealized_gain = valuation.unrealized_gain
        self.return_percentage = valuation.return_percentage

    # =========================================================================
    # Query Methods
    # =========================================================================

    def is_profitable(self) -> bool:
        """Check if the position has an unrealized gain.

        Returns:
            True if unrealized_gain > 0.
        """
        return self.unrealized_gain > 0

    def price_status(self, fresh_since: datetime) -> PriceStatus:
        """Classify the current price as stale or current.

        Args:
            fresh_since: Start of the active refresh window. Prices refreshed
                at or after this instant are current.

        Returns:
            PriceStatus.CURRENT or PriceStatus.STALE (never refreshed counts
            as stale).
        """
        if self.last_price_update_at is None:
            return PriceStatus.STALE
        if self.last_price_update_at >= fresh_since:
            return PriceStatus.CURRENT
        return PriceStatus.STALE

    # =========================================================================
    # Update Methods
    # =========================================================================

    def refresh_price(self, new_price: object) -> Decimal:
        """Apply a new current price (stale -> current transition).

        Validates the price before touching any state, so a rejected price
        leaves the holding exactly as it was.

        Args:
            new_price: Price from market data or a manual edit.

        Returns:
            The previous current price.

        Raises:
            InvalidPriceError: If the price is negative, non-numeric or
                non-finite.

        Side Effects:
            - Sets current_price and recomputes derived figures
            - Stamps last_price_update_at and updated_at
        """
        price = parse_price(new_price, symbol=self.symbol)
        previous = self.current_price

        self.current_price = price
        self._recalculate()

        now = datetime.now(UTC)
        self.last_price_update_at = now
        self.updated_at = now
        return previous

    def update_details(
        self,
        *,
        account_id: UUID | None = None,
        name: str | None = None,
        asset_class: AssetClass | None = None,
        quantity: Decimal | None = None,
        cost_basis: Decimal | None = None,
        currency: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Apply a partial update to non-price fields.

        All values are validated before any field is assigned. Derived
        figures are recomputed afterwards.

        Raises:
            InvalidInputError: If any supplied value is invalid.
        """
        if name is not None and not name.strip():
            raise InvalidInputError("Name cannot be empty", field="name")
        new_quantity = (
            _limit_scale(require_non_negative(quantity, "quantity"), QUANTITY_QUANTUM)
            if quantity is not None
            else self.quantity
        )
        new_cost_basis = (
            require_non_negative(cost_basis, "cost_basis").quantize(
                MONEY_QUANTUM, rounding=ROUND_HALF_EVEN
            )
            if cost_basis is not None
            else self.cost_basis
        )
        new_currency = (
            self._validate_currency(currency) if currency is not None else self.currency
        )
        new_asset_class = (
            self._validate_asset_class(asset_class)
            if asset_class is not None
            else self.asset_class
        )

        if account_id is not None:
            self.account_id = account_id
        if name is not None:
            self.name = name.strip()
        if metadata is not None:
            self.metadata = metadata
        self.asset_class = new_asset_class
        self.currency = new_currency
        self.quantity = new_quantity
        self.cost_basis = new_cost_basis

        self._recalculate()
        self.updated_at = datetime.now(UTC)
