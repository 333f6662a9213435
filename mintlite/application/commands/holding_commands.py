"""Holding commands.

Commands that create, modify, delete and re-price holdings. Every command
carries the requesting ``user_id``; handlers only ever touch holdings owned
by that user.

Architecture:
    - Commands are immutable value objects representing user intent
    - Handlers validate, persist and return results
    - Price changes publish domain events for observability
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import UUID

from mintlite.core.constants import DEFAULT_CURRENCY
from mintlite.domain.enums.asset_class import AssetClass


@dataclass(frozen=True, kw_only=True)
class CreateHolding:
    """Record a new position manually.

    Attributes:
        user_id: Owner of the new holding.
        account_id: Account the position is held in.
        symbol: Ticker symbol (normalized to upper case).
        name: Display name.
        asset_class: Kind of security.
        quantity: Units held (>= 0).
        cost_basis: Total cost of the position (>= 0).
        current_price: Price per unit at entry time (>= 0).
        currency: ISO 4217 currency code.
        metadata: Free-form user data.
    """

    user_id: UUID
    account_id: UUID
    symbol: str
    name: str
    asset_class: AssetClass
    quantity: Decimal
    cost_basis: Decimal
    current_price: Decimal
    currency: str = DEFAULT_CURRENCY
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateHolding:
    """Apply a partial update to a holding.

    Fields left as None are not changed. A ``current_price`` goes through
    the same refresh transition as a market data refresh.

    Attributes:
        holding_id: Holding to update.
        user_id: Requesting user (ownership).
        expected_version: Version the client last read. A mismatch with the
            stored version is a conflict.
    """

    holding_id: UUID
    user_id: UUID
    expected_version: int | None = None
    account_id: UUID | None = None
    name: str | None = None
    asset_class: AssetClass | None = None
    quantity: Decimal | None = None
    cost_basis: Decimal | None = None
    current_price: Decimal | None = None
    currency: str | None = None
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteHolding:
    """Remove a holding.

    Attributes:
        holding_id: Holding to delete.
        user_id: Requesting user (ownership).
    """

    holding_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RefreshPortfolioPrices:
    """Fetch current prices for every holding a user owns.

    Blocking operation: the handler returns once every holding has been
    attempted.

    Attributes:
        user_id: User whose holdings to re-price.
    """

    user_id: UUID
