"""Pytest configuration and shared test helpers.

- Forces the testing environment before the application settings load
- Registers the custom markers
- Provides ``create_holding`` for building valid Holding entities
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

from datetime import UTC, datetime  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID  # noqa: E402

from uuid_extensions import uuid7  # noqa: E402

from mintlite.domain.entities.holding import Holding  # noqa: E402
from mintlite.domain.enums.asset_class import AssetClass  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: API tests through the FastAPI TestClient")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def create_holding(
    *,
    user_id: UUID | None = None,
    symbol: str = "MSFT",
    name: str = "Microsoft Corporation",
    quantity: Decimal = Decimal("50"),
    cost_basis: Decimal = Decimal("15000.00"),
    current_price: Decimal = Decimal("310.00"),
    version: int = 1,
    **kwargs: Any,
) -> Holding:
    """Helper to create a valid Holding for testing.

    Defaults describe 50 MSFT bought for 15000.00 and priced at 310.00
    (market value 15500.00).

    Usage:
        holding = create_holding()
        googl = create_holding(
            symbol="GOOGL",
            quantity=Decimal("25"),
            cost_basis=Decimal("70000.00"),
            current_price=Decimal("2850.00"),
        )
    """
    now = datetime.now(UTC)
    kwargs.setdefault("id", uuid7())
    kwargs.setdefault("account_id", uuid7())
    kwargs.setdefault("asset_class", AssetClass.STOCK)
    kwargs.setdefault("last_price_update_at", now)
    kwargs.setdefault("created_at", now)
    kwargs.setdefault("updated_at", now)

    return Holding(
        user_id=user_id or uuid7(),
        symbol=symbol,
        name=name,
        quantity=quantity,
        cost_basis=cost_basis,
        current_price=current_price,
        version=version,
        **kwargs,
    )
