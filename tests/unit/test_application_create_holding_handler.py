"""Unit tests for CreateHoldingHandler.

Tests cover:
- Successful creation with initial valuation and CURRENT price status
- Validation failures (nothing persisted)

Architecture:
- Unit tests for application handler
- Mocked repository (AsyncMock)
"""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from mintlite.application.commands.handlers.create_holding_handler import (
    CreateHoldingError,
    CreateHoldingHandler,
)
from mintlite.application.commands.holding_commands import CreateHolding
from mintlite.core.result import Failure, Success
from mintlite.domain.enums.asset_class import AssetClass


@pytest.fixture
def mock_holding_repo():
    repo = AsyncMock()
    repo.save.side_effect = lambda holding: holding
    return repo


@pytest.fixture
def handler(mock_holding_repo):
    return CreateHoldingHandler(
        holding_repo=mock_holding_repo,
        price_staleness=timedelta(minutes=15),
    )


def _command(**overrides) -> CreateHolding:
    fields = {
        "user_id": uuid7(),
        "account_id": uuid7(),
        "symbol": "acme",
        "name": "Acme Corp",
        "asset_class": AssetClass.STOCK,
        "quantity": Decimal("100"),
        "cost_basis": Decimal("4500.00"),
        "current_price": Decimal("50.25"),
    }
    fields.update(overrides)
    return CreateHolding(**fields)


@pytest.mark.unit
class TestCreateHoldingSuccess:
    """Test successful holding creation."""

    async def test_returns_valued_holding(self, handler, mock_holding_repo):
        cmd = _command(metadata={"lot": "2024-01"})

        result = await handler.handle(cmd)

        assert isinstance(result, Success)
        dto = result.value
        assert dto.symbol == "ACME"
        assert dto.account_id == cmd.account_id
        assert dto.asset_class == "stock"
        assert dto.market_value == Decimal("5025.00")
        assert dto.unrealized_gain == Decimal("525.00")
        assert dto.return_percentage == Decimal("11.67")
        assert dto.is_profitable is True
        assert dto.currency == "USD"
        assert dto.metadata == {"lot": "2024-01"}
        mock_holding_repo.save.assert_awaited_once()

    async def test_new_holding_price_is_current(self, handler, mock_holding_repo):
        result = await handler.handle(_command())

        assert isinstance(result, Success)
        assert result.value.price_status == "current"
        saved = mock_holding_repo.save.await_args.args[0]
        assert saved.last_price_update_at is not None
        assert saved.last_price_update_at == saved.created_at

    async def test_holding_is_owned_by_requesting_user(self, handler, mock_holding_repo):
        cmd = _command()

        await handler.handle(cmd)

        saved = mock_holding_repo.save.await_args.args[0]
        assert saved.user_id == cmd.user_id


@pytest.mark.unit
class TestCreateHoldingValidation:
    """Test validation failures."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"quantity": Decimal("-1")},
            {"cost_basis": Decimal("-100")},
            {"current_price": Decimal("-0.01")},
            {"symbol": ""},
            {"symbol": "AB\x01C"},
            {"currency": "DOLLARS"},
        ],
    )
    async def test_invalid_input_fails_without_saving(
        self, handler, mock_holding_repo, overrides
    ):
        result = await handler.handle(_command(**overrides))

        assert isinstance(result, Failure)
        assert result.error.startswith(CreateHoldingError.VALIDATION_FAILED)
        mock_holding_repo.save.assert_not_awaited()
