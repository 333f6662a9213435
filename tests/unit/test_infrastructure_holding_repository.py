"""Unit tests for the SQLAlchemy HoldingRepository.

Tests cover:
- Entity <-> model mapping on reads
- Create vs update on save
- Version mismatch detection before writing
- Lost UPDATE guard (StaleDataError) translated to ConcurrentModificationError
- Delete

Architecture:
- Mocked AsyncSession; real ORM model instances
"""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.orm.exc import StaleDataError
from uuid_extensions import uuid7

from mintlite.domain.entities.holding import Holding
from mintlite.domain.enums.asset_class import AssetClass
from mintlite.domain.errors import ConcurrentModificationError
from mintlite.infrastructure.persistence.models.holding import Holding as HoldingModel
from mintlite.infrastructure.persistence.repositories.holding_repository import (
    HoldingRepository,
)
from tests.conftest import create_holding


def _make_model(*, user_id=None, version=1, **overrides) -> HoldingModel:
    now = datetime.now(UTC)
    fields = {
        "id": uuid7(),
        "user_id": user_id or uuid7(),
        "account_id": uuid7(),
        "symbol": "MSFT",
        "name": "Microsoft Corporation",
        "asset_class": "stock",
        "quantity": Decimal("50.00000000"),
        "cost_basis": Decimal("15000.00"),
        "current_price": Decimal("310.0000"),
        "currency": "USD",
        "market_value": Decimal("15500.00"),
        "unrealized_gain": Decimal("500.00"),
        "return_percentage": Decimal("3.33"),
        "last_price_update_at": now,
        "holding_metadata": {"note": "long term"},
        "version": version,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return HoldingModel(**fields)


def _result(*, one=None, many=None) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = one
    result.scalars.return_value.all.return_value = many or []
    return result


@pytest.fixture
def session():
    session = MagicMock()
    session.execute = AsyncMock(return_value=_result())
    session.flush = AsyncMock()

    @asynccontextmanager
    async def begin_nested():
        yield

    session.begin_nested.side_effect = begin_nested
    return session


@pytest.fixture
def repo(session):
    return HoldingRepository(session=session)


@pytest.mark.unit
class TestHoldingRepositoryReads:
    """Test lookups and model -> entity mapping."""

    async def test_find_by_user_maps_models(self, repo, session):
        user_id = uuid7()
        model = _make_model(user_id=user_id)
        session.execute.return_value = _result(many=[model])

        holdings = await repo.find_by_user(user_id)

        assert len(holdings) == 1
        holding = holdings[0]
        assert isinstance(holding, Holding)
        assert holding.id == model.id
        assert holding.user_id == user_id
        assert holding.asset_class == AssetClass.STOCK
        assert holding.metadata == {"note": "long term"}
        assert holding.version == 1
        assert holding.market_value == Decimal("15500.00")

    async def test_find_by_user_empty(self, repo, session):
        assert await repo.find_by_user(uuid7()) == []

    async def test_find_by_id_and_user_found(self, repo, session):
        model = _make_model()
        session.execute.return_value = _result(one=model)

        holding = await repo.find_by_id_and_user(model.id, model.user_id)

        assert holding is not None
        assert holding.id == model.id

    async def test_find_by_id_and_user_not_found(self, repo, session):
        assert await repo.find_by_id_and_user(uuid7(), uuid7()) is None


@pytest.mark.unit
class TestHoldingRepositorySave:
    """Test save create/update and concurrency checks."""

    async def test_save_new_holding_adds_model(self, repo, session):
        holding = create_holding(version=0)

        async def flush():
            session.add.call_args.args[0].version = 1

        session.flush.side_effect = flush

        saved = await repo.save(holding)

        session.add.assert_called_once()
        added = session.add.call_args.args[0]
        assert isinstance(added, HoldingModel)
        assert added.id == holding.id
        assert added.symbol == "MSFT"
        assert added.market_value == Decimal("15500.00")
        assert saved.version == 1
        session.flush.assert_awaited_once()

    async def test_save_existing_holding_updates_model(self, repo, session):
        existing = _make_model(version=1)
        session.execute.return_value = _result(one=existing)
        holding = create_holding(
            id=existing.id,
            user_id=existing.user_id,
            account_id=existing.account_id,
            current_price=Decimal("320.00"),
            version=1,
        )

        async def flush():
            existing.version = 2

        session.flush.side_effect = flush

        saved = await repo.save(holding)

        session.add.assert_not_called()
        assert existing.current_price == Decimal("320.00")
        assert existing.market_value == Decimal("16000.00")
        assert saved.current_price == Decimal("320.00")
        assert saved.version == 2

    async def test_version_mismatch_raises_before_writing(self, repo, session):
        existing = _make_model(version=3)
        session.execute.return_value = _result(one=existing)
        holding = create_holding(id=existing.id, version=1)

        with pytest.raises(ConcurrentModificationError) as exc_info:
            await repo.save(holding)

        assert exc_info.value.holding_id == existing.id
        assert exc_info.value.expected_version == 1
        assert exc_info.value.actual_version == 3
        session.flush.assert_not_awaited()
        assert existing.current_price == Decimal("310.0000")

    async def test_stale_update_raises_concurrent_modification(self, repo, session):
        existing = _make_model(version=1)
        session.execute.return_value = _result(one=existing)
        session.flush.side_effect = StaleDataError("UPDATE matched 0 rows")
        holding = create_holding(id=existing.id, version=1)

        with pytest.raises(ConcurrentModificationError) as exc_info:
            await repo.save(holding)

        assert exc_info.value.expected_version == 1
        assert exc_info.value.actual_version is None


@pytest.mark.unit
class TestHoldingRepositoryDelete:
    """Test delete."""

    async def test_delete_executes_and_flushes(self, repo, session):
        await repo.delete(uuid7())

        session.execute.assert_awaited_once()
        session.flush.assert_awaited_once()
