"""Integration tests for HoldingRepository.

Tests cover:
- Version assigned on insert and bumped on update
- Second writer losing the version check
- Lost UPDATE guard rolling back only its SAVEPOINT
- Failed refreshes leaving the stored row untouched

Architecture:
- Integration tests with REAL PostgreSQL database
- Uses test_database fixture (fresh Database instance per test)
- Separate sessions stand in for concurrent requests
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy import event, text
from uuid_extensions import uuid7

from mintlite.application.commands.handlers.refresh_portfolio_prices_handler import (
    RefreshOutcomeCode,
    RefreshPortfolioPricesHandler,
)
from mintlite.application.commands.holding_commands import RefreshPortfolioPrices
from mintlite.core.result import Success
from mintlite.domain.errors import ConcurrentModificationError
from mintlite.infrastructure.market_data.in_memory_provider import (
    InMemoryMarketDataProvider,
)
from mintlite.infrastructure.persistence.repositories.holding_repository import (
    HoldingRepository,
)
from tests.conftest import create_holding


# =============================================================================
# Test Helpers
# =============================================================================


def _bump_stored_version(symbol):
    """Build a before_flush listener that moves the stored row ahead.

    Simulates another writer committing between the repository's version
    read and its guarded UPDATE.
    """

    def listener(sync_session, flush_context, instances):
        if any(getattr(obj, "symbol", None) == symbol for obj in sync_session.dirty):
            sync_session.execute(
                text("UPDATE holdings SET version = version + 1 WHERE symbol = :symbol"),
                {"symbol": symbol},
            )

    return listener


async def _load(test_database, holding_id, user_id):
    async with test_database.get_session() as session:
        return await HoldingRepository(session).find_by_id_and_user(holding_id, user_id)


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest_asyncio.fixture(autouse=True)
async def clean_holdings_table(test_database):
    """Clean up holdings table before each test."""
    async with test_database.get_session() as session:
        await session.execute(text("TRUNCATE TABLE holdings"))
    yield


@pytest.fixture
def user_id():
    return uuid7()


@pytest_asyncio.fixture
async def stored_holdings(test_database, user_id):
    """Persist MSFT and GOOGL for one user; returns (msft, googl) at version 1."""
    msft = create_holding(user_id=user_id, symbol="MSFT", version=0)
    googl = create_holding(
        user_id=user_id,
        symbol="GOOGL",
        name="Alphabet Inc.",
        quantity=Decimal("25"),
        cost_basis=Decimal("70000.00"),
        current_price=Decimal("2850.00"),
        version=0,
    )
    async with test_database.get_session() as session:
        repo = HoldingRepository(session)
        saved = [await repo.save(msft), await repo.save(googl)]
    return tuple(saved)


# =============================================================================
# Test Classes
# =============================================================================


@pytest.mark.integration
class TestHoldingRepositoryVersioning:
    """Test version assignment on insert and update."""

    async def test_insert_is_version_one(self, test_database, stored_holdings, user_id):
        msft, _ = stored_holdings

        stored = await _load(test_database, msft.id, user_id)

        assert msft.version == 1
        assert stored is not None
        assert stored.version == 1
        assert stored.market_value == Decimal("15500.00")

    async def test_update_bumps_version(self, test_database, stored_holdings, user_id):
        msft, _ = stored_holdings

        async with test_database.get_session() as session:
            repo = HoldingRepository(session)
            holding = await repo.find_by_id_and_user(msft.id, user_id)
            holding.refresh_price(Decimal("320.00"))
            saved = await repo.save(holding)

        stored = await _load(test_database, msft.id, user_id)
        assert saved.version == 2
        assert stored.version == 2
        assert stored.current_price == Decimal("320.00")
        assert stored.market_value == Decimal("16000.00")

    async def test_other_users_holding_not_found(self, test_database, stored_holdings):
        msft, _ = stored_holdings

        assert await _load(test_database, msft.id, uuid7()) is None


@pytest.mark.integration
class TestHoldingRepositoryConcurrency:
    """Test optimistic concurrency between writers."""

    async def test_second_writer_loses(self, test_database, stored_holdings, user_id):
        msft, _ = stored_holdings

        async with test_database.get_session() as session_a:
            repo_a = HoldingRepository(session_a)
            stale = await repo_a.find_by_id_and_user(msft.id, user_id)

            async with test_database.get_session() as session_b:
                repo_b = HoldingRepository(session_b)
                fresh = await repo_b.find_by_id_and_user(msft.id, user_id)
                fresh.refresh_price(Decimal("330.00"))
                await repo_b.save(fresh)

            stale.refresh_price(Decimal("320.00"))
            with pytest.raises(ConcurrentModificationError) as exc_info:
                await repo_a.save(stale)

        assert exc_info.value.expected_version == 1
        assert exc_info.value.actual_version == 2
        stored = await _load(test_database, msft.id, user_id)
        assert stored.version == 2
        assert stored.current_price == Decimal("330.00")

    async def test_lost_update_guard_keeps_session_usable(
        self, test_database, stored_holdings, user_id
    ):
        msft, googl = stored_holdings
        listener = _bump_stored_version("MSFT")

        async with test_database.get_session() as session:
            repo = HoldingRepository(session)
            event.listen(session.sync_session, "before_flush", listener)
            try:
                holding = await repo.find_by_id_and_user(msft.id, user_id)
                holding.refresh_price(Decimal("320.00"))
                with pytest.raises(ConcurrentModificationError) as exc_info:
                    await repo.save(holding)
            finally:
                event.remove(session.sync_session, "before_flush", listener)

            other = await repo.find_by_id_and_user(googl.id, user_id)
            other.refresh_price(Decimal("2900.00"))
            saved = await repo.save(other)

        assert exc_info.value.actual_version is None
        assert saved.version == 2
        stored_msft = await _load(test_database, msft.id, user_id)
        assert stored_msft.version == 1
        assert stored_msft.current_price == Decimal("310.00")
        stored_googl = await _load(test_database, googl.id, user_id)
        assert stored_googl.current_price == Decimal("2900.00")


@pytest.mark.integration
class TestRefreshAgainstDatabase:
    """Test bulk refresh outcomes as stored in the database."""

    @staticmethod
    def _handler(session, quotes):
        logger = MagicMock()
        logger.bind.return_value = logger
        return RefreshPortfolioPricesHandler(
            holding_repo=HoldingRepository(session),
            market_data=InMemoryMarketDataProvider(quotes),
            event_bus=AsyncMock(),
            logger=logger,
        )

    async def test_unknown_symbol_leaves_row_unchanged(
        self, test_database, stored_holdings, user_id
    ):
        msft, googl = stored_holdings

        async with test_database.get_session() as session:
            handler = self._handler(session, {"MSFT": Decimal("320.00")})
            result = await handler.handle(RefreshPortfolioPrices(user_id=user_id))

        assert isinstance(result, Success)
        assert result.value.message == "1 of 2 holdings updated"
        stored_googl = await _load(test_database, googl.id, user_id)
        assert stored_googl.version == 1
        assert stored_googl.current_price == Decimal("2850.00")
        assert stored_googl.last_price_update_at == googl.last_price_update_at
        stored_msft = await _load(test_database, msft.id, user_id)
        assert stored_msft.version == 2
        assert stored_msft.current_price == Decimal("320.00")

    async def test_lost_write_leaves_row_unchanged(
        self, test_database, stored_holdings, user_id
    ):
        msft, googl = stored_holdings
        listener = _bump_stored_version("GOOGL")

        async with test_database.get_session() as session:
            handler = self._handler(
                session, {"MSFT": Decimal("320.00"), "GOOGL": Decimal("2900.00")}
            )
            event.listen(session.sync_session, "before_flush", listener)
            try:
                result = await handler.handle(RefreshPortfolioPrices(user_id=user_id))
            finally:
                event.remove(session.sync_session, "before_flush", listener)

        assert isinstance(result, Success)
        assert result.value.message == "1 of 2 holdings updated"
        codes = {r.symbol: r.error_code for r in result.value.results}
        assert codes == {
            "MSFT": None,
            "GOOGL": RefreshOutcomeCode.CONCURRENT_MODIFICATION,
        }
        stored_googl = await _load(test_database, googl.id, user_id)
        assert stored_googl.version == 1
        assert stored_googl.current_price == Decimal("2850.00")
        stored_msft = await _load(test_database, msft.id, user_id)
        assert stored_msft.current_price == Decimal("320.00")
