"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact type routing

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from mintlite.domain.events.base_event import DomainEvent
from mintlite.domain.events.holding_events import (
    HoldingPriceRefreshed,
    PortfolioPricesRefreshed,
)
from mintlite.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def _price_refreshed() -> HoldingPriceRefreshed:
    return HoldingPriceRefreshed(
        user_id=uuid7(),
        holding_id=uuid7(),
        symbol="MSFT",
        previous_price=Decimal("310.00"),
        current_price=Decimal("320.00"),
        market_value=Decimal("16000.00"),
        source="market_data",
    )


def _portfolio_refreshed() -> PortfolioPricesRefreshed:
    return PortfolioPricesRefreshed(
        user_id=uuid7(),
        total_count=2,
        updated_count=2,
        failed_count=0,
        portfolio_value=Decimal("88500.00"),
    )


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    async def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = _price_refreshed()
        event_bus.subscribe(HoldingPriceRefreshed, handler)
        await event_bus.publish(event)

        assert received == [event]

    async def test_multiple_handlers_all_execute(self):
        """Test multiple handlers for same event type all execute."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[str] = []

        async def handler_1(event: DomainEvent) -> None:
            calls.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            calls.append("handler_2")

        event_bus.subscribe(HoldingPriceRefreshed, handler_1)
        event_bus.subscribe(HoldingPriceRefreshed, handler_2)
        await event_bus.publish(_price_refreshed())

        assert sorted(calls) == ["handler_1", "handler_2"]

    async def test_publish_with_no_handlers_is_noop(self):
        """Test publishing event with no handlers is not an error."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(_price_refreshed())

        mock_logger.debug.assert_not_called()

    async def test_routes_by_exact_event_type(self):
        """Test handlers only receive the event type they subscribed to."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(PortfolioPricesRefreshed, handler)
        event_bus.subscribe(DomainEvent, handler)
        await event_bus.publish(_price_refreshed())

        assert received == []

        summary = _portfolio_refreshed()
        await event_bus.publish(summary)
        assert received == [summary]

    async def test_logs_publishing_at_debug(self):
        """Test publishing is logged with event type and handler count."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        async def handler(event: DomainEvent) -> None:
            return None

        event = _price_refreshed()
        event_bus.subscribe(HoldingPriceRefreshed, handler)
        await event_bus.publish(event)

        mock_logger.debug.assert_called_once_with(
            "event_publishing",
            event_type="HoldingPriceRefreshed",
            event_id=str(event.event_id),
            handler_count=1,
        )


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior (critical requirement)."""

    async def test_handler_failure_does_not_break_others(self):
        """Test one failing handler does not prevent the others."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("subscriber crashed")

        async def working_handler(event: DomainEvent) -> None:
            calls.append("working")

        event_bus.subscribe(HoldingPriceRefreshed, failing_handler)
        event_bus.subscribe(HoldingPriceRefreshed, working_handler)
        await event_bus.publish(_price_refreshed())

        assert calls == ["working"]

    async def test_handler_failure_not_propagated(self):
        """Test handler exception never reaches the publisher."""
        event_bus = InMemoryEventBus(logger=MagicMock())

        async def failing_handler(event: DomainEvent) -> None:
            raise ValueError("bad subscriber")

        event_bus.subscribe(HoldingPriceRefreshed, failing_handler)

        await event_bus.publish(_price_refreshed())

    async def test_handler_failure_logged_as_warning(self):
        """Test handler failure is logged with handler and error details."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("subscriber crashed")

        event = _price_refreshed()
        event_bus.subscribe(HoldingPriceRefreshed, failing_handler)
        await event_bus.publish(event)

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["event_type"] == "HoldingPriceRefreshed"
        assert kwargs["event_id"] == str(event.event_id)
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "subscriber crashed"
