"""UpdateHolding command handler.

Applies a partial update to a holding. A new ``current_price`` goes through
``Holding.refresh_price`` (same transition as a market data refresh) and
publishes HoldingPriceRefreshed with source "manual".

Flow:
1. Load holding scoped to the requesting user
2. Compare expected_version with the stored version (optimistic concurrency)
3. Validate the new price, then apply detail changes and the price
4. Save (version-guarded)
5. Publish HoldingPriceRefreshed if the price changed
"""

from datetime import UTC, datetime, timedelta

from mintlite.application.commands.holding_commands import UpdateHolding
from mintlite.application.dtos.holding_dtos import HoldingResult, to_holding_result
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.entities.holding import parse_price
from mintlite.domain.errors import (
    ConcurrentModificationError,
    HoldingError,
    InvalidInputError,
    InvalidPriceError,
)
from mintlite.domain.events.holding_events import HoldingPriceRefreshed
from mintlite.domain.protocols.event_bus_protocol import EventBusProtocol
from mintlite.domain.protocols.holding_repository import HoldingRepository


class UpdateHoldingError:
    """UpdateHolding-specific errors."""

    HOLDING_NOT_FOUND = HoldingError.NOT_FOUND
    VERSION_CONFLICT = HoldingError.VERSION_CONFLICT
    VALIDATION_FAILED = "Validation failed"
    INVALID_PRICE = "Invalid price"


class UpdateHoldingHandler:
    """Handler for UpdateHolding command.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding lookup and persistence
        - EventBusProtocol: For HoldingPriceRefreshed on manual price edits
        - price_staleness: Window in which a price counts as current
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        event_bus: EventBusProtocol,
        price_staleness: timedelta,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            holding_repo: Holding repository.
            event_bus: For publishing domain events.
            price_staleness: Price freshness window.
        """
        self._holding_repo = holding_repo
        self._event_bus = event_bus
        self._price_staleness = price_staleness

    async def handle(self, cmd: UpdateHolding) -> Result[HoldingResult, str]:
        """Handle UpdateHolding command.

        Args:
            cmd: UpdateHolding command. None fields are left unchanged.

        Returns:
            Success(HoldingResult): Updated holding with its new version.
            Failure(error): Not found, version conflict, invalid price or
                validation failure. Nothing is persisted on failure.
        """
        holding = await self._holding_repo.find_by_id_and_user(
            cmd.holding_id, cmd.user_id
        )
        if holding is None:
            return Failure(error=UpdateHoldingError.HOLDING_NOT_FOUND)

        if cmd.expected_version is not None and cmd.expected_version != holding.version:
            return Failure(error=UpdateHoldingError.VERSION_CONFLICT)

        try:
            if cmd.current_price is not None:
                parse_price(cmd.current_price, symbol=holding.symbol)
        except InvalidPriceError as e:
            return Failure(error=f"{UpdateHoldingError.INVALID_PRICE}: {e}")

        try:
            holding.update_details(
                account_id=cmd.account_id,
                name=cmd.name,
                asset_class=cmd.asset_class,
                quantity=cmd.quantity,
                cost_basis=cmd.cost_basis,
                currency=cmd.currency,
                metadata=cmd.metadata,
            )
        except InvalidInputError as e:
            return Failure(error=f"{UpdateHoldingError.VALIDATION_FAILED}: {e}")

        previous_price = None
        if cmd.current_price is not None:
            previous_price = holding.refresh_price(cmd.current_price)

        try:
            saved = await self._holding_repo.save(holding)
        except ConcurrentModificationError:
            return Failure(error=UpdateHoldingError.VERSION_CONFLICT)

        if previous_price is not None:
            await self._event_bus.publish(
                HoldingPriceRefreshed(
                    user_id=saved.user_id,
                    holding_id=saved.id,
                    symbol=saved.symbol,
                    previous_price=previous_price,
                    current_price=saved.current_price,
                    market_value=saved.market_value,
                    source="manual",
                )
            )

        fresh_since = datetime.now(UTC) - self._price_staleness
        return Success(value=to_holding_result(saved, fresh_since=fresh_since))
