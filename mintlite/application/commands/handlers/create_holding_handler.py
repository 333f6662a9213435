"""CreateHolding command handler.

Records a manually entered position. The entry price counts as a fresh
price, so a new holding starts out CURRENT.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Returns Result[DTO, str] (explicit error handling)
"""

from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from mintlite.application.commands.holding_commands import CreateHolding
from mintlite.application.dtos.holding_dtos import HoldingResult, to_holding_result
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.entities.holding import Holding
from mintlite.domain.errors import InvalidInputError
from mintlite.domain.protocols.holding_repository import HoldingRepository


class CreateHoldingError:
    """CreateHolding-specific errors."""

    VALIDATION_FAILED = "Validation failed"


class CreateHoldingHandler:
    """Handler for CreateHolding command.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding persistence
        - price_staleness: Window in which a price counts as current
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        price_staleness: timedelta,
    ) -> None:
        self._holding_repo = holding_repo
        self._price_staleness = price_staleness

    async def handle(self, cmd: CreateHolding) -> Result[HoldingResult, str]:
        """Handle CreateHolding command.

        Args:
            cmd: CreateHolding command.

        Returns:
            Success(HoldingResult): Holding persisted with initial valuation.
            Failure(error): Validation failed (negative quantity, bad
                currency, empty symbol, ...).
        """
        now = datetime.now(UTC)

        try:
            holding = Holding(
                id=uuid7(),
                user_id=cmd.user_id,
                account_id=cmd.account_id,
                symbol=cmd.symbol,
                name=cmd.name,
                asset_class=cmd.asset_class,
                quantity=cmd.quantity,
                cost_basis=cmd.cost_basis,
                current_price=cmd.current_price,
                currency=cmd.currency,
                metadata=cmd.metadata,
                last_price_update_at=now,
                created_at=now,
                updated_at=now,
            )
        except InvalidInputError as e:
            return Failure(error=f"{CreateHoldingError.VALIDATION_FAILED}: {e}")

        saved = await self._holding_repo.save(holding)

        return Success(
            value=to_holding_result(saved, fresh_since=now - self._price_staleness)
        )
