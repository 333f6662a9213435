"""GetHolding query handler.

Returns DTO (not domain entity) to prevent leaking domain to presentation.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, str] (explicit error handling)
- NO domain events (queries are side-effect free)
- Ownership: repository lookup is scoped by user_id, so another user's
  holding is indistinguishable from a missing one
"""

from datetime import UTC, datetime, timedelta

from mintlite.application.dtos.holding_dtos import HoldingResult, to_holding_result
from mintlite.application.queries.holding_queries import GetHolding
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.errors import HoldingError
from mintlite.domain.protocols.holding_repository import HoldingRepository


class GetHoldingHandler:
    """Handler for GetHolding query.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding retrieval
        - price_staleness: Window in which a price counts as current
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        price_staleness: timedelta,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            holding_repo: Holding repository.
            price_staleness: Price freshness window.
        """
        self._holding_repo = holding_repo
        self._price_staleness = price_staleness

    async def handle(self, query: GetHolding) -> Result[HoldingResult, str]:
        """Handle GetHolding query.

        Args:
            query: GetHolding query with holding and user IDs.

        Returns:
            Success(HoldingResult): Holding found and owned by user.
            Failure(error): Holding not found for this user.
        """
        holding = await self._holding_repo.find_by_id_and_user(
            query.holding_id, query.user_id
        )

        if holding is None:
            return Failure(error=HoldingError.NOT_FOUND)

        fresh_since = datetime.now(UTC) - self._price_staleness
        return Success(value=to_holding_result(holding, fresh_since=fresh_since))
