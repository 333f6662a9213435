"""ListHoldings query handler.

Lists every holding a user owns, newest first, each tagged with its price
status (current or stale) at the time of the request.
"""

from datetime import UTC, datetime, timedelta

from mintlite.application.dtos.holding_dtos import HoldingListResult, to_holding_result
from mintlite.application.queries.holding_queries import ListHoldings
from mintlite.core.result import Result, Success
from mintlite.domain.protocols.holding_repository import HoldingRepository


class ListHoldingsHandler:
    """Handler for ListHoldings query.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding retrieval
        - price_staleness: Window in which a price counts as current
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        price_staleness: timedelta,
    ) -> None:
        self._holding_repo = holding_repo
        self._price_staleness = price_staleness

    async def handle(self, query: ListHoldings) -> Result[HoldingListResult, str]:
        """Handle ListHoldings query.

        Args:
            query: ListHoldings query.

        Returns:
            Success(HoldingListResult): All holdings for user (may be empty).
        """
        holdings = await self._holding_repo.find_by_user(query.user_id)

        fresh_since = datetime.now(UTC) - self._price_staleness
        return Success(
            value=HoldingListResult(
                holdings=[
                    to_holding_result(holding, fresh_since=fresh_since)
                    for holding in holdings
                ],
                total_count=len(holdings),
            )
        )
