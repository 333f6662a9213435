"""GetPortfolioValue query handler.

Values a user's portfolio from the holdings as currently stored. Totals are
computed per request and never persisted.
"""

from mintlite.application.dtos.holding_dtos import PortfolioValueResult
from mintlite.application.queries.portfolio_queries import GetPortfolioValue
from mintlite.core.constants import DEFAULT_CURRENCY
from mintlite.core.result import Result, Success
from mintlite.domain.protocols.holding_repository import HoldingRepository
from mintlite.domain.services.valuation import calculate_portfolio_value


class GetPortfolioValueHandler:
    """Handler for GetPortfolioValue query.

    Dependencies (injected via constructor):
        - HoldingRepository: For holding retrieval (user-scoped)
    """

    def __init__(self, holding_repo: HoldingRepository) -> None:
        self._holding_repo = holding_repo

    async def handle(self, query: GetPortfolioValue) -> Result[PortfolioValueResult, str]:
        """Handle GetPortfolioValue query.

        Args:
            query: GetPortfolioValue query with user_id.

        Returns:
            Success(PortfolioValueResult): Always succeeds; an empty
            portfolio is worth 0.

        Note:
            Amounts are summed without currency conversion.
        """
        holdings = await self._holding_repo.find_by_user(query.user_id)

        return Success(
            value=PortfolioValueResult(
                total_value=calculate_portfolio_value(holdings),
                holdings_count=len(holdings),
                currency=DEFAULT_CURRENCY,
            )
        )
