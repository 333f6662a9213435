"""GetPortfolioReturn query handler."""

from mintlite.application.dtos.holding_dtos import PortfolioReturnResult
from mintlite.application.queries.portfolio_queries import GetPortfolioReturn
from mintlite.core.result import Result, Success
from mintlite.domain.protocols.holding_repository import HoldingRepository
from mintlite.domain.services.valuation import calculate_portfolio_return


class GetPortfolioReturnHandler:
    """Handler for GetPortfolioReturn query.

    Computes the aggregate return (total gain over total cost basis) from
    the user's current holdings.
    """

    def __init__(self, holding_repo: HoldingRepository) -> None:
        self._holding_repo = holding_repo

    async def handle(
        self, query: GetPortfolioReturn
    ) -> Result[PortfolioReturnResult, str]:
        """Handle GetPortfolioReturn query.

        Returns:
            Success(PortfolioReturnResult): Always succeeds; an empty
            portfolio has a 0 return.
        """
        holdings = await self._holding_repo.find_by_user(query.user_id)
        portfolio_return = calculate_portfolio_return(holdings)

        return Success(
            value=PortfolioReturnResult(
                amount=portfolio_return.amount,
                percentage=portfolio_return.percentage,
                total_cost_basis=portfolio_return.total_cost_basis,
                total_market_value=portfolio_return.total_market_value,
            )
        )
