"""Portfolio queries (CQRS read operations).

Portfolio figures are computed on every request from the user's current
holdings. No portfolio total is ever stored.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPortfolioValue:
    """Get the total market value of a user's holdings.

    Attributes:
        user_id: User whose portfolio to value.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPortfolioReturn:
    """Get the aggregate unrealized return of a user's holdings.

    Attributes:
        user_id: User whose portfolio to evaluate.
    """

    user_id: UUID
