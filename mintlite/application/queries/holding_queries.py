"""Holding queries (CQRS read operations).

Queries represent requests for holding data. They are immutable
dataclasses with question-like names. Queries NEVER change state.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries do NOT emit domain events
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetHolding:
    """Get a single holding by ID.

    Attributes:
        holding_id: Holding to retrieve.
        user_id: User requesting (ownership filter).

    Example:
        >>> query = GetHolding(
        ...     holding_id=holding_id,
        ...     user_id=user_id,
        ... )
        >>> result = await handler.handle(query)
    """

    holding_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListHoldings:
    """List all holdings owned by a user, newest first.

    Attributes:
        user_id: User whose holdings to list.
    """

    user_id: UUID
