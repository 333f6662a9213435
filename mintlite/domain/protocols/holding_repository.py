"""HoldingRepository protocol for holding persistence.

Port (interface) for hexagonal architecture. Infrastructure provides the
SQLAlchemy adapter.

Ownership:
    Every lookup that a request can trigger is scoped by ``user_id``. The
    portfolio aggregator relies on this to receive only the requesting user's
    holdings.
"""

from typing import Protocol
from uuid import UUID

from mintlite.domain.entities.holding import Holding


class HoldingRepository(Protocol):
    """Holding repository protocol (port).

    Implementations:
        - HoldingRepository (SQLAlchemy): mintlite/infrastructure/persistence/repositories/
    """

    async def find_by_user(self, user_id: UUID) -> list[Holding]:
        """List all holdings owned by a user.

        Args:
            user_id: Owner identifier.

        Returns:
            Holdings ordered by created_at, newest first.
        """
        ...

    async def find_by_id_and_user(
        self, holding_id: UUID, user_id: UUID
    ) -> Holding | None:
        """Find a holding owned by a user.

        Args:
            holding_id: Holding identifier.
            user_id: Owner identifier.

        Returns:
            Holding if it exists AND belongs to the user, None otherwise.
        """
        ...

    async def save(self, holding: Holding) -> Holding:
        """Create or update a holding.

        Updates are guarded by the holding's version (optimistic concurrency).

        Args:
            holding: Holding to persist.

        Returns:
            The persisted holding, carrying its new version.

        Raises:
            ConcurrentModificationError: If the stored version differs from
                ``holding.version``.
        """
        ...

    async def delete(self, holding_id: UUID) -> None:
        """Delete a holding.

        Args:
            holding_id: Holding to delete.
        """
        ...
