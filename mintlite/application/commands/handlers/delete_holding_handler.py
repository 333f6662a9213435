"""DeleteHolding command handler."""

from mintlite.application.commands.holding_commands import DeleteHolding
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.errors import HoldingError
from mintlite.domain.protocols.holding_repository import HoldingRepository


class DeleteHoldingHandler:
    """Handler for DeleteHolding command.

    Only holdings owned by the requesting user can be deleted; anything else
    is reported as not found.
    """

    def __init__(self, holding_repo: HoldingRepository) -> None:
        self._holding_repo = holding_repo

    async def handle(self, cmd: DeleteHolding) -> Result[None, str]:
        """Handle DeleteHolding command.

        Returns:
            Success(None): Holding removed.
            Failure(error): Holding not found for this user.
        """
        holding = await self._holding_repo.find_by_id_and_user(
            cmd.holding_id, cmd.user_id
        )
        if holding is None:
            return Failure(error=HoldingError.NOT_FOUND)

        await self._holding_repo.delete(holding.id)
        return Success(value=None)
