"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateHolding, RefreshPortfolioPrices).

Each command has a corresponding handler in ``commands/handlers``.
"""

from mintlite.application.commands.holding_commands import (
    CreateHolding,
    DeleteHolding,
    RefreshPortfolioPrices,
    UpdateHolding,
)

__all__ = [
    "CreateHolding",
    "DeleteHolding",
    "RefreshPortfolioPrices",
    "UpdateHolding",
]
