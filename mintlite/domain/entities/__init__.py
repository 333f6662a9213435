"""Domain entities package."""

from mintlite.domain.entities.holding import Holding, parse_price

__all__ = [
    "Holding",
    "parse_price",
]
