"""Repository implementations (adapters for domain protocols)."""

from mintlite.infrastructure.persistence.repositories.holding_repository import (
    HoldingRepository,
)

__all__ = ["HoldingRepository"]
