"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the domain
layer. Domain entities live in ``mintlite/domain/entities/`` and are mapped
to these models by repositories.
"""

from mintlite.infrastructure.persistence.models.holding import Holding

__all__ = ["Holding"]
