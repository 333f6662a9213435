"""Core errors package.

Usage:
    from mintlite.core.errors import DomainError
"""

from mintlite.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
]
