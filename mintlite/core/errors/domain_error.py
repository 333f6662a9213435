"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for errors that travel as data inside
``Failure`` results (market data lookups, repository outcomes).

Architecture:
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Value-level validation inside entities raises ``ValueError`` subclasses
  instead (see ``mintlite.domain.errors.valuation_error``)

Usage:
    from mintlite.core.errors import DomainError
    from mintlite.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from mintlite.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
