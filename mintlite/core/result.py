"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected business failures
(holding not found, version conflict, rejected price). Callers branch with
``isinstance`` or structural pattern matching.

Usage:
    def parse_quantity(raw: str) -> Result[Decimal, str]:
        try:
            return Success(value=Decimal(raw))
        except InvalidOperation:
            return Failure(error="Quantity must be numeric")

    match parse_quantity("12.5"):
        case Success(value=quantity):
            ...
        case Failure(error=message):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
