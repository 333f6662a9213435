"""Application layer error types.

Application-level errors carry handler failures to the presentation layer,
where they are rendered as RFC 7807 Problem Details.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Each code maps to exactly one HTTP status in ErrorResponseBuilder.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Holding not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        field: Request field the error refers to, if any

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Holding was modified concurrently (version conflict)",
        ... )
    """

    code: ApplicationErrorCode
    message: str
    field: str | None = None
