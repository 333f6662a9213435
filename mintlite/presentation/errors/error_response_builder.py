"""Rendering of handler failures as problem responses.

Routers translate a handler's ``Failure`` into an ``ApplicationError``;
``ErrorResponseBuilder`` turns that into the HTTP response.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from mintlite.application.errors import ApplicationError, ApplicationErrorCode
from mintlite.core.config import settings
from mintlite.presentation.errors.problem_details import ErrorDetail, ProblemDetails

# code -> (HTTP status, title)
_APPLICATION_PROBLEMS: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
}


def problem_type_uri(slug: str) -> str:
    """Problem ``type`` URI for a slug, rooted at ``API_BASE_URL``."""
    return f"{settings.api_base_url}/errors/{slug}"


class ErrorResponseBuilder:
    """Build problem responses for application errors.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Holding was modified concurrently (version conflict)",
        ... )
        >>> ErrorResponseBuilder.from_application_error(error, request, trace_id)
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert an ApplicationError to a problem response.

        A set ``error.field`` becomes a single entry in ``errors``.
        """
        status_code, title = _APPLICATION_PROBLEMS[error.code]

        field_errors = None
        if error.field:
            field_errors = [
                ErrorDetail(
                    field=error.field, code=error.code.value, message=error.message
                )
            ]

        return ProblemDetails(
            type=problem_type_uri(error.code.value),
            title=title,
            status=status_code,
            detail=error.message,
            instance=request.url.path,
            errors=field_errors,
            trace_id=trace_id or None,
        ).to_response()
