"""Global exception handlers.

Errors that escape the routers (dependency HTTPExceptions, request
validation, Starlette's own 404/405, unexpected exceptions) are rendered as
problem responses carrying the request's trace ID.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mintlite.core.container import get_logger
from mintlite.presentation.errors.error_response_builder import problem_type_uri
from mintlite.presentation.errors.problem_details import ErrorDetail, ProblemDetails

# HTTP status -> (title, type slug)
_HTTP_PROBLEMS: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
}


def _trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an HTTPException (dependency or routing error).

    Covers a missing X-User-ID header as well as unknown routes and methods.
    """
    # Type narrowing: registered only for Starlette HTTPException and subclasses
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _HTTP_PROBLEMS.get(exc.status_code, ("Error", "error"))
    return ProblemDetails(
        type=problem_type_uri(slug),
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=request.url.path,
        trace_id=_trace_id(request),
    ).to_response(headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render request validation failures as a 422 with one entry per field.

    Field paths drop the "body" prefix, so a bad ``quantity`` in the JSON
    body is reported as field "quantity" and a bad path parameter as
    "path.holding_id".
    """
    # Type narrowing: FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    field_errors = []
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ()) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return ProblemDetails(
        type=problem_type_uri("validation-failed"),
        title="Validation Failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Request validation failed. Check 'errors' for details.",
        instance=request.url.path,
        errors=field_errors or None,
        trace_id=_trace_id(request),
    ).to_response()


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer 500 without leaking internals."""
    trace_id = _trace_id(request)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ProblemDetails(
        type=problem_type_uri("internal-server-error"),
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=request.url.path,
        trace_id=trace_id,
    ).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
