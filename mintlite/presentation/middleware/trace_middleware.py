"""Per-request trace IDs.

The ``X-Trace-Id`` request header is honoured when present, otherwise a
UUID4 is generated. The ID is echoed on the response, stored on
``request.state`` for the exception handlers, bound into structlog's
context variables and readable through ``get_trace_id()`` while the request
is being handled.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

_current_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace ID of the request being handled, None outside a request."""
    return _current_trace_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Attach a trace ID to every request and its response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        token = _current_trace_id.set(trace_id)
        try:
            with structlog.contextvars.bound_contextvars(trace_id=trace_id):
                response = await call_next(request)
        finally:
            _current_trace_id.reset(token)

        response.headers[TRACE_HEADER] = trace_id
        return response
