"""Request middleware and request-context dependencies."""

from mintlite.presentation.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)
from mintlite.presentation.middleware.user_context import (
    CurrentUserId,
    get_current_user_id,
)

__all__ = [
    "CurrentUserId",
    "TraceMiddleware",
    "get_current_user_id",
    "get_trace_id",
]
