"""RFC 7807 problem documents.

Every error leaving the API (handler failures, request validation, framework
404/405s, unhandled exceptions) is rendered as a ``ProblemDetails`` body.
"""

from collections.abc import Mapping

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected request field."""

    field: str = Field(..., description="Field path, e.g. quantity or path.holding_id")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Problem document body.

    ``errors`` is only present for field-level failures; ``trace_id`` echoes
    the request's ``X-Trace-Id``.
    """

    type: str = Field(
        ...,
        description="Problem type URI",
        examples=["http://localhost:8000/errors/not_found"],
    )
    title: str = Field(..., examples=["Resource Not Found"])
    status: int = Field(..., examples=[404])
    detail: str = Field(..., examples=["Holding not found"])
    instance: str = Field(..., description="Request path", examples=["/investments"])
    errors: list[ErrorDetail] | None = None
    trace_id: str | None = None

    def to_response(self, headers: Mapping[str, str] | None = None) -> JSONResponse:
        """Render as a JSON response carrying ``status``; unset fields are omitted."""
        return JSONResponse(
            status_code=self.status,
            content=self.model_dump(exclude_none=True),
            headers=headers,
        )
