"""Requesting-user dependency.

The caller is identified by the ``X-User-ID`` header, which an upstream
gateway sets after authenticating the request. The value must be a UUID.

Usage:
    @router.get("/investments")
    async def list_holdings(user_id: CurrentUserId):
        ...
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

USER_ID_HEADER = "X-User-ID"


async def get_current_user_id(
    x_user_id: Annotated[str | None, Header(alias=USER_ID_HEADER)] = None,
) -> UUID:
    """Resolve the requesting user's ID from the request header.

    Args:
        x_user_id: Raw ``X-User-ID`` header value.

    Returns:
        The requesting user's UUID.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid {USER_ID_HEADER} header",
        ) from None


# Type alias for route signatures
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
