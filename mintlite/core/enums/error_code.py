"""Domain-level error codes (machine-readable).

Carried by ``DomainError`` values returned in ``Failure`` results.

Categories:
- Market data provider errors (PROVIDER_*, SYMBOL_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Market data provider errors
    SYMBOL_NOT_FOUND = "symbol_not_found"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_RATE_LIMITED = "provider_rate_limited"
    PROVIDER_INVALID_RESPONSE = "provider_invalid_response"
