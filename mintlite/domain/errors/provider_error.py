"""Market data provider error types.

These errors are part of the MarketDataProtocol contract - they define the
failure cases a quote lookup can return for a single symbol.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    async def get_current_price(
        self, symbol: str
    ) -> Result[Decimal, ProviderError]:
        if symbol not in quotes:
            return Failure(error=SymbolNotFoundError(...))
        return Success(value=quotes[symbol])
"""

from dataclasses import dataclass
from typing import Any

from mintlite.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(DomainError):
    """Base market data provider error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        provider_name: Name of the quote source (http, static, ...).
        details: Additional context (status code, response excerpt).
    """

    provider_name: str
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SymbolNotFoundError(ProviderError):
    """Provider has no quote for the requested symbol.

    Attributes:
        symbol: Symbol that was looked up.
    """

    symbol: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderUnavailableError(ProviderError):
    """Provider failed or timed out.

    Raised when:
    - Provider API returns 5xx errors
    - Connection timeout occurs
    - Connection cannot be established

    Recovery: Caller may retry later; the valuation core never retries.

    Attributes:
        is_transient: Whether the error is likely transient (True = retry).
        retry_after: Suggested retry delay in seconds (from provider).
    """

    is_transient: bool = True
    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderRateLimitError(ProviderUnavailableError):
    """Provider rate limit exceeded (HTTP 429).

    Treated as a flavour of unavailability: the symbol is skipped for this
    refresh cycle.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderInvalidResponseError(ProviderError):
    """Provider returned an unusable response.

    Raised when:
    - Response JSON is malformed
    - The price field is missing or not numeric

    Attributes:
        response_body: Raw response body (truncated) for debugging.
    """

    response_body: str | None = None
