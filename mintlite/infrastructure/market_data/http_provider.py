"""HTTP market data adapter.

Fetches current prices from a quote API:

    GET {base_url}/quotes/{symbol}   (symbol percent-encoded as one path segment)
    -> 200 {"symbol": "MSFT", "price": "310.25"}

Handles:
- Request execution with timeout/connection error handling
- Response status code interpretation (404, 429, 5xx)
- JSON parsing with Decimal floats (prices never pass through float)
- Structured logging with provider context

Architecture:
    - Infrastructure layer (adapter for external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for business errors)
    - No retries; the configured timeout bounds every call
"""

from decimal import Decimal, InvalidOperation
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from mintlite.core.constants import MARKET_DATA_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from mintlite.core.enums import ErrorCode
from mintlite.core.result import Failure, Result, Success
from mintlite.domain.errors import (
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderUnavailableError,
    SymbolNotFoundError,
)


class HttpMarketDataProvider:
    """Quote API client implementing MarketDataProtocol.

    Attributes:
        _base_url: Quote API base URL (without trailing slash).
        _api_key: Optional API key sent as ``X-API-Key``.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with provider context.

    Example:
        >>> provider = HttpMarketDataProvider(
        ...     base_url="https://quotes.example.com",
        ...     api_key="secret",
        ... )
        >>> result = await provider.get_current_price("MSFT")
    """

    provider_name = "http"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout: float = MARKET_DATA_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize the quote API client.

        Args:
            base_url: Quote API base URL.
            api_key: Optional API key.
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._logger = structlog.get_logger("market_data_api")

    async def get_current_price(self, symbol: str) -> Result[Decimal, ProviderError]:
        """Fetch the latest price for a symbol.

        Args:
            symbol: Ticker symbol.

        Returns:
            Success(Decimal): Price exactly as quoted.
            Failure(SymbolNotFoundError): 404 from the quote API.
            Failure(ProviderUnavailableError): Timeout, connection error, 5xx.
            Failure(ProviderRateLimitError): 429.
            Failure(ProviderInvalidResponseError): Bad JSON or price field.
        """
        result = await self._execute_request(symbol)
        if isinstance(result, Failure):
            return result

        response = result.value
        error_result = self._check_error_response(response, symbol)
        if error_result is not None:
            return error_result

        return self._parse_price(response, symbol)

    async def _execute_request(
        self, symbol: str
    ) -> Result[httpx.Response, ProviderError]:
        """Execute the quote request with error handling.

        Returns:
            Success(httpx.Response): Raw HTTP response.
            Failure(ProviderUnavailableError): On timeout, connection error
                or a URL httpx refuses to send.
        """
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["X-API-Key"] = self._api_key

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    f"{self._base_url}/quotes/{quote(symbol, safe='')}",
                    headers=headers,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning("market_data_api_timeout", symbol=symbol, error=str(e))
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Quote request for {symbol} timed out",
                    provider_name=self.provider_name,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "market_data_api_connection_error", symbol=symbol, error=str(e)
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Failed to connect to quote API: {e}",
                    provider_name=self.provider_name,
                    is_transient=True,
                )
            )

        except httpx.InvalidURL as e:
            self._logger.error("market_data_api_invalid_url", symbol=symbol, error=str(e))
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Cannot build quote request for {symbol!r}: {e}",
                    provider_name=self.provider_name,
                    is_transient=False,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        symbol: str,
    ) -> Failure[ProviderError] | None:
        """Check HTTP response for errors and return appropriate ProviderError.

        Returns:
            Failure(ProviderError) if error detected, None if response is OK.
        """
        status = response.status_code

        if status == 200:
            return None

        if status == 404:
            self._logger.info("market_data_symbol_not_found", symbol=symbol)
            return Failure(
                error=SymbolNotFoundError(
                    code=ErrorCode.SYMBOL_NOT_FOUND,
                    message=f"No quote available for symbol {symbol}",
                    provider_name=self.provider_name,
                    symbol=symbol,
                )
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = (
                int(retry_after) if retry_after and retry_after.isdigit() else None
            )
            self._logger.warning(
                "market_data_api_rate_limited",
                symbol=symbol,
                retry_after=retry_seconds,
            )
            return Failure(
                error=ProviderRateLimitError(
                    code=ErrorCode.PROVIDER_RATE_LIMITED,
                    message="Quote API rate limit exceeded",
                    provider_name=self.provider_name,
                    retry_after=retry_seconds,
                )
            )

        if status >= 500:
            self._logger.warning(
                "market_data_api_server_error",
                symbol=symbol,
                status_code=status,
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Quote API server error: {status}",
                    provider_name=self.provider_name,
                    is_transient=True,
                )
            )

        self._logger.warning(
            "market_data_api_unexpected_status",
            symbol=symbol,
            status_code=status,
        )
        return Failure(
            error=ProviderInvalidResponseError(
                code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                message=f"Unexpected response from quote API: {status}",
                provider_name=self.provider_name,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_price(
        self,
        response: httpx.Response,
        symbol: str,
    ) -> Result[Decimal, ProviderError]:
        """Extract the price from a quote payload.

        Returns:
            Success(Decimal): Parsed price.
            Failure(ProviderInvalidResponseError): On invalid JSON, a
                non-object payload, or a missing/non-numeric price.
        """
        try:
            data: Any = response.json(parse_float=Decimal)
        except ValueError as e:
            self._logger.error(
                "market_data_api_invalid_json",
                symbol=symbol,
                error=str(e),
            )
            return self._invalid_response(
                response, "Invalid JSON response from quote API"
            )

        if not isinstance(data, dict):
            return self._invalid_response(
                response, "Expected object response from quote API"
            )

        raw_price = data.get("price")
        if isinstance(raw_price, bool) or not isinstance(raw_price, (Decimal, int, str)):
            return self._invalid_response(
                response, f"Quote for {symbol} has no numeric price"
            )

        try:
            price = Decimal(raw_price)
        except InvalidOperation:
            return self._invalid_response(
                response, f"Quote for {symbol} has non-numeric price {raw_price!r}"
            )

        self._logger.debug("market_data_quote_received", symbol=symbol, price=str(price))
        return Success(value=price)

    def _invalid_response(
        self, response: httpx.Response, message: str
    ) -> Failure[ProviderError]:
        self._logger.warning("market_data_api_invalid_response", detail=message)
        return Failure(
            error=ProviderInvalidResponseError(
                code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                message=message,
                provider_name=self.provider_name,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )
