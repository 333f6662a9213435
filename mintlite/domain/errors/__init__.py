"""Domain errors package.

Usage:
    from mintlite.domain.errors import InvalidInputError, InvalidPriceError
    from mintlite.domain.errors import ProviderError, SymbolNotFoundError
"""

from mintlite.domain.errors.holding_error import (
    ConcurrentModificationError,
    HoldingError,
)
from mintlite.domain.errors.provider_error import (
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderUnavailableError,
    SymbolNotFoundError,
)
from mintlite.domain.errors.valuation_error import (
    InvalidInputError,
    InvalidPriceError,
)

__all__ = [
    "ConcurrentModificationError",
    "HoldingError",
    "InvalidInputError",
    "InvalidPriceError",
    # Market data errors
    "ProviderError",
    "ProviderInvalidResponseError",
    "ProviderRateLimitError",
    "ProviderUnavailableError",
    "SymbolNotFoundError",
]
