"""Centralized constants for internal implementation details.

These are fixed precision and limit values, NOT environment-specific
configuration. For environment-specific settings use
``mintlite/core/config.py``.

Categories:
- Decimal precision: quantization steps for money, prices and quantities
- Currency: default ISO 4217 code
- Timeouts: Default timeouts for external service calls
- Limits: Truncation and safety limits

Example:
    >>> from mintlite.core.constants import MONEY_QUANTUM
    >>> Decimal("5025.004").quantize(MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)
    Decimal('5025.00')
"""

from decimal import Decimal

# =============================================================================
# Decimal Precision
# =============================================================================

MONEY_QUANTUM: Decimal = Decimal("0.01")
"""Quantization step for monetary amounts and percentages (2 dp)."""

PRICE_QUANTUM: Decimal = Decimal("0.0001")
"""Quantization step for per-unit prices (4 dp, matches storage scale)."""

QUANTITY_QUANTUM: Decimal = Decimal("0.00000001")
"""Quantization step for quantities (8 dp for fractional shares/crypto)."""

HUNDRED: Decimal = Decimal("100")
"""Percentage multiplier."""

DEFAULT_CURRENCY: str = "USD"
"""Currency for new holdings and for portfolio totals (no FX conversion)."""


# =============================================================================
# Timeouts
# =============================================================================

MARKET_DATA_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for market data API calls in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of provider response bodies kept in error details."""
