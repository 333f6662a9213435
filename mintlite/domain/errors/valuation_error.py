"""Valuation input errors.

These are raised (not returned) because they signal a caller bug or a bad
value reaching the domain. Both derive from ``ValueError`` so entity
construction failures and primitive failures can be handled together.

Usage:
    from mintlite.domain.errors import InvalidInputError

    try:
        calculate_market_value(quantity, price)
    except InvalidInputError as e:
        return Failure(error=str(e))
"""


class InvalidInputError(ValueError):
    """Negative or non-numeric input passed to a valuation primitive.

    Attributes:
        field: Name of the offending input, when known.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidPriceError(ValueError):
    """Price rejected during a refresh (negative, non-numeric or non-finite).

    Attributes:
        symbol: Symbol whose price was rejected, when known.
        price: The raw value that was rejected.
    """

    def __init__(
        self, message: str, *, symbol: str | None = None, price: object = None
    ) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.price = price
