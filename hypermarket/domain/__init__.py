"""Domain layer - price handling and the error taxonomy.

Example usage:
    from hypermarket.domain import format_price, parse_price

    price = parse_price("1.20")
    print(format_price(price))  # $1.20
"""

from hypermarket.domain.exceptions import (
    DomainError,
    InputError,
    InvalidChoiceError,
    InvalidPriceError,
    NegativePriceError,
)
from hypermarket.domain.money import (
    MAX_PRICE,
    MAX_SCALE,
    ZERO,
    exact_context,
    format_price,
    parse_price,
)

__all__ = [
    # Money
    "MAX_PRICE",
    "MAX_SCALE",
    "ZERO",
    "exact_context",
    "format_price",
    "parse_price",
    # Exceptions
    "DomainError",
    "InputError",
    "InvalidChoiceError",
    "InvalidPriceError",
    "NegativePriceError",
]
