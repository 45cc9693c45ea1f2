"""Price handling on top of ``Decimal``.

Prices are kept as ``Decimal`` in major units (e.g. dollars) so that
repeated additions never drift the way binary floats do. Rounding only
happens when a price is formatted for display.

Accepted prices stay within the range of a 96-bit decimal: at most
``MAX_PRICE`` and at most ``MAX_SCALE`` places after the point. Sums and
display rounding run under ``exact_context()``, whose precision is large
enough that additions of such prices are never rounded.
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from hypermarket.domain.exceptions import InvalidPriceError, NegativePriceError

ZERO = Decimal("0")
CENTS = Decimal("0.01")

MAX_PRICE = Decimal("79228162514264337593543950335")
MAX_SCALE = 28

EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


def exact_context():
    """Context manager for unrounded addition of prices."""
    return localcontext(EXACT)


def parse_price(raw: str) -> Decimal:
    """Parse user-entered text into a non-negative price.

    Args:
        raw: Text such as ``"1.20"`` or ``" 7 "``.

    Returns:
        The parsed amount, with the precision that was typed.

    Raises:
        InvalidPriceError: If the text is not a finite decimal number, is
            larger than ``MAX_PRICE`` or has more than ``MAX_SCALE``
            decimal places.
        NegativePriceError: If the amount is below zero.
    """
    text = raw.strip()
    try:
        amount = Decimal(text)
    except InvalidOperation as err:
        raise InvalidPriceError(raw) from err

    if not amount.is_finite():
        raise InvalidPriceError(raw, reason="price must be finite")
    if amount < ZERO:
        raise NegativePriceError(raw)
    if amount > MAX_PRICE:
        raise InvalidPriceError(raw, reason=f"price cannot exceed {MAX_PRICE}")
    if -amount.as_tuple().exponent > MAX_SCALE:
        raise InvalidPriceError(raw, reason=f"at most {MAX_SCALE} decimal places")
    return amount


def format_price(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount as currency with two decimals.

    Args:
        amount: Amount in major units.
        symbol: Currency symbol to prefix.

    Returns:
        Formatted string (e.g. ``'$1.20'``).
    """
    with exact_context():
        rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        if rounded < ZERO:
            return f"-{symbol}{-rounded:,.2f}"
        return f"{symbol}{rounded:,.2f}"
