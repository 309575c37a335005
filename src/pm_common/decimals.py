"""Decimal helpers for probability prices and share sizes.

Prediction-market prices are probabilities in [0, 1]. All arithmetic in the
simulator is done in Decimal so identical inputs give identical results.
Values coming off the wire (JSON numbers or numeric strings) go through
to_decimal(); floats are routed via str() to avoid binary-float expansion.
"""

from decimal import Decimal, InvalidOperation

PRICE_MIN = Decimal("0")
PRICE_MAX = Decimal("1")


def to_decimal(value: object) -> Decimal | None:
    """Parse a wire value into a finite Decimal, or None if it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float, str)):
        try:
            parsed = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not parsed.is_finite():
        return None
    return parsed


def is_valid_price(price: Decimal) -> bool:
    """True if price lies in the closed probability range [0, 1]."""
    return PRICE_MIN <= price <= PRICE_MAX
