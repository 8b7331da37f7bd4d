"""Conversion between currency decimals and integer minor units"""

from decimal import Decimal, InvalidOperation
from settleup_gateway.domain.exceptions import InvalidAmountError

CENTS = Decimal("0.01")


def to_cents(value: Decimal | str | int | float) -> int:
    """
    Convert a currency amount to integer cents.

    Floats go through str() first so 0.1 becomes exactly 10 cents.
    Trailing zeros are fine ("1.500"); a significant third decimal is not.

    Raises:
        InvalidAmountError: value is not a finite number or has sub-cent precision
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a currency amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Not a currency amount: {value!r}") from e

    if not amount.is_finite():
        raise InvalidAmountError(f"Not a currency amount: {value!r}")

    cents = amount.quantize(CENTS)
    if cents != amount:
        raise InvalidAmountError(f"Amount has more than two decimal places: {value!r}")

    return int(cents * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal"""
    return (Decimal(cents) / 100).quantize(CENTS)
