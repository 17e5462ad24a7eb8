"""Money helpers: cent rounding and display formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}

Number = Union[Decimal, float, int, str]


def to_money(value: Number | None) -> Decimal:
    """Convert a stored amount to a Decimal rounded half-up to whole cents.

    Floats go through ``str`` so 0.1 becomes Decimal("0.10") rather than its
    binary expansion.
    """

    if value is None:
        return ZERO
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc


def sum_money(values: Iterable[Number]) -> Decimal:
    """Add amounts cent by cent so float noise never accumulates."""

    return sum((to_money(v) for v in values), ZERO)


def format_currency(amount: Number, currency: str = "EUR") -> str:
    """Render an amount the way the es-ES locale shows it.

    Spanish formatting skips the thousands separator for four-digit amounts:
    ``1234,50 €`` but ``12.345,00 €``.
    """

    value = to_money(amount)
    sign = "-" if value < 0 else ""
    integer, _, cents = f"{abs(value):.2f}".partition(".")
    groups = []
    while len(integer) > 3 and (groups or len(integer) > 4):
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    return f"{sign}{'.'.join(groups)},{cents} {symbol}"
