"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Display and
input parsing follow a single fixed convention (pt-BR, BRL):

    R$ 1.234,56
"""
import math
import re
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOL = "R$"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","

_NON_DIGITS = re.compile(r"\D")
_NON_AMOUNT_CHARS = re.compile(r"[^\d,]")

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def _exact_context():
    """Context in which +, -, * and quantize never round or overflow."""
    return localcontext(Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN))


def from_minor_units(cents: Union[int, str]) -> Decimal:
    """
    Convert minor units (cents) to decimal amount.

    Args:
        cents: Amount in minor units, as int or digit string (e.g., 10050)

    Returns:
        Amount in major units as Decimal (e.g., 100.50), exact for any size
    """
    # Built from text: no context precision applies
    return Decimal(f"{cents}E-2")


def round_money(value: Number) -> Decimal:
    """Round monetary value to cents."""
    with _exact_context():
        return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Number) -> str:
    """
    Format monetary value with the currency symbol.

    Args:
        value: Value to format

    Returns:
        Formatted string, e.g. "R$ 1.234,56"
    """
    with _exact_context():
        formatted = f"{round_money(value):,.2f}"
    # "1,234.56" -> "1.234,56"
    formatted = formatted.translate(str.maketrans({
        ",": THOUSANDS_SEPARATOR,
        ".": DECIMAL_SEPARATOR,
    }))
    return f"{CURRENCY_SYMBOL} {formatted}"


def format_currency_input(raw_text: str) -> str:
    """
    Live-format a price field as the user types.

    Every non-digit is dropped and the remaining digits are read as cents,
    so typing "1", "12", "123" renders "R$ 0,01", "R$ 0,12", "R$ 1,23".

    Args:
        raw_text: Raw field text (may already contain formatting)

    Returns:
        Canonical display text, accepted by parse_currency_display()
    """
    digits = _NON_DIGITS.sub("", raw_text or "")
    # Kept as text: int() refuses very long digit strings
    return format_money(from_minor_units(digits or "0"))


def parse_currency_display(display_text: str) -> float:
    """
    Convert display text such as "R$ 1.234,56" to a number.

    Returns:
        The amount (1234.56), or NaN when nothing numeric is left
        or the text is malformed
    """
    cleaned = _NON_AMOUNT_CHARS.sub("", display_text or "")
    cleaned = cleaned.replace(DECIMAL_SEPARATOR, ".", 1)
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    with _exact_context():
        return to_decimal(a) + to_decimal(b)


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    with _exact_context():
        return to_decimal(a) - to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    with _exact_context():
        return to_decimal(value) * to_decimal(factor)
