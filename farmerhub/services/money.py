"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def parse_decimal(value: Union[Number, None]) -> Optional[Decimal]:
    """
    Strictly parse a value as a finite Decimal.

    Unlike to_decimal, invalid input yields None instead of zero, so callers
    can tell "not a number" apart from "zero".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, float):
            result = Decimal(str(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            result = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not result.is_finite():
        return None
    return result


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if isinstance(value, Decimal):
        return value
    parsed = parse_decimal(value)
    return parsed if parsed is not None else Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round monetary value to two decimal places (half up)."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number, currency: str = "INR") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (INR, USD, EUR, GBP)

    Returns:
        Formatted string, e.g. "₹1,234.50"
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted = f"{round_money(value):,.2f}"
    if symbol == currency:
        return f"{formatted} {currency}"
    return f"{symbol}{formatted}"
