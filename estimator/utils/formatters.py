"""
Formatting helpers for JSON responses.
Numbers stored as Numeric come back as Decimal and must leave the API as JSON numbers.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from datetime import date, datetime
from typing import Union, Optional


def to_number(value: Union[int, float, Decimal, str, None], default: Optional[float] = None) -> Optional[Union[int, float]]:
    """
    Convert a stored numeric value into a JSON-friendly number.

    Integral values become int, everything else float.

    Examples:
        to_number(Decimal('15000.00')) -> 15000
        to_number(Decimal('1.2500')) -> 1.25
        to_number(None, 1.0) -> 1.0
    """
    if value is None or value == "":
        return default

    try:
        num = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return default

    if num == num.to_integral_value():
        return int(num)
    return float(num)


def round_amount(value: Union[int, float, Decimal], places: int = 0) -> Decimal:
    """
    Round half-up to a fixed number of decimal places.

    round_amount(Decimal('1245000.5')) -> Decimal('1245001')
    """
    exponent = Decimal(1) if places == 0 else Decimal(10) ** -places
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def iso_datetime(value: Union[date, datetime, None]) -> Optional[str]:
    """ISO-8601 string or None."""
    if value is None:
        return None
    return value.isoformat()


def money(value: Union[int, float, Decimal, None], symbol: str = '') -> str:
    """
    Display string for an amount: thousands separated by commas, no decimals
    when the amount is integral.

    money(Decimal('1660000'), '₹') -> "₹1,660,000"
    money(1234.5, '$') -> "$1,234.50"
    """
    if value is None:
        return "-"

    try:
        num = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    if num == num.to_integral_value():
        return f"{symbol}{int(num):,}"
    return f"{symbol}{num.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,}"
