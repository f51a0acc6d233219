"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Floats appear
only at the JSON boundary (persisted slot, API responses).
"""
from decimal import MAX_PREC, Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Iterable, Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
}


def to_decimal(value: Union[Number, None]) -> Decimal:
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


def round_money(value: Number) -> Decimal:
    """Round monetary value to cents, at any magnitude."""
    amount = to_decimal(value)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents digits
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Exact multiplication of monetary value by a factor."""
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return to_decimal(value) * to_decimal(factor)


def total(values: Iterable[Number]) -> Decimal:
    """Exact sum of monetary values; Decimal("0") for an empty iterable."""
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return sum((to_decimal(v) for v in values), Decimal("0"))


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    >>> format_money(Decimal("1234.5"))
    '$1,234.50'

    Args:
        value: Value to format
        currency: Currency code

    Returns:
        Formatted string with currency symbol
    """
    rounded = round_money(value)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    sign = "-" if rounded < 0 else ""
    formatted = f"{abs(rounded):,.2f}"

    if currency in CURRENCY_SYMBOLS:
        return f"{sign}{symbol}{formatted}"
    return f"{sign}{formatted} {symbol}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API/storage boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
