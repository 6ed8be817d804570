"""
models/money.py
---------------
Fixed-point helpers for currency values.
Salaries are stored as NUMERIC(10,2); everything here mirrors that precision.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    """
    Convert an int/float/str/Decimal into a Decimal without binary drift.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a numeric value: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")
    return result


def to_money(value) -> Decimal:
    """Round to two fractional digits, half away from zero (NUMERIC(10,2) assignment)."""
    value = to_decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        result = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    # -0.004 rounds to -0.00; store and display it as 0.00
    return result.copy_abs() if result.is_zero() else result


def format_money(value: Decimal) -> str:
    """Render with exactly two decimals and no grouping, e.g. ``82500.00``."""
    return f"{to_money(value):.2f}"
