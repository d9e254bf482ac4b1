"""Fail-soft helpers around ``decimal.Decimal``.

Every amount in this package is backed by a ``Decimal``. Values arriving from
chain APIs are frequently malformed, so these helpers never raise on bad
input: unparseable values become ``NaN`` and the ``*_or_zero`` helpers turn
that into ``0``.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Context, Decimal, InvalidOperation
from enum import Enum
from typing import Union

DECIMAL_PRECISION = 100

# Extra digits kept beyond what an operation needs, so the final rounding
# step sees the true value (or a truncation of it) and rounds once.
_GUARD_DIGITS = 2


def decimal_context(precision: int = DECIMAL_PRECISION) -> Context:
    """Arithmetic context with at least ``precision`` significant digits.

    Division by zero yields Infinity and invalid operations yield NaN
    instead of raising.
    """
    return Context(
        prec=max(DECIMAL_PRECISION, precision),
        rounding=ROUND_HALF_UP,
        traps=[],
    )


DECIMAL_CONTEXT = decimal_context()

NumberLike = Union[Decimal, int, float, str]

_NAN = Decimal("NaN")
_ZERO = Decimal(0)


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits) if value.is_finite() else 0


def _span(*values: Decimal) -> int:
    """Digits needed to hold every finite value of ``values`` on one scale."""
    finite = [v for v in values if v.is_finite()]
    if not finite:
        return 0
    top = max(v.adjusted() for v in finite)
    bottom = min(v.as_tuple().exponent for v in finite)
    return top - bottom + 1 + _GUARD_DIGITS


def add_decimal(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of ``a`` and ``b``."""
    return decimal_context(_span(a, b)).add(a, b)


def subtract_decimal(a: Decimal, b: Decimal) -> Decimal:
    """Exact difference of ``a`` and ``b``."""
    return decimal_context(_span(a, b)).subtract(a, b)


def multiply_decimal(a: Decimal, b: Decimal) -> Decimal:
    """Exact product of ``a`` and ``b``."""
    return decimal_context(_digits(a) + _digits(b) + _GUARD_DIGITS).multiply(a, b)


def divide_decimal(a: Decimal, b: Decimal, decimal_places: int) -> Decimal:
    """Quotient of ``a`` and ``b`` carried past ``decimal_places`` digits.

    Digits beyond the guard digits are truncated, so rounding the result to
    ``decimal_places`` (half-up or down) matches rounding the exact quotient.
    """
    if not (a.is_finite() and b.is_finite()) or b.is_zero():
        return DECIMAL_CONTEXT.divide(a, b)
    if a.is_zero():
        return _ZERO
    integer_digits = max(a.adjusted() - b.adjusted() + 1, 0)
    context = decimal_context(
        integer_digits + max(decimal_places, 0) + _GUARD_DIGITS + 1
    )
    context.rounding = ROUND_DOWN
    return context.divide(a, b)


class SymbolPosition(str, Enum):
    BEFORE = "before"
    AFTER = "after"


def to_decimal(value: NumberLike | None) -> Decimal:
    """Convert ``value`` to a ``Decimal``, returning ``NaN`` if it can't be parsed."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        return _NAN
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return _NAN


def is_valid_decimal(value: Decimal) -> bool:
    return not value.is_nan()


def decimal_or_zero(value: NumberLike | None) -> Decimal:
    """Parse ``value``; falsy or unparseable input gives ``Decimal(0)``."""
    d = to_decimal(value) if value else _ZERO
    return d if is_valid_decimal(d) else _ZERO


def valid_decimal_or_zero(value: Decimal | None) -> Decimal:
    return value if value is not None and is_valid_decimal(value) else _ZERO


def fixed_decimal(
    value: NumberLike | None,
    decimal_places: int = 2,
    rounding: str = ROUND_HALF_UP,
) -> Decimal:
    """Return ``value`` quantized to ``decimal_places`` fractional digits.

    NaN and infinite inputs collapse to zero at the requested scale.
    """
    d = to_decimal(value) if value else _ZERO
    if not d.is_finite():
        d = _ZERO
    exponent = Decimal(1).scaleb(-decimal_places)
    context = decimal_context(
        max(d.adjusted(), 0) + decimal_places + 1 + _GUARD_DIGITS
    )
    fixed = d.quantize(exponent, rounding=rounding, context=context)
    if not fixed.is_finite():
        # exponent outside the context's Emin/Emax range
        return _ZERO.quantize(exponent)
    if fixed.is_zero() and fixed.is_signed():
        fixed = fixed.copy_abs()
    return fixed


def format_decimal(value: Decimal, decimal_places: int = 2) -> str:
    """Format ``value`` with ``decimal_places`` digits and ``,`` thousand separators.

    Rounds half-up. ``NaN`` renders as ``"NaN"``.
    """
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Infinity" if value.is_signed() else "Infinity"
    fixed = fixed_decimal(value, decimal_places)
    return f"{fixed:,.{max(decimal_places, 0)}f}"


def format_decimal_currency(
    value: Decimal,
    decimal_places: int = 2,
    symbol: str = "$",
    position: SymbolPosition = SymbolPosition.BEFORE,
) -> str:
    formatted = format_decimal(value, decimal_places)
    if position == SymbolPosition.BEFORE:
        return f"{symbol}{formatted}"
    return f"{formatted}{symbol}"
