"""Amount primitives: BaseAmount (integer base units) and AssetAmount (decimal asset units).

- BaseAmount: smallest indivisible unit of a chain (sats, wei, tor). The value is
  always integral; every constructing operation truncates toward zero.
- AssetAmount: human scale amount resolved to ``decimal_places`` fractional digits
  (half-up rounding).
- Construction never fails. Missing, malformed, NaN or infinite input degrades to
  zero so that bad upstream data can't crash a display layer.
- Arithmetic returns new instances of the receiver's class. The result is resolved
  to the receiver's ``decimal_places`` unless an explicit scale is given.
- Comparisons look at magnitudes only. Comparing a BaseAmount with an AssetAmount
  compares raw numbers; keeping denominations apart is up to the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from enum import Enum
from typing import ClassVar, TypeVar, Union

from .decimals import (
    NumberLike,
    add_decimal,
    divide_decimal,
    fixed_decimal,
    multiply_decimal,
    subtract_decimal,
    to_decimal,
)

# Default number of asset decimals. RUNE started out on Binance chain with
# 8 decimals: 0.00000001 RUNE == 1 tor.
ASSET_DECIMAL = 8


class Denomination(str, Enum):
    BASE = "BASE"  # base units, no decimals
    ASSET = "ASSET"  # asset units, with decimals


A = TypeVar("A", bound="Amount")

Operand = Union[NumberLike, "Amount"]


def _operand_value(value: Operand) -> Decimal:
    if isinstance(value, Amount):
        return value.value
    return to_decimal(value)


@dataclass(frozen=True)
class Amount(ABC):
    """Immutable decimal value tagged with a denomination and a scale."""

    value: Decimal
    decimal_places: int = ASSET_DECIMAL

    denomination: ClassVar[Denomination]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self._normalise(self.value))

    @abstractmethod
    def _normalise(self, value: NumberLike | None) -> Decimal:
        """Resolve a raw value to this denomination's stored form."""
        ...

    def _places(self, decimal_places: int | None) -> int:
        return self.decimal_places if decimal_places is None else decimal_places

    def _new(self: A, value: Decimal, decimal_places: int | None) -> A:
        return type(self)(value, self._places(decimal_places))

    # Arithmetic. Sums, differences and products are exact; the only rounding
    # is the receiver's normalisation at the result scale.

    def add(self: A, other: Operand, decimal_places: int | None = None) -> A:
        return self._new(add_decimal(self.value, _operand_value(other)), decimal_places)

    def subtract(self: A, other: Operand, decimal_places: int | None = None) -> A:
        return self._new(
            subtract_decimal(self.value, _operand_value(other)), decimal_places
        )

    def multiply(self: A, other: Operand, decimal_places: int | None = None) -> A:
        return self._new(
            multiply_decimal(self.value, _operand_value(other)), decimal_places
        )

    def divide(self: A, other: Operand, decimal_places: int | None = None) -> A:
        quotient = divide_decimal(
            self.value, _operand_value(other), self._places(decimal_places)
        )
        return self._new(quotient, decimal_places)

    def __add__(self: A, other: Operand) -> A:
        return self.add(other)

    def __sub__(self: A, other: Operand) -> A:
        return self.subtract(other)

    def __mul__(self: A, other: Operand) -> A:
        return self.multiply(other)

    def __truediv__(self: A, other: Operand) -> A:
        return self.divide(other)

    # Comparisons

    def _compare(self, other: Operand) -> int | None:
        other_value = _operand_value(other)
        if other_value.is_nan():
            return None
        return (self.value > other_value) - (self.value < other_value)

    def less_than(self, other: Operand) -> bool:
        result = self._compare(other)
        return result is not None and result < 0

    def less_or_equal(self, other: Operand) -> bool:
        result = self._compare(other)
        return result is not None and result <= 0

    def greater_than(self, other: Operand) -> bool:
        result = self._compare(other)
        return result is not None and result > 0

    def greater_or_equal(self, other: Operand) -> bool:
        result = self._compare(other)
        return result is not None and result >= 0

    def equal(self, other: Operand) -> bool:
        return self._compare(other) == 0

    def __lt__(self, other: Operand) -> bool:
        return self.less_than(other)

    def __le__(self, other: Operand) -> bool:
        return self.less_or_equal(other)

    def __gt__(self, other: Operand) -> bool:
        return self.greater_than(other)

    def __ge__(self, other: Operand) -> bool:
        return self.greater_or_equal(other)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AssetAmount(Amount):
    """Amount in asset units, e.g. ``1.5`` RUNE."""

    denomination: ClassVar[Denomination] = Denomination.ASSET

    def _normalise(self, value: NumberLike | None) -> Decimal:
        return fixed_decimal(value, self.decimal_places, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BaseAmount(Amount):
    """Amount in base units, e.g. ``150000000`` tor.

    ``decimal_places`` is the scale of the associated asset, not of the value,
    which is always an integer.
    """

    denomination: ClassVar[Denomination] = Denomination.BASE

    def _normalise(self, value: NumberLike | None) -> Decimal:
        return fixed_decimal(value, 0, rounding=ROUND_DOWN)


def asset_amount(
    value: NumberLike | None = None, decimal_places: int = ASSET_DECIMAL
) -> AssetAmount:
    """Create an asset amount, e.g. RUNE.

    Args:
        value: Asset value. ``None`` and invalid values give a zero amount.
        decimal_places: Decimal places of the asset.

    Returns:
        The value rounded half-up to ``decimal_places``.
    """
    return AssetAmount(to_decimal(value), decimal_places)


def base_amount(
    value: NumberLike | None = None, decimal_places: int = ASSET_DECIMAL
) -> BaseAmount:
    """Create a base amount, e.g. tor.

    Args:
        value: Base value. ``None`` and invalid values give a zero amount.
            Fractions are truncated toward zero.
        decimal_places: Decimal places of the associated asset amount.
    """
    return BaseAmount(to_decimal(value), decimal_places)


def base_to_asset(base: BaseAmount) -> AssetAmount:
    """Convert base units to asset units (tor -> RUNE)."""
    places = base.decimal_places
    value = divide_decimal(base.value, Decimal(1).scaleb(places), places)
    return asset_amount(fixed_decimal(value, places), places)


def asset_to_base(asset: AssetAmount) -> BaseAmount:
    """Convert asset units to base units (RUNE -> tor), truncating leftovers."""
    places = asset.decimal_places
    value = multiply_decimal(asset.value, Decimal(1).scaleb(places))
    return base_amount(fixed_decimal(value, 0, rounding=ROUND_DOWN), places)


def is_asset_amount(value: Amount) -> bool:
    return value.denomination == Denomination.ASSET


def is_base_amount(value: Amount) -> bool:
    return value.denomination == Denomination.BASE
