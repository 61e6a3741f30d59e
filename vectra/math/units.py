"""
Physical dimensions in terms of the seven SI base quantities.

A Unit records, for every base quantity, a metric prefix and an integer
power. It renders as a dimension formula such as "kL²T⁻¹".
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..core.errors import UnitError

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


class BaseUnit(Enum):
    """SI base quantities, in canonical order."""

    LENGTH = "length"
    MASS = "mass"
    TIME = "time"
    ELECTRIC_CURRENT = "electric_current"
    TEMPERATURE = "temperature"
    AMOUNT_OF_SUBSTANCE = "amount_of_substance"
    LUMINOUS_INTENSITY = "luminous_intensity"

    @property
    def symbol(self) -> str:
        """Dimension symbol."""
        return _BASE_SYMBOLS[self]


_BASE_SYMBOLS = {
    BaseUnit.LENGTH: "L",
    BaseUnit.MASS: "M",
    BaseUnit.TIME: "T",
    BaseUnit.ELECTRIC_CURRENT: "I",
    BaseUnit.TEMPERATURE: "Θ",
    BaseUnit.AMOUNT_OF_SUBSTANCE: "N",
    BaseUnit.LUMINOUS_INTENSITY: "J",
}


class UnitPrefix(Enum):
    """Metric prefixes; the value is the power of ten."""

    YOTTA = 24
    ZETTA = 21
    EXA = 18
    PETA = 15
    TERA = 12
    GIGA = 9
    MEGA = 6
    KILO = 3
    HECTO = 2
    DECA = 1
    NONE = 0
    DECI = -1
    CENTI = -2
    MILLI = -3
    MICRO = -6
    NANO = -9
    PICO = -12
    FEMTO = -15
    ATTO = -18
    ZEPTO = -21
    YOCTO = -24

    @property
    def symbol(self) -> str:
        """Prefix symbol ("k", "μ", ...); empty for NONE."""
        return _PREFIX_SYMBOLS[self]

    @property
    def factor(self) -> float:
        """Multiplier the prefix stands for (e.g. 1000 for KILO)."""
        return 10.0 ** self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> UnitPrefix:
        """
        Look up a prefix by symbol.

        Raises:
            UnitError: If the symbol is not a metric prefix
        """
        for prefix, prefix_symbol in _PREFIX_SYMBOLS.items():
            if prefix_symbol == symbol:
                return prefix
        # accept the ASCII spelling of micro
        if symbol == "u":
            return cls.MICRO
        raise UnitError(f"Unknown unit prefix '{symbol}'", symbol=symbol)


_PREFIX_SYMBOLS = {
    UnitPrefix.YOTTA: "Y",
    UnitPrefix.ZETTA: "Z",
    UnitPrefix.EXA: "E",
    UnitPrefix.PETA: "P",
    UnitPrefix.TERA: "T",
    UnitPrefix.GIGA: "G",
    UnitPrefix.MEGA: "M",
    UnitPrefix.KILO: "k",
    UnitPrefix.HECTO: "h",
    UnitPrefix.DECA: "da",
    UnitPrefix.NONE: "",
    UnitPrefix.DECI: "d",
    UnitPrefix.CENTI: "c",
    UnitPrefix.MILLI: "m",
    UnitPrefix.MICRO: "μ",
    UnitPrefix.NANO: "n",
    UnitPrefix.PICO: "p",
    UnitPrefix.FEMTO: "f",
    UnitPrefix.ATTO: "a",
    UnitPrefix.ZEPTO: "z",
    UnitPrefix.YOCTO: "y",
}


class DimensionalUnit(BaseModel):
    """One base quantity raised to an integer power, with a prefix."""

    base: BaseUnit
    prefix: UnitPrefix = UnitPrefix.NONE
    power: int = 0

    def to_string(self) -> str:
        """Prefix, symbol and superscript power; empty when the power is 0."""
        if self.power == 0:
            return ""
        text = f"{self.prefix.symbol}{self.base.symbol}"
        if self.power != 1:
            text += str(self.power).translate(_SUPERSCRIPTS)
        return text

    def __str__(self) -> str:
        return self.to_string()


def _combine(left: DimensionalUnit, right: DimensionalUnit, power: int) -> DimensionalUnit:
    """Merge two dimensions of the same base quantity into the given power."""
    if left.power == 0:
        prefix = right.prefix
    elif right.power == 0:
        prefix = left.prefix
    elif left.prefix == right.prefix:
        prefix = left.prefix
    else:
        raise UnitError(
            f"Cannot combine {left.base.symbol} with prefixes "
            f"'{left.prefix.symbol}' and '{right.prefix.symbol}'",
            base=left.base.value,
            prefixes=[left.prefix.name, right.prefix.name],
        )
    if power == 0:
        prefix = UnitPrefix.NONE
    return DimensionalUnit(base=left.base, prefix=prefix, power=power)


class Unit(BaseModel):
    """
    Dimension of a physical quantity.

    Holds exactly one DimensionalUnit per base quantity, in BaseUnit order.
    Unit() is dimensionless.

    Example:
        Unit.from_powers(L=1, T=-2) → "LT⁻²"
    """

    values: list[DimensionalUnit] = Field(
        default_factory=lambda: [DimensionalUnit(base=base) for base in BaseUnit]
    )

    @field_validator("values")
    @classmethod
    def _validate_values(cls, value: list[DimensionalUnit]) -> list[DimensionalUnit]:
        bases = [dimension.base for dimension in value]
        if bases != list(BaseUnit):
            raise ValueError("Unit needs one dimension per base unit, in SI order")
        return value

    @classmethod
    def from_dimensions(cls, **dimensions: DimensionalUnit) -> Unit:
        """
        Build a unit from dimensions keyed by base quantity name.

        Example:
            Unit.from_dimensions(length=DimensionalUnit(base=BaseUnit.LENGTH, power=2))
        """
        values = []
        for base in BaseUnit:
            dimension = dimensions.pop(base.value, None)
            if dimension is None:
                dimension = DimensionalUnit(base=base)
            if dimension.base is not base:
                raise UnitError(
                    f"Dimension for {base.value} has base {dimension.base.value}",
                    expected=base.value,
                    actual=dimension.base.value,
                )
            values.append(dimension)
        if dimensions:
            raise UnitError(f"Unknown base quantities: {sorted(dimensions)}", names=sorted(dimensions))
        return cls(values=values)

    @classmethod
    def from_powers(cls, **powers: int) -> Unit:
        """
        Build an unprefixed unit from powers keyed by dimension symbol.

        Symbols are L, M, T, I, Θ (or Theta), N and J.
        """
        by_symbol = {base.symbol: base for base in BaseUnit}
        by_symbol["Theta"] = BaseUnit.TEMPERATURE
        dimensions: dict[str, Any] = {}
        for symbol, power in powers.items():
            if symbol not in by_symbol:
                raise UnitError(f"Unknown dimension symbol '{symbol}'", symbol=symbol)
            base = by_symbol[symbol]
            dimensions[base.value] = DimensionalUnit(base=base, power=power)
        return cls.from_dimensions(**dimensions)

    def dimension(self, base: BaseUnit) -> DimensionalUnit:
        """The DimensionalUnit for one base quantity."""
        return self.values[list(BaseUnit).index(base)]

    def is_dimensionless(self) -> bool:
        return all(dimension.power == 0 for dimension in self.values)

    def to_string(self) -> str:
        """Dimension formula, or "1" for a dimensionless unit."""
        if self.is_dimensionless():
            return "1"
        return "".join(dimension.to_string() for dimension in self.values)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Unit({self.to_string()})"

    # Arithmetic operators

    def __mul__(self, other: Any) -> Unit:
        """Product of units: powers add."""
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit(values=[
            _combine(left, right, left.power + right.power)
            for left, right in zip(self.values, other.values)
        ])

    def __truediv__(self, other: Any) -> Unit:
        """Quotient of units: powers subtract."""
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit(values=[
            _combine(left, right, left.power - right.power)
            for left, right in zip(self.values, other.values)
        ])

    def __pow__(self, exponent: Any) -> Unit:
        """Raise every dimension to an integer power."""
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return Unit(values=[
            _combine(dimension, dimension, dimension.power * exponent)
            for dimension in self.values
        ])
