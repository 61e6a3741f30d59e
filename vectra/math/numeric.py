"""
Complex number value type.

A minimal complex number that satisfies the ring capability (zero, add,
sub, mul, equality) so it can be used as a polynomial coefficient. The
components keep their own numeric type: Complex(1, 2) has int parts,
Complex(1.5, 2) has a float real part.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import CoefficientTypeError
from .value import format_scalar, is_numeric

_COMPLEX_LITERAL = re.compile(r'([+-]?\d+(?:\.\d+)?)([+-])(\d+(?:\.\d+)?)?i$')


def _parse_number(text: str) -> int | float:
    """Parse a decimal literal, keeping integers as int."""
    number = float(text)
    return int(number) if "." not in text else number


class Complex(BaseModel):
    """
    Complex number value.

    Represents numbers with real and imaginary parts.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    real: int | float = Field(default=0, description="The real part")
    imag: int | float = Field(default=0, description="The imaginary part")

    def __init__(
        self,
        real: int | float | complex | list | tuple | str = 0,
        imag: int | float = 0,
        **kwargs
    ):
        """
        Initialize a Complex number.

        Args:
            real: Real part (can be a number, a builtin complex, a list/tuple
                [real, imag], or a string "a+bi")
            imag: Imaginary part (default 0)
        """
        if isinstance(real, complex):
            real_part, imag_part = real.real, real.imag
        elif isinstance(real, (list, tuple)):
            if len(real) >= 2:
                real_part, imag_part = real[0], real[1]
            elif len(real) == 1:
                real_part, imag_part = real[0], 0
            else:
                real_part, imag_part = 0, 0
        elif isinstance(real, str):
            real_part, imag_part = self._parse_string(real)
        else:
            real_part, imag_part = real, imag

        super().__init__(real=real_part, imag=imag_part, **kwargs)

    @staticmethod
    def _parse_string(text: str) -> tuple[int | float, int | float]:
        """Parse strings like "2-4i", "3+i" or "5"."""
        compact = text.replace(' ', '')
        match = _COMPLEX_LITERAL.match(compact)
        if match:
            imag = _parse_number(match.group(3)) if match.group(3) else 1
            if match.group(2) == '-':
                imag = -imag
            return _parse_number(match.group(1)), imag
        try:
            return _parse_number(compact), 0
        except ValueError:
            raise ValueError(f"Cannot parse complex number from string: {text}") from None

    @classmethod
    def zero(cls) -> Complex:
        """The additive identity 0 + 0i."""
        return cls(0, 0)

    @classmethod
    def coerce(cls, value: Any) -> Complex:
        """
        Convert a complex-like or real value to Complex.

        Real ints and floats become x + 0i; Fraction and Decimal values
        are converted to float first.

        Raises:
            CoefficientTypeError: If value is not a number
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return cls(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(value, 0)
        if is_numeric(value):
            return cls(float(value), 0)
        raise CoefficientTypeError(value, "a complex number")

    def norm_sqr(self) -> int | float:
        """Squared magnitude re² + im²."""
        return self.real * self.real + self.imag * self.imag

    def conjugate(self) -> Complex:
        """Complex conjugate a - bi."""
        return Complex(self.real, -self.imag)

    def to_python(self) -> complex:
        """Convert to Python complex."""
        return complex(self.real, self.imag)

    def to_string(self) -> str:
        """Convert to string."""
        if self.imag == 0:
            return format_scalar(self.real)
        if self.real == 0:
            if self.imag == 1:
                return "i"
            if self.imag == -1:
                return "-i"
            return f"{format_scalar(self.imag)}i"
        imag_str = "" if abs(self.imag) == 1 else format_scalar(abs(self.imag))
        sign = "+" if self.imag > 0 else "-"
        return f"{format_scalar(self.real)} {sign} {imag_str}i"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"

    def _parts_of(self, other: Any) -> tuple[Any, Any] | None:
        """Split a supported operand into (real, imag), or None."""
        if isinstance(other, Complex):
            return other.real, other.imag
        if isinstance(other, complex):
            return other.real, other.imag
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other, 0
        return None

    # Arithmetic operators

    def __add__(self, other: Any) -> Complex:
        """Addition."""
        parts = self._parts_of(other)
        if parts is None:
            return NotImplemented
        return Complex(self.real + parts[0], self.imag + parts[1])

    def __radd__(self, other: Any) -> Complex:
        """Right addition."""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Complex:
        """Subtraction."""
        parts = self._parts_of(other)
        if parts is None:
            return NotImplemented
        return Complex(self.real - parts[0], self.imag - parts[1])

    def __rsub__(self, other: Any) -> Complex:
        """Right subtraction."""
        parts = self._parts_of(other)
        if parts is None:
            return NotImplemented
        return Complex(parts[0] - self.real, parts[1] - self.imag)

    def __mul__(self, other: Any) -> Complex:
        """Multiplication."""
        parts = self._parts_of(other)
        if parts is None:
            return NotImplemented
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        c, d = parts
        return Complex(self.real * c - self.imag * d, self.real * d + self.imag * c)

    def __rmul__(self, other: Any) -> Complex:
        """Right multiplication."""
        return self.__mul__(other)

    def __neg__(self) -> Complex:
        """Unary negation."""
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> Complex:
        """Unary positive."""
        return Complex(self.real, self.imag)

    def __eq__(self, other: Any) -> bool:
        """Exact equality of both components."""
        parts = self._parts_of(other)
        if parts is None:
            return NotImplemented
        return self.real == parts[0] and self.imag == parts[1]

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

