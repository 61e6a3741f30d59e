"""
Coefficient capabilities shared by the vectra value types.

A polynomial is generic over its coefficient type. Rather than a base class,
the engine relies on structural capabilities:

- RingElement: zero, add, sub, mul, equality (enough for arithmetic)
- SignedDisplayable: ordering, negation and a text form (real rendering)
- ComplexLike: real and imaginary parts (complex rendering)
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RingElement(Protocol):
    """Values that can be polynomial coefficients."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> bool: ...


@runtime_checkable
class SignedDisplayable(RingElement, Protocol):
    """Ring elements that also know their sign and how to print themselves."""

    def __lt__(self, other: Any) -> bool: ...

    def __neg__(self) -> Any: ...

    def __str__(self) -> str: ...


@runtime_checkable
class ComplexLike(Protocol):
    """Anything exposing real and imaginary components."""

    @property
    def real(self) -> Any: ...

    @property
    def imag(self) -> Any: ...


# Plain (non-complex) numeric coefficient types
NUMERIC_TYPES: tuple[type, ...] = (int, float, Fraction, Decimal)


def is_numeric(value: Any) -> bool:
    """Check whether value is a plain numeric scalar (bools excluded)."""
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


def is_complex_like(value: Any) -> bool:
    """Check whether value should be treated as a complex number."""
    from .numeric import Complex

    return isinstance(value, (Complex, complex))


def additive_identity(sample: Any) -> Any:
    """
    Return the zero of sample's type.

    Types may provide a ``zero()`` classmethod; otherwise the zero is
    ``sample - sample``, which only needs ring subtraction and stays in the
    sample's ring (``sympy.Rational(1, 2)`` gives ``sympy.Integer(0)``).

    Example:
        additive_identity(3.5) → 0.0
    """
    zero = getattr(type(sample), "zero", None)
    if callable(zero):
        return zero()
    return sample - sample


def format_scalar(value: Any) -> str:
    """
    Text form of a scalar.

    Integral floats drop their trailing ``.0`` so 2.0 prints as "2".
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)
