"""
Conversion between Polynomial and SymPy.

Usage:
    import sympy as sp
    from vectra.math import Polynomial
    from vectra.math.symbolic import from_sympy, to_sympy

    p = from_sympy("2*x^2 - 3*x")       # coefficients [0, -3, 2]
    to_sympy(p).as_expr()               # 2*x**2 - 3*x

SymPy drops leading zero coefficients, so a polynomial whose degree was
raised with set_degree() comes back with its true degree.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional

import sympy as sp
from sympy.polys.polyerrors import BasePolynomialError

from ..core.config import get_settings
from ..core.errors import CoefficientTypeError
from ..core.logging import get_context_logger
from .numeric import Complex
from .polynomial import Polynomial
from .value import is_complex_like


def _symbol(variable: Optional[str]) -> sp.Symbol:
    return sp.Symbol(variable if variable is not None else get_settings().POLYNOMIAL_VARIABLE)


def _to_sympy_number(value: Any) -> sp.Expr:
    """Convert one coefficient to a SymPy number."""
    if is_complex_like(value):
        c = Complex.coerce(value)
        return sp.sympify(c.real) + sp.sympify(c.imag) * sp.I
    if isinstance(value, Fraction):
        return sp.Rational(value.numerator, value.denominator)
    if isinstance(value, Decimal):
        return sp.Float(str(value))
    return sp.sympify(value)


def _component(value: sp.Expr) -> int | float:
    return int(value) if value.is_Integer else float(value)


def _from_sympy_number(value: sp.Expr) -> Any:
    """
    Convert a SymPy number to the closest Python coefficient type.

    Integer → int, Rational → Fraction, other reals → float,
    anything with an imaginary part → Complex.

    Raises:
        CoefficientTypeError: If value still contains symbols
    """
    if not value.is_number:
        raise CoefficientTypeError(value, "a numeric coefficient")
    if value.is_Integer:
        return int(value)
    if value.is_Rational:
        return Fraction(int(value.p), int(value.q))
    if value.is_real:
        return float(value)
    real, imag = value.as_real_imag()
    return Complex(_component(real), _component(imag))


def to_sympy(polynomial: Polynomial, variable: Optional[str] = None) -> sp.Poly:
    """
    Convert a Polynomial to a SymPy Poly.

    Args:
        polynomial: Polynomial to convert
        variable: Variable name (default: POLYNOMIAL_VARIABLE setting)

    Returns:
        sympy.Poly in that variable
    """
    coefficients = [_to_sympy_number(c) for c in reversed(polynomial.coefficients)]
    return sp.Poly(coefficients, _symbol(variable))


def from_sympy(expr: Any, variable: Optional[str] = None) -> Polynomial:
    """
    Convert a SymPy expression, Poly or expression string to a Polynomial.

    Args:
        expr: Polynomial expression in one variable
        variable: Variable name (default: POLYNOMIAL_VARIABLE setting)

    Returns:
        Polynomial with int/Fraction/float coefficients, or Complex
        coefficients throughout when any coefficient is complex

    Raises:
        CoefficientTypeError: If expr is not a polynomial in the variable
            with numeric coefficients
    """
    symbol = _symbol(variable)
    if isinstance(expr, sp.Poly):
        expr = expr.as_expr()
    try:
        poly = sp.Poly(sp.sympify(expr), symbol)
    except (BasePolynomialError, sp.SympifyError) as e:
        raise CoefficientTypeError(expr, f"a polynomial in {symbol}") from e

    coefficients = [_from_sympy_number(c) for c in reversed(poly.all_coeffs())]
    has_complex = any(is_complex_like(c) for c in coefficients)
    if has_complex:
        coefficients = [Complex.coerce(c) for c in coefficients]
    logger = get_context_logger(__name__, variable=str(symbol))
    logger.debug(
        "Converted %s to degree %d polynomial", expr, len(coefficients) - 1,
        extra_data={"complex": has_complex},
    )
    return Polynomial.from_coefficients(coefficients)
