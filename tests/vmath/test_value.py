"""Tests for the coefficient capability helpers."""

from decimal import Decimal
from fractions import Fraction

import pytest
import sympy as sp

from vectra.math.numeric import Complex
from vectra.math.polynomial import Polynomial
from vectra.math.value import (
    ComplexLike,
    RingElement,
    SignedDisplayable,
    additive_identity,
    format_scalar,
    is_complex_like,
    is_numeric,
)


class TestAdditiveIdentity:
    """Test zero lookup by coefficient type."""

    @pytest.mark.parametrize("sample, zero, kind", [
        (5, 0, int),
        (2.5, 0.0, float),
        (Fraction(1, 3), Fraction(0), Fraction),
        (Decimal("1.5"), Decimal(0), Decimal),
        (1 + 2j, 0j, complex),
        (Complex(1, 2), Complex(0, 0), Complex),
    ])
    def test_zero_of_type(self, sample, zero, kind):
        result = additive_identity(sample)
        assert result == zero
        assert isinstance(result, kind)

    @pytest.mark.parametrize("sample", [sp.Integer(1), sp.Integer(2), sp.Rational(1, 2), sp.Float(2.5)])
    def test_zero_of_sympy_number(self, sample):
        """Test types whose no-argument constructor is not zero."""
        result = additive_identity(sample)
        assert result == 0
        assert result.is_zero

    def test_zero_of_polynomial(self):
        """Test that polynomials of polynomials start from an all-zero polynomial."""
        zero = additive_identity(Polynomial.from_coefficients([1, 2]))
        assert zero == Polynomial.from_coefficients([0, 0])


class TestPredicates:
    """Test type predicates."""

    @pytest.mark.parametrize("value", [1, 1.5, Fraction(1, 2), Decimal("2")])
    def test_numeric(self, value):
        assert is_numeric(value)
        assert not is_complex_like(value)

    def test_bool_is_not_numeric(self):
        assert not is_numeric(True)

    @pytest.mark.parametrize("value", [1j, Complex(1, 1)])
    def test_complex_like(self, value):
        assert is_complex_like(value)
        assert not is_numeric(value)
        assert isinstance(value, ComplexLike)

    def test_protocols(self):
        assert isinstance(3, RingElement)
        assert isinstance(Fraction(1, 2), SignedDisplayable)
        assert isinstance(Complex(1, 0), RingElement)


class TestFormatScalar:
    """Test scalar text forms."""

    @pytest.mark.parametrize("value, expected", [
        (2.0, "2"),
        (-3.0, "-3"),
        (2.5, "2.5"),
        (7, "7"),
        (Fraction(3, 4), "3/4"),
        (1e20, "1e+20"),
    ])
    def test_format(self, value, expected):
        assert format_scalar(value) == expected
