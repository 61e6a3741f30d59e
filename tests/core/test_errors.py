"""Tests for library exceptions."""

import pytest

from vectra.core.errors import (
    CoefficientTypeError,
    InvalidExponentError,
    UnitError,
    VectraError,
    ZeroVectorError,
)
from vectra.math.geometric import Vector3D
from vectra.math.polynomial import Polynomial
from vectra.math.units import UnitPrefix


class TestErrorHierarchy:
    """Test that errors can be caught as builtin exceptions too."""

    @pytest.mark.parametrize("error, builtin", [
        (InvalidExponentError(-1), ValueError),
        (CoefficientTypeError("a", "a complex number"), TypeError),
        (ZeroVectorError("normalize"), ZeroDivisionError),
        (UnitError("bad unit"), ValueError),
    ])
    def test_builtin_bases(self, error, builtin):
        assert isinstance(error, VectraError)
        assert isinstance(error, builtin)

    def test_to_dict(self):
        error = InvalidExponentError(-2)
        assert error.to_dict() == {
            "error": "InvalidExponentError",
            "message": "Exponent must be non-negative, got -2",
            "details": {"exponent": -2},
        }

    def test_coefficient_details(self):
        error = CoefficientTypeError([1], "a complex number")
        assert error.details == {"type": "list", "expected": "a complex number"}
        assert "list" in str(error)

    def test_unit_error_details(self):
        assert UnitError("no", symbol="q").details == {"symbol": "q"}

    def test_base_without_details(self):
        assert VectraError("boom").details == {}


class TestRaisedErrors:
    """Test errors raised by library operations."""

    def test_negative_exponent(self):
        with pytest.raises(InvalidExponentError) as exc_info:
            Polynomial().set_coefficient(-1, 5)
        assert exc_info.value.details["exponent"] == -1

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroDivisionError, match="normalize"):
            Vector3D(0, 0, 0).normalize()

    def test_unknown_prefix(self):
        with pytest.raises(UnitError) as exc_info:
            UnitPrefix.from_symbol("q")
        assert exc_info.value.details == {"symbol": "q"}
