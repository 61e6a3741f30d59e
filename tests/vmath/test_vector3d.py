"""Tests for Vector3D."""

import math
from fractions import Fraction

import numpy as np
import pytest

from vectra.core.errors import ZeroVectorError
from vectra.math.angles import Angle
from vectra.math.geometric import Vector3D


class TestVectorInstantiation:
    """Test construction and conversion."""

    def test_components(self):
        v = Vector3D(1, 2, 3)
        assert (v.x, v.y, v.z) == (1, 2, 3)

    def test_default_is_zero(self):
        assert Vector3D().to_array() == [0, 0, 0]

    def test_from_array(self):
        assert Vector3D.from_array([4, 5, 6]) == Vector3D(4, 5, 6)

    def test_from_array_wrong_length(self):
        with pytest.raises(ValueError):
            Vector3D.from_array([1, 2])

    def test_to_array(self):
        assert Vector3D(1, 2, 3).to_array() == [1, 2, 3]

    def test_to_numpy(self):
        arr = Vector3D(1.0, 2.0, 3.0).to_numpy()
        assert isinstance(arr, np.ndarray)
        np.testing.assert_allclose(arr, [1.0, 2.0, 3.0])

    def test_from_numpy(self):
        v = Vector3D.from_numpy(np.array([1.5, 0.0, -2.0]))
        assert v == Vector3D(1.5, 0.0, -2.0)


class TestVectorOperations:
    """Test vector algebra."""

    def test_dot(self):
        assert Vector3D(1, 2, 3).dot(Vector3D(4, 5, 6)) == 32

    def test_cross(self):
        assert Vector3D(1, 0, 0).cross(Vector3D(0, 1, 0)) == Vector3D(0, 0, 1)
        assert Vector3D(1, 2, 3).cross(Vector3D(4, 5, 6)) == Vector3D(-3, 6, -3)

    def test_cross_is_orthogonal(self):
        a, b = Vector3D(2, -1, 4), Vector3D(0, 3, 1)
        c = a.cross(b)
        assert c.dot(a) == 0
        assert c.dot(b) == 0

    def test_magnitude(self):
        v = Vector3D(3, 4, 12)
        assert v.magnitude_squared() == 169
        assert v.pow2() == 169
        assert v.magnitude() == 13.0

    def test_normalize(self):
        u = Vector3D(0, 3, 4).normalize()
        assert u.magnitude() == pytest.approx(1.0)
        assert u.to_array() == pytest.approx([0.0, 0.6, 0.8])

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroVectorError) as exc_info:
            Vector3D().normalize()
        assert isinstance(exc_info.value, ZeroDivisionError)

    def test_on(self):
        """Test scalar projection onto another vector."""
        assert Vector3D(3, 4, 0).on(Vector3D(10, 0, 0)) == pytest.approx(3.0)

    def test_angle(self):
        angle = Vector3D(1, 0, 0).angle(Vector3D(0, 1, 0))
        assert isinstance(angle, Angle)
        assert angle.deg == pytest.approx(90.0)

    def test_angle_parallel(self):
        assert Vector3D(1, 1, 1).angle(Vector3D(2, 2, 2)).rad == pytest.approx(0.0, abs=1e-7)

    def test_angle_opposite(self):
        assert Vector3D(1, 0, 0).angle(Vector3D(-3, 0, 0)).rad == pytest.approx(math.pi)

    def test_angle_with_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            Vector3D(1, 0, 0).angle(Vector3D())

    def test_fraction_components(self):
        v = Vector3D(Fraction(1, 2), 0, 0)
        assert v.dot(v) == Fraction(1, 4)


class TestVectorArithmetic:
    """Test operators."""

    def test_add_sub(self):
        a, b = Vector3D(1, 2, 3), Vector3D(4, 5, 6)
        assert a + b == Vector3D(5, 7, 9)
        assert b - a == Vector3D(3, 3, 3)

    def test_scalar_mul(self):
        assert Vector3D(1, 2, 3) * 2 == Vector3D(2, 4, 6)
        assert 2 * Vector3D(1, 2, 3) == Vector3D(2, 4, 6)

    def test_scalar_div(self):
        assert Vector3D(2, 4, 6) / 2 == Vector3D(1.0, 2.0, 3.0)

    def test_div_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector3D(1, 2, 3) / 0

    def test_neg(self):
        assert -Vector3D(1, -2, 3) == Vector3D(-1, 2, -3)

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            Vector3D(1, 2, 3) + 1
        with pytest.raises(TypeError):
            Vector3D(1, 2, 3) * Vector3D(1, 2, 3)


class TestVectorStrings:
    """Test str() and repr()."""

    @pytest.mark.parametrize("components, expected", [
        ((1, 1, 1), "i+j+k"),
        ((2, 1, -3), "2i+j-3k"),
        ((0, 1, 0), "j"),
        ((0, 0, -1), "-k"),
        ((0, 2, 0), "2j"),
        ((-1, -1, -1), "-i-j-k"),
        ((1.5, 0, 2.0), "1.5i+2k"),
        ((0, 0, 0), ""),
    ])
    def test_str(self, components, expected):
        assert str(Vector3D(*components)) == expected

    def test_repr(self):
        assert repr(Vector3D(1, 2.5, -3)) == "(1, 2.5, -3)"
