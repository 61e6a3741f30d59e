"""
vectra.math - value types of the vectra toolkit

- Polynomial: dense univariate polynomials over any coefficient ring
- Complex: minimal complex numbers usable as coefficients
- Angle: degree/radian angles
- Vector3D: 3D vector algebra
- Unit: SI dimension tagging
"""

from .angles import Angle, AngleType
from .geometric import Vector3D
from .numeric import Complex
from .polynomial import Polynomial
from .rendering import (
    ComplexCoefficientRenderer,
    DebugRenderer,
    PolynomialRenderer,
    RealCoefficientRenderer,
    select_renderer,
)
from .symbolic import from_sympy, to_sympy
from .units import BaseUnit, DimensionalUnit, Unit, UnitPrefix
from .value import (
    NUMERIC_TYPES,
    ComplexLike,
    RingElement,
    SignedDisplayable,
    additive_identity,
    format_scalar,
    is_complex_like,
    is_numeric,
)

__all__ = [
    "Polynomial",
    "PolynomialRenderer",
    "DebugRenderer",
    "RealCoefficientRenderer",
    "ComplexCoefficientRenderer",
    "select_renderer",
    "to_sympy",
    "from_sympy",
    "Complex",
    "Angle",
    "AngleType",
    "Vector3D",
    "BaseUnit",
    "UnitPrefix",
    "DimensionalUnit",
    "Unit",
    "RingElement",
    "SignedDisplayable",
    "ComplexLike",
    "NUMERIC_TYPES",
    "is_numeric",
    "is_complex_like",
    "additive_identity",
    "format_scalar",
]
