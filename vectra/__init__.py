"""vectra - small mathematics toolkit.

Namespace package containing:
- vectra.math: polynomials, complex numbers, angles, 3D vectors, units
- vectra.core: configuration, logging, errors, timing
"""

__version__ = "0.1.0"

from .math import Angle, AngleType, Complex, Polynomial, Unit, Vector3D

__all__ = ["Polynomial", "Complex", "Angle", "AngleType", "Vector3D", "Unit"]
