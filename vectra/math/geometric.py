"""
Three-dimensional vectors.

Components may be any numeric type (int, float, Fraction, ...); operations
keep that type where the arithmetic allows it. Only magnitude, normalize,
on and angle go through floats.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import ZeroVectorError
from .angles import Angle
from .value import format_scalar, is_numeric


class Vector3D(BaseModel):
    """
    Vector in 3-space with components x, y, z.

    Supports vector operations: dot product, cross product, magnitude,
    normalization, scalar projection and the angle between vectors.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    x: Any = Field(default=0, description="First component")
    y: Any = Field(default=0, description="Second component")
    z: Any = Field(default=0, description="Third component")

    def __init__(self, x: Any = 0, y: Any = 0, z: Any = 0, **kwargs: Any) -> None:
        super().__init__(x=x, y=y, z=z, **kwargs)

    @classmethod
    def from_array(cls, array: Iterable[Any]) -> Vector3D:
        """
        Create a vector from a 3-element sequence.

        Raises:
            ValueError: If the sequence does not have exactly 3 elements
        """
        values = list(array)
        if len(values) != 3:
            raise ValueError(f"Vector3D needs 3 components, got {len(values)}")
        return cls(*values)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Vector3D:
        """Create a vector from a NumPy array of shape (3,)."""
        return cls.from_array(np.asarray(array).tolist())

    def to_array(self) -> list[Any]:
        """Components as [x, y, z]."""
        return [self.x, self.y, self.z]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.to_array())

    # Vector operations

    def magnitude_squared(self) -> Any:
        """x² + y² + z² in the component type."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def pow2(self) -> Any:
        """The vector squared (v·v); same as magnitude_squared()."""
        return self.magnitude_squared()

    def magnitude(self) -> float:
        """Euclidean norm ||v||."""
        return math.sqrt(float(self.magnitude_squared()))

    def normalize(self) -> Vector3D:
        """
        Return the unit vector in the same direction.

        Raises:
            ZeroVectorError: If the vector has zero length
        """
        mag = self.magnitude()
        if mag == 0:
            raise ZeroVectorError("normalize")
        return Vector3D(float(self.x) / mag, float(self.y) / mag, float(self.z) / mag)

    def dot(self, other: Vector3D) -> Any:
        """
        Dot product with another vector.

        Args:
            other: Another vector

        Returns:
            Scalar in the component type
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """
        Cross product with another vector.

        Returns:
            Vector perpendicular to both
        """
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def on(self, other: Vector3D) -> float:
        """Scalar projection of this vector onto other's direction."""
        return self.dot(other.normalize())

    def angle(self, other: Vector3D) -> Angle:
        """
        Angle between this vector and other.

        Raises:
            ZeroVectorError: If either vector has zero length
        """
        magnitude_product = math.sqrt(float(self.magnitude_squared() * other.magnitude_squared()))
        if magnitude_product == 0:
            raise ZeroVectorError("measure the angle to")
        cosine = float(self.dot(other)) / magnitude_product
        # rounding can push the cosine just outside [-1, 1]
        cosine = max(-1.0, min(1.0, cosine))
        return Angle.from_radians(math.acos(cosine))

    # Arithmetic operators

    def __add__(self, other: Any) -> Vector3D:
        """Vector addition."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Any) -> Vector3D:
        """Vector subtraction."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Any) -> Vector3D:
        """Scalar multiplication."""
        if not is_numeric(other):
            return NotImplemented
        return Vector3D(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: Any) -> Vector3D:
        """Right scalar multiplication."""
        if not is_numeric(other):
            return NotImplemented
        return Vector3D(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, other: Any) -> Vector3D:
        """Scalar division."""
        if not is_numeric(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Vector division by zero")
        return Vector3D(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> Vector3D:
        """Negation."""
        return Vector3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.to_array() == other.to_array()

    # String representations

    def to_string(self) -> str:
        """
        Unit-vector notation, e.g. "2i+j-3k".

        Zero components are left out; a coefficient of 1 or -1 is written
        as the bare unit vector. The zero vector renders as "".
        """
        formatted = ""
        for component, unit in zip(self.to_array(), "ijk"):
            if component == 0:
                continue
            if component == 1:
                text = unit
            elif component == -1:
                text = f"-{unit}"
            else:
                text = f"{format_scalar(component)}{unit}"
            if formatted and not text.startswith("-"):
                formatted += "+"
            formatted += text
        return formatted

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"({self.x!r}, {self.y!r}, {self.z!r})"
