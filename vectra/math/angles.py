"""
Angles stored in both degrees and radians.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field

from .value import format_scalar


class AngleType(str, Enum):
    """Unit an angle value is given in."""

    DEG = "deg"
    RAD = "rad"


class Angle(BaseModel):
    """
    An angle, convertible between degrees and radians.

    Both representations are computed once at construction.
    """

    deg: float = Field(default=0.0, description="Angle in degrees")
    rad: float = Field(default=0.0, description="Angle in radians")

    @classmethod
    def new(cls, kind: AngleType, value: float) -> Angle:
        """
        Create an angle from a value in the given unit.

        Example:
            Angle.new(AngleType.DEG, 180).rad → 3.14159...
        """
        if AngleType(kind) is AngleType.DEG:
            return cls.from_degrees(value)
        return cls.from_radians(value)

    @classmethod
    def from_degrees(cls, deg: float) -> Angle:
        return cls(deg=deg, rad=deg * math.pi / 180.0)

    @classmethod
    def from_radians(cls, rad: float) -> Angle:
        return cls(deg=rad * 180.0 / math.pi, rad=rad)

    def to_string(self) -> str:
        return f"{format_scalar(self.deg)}deg"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{format_scalar(self.deg)}deg {format_scalar(self.rad)}rad>"
