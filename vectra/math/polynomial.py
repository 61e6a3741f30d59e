"""
Dense univariate polynomials over an arbitrary coefficient ring.

A Polynomial stores one coefficient per exponent, from the constant term
upward, so ``coefficients[k]`` is the coefficient of x^k and there are
always exactly ``degree + 1`` of them.

Conventions:
- The zero polynomial has degree 0 and coefficients [zero].
- Degrees only grow. set_degree() pads with zeros and ignores requests to
  shrink; trailing zero coefficients are never trimmed.
- The product with the zero polynomial keeps the other factor's degree
  (every coefficient is zero).

Coefficients only need the ring capability (+, -, *, ==); see
:mod:`vectra.math.value`.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.errors import InvalidExponentError
from ..core.logging import get_logger
from .rendering import DebugRenderer, PolynomialRenderer, select_renderer
from .value import additive_identity

logger = get_logger(__name__)


class Polynomial(BaseModel):
    """
    Dense polynomial with coefficients in ascending exponent order.

    Example:
        >>> p = Polynomial.from_coefficients([0, -3, 2])
        >>> p.degree
        2
        >>> str(p)
        '2x^2 - 3x'
        >>> repr(p)
        '[(2, 2), (1, -3), (0, 0)]'
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    degree: int = Field(default=0, ge=0, description="Highest exponent with a coefficient slot")
    coefficients: list[Any] = Field(default_factory=list, description="Coefficients, constant term first")
    zero: Any = Field(default=0, description="Additive identity of the coefficient ring")

    @model_validator(mode="after")
    def _check_shape(self) -> Polynomial:
        """Fill in missing coefficients and enforce len(coefficients) == degree + 1."""
        if not self.coefficients:
            self.coefficients = [self.zero] * (self.degree + 1)
        if len(self.coefficients) != self.degree + 1:
            raise ValueError(
                f"degree {self.degree} needs {self.degree + 1} coefficients, "
                f"got {len(self.coefficients)}"
            )
        return self

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[Any], zero: Any = None) -> Polynomial:
        """
        Build a polynomial from coefficients listed constant term first.

        Args:
            coefficients: Coefficients in ascending exponent order (copied)
            zero: Additive identity; defaults to the zero of the first
                coefficient's type, or 0 for an empty sequence

        Returns:
            Polynomial of degree len(coefficients) - 1, or the zero
            polynomial when coefficients is empty

        Example:
            Polynomial.from_coefficients([1, 4, 5]) → 5x^2 + 4x + 1
        """
        values = list(coefficients)
        if zero is None:
            zero = additive_identity(values[0]) if values else 0
        if not values:
            return cls(zero=zero)
        return cls(degree=len(values) - 1, coefficients=values, zero=zero)

    def get_coefficient(self, degree: int) -> Optional[Any]:
        """
        Coefficient of x^degree.

        Returns:
            The coefficient, or None when degree is outside 0..self.degree
        """
        if degree < 0 or degree > self.degree:
            return None
        return self.coefficients[degree]

    def _coefficient_or_zero(self, degree: int) -> Any:
        coefficient = self.get_coefficient(degree)
        return self.zero if coefficient is None else coefficient

    def set_degree(self, degree: int) -> None:
        """
        Raise the degree, padding new slots with zero.

        Lowering the degree is not supported and is ignored.
        """
        if degree <= self.degree:
            if degree < self.degree:
                logger.debug("Ignoring request to lower degree %d to %d", self.degree, degree)
            return
        self.coefficients.extend([self.zero] * (degree - self.degree))
        self.degree = degree

    def set_coefficient(self, degree: int, coefficient: Any) -> None:
        """
        Set the coefficient of x^degree, growing the polynomial if needed.

        Raises:
            InvalidExponentError: If degree is negative
        """
        if degree < 0:
            raise InvalidExponentError(degree)
        self.set_degree(degree)
        self.coefficients[degree] = coefficient

    # Arithmetic operators

    def __add__(self, other: Any) -> Polynomial:
        """Coefficient-wise sum; degree is the larger of the two degrees."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial(zero=self.zero)
        result.set_degree(max(self.degree, other.degree))

        for i in range(result.degree + 1):
            result.set_coefficient(
                i, self._coefficient_or_zero(i) + other._coefficient_or_zero(i)
            )

        return result

    def __sub__(self, other: Any) -> Polynomial:
        """Coefficient-wise difference; degree is the larger of the two degrees."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial(zero=self.zero)
        result.set_degree(max(self.degree, other.degree))

        for i in range(result.degree + 1):
            result.set_coefficient(
                i, self._coefficient_or_zero(i) - other._coefficient_or_zero(i)
            )

        return result

    def __mul__(self, other: Any) -> Polynomial:
        """
        Product by discrete convolution of the coefficient sequences.

        The result has degree self.degree + other.degree, even when one
        factor is the zero polynomial.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial(zero=self.zero)
        result.set_degree(self.degree + other.degree)

        for i in range(self.degree + 1):
            for j in range(other.degree + 1):
                result.set_coefficient(
                    i + j,
                    result.coefficients[i + j] + self.coefficients[i] * other.coefficients[j],
                )

        return result

    def __eq__(self, other: Any) -> bool:
        """Same degree, same coefficients and same zero."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (
            self.degree == other.degree
            and self.coefficients == other.coefficients
            and self.zero == other.zero
        )

    # String representations

    def to_string(self, renderer: Optional[PolynomialRenderer] = None) -> str:
        """
        Human-readable form.

        Args:
            renderer: Rendering strategy; by default the complex renderer is
                used for complex coefficients and the real renderer otherwise
        """
        return (renderer or select_renderer(self)).render(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return DebugRenderer().render(self)
