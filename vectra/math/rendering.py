"""
Text renderers for polynomials.

Three strategies, each walking the terms from the highest exponent down:

- DebugRenderer: ``[(2, 5), (1, 4), (0, 1)]``
- RealCoefficientRenderer: ``2x^2 - 3x + 1``
- ComplexCoefficientRenderer: ``+ (1+2i)x^2 + (-3i)x^0 ``

The real and complex renderers follow different sign and spacing rules and
are kept as separate classes on purpose; select_renderer() picks one from
the coefficient type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Optional

from ..core.config import get_settings
from ..core.logging import get_logger
from .value import format_scalar, is_complex_like

if TYPE_CHECKING:
    from .polynomial import Polynomial

logger = get_logger(__name__)


def _descending(polynomial: Polynomial) -> Iterator[tuple[int, Any]]:
    """(exponent, coefficient) pairs, highest exponent first."""
    return reversed(list(enumerate(polynomial.coefficients)))


class PolynomialRenderer(ABC):
    """Strategy turning a polynomial into text."""

    @abstractmethod
    def render(self, polynomial: Polynomial) -> str:
        """Render polynomial as a string."""
        pass


class DebugRenderer(PolynomialRenderer):
    """Diagnostic list of (exponent, coefficient) pairs using repr()."""

    def render(self, polynomial: Polynomial) -> str:
        terms = [f"({degree}, {coefficient!r})" for degree, coefficient in _descending(polynomial)]
        return f"[{', '.join(terms)}]"


class RealCoefficientRenderer(PolynomialRenderer):
    """
    Conventional notation for ordered (real) coefficients.

    Rules:
    - zero terms are skipped; an all-zero polynomial renders as ""
    - the first term carries a "- " when negative and nothing when positive
    - later terms are joined with " + " or " - " and show the magnitude
    - x^0 renders as the bare magnitude, x^1 as "<m>x", x^k as "<m>x^k"
    """

    def __init__(self, variable: Optional[str] = None):
        self.variable = variable if variable is not None else get_settings().POLYNOMIAL_VARIABLE

    def _term(self, magnitude: Any, degree: int) -> str:
        text = format_scalar(magnitude)
        if degree == 0:
            return text
        if degree == 1:
            return f"{text}{self.variable}"
        return f"{text}{self.variable}^{degree}"

    def render(self, polynomial: Polynomial) -> str:
        zero = polynomial.zero
        formatted = []
        is_first_term = True

        for degree, coefficient in _descending(polynomial):
            if coefficient == zero:
                continue

            is_negative = coefficient < zero
            magnitude = -coefficient if is_negative else coefficient
            sign = "- " if is_negative else "+ "

            if is_first_term:
                if is_negative:
                    formatted.append(sign)
                is_first_term = False
            else:
                formatted.append(" ")
                formatted.append(sign)

            formatted.append(self._term(magnitude, degree))

        return "".join(formatted)


class ComplexCoefficientRenderer(PolynomialRenderer):
    """
    Parenthesised notation for complex coefficients.

    Every shown term, the first included, is written as
    ``+ (<re><sign><|im|>i)x^<k> `` with a trailing space. Terms with
    zero squared norm are skipped. A zero real or imaginary part is left
    out; "+" separates the parts only when both are present and the
    imaginary part is positive.
    """

    def __init__(self, variable: Optional[str] = None, imaginary_unit: Optional[str] = None):
        config = get_settings()
        self.variable = variable if variable is not None else config.POLYNOMIAL_VARIABLE
        self.imaginary_unit = imaginary_unit if imaginary_unit is not None else config.IMAGINARY_UNIT

    def render(self, polynomial: Polynomial) -> str:
        from .numeric import Complex

        formatted = []

        for degree, coefficient in _descending(polynomial):
            value = Complex.coerce(coefficient)
            if value.norm_sqr() == 0:
                continue

            text = ""
            if value.real != 0:
                text += format_scalar(value.real)

            if value.imag != 0:
                if value.imag > 0:
                    if value.real != 0:
                        text += "+"
                else:
                    text += "-"
                text += f"{format_scalar(abs(value.imag))}{self.imaginary_unit}"

            formatted.append(f"+ ({text}){self.variable}^{degree} ")

        return "".join(formatted)


def select_renderer(polynomial: Polynomial) -> PolynomialRenderer:
    """Complex renderer when any coefficient is complex, real renderer otherwise."""
    if any(is_complex_like(value) for value in [polynomial.zero, *polynomial.coefficients]):
        renderer: PolynomialRenderer = ComplexCoefficientRenderer()
    else:
        renderer = RealCoefficientRenderer()
    logger.debug("Rendering degree %d polynomial with %s", polynomial.degree, type(renderer).__name__)
    return renderer
