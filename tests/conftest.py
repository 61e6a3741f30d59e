"""
Shared pytest fixtures and utilities for testing the vectra models.

This module provides:
- Utilities for testing Pydantic validation
- Generators of random small integer polynomials for property tests
- A clean settings cache per test
"""

import random

import pytest
from typing import Any, Callable, Type
from pydantic import BaseModel, ValidationError

from vectra.core.config import get_settings
from vectra.math.polynomial import Polynomial


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes in a test are seen."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


def make_random_polynomial(rng: random.Random, max_degree: int = 4) -> Polynomial:
    """Random polynomial with degree <= max_degree and coefficients in [-9, 9]."""
    degree = rng.randint(0, max_degree)
    return Polynomial.from_coefficients([rng.randint(-9, 9) for _ in range(degree + 1)])


@pytest.fixture
def random_polynomial() -> Callable[[random.Random], Polynomial]:
    """Factory for random small-degree integer polynomials."""
    return make_random_polynomial
