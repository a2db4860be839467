"""Pytest configuration file with shared sample point sets."""

import pytest

__all__ = ["quadratic_points", "complex_points", "cubic_points"]


@pytest.fixture
def quadratic_points():
    """Three real points on ``8.5 x^2 - 34.5 x + 33``."""
    return [(1.0, 7.0), (2.0, -2.0), (3.0, 6.0)]


@pytest.fixture
def complex_points():
    """Three points with real x and complex y."""
    return [(-5.0, 7 - 3j), (0.0, 4 + 2.5j), (3.0, 9 - 1.5j)]


@pytest.fixture
def cubic_points():
    """Four real points interpolated by a cubic."""
    return [(0.0, -3.0), (1.0, 2.0), (2.0, 8.0), (3.0, -7.0)]
