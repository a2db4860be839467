"""Utility functions for InterpKit package."""

from .numerics import inclusive_grid, zero_like
from .validate import validate_grid, validate_order, validate_sample_points

__all__ = [
    "inclusive_grid",
    "zero_like",
    "validate_grid",
    "validate_order",
    "validate_sample_points",
]
