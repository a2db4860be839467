"""Validation utilities for InterpKit."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "validate_sample_points",
    "validate_grid",
    "validate_order",
]


def validate_sample_points(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[list[Any], list[Any]]:
    """Validates tabulated sample points and converts them to Python lists.

    The dtype of the inputs is preserved, so complex ``y`` values or
    ``fractions.Fraction`` objects (object arrays) pass through unchanged.
    Distinctness of ``x`` is not checked here; see
    :meth:`interpkit.interpolator.Interpolator.insert`.

    Args:
        x: 1D array-like of x values.
        y: 1D array-like of y values with the same length as ``x``.

    Returns:
        Tuple of ``(x_list, y_list)``.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = np.asarray(x)
    y_arr = np.asarray(y)

    if x_arr.ndim != 1:
        raise ValueError(f"x must be 1D; got ndim={x_arr.ndim}.")
    if y_arr.ndim != 1:
        raise ValueError(f"y must be 1D; got ndim={y_arr.ndim}.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )

    return x_arr.tolist(), y_arr.tolist()


def validate_grid(start: float, stop: float, step: float) -> tuple[float, float, float]:
    """Validates the bounds and spacing of an evaluation grid."""
    start, stop, step = float(start), float(stop), float(step)
    if not np.all(np.isfinite([start, stop, step])):
        raise ValueError("start, stop and step must be finite.")
    if step <= 0.0:
        raise ValueError(f"step must be positive; got {step}.")
    if stop < start:
        raise ValueError(f"stop must not be smaller than start; got start={start}, stop={stop}.")
    return start, stop, step


def validate_order(order: int) -> int:
    """Checks that a derivative order is a non-negative integer.

    Args:
        order: Requested derivative order.

    Returns:
        ``order`` as a Python ``int``.

    Raises:
        TypeError: If ``order`` is not an integer.
        ValueError: If ``order`` is negative.
    """
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise TypeError(f"order must be an integer; got {type(order).__name__}.")
    if order < 0:
        raise ValueError(f"order must be >= 0; got {order}.")
    return int(order)
