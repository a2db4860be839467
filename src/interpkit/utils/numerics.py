"""Numerical utilities."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from interpkit.utils.validate import validate_grid

__all__ = [
    "zero_like",
    "inclusive_grid",
]


def zero_like(x: Any) -> Any:
    """Returns the additive identity matching the shape of ``x``.

    Args:
        x: Scalar or NumPy array.

    Returns:
        ``np.zeros(x.shape)`` if ``x`` is an array, otherwise the integer ``0``,
        which acts as the additive identity of every supported scalar type.
    """
    if isinstance(x, np.ndarray):
        return np.zeros(x.shape)
    return 0


def inclusive_grid(start: float, stop: float, step: float) -> NDArray[np.floating]:
    """Builds an evenly spaced grid from ``start`` up to and including ``stop``.

    Unlike ``numpy.arange`` the end point is kept when it lies on the grid,
    and the points are computed as ``start + k * step`` so that rounding
    errors do not accumulate.

    Args:
        start: First grid point.
        stop: Upper end of the grid.
        step: Positive spacing.

    Returns:
        1D array of grid points.
    """
    start, stop, step = validate_grid(start, stop, step)
    # Tolerate a stop value that falls a rounding error short of the grid.
    n_steps = int(np.floor((stop - start) / step + 1e-9))
    return start + step * np.arange(n_steps + 1, dtype=float)
