"""Provides the InterpKit class.

A light wrapper around :class:`~interpkit.interpolator.Interpolator` that
builds the interpolant from tabulated samples in one call and exposes the
calculus of the resulting polynomial.

Typical usage examples:

>>> import numpy as np
>>> from interpkit.interp_kit import InterpKit
>>>
>>> kit = InterpKit(x=[1.0, 2.0, 3.0], y=[7.0, -2.0, 6.0])
>>> kit.polynomial().coefficients
(33.0, -34.5, 8.5)
>>> float(kit.derivative()(2.0))
-0.5
>>> values = kit.calc(np.array([1.0, 2.0, 3.0]))
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

from numpy.typing import ArrayLike

from interpkit.exceptions import DuplicateAbscissaError
from interpkit.interpolator import Interpolator
from interpkit.polynomial import Polynomial
from interpkit.utils.validate import validate_order, validate_sample_points


class InterpKit:
    """Provides access to the interpolant of a fixed set of samples."""

    def __init__(self, x: ArrayLike, y: ArrayLike):
        """Initialise with tabulated samples.

        Args:
            x: 1D array-like of pairwise distinct x values.
            y: 1D array-like of y values with the same length as ``x``.

        Raises:
            DuplicateAbscissaError: If an x value appears more than once.
        """
        xs, ys = validate_sample_points(x, y)
        self._interpolator = Interpolator()
        for xi, yi in zip(xs, ys):
            if not self._interpolator.insert(xi, yi):
                raise DuplicateAbscissaError(xi)

    @property
    def points(self) -> tuple[tuple[Any, Any], ...]:
        return self._interpolator.points

    def calc(self, x: Any) -> Any:
        """Evaluates the interpolant directly from the Lagrange basis."""
        return self._interpolator.calc(x)

    def __call__(self, x: Any) -> Any:
        return self.polynomial()(x)

    def polynomial(self) -> Polynomial:
        """Returns the expanded interpolating polynomial."""
        return self._polynomial

    @cached_property
    def _polynomial(self) -> Polynomial:
        return self._interpolator.polynomial()

    def derivative(self, order: int = 1) -> Polynomial:
        """Returns the ``order``-th derivative of the interpolating polynomial."""
        result = self.polynomial()
        for _ in range(validate_order(order)):
            result = result.derivative()
        return result

    def integral(self, constant: Any = 0) -> Polynomial:
        """Returns the antiderivative of the interpolant equal to ``constant`` at 0."""
        return self.polynomial().integral(constant)
