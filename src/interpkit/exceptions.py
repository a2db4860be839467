"""Exception hierarchy for polynomial and interpolation operations."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PolynomialError",
    "NegativeExponentError",
    "DuplicateAbscissaError",
]


class PolynomialError(Exception):
    """Base class for errors raised by InterpKit."""


class NegativeExponentError(PolynomialError, ValueError):
    """Negative exponent passed to :meth:`Polynomial.pow`.

    Only non-negative integer powers of a polynomial are polynomials, so
    this is a contract violation by the caller. The exponent is never
    clamped.
    """

    def __init__(self, exponent: int) -> None:
        self.exponent = exponent
        super().__init__(f"exponent must be a non-negative integer; got {exponent}.")


class DuplicateAbscissaError(PolynomialError, ValueError):
    """Repeated x-value in a one-shot interpolation call.

    :meth:`Interpolator.insert` reports duplicates through its boolean
    return value instead; this error is used where there is no such
    channel, e.g. :func:`lagrange_polynomial`.
    """

    def __init__(self, x: Any) -> None:
        self.x = x
        super().__init__(f"x-values must be pairwise distinct; {x!r} appears more than once.")
