"""Human-readable rendering and tabulation of polynomials.

Typical usage example:

>>> from interpkit.formatting import format_polynomial
>>> from interpkit.polynomial import Polynomial
>>> format_polynomial(Polynomial([-3.0, 10.0, -3.5]))
'f(x) = -3.000000 + 10.000000*x - 3.500000*x^2'
"""

from __future__ import annotations

from collections.abc import Callable
from numbers import Real
from typing import Any

import numpy as np

from interpkit.polynomial import Polynomial
from interpkit.utils.numerics import inclusive_grid

__all__ = ["PolynomialFormat", "format_polynomial", "tabulate"]


class PolynomialFormat:
    """Configuration for :func:`format_polynomial`."""

    def __init__(
        self,
        precision: int = 6,
        variable: str = "x",
        name: str | None = "f",
        omit_unit_coefficients: bool = False,
        skip_zero_terms: bool = False,
    ):
        """Initialize configuration.

        Args:
            precision:
                Number of digits after the decimal point for real and
                complex coefficients.

            variable:
                Symbol of the independent variable.

            name:
                Function name used for the ``f(x) = `` prefix. ``None``
                drops the prefix and returns the bare expression.

            omit_unit_coefficients:
                If ``True``, a coefficient of magnitude exactly 1 in front
                of a power of the variable is not printed, e.g. ``x^2``
                instead of ``1.000000*x^2``. The constant term is always
                printed.

            skip_zero_terms:
                If ``True``, terms whose coefficient is exactly zero are
                left out. The zero polynomial is still rendered as ``0``.
        """
        if precision < 0:
            raise ValueError(f"precision must be >= 0; got {precision}.")
        if not variable:
            raise ValueError("variable must be a non-empty string.")

        self.precision = precision
        self.variable = variable
        self.name = name
        self.omit_unit_coefficients = omit_unit_coefficients
        self.skip_zero_terms = skip_zero_terms


def _split_sign(coefficient: Any, precision: int) -> tuple[bool, str]:
    """Returns ``(is_negative, magnitude_text)`` for one coefficient."""
    if isinstance(coefficient, Real):
        value = float(coefficient)
        return value < 0, f"{abs(value):.{precision}f}"
    if isinstance(coefficient, complex):
        return False, f"({coefficient:.{precision}f})"
    return False, str(coefficient)


def format_polynomial(poly: Polynomial, fmt: PolynomialFormat | None = None) -> str:
    """Renders ``poly`` as a sign-aware expression in increasing powers.

    Real coefficients are joined with `` + `` or `` - `` according to their
    sign; complex coefficients are printed in parentheses. Powers of two and
    above use ``^k`` notation.

    Args:
        poly: Polynomial to render.
        fmt: Formatting options. Defaults to :class:`PolynomialFormat`.

    Returns:
        The rendered expression, e.g. ``f(x) = 2.000000 - 3.000000*x + 1.000000*x^2``.
    """
    fmt = fmt or PolynomialFormat()
    prefix = f"{fmt.name}({fmt.variable}) = " if fmt.name else ""

    pieces: list[str] = []
    for power, coefficient in enumerate(poly.coefficients):
        if fmt.skip_zero_terms and coefficient == 0:
            continue

        negative, magnitude = _split_sign(coefficient, fmt.precision)
        if power == 0:
            term = magnitude
        else:
            monomial = fmt.variable if power == 1 else f"{fmt.variable}^{power}"
            unit = isinstance(coefficient, Real) and abs(coefficient) == 1
            term = monomial if fmt.omit_unit_coefficients and unit else f"{magnitude}*{monomial}"

        if not pieces:
            pieces.append(f"-{term}" if negative else term)
        else:
            pieces.append(f" - {term}" if negative else f" + {term}")

    return prefix + ("".join(pieces) or "0")


def tabulate(
    function: Callable[[Any], Any],
    start: float,
    stop: float,
    step: float,
) -> list[tuple[float, Any]]:
    """Evaluates ``function`` on the grid ``start, start + step, ..., stop``.

    Args:
        function: Callable accepting a NumPy array, e.g. a
            :class:`~interpkit.polynomial.Polynomial` or an
            :class:`~interpkit.interpolator.Interpolator`.
        start: First grid point.
        stop: Last grid point (inclusive when it lies on the grid).
        step: Positive grid spacing.

    Returns:
        List of ``(x, f(x))`` pairs with Python scalars.
    """
    xs = inclusive_grid(start, stop, step)
    ys = np.broadcast_to(np.asarray(function(xs)), xs.shape)
    return list(zip(xs.tolist(), ys.tolist()))
