"""Incremental Lagrange interpolation.

The :class:`Interpolator` keeps one Lagrange basis term per sample point.
Every insertion updates the existing terms in ``O(n)`` so that each term
keeps evaluating to 1 at its own x and becomes 0 at the new x; the
interpolant is then ``sum(y_j * L_j(x))``. Two ways of reading the result
are offered:

* :meth:`Interpolator.calc` evaluates the weighted basis terms directly,
  which is cheap when the interpolant is only queried a few times.
* :meth:`Interpolator.polynomial` expands the terms into a
  :class:`~interpkit.polynomial.Polynomial` that supports further algebra
  and ``O(n)`` Horner evaluation.

:func:`lagrange_polynomial` builds the same polynomial from scratch from a
complete set of points.

Examples:
---------
>>> from interpkit.interpolator import Interpolator
>>> interp = Interpolator()
>>> interp.insert(1.0, 7.0)
True
>>> interp.insert(2.0, -2.0)
True
>>> interp.insert(3.0, 6.0)
True
>>> interp.insert(2.0, 5.0)
False
>>> interp.polynomial().coefficients
(33.0, -34.5, 8.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from numpy.typing import ArrayLike

from interpkit.exceptions import DuplicateAbscissaError
from interpkit.logger import interpkit_logger
from interpkit.polynomial import Polynomial
from interpkit.utils.numerics import zero_like
from interpkit.utils.validate import validate_sample_points

__all__ = ["BasisTerm", "Interpolator", "lagrange_polynomial"]


@dataclass
class BasisTerm:
    """Lagrange basis term attached to one sample point.

    Represents ``L(t) = prod(t - r for r in roots) / denom``, which is 1 at
    ``t = x`` and 0 at every root.

    Attributes:
        x: Abscissa of the sample point.
        y: Ordinate of the sample point.
        roots: x-values of every other sample point.
        denom: ``prod(x - r for r in roots)``.
    """

    x: Any
    y: Any
    roots: list[Any] = field(default_factory=list)
    denom: Any = 1

    def __call__(self, t: Any) -> Any:
        """Evaluates the unweighted basis term at ``t``."""
        product = 1
        for root in self.roots:
            product = product * (t - root)
        return product / self.denom

    def polynomial(self) -> Polynomial:
        """Expands the unweighted basis term into a polynomial."""
        basis = Polynomial([1])
        for root in self.roots:
            basis = basis * Polynomial([-root, 1])
        return basis / self.denom


class Interpolator:
    """Accumulates sample points and interpolates through all of them.

    The x-values of the stored points are pairwise distinct; inserting an
    x that is already present is rejected without modifying the state.

    Instances are not thread-safe. Callers sharing an instance across
    threads must serialise :meth:`insert`, :meth:`clear` and reads
    themselves.
    """

    def __init__(self) -> None:
        self._terms: list[BasisTerm] = []

    @classmethod
    def from_points(cls, x: ArrayLike, y: ArrayLike) -> Interpolator:
        """Creates an interpolator and inserts the given points.

        Duplicate x-values are skipped as in :meth:`insert_many`.
        """
        interp = cls()
        interp.insert_many(x, y)
        return interp

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def points(self) -> tuple[tuple[Any, Any], ...]:
        """Stored ``(x, y)`` pairs in insertion order."""
        return tuple((term.x, term.y) for term in self._terms)

    @property
    def basis_terms(self) -> tuple[BasisTerm, ...]:
        """Copies of the stored basis terms in insertion order."""
        return tuple(replace(term, roots=list(term.roots)) for term in self._terms)

    def clear(self) -> None:
        """Removes all points."""
        self._terms.clear()

    def insert(self, x: Any, y: Any) -> bool:
        """Adds the sample point ``(x, y)``.

        Every stored basis term gains the factor ``(t - x)`` in its numerator
        and ``(x_j - x)`` in its denominator, so it vanishes at the new x and
        still equals 1 at its own. The new term collects the factors for all
        previously stored points.

        Args:
            x: Abscissa; must differ from every stored x.
            y: Ordinate.

        Returns:
            True if the point was stored, False if ``x`` was already present.
            A rejected insert leaves the interpolator unchanged.
        """
        if any(term.x == x for term in self._terms):
            interpkit_logger.info("Rejected sample point with duplicate x=%r.", x)
            return False

        # All arithmetic happens before any term is touched, so an error
        # from the scalar types leaves the interpolator unchanged.
        new_term = BasisTerm(x=x, y=y)
        updated_denoms = []
        for term in self._terms:
            updated_denoms.append(term.denom * (term.x - x))
            new_term.roots.append(term.x)
            new_term.denom = new_term.denom * (x - term.x)

        for term, denom in zip(self._terms, updated_denoms):
            term.roots.append(x)
            term.denom = denom
        self._terms.append(new_term)
        return True

    def insert_many(self, x: ArrayLike, y: ArrayLike) -> int:
        """Inserts the points ``zip(x, y)`` in order.

        Args:
            x: 1D array-like of x values.
            y: 1D array-like of y values with the same length as ``x``.

        Returns:
            Number of points stored. Points whose x is already present are
            skipped.
        """
        xs, ys = validate_sample_points(x, y)
        accepted = sum(self.insert(xi, yi) for xi, yi in zip(xs, ys))
        if accepted < len(xs):
            interpkit_logger.info(
                "Skipped %d of %d sample points with duplicate x.",
                len(xs) - accepted,
                len(xs),
            )
        return accepted

    def calc(self, x: Any) -> Any:
        """Evaluates the interpolant at ``x`` from the basis terms.

        Costs ``O(n**2)`` per call for ``n`` stored points. Use
        :meth:`polynomial` when the interpolant is evaluated many times.

        Args:
            x: Point of evaluation. NumPy arrays are evaluated elementwise.

        Returns:
            The interpolated value; ``0`` (or zeros) if no point is stored.
        """
        y = zero_like(x)
        for term in self._terms:
            y = y + term(x) * term.y
        return y

    def __call__(self, x: Any) -> Any:
        return self.calc(x)

    def polynomial(self) -> Polynomial:
        """Returns the expanded interpolating polynomial.

        The degree is at most ``len(self) - 1``; with no stored points the
        zero polynomial is returned.
        """
        total = Polynomial()
        for term in self._terms:
            total = total + term.polynomial() * term.y
        return total


def lagrange_polynomial(x: ArrayLike, y: ArrayLike) -> Polynomial:
    """Builds the interpolating polynomial through ``zip(x, y)`` in one pass.

    Every basis product is recomputed from scratch, which suits a fixed set
    of points. Use :class:`Interpolator` to add points incrementally.

    Args:
        x: 1D array-like of pairwise distinct x values.
        y: 1D array-like of y values with the same length as ``x``.

    Returns:
        The polynomial of minimal degree passing through all points.

    Raises:
        ValueError: If ``x`` and ``y`` have invalid shapes.
        DuplicateAbscissaError: If an x value appears more than once.
    """
    xs, ys = validate_sample_points(x, y)
    for i, xi in enumerate(xs):
        if xi in xs[:i]:
            raise DuplicateAbscissaError(xi)

    total = Polynomial()
    for j, (xj, yj) in enumerate(zip(xs, ys)):
        basis = Polynomial([1])
        denom = 1
        for k, xk in enumerate(xs):
            if k == j:
                continue
            basis = basis * Polynomial([-xk, 1])
            denom = denom * (xj - xk)
        total = total + (basis / denom) * yj
    return total
