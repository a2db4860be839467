"""Polynomials over an arbitrary field-like scalar type.

A :class:`Polynomial` stores the coefficients ``c0, c1, ..., c(n-1)`` of
``f(x) = c0 + c1*x + ... + c(n-1)*x**(n-1)``. Coefficients can be any objects
supporting ``+ - * /``, unary ``-`` and comparison with ``0``: ``int``,
``float``, ``complex``, :class:`fractions.Fraction`, NumPy scalars or a
user-defined field element. The independent variable ``x`` may be of a
different type than the coefficients, e.g. a real-coefficient polynomial can
be scaled by a complex number.

Polynomials are values: every operation returns a new instance and the
augmented assignments ``+=``, ``-=`` and ``*=`` simply rebind the name.

Examples:
---------
>>> from interpkit.polynomial import Polynomial, compose
>>> p = Polynomial([-1, 1]) * Polynomial([-2, 1])
>>> p
Polynomial([2, -3, 1])
>>> p(3)
2
>>> Polynomial([3, 7, 0, 0]).coefficients
(3, 7)
>>> compose(Polynomial([0, 2, 5]), Polynomial([7, -3]))
Polynomial([259, -216, 45])
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest
from numbers import Integral
from typing import Any

from interpkit.exceptions import NegativeExponentError
from interpkit.utils.numerics import zero_like

__all__ = ["Polynomial", "compose"]


def _canonical(coefficients: Iterable[Any]) -> tuple[Any, ...]:
    """Returns ``coefficients`` as a tuple without trailing zeros."""
    coeffs = list(coefficients)
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return tuple(coeffs)


class Polynomial:
    """Univariate polynomial in canonical form.

    The coefficient at index ``i`` multiplies ``x**i``. Trailing coefficients
    equal to zero are removed on construction, so the zero polynomial is the
    only polynomial with an empty coefficient tuple.

    Supported operators: ``p(x)``, unary ``+``/``-``, ``p + q``, ``p - q``,
    ``p * q``, ``p * s``, ``s * p``, ``p / s`` and ``p ** k``. Scalars on
    either side of ``+`` and ``-`` are treated as constant polynomials.

    Attributes:
        coefficients: Canonical coefficient tuple, lowest power first.
    """

    __slots__ = ("_coefficients",)

    # Make NumPy defer to the reflected operators below instead of
    # broadcasting over the polynomial.
    __array_ufunc__ = None

    def __init__(self, coefficients: Iterable[Any] = ()) -> None:
        """Initialises the polynomial.

        Args:
            coefficients: Coefficients ordered by increasing power of ``x``.
                Defaults to the zero polynomial.
        """
        self._coefficients = _canonical(coefficients)

    @property
    def coefficients(self) -> tuple[Any, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        """Degree of the polynomial; ``-1`` for the zero polynomial."""
        return len(self._coefficients) - 1

    def __len__(self) -> int:
        return len(self._coefficients)

    def is_zero(self) -> bool:
        """Returns True for the zero polynomial."""
        return not self._coefficients

    def __call__(self, x: Any) -> Any:
        """Evaluates the polynomial at ``x`` with Horner's scheme.

        Args:
            x: Point of evaluation. NumPy arrays are evaluated elementwise.

        Returns:
            ``f(x)``. The zero polynomial returns the additive identity
            (``0``, or an array of zeros shaped like ``x``).
        """
        if not self._coefficients:
            return zero_like(x)

        leading, *lower = reversed(self._coefficients)
        acc = leading + zero_like(x)
        for c in lower:
            acc = acc * x + c
        return acc

    def __pos__(self) -> Polynomial:
        return self

    def __neg__(self) -> Polynomial:
        return Polynomial(-c for c in self._coefficients)

    def __add__(self, other: Any) -> Polynomial:
        other = _as_polynomial(other)
        return Polynomial(
            a + b
            for a, b in zip_longest(self._coefficients, other._coefficients, fillvalue=0)
        )

    def __radd__(self, other: Any) -> Polynomial:
        return _as_polynomial(other) + self

    def __sub__(self, other: Any) -> Polynomial:
        other = _as_polynomial(other)
        return Polynomial(
            a - b
            for a, b in zip_longest(self._coefficients, other._coefficients, fillvalue=0)
        )

    def __rsub__(self, other: Any) -> Polynomial:
        return _as_polynomial(other) - self

    def __mul__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return self._convolve(other)
        return Polynomial(c * other for c in self._coefficients)

    def __rmul__(self, other: Any) -> Polynomial:
        return Polynomial(other * c for c in self._coefficients)

    def __truediv__(self, other: Any) -> Polynomial:
        """Divides every coefficient by the scalar ``other``."""
        if isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(c / other for c in self._coefficients)

    def _convolve(self, other: Polynomial) -> Polynomial:
        a, b = self._coefficients, other._coefficients
        # len(a) + len(b) - 1 is meaningless when either side is empty.
        if not a or not b:
            return Polynomial()

        product: list[Any] = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                product[i + j] = product[i + j] + ai * bj
        return Polynomial(product)

    def pow(self, exponent: int) -> Polynomial:
        """Raises the polynomial to a non-negative integer power.

        Uses square-and-multiply, so only ``O(log exponent)`` polynomial
        multiplications are performed. ``pow(0)`` is ``Polynomial([1])`` for
        every base, including the zero polynomial.

        Args:
            exponent: Non-negative integer power.

        Returns:
            The polynomial ``self ** exponent``.

        Raises:
            TypeError: If ``exponent`` is not an integer.
            NegativeExponentError: If ``exponent`` is negative.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, Integral):
            raise TypeError(
                f"exponent must be an integer; got {type(exponent).__name__}."
            )
        exponent = int(exponent)
        if exponent < 0:
            raise NegativeExponentError(exponent)

        result = Polynomial([1])
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def __pow__(self, exponent: int) -> Polynomial:
        return self.pow(exponent)

    def derivative(self) -> Polynomial:
        """Returns ``f'(x)``; constants differentiate to the zero polynomial."""
        return Polynomial(
            i * c for i, c in enumerate(self._coefficients[1:], start=1)
        )

    def integral(self, constant: Any = 0) -> Polynomial:
        """Returns the antiderivative whose value at ``x = 0`` is ``constant``.

        Args:
            constant: Integration constant, placed as the new ``x**0``
                coefficient.

        Returns:
            ``[constant, c0/1, c1/2, ..., c(n-1)/n]`` in canonical form.
            Differentiating the result gives back this polynomial.
        """
        return Polynomial(
            [constant, *(c / i for i, c in enumerate(self._coefficients, start=1))]
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Polynomial):
            return self._coefficients == other._coefficients
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"


def _as_polynomial(value: Any) -> Polynomial:
    if isinstance(value, Polynomial):
        return value
    return Polynomial([value])


def compose(outer: Polynomial, inner: Polynomial) -> Polynomial:
    """Builds the polynomial ``h(x) = outer(inner(x))``.

    The sum ``outer[i] * inner**i`` is accumulated with one multiplication by
    ``inner`` per term, reusing the previous power instead of calling
    :meth:`Polynomial.pow` for each term.

    Args:
        outer: Polynomial applied last.
        inner: Polynomial substituted for the variable of ``outer``.

    Returns:
        The composed polynomial.
    """
    total = Polynomial()
    power = Polynomial([1])
    for i, coefficient in enumerate(outer.coefficients):
        if i:
            power = power * inner
        total = total + power * coefficient
    return total
