"""Provides all interpkit methods."""

from importlib.metadata import PackageNotFoundError, version

from interpkit.exceptions import (
    DuplicateAbscissaError,
    NegativeExponentError,
    PolynomialError,
)
from interpkit.formatting import PolynomialFormat, format_polynomial, tabulate
from interpkit.interp_kit import InterpKit
from interpkit.interpolator import BasisTerm, Interpolator, lagrange_polynomial
from interpkit.polynomial import Polynomial, compose

try:
    __version__ = version("interpkit")
except PackageNotFoundError:
    pass

__all__ = [
    "BasisTerm",
    "DuplicateAbscissaError",
    "InterpKit",
    "Interpolator",
    "NegativeExponentError",
    "Polynomial",
    "PolynomialError",
    "PolynomialFormat",
    "compose",
    "format_polynomial",
    "lagrange_polynomial",
    "tabulate",
]
