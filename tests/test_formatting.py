"""Unit tests for interpkit.formatting."""

from fractions import Fraction

import pytest
from numpy.testing import assert_allclose

from interpkit.formatting import PolynomialFormat, format_polynomial, tabulate
from interpkit.interpolator import Interpolator
from interpkit.polynomial import Polynomial


def test_format_default_is_sign_aware():
    """Tests the default rendering with ^k powers."""
    text = format_polynomial(Polynomial([2.0, -3.0, 1.0]))
    assert text == "f(x) = 2.000000 - 3.000000*x + 1.000000*x^2"


def test_format_negative_constant_term():
    """Tests that a leading negative coefficient keeps its sign attached."""
    text = format_polynomial(Polynomial([-3.0, 10.0, -3.5]))
    assert text == "f(x) = -3.000000 + 10.000000*x - 3.500000*x^2"


def test_format_omits_unit_coefficients():
    """Tests that a bare 1 is not printed in front of a power of x."""
    fmt = PolynomialFormat(precision=2, omit_unit_coefficients=True)
    assert format_polynomial(Polynomial([2.0, -3.0, 1.0]), fmt) == "f(x) = 2.00 - 3.00*x + x^2"
    assert (
        format_polynomial(Polynomial([-1.0, -1.0, 0.0, -1.0]), fmt)
        == "f(x) = -1.00 - x + 0.00*x^2 - x^3"
    )


def test_format_skip_zero_terms():
    """Tests that zero coefficients can be left out."""
    fmt = PolynomialFormat(precision=2, omit_unit_coefficients=True, skip_zero_terms=True)
    assert format_polynomial(Polynomial([-1.0, -1.0, 0.0, -1.0]), fmt) == "f(x) = -1.00 - x - x^3"
    assert format_polynomial(Polynomial([0, -2]), fmt) == "f(x) = -2.00*x"


def test_format_custom_variable_without_prefix():
    """Tests the variable symbol and disabling the name prefix."""
    fmt = PolynomialFormat(precision=1, variable="t", name=None)
    assert format_polynomial(Polynomial([2, 0.5]), fmt) == "2.0 + 0.5*t"


def test_format_zero_polynomial():
    """Tests that the zero polynomial renders as 0."""
    assert format_polynomial(Polynomial()) == "f(x) = 0"
    assert format_polynomial(Polynomial([0.0]), PolynomialFormat(name=None)) == "0"


def test_format_complex_coefficients():
    """Tests that complex coefficients are parenthesised."""
    fmt = PolynomialFormat(precision=1)
    text = format_polynomial(Polynomial([1 + 2j, 3 - 1j]), fmt)
    assert text == "f(x) = (1.0+2.0j) + (3.0-1.0j)*x"


def test_format_fraction_coefficients():
    """Tests that rational coefficients are rendered as decimals."""
    fmt = PolynomialFormat(precision=2)
    text = format_polynomial(Polynomial([Fraction(1, 2), Fraction(-3, 4)]), fmt)
    assert text == "f(x) = 0.50 - 0.75*x"


@pytest.mark.parametrize(
    "kwargs",
    [{"precision": -1}, {"variable": ""}],
)
def test_format_config_rejects_invalid_values(kwargs):
    """Tests validation of the formatting configuration."""
    with pytest.raises(ValueError):
        PolynomialFormat(**kwargs)


def test_tabulate_includes_end_point():
    """Tests the grid -0.5, 0.0, ..., 3.5."""
    rows = tabulate(Polynomial([0.0, 1.0]), -0.5, 3.5, 0.5)
    assert len(rows) == 9
    assert rows[0] == (-0.5, -0.5)
    assert rows[-1] == (3.5, 3.5)


def test_tabulate_constant_and_zero_polynomials():
    """Tests that constant functions still produce one value per grid point."""
    rows = tabulate(Polynomial([2.0]), 0.0, 1.0, 0.25)
    assert [y for _, y in rows] == [2.0] * 5
    rows = tabulate(Polynomial(), 0.0, 1.0, 0.5)
    assert [y for _, y in rows] == [0.0] * 3


def test_tabulate_interpolator(cubic_points):
    """Tests tabulating an Interpolator at its own samples."""
    interp = Interpolator.from_points(*zip(*cubic_points))
    rows = tabulate(interp, 0.0, 3.0, 1.0)
    assert_allclose([y for _, y in rows], [y for _, y in cubic_points], atol=1e-12)


def test_tabulate_rejects_non_positive_step():
    """Tests that the grid spacing must be positive."""
    with pytest.raises(ValueError, match="step"):
        tabulate(Polynomial([1.0]), 0.0, 1.0, 0.0)
