"""Interpolates four points with a cubic and prints it.

Run with:
    python demo_interpolation.py
"""

from __future__ import annotations

import logging

from interpkit import Interpolator, PolynomialFormat, format_polynomial, tabulate


def main() -> None:
    """Main demo routine."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    interp = Interpolator()

    # Four points the curve must pass through.
    interp.insert(0.0, -3.0)
    interp.insert(1.0, 2.0)
    interp.insert(2.0, 8.0)
    interp.insert(3.0, -7.0)

    poly = interp.polynomial()
    print(format_polynomial(poly, PolynomialFormat(omit_unit_coefficients=True)))

    for x, y in tabulate(poly, -0.5, 3.5, 0.5):
        print(f"f({x:4.1f}) = {y:6.2f}")


if __name__ == "__main__":
    main()
