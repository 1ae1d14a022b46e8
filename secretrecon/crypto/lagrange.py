"""Exact Lagrange interpolation.

The polynomial through a point set is never materialised: each call
evaluates the Lagrange form at one target x, accumulating basis fractions
with exact rationals, and rounds only the final sum.

API
---
interpolate_at(points, x)  -> exact Rational value of the polynomial at x
evaluate_at(points, x)     -> that value rounded to an int
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from secretrecon.arith import rational
from secretrecon.arith.rational import Rational
from secretrecon.config import DEFAULT_ROUNDING
from secretrecon.errors import DegenerateInput

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


def check_point_set(points: Sequence[Point]) -> None:
    """Raise ``DegenerateInput`` unless *points* can define a polynomial."""
    if not points:
        raise DegenerateInput("Need at least one point to interpolate")
    seen = set()
    for xi, _ in points:
        if xi in seen:
            raise DegenerateInput(f"Duplicate x-coordinate {xi} in point set", x=xi)
        seen.add(xi)


def interpolate_at(points: Sequence[Point], x: int) -> Rational:
    """Exact value at *x* of the unique polynomial of degree < len(points)
    passing through *points*."""
    check_point_set(points)
    logger.debug("Interpolating at x=%d over %d points", x, len(points))

    k = len(points)
    total = rational.ZERO
    for i in range(k):
        xi, yi = points[i]
        basis = rational.ONE
        for j in range(k):
            if j == i:
                continue
            xj = points[j][0]
            basis = rational.mul(basis, rational.reduce(x - xj, xi - xj))
        total = rational.add(total, rational.mul(rational.from_int(yi), basis))
    return total


def evaluate_at(points: Sequence[Point], x: int, rounding: str = DEFAULT_ROUNDING) -> int:
    """Value at *x* of the interpolating polynomial, rounded once."""
    return rational.round_to_int(interpolate_at(points, x), rounding)
