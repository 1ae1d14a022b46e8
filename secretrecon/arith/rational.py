"""Exact rational arithmetic over Python ints.

Every ``Rational`` is kept in lowest terms with a positive denominator, so
two equal values always compare equal field by field.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd

from secretrecon.config import DEFAULT_ROUNDING, ROUNDING_HALF_EVEN, ROUNDING_HALF_UP


@dataclass(frozen=True)
class Rational:
    num: int
    den: int = 1

    def __str__(self) -> str:
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"

    @property
    def is_integer(self) -> bool:
        return self.den == 1


ZERO = Rational(0, 1)
ONE = Rational(1, 1)


def reduce(n: int, d: int) -> Rational:
    """Build ``n/d`` in lowest terms, sign carried by the numerator."""
    if d == 0:
        raise ZeroDivisionError("Rational with zero denominator")
    if n == 0:
        return ZERO
    if d < 0:
        n, d = -n, -d
    g = gcd(n, d)
    return Rational(n // g, d // g)


def from_int(v: int) -> Rational:
    return Rational(v, 1)


def add(a: Rational, b: Rational) -> Rational:
    """Exact addition."""
    return reduce(a.num * b.den + b.num * a.den, a.den * b.den)


def mul(a: Rational, b: Rational) -> Rational:
    """Exact multiplication."""
    return reduce(a.num * b.num, a.den * b.den)


def round_to_int(r: Rational, mode: str = DEFAULT_ROUNDING) -> int:
    """Round *r* to the nearest integer.

    ``half_up``: ties go toward +infinity for every sign (-5/2 -> -2).
    ``half_even``: ties go to the even neighbour (5/2 -> 2, -7/2 -> -4).
    """
    n, d = r.num, r.den
    if d == 1:
        return n
    if mode == ROUNDING_HALF_UP:
        return (2 * n + d) // (2 * d)
    if mode == ROUNDING_HALF_EVEN:
        q, rem = divmod(n, d)  # floor quotient, 0 <= rem < d
        twice = 2 * rem
        if twice > d or (twice == d and q % 2 == 1):
            return q + 1
        return q
    raise ValueError(f"Unknown rounding mode: {mode!r}")
