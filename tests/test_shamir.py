"""Tests for secret reconstruction."""

import random

import pytest

from secretrecon.crypto import shamir
from secretrecon.errors import DegenerateInput, InsufficientPoints


def _eval_poly(coeffs, x):
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def _shares(coeffs, n, start=1):
    return [(x, _eval_poly(coeffs, x)) for x in range(start, start + n)]


def test_reconstruct_basic():
    # y = x^2 + x + 2
    assert shamir.reconstruct_secret([(1, 4), (2, 8), (3, 14)], 3) == 2


def test_reconstruct_other_quadratic():
    # y = x^2 + 3
    assert shamir.reconstruct_secret([(1, 4), (2, 7), (3, 12)], 3) == 3


def test_uses_first_k_in_given_order():
    # The first three points define y = x^2 + x + 2; the last does not fit.
    points = [(1, 4), (2, 8), (3, 14), (4, 999)]
    assert shamir.reconstruct_secret(points, 3) == 2
    # A bad share among the first k changes the result.
    assert shamir.reconstruct_secret([(4, 999)] + points[:3], 3) != 2


def test_not_sorted_by_x():
    points = [(3, 12), (1, 4), (9, 9), (2, 7)]
    assert shamir.defining_points(points, 2) == ((3, 12), (1, 4))


def test_exactly_k_points():
    coeffs = [123456789, 5, 9]
    assert shamir.reconstruct_secret(_shares(coeffs, 3), 3) == 123456789


def test_k_minus_one_points_fails():
    coeffs = [123456789, 5, 9]
    with pytest.raises(InsufficientPoints) as info:
        shamir.reconstruct_secret(_shares(coeffs, 2), 3)
    assert info.value.available == 2
    assert info.value.required == 3


def test_more_than_k_points_ignored():
    coeffs = [7777, 1, 2]
    points = _shares(coeffs, 3) + [(10, 0), (11, 1)]
    assert shamir.reconstruct_secret(points, 3) == 7777


def test_any_k_subset():
    """Any K-of-N subset must reconstruct the same secret."""
    rng = random.Random(7)
    coeffs = [-31337, 4, -8, 15]
    shares = _shares(coeffs, 9, start=-4)
    for _ in range(10):
        subset = rng.sample(shares, 4)
        assert shamir.reconstruct_secret(subset, 4) == -31337


def test_zero_secret():
    assert shamir.reconstruct_secret(_shares([0, 3, 3], 3), 3) == 0


def test_threshold_one():
    assert shamir.reconstruct_secret([(6, 55), (7, 12)], 1) == 55


def test_invalid_threshold():
    with pytest.raises(DegenerateInput):
        shamir.reconstruct_secret([(1, 1)], 0)


def test_duplicate_x_in_defining_set():
    with pytest.raises(DegenerateInput):
        shamir.reconstruct_secret([(1, 4), (1, 4), (3, 12)], 3)


def test_deterministic():
    points = _shares([2**90 + 3, 17, -5, 1], 4)
    results = {shamir.reconstruct_secret(points, 4) for _ in range(5)}
    assert results == {2**90 + 3}
