"""Tests for wrong-share detection."""

import random

import pytest

from secretrecon.crypto.consistency import Anomaly, find_anomalies
from secretrecon.errors import DegenerateInput, InsufficientPoints


def _eval_poly(coeffs, x):
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def test_single_wrong_point():
    points = [(1, 4), (2, 8), (3, 14), (4, 999)]
    assert find_anomalies(points, 3) == [
        Anomaly(x=4, actual_y=999, expected_y=22, position=3)
    ]


def test_wrong_point_on_other_quadratic():
    # (1, 4), (2, 7), (3, 12) lie on y = x^2 + 3, so f(4) = 19
    points = [(1, 4), (2, 7), (3, 12), (4, 999)]
    assert find_anomalies(points, 3) == [
        Anomaly(x=4, actual_y=999, expected_y=19, position=3)
    ]


def test_all_points_fit():
    coeffs = [11, -2, 3]
    points = [(x, _eval_poly(coeffs, x)) for x in range(1, 8)]
    assert find_anomalies(points, 3) == []


def test_only_defining_points():
    assert find_anomalies([(1, 4), (2, 7), (3, 12)], 3) == []


def test_perturbation_gives_exactly_one_anomaly():
    rng = random.Random(2024)
    coeffs = [rng.randint(-(10**30), 10**30) for _ in range(4)]
    points = [(x, _eval_poly(coeffs, x)) for x in range(1, 11)]
    for _ in range(20):
        idx = rng.randrange(4, len(points))
        delta = rng.choice([-1, 1]) * rng.randint(1, 10**20)
        x, y = points[idx]
        bad = points[:idx] + [(x, y + delta)] + points[idx + 1:]
        anomalies = find_anomalies(bad, 4)
        assert len(anomalies) == 1
        assert anomalies[0].x == x
        assert anomalies[0].expected_y == y
        assert anomalies[0].actual_y == y + delta
        assert anomalies[0].position == idx


def test_input_order_kept():
    points = [(1, 4), (2, 8), (3, 14), (9, 0), (5, 32), (4, 999)]
    assert [a.x for a in find_anomalies(points, 3)] == [9, 4]


def test_duplicate_x_outside_defining_set():
    points = [(1, 4), (2, 7), (3, 12), (2, 8), (2, 7)]
    anomalies = find_anomalies(points, 3)
    assert [(a.x, a.position) for a in anomalies] == [(2, 3)]


def test_bad_defining_point_flags_others():
    # A corrupted share among the first k shifts the polynomial.
    points = [(1, 5), (2, 7), (3, 12), (4, 22), (5, 32)]
    anomalies = find_anomalies(points, 3)
    assert [a.x for a in anomalies] == [4, 5]


def test_insufficient_points():
    with pytest.raises(InsufficientPoints):
        find_anomalies([(1, 4)], 2)


def test_duplicate_x_in_defining_set():
    with pytest.raises(DegenerateInput):
        find_anomalies([(1, 4), (1, 5), (2, 7)], 2)
