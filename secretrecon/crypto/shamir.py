"""Shamir (K-of-N) secret reconstruction over the rationals.

The secret is the constant term f(0) of the polynomial defined by the
first *k* shares in encounter order.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from secretrecon.config import DEFAULT_ROUNDING
from secretrecon.crypto.lagrange import Point, evaluate_at
from secretrecon.errors import DegenerateInput, InsufficientPoints

logger = logging.getLogger(__name__)


def defining_points(points: Sequence[Point], k: int) -> Tuple[Point, ...]:
    """Return the first *k* points, the set that defines the polynomial.

    Order is kept as given; points are never sorted.
    """
    if k < 1:
        raise DegenerateInput(f"Invalid threshold: k={k}")
    if len(points) < k:
        raise InsufficientPoints(len(points), k)
    return tuple(points[:k])


def reconstruct_secret(
    points: Sequence[Point], k: int, rounding: str = DEFAULT_ROUNDING
) -> int:
    """Reconstruct the secret f(0) from the first *k* of *points*."""
    defining = defining_points(points, k)
    secret = evaluate_at(defining, 0, rounding)
    logger.info("Reconstructed secret from %d of %d points", k, len(points))
    return secret
