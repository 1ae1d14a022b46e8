"""Detection of shares that do not lie on the reconstructed polynomial."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from secretrecon.config import DEFAULT_ROUNDING
from secretrecon.crypto.lagrange import Point, evaluate_at
from secretrecon.crypto.shamir import defining_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Anomaly:
    x: int
    actual_y: int
    expected_y: int
    position: int  # index of the point in the checked sequence


def find_anomalies(
    points: Sequence[Point], k: int, rounding: str = DEFAULT_ROUNDING
) -> List[Anomaly]:
    """Check every point, defining ones included, against the polynomial
    through the first *k* points.

    Anomalies are returned in input order.
    """
    defining = defining_points(points, k)
    anomalies: List[Anomaly] = []
    for pos, (x, y) in enumerate(points):
        expected = evaluate_at(defining, x, rounding)
        if expected != y:
            anomalies.append(Anomaly(x=x, actual_y=y, expected_y=expected, position=pos))
    logger.info("Checked %d points: %d anomalies", len(points), len(anomalies))
    return anomalies
