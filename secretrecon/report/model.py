"""Recovery report.

Integers are carried as decimal strings: secrets and shares routinely
exceed what JSON consumers can hold in a double.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from secretrecon.crypto.consistency import Anomaly
from secretrecon.shares.loader import Share


class PointRecord(BaseModel):
    x: int
    y: str


class AnomalyRecord(BaseModel):
    """A share that does not lie on the reconstructed polynomial."""

    x: int
    actual_y: str
    expected_y: str
    base: int
    value: str


class RecoveryReport(BaseModel):
    secret: str
    k: int
    n: int
    rounding: str
    points_used: List[PointRecord]
    checked: bool
    anomalies: List[AnomalyRecord] = []
    audit: Optional[List[Dict[str, Any]]] = None

    @property
    def consistent(self) -> bool:
        return not self.anomalies


def build_report(
    shares: Sequence[Share],
    k: int,
    n: int,
    secret: int,
    rounding: str,
    anomalies: Optional[Sequence[Anomaly]] = None,
    audit: Optional[List[Dict[str, Any]]] = None,
) -> RecoveryReport:
    """Assemble the report; ``anomalies=None`` means the check was skipped."""
    records: List[AnomalyRecord] = []
    for a in anomalies or ():
        share = shares[a.position]
        records.append(
            AnomalyRecord(
                x=a.x,
                actual_y=str(a.actual_y),
                expected_y=str(a.expected_y),
                base=share.base,
                value=share.value,
            )
        )
    return RecoveryReport(
        secret=str(secret),
        k=k,
        n=n,
        rounding=rounding,
        points_used=[PointRecord(x=s.x, y=str(s.y)) for s in shares[:k]],
        checked=anomalies is not None,
        anomalies=records,
        audit=audit,
    )
