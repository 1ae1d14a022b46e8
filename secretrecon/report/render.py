"""Plain-text rendering of a ``RecoveryReport``."""

from __future__ import annotations

from typing import List

from secretrecon.report.model import RecoveryReport


def render_text(report: RecoveryReport) -> str:
    lines: List[str] = [f"Constant Term of Polynomial: {report.secret}", ""]

    if not report.checked:
        return "\n".join(lines).rstrip("\n") + "\n"

    lines.append(f"Using first {report.k} points to determine the polynomial:")
    for p in report.points_used:
        lines.append(f"Point ({p.x}, {p.y})")
    lines.append("")

    if report.anomalies:
        lines.append("Wrong points detected:")
        for i, a in enumerate(report.anomalies, start=1):
            lines.append(f"{i}. Point {a.x}:")
            lines.append(f"   Actual Y:   {a.actual_y}")
            lines.append(f"   Expected Y: {a.expected_y}")
            lines.append(f'   Original data: base {a.base}, value "{a.value}"')
            lines.append("")
    else:
        lines.append("No wrong points detected. All points fit the polynomial.")

    return "\n".join(lines).rstrip("\n") + "\n"
