#!/usr/bin/env python3
"""Recover a secret from a share file and report wrong shares.

Usage:
    secretrecon [input.json] [--json] [--audit] [--no-check] [--strict]
    python -m secretrecon.runner input.json

The run:
1. Loads and decodes the shares (file order is kept).
2. Interpolates the polynomial through the first k shares at x = 0.
3. Checks every share against that polynomial.
4. Prints the secret and any wrong shares.

Any ``RecoveryError`` aborts before a number is printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from secretrecon import config
from secretrecon.crypto.consistency import find_anomalies
from secretrecon.crypto.shamir import reconstruct_secret
from secretrecon.errors import RecoveryError
from secretrecon.report.audit import AuditLog
from secretrecon.report.model import RecoveryReport, build_report
from secretrecon.report.render import render_text
from secretrecon.shares.loader import decode_shares, load_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ANOMALIES = 3


def run(
    path: Union[str, Path],
    check: bool = True,
    rounding: str = config.DEFAULT_ROUNDING,
    audit: bool = False,
) -> RecoveryReport:
    """Load *path*, recover the secret and (optionally) check every share."""
    if rounding not in config.ROUNDING_MODES:
        raise ValueError(f"Unknown rounding mode: {rounding!r}")

    trail = AuditLog() if audit else None

    payload = load_file(path)
    shares = decode_shares(payload)
    k, n = payload.keys.k, payload.keys.n
    points = [s.point for s in shares]
    if trail is not None:
        trail.append("input_loaded", {"source": str(path), "n": n, "k": k, "shares": len(shares)})

    secret = reconstruct_secret(points, k, rounding)
    if trail is not None:
        trail.append("defining_set", {"x": [x for x, _ in points[:k]]})
        trail.append("secret_recovered", {"rounding": rounding})

    anomalies = None
    if check:
        anomalies = find_anomalies(points, k, rounding)
        for a in anomalies:
            logger.warning("Share x=%d does not fit the polynomial", a.x)
            if trail is not None:
                share = shares[a.position]
                trail.append("anomaly", {"x": a.x, "base": share.base, "value": share.value})
        if trail is not None:
            trail.append("check_complete", {"checked": len(points), "anomalies": len(anomalies)})

    return build_report(
        shares,
        k=k,
        n=n,
        secret=secret,
        rounding=rounding,
        anomalies=anomalies,
        audit=trail.entries() if trail is not None else None,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretrecon",
        description="Recover a Shamir secret from encoded shares and flag wrong shares",
    )
    parser.add_argument("input", nargs="?", default=config.DEFAULT_INPUT_PATH)
    parser.add_argument("--no-check", action="store_true", help="Skip the wrong-share check")
    parser.add_argument("--rounding", choices=config.ROUNDING_MODES, default=config.DEFAULT_ROUNDING)
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--audit", action="store_true", help="Include the audit trail (JSON only)")
    parser.add_argument("--strict", action="store_true", help="Exit with status 3 on wrong shares")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # argparse checks choices on the command line only, not on the env default
    if args.rounding not in config.ROUNDING_MODES:
        print(
            f"error: unknown rounding mode {args.rounding!r} "
            f"(expected one of {', '.join(config.ROUNDING_MODES)})",
            file=sys.stderr,
        )
        return EXIT_ERROR

    try:
        report = run(
            args.input,
            check=not args.no_check,
            rounding=args.rounding,
            audit=args.audit and args.json,
        )
    except RecoveryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(report.model_dump_json(indent=2, exclude_none=True))
    else:
        sys.stdout.write(render_text(report))

    if args.strict and report.anomalies:
        return EXIT_ANOMALIES
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
