"""Error taxonomy.

Every failure is fatal for the run: the computation is pure, so there is
nothing to retry and no partial result to report.
"""

from __future__ import annotations

from typing import Optional


class RecoveryError(ValueError):
    """Base class for all secret recovery failures."""


class InvalidDigit(RecoveryError):
    """A y-value digit is not valid for its declared base."""

    def __init__(self, char: str, base: int, x: Optional[int] = None) -> None:
        self.char = char
        self.base = base
        self.x = x
        where = f" in share x={x}" if x is not None else ""
        if char:
            msg = f"Invalid digit '{char}' for base {base}{where}"
        else:
            msg = f"Empty digit string for base {base}{where}"
        super().__init__(msg)


class InvalidBase(RecoveryError):
    """A declared base is not an integer in the supported range."""

    def __init__(self, base: object, x: Optional[int] = None) -> None:
        self.base = base
        self.x = x
        where = f" in share x={x}" if x is not None else ""
        super().__init__(f"Unsupported base {base!r}{where}")


class InsufficientPoints(RecoveryError):
    """Fewer than k points are available to define the polynomial."""

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Not enough points to interpolate polynomial "
            f"(have {available}, need {required})"
        )


class DegenerateInput(RecoveryError):
    """The defining point set cannot determine a polynomial."""

    def __init__(self, message: str, x: Optional[int] = None) -> None:
        self.x = x
        super().__init__(message)


class InputFormatError(RecoveryError):
    """The share file does not have the expected structure."""
