"""Exact decoding of digit strings in bases 2..36.

``int(s, base)`` is deliberately not used: it also accepts signs,
whitespace, underscores and ``0x``-style prefixes, none of which are valid
share encodings.
"""

from __future__ import annotations

from secretrecon.config import DIGIT_ALPHABET, MAX_BASE, MIN_BASE
from secretrecon.errors import InvalidBase, InvalidDigit

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}


def decode(digits: str, base: int) -> int:
    """Decode *digits* in *base* into an exact integer.

    Accumulates ``result * base + digit`` left to right.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    if not digits:
        raise InvalidDigit("", base)

    result = 0
    for ch in digits:
        value = _DIGIT_VALUES.get(ch.lower())
        if value is None or value >= base:
            raise InvalidDigit(ch, base)
        result = result * base + value
    return result
