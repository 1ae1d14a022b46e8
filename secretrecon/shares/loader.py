"""Share file loader.

A share file is a JSON object with a ``keys`` entry and one entry per
share::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2",  "value": "111"},
      ...
    }

Share order is the order of the JSON object, which decides which shares
define the polynomial.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from secretrecon.arith.digits import decode
from secretrecon.config import KEYS_ENTRY, MAX_BASE, MIN_BASE
from secretrecon.errors import InputFormatError, InvalidBase, InvalidDigit

logger = logging.getLogger(__name__)


class ThresholdKeys(BaseModel):
    """The ``keys`` entry: shares issued (n) and threshold (k)."""

    n: int = Field(ge=0)
    k: int = Field(ge=1)


class EncodedValue(BaseModel):
    """A y-coordinate as written in the file."""

    base: int
    value: str

    @field_validator("base", mode="before")
    @classmethod
    def _parse_base(cls, v: Union[str, int]) -> int:
        if isinstance(v, bool):
            raise ValueError("base must be an integer")
        if isinstance(v, str):
            v = v.strip()
            if not v.isdecimal():
                raise ValueError(f"base {v!r} is not a decimal integer")
            v = int(v)
        if not isinstance(v, int):
            raise ValueError("base must be an integer")
        if not MIN_BASE <= v <= MAX_BASE:
            raise ValueError(f"base {v} outside {MIN_BASE}..{MAX_BASE}")
        return v

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, v: Any) -> Any:
        # A bare JSON integer is taken as its decimal digits, read in the declared base.
        if isinstance(v, (bool, float)):
            raise ValueError(f"value must be a digit string, got JSON {type(v).__name__} {v!r}")
        if isinstance(v, int):
            if v < 0:
                raise ValueError(f"value must be a digit string, got negative number {v}")
            return str(v)
        return v


class SharePayload(BaseModel):
    """Validated file contents, shares still encoded and in file order."""

    keys: ThresholdKeys
    entries: List[Tuple[str, EncodedValue]]


class Share(BaseModel):
    """A decoded share and the encoding it came from."""

    x: int
    y: int
    base: int
    value: str

    @property
    def point(self) -> Tuple[int, int]:
        return (self.x, self.y)


def parse_payload(data: Any) -> SharePayload:
    """Validate a decoded JSON document."""
    if not isinstance(data, dict):
        raise InputFormatError("Share file must contain a JSON object")
    if KEYS_ENTRY not in data:
        raise InputFormatError(f"Missing '{KEYS_ENTRY}' entry")

    try:
        keys = ThresholdKeys.model_validate(data[KEYS_ENTRY])
    except ValidationError as exc:
        raise InputFormatError(f"Invalid '{KEYS_ENTRY}' entry: {_first_error(exc)}") from exc

    entries: List[Tuple[str, EncodedValue]] = []
    for key, raw in data.items():
        if key == KEYS_ENTRY:
            continue
        try:
            entries.append((key, EncodedValue.model_validate(raw)))
        except ValidationError as exc:
            if _is_base_error(exc):
                raise InvalidBase(_raw_base(raw), x=_try_int(key)) from exc
            raise InputFormatError(f"Invalid share '{key}': {_first_error(exc)}") from exc

    if keys.n != len(entries):
        logger.warning("keys.n=%d but file holds %d shares", keys.n, len(entries))
    return SharePayload(keys=keys, entries=entries)


def load_file(path: Union[str, Path]) -> SharePayload:
    """Read and validate a share file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFormatError(f"Cannot read {path}: {exc.strerror}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    logger.debug("Loaded %s", path)
    return parse_payload(data)


def decode_shares(payload: SharePayload) -> List[Share]:
    """Decode every share, keeping file order."""
    shares: List[Share] = []
    for key, enc in payload.entries:
        x = _try_int(key)
        if x is None:
            raise InputFormatError(f"Share key '{key}' is not a decimal integer")
        try:
            y = decode(enc.value, enc.base)
        except InvalidDigit as exc:
            raise InvalidDigit(exc.char, exc.base, x=x) from exc
        shares.append(Share(x=x, y=y, base=enc.base, value=enc.value))
    return shares


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _try_int(key: str) -> Optional[int]:
    text = key.strip()
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not digits.isdecimal():
        return None
    return int(text)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def _is_base_error(exc: ValidationError) -> bool:
    return any(err["loc"] == ("base",) and err["type"] == "value_error" for err in exc.errors())


def _raw_base(raw: Any) -> Any:
    return raw.get("base") if isinstance(raw, dict) else None
