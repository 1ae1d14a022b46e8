"""Global configuration for secretrecon."""

import os

# ---------- Digit decoding ----------
# Positional alphabet for bases 2..36 (case-insensitive on input).
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGIT_ALPHABET)  # 36

# ---------- Input layout ----------
# Name of the JSON entry holding {"n": ..., "k": ...}; every other entry is a share.
KEYS_ENTRY = "keys"
DEFAULT_INPUT_PATH = os.environ.get("SECRETRECON_INPUT", "input.json")

# ---------- Rounding of the final exact fraction ----------
ROUNDING_HALF_UP = "half_up"
ROUNDING_HALF_EVEN = "half_even"
ROUNDING_MODES = (ROUNDING_HALF_UP, ROUNDING_HALF_EVEN)
DEFAULT_ROUNDING = os.environ.get("SECRETRECON_ROUNDING", ROUNDING_HALF_UP)

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("SECRETRECON_LOG_LEVEL", "WARNING")
