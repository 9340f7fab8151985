"""Fixed-point storage for module modification values.

A modification is a signed fractional adjustment (0.05 means +5%). It is kept
as an integer scaled by ``MOD_SCALE`` so repeated reads never drift.
"""
from __future__ import annotations

import math

MOD_SCALE = 10000
MOD_MIN = -1.0
MOD_MAX = 1.0


class InvalidModificationError(ValueError):
    """Raised when a modification value cannot be stored as fixed-point."""


def encode_mod_value(value: float) -> int:
    """Scale ``value`` to the stored integer, rounding halves upwards."""
    if not math.isfinite(value):
        raise InvalidModificationError(f"Modification value must be finite, got {value!r}.")
    # floor(x + 0.5) instead of round(): ties go toward +inf, not to even.
    return math.floor(value * MOD_SCALE + 0.5)


def decode_mod_value(stored: int) -> float:
    """Convert a stored integer back to the fractional modification."""
    return stored / MOD_SCALE


def is_within_mod_range(value: float) -> bool:
    return MOD_MIN <= value <= MOD_MAX
