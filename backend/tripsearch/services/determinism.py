"""Deterministic seeding — query key → 32-bit seed → fractions in [0, 1).

Nothing here keeps state: a draw is a function of its seed alone, so any
single value in a generated result can be recomputed from the base seed and
its draw index.
"""

import math

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def seeded_hash(key: str) -> int:
    """
    Polynomial rolling hash (multiplier 31) with 32-bit signed wraparound.

    Returns the absolute value of the final accumulator, so the result is
    always non-negative (and at most 2**31).
    """
    acc = 0
    for ch in key:
        acc = _to_int32(acc * 31 + ord(ch))
    return abs(acc)


def seeded_fraction(seed: int) -> float:
    """Map a seed to [0, 1) via the fractional part of sin(seed) * 10000."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to nearest with halves going up; round() rounds halves to even."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
