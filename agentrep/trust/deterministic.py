"""
AgentRep — Deterministic RNG

Every bit of variation in a score (sub-score noise, synthetic metrics,
history walk, estimated activity) is drawn from here. Same seed in, same
float out. There is no state and no clock.

This is not cryptographic randomness. It exists so placeholder values are
reproducible per agent and can later be swapped for measured data.
"""
import math
from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK_32 = 0xFFFFFFFF


def round_half_up(value: float) -> int:
    """Round .5 away from zero on the positive side (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - (1 << 32) if value & 0x80000000 else value


def hash_string(s: str) -> int:
    """
    Stable, order-sensitive string hash (31-multiplier, 32-bit wraparound).
    Always non-negative. Collisions are tolerated.
    """
    h = 0
    for ch in s:
        h = _to_int32((h << 5) - h + ord(ch))
    return abs(h)


def seeded(seed: float) -> float:
    """Pure pseudo-random float in [0, 1) for a numeric seed."""
    x = math.sin(seed * 9301 + 49297) * 233280
    return x - math.floor(x)


def noise(seed: float, magnitude: float) -> int:
    """Integer noise in [-magnitude, +magnitude]."""
    return round_half_up(seeded(seed) * magnitude * 2 - magnitude)


def pick(items: Sequence[T], seed: float) -> T:
    """Deterministically select one element of a non-empty sequence."""
    if not items:
        raise ValueError("pick() needs at least one item")
    index = int(math.floor(seeded(seed) * len(items)))
    return items[min(index, len(items) - 1)]


def rand_int(min_value: int, max_value: int, seed: float) -> int:
    """Deterministic integer in [min_value, max_value] inclusive."""
    if max_value < min_value:
        raise ValueError(f"rand_int bounds inverted: {min_value} > {max_value}")
    span = max_value - min_value + 1
    return min_value + min(span - 1, int(math.floor(seeded(seed) * span)))


def clamp(value: float, min_value: float, max_value: float) -> int:
    """Round, then bound to [min_value, max_value]."""
    if max_value < min_value:
        raise ValueError(f"clamp bounds inverted: {min_value} > {max_value}")
    return int(max(min_value, min(max_value, round_half_up(value))))
