# motioncore/core/scalar.py
"""
Scalar helpers shared by the timing modules.
"""

from __future__ import annotations
import math


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def fract(x: float) -> float:
    """Fractional part, always in [0, 1)."""
    r = x - math.floor(x)
    # tiny negative inputs round up to exactly 1.0
    return r if r < 1.0 else 0.0

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))
