# motioncore/sampling.py
"""
Batch evaluation over frame arrays.

Pure per-frame functions are evaluated independently for every frame, so
the result does not depend on the order or chunking of `frames`.
"""

from __future__ import annotations
from typing import Callable, Iterable
import numpy as np

from .core.easing import EasingSelector, get_easing


def evaluate(fn: Callable[[int], float], frames: Iterable[int]) -> np.ndarray:
    """fn(frame) for each frame, as float64."""
    frames = np.asarray(list(frames))
    return np.fromiter((fn(f.item()) for f in frames), dtype=np.float64, count=len(frames))


def sample_easing(easing: EasingSelector, samples: int = 101) -> np.ndarray:
    """Curve values at `samples` evenly spaced points of [0, 1]."""
    curve = get_easing(easing)
    ts = np.linspace(0.0, 1.0, samples)
    return np.array([curve(float(t)) for t in ts], dtype=np.float64)


def is_non_decreasing(values: np.ndarray, tolerance: float = 1e-9) -> bool:
    values = np.asarray(values, dtype=np.float64)
    if values.size < 2:
        return True
    return bool(np.all(np.diff(values) >= -tolerance))
