# motioncore/core/noise.py
"""
Deterministic noise.

Closed-form hashes of an integer seed. No generator state is stored, so the
same seed yields the same value on any worker, in any frame order.
"""

from __future__ import annotations
import hashlib
import math

from .scalar import fract

_K1 = 12.9898
_K2 = 78.233
_K3 = 43758.5453


def noise(seed: int) -> float:
    """Pseudo-random value in [0, 1) for an integer seed."""
    return fract(math.sin(seed * _K1 + _K2) * _K3)


def channel_seed(frame: int, channel: int = 0, stride: int = 7) -> int:
    """Seed for one independent noise channel at a frame."""
    return frame * stride + channel


def frame_noise(frame: int, channel: int = 0, stride: int = 7) -> float:
    return noise(channel_seed(frame, channel, stride))


def noise_range(seed: int, low: float, high: float) -> float:
    return low + (high - low) * noise(seed)


def _layered_sine(x: float, seed: float) -> float:
    s1 = math.sin(x * 1.0 + seed * _K1)
    s2 = math.sin(x * 2.3 + seed * _K2)
    s3 = math.sin(x * 4.1 + seed * 43.758)
    return (s1 + s2 * 0.5 + s3 * 0.25) / 1.75


def fbm(x: float, seed: float = 0.0, octaves: int = 2) -> float:
    """Fractal sum of layered sines, normalized to [-1, 1]."""
    value = 0.0
    max_value = 0.0
    for octave in range(max(octaves, 1)):
        amplitude = 0.5 ** octave
        frequency = 2.0 ** octave
        value += _layered_sine(x * frequency, seed + octave * 100) * amplitude
        max_value += amplitude
    return value / max_value


def wiggle(frame: int, fps: int, frequency: float = 2.0, amplitude: float = 10.0,
           seed: float = 0.0, octaves: int = 2) -> float:
    """Smooth organic offset in [-amplitude, amplitude] at a frame."""
    x = (frame / fps) * frequency
    return fbm(x, seed, octaves) * amplitude


def stable_id(prefix: str, *parts) -> str:
    """
    Deterministic element identifier derived from stable inputs.

    Two calls with the same inputs return the same id, so ids never depend
    on render order.
    """
    digest = hashlib.sha1(
        '|'.join(str(p) for p in parts).encode('utf-8')
    ).hexdigest()[:10]
    return f"{prefix}-{digest}"
