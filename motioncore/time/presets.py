# motioncore/time/presets.py
"""
Named duration presets, in seconds.

micro/instant: tiny feedback. fast..snappy: quick transitions.
normal..medium: standard motion. slow..gentle: emphasis.
dramatic..glacial: cinematic reveals.
"""

from __future__ import annotations
from typing import Dict, Union

from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames

DURATIONS: Dict[str, float] = {
    'micro': 0.05,
    'instant': 0.1,
    'fast': 0.15,
    'quick': 0.2,
    'snappy': 0.25,
    'normal': 0.3,
    'standard': 0.4,
    'medium': 0.5,
    'slow': 0.6,
    'relaxed': 0.7,
    'gentle': 0.8,
    'dramatic': 1.0,
    'cinematic': 1.2,
    'epic': 1.5,
    'glacial': 2.0,
}


def get_duration(duration: Union[str, float]) -> float:
    """Seconds for a preset name, or the number itself."""
    if isinstance(duration, str):
        try:
            return DURATIONS[duration]
        except KeyError:
            raise ConfigurationError(f"Unknown duration preset: {duration!r}") from None
    if duration < 0:
        raise ConfigurationError(f"Duration must be >= 0 seconds, got {duration}")
    return float(duration)


def duration_frames(duration: Union[str, float], fps: int) -> int:
    return seconds_to_frames(get_duration(duration), fps)
