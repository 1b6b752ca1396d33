"""
Frame State

Immutable clock configuration and per-query frame information.
The frame index is the only temporal input; wall-clock time is never read.
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import ConfigurationError
from .scalar import round_half_up


def seconds_to_frames(seconds: float, fps: int) -> int:
    """Convert a duration in seconds to a whole frame count (round half up)."""
    return round_half_up(seconds * fps)


@dataclass(frozen=True)
class ClockConfig:
    """Static timeline description for one rendering session."""
    fps: int = 30
    total_frames: int = 150

    def __post_init__(self):
        if not isinstance(self.fps, int) or self.fps <= 0:
            raise ConfigurationError(f"fps must be a positive integer, got {self.fps!r}")
        if not isinstance(self.total_frames, int) or self.total_frames <= 0:
            raise ConfigurationError(
                f"total_frames must be a positive integer, got {self.total_frames!r}")

    @property
    def duration_seconds(self) -> float:
        return self.total_frames / self.fps

    def to_frames(self, seconds: float) -> int:
        return seconds_to_frames(seconds, self.fps)

    def at(self, frame: int) -> FrameState:
        return FrameState(frame, self)


@dataclass(frozen=True)
class FrameState:
    """
    Immutable frame information handed to every timing function.
    """
    frame: int          # Absolute frame index (may be negative for pre-roll)
    clock: ClockConfig

    @property
    def seconds(self) -> float:
        """Timeline position in seconds."""
        return self.frame / self.clock.fps

    @property
    def composition_progress(self) -> float:
        """Linear 0..1 position through the composition, clamped."""
        last = max(self.clock.total_frames - 1, 1)
        return max(0.0, min(self.frame / last, 1.0))

    @property
    def is_in_range(self) -> bool:
        return 0 <= self.frame < self.clock.total_frames
