# motioncore/time/window.py
"""
Progress calculator.

Turns an absolute frame into an eased progress scalar for one transition
window. Everything here is a closed-form function of the frame.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..core.easing import EasingFn, EasingSelector, get_easing
from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames
from ..core.scalar import lerp


def progress(frame: float, delay_frames: float, duration_frames: float,
             easing: EasingSelector = None,
             clamp_left: bool = True, clamp_right: bool = True) -> float:
    """
    Eased progress of a window starting at `delay_frames` and lasting
    `duration_frames`.

    Frames before the window (pre-roll) and after it are legal and clamp to
    easing(0) / easing(1) unless the matching clamp flag is off.
    """
    if duration_frames <= 0:
        raise ConfigurationError(
            f"duration_frames must be >= 1, got {duration_frames} (guard with max(d, 1))")

    ratio = (frame - delay_frames) / duration_frames
    if clamp_left and ratio < 0.0:
        ratio = 0.0
    if clamp_right and ratio > 1.0:
        ratio = 1.0
    return get_easing(easing)(ratio)


@dataclass(frozen=True)
class AnimationWindow:
    """One scalar transition: start offset, length and curve."""
    delay_frames: int = 0
    duration_frames: int = 30
    easing: EasingSelector = None
    clamp_left: bool = True
    clamp_right: bool = True
    curve: EasingFn = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.delay_frames, int) or self.delay_frames < 0:
            raise ConfigurationError(
                f"delay_frames must be an integer >= 0, got {self.delay_frames!r}")
        if not isinstance(self.duration_frames, int) or self.duration_frames < 1:
            raise ConfigurationError(
                f"duration_frames must be an integer >= 1, got {self.duration_frames!r}")
        object.__setattr__(self, 'curve', get_easing(self.easing))

    @classmethod
    def from_seconds(cls, delay: float, duration: float, fps: int,
                     easing: EasingSelector = None,
                     at_least_one_frame: bool = False) -> AnimationWindow:
        duration_frames = seconds_to_frames(duration, fps)
        if at_least_one_frame:
            duration_frames = max(duration_frames, 1)
        return cls(seconds_to_frames(delay, fps), duration_frames, easing)

    @property
    def end_frame(self) -> int:
        return self.delay_frames + self.duration_frames

    def shifted(self, frames: int) -> AnimationWindow:
        """Same window starting `frames` later."""
        return AnimationWindow(self.delay_frames + frames, self.duration_frames,
                               self.easing, self.clamp_left, self.clamp_right)

    def progress(self, frame: float) -> float:
        return progress(frame, self.delay_frames, self.duration_frames, self.curve,
                        self.clamp_left, self.clamp_right)

    def interpolate(self, frame: float, start: float, end: float) -> float:
        return lerp(start, end, self.progress(frame))

    def is_active(self, frame: float) -> bool:
        return self.delay_frames <= frame < self.end_frame


def loop_progress(frame: int, duration_frames: int, start_frame: int = 0,
                  easing: EasingSelector = None) -> float:
    """0..1 value that restarts every `duration_frames` frames."""
    if duration_frames <= 0:
        raise ConfigurationError(f"duration_frames must be >= 1, got {duration_frames}")
    if frame < start_frame:
        return 0.0
    raw = ((frame - start_frame) % duration_frames) / duration_frames
    return get_easing(easing)(raw)


def motion_blur(progress_value: float, easing: EasingSelector = None,
                max_blur: float = 8.0) -> float:
    """Blur amount from the curve's speed at a progress value."""
    curve = get_easing(easing)
    dt = 0.02
    p0 = curve(max(0.0, progress_value - dt))
    p1 = curve(min(1.0, progress_value + dt))
    velocity = abs(p1 - p0) / (2.0 * dt)
    return min(velocity * 2.0, 1.0) * max_blur
