# motioncore/text/typewriter.py
"""
Typewriter reveal: characters appear one by one, with a blinking cursor.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames


@dataclass(frozen=True)
class Typewriter:
    text: str
    delay_frames: int = 0
    frames_per_char: int = 2
    cursor_blink_frames: int = 15
    cursor_char: str = '|'

    def __post_init__(self):
        if self.delay_frames < 0:
            raise ConfigurationError(f"delay_frames must be >= 0, got {self.delay_frames!r}")
        if self.frames_per_char < 1:
            raise ConfigurationError(
                f"frames_per_char must be >= 1, got {self.frames_per_char!r}")
        if self.cursor_blink_frames < 1:
            raise ConfigurationError(
                f"cursor_blink_frames must be >= 1, got {self.cursor_blink_frames!r}")

    @classmethod
    def from_seconds(cls, text: str, fps: int, speed: float = 0.05, delay: float = 0.0,
                     blink_rate: float = 0.5, cursor_char: str = '|') -> Typewriter:
        return cls(text, seconds_to_frames(delay, fps), seconds_to_frames(speed, fps),
                   seconds_to_frames(blink_rate, fps), cursor_char)

    @property
    def typing_frames(self) -> int:
        return len(self.text) * self.frames_per_char

    def visible_count(self, frame: float) -> int:
        elapsed = frame - self.delay_frames
        if elapsed <= 0:
            return 0
        return min(len(self.text), int(math.floor(elapsed / self.frames_per_char)))

    def visible_text(self, frame: float) -> str:
        return self.text[:self.visible_count(frame)]

    def is_complete(self, frame: float) -> bool:
        return self.visible_count(frame) >= len(self.text)

    def cursor_visible(self, frame: float, hide_on_complete: bool = False) -> bool:
        if hide_on_complete and self.is_complete(frame):
            return False
        return math.floor(frame / self.cursor_blink_frames) % 2 == 0

    def render(self, frame: float, hide_cursor_on_complete: bool = False) -> str:
        text = self.visible_text(frame)
        if self.cursor_visible(frame, hide_cursor_on_complete):
            text += self.cursor_char
        return text
