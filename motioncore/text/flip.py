# motioncore/text/flip.py
"""
Character-cycle resolver for split-flap style reveals.

A cell starts blank, walks through a fixed pattern of alphabet characters
and lands on its target. The walk depends only on (progress, target,
alphabet), so any frame can be rendered on its own.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import math

from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames
from ..time.window import AnimationWindow, progress

DEFAULT_ALPHABET = " ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.!?-:"


@dataclass(frozen=True)
class CycleSpec:
    alphabet: str = DEFAULT_ALPHABET
    multiplier: int = 7
    base_cycles: int = 8
    cycle_spread: int = 5

    def __post_init__(self):
        if not self.alphabet:
            raise ConfigurationError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ConfigurationError(f"alphabet has repeated characters: {self.alphabet!r}")
        if self.base_cycles < 1 or self.cycle_spread < 1:
            raise ConfigurationError("base_cycles and cycle_spread must be >= 1")

    @property
    def blank(self) -> str:
        return self.alphabet[0]

    @property
    def uppercase_only(self) -> bool:
        return self.alphabet == self.alphabet.upper()

    def target_index(self, target_char: str) -> int:
        index = self.alphabet.find(self.normalize(target_char))
        return index if index >= 0 else 0

    def cycle_count(self, target_char: str) -> int:
        return self.base_cycles + self.target_index(target_char) % self.cycle_spread

    def normalize(self, char: str) -> str:
        return char.upper() if self.uppercase_only else char

    def resolve(self, progress_value: float, target_char: str) -> str:
        target = self.normalize(target_char)
        if progress_value >= 1.0:
            return target
        if progress_value <= 0.0:
            return self.blank

        index = self.target_index(target)
        cycles = self.base_cycles + index % self.cycle_spread
        step = int(math.floor(progress_value * cycles))
        if step >= cycles - 1:
            return target
        return self.alphabet[(step * self.multiplier + index) % len(self.alphabet)]


DEFAULT_CYCLE = CycleSpec()


def resolve(progress_value: float, target_char: str,
            alphabet: str = DEFAULT_ALPHABET) -> str:
    """Displayed character for one flap cell at `progress_value`."""
    spec = DEFAULT_CYCLE if alphabet == DEFAULT_ALPHABET else CycleSpec(alphabet)
    return spec.resolve(progress_value, target_char)


def flap_window(fps: int, flip_duration: float = 0.08, delay: float = 0.0) -> AnimationWindow:
    """Per-cell window: at least one frame long, quad ease-out."""
    return AnimationWindow.from_seconds(delay, flip_duration, fps, 'power1.out',
                                        at_least_one_frame=True)


def split_flap(frame: float, text: str, window: AnimationWindow, stagger_frames: int,
               spec: Optional[CycleSpec] = None) -> str:
    """Whole board: cell `i` starts `i * stagger_frames` after the window start."""
    spec = spec or DEFAULT_CYCLE
    cells = []
    for i, char in enumerate(text):
        p = progress(frame, window.delay_frames + i * stagger_frames, window.duration_frames,
                     window.curve)
        cells.append(spec.resolve(p, char))
    return ''.join(cells)


def split_flap_seconds(frame: float, text: str, fps: int, flip_duration: float = 0.08,
                       stagger: float = 0.05, delay: float = 0.0,
                       spec: Optional[CycleSpec] = None) -> str:
    return split_flap(frame, text, flap_window(fps, flip_duration, delay),
                      seconds_to_frames(stagger, fps), spec)
