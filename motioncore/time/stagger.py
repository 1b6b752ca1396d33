# motioncore/time/stagger.py
"""
Stagger and chain timing.

Stagger: the same window repeated for N elements, each delayed by a fixed
number of frames. Chain: back-to-back segments (enter -> hold -> exit).
"""

from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Optional, Sequence as Seq, Tuple, Union
import logging

from ..core.easing import EasingFn, EasingSelector, get_easing
from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames
from .window import progress

logger = logging.getLogger(__name__)


# =============================================================================
# Stagger
# =============================================================================

@dataclass(frozen=True)
class StaggerState:
    progress: Tuple[float, ...]
    raw_progress: Tuple[float, ...]
    active_index: int   # first item still in flight, -1 if none
    is_complete: bool


@dataclass(frozen=True)
class Stagger:
    count: int
    delay_frames: int = 5
    start_frame: int = 0
    duration_frames: int = 20
    easing: EasingSelector = 'power2.out'
    curve: EasingFn = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.count, int) or self.count < 1:
            raise ConfigurationError(f"count must be >= 1, got {self.count!r}")
        if self.delay_frames < 0:
            raise ConfigurationError(f"delay_frames must be >= 0, got {self.delay_frames!r}")
        if self.duration_frames < 1:
            raise ConfigurationError(
                f"duration_frames must be >= 1, got {self.duration_frames!r}")
        object.__setattr__(self, 'curve', get_easing(self.easing))
        logger.debug(f"Stagger: {self.count} items, last ends at frame {self.end_frame}")

    @classmethod
    def from_seconds(cls, count: int, fps: int, stagger: float, duration: float,
                     delay: float = 0.0, easing: EasingSelector = 'power2.out') -> Stagger:
        return cls(count, seconds_to_frames(stagger, fps), seconds_to_frames(delay, fps),
                   seconds_to_frames(duration, fps), easing)

    @property
    def end_frame(self) -> int:
        return self.start_frame + (self.count - 1) * self.delay_frames + self.duration_frames

    def item_start(self, index: int) -> int:
        return self.start_frame + index * self.delay_frames

    def raw_item_progress(self, frame: float, index: int) -> float:
        return progress(frame, self.item_start(index), self.duration_frames)

    def item_progress(self, frame: float, index: int) -> float:
        return self.curve(self.raw_item_progress(frame, index))

    def state(self, frame: float) -> StaggerState:
        raw = tuple(self.raw_item_progress(frame, i) for i in range(self.count))
        active = next((i for i, r in enumerate(raw) if 0.0 < r < 1.0), -1)
        return StaggerState(
            progress=tuple(self.curve(r) for r in raw),
            raw_progress=raw,
            active_index=active,
            is_complete=all(r >= 1.0 for r in raw),
        )


# =============================================================================
# Chain
# =============================================================================

@dataclass(frozen=True)
class ChainSegment:
    duration_frames: int
    label: Optional[str] = None
    easing: EasingSelector = None
    curve: EasingFn = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.duration_frames < 1:
            raise ConfigurationError(
                f"segment duration must be >= 1 frame, got {self.duration_frames!r}")
        object.__setattr__(self, 'curve', get_easing(self.easing))


@dataclass(frozen=True)
class ChainState:
    progress: float                 # linear 0..1 over the whole chain
    active_index: int
    active_label: Optional[str]
    segment_progress: float         # eased progress inside the active segment
    is_complete: bool


@dataclass(frozen=True)
class Chain:
    segments: Tuple[ChainSegment, ...]
    start_frame: int = 0
    starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        segments = tuple(self.segments)
        if not segments:
            raise ConfigurationError("A chain needs at least one segment")
        object.__setattr__(self, 'segments', segments)

        starts = []
        offset = self.start_frame
        for segment in segments:
            starts.append(offset)
            offset += segment.duration_frames
        object.__setattr__(self, 'starts', tuple(starts))
        logger.debug(f"Chain: segment starts {self.starts}, ends at {self.end_frame}")

    @classmethod
    def of(cls, segments: Seq[ChainSegment], start_frame: int = 0) -> Chain:
        return cls(tuple(segments), start_frame)

    @property
    def total_frames(self) -> int:
        return sum(s.duration_frames for s in self.segments)

    @property
    def end_frame(self) -> int:
        return self.start_frame + self.total_frames

    def index_of(self, label: str) -> int:
        for i, segment in enumerate(self.segments):
            if segment.label == label:
                return i
        return -1

    def state(self, frame: float) -> ChainState:
        overall = progress(frame, self.start_frame, self.total_frames)
        last = len(self.segments) - 1

        if frame < self.start_frame:
            index, segment_value = 0, 0.0
        elif frame >= self.end_frame:
            index, segment_value = last, 1.0
        else:
            index = bisect_right(self.starts, frame) - 1
            segment = self.segments[index]
            segment_value = segment.curve(
                progress(frame, self.starts[index], segment.duration_frames))

        return ChainState(
            progress=overall,
            active_index=index,
            active_label=self.segments[index].label,
            segment_progress=segment_value,
            is_complete=frame >= self.end_frame,
        )

    def segment_progress(self, frame: float, index_or_label: Union[int, str]) -> float:
        """Eased progress of one segment; 0 for unknown labels or indices."""
        if isinstance(index_or_label, str):
            index = self.index_of(index_or_label)
        else:
            index = index_or_label
        if not 0 <= index < len(self.segments):
            return 0.0
        segment = self.segments[index]
        return segment.curve(progress(frame, self.starts[index], segment.duration_frames))
