# motioncore/time/sequence.py
"""
Sequence partitioner - N items shown one at a time.

The usable timeline (total minus end padding) is cut into equal slots.
For any frame the active slot, its predecessor and the transition window
between them are derived directly from the frame.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple
import logging
import math

from ..core.errors import ConfigurationError
from ..core.frame import seconds_to_frames
from ..core.scalar import clamp
from .window import progress

logger = logging.getLogger(__name__)

# Transitions may use at most this share of a slot.
MAX_TRANSITION_SHARE = 0.9


class SlotOffsetMode(Enum):
    ABSOLUTE = auto()   # frame - current_index * slot_width
    MODULO = auto()     # frame % slot_width (legacy, re-triggers during end padding)


class SlotPhase(Enum):
    IDLE = auto()           # first item, no predecessor to transition from
    TRANSITIONING = auto()  # previous item -> current item
    HOLDING = auto()


@dataclass(frozen=True)
class SlotState:
    """Per-frame view of a sequence. Computed fresh for every query."""
    current_index: int
    previous_index: int         # -1 when there is no previous item
    in_slot_progress: float     # linear 0..1 across the transition window
    is_transitioning: bool
    hold_progress: float        # linear 0..1 across the rest of the slot
    in_slot_offset: float
    phase: SlotPhase

    @property
    def has_previous(self) -> bool:
        return self.previous_index >= 0


@dataclass(frozen=True)
class Sequence:
    item_count: int
    total_frames: int
    transition_frames: int = 0
    end_padding_frames: int = 0
    offset_mode: SlotOffsetMode = SlotOffsetMode.ABSOLUTE

    def __post_init__(self):
        if not isinstance(self.item_count, int) or self.item_count < 1:
            raise ConfigurationError(f"item_count must be >= 1, got {self.item_count!r}")
        if not isinstance(self.total_frames, int) or self.total_frames < 1:
            raise ConfigurationError(
                f"total_frames must be an integer >= 1, got {self.total_frames!r}")
        if not isinstance(self.transition_frames, int) or self.transition_frames < 0:
            raise ConfigurationError(
                f"transition_frames must be an integer >= 0, got {self.transition_frames!r}")
        if not isinstance(self.end_padding_frames, int) or self.end_padding_frames < 0:
            raise ConfigurationError(
                f"end_padding_frames must be an integer >= 0, got {self.end_padding_frames!r}")
        if self.end_padding_frames >= self.total_frames:
            raise ConfigurationError(
                f"end_padding_frames ({self.end_padding_frames}) leaves no room "
                f"for items in {self.total_frames} frames")

        if self.transition_frames > self.slot_width * MAX_TRANSITION_SHARE:
            logger.warning(
                f"Transition of {self.transition_frames} frames clamped to "
                f"{self.effective_transition_frames:.2f} (slot width {self.slot_width:.2f})")
        if self.offset_mode is SlotOffsetMode.MODULO:
            logger.warning(
                "Sequence uses modulo slot offsets; transitions re-trigger during end padding")

        logger.debug(
            f"Sequence: {self.item_count} items, slot width {self.slot_width:.2f}, "
            f"transition {self.effective_transition_frames:.2f}")

    @classmethod
    def from_seconds(cls, item_count: int, fps: int, transition_seconds: float,
                     total_frames: Optional[int] = None,
                     total_seconds: Optional[float] = None,
                     end_padding_seconds: float = 0.0,
                     offset_mode: SlotOffsetMode = SlotOffsetMode.ABSOLUTE) -> Sequence:
        """Build from second-based settings; `total_seconds` wins over `total_frames`."""
        if total_seconds is not None:
            total_frames = seconds_to_frames(total_seconds, fps)
        if total_frames is None:
            raise ConfigurationError("Either total_frames or total_seconds is required")
        return cls(
            item_count=item_count,
            total_frames=total_frames,
            transition_frames=seconds_to_frames(transition_seconds, fps),
            end_padding_frames=seconds_to_frames(end_padding_seconds, fps),
            offset_mode=offset_mode,
        )

    @property
    def slot_width(self) -> float:
        return (self.total_frames - self.end_padding_frames) / self.item_count

    @property
    def effective_transition_frames(self) -> float:
        return min(self.transition_frames, self.slot_width * MAX_TRANSITION_SHARE)

    def slot_bounds(self, index: int) -> Tuple[float, float]:
        """Nominal [start, end) frames of a slot."""
        if not 0 <= index < self.item_count:
            raise IndexError(f"slot {index} out of range 0..{self.item_count - 1}")
        return (index * self.slot_width, (index + 1) * self.slot_width)

    def state(self, frame: float) -> SlotState:
        return slot_state(frame, self)


def slot_state(frame: float, sequence: Sequence) -> SlotState:
    """Slot state of `sequence` at `frame`; defined for every frame."""
    width = sequence.slot_width
    last = sequence.item_count - 1

    current = int(clamp(math.floor(frame / width), 0, last))
    previous = current - 1

    if sequence.offset_mode is SlotOffsetMode.MODULO:
        offset = frame % width
    else:
        offset = frame - current * width

    transition = sequence.effective_transition_frames
    if transition > 0:
        in_slot = progress(offset, 0, transition)
        transitioning = offset < transition and current > 0
    else:
        in_slot = 1.0
        transitioning = False

    hold = clamp((offset - transition) / (width - transition), 0.0, 1.0)

    if transitioning:
        phase = SlotPhase.TRANSITIONING
    elif current == 0 and offset < transition:
        phase = SlotPhase.IDLE
    else:
        phase = SlotPhase.HOLDING

    return SlotState(
        current_index=current,
        previous_index=previous,
        in_slot_progress=in_slot,
        is_transitioning=transitioning,
        hold_progress=hold,
        in_slot_offset=offset,
        phase=phase,
    )


def group_words(text: str, group_size: int = 1) -> List[str]:
    """Split text on whitespace and join every `group_size` words into one item."""
    words = text.split()
    if group_size <= 1:
        return words
    return [' '.join(words[i:i + group_size]) for i in range(0, len(words), group_size)]
