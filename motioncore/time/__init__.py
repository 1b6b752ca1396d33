# motioncore/time/__init__.py
"""Time module - progress windows, sequences, staggers and chains."""

from .window import (
    AnimationWindow,
    progress,
    loop_progress,
    motion_blur,
)

from .sequence import (
    Sequence,
    SlotState,
    SlotPhase,
    SlotOffsetMode,
    slot_state,
    group_words,
)

from .stagger import (
    Stagger,
    StaggerState,
    Chain,
    ChainSegment,
    ChainState,
)

from .presets import (
    DURATIONS,
    get_duration,
    duration_frames,
)

__all__ = [
    'AnimationWindow',
    'progress',
    'loop_progress',
    'motion_blur',
    'Sequence',
    'SlotState',
    'SlotPhase',
    'SlotOffsetMode',
    'slot_state',
    'group_words',
    'Stagger',
    'StaggerState',
    'Chain',
    'ChainSegment',
    'ChainState',
    'DURATIONS',
    'get_duration',
    'duration_frames',
]
