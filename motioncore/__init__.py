# motioncore/__init__.py
"""
motioncore - Deterministic, frame-indexed animation timing.

Every function is a pure function of the frame index and static
configuration, so frames can be rendered in any order on any worker.

Core components:
- Easing: named curve catalog and bezier/tween-string resolution
- progress / AnimationWindow: clamped, eased progress of one transition
- noise: seeded closed-form jitter
- Sequence: slot partitioning with transition windows
- Stagger / Chain: per-element delays and back-to-back segments
- CounterSpec: counter interpolation, formatting and digit reveals
- CycleSpec: split-flap character resolution
"""

from .core import (
    ConfigurationError,
    ClockConfig,
    FrameState,
    seconds_to_frames,
    clamp, lerp,
    get_easing,
    is_monotonic,
    cubic_bezier,
    noise,
    channel_seed,
    frame_noise,
    wiggle,
    stable_id,
)

from .time import (
    AnimationWindow,
    progress,
    loop_progress,
    motion_blur,
    Sequence,
    SlotState,
    SlotPhase,
    SlotOffsetMode,
    slot_state,
    group_words,
    Stagger,
    StaggerState,
    Chain,
    ChainSegment,
    ChainState,
    get_duration,
)

from .text import (
    CounterSpec,
    counter_value,
    format_number,
    format_counter,
    digit_reveal,
    DEFAULT_ALPHABET,
    CycleSpec,
    resolve,
    split_flap,
    Typewriter,
)

__version__ = '0.1.0'

__all__ = [
    'ConfigurationError',
    'ClockConfig', 'FrameState', 'seconds_to_frames',
    'clamp', 'lerp',
    'get_easing', 'is_monotonic', 'cubic_bezier',
    'noise', 'channel_seed', 'frame_noise', 'wiggle', 'stable_id',
    'AnimationWindow', 'progress', 'loop_progress', 'motion_blur',
    'Sequence', 'SlotState', 'SlotPhase', 'SlotOffsetMode', 'slot_state', 'group_words',
    'Stagger', 'StaggerState', 'Chain', 'ChainSegment', 'ChainState', 'get_duration',
    'CounterSpec', 'counter_value', 'format_number', 'format_counter', 'digit_reveal',
    'DEFAULT_ALPHABET', 'CycleSpec', 'resolve', 'split_flap', 'Typewriter',
]
