# motioncore/core/__init__.py
"""Core module - clock, easing, noise and scalar helpers."""

from .errors import ConfigurationError

from .frame import (
    ClockConfig,
    FrameState,
    seconds_to_frames,
)

from .scalar import (
    clamp, lerp, fract, round_half_up,
)

from .easing import (
    EasingFn,
    ease_linear, ease_in_quad, ease_in_out_quad, ease_in_cubic,
    ease_in_sine, ease_in_expo, ease_in_circ,
    ease_out_elastic, ease_in_bounce, ease_out_bounce,
    ease_in, ease_out, ease_in_out,
    poly, back, elastic, cubic_bezier,
    DESIGN_EASINGS, PRESET_ALIASES, MONOTONIC_EASINGS, OVERSHOOT_EASINGS,
    get_easing, parse_tween, is_monotonic, easing_names,
)

from .noise import (
    noise,
    channel_seed,
    frame_noise,
    noise_range,
    fbm,
    wiggle,
    stable_id,
)

__all__ = [
    'ConfigurationError',
    'ClockConfig', 'FrameState', 'seconds_to_frames',
    'clamp', 'lerp', 'fract', 'round_half_up',
    'EasingFn',
    'ease_linear', 'ease_in_quad', 'ease_in_out_quad', 'ease_in_cubic',
    'ease_in_sine', 'ease_in_expo', 'ease_in_circ',
    'ease_out_elastic', 'ease_in_bounce', 'ease_out_bounce',
    'ease_in', 'ease_out', 'ease_in_out',
    'poly', 'back', 'elastic', 'cubic_bezier',
    'DESIGN_EASINGS', 'PRESET_ALIASES', 'MONOTONIC_EASINGS', 'OVERSHOOT_EASINGS',
    'get_easing', 'parse_tween', 'is_monotonic', 'easing_names',
    'noise', 'channel_seed', 'frame_noise', 'noise_range', 'fbm', 'wiggle', 'stable_id',
]
