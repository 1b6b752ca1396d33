# motioncore/text/__init__.py
"""Text module - counters, split-flap cells and typewriter reveals."""

from .counter import (
    CounterSpec,
    counter_value,
    clamp_display,
    format_number,
    format_counter,
    counter_text,
    digit_reveal,
    counter_digit_reveal,
)

from .flip import (
    DEFAULT_ALPHABET,
    CycleSpec,
    resolve,
    flap_window,
    split_flap,
    split_flap_seconds,
)

from .typewriter import Typewriter

__all__ = [
    'CounterSpec',
    'counter_value',
    'clamp_display',
    'format_number',
    'format_counter',
    'counter_text',
    'digit_reveal',
    'counter_digit_reveal',
    'DEFAULT_ALPHABET',
    'CycleSpec',
    'resolve',
    'flap_window',
    'split_flap',
    'split_flap_seconds',
    'Typewriter',
]
