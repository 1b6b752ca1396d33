# motioncore/text/counter.py
"""
Counter interpolation and number formatting.

value  -> numeric position between `from_value` and `to_value` at a frame
format -> grouped / abbreviated text for a value
reveal -> per-digit staggered roll from one formatted string to another
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from ..core.errors import ConfigurationError
from ..core.scalar import clamp, lerp, round_half_up
from ..time.window import AnimationWindow, progress

ABBREVIATION_SUFFIXES = ('', 'K', 'M', 'B', 'T')
DIGITS = '0123456789'


@dataclass(frozen=True)
class CounterSpec:
    from_value: float
    to_value: float
    decimals: int = 0
    group_separator: str = ','
    decimal_separator: str = '.'
    abbreviate: bool = False
    prefix: str = ''
    suffix: str = ''

    def __post_init__(self):
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ConfigurationError(f"decimals must be an integer >= 0, got {self.decimals!r}")
        if not isinstance(self.group_separator, str) or not isinstance(self.decimal_separator, str):
            raise ConfigurationError("separators must be strings")
        for value in (self.from_value, self.to_value):
            if not math.isfinite(value):
                raise ConfigurationError(f"counter endpoints must be finite, got {value!r}")

    @property
    def low(self) -> float:
        return min(self.from_value, self.to_value)

    @property
    def high(self) -> float:
        return max(self.from_value, self.to_value)


def counter_value(frame: float, spec: CounterSpec, window: AnimationWindow) -> float:
    """
    Interpolated value at `frame`. Saturates exactly to the endpoints outside
    the window; overshooting curves may pass `to_value` inside it.
    """
    if window.clamp_left and frame <= window.delay_frames:
        return spec.from_value
    if window.clamp_right and frame >= window.end_frame:
        return spec.to_value
    return lerp(spec.from_value, spec.to_value, window.progress(frame))


def clamp_display(value: float, spec: CounterSpec) -> float:
    return clamp(value, spec.low, spec.high)


def _fixed(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if text.startswith('-') and not text.strip('-0.'):
        text = text[1:]
    return text


def _group(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    for i in range(head, len(digits), 3):
        groups.append(digits[i:i + 3])
    return separator.join(groups)


def format_number(value: float, spec: CounterSpec) -> str:
    """Format a value with grouping, decimals and optional K/M/B/T suffix."""
    if spec.abbreviate and abs(value) >= 1000:
        tier = int(math.floor(math.log10(abs(value)) / 3))
        tier = min(tier, len(ABBREVIATION_SUFFIXES) - 1)
        scaled = _fixed(value / math.pow(1000, tier), spec.decimals)
        return scaled.replace('.', spec.decimal_separator) + ABBREVIATION_SUFFIXES[tier]

    fixed = _fixed(value, spec.decimals)
    sign = ''
    if fixed.startswith('-'):
        sign, fixed = '-', fixed[1:]
    int_part, _, dec_part = fixed.partition('.')

    text = sign + _group(int_part, spec.group_separator)
    if dec_part:
        text += spec.decimal_separator + dec_part
    return text


def format_counter(value: float, spec: CounterSpec) -> str:
    return f"{spec.prefix}{format_number(value, spec)}{spec.suffix}"


def counter_text(frame: float, spec: CounterSpec, window: AnimationWindow,
                 clamp_to_range: bool = False) -> str:
    value = counter_value(frame, spec, window)
    if clamp_to_range:
        value = clamp_display(value, spec)
    return format_counter(value, spec)


def digit_reveal(frame: float, from_str: str, to_str: str, window: AnimationWindow,
                 stagger_frames: int, pad_char: str = '0') -> str:
    """
    Roll each digit of `from_str` toward `to_str` on its own window,
    starting `stagger_frames` later per digit. Non-digit characters of the
    target (separators, decimal point) are shown as-is and take no stagger slot.
    """
    width = max(len(from_str), len(to_str))
    start = from_str.rjust(width, pad_char)
    target = to_str.rjust(width, pad_char)

    out = []
    digit_index = 0
    for a, b in zip(start, target):
        if b not in DIGITS:
            out.append(b)
            continue
        p = progress(frame, window.delay_frames + digit_index * stagger_frames,
                     window.duration_frames, window.curve, window.clamp_left, window.clamp_right)
        origin = int(a) if a in DIGITS else 0
        digit = round_half_up(lerp(origin, int(b), p))
        out.append(str(int(clamp(digit, 0, 9))))
        digit_index += 1
    return ''.join(out)


def counter_digit_reveal(frame: float, spec: CounterSpec, window: AnimationWindow,
                         stagger_frames: int) -> str:
    body = digit_reveal(frame, format_number(spec.from_value, spec),
                        format_number(spec.to_value, spec), window, stagger_frames)
    return f"{spec.prefix}{body}{spec.suffix}"
