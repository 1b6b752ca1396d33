# motioncore/core/easing.py
"""
Easing library.

Every curve is a pure function mapping normalized time t in [0, 1] to eased
time. Curves are stateless and safe to share between workers.

Monotonic curves: linear, quad, cubic, quart, quint, sine, expo, circ and the
bezier presets whose control points stay inside [0, 1] (snappy, smooth, heavy,
in, out, inOut).
Non-monotonic curves: back and pop/anticipate overshoot outside [0, 1];
elastic oscillates around its end value; bounce stays inside [0, 1] but
falls back between hits.
"""

from __future__ import annotations
from typing import Callable, Dict, Union
import math
import re

from .errors import ConfigurationError

EasingFn = Callable[[float], float]
EasingSelector = Union[str, EasingFn]


# =============================================================================
# Explicit Curves
# =============================================================================

def ease_linear(t: float) -> float:
    return t

def ease_in_quad(t: float) -> float:
    return t * t

def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0*t + 2.0) ** 2 / 2.0

def ease_in_cubic(t: float) -> float:
    return t * t * t

def ease_in_sine(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2.0)

def ease_in_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    return math.pow(2.0, 10.0 * (t - 1.0))

def ease_in_circ(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))

def ease_out_elastic(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return math.pow(2.0, -10.0*t) * math.sin((t*10.0 - 0.75) * (2.0*math.pi/3.0)) + 1.0

def ease_out_bounce(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1.0/d1:
        return n1 * t * t
    elif t < 2.0/d1:
        t -= 1.5/d1
        return n1 * t * t + 0.75
    elif t < 2.5/d1:
        t -= 2.25/d1
        return n1 * t * t + 0.9375
    else:
        t -= 2.625/d1
        return n1 * t * t + 0.984375

def ease_in_bounce(t: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - t)


# =============================================================================
# Combinators and Factories
# =============================================================================

def ease_in(fn: EasingFn) -> EasingFn:
    """Identity wrapper: base curves are written in their 'in' form."""
    return fn

def ease_out(fn: EasingFn) -> EasingFn:
    def _out(t: float) -> float:
        return 1.0 - fn(1.0 - t)
    return _out

def ease_in_out(fn: EasingFn) -> EasingFn:
    def _in_out(t: float) -> float:
        if t < 0.5:
            return fn(t * 2.0) / 2.0
        return 1.0 - fn((1.0 - t) * 2.0) / 2.0
    return _in_out

def poly(n: float) -> EasingFn:
    def _poly(t: float) -> float:
        return math.pow(t, n) if t >= 0.0 else -math.pow(-t, n)
    return _poly

def back(overshoot: float = 1.70158) -> EasingFn:
    """Pulls back below 0 before moving forward ('in' form)."""
    def _back(t: float) -> float:
        return t * t * ((overshoot + 1.0) * t - overshoot)
    return _back

def elastic(amplitude: float = 1.0, period: float = 0.3) -> EasingFn:
    """Oscillating curve ('in' form); amplitude below 1 is raised to 1."""
    amplitude = max(amplitude, 1.0)
    period = period if period > 0 else 0.3
    shift = period / (2.0 * math.pi) * math.asin(1.0 / amplitude)

    def _elastic_out(t: float) -> float:
        if t == 0.0 or t == 1.0:
            return t
        return (amplitude * math.pow(2.0, -10.0 * t)
                * math.sin((t - shift) * (2.0 * math.pi) / period) + 1.0)

    return ease_out(_elastic_out)

def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
    """CSS-style cubic bezier timing curve."""
    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx

    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def sample_x(t: float) -> float:
        return ((ax * t + bx) * t + cx) * t

    def sample_y(t: float) -> float:
        return ((ay * t + by) * t + cy) * t

    def sample_dx(t: float) -> float:
        return (3.0 * ax * t + 2.0 * bx) * t + cx

    def solve_x(x: float) -> float:
        # Newton first, bisection when the slope flattens out.
        t = x
        for _ in range(8):
            error = sample_x(t) - x
            if abs(error) < 1e-6:
                return t
            slope = sample_dx(t)
            if abs(slope) < 1e-6:
                break
            t -= error / slope

        lo, hi = 0.0, 1.0
        t = min(max(x, lo), hi)
        for _ in range(64):
            estimate = sample_x(t)
            if abs(estimate - x) < 1e-9:
                break
            if x > estimate:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2.0
        return t

    def _bezier(t: float) -> float:
        return sample_y(solve_x(t))

    return _bezier


# =============================================================================
# Named Catalogs
# =============================================================================

DESIGN_EASINGS: Dict[str, EasingFn] = {
    'snappy': cubic_bezier(0.2, 0.0, 0.0, 1.0),
    'smooth': cubic_bezier(0.25, 0.1, 0.25, 1.0),
    'bounce': ease_out_bounce,
    'elastic': ease_out_elastic,
    'heavy': cubic_bezier(0.7, 0.0, 0.3, 1.0),
    'pop': cubic_bezier(0.34, 1.56, 0.64, 1.0),
    'linear': ease_linear,
    'in': cubic_bezier(0.4, 0.0, 1.0, 1.0),
    'out': cubic_bezier(0.0, 0.0, 0.2, 1.0),
    'inOut': cubic_bezier(0.4, 0.0, 0.2, 1.0),
    'anticipate': cubic_bezier(0.36, 0.0, 0.66, -0.56),
}

_DESIGN_MONOTONIC = frozenset({'snappy', 'smooth', 'heavy', 'linear', 'in', 'out', 'inOut'})

# Preset names mapped onto tween-style strings.
PRESET_ALIASES: Dict[str, str] = {
    'appleSwift': 'power2.out',
    'appleBounce': 'back.out(1.4)',
    'appleSnap': 'expo.out',
    'appleGentle': 'power1.inOut',
    'materialStandard': 'power2.inOut',
    'materialDecelerate': 'circ.out',
    'materialAccelerate': 'power2.in',
    'materialSharp': 'power4.inOut',
    'bouncy': 'back.out(1.7)',
    'bouncyStrong': 'back.out(2.5)',
    'elasticGentle': 'elastic.out(0.8, 0.4)',
    'rubbery': 'elastic.out(0.6, 0.5)',
    'dramaticIn': 'power4.in',
    'dramaticOut': 'power4.out',
    'dramaticInOut': 'power4.inOut',
    'slowReveal': 'expo.out',
    'epicIn': 'power3.in',
    'epicOut': 'power3.out',
    'smoothOut': 'power2.out',
    'gentle': 'sine.inOut',
    'gentleOut': 'sine.out',
    'natural': 'expo.out',
    'soft': 'power1.out',
    'quick': 'power2.out',
    'instant': 'power4.out',
    'responsive': 'expo.out',
}

_BASE_CURVES: Dict[str, EasingFn] = {
    'power0': ease_linear,
    'power1': ease_in_quad,
    'power2': ease_in_cubic,
    'power3': poly(4),
    'power4': poly(5),
    'quad': ease_in_quad,
    'cubic': ease_in_cubic,
    'quart': poly(4),
    'quint': poly(5),
    'expo': ease_in_expo,
    'circ': ease_in_circ,
    'sine': ease_in_sine,
    'bounce': ease_in_bounce,
}

_MONOTONIC_TYPES = frozenset(set(_BASE_CURVES) - {'bounce'})
_OVERSHOOT_TYPES = frozenset({'back', 'elastic'})

_DIRECTIONS = {
    'in': ease_in,
    'out': ease_out,
    'inOut': ease_in_out,
}

_TWEEN_PATTERN = re.compile(r'^(\w+)\.(in|out|inOut)(?:\(([^)]*)\))?$')

MONOTONIC_EASINGS = frozenset(
    _DESIGN_MONOTONIC
    | {'none'}
    | {name for name, tween in PRESET_ALIASES.items()
       if tween.split('.')[0] in _MONOTONIC_TYPES}
)
OVERSHOOT_EASINGS = frozenset(
    {'pop', 'anticipate', 'elastic'}
    | {name for name, tween in PRESET_ALIASES.items()
       if tween.split('.')[0] in _OVERSHOOT_TYPES}
)


def _parse_params(params: str):
    try:
        return [float(p) for p in params.split(',') if p.strip()]
    except ValueError:
        raise ConfigurationError(f"Invalid easing parameters: ({params})") from None


# Parsed selectors, oldest evicted first once full.
TWEEN_CACHE_SIZE = 256
_tween_cache: Dict[str, EasingFn] = {}


def parse_tween(selector: str) -> EasingFn:
    """
    Parse a tween-style string such as "power2.out", "back.out(1.7)" or
    "elastic.out(1, 0.3)" into a curve.
    """
    if selector in _tween_cache:
        return _tween_cache[selector]
    curve = _build_tween(selector)
    if len(_tween_cache) >= TWEEN_CACHE_SIZE:
        del _tween_cache[next(iter(_tween_cache))]
    _tween_cache[selector] = curve
    return curve


def _build_tween(selector: str) -> EasingFn:
    if selector == 'none':
        return ease_linear

    match = _TWEEN_PATTERN.match(selector)
    if not match:
        raise ConfigurationError(f"Unknown easing: {selector!r}")

    kind, direction, params = match.groups()
    wrap = _DIRECTIONS[direction]
    values = _parse_params(params) if params else []

    if kind == 'power0':
        return ease_linear
    if kind == 'back':
        return wrap(back(values[0] if values else 1.70158))
    if kind == 'elastic':
        amplitude = values[0] if len(values) > 0 else 1.0
        period = values[1] if len(values) > 1 else 0.3
        return wrap(elastic(amplitude, period))
    if kind in _BASE_CURVES:
        return wrap(_BASE_CURVES[kind])

    raise ConfigurationError(f"Unknown easing type {kind!r} in {selector!r}")


def get_easing(selector: EasingSelector = None) -> EasingFn:
    """
    Resolve an easing selector.

    Callables pass through untouched; names resolve against the design
    catalog, then the preset aliases, then the tween-string grammar.
    None means linear.
    """
    if selector is None:
        return ease_linear
    if callable(selector):
        return selector
    if not isinstance(selector, str):
        raise ConfigurationError(f"Easing must be a name or a callable, got {type(selector)}")
    if selector in DESIGN_EASINGS:
        return DESIGN_EASINGS[selector]
    if selector in PRESET_ALIASES:
        return parse_tween(PRESET_ALIASES[selector])
    return parse_tween(selector)


def is_monotonic(name: str) -> bool:
    """Whether the named curve never decreases over [0, 1]."""
    if name in DESIGN_EASINGS:
        return name in _DESIGN_MONOTONIC
    tween = PRESET_ALIASES.get(name, name)
    parse_tween(tween)
    if tween == 'none':
        return True
    return tween.split('.')[0] in _MONOTONIC_TYPES


def easing_names():
    """All names accepted by get_easing besides raw tween strings."""
    return sorted(set(DESIGN_EASINGS) | set(PRESET_ALIASES))
