import pytest

import motioncore.core.easing as easing
from motioncore.core.easing import (
    get_easing, parse_tween, is_monotonic, easing_names,
    ease_linear, ease_in_out_quad, ease_in_cubic, ease_out_bounce,
    ease_in_out, cubic_bezier,
    MONOTONIC_EASINGS, OVERSHOOT_EASINGS,
)
from motioncore.core.errors import ConfigurationError
from motioncore.sampling import sample_easing, is_non_decreasing


def test_named_curves_start_and_end():
    for name in easing_names():
        curve = get_easing(name)
        assert curve(0.0) == pytest.approx(0.0, abs=1e-6), name
        assert curve(1.0) == pytest.approx(1.0, abs=1e-6), name

def test_tween_strings():
    for selector in ['none', 'power1.in', 'power2.out', 'power3.inOut', 'power4.out',
                     'expo.inOut', 'circ.out', 'sine.in', 'bounce.inOut',
                     'back.out(1.7)', 'back.in', 'elastic.out(1, 0.3)', 'elastic.inOut']:
        curve = get_easing(selector)
        assert curve(0.0) == pytest.approx(0.0, abs=1e-6), selector
        assert curve(1.0) == pytest.approx(1.0, abs=1e-6), selector

def test_bounce_out_matches_explicit_curve():
    curve = get_easing('bounce.out')
    for t in [0.1, 0.3, 0.5, 0.8, 0.95]:
        assert curve(t) == pytest.approx(ease_out_bounce(t))

def test_explicit_curves():
    assert ease_in_out_quad(0.25) == 0.125
    assert ease_in_out(ease_in_cubic)(0.5) == 0.5
    assert get_easing('power2.out')(0.5) == pytest.approx(0.875)

def test_monotonic_curves_never_decrease():
    for name in MONOTONIC_EASINGS:
        assert is_non_decreasing(sample_easing(name, 201), tolerance=1e-6), name

def test_overshoot_curves_leave_unit_range():
    assert sample_easing('pop').max() > 1.0
    assert sample_easing('anticipate').min() < 0.0
    assert sample_easing('back.out(1.7)').max() > 1.0
    assert sample_easing('bounce').max() <= 1.0 + 1e-9

def test_monotonic_classification():
    assert is_monotonic('smooth') == True
    assert is_monotonic('appleSwift') == True
    assert is_monotonic('none') == True
    assert is_monotonic('bounce') == False
    assert is_monotonic('bouncy') == False
    assert is_monotonic('elastic') == False
    assert 'bouncy' in OVERSHOOT_EASINGS
    assert 'bounce' not in OVERSHOOT_EASINGS

def test_callable_and_none_pass_through():
    def custom(t):
        return t ** 0.5
    assert get_easing(custom) is custom
    assert get_easing(None) is ease_linear

def test_unknown_easing_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        get_easing('wobble')
    with pytest.raises(ConfigurationError):
        get_easing('power2.sideways')
    with pytest.raises(ConfigurationError):
        get_easing('back.out(abc)')
    with pytest.raises(ConfigurationError):
        get_easing(42)

def test_bezier_linear_control_points():
    curve = cubic_bezier(0.25, 0.25, 0.75, 0.75)
    for t in [0.0, 0.2, 0.5, 0.9, 1.0]:
        assert curve(t) == pytest.approx(t, abs=1e-5)

def test_tween_cache_is_bounded():
    for i in range(easing.TWEEN_CACHE_SIZE + 50):
        parse_tween(f"back.out({1 + i / 1000})")
    assert len(easing._tween_cache) <= easing.TWEEN_CACHE_SIZE
    assert parse_tween('power2.out') is parse_tween('power2.out')

def test_in_out_quad_matches_combinator():
    quad_in_out = get_easing('quad.inOut')
    for t in [0.1, 0.25, 0.5, 0.75, 0.9]:
        assert quad_in_out(t) == pytest.approx(ease_in_out_quad(t))
