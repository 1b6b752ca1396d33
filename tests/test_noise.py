import math

from motioncore.core.noise import (
    noise, channel_seed, frame_noise, noise_range, fbm, wiggle, stable_id,
)


def test_noise_is_repeatable():
    for seed in [0, 1, 42, -7, 10_000]:
        assert noise(seed) == noise(seed)

def test_noise_range():
    for seed in range(-500, 500):
        value = noise(seed)
        assert 0.0 <= value < 1.0

def test_noise_matches_closed_form():
    x = math.sin(3 * 12.9898 + 78.233) * 43758.5453
    assert noise(3) == x - math.floor(x)

def test_channel_seed():
    assert channel_seed(10, 3) == 73
    assert frame_noise(5, 1) == noise(36)
    assert frame_noise(10, 0) != frame_noise(10, 1)

def test_noise_range_bounds():
    for seed in range(100):
        assert 5.0 <= noise_range(seed, 5.0, 9.0) <= 9.0

def test_fbm_is_normalized():
    for i in range(400):
        assert -1.0 <= fbm(i * 0.173, seed=3, octaves=3) <= 1.0

def test_wiggle_stays_within_amplitude():
    for frame in range(0, 300):
        assert abs(wiggle(frame, 30, amplitude=12.0, seed=2)) <= 12.0 + 1e-9

def test_wiggle_does_not_depend_on_evaluation_order():
    forward = [wiggle(f, 30, seed=1) for f in range(60)]
    backward = [wiggle(f, 30, seed=1) for f in reversed(range(60))]
    assert forward == list(reversed(backward))

def test_stable_id():
    assert stable_id('glow', 'title', 3) == stable_id('glow', 'title', 3)
    assert stable_id('glow', 'title', 3) != stable_id('glow', 'title', 4)
    assert stable_id('glow', 'title').startswith('glow-')
