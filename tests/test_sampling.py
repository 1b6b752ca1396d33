import numpy as np

from motioncore.sampling import evaluate, sample_easing, is_non_decreasing
from motioncore.time.sequence import Sequence


def test_evaluation_order_does_not_matter():
    seq = Sequence(5, 200, 12)
    frames = np.arange(-10, 220)
    shuffled = np.random.default_rng(0).permutation(frames)

    def fn(f):
        return seq.state(f).in_slot_progress

    in_order = evaluate(fn, frames)
    out_of_order = evaluate(fn, shuffled)
    lookup = dict(zip(shuffled.tolist(), out_of_order.tolist()))
    assert np.array_equal(in_order, np.array([lookup[f] for f in frames.tolist()]))

def test_sample_linear():
    assert np.allclose(sample_easing('linear', 11), np.linspace(0.0, 1.0, 11))

def test_sample_monotonic_curves():
    assert is_non_decreasing(sample_easing('power3.inOut')) == True
    assert is_non_decreasing(sample_easing('smooth')) == True
    assert is_non_decreasing(sample_easing('back.out(1.7)')) == False

def test_is_non_decreasing():
    assert is_non_decreasing(np.array([0.0, 0.5, 0.5, 1.0])) == True
    assert is_non_decreasing(np.array([0.0, 0.6, 0.5])) == False
    assert is_non_decreasing(np.array([1.0])) == True
