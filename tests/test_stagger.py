import pytest

from motioncore.core.errors import ConfigurationError
from motioncore.time.stagger import Stagger, Chain, ChainSegment
from motioncore.time.presets import get_duration, duration_frames


def test_stagger_before_start():
    stagger = Stagger(3, delay_frames=5, duration_frames=10, easing='linear')
    state = stagger.state(0)
    assert state.raw_progress == (0.0, 0.0, 0.0)
    assert state.active_index == -1
    assert state.is_complete == False

def test_stagger_in_flight():
    stagger = Stagger(3, delay_frames=5, duration_frames=10, easing='linear')
    state = stagger.state(7)
    assert state.raw_progress == pytest.approx((0.7, 0.2, 0.0))
    assert state.active_index == 0
    assert state.is_complete == False

def test_stagger_complete():
    stagger = Stagger(3, delay_frames=5, duration_frames=10, easing='linear')
    assert stagger.end_frame == 20
    state = stagger.state(25)
    assert state.progress == (1.0, 1.0, 1.0)
    assert state.active_index == -1
    assert state.is_complete == True

def test_stagger_item_progress_is_eased():
    stagger = Stagger(2, delay_frames=4, duration_frames=8)
    assert stagger.item_progress(100, 1) == 1.0
    assert stagger.item_progress(8, 1) == pytest.approx(0.875)
    assert stagger.raw_item_progress(8, 1) == 0.5

def test_stagger_from_seconds():
    stagger = Stagger.from_seconds(4, 30, stagger=0.1, duration=0.5, delay=1.0)
    assert stagger.delay_frames == 3
    assert stagger.start_frame == 30
    assert stagger.duration_frames == 15

def test_stagger_validation():
    with pytest.raises(ConfigurationError):
        Stagger(0)
    with pytest.raises(ConfigurationError):
        Stagger(3, duration_frames=0)
    with pytest.raises(ConfigurationError):
        Stagger(3, delay_frames=-2)


def _enter_hold_exit():
    return Chain([
        ChainSegment(10, 'enter'),
        ChainSegment(20, 'hold'),
        ChainSegment(10, 'exit'),
    ], start_frame=5)

def test_chain_boundaries():
    chain = _enter_hold_exit()
    assert chain.starts == (5, 15, 35)
    assert chain.total_frames == 40
    assert chain.end_frame == 45

def test_chain_state_walk():
    chain = _enter_hold_exit()

    state = chain.state(0)
    assert state.active_index == 0
    assert state.segment_progress == 0.0
    assert state.progress == 0.0

    state = chain.state(10)
    assert state.active_label == 'enter'
    assert state.segment_progress == 0.5

    state = chain.state(15)
    assert state.active_label == 'hold'
    assert state.segment_progress == 0.0

    assert chain.state(25).progress == 0.5
    assert chain.state(35).active_label == 'exit'

    state = chain.state(45)
    assert state.is_complete == True
    assert state.active_index == 2
    assert state.segment_progress == 1.0
    assert state.progress == 1.0

def test_chain_segment_lookup():
    chain = _enter_hold_exit()
    assert chain.segment_progress(25, 'hold') == 0.5
    assert chain.segment_progress(25, 1) == 0.5
    assert chain.segment_progress(25, 'enter') == 1.0
    assert chain.segment_progress(25, 'missing') == 0.0
    assert chain.segment_progress(25, 7) == 0.0

def test_chain_segment_easing():
    chain = Chain([ChainSegment(10, 'in', 'power2.out')])
    assert chain.state(5).segment_progress == pytest.approx(0.875)

def test_chain_validation():
    with pytest.raises(ConfigurationError):
        Chain([])
    with pytest.raises(ConfigurationError):
        ChainSegment(0)

def test_duration_presets():
    assert get_duration('normal') == 0.3
    assert get_duration(1.5) == 1.5
    assert duration_frames('dramatic', 30) == 30
    with pytest.raises(ConfigurationError):
        get_duration('forever')
    with pytest.raises(ConfigurationError):
        get_duration(-1.0)
