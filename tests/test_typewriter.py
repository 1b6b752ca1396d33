import pytest

from motioncore.core.errors import ConfigurationError
from motioncore.text.typewriter import Typewriter


def test_visible_count():
    tw = Typewriter("hello", delay_frames=10, frames_per_char=2)
    assert tw.visible_count(0) == 0
    assert tw.visible_count(10) == 0
    assert tw.visible_count(11) == 0
    assert tw.visible_count(12) == 1
    assert tw.visible_count(19) == 4
    assert tw.visible_count(20) == 5
    assert tw.visible_count(1000) == 5
    assert tw.visible_text(14) == "he"
    assert tw.is_complete(20) == True

def test_cursor_blink():
    tw = Typewriter("hello", cursor_blink_frames=15)
    assert tw.cursor_visible(0) == True
    assert tw.cursor_visible(15) == False
    assert tw.cursor_visible(30) == True
    assert tw.cursor_visible(1000, hide_on_complete=True) == False

def test_render():
    tw = Typewriter("hello", delay_frames=10, frames_per_char=2, cursor_blink_frames=15)
    assert tw.render(14) == "he|"
    assert tw.render(16) == "hel"

def test_from_seconds():
    tw = Typewriter.from_seconds("abc", 30, speed=0.1, delay=1.0)
    assert tw.frames_per_char == 3
    assert tw.delay_frames == 30
    assert tw.typing_frames == 9

def test_validation():
    with pytest.raises(ConfigurationError):
        Typewriter("abc", frames_per_char=0)
    with pytest.raises(ConfigurationError):
        Typewriter("abc", delay_frames=-1)
