import pytest

from thomaslate.hud import Hud


@pytest.fixture
def hud():
    return Hud()


def test_initial_texts(hud):
    assert hud.message.text == "Press Enter when ready!"
    assert hud.time.text == "------"
    assert hud.level.text == "1"


def test_text_sizes(hud):
    assert hud.message.size == 100
    assert hud.time.size == 75
    assert hud.level.size == 75


def test_set_level_replaces_text(hud):
    hud.set_level("Level:3")
    assert hud.level.text == "Level:3"
    assert hud.time.text == "------"


def test_set_time_replaces_text(hud):
    hud.set_time("27")
    assert hud.time.text == "27"
    assert hud.level.text == "1"


def test_message_is_centred(hud):
    resolution = (800, 600)
    assert hud.message.position(resolution) == (800 / 2, 600 / 2)


def test_time_is_anchored_to_right_edge(hud):
    resolution = (1920, 1080)
    assert hud.time.position(resolution) == (resolution[0] - 150, 0)


def test_level_is_at_fixed_left_position(hud):
    assert hud.level.position((1920, 1080)) == (25, 0)
    assert hud.level.position((640, 480)) == (25, 0)