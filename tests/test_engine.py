import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

from collections import defaultdict  # noqa: E402
from unittest import mock  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from thomaslate.engine import Engine, main  # noqa: E402
from thomaslate.geometry import Vector2  # noqa: E402

RED = (255, 0, 0)
WHITE = (255, 255, 255)
THOMAS_SIZE = (10, 20)
BOB_SIZE = (10, 10)


@pytest.fixture
def assets(tmp_path):
    graphics = tmp_path / "graphics"
    graphics.mkdir()
    background = pygame.Surface((1000, 1000))
    background.fill(RED)
    pygame.image.save(background, str(graphics / "background.png"))
    tiles = pygame.Surface((50, 250), pygame.SRCALPHA)
    tiles.fill((0, 0, 0, 0))
    pygame.image.save(tiles, str(graphics / "tiles_sheet.png"))
    thomas = pygame.Surface(THOMAS_SIZE)
    thomas.fill((0, 0, 255))
    pygame.image.save(thomas, str(graphics / "thomas.png"))
    bob = pygame.Surface(BOB_SIZE)
    bob.fill((0, 255, 0))
    pygame.image.save(bob, str(graphics / "bob.png"))
    levels = tmp_path / "levels"
    levels.mkdir()
    (levels / "level1.txt").write_text("000\n000\n111\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def engine(assets):
    built = Engine(assets)
    yield built
    pygame.quit()


def _no_keys():
    return defaultdict(bool)


def test_characters_take_their_texture_sizes(engine):
    assert engine.world.thomas.size == Vector2(*THOMAS_SIZE)
    assert engine.world.bob.size == Vector2(*BOB_SIZE)


def test_particle_system_has_a_thousand_particles(engine):
    assert len(engine.particles.particles) == 1000


def test_draw_full_screen_shows_background(engine):
    engine.world.update(0.0)
    engine.draw()
    assert tuple(engine.screen.get_at((0, 0)))[:3] == RED


def test_draw_split_screen_leaves_border_clear(engine):
    engine.world.update(0.0)
    engine.world.split_screen = True
    engine.draw()
    assert tuple(engine.screen.get_at((0, 0)))[:3] == WHITE


def test_draw_updates_hud_from_world(engine):
    engine.world.time_text = "12"
    engine.world.level_text = "Level:1"
    engine.draw()
    assert engine.hud.time.text == "12"
    assert engine.hud.level.text == "Level:1"


def test_run_stops_on_quit_event(engine):
    events = [[pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events), mock.patch(
        "pygame.key.get_pressed", side_effect=_no_keys
    ):
        engine.run()
    assert engine.world.running is False
    assert engine.world.level_manager.current_level == 1


def test_run_stops_on_escape(engine):
    held = defaultdict(bool, {pygame.K_ESCAPE: True})
    events = [[pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]]
    with mock.patch("pygame.event.get", side_effect=events), mock.patch(
        "pygame.key.get_pressed", return_value=held
    ):
        engine.run()
    assert engine.world.running is False
    assert engine.game_time_total >= 0.0


def test_q_switches_character(engine):
    held = defaultdict(bool, {pygame.K_q: True})
    events = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=events), mock.patch(
        "pygame.key.get_pressed", return_value=held
    ):
        engine.run()
    assert engine.world.character1 is False


def test_main_returns_zero(assets):
    with mock.patch(
        "pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]
    ), mock.patch("pygame.key.get_pressed", side_effect=_no_keys):
        assert main(["--assets", str(assets)]) == 0


def test_missing_texture_raises(tmp_path):
    try:
        with pytest.raises(FileNotFoundError):
            Engine(tmp_path)
    finally:
        pygame.quit()