"""The game window: loading assets, running the frame loop and drawing."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import pygame

from thomaslate.character import Bob, Thomas
from thomaslate.geometry import Rect, Vector2
from thomaslate.hud import Hud
from thomaslate.level import LevelManager
from thomaslate.particles import ParticleSystem
from thomaslate.sound import SoundManager
from thomaslate.textures import TextureHolder
from thomaslate.world import (
    KEY_QUIT,
    KEY_START,
    KEY_SWITCH_CHARACTER,
    KEY_SWITCH_SCREEN,
    World,
)

TITLE = "Thomas was late"
WHITE = (255, 255, 255)
PARTICLE_COUNT = 1000
FALLBACK_RESOLUTION = (1024, 768)
FONT_FILE = "fonts/Roboto-Light.ttf"

LEFT_VIEWPORT = Rect(0.001, 0.001, 0.498, 0.998)
RIGHT_VIEWPORT = Rect(0.5, 0.001, 0.499, 0.998)

_KEY_CODES = {
    "escape": pygame.K_ESCAPE,
    "return": pygame.K_RETURN,
    "q": pygame.K_q,
    "e": pygame.K_e,
    "w": pygame.K_w,
    "a": pygame.K_a,
    "d": pygame.K_d,
    "up": pygame.K_UP,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
}
_EVENT_KEYS = (KEY_QUIT, KEY_START, KEY_SWITCH_CHARACTER, KEY_SWITCH_SCREEN)

Layer = Callable[[pygame.Surface, tuple[float, float]], None]


@dataclass
class _View:
    """A region of the world, shown in a fractional area of the window."""

    center: Vector2 = field(default_factory=lambda: Vector2(500, 500))
    size: Vector2 = field(default_factory=lambda: Vector2(1000, 1000))
    viewport: Rect = field(default_factory=lambda: Rect(0, 0, 1, 1))

    def offset(self) -> tuple[float, float]:
        return (self.size.x / 2 - self.center.x, self.size.y / 2 - self.center.y)

    def pixel_rect(self, resolution: tuple[int, int]) -> pygame.Rect:
        width, height = resolution
        return pygame.Rect(
            round(self.viewport.left * width),
            round(self.viewport.top * height),
            round(self.viewport.width * width),
            round(self.viewport.height * height),
        )


class _SilentSound:
    """Stands in for a sound that could not be loaded: keeps its state, makes no noise."""

    def __init__(self) -> None:
        self.playing = False
        self.loops = 0
        self.volume = 1.0

    def play(self, loops: int = 0) -> None:
        self.playing = True
        self.loops = loops

    def stop(self) -> None:
        self.playing = False
        self.loops = 0

    def set_volume(self, value: float) -> None:
        self.volume = min(1.0, max(0.0, float(value)))


def _desktop_resolution() -> tuple[int, int]:
    sizes = pygame.display.get_desktop_sizes()
    width, height = sizes[0] if sizes else (0, 0)
    if width <= 0 or height <= 0:
        return FALLBACK_RESOLUTION
    return (width, height)


class Engine:
    """Owns the window and assets and drives the world once per frame."""

    def __init__(self, asset_dir: str | PathLike[str] = ".") -> None:
        self.asset_dir = Path(asset_dir)
        pygame.init()
        self.resolution = _desktop_resolution()
        self.screen = pygame.display.set_mode(self.resolution, pygame.FULLSCREEN)
        pygame.display.set_caption(TITLE)
        try:
            pygame.mixer.init()
            self._audio = True
        except pygame.error:
            self._audio = False

        self.textures = TextureHolder(self._load_image)
        self.background = self.textures.get_texture("graphics/background.png")
        self.tiles = self.textures.get_texture("graphics/tiles_sheet.png")
        self.thomas_image = self.textures.get_texture("graphics/thomas.png")
        self.bob_image = self.textures.get_texture("graphics/bob.png")

        self.particles = ParticleSystem(PARTICLE_COUNT)
        self.sounds = SoundManager(self._load_sound)
        self.world = World(
            LevelManager(self.asset_dir / "levels"),
            self.sounds,
            Thomas(Vector2(*self.thomas_image.get_size())),
            Bob(Vector2(*self.bob_image.get_size())),
            self.particles,
        )
        self.hud = Hud()
        self.game_time_total = 0.0

        self.main_view = _View(size=Vector2(*self.resolution))
        self.left_view = _View(viewport=LEFT_VIEWPORT)
        self.right_view = _View(viewport=RIGHT_VIEWPORT)
        self.bg_main_view = _View()
        self.bg_left_view = _View(viewport=LEFT_VIEWPORT)
        self.bg_right_view = _View(viewport=RIGHT_VIEWPORT)

        self._fonts: dict[int, pygame.font.Font] = {}
        self._level_grid: Any = None
        self._level_surface: pygame.Surface | None = None

    def _load_image(self, filename: str) -> pygame.Surface:
        return pygame.image.load(str(self.asset_dir / filename)).convert_alpha()

    def _load_sound(self, filename: str) -> Any:
        if not self._audio:
            return _SilentSound()
        try:
            return pygame.mixer.Sound(str(self.asset_dir / filename))
        except (pygame.error, FileNotFoundError):
            return _SilentSound()

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(str(self.asset_dir / FONT_FILE), size)
            except (FileNotFoundError, OSError):
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _input(self) -> None:
        events = pygame.event.get()
        pressed = pygame.key.get_pressed()
        held = {name for name, code in _KEY_CODES.items() if pressed[code]}
        for event in events:
            if event.type == pygame.QUIT:
                self.world.running = False
            elif event.type == pygame.KEYDOWN:
                for key in _EVENT_KEYS:
                    if key in held:
                        self.world.handle_key(key)
        self.world.handle_input(held)

    def run(self) -> None:
        """Run frames until the world stops."""
        clock = pygame.time.Clock()
        while self.world.running:
            dt = clock.tick() / 1000.0
            self.game_time_total += dt
            self._input()
            self.world.update(dt)
            self.draw()

    def _level_layer(self) -> Layer | None:
        grid = self.world.grid
        if not grid:
            return None
        if grid is not self._level_grid:
            manager = self.world.level_manager
            tile = manager.tile_size
            columns, rows = manager.level_size
            surface = pygame.Surface(
                (int(columns * tile), int(rows * tile)), pygame.SRCALPHA
            )
            for quad in manager.quads:
                position, tex = quad[0]
                area = pygame.Rect(int(tex.x), int(tex.y), int(tile), int(tile))
                surface.blit(self.tiles, (position.x, position.y), area)
            self._level_grid = grid
            self._level_surface = surface
        level_surface = self._level_surface

        def draw(target: pygame.Surface, offset: tuple[float, float]) -> None:
            target.blit(level_surface, offset)

        return draw

    @staticmethod
    def _image_layer(image: pygame.Surface, where: Vector2) -> Layer:
        def draw(target: pygame.Surface, offset: tuple[float, float]) -> None:
            target.blit(image, (where.x + offset[0], where.y + offset[1]))

        return draw

    def _particle_layer(self) -> Layer | None:
        if not self.particles.running:
            return None
        color = self.particles.color

        def draw(target: pygame.Surface, offset: tuple[float, float]) -> None:
            bounds = target.get_rect()
            for point in self.particles.positions:
                spot = (int(point.x + offset[0]), int(point.y + offset[1]))
                if bounds.collidepoint(spot):
                    target.set_at(spot, color)

        return draw

    def _render(self, view: _View, layers: Iterable[Layer | None]) -> None:
        surface = pygame.Surface((int(view.size.x), int(view.size.y)), pygame.SRCALPHA)
        offset = view.offset()
        for layer in layers:
            if layer is not None:
                layer(surface, offset)
        target = view.pixel_rect(self.resolution)
        if target.width <= 0 or target.height <= 0:
            return
        self.screen.blit(pygame.transform.scale(surface, target.size), target.topleft)

    def _draw_hud(self) -> None:
        self.hud.set_time(self.world.time_text)
        self.hud.set_level(self.world.level_text)
        items = [self.hud.level, self.hud.time]
        if not self.world.playing:
            items.append(self.hud.message)
        for item in items:
            rendered = self._font(item.size).render(item.text, True, self.hud.color)
            x, y = item.position(self.resolution)
            if item.centered:
                rect = rendered.get_rect(center=(x, y))
            else:
                rect = rendered.get_rect(topleft=(x, y))
            self.screen.blit(rendered, rect)

    def draw(self) -> None:
        """Draw one frame: background, level, characters, particles and HUD."""
        self.screen.fill(WHITE)
        world = self.world
        background = self._image_layer(self.background, Vector2())
        level = self._level_layer()
        thomas = self._image_layer(self.thomas_image, world.thomas.sprite_location)
        bob = self._image_layer(self.bob_image, world.bob.sprite_location)
        particles = self._particle_layer()

        if not world.split_screen:
            self.main_view.center = world.main_center
            self._render(self.bg_main_view, [background])
            self._render(self.main_view, [level, thomas, bob, particles])
        else:
            self.left_view.center = world.left_center
            self.right_view.center = world.right_center
            self._render(self.bg_left_view, [background])
            self._render(self.left_view, [level, bob, thomas, particles])
            self._render(self.bg_right_view, [background])
            self._render(self.right_view, [level, thomas, bob, particles])

        self._draw_hud()
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Start the game with assets from the given directory."""
    parser = argparse.ArgumentParser(prog="thomaslate", description=TITLE)
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding graphics/, fonts/, sound/ and levels/",
    )
    args = parser.parse_args(argv)
    try:
        engine = Engine(args.assets)
        engine.run()
    finally:
        pygame.quit()
    return 0