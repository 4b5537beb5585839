"""Game rules for one level: collisions, timing, input and what to hear and show."""

from __future__ import annotations

from collections.abc import Container

from thomaslate.character import PlayableCharacter
from thomaslate.geometry import Rect, Vector2
from thomaslate.level import TILE_SIZE, Grid, LevelManager, Tile
from thomaslate.particles import ParticleSystem
from thomaslate.sound import SoundManager

GRAVITY = 300.0
HUD_UPDATE_FRAMES = 10
FIRE_HEARING_HALF_SIZE = 250.0
EMITTER_SPACING_TILES = 6

KEY_QUIT = "escape"
KEY_START = "return"
KEY_SWITCH_CHARACTER = "q"
KEY_SWITCH_SCREEN = "e"


def populate_emitters(grid: Grid, tile_size: float = TILE_SIZE) -> list[Vector2]:
    """Return positions of fire tiles to play fire sounds from.

    Tiles are scanned column by column; a fire tile that overlaps the
    6 by 6 tile area starting at the previous emitter is skipped.
    """
    emitters: list[Vector2] = []
    previous = Rect()
    width = len(grid[0]) if grid else 0
    for x in range(width):
        for y, row in enumerate(grid):
            if row[x] != Tile.FIRE:
                continue
            tile_rect = Rect(x * tile_size, y * tile_size, tile_size, tile_size)
            if tile_rect.intersects(previous):
                continue
            emitters.append(Vector2(x * tile_size, y * tile_size))
            previous = Rect(
                x * tile_size,
                y * tile_size,
                tile_size * EMITTER_SPACING_TILES,
                tile_size * EMITTER_SPACING_TILES,
            )
    return emitters


class World:
    """Holds the state of a game in progress and advances it frame by frame."""

    def __init__(
        self,
        level_manager: LevelManager,
        sounds: SoundManager,
        thomas: PlayableCharacter,
        bob: PlayableCharacter,
        particles: ParticleSystem | None = None,
    ) -> None:
        self.level_manager = level_manager
        self.sounds = sounds
        self.thomas = thomas
        self.bob = bob
        self.particles = particles
        self.gravity = GRAVITY
        self.running = True
        self.playing = False
        self.character1 = True
        self.split_screen = False
        self.new_level_required = True
        self.time_remaining = 0.0
        self.grid: Grid = ()
        self.fire_emitters: list[Vector2] = []
        self.frames_since_hud_update = 0
        self.target_frames_per_hud_update = HUD_UPDATE_FRAMES
        self.time_text = "------"
        self.level_text = "1"
        self.main_center = Vector2()
        self.left_center = Vector2()
        self.right_center = Vector2()

    @property
    def tile_size(self) -> float:
        return self.level_manager.tile_size

    def load_level(self) -> None:
        """Move on to the next level and put both characters at its start."""
        self.playing = False
        self.grid = self.level_manager.next_level()
        self.sounds.stop_emitters()
        self.fire_emitters = populate_emitters(self.grid, self.tile_size)
        self.time_remaining = self.level_manager.time_limit
        start = self.level_manager.start_position
        self.thomas.spawn(start, self.gravity)
        self.bob.spawn(start, self.gravity)
        self.new_level_required = False

    def _respawn(self, character: PlayableCharacter) -> None:
        character.spawn(self.level_manager.start_position, self.gravity)

    def detect_collisions(self, character: PlayableCharacter) -> bool:
        """Resolve the character against nearby tiles; return True at the goal."""
        reached_goal = False
        tile = self.tile_size
        zone = character.position
        columns, rows = self.level_manager.level_size

        start_x = max(int(zone.left / tile) - 1, 0)
        start_y = max(int(zone.top / tile) - 1, 0)
        end_x = min(int(zone.left / tile) + 2, columns)
        end_y = min(int(zone.top / tile) + 3, rows)

        level_rect = Rect(0, 0, columns * tile, rows * tile)
        if not character.position.intersects(level_rect):
            self._respawn(character)

        for x in range(start_x, end_x):
            for y in range(start_y, end_y):
                block = Rect(x * tile, y * tile, tile, tile)
                kind = self.grid[y][x]

                if kind in (Tile.FIRE, Tile.WATER) and character.head.intersects(block):
                    self._respawn(character)
                    if kind == Tile.FIRE:
                        self.sounds.play_fall_in_fire()
                    else:
                        self.sounds.play_fall_in_water()

                if kind == Tile.BLOCK:
                    if character.right.intersects(block):
                        character.stop_right(block.left)
                    elif character.left.intersects(block):
                        character.stop_left(block.left)
                    if character.feet.intersects(block):
                        character.stop_falling(block.top)
                    elif character.head.intersects(block):
                        character.stop_jump()

                if (
                    self.particles is not None
                    and not self.particles.running
                    and kind in (Tile.FIRE, Tile.WATER)
                    and character.feet.intersects(block)
                ):
                    self.particles.emit_particles(character.center)

                if kind == Tile.GOAL:
                    reached_goal = True
        return reached_goal

    def handle_key(self, key: str) -> None:
        """React to a single key press event."""
        if key == KEY_QUIT:
            self.running = False
        if key == KEY_START:
            self.playing = True
        if key == KEY_SWITCH_CHARACTER:
            self.character1 = not self.character1
        if key == KEY_SWITCH_SCREEN:
            self.split_screen = not self.split_screen

    def handle_input(self, pressed: Container[str]) -> None:
        """Pass the held keys to both characters, playing a sound on each jump."""
        if self.thomas.handle_input(pressed):
            self.sounds.play_jump()
        if self.bob.handle_input(pressed):
            self.sounds.play_jump()

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        if self.new_level_required:
            self.load_level()

        if self.playing:
            self.time_remaining -= dt
            if self.detect_collisions(self.thomas) and self.detect_collisions(self.bob):
                self.new_level_required = True
                self.sounds.play_reach_goal()
            else:
                self.detect_collisions(self.bob)

            self.thomas.update(dt)
            self.bob.update(dt)

            if self.bob.feet.intersects(self.thomas.head):
                self.bob.stop_falling(self.thomas.head.top)
            elif self.thomas.feet.intersects(self.bob.head):
                self.thomas.stop_falling(self.bob.head.top)

            if self.time_remaining <= 0:
                self.new_level_required = True

        half = FIRE_HEARING_HALF_SIZE
        for emitter in self.fire_emitters:
            near = Rect(emitter.x - half, emitter.y - half, 2 * half, 2 * half)
            if self.thomas.position.intersects(near):
                self.sounds.play_fire(emitter, self.thomas.center)

        if self.split_screen:
            self.left_center = self.thomas.center
            self.right_center = self.bob.center
        elif self.character1:
            self.main_center = self.thomas.center
        else:
            self.main_center = self.bob.center

        self.frames_since_hud_update += 1
        if self.frames_since_hud_update > self.target_frames_per_hud_update:
            self.time_text = str(int(self.time_remaining))
            self.level_text = f"Level:{self.level_manager.current_level}"
            self.frames_since_hud_update = 0

        if self.particles is not None and self.particles.running:
            self.particles.update(dt)