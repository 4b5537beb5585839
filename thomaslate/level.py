"""Level files, tile grids and the rotation through the game's levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path

from thomaslate.geometry import Vector2

TILE_SIZE = 50

Grid = tuple[tuple["Tile", ...], ...]
Vertex = tuple[Vector2, Vector2]
Quad = tuple[Vertex, Vertex, Vertex, Vertex]


class Tile(IntEnum):
    """What occupies one cell of a level; the value selects the sprite-sheet row."""

    EMPTY = 0
    BLOCK = 1
    FIRE = 2
    WATER = 3
    GOAL = 4


@dataclass(frozen=True)
class LevelSpec:
    """Where a level is stored, where the characters start and its base time."""

    filename: str
    start_position: Vector2
    base_time_limit: float


LEVELS: tuple[LevelSpec, ...] = (
    LevelSpec("level1.txt", Vector2(100, 100), 30.0),
    LevelSpec("level2.txt", Vector2(100, 3600), 100.0),
    LevelSpec("level3.txt", Vector2(1250, 0), 30.0),
    LevelSpec("level4.txt", Vector2(50, 170), 50.0),
)


def parse_level(text: str) -> Grid:
    """Parse a level made of rows of tile digits into a grid indexed ``[y][x]``.

    Blank lines are ignored. Raises ValueError for an empty level, rows of
    different lengths, or characters that are not tile codes.
    """
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("level has no rows")
    width = len(rows[0])
    grid = []
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ValueError(
                f"row {number} has {len(row)} tiles, expected {width}"
            )
        try:
            grid.append(tuple(Tile(int(char)) for char in row))
        except ValueError as exc:
            raise ValueError(f"row {number} has an unknown tile: {row!r}") from exc
    return tuple(grid)


def build_quads(grid: Grid, tile_size: float = TILE_SIZE) -> list[Quad]:
    """Build one textured quad per cell, column by column.

    Each quad is four ``(position, tex_coords)`` pairs in clockwise order from
    the top-left corner. The texture row is chosen by the tile's value.
    """
    width = len(grid[0]) if grid else 0
    quads: list[Quad] = []
    for x in range(width):
        for y, row in enumerate(grid):
            left = x * tile_size
            top = y * tile_size
            offset = row[x] * tile_size
            quads.append(
                (
                    (Vector2(left, top), Vector2(0, offset)),
                    (Vector2(left + tile_size, top), Vector2(tile_size, offset)),
                    (
                        Vector2(left + tile_size, top + tile_size),
                        Vector2(tile_size, tile_size + offset),
                    ),
                    (Vector2(left, top + tile_size), Vector2(0, tile_size + offset)),
                )
            )
    return quads


class LevelManager:
    """Steps through the levels, shortening the time limit on every full cycle."""

    def __init__(self, levels_dir: str | PathLike[str] = "levels") -> None:
        self.levels_dir = Path(levels_dir)
        self.levels: tuple[LevelSpec, ...] = LEVELS
        self.tile_size: float = TILE_SIZE
        self.current_level = 0
        self.time_modifier = 1.0
        self.base_time_limit = 0.0
        self.start_position = Vector2()
        self.grid: Grid = ()
        self.quads: list[Quad] = []

    @property
    def level_size(self) -> tuple[int, int]:
        """The loaded level's size in tiles as ``(columns, rows)``."""
        if not self.grid:
            return (0, 0)
        return (len(self.grid[0]), len(self.grid))

    @property
    def time_limit(self) -> float:
        return self.base_time_limit * self.time_modifier

    def next_level(self) -> Grid:
        """Load the following level, wrapping to the first after the last."""
        self.current_level += 1
        if self.current_level > len(self.levels):
            self.current_level = 1
            self.time_modifier -= 0.1
        spec = self.levels[self.current_level - 1]
        self.start_position = spec.start_position
        self.base_time_limit = spec.base_time_limit
        text = (self.levels_dir / spec.filename).read_text(encoding="utf-8")
        self.grid = parse_level(text)
        self.quads = build_quads(self.grid, self.tile_size)
        return self.grid