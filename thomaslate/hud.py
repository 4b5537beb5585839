"""On-screen text: the level number, the time left and the start prompt."""

from __future__ import annotations

from dataclasses import dataclass

START_MESSAGE = "Press Enter when ready!"
MESSAGE_SIZE = 100
INFO_SIZE = 75
TIME_RIGHT_OFFSET = 150
LEVEL_LEFT = 25
TEXT_COLOR = (255, 255, 255)


@dataclass
class _HudText:
    """One line of HUD text and where it sits on a screen."""

    text: str
    size: int
    centered: bool = False
    from_right: bool = False
    x: float = 0.0
    y: float = 0.0

    def position(self, resolution: tuple[int, int]) -> tuple[float, float]:
        """Where the text goes: its centre if centered, else its top-left corner."""
        width, height = resolution
        if self.centered:
            return (width / 2.0, height / 2.0)
        if self.from_right:
            return (width - self.x, self.y)
        return (self.x, self.y)


class Hud:
    """Holds the three HUD texts and their layout."""

    color = TEXT_COLOR

    def __init__(self) -> None:
        self.message = _HudText(START_MESSAGE, MESSAGE_SIZE, centered=True)
        self.time = _HudText("------", INFO_SIZE, from_right=True, x=TIME_RIGHT_OFFSET)
        self.level = _HudText("1", INFO_SIZE, x=LEVEL_LEFT)

    def set_level(self, text: str) -> None:
        self.level.text = str(text)

    def set_time(self, text: str) -> None:
        self.time.text = str(text)