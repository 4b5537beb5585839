"""Sound effects, including three looping fire voices placed in the level."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from thomaslate.geometry import Vector2

FIRE_MIN_DISTANCE = 150.0
FIRE_ATTENUATION = 15.0
FIRE_VOICES = 3

FIRE_FILE = "sound/fire1.wav"
FALL_IN_FIRE_FILE = "sound/fallinfire.wav"
FALL_IN_WATER_FILE = "sound/fallinwater.wav"
JUMP_FILE = "sound/jump.wav"
REACH_GOAL_FILE = "sound/reachgoal.wav"


def attenuated_volume(distance: float, min_distance: float, attenuation: float) -> float:
    """Volume factor in ``[0, 1]`` for a source ``distance`` away.

    Full volume up to ``min_distance``; beyond it the volume falls off as
    ``min_distance / (min_distance + attenuation * (distance - min_distance))``.
    """
    if min_distance <= 0:
        raise ValueError("min_distance must be positive")
    if attenuation < 0:
        raise ValueError("attenuation must not be negative")
    distance = max(distance, min_distance)
    return min_distance / (min_distance + attenuation * (distance - min_distance))


@dataclass
class FireVoice:
    """One looping fire sound and where it is in the level."""

    sound: Any
    position: Vector2 | None = None
    playing: bool = False


class SoundManager:
    """Plays the game's sounds through objects made by ``load_sound``.

    ``load_sound`` takes a file name and returns an object with ``play``
    (accepting ``loops``), ``stop`` and ``set_volume``.
    """

    def __init__(self, load_sound: Callable[[str], Any]) -> None:
        self.fire_voices = [FireVoice(load_sound(FIRE_FILE)) for _ in range(FIRE_VOICES)]
        self.fall_in_fire = load_sound(FALL_IN_FIRE_FILE)
        self.fall_in_water = load_sound(FALL_IN_WATER_FILE)
        self.jump = load_sound(JUMP_FILE)
        self.reach_goal = load_sound(REACH_GOAL_FILE)
        self.listener = Vector2()
        self.next_sound = 1

    def _refresh_fire_volumes(self) -> None:
        for voice in self.fire_voices:
            if voice.position is None:
                continue
            distance = math.hypot(
                voice.position.x - self.listener.x,
                voice.position.y - self.listener.y,
            )
            voice.sound.set_volume(
                attenuated_volume(distance, FIRE_MIN_DISTANCE, FIRE_ATTENUATION)
            )

    def play_fire(self, emitter: Vector2, listener: Vector2) -> None:
        """Move the next fire voice to ``emitter`` and start it if stopped."""
        self.listener = listener
        voice = self.fire_voices[self.next_sound - 1]
        voice.position = emitter
        self._refresh_fire_volumes()
        if not voice.playing:
            voice.sound.play(loops=-1)
            voice.playing = True
        self.next_sound += 1
        if self.next_sound > FIRE_VOICES:
            self.next_sound = 1

    def play_fall_in_fire(self) -> None:
        self.fall_in_fire.play()

    def play_fall_in_water(self) -> None:
        self.fall_in_water.play()

    def play_jump(self) -> None:
        self.jump.play()

    def play_reach_goal(self) -> None:
        self.reach_goal.play()

    def stop_emitters(self) -> None:
        """Silence every fire voice."""
        for voice in self.fire_voices:
            voice.sound.stop()
            voice.playing = False