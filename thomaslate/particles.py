"""A burst of particles flying out from one point for a short time."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from thomaslate.geometry import Vector2

PARTICLE_COLOR = (255, 255, 0)
EFFECT_DURATION = 2.0


@dataclass
class Particle:
    """A point that moves at a constant velocity."""

    velocity: Vector2
    position: Vector2 = field(default_factory=Vector2)

    def update(self, dt: float) -> None:
        self.position = self.position + self.velocity * dt


class ParticleSystem:
    """A fixed set of particles with random directions and speeds."""

    color = PARTICLE_COLOR

    def __init__(self, count: int = 1000, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        for _ in range(count):
            angle = rng.randrange(360) * 3.14 / 180.0
            speed = rng.randrange(600) + 600.0
            direction = Vector2(math.cos(angle) * speed, math.sin(angle) * speed)
            self.particles.append(Particle(direction))
        self.duration = 0.0
        self.running = False

    @property
    def positions(self) -> list[Vector2]:
        return [particle.position for particle in self.particles]

    def emit_particles(self, start_position: Vector2) -> None:
        """Gather every particle at ``start_position`` and start the effect."""
        self.running = True
        self.duration = EFFECT_DURATION
        for particle in self.particles:
            particle.position = start_position

    def update(self, dt: float) -> None:
        """Move the particles and stop the effect once its time is used up."""
        self.duration -= dt
        for particle in self.particles:
            particle.update(dt)
        if self.duration < 0:
            self.running = False