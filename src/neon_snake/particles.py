"""Particle bursts emitted on food consumption and death."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

# Decimal places kept on ``life`` so repeated decay lands exactly on zero.
_LIFE_PRECISION = 9


@dataclass
class Particle:
    """A single short-lived spark in pixel space."""

    x: float
    y: float
    vx: float
    vy: float
    color: str
    life: float = 1.0

    @property
    def opacity(self) -> float:
        """Rendering alpha, ``life`` clamped to [0, 1]."""
        return min(1.0, max(0.0, self.life))

    def to_dict(self) -> dict:
        return asdict(self)


class ParticleSystem:
    """Owns the live particle set and its per-tick update."""

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        burst_size: int = 10,
        speed: float = 2.5,
        decay: float = 0.05,
    ) -> None:
        if burst_size < 0:
            raise ValueError("burst_size must be >= 0.")
        if not 0.0 < decay <= 1.0:
            raise ValueError("decay must be in (0, 1].")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.burst_size = burst_size
        self.speed = speed
        self.decay = decay
        self.particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def spawn_burst(self, position: tuple[float, float], color: str) -> list[Particle]:
        """Create ``burst_size`` particles at *position* with random velocities."""
        x, y = position
        velocities = self.rng.uniform(-self.speed, self.speed, size=(self.burst_size, 2))
        burst = [
            Particle(x=float(x), y=float(y), vx=float(vx), vy=float(vy), color=color)
            for vx, vy in velocities
        ]
        self.particles.extend(burst)
        return burst

    def advance(self) -> None:
        """Move every particle, decay its life and drop the expired ones."""
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.life = round(p.life - self.decay, _LIFE_PRECISION)
        self.particles = [p for p in self.particles if p.life > 0]

    def clear(self) -> None:
        self.particles.clear()

    def to_dict(self) -> list[dict]:
        return [p.to_dict() for p in self.particles]
