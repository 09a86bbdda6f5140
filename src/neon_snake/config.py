"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from neon_snake.scoring import DEFAULT_BEST_SCORE_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Colour tags handed to the renderer."""

    primary: str = "#00ff88"
    secondary: str = "#00d4ff"
    danger: str = "#ff0055"


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a game session.

    Supports JSON serialization so a setup can be saved and reloaded.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 20
    min_tiles: int = 10
    tile_size: int = 20
    viewport_margin: int = 40
    initial_length: int = 3

    # Timing
    tick_rate_ms: int = 100

    # Scoring
    food_reward: int = 10
    food_max_attempts: int = 10_000
    best_score_key: str = DEFAULT_BEST_SCORE_KEY

    # Particles
    particle_count: int = 10
    particle_speed: float = 2.5
    particle_decay: float = 0.05

    palette: Palette = field(default_factory=Palette)

    def __post_init__(self) -> None:
        if self.tick_rate_ms <= 0:
            raise ValueError("tick_rate_ms must be positive.")
        if self.tile_size <= 0:
            raise ValueError("tile_size must be positive.")
        if self.min_tiles < 4:
            raise ValueError("min_tiles must be at least 4.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be >= 0.")
        if self.particle_count < 0:
            raise ValueError("particle_count must be >= 0.")
        if not 0.0 < self.particle_decay <= 1.0:
            raise ValueError("particle_decay must be in (0, 1].")

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_rate_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        raw["palette"] = Palette(**raw.pop("palette", {}))
        return cls(**raw)
