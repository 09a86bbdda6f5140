"""Tick-based game engine composing grid, snake, food, particles and score."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

import numpy as np

from neon_snake.config import GameConfig
from neon_snake.food import FoodPlacer
from neon_snake.grid import Grid, GridDimensions
from neon_snake.input_buffer import InputBuffer
from neon_snake.particles import ParticleSystem
from neon_snake.scoring import BestScoreStore, ScoreBoard
from neon_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

START_DIRECTION = Direction.UP


class RunState(str, enum.Enum):
    """Lifecycle states of a run."""

    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class EventKind(str, enum.Enum):
    ATE_FOOD = "ate_food"
    DIED = "died"


class DeathCause(str, enum.Enum):
    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class GameEvent:
    """Something notable that happened during a tick, located on a cell."""

    kind: EventKind
    cell: tuple[int, int]
    cause: DeathCause | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "cell": list(self.cell),
            "cause": self.cause.value if self.cause else None,
        }


@dataclass
class TickResult:
    """Events reported by one call to :meth:`GameEngine.tick`."""

    events: list[GameEvent] = field(default_factory=list)
    new_best: bool = False

    @property
    def ate_food(self) -> bool:
        return any(e.kind is EventKind.ATE_FOOD for e in self.events)

    @property
    def died(self) -> bool:
        return any(e.kind is EventKind.DIED for e in self.events)


class GameEngine:
    """Single-player snake simulation driven by :meth:`tick`.

    The engine owns every piece of run state (snake, food, particles and
    score) and is the only thing that mutates it. Input arrives through
    :meth:`submit` and is buffered until the next tick. Dimensions changed
    with :meth:`resize` take effect on the following :meth:`start`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.rng = np.random.default_rng(seed)
        self.scoreboard = ScoreBoard(store, key=cfg.best_score_key)

        self.dimensions = GridDimensions(cfg.grid_width, cfg.grid_height)
        self.grid = Grid(*self._playable_dimensions())
        self.food_placer = FoodPlacer(
            self.grid, rng=self.rng, max_attempts=cfg.food_max_attempts,
        )
        self.particles = ParticleSystem(
            rng=self.rng,
            burst_size=cfg.particle_count,
            speed=cfg.particle_speed,
            decay=cfg.particle_decay,
        )
        self.input = InputBuffer(START_DIRECTION)
        self.snake = Snake.spawn(
            self.grid.width, self.grid.height, self._start_length(),
        )
        self.food: tuple[int, int] | None = None
        self.state = RunState.IDLE
        self.tick_count = 0

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def best_score(self) -> int:
        return self.scoreboard.best

    @property
    def direction(self) -> Direction:
        return self.input.current

    def _playable_dimensions(self) -> tuple[int, int]:
        dims = self.dimensions.clamped(self.config.min_tiles)
        return dims.width, dims.height

    def _start_length(self) -> int:
        # The body trails below the head, which sits on the middle row.
        room = self.grid.height - self.grid.height // 2
        return max(1, min(self.config.initial_length, room))

    def resize(self, width: int, height: int) -> None:
        """Record new grid dimensions for the next run."""
        self.dimensions = GridDimensions(width, height)
        if self.state is RunState.RUNNING:
            logger.debug("Resize to %dx%d deferred until next start.", width, height)

    def start(self) -> None:
        """Reset all run state and begin a new run.

        Raises ``ValueError`` when a run is already in progress.
        """
        if self.state is RunState.RUNNING:
            raise ValueError("A run is already in progress.")

        self.grid = Grid(*self._playable_dimensions())
        self.food_placer.grid = self.grid
        self.scoreboard.reset()
        self.snake = Snake.spawn(
            self.grid.width, self.grid.height, self._start_length(),
        )
        self.input.reset(START_DIRECTION)
        self.particles.clear()
        self.food = self.food_placer.place(self.snake)
        self.tick_count = 0
        self.state = RunState.RUNNING
        logger.info(
            "Run started on a %dx%d grid.", self.grid.width, self.grid.height,
        )

    def submit(self, direction: Direction) -> bool:
        """Buffer a direction for the next tick. Returns whether it was accepted."""
        if self.state is not RunState.RUNNING:
            return False
        return self.input.submit(direction)

    def tick(self) -> TickResult:
        """Advance the run by one step."""
        if self.state is not RunState.RUNNING:
            return TickResult()

        direction = self.input.apply()
        candidate = self.snake.next_head(direction)

        if not self.grid.in_bounds(*candidate):
            return self._die(self.snake.head, DeathCause.WALL)

        # Checked against the full pre-move body, tail included.
        if self.snake.occupies(*candidate):
            return self._die(candidate, DeathCause.SELF)

        result = TickResult()
        self.snake.push_head(candidate)

        if candidate == self.food:
            self.scoreboard.award(self.config.food_reward)
            result.events.append(GameEvent(EventKind.ATE_FOOD, candidate))
            self.particles.spawn_burst(
                self.pixel_center(candidate), self.config.palette.secondary,
            )
            self.food = self.food_placer.place(self.snake)
        else:
            self.snake.drop_tail()

        self.particles.advance()
        self.tick_count += 1
        return result

    def _die(self, cell: tuple[int, int], cause: DeathCause) -> TickResult:
        self.state = RunState.OVER
        self.tick_count += 1
        self.particles.spawn_burst(
            self.pixel_center(cell), self.config.palette.danger,
        )
        new_best = self.scoreboard.finalize()
        logger.info(
            "Snake died (%s) at tick %d with score %d.",
            cause.value, self.tick_count, self.score,
        )
        return TickResult(
            events=[GameEvent(EventKind.DIED, cell, cause)], new_best=new_best,
        )

    def pixel_center(self, cell: tuple[int, int]) -> tuple[float, float]:
        """Return the canvas pixel at the centre of *cell*."""
        tile = self.config.tile_size
        return cell[0] * tile + tile / 2, cell[1] * tile + tile / 2

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self.state.value,
            "tick": self.tick_count,
            "score": self.score,
            "best_score": self.best_score,
            "grid": self.grid.to_dict(),
            "tile_size": self.config.tile_size,
            "snake": self.snake.to_dict(),
            "direction": self.direction.name.lower(),
            "food": list(self.food) if self.food is not None else None,
            "particles": self.particles.to_dict(),
            "palette": {
                "primary": self.config.palette.primary,
                "secondary": self.config.palette.secondary,
                "danger": self.config.palette.danger,
            },
        }
