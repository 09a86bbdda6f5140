"""Headless batch runs of the engine under the greedy autopilot."""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass

import numpy as np

from neon_snake.autopilot import choose_direction
from neon_snake.config import GameConfig
from neon_snake.engine import GameEngine, RunState
from neon_snake.scoring import BestScoreStore, MemoryStore, ScoreBoard

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Aggregate results of a batch of autopilot games."""

    games: int
    total_ticks: int
    scores: list[int]
    best_score: int
    wall_time_seconds: float

    @property
    def mean_score(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | mean score {self.mean_score:.1f}, "
            f"top score {max(self.scores, default=0)}, best {self.best_score}"
        )


def run_simulation(
    *,
    games: int = 10,
    config: GameConfig | None = None,
    width: int | None = None,
    height: int | None = None,
    max_ticks: int = 5_000,
    seed: int | None = 42,
    store: BestScoreStore | None = None,
) -> SimulationResult:
    """Play *games* runs back to back, sharing one best-score store.

    Each run ends on death or after *max_ticks* ticks, whichever comes
    first. Runs cut off by *max_ticks* do not update the best score.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    cfg = config or GameConfig()
    overrides: dict = {}
    if width is not None:
        overrides["grid_width"] = width
    if height is not None:
        overrides["grid_height"] = height
    if overrides:
        cfg = dataclasses.replace(cfg, **overrides)

    shared_store: BestScoreStore = store if store is not None else MemoryStore()
    rng = np.random.default_rng(seed)
    scores: list[int] = []
    total_ticks = 0
    start = time.perf_counter()

    for _ in range(games):
        # A capped run never leaves RUNNING, so each game gets its own engine.
        engine = GameEngine(
            cfg, store=shared_store, seed=int(rng.integers(2**31)),
        )
        engine.start()
        for _ in range(max_ticks):
            engine.submit(choose_direction(engine))
            engine.tick()
            total_ticks += 1
            if engine.state is not RunState.RUNNING:
                break
        else:
            logger.debug("Run cut off after %d ticks.", max_ticks)
        scores.append(engine.score)

    result = SimulationResult(
        games=games,
        total_ticks=total_ticks,
        scores=scores,
        best_score=ScoreBoard(shared_store, key=cfg.best_score_key).best,
        wall_time_seconds=time.perf_counter() - start,
    )
    logger.info(result.summary())
    return result
