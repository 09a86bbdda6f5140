"""Tests for headless simulation runs."""

import pytest

from neon_snake.scoring import DEFAULT_BEST_SCORE_KEY, MemoryStore
from neon_snake.simulate import run_simulation


class TestRunSimulation:
    def test_invalid_game_count(self):
        with pytest.raises(ValueError):
            run_simulation(games=0)

    def test_runs_all_games(self):
        result = run_simulation(games=3, width=10, height=10, max_ticks=300, seed=1)
        assert result.games == 3
        assert len(result.scores) == 3
        assert result.total_ticks > 0
        assert all(s % 10 == 0 for s in result.scores)
        assert "Simulation: 3 games" in result.summary()

    def test_best_score_persisted(self):
        store = MemoryStore()
        result = run_simulation(
            games=2, width=10, height=10, max_ticks=2_000, seed=2, store=store,
        )
        stored = int(store.get(DEFAULT_BEST_SCORE_KEY) or 0)
        assert stored == result.best_score
        assert result.best_score <= max(result.scores)

    def test_capped_runs_do_not_record_best(self):
        store = MemoryStore()
        result = run_simulation(
            games=2, width=20, height=20, max_ticks=1, seed=3, store=store,
        )
        assert len(result.scores) == 2
        assert result.best_score == 0
        assert store.get(DEFAULT_BEST_SCORE_KEY) is None
