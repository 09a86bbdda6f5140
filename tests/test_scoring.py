"""Tests for score tracking and best-score stores."""

import json

import pytest

from neon_snake.scoring import (
    DEFAULT_BEST_SCORE_KEY,
    JsonFileStore,
    MemoryStore,
    ScoreBoard,
)


class TestMemoryStore:
    def test_get_missing(self):
        assert MemoryStore().get("x") is None

    def test_set_and_get(self):
        store = MemoryStore()
        store.set("x", "5")
        assert store.get("x") == "5"


class TestJsonFileStore:
    def test_missing_file(self, tmp_path):
        assert JsonFileStore(tmp_path / "none.json").get("x") is None

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "sub" / "scores.json"
        JsonFileStore(path).set("best", "70")
        assert JsonFileStore(path).get("best") == "70"
        assert json.loads(path.read_text()) == {"best": "70"}

    def test_write_leaves_no_temp_file(self, tmp_path):
        path = tmp_path / "scores.json"
        store = JsonFileStore(path)
        store.set("best", "10")
        store.set("best", "20")
        assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]
        assert json.loads(path.read_text()) == {"best": "20"}

    def test_stale_temp_file_overwritten(self, tmp_path):
        path = tmp_path / "scores.json"
        (tmp_path / "scores.json.tmp").write_text("{half")
        JsonFileStore(path).set("best", "30")
        assert JsonFileStore(path).get("best") == "30"
        assert not (tmp_path / "scores.json.tmp").exists()

    def test_keeps_other_keys(self, tmp_path):
        store = JsonFileStore(tmp_path / "scores.json")
        store.set("a", "1")
        store.set("b", "2")
        assert store.get("a") == "1"

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("{not json")
        assert JsonFileStore(path).get("best") is None

    def test_non_object_ignored(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[1, 2]")
        assert JsonFileStore(path).get("best") is None


class TestScoreBoard:
    def test_defaults(self):
        board = ScoreBoard()
        assert board.score == 0
        assert board.best == 0
        assert board.key == DEFAULT_BEST_SCORE_KEY

    def test_reads_initial_best(self):
        board = ScoreBoard(MemoryStore({DEFAULT_BEST_SCORE_KEY: "120"}))
        assert board.best == 120

    def test_unparsable_best_reads_zero(self):
        board = ScoreBoard(MemoryStore({DEFAULT_BEST_SCORE_KEY: "lots"}))
        assert board.best == 0

    def test_award(self):
        board = ScoreBoard()
        assert board.award(10) == 10
        assert board.award(10) == 20

    def test_negative_award_rejected(self):
        with pytest.raises(ValueError):
            ScoreBoard().award(-10)

    def test_finalize_updates_only_when_higher(self):
        store = MemoryStore({DEFAULT_BEST_SCORE_KEY: "50"})
        board = ScoreBoard(store)
        board.award(50)
        assert not board.finalize()
        assert store.get(DEFAULT_BEST_SCORE_KEY) == "50"
        board.award(10)
        assert board.finalize()
        assert board.best == 60
        assert store.get(DEFAULT_BEST_SCORE_KEY) == "60"

    def test_finalize_sees_best_written_elsewhere(self):
        store = MemoryStore()
        board = ScoreBoard(store)
        store.set(DEFAULT_BEST_SCORE_KEY, "90")
        board.award(40)
        assert not board.finalize()
        assert board.best == 90
        assert store.get(DEFAULT_BEST_SCORE_KEY) == "90"

    def test_reset(self):
        board = ScoreBoard()
        board.award(30)
        board.reset()
        assert board.score == 0
