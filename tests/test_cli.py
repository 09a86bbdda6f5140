"""Tests for the neon-snake CLI."""

import json

from neon_snake.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.games == 10
        assert args.max_ticks == 5_000
        assert args.seed == 42
        assert args.config is None

    def test_simulate_with_flags(self):
        args = _build_parser().parse_args([
            "simulate", "--games", "3", "--width", "15", "--height", "12",
        ])
        assert args.games == 3
        assert args.width == 15
        assert args.height == 12


class TestCLICommands:
    def test_config_writes_defaults(self, tmp_path):
        out = tmp_path / "game.json"
        assert main(["config", str(out)]) == 0
        assert json.loads(out.read_text())["tick_rate_ms"] == 100

    def test_simulate_runs(self, tmp_path, capsys):
        score_file = tmp_path / "scores.json"
        code = main([
            "simulate", "--games", "2", "--width", "10", "--height", "10",
            "--max-ticks", "200", "--score-file", str(score_file),
        ])
        assert code == 0
        assert "Simulation: 2 games" in capsys.readouterr().out
