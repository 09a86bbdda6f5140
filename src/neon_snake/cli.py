"""Command-line tools for Neon Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neon-snake",
        description="Neon Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play games headlessly with the greedy autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=5_000)
    sim_p.add_argument("--seed", type=int, default=42)
    sim_p.add_argument(
        "--score-file", type=str, default=None,
        help="JSON file to persist the best score in.",
    )

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default configuration to a JSON file.",
    )
    config_p.add_argument("output", help="Destination path.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from neon_snake.config import GameConfig
    from neon_snake.scoring import JsonFileStore
    from neon_snake.simulate import run_simulation

    config = GameConfig.load(args.config) if args.config else GameConfig()
    store = JsonFileStore(args.score_file) if args.score_file else None
    result = run_simulation(
        games=args.games,
        config=config,
        width=args.width,
        height=args.height,
        max_ticks=args.max_ticks,
        seed=args.seed,
        store=store,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from neon_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``neon-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
