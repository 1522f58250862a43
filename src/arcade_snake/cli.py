"""Command-line launcher for Arcade Snake."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcade-snake",
        description="Arcade Snake: play, benchmark, and configure.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open a window and play.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    play_p.add_argument("--seed", type=int, default=None)

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure headless simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--max-ticks", type=_positive_int, default=2_000)
    bench_p.add_argument("--dt", type=float, default=1 / 60)
    bench_p.add_argument("--config", type=str, default=None)

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default config to a JSON file.",
    )
    config_p.add_argument("output", help="Path for the config file.")

    return parser


def _load_config(path: str | None, seed: int | None = None):
    from arcade_snake.config import GameConfig

    config = GameConfig.load(path) if path else GameConfig()
    if seed is not None:
        config = dataclasses.replace(config, seed=seed)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from arcade_snake.app import run

    run(_load_config(args.config, args.seed))
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from arcade_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        max_ticks=args.max_ticks,
        dt=args.dt,
        config=_load_config(args.config),
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from arcade_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``arcade-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
