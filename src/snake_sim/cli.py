"""Command-line tools for snake-sim."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Snake simulation benchmarking and configuration tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure headless simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=int, default=100)
    bench_p.add_argument("--grid-size", type=int, default=20)
    bench_p.add_argument("--max-ticks", type=int, default=1_000)
    bench_p.add_argument("--seed", type=int, default=42)

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write a game config JSON file.",
    )
    config_p.add_argument("output", help="Path for the config file.")
    config_p.add_argument(
        "--base", type=str, default=None,
        help="Existing config to start from instead of the defaults.",
    )
    config_p.add_argument("--grid-size", type=int, default=None)
    config_p.add_argument(
        "--turn-mode", type=str, default=None,
        choices=["last_write", "buffered"],
    )
    config_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_sim.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        grid_size=args.grid_size,
        max_ticks=args.max_ticks,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from snake_sim.config import GameConfig

    config = GameConfig.load(args.base) if args.base else GameConfig()

    overrides: dict = {}
    for name in ("grid_size", "turn_mode", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if "grid_size" in overrides:
        size = overrides["grid_size"]
        overrides["start"] = (size // 2, size // 2)
        overrides["initial_food"] = None

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        try:
            config = GameConfig.from_dict(d)
        except ValueError as exc:
            logger.error("Invalid config: %s", exc)
            return 2

    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
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
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
