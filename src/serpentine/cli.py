"""Command-line entry point for headless Serpentine runs."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serpentine",
        description="Serpentine snake engine tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play games headlessly with random steering.",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON engine config file.",
    )
    sim_p.add_argument(
        "--json", action="store_true", help="Print the result as JSON.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print the effective engine config.")
    cfg_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON engine config file.",
    )
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _load_config(args: argparse.Namespace):
    from serpentine.config import EngineConfig

    config = EngineConfig.load(args.config) if args.config else EngineConfig()
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from serpentine.simulate import run_simulation

    config = _load_config(args)
    result = run_simulation(
        num_games=args.games,
        max_ticks=args.max_ticks,
        seed=config.seed,
        config=config,
    )
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))  # noqa: T201
    else:
        print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    print(json.dumps(_load_config(args).to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``serpentine`` CLI."""
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
        "simulate": _run_simulate,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
