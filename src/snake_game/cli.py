"""Command line tools for the snake game core."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_game.difficulty import PROFILES, Difficulty

logger = logging.getLogger(__name__)

_TIER_NAMES = [tier.value for tier in Difficulty]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-game",
        description="Snake simulation tools: headless runs and settings.",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless autopilot games.",
    )
    sim_p.add_argument(
        "--difficulty", choices=_TIER_NAMES, default=Difficulty.EASY.value,
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-steps", type=int, default=1_000)
    sim_p.add_argument("--growth", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=0)

    # --- difficulties ---
    sub.add_parser("difficulties", help="List difficulty tiers.")

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Write a session config file.",
    )
    cfg_p.add_argument(
        "--output", default="session.json",
        help="Path of the JSON file to write.",
    )
    cfg_p.add_argument(
        "--difficulty", choices=_TIER_NAMES, default=Difficulty.NORMAL.value,
    )
    cfg_p.add_argument("--growth", type=int, default=None)
    cfg_p.add_argument(
        "--placement", choices=["random", "corner"], default="random",
    )
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_game.simulate import run_simulation

    kwargs = {}
    if args.growth is not None:
        kwargs["growth_per_food"] = args.growth
    try:
        result = run_simulation(
            difficulty=args.difficulty,
            num_games=args.games,
            max_steps=args.max_steps,
            seed=args.seed,
            **kwargs,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    print(result.summary())  # noqa: T201
    return 0


def _run_difficulties(args: argparse.Namespace) -> int:
    for tier in Difficulty:
        profile = PROFILES[tier]
        print(  # noqa: T201
            f"{tier.value:<14}{profile.width:>4}x{profile.height:<4}"
            f"{profile.timestep * 1000:>6.0f} ms"
        )
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from snake_game.config import SessionConfig

    raw: dict = {
        "difficulty": args.difficulty,
        "initial_placement": args.placement,
        "seed": args.seed,
    }
    if args.growth is not None:
        raw["growth_per_food"] = args.growth
    try:
        config = SessionConfig.from_dict(raw)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    config.save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-game`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "difficulties": _run_difficulties,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
