"""Command-line front end for AI Snake."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import TYPE_CHECKING

from ai_snake.difficulty import ALL_DIFFICULTIES, DIFFICULTY_SETTINGS

if TYPE_CHECKING:
    from ai_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-snake",
        description="AI Snake game engine tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    sub.add_parser("difficulties", help="Show the difficulty table.")

    sim_p = sub.add_parser(
        "simulate", help="Play a scripted game and print the final board.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config (flags override it).",
    )
    sim_p.add_argument(
        "--moves", type=str, default="",
        help=(
            "One key per tick: U, D, L, R (case-insensitive) "
            "or '.' to keep going."
        ),
    )
    sim_p.add_argument("--ticks", type=int, default=None)
    sim_p.add_argument(
        "--difficulty", type=str, default=None,
        choices=[d.value for d in ALL_DIFFICULTIES],
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--grid-size", type=int, default=None)
    sim_p.add_argument(
        "--strict-food", action="store_true",
        help="Never spawn food on the snake.",
    )
    sim_p.add_argument(
        "--no-reversal", action="store_true",
        help="Ignore direct 180-degree turns.",
    )
    sim_p.add_argument(
        "--realtime", action="store_true",
        help="Tick at the difficulty's real cadence.",
    )
    sim_p.add_argument(
        "--sound", action="store_true",
        help="Log the sound played for each game event.",
    )

    return parser


def _run_difficulties(args: argparse.Namespace) -> int:
    for difficulty in ALL_DIFFICULTIES:
        settings = DIFFICULTY_SETTINGS[difficulty]
        print(  # noqa: T201
            f"{difficulty.display_name:<8} tick={settings.tick_interval_ms}ms "
            f"spawn={settings.spawn_probability:.2f}"
        )
    return 0


def _load_config(args: argparse.Namespace) -> GameConfig:
    from ai_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "difficulty": "difficulty",
        "seed": "seed",
        "grid_size": "grid_size",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    rules = config.rules
    if args.strict_food:
        rules = replace(rules, allow_food_on_snake=False)
    if args.no_reversal:
        rules = replace(rules, allow_reversal=False)
    return replace(config, rules=rules, **overrides)


def _script_keys(moves: str) -> list[str]:
    """Normalize a move script to the upper-case U/D/L/R key alphabet."""
    return list(moves.upper())


def _run_simulate(args: argparse.Namespace) -> int:
    from ai_snake.controls import InputAdapter
    from ai_snake.engine import GameEngine
    from ai_snake.render import render_text
    from ai_snake.scheduler import TickScheduler
    from ai_snake.sound import SoundTrigger

    try:
        config = _load_config(args)
        engine = GameEngine.from_config(config)
    except ValueError as exc:
        print(f"Invalid game config: {exc}", file=sys.stderr)  # noqa: T201
        return 2
    if args.sound:
        SoundTrigger(lambda path: logger.info("Playing %s", path)).attach(engine)
    adapter = InputAdapter(engine)
    moves = _script_keys(args.moves)
    ticks = args.ticks if args.ticks is not None else len(moves)
    if ticks < 0:
        print("--ticks must be >= 0", file=sys.stderr)  # noqa: T201
        return 2
    logger.info("Simulating %d ticks on %s difficulty.", ticks, config.difficulty)

    def apply_move(index: int) -> None:
        if index < len(moves) and moves[index] != ".":
            adapter.handle_key(moves[index])

    if args.realtime:
        apply_move(0)

        def on_tick(state) -> None:
            apply_move(scheduler.ticks_run)

        scheduler = TickScheduler(engine, on_tick, max_ticks=ticks)
        state = asyncio.run(scheduler.run())
    else:
        state = engine.get_state()
        for i in range(ticks):
            apply_move(i)
            state = engine.tick()
            if state.is_over:
                break

    print(render_text(state, engine.grid.size))  # noqa: T201
    print(  # noqa: T201
        f"Finished after {state.tick} ticks: score={state.score} "
        f"length={state.length} over={state.is_over}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``ai-snake`` CLI."""
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
        "difficulties": _run_difficulties,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
