"""Command-line entry point for Voxel Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from voxel_snake.direction import Direction

if TYPE_CHECKING:
    from voxel_snake.config import GameConfig

logger = logging.getLogger(__name__)

# Exit status when the snake dies.
GAME_OVER_EXIT = 2

_MOVE_LETTERS: dict[str, Direction] = {
    "N": Direction.NORTH,
    "S": Direction.SOUTH,
    "W": Direction.WEST,
    "E": Direction.EAST,
    "U": Direction.UP,
    "D": Direction.DOWN,
    ".": Direction.NONE,
}


def parse_moves(moves: str) -> list[Direction]:
    """Turn a move string such as ``"EESS."`` into directions."""
    directions: list[Direction] = []
    for letter in moves.upper():
        if letter.isspace() or letter == ",":
            continue
        try:
            directions.append(_MOVE_LETTERS[letter])
        except KeyError:
            raise ValueError(
                f"Unknown move {letter!r}; use N, S, E, W, U, D or '.'."
            ) from None
    return directions


def _triple(text: str) -> tuple[int, int, int]:
    parts = text.replace(",", " ").split()
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected X,Y,Z, got {text!r}")
    try:
        x, y, z = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"coordinates must be integers, got {text!r}"
        ) from None
    return x, y, z


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voxel-snake",
        description="Turn-based 3D snake in the terminal.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every tick.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write log records to this file instead of stderr.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play in the terminal.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    play_p.add_argument("--fps", type=int, default=None)
    play_p.add_argument(
        "--size", type=_triple, default=None, metavar="X,Y,Z",
        help="Grid dimensions; defaults to fitting the terminal.",
    )
    play_p.add_argument("--start", type=_triple, default=None, metavar="X,Y,Z")
    play_p.add_argument("--food", type=_triple, default=None, metavar="X,Y,Z")
    play_p.add_argument(
        "--show-void", action="store_true",
        help="Draw void cells instead of leaving them blank.",
    )

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a move sequence headless and print the outcome.",
    )
    sim_p.add_argument(
        "moves",
        help="Moves per tick: N, S, E, W, U, D, or '.' to keep heading.",
    )
    sim_p.add_argument(
        "--size", type=_triple, default=(5, 5, 2), metavar="X,Y,Z",
    )
    sim_p.add_argument("--start", type=_triple, default=(0, 0, 1), metavar="X,Y,Z")
    sim_p.add_argument("--food", type=_triple, default=None, metavar="X,Y,Z")
    sim_p.add_argument(
        "--render", action="store_true",
        help="Print the final frame after the outcome.",
    )

    return parser


def _fail(command: str, err: Exception) -> int:
    print(f"voxel-snake {command}: {err}", file=sys.stderr)  # noqa: T201
    return 1


def _run_play(args: argparse.Namespace) -> int:
    from voxel_snake.grid import OutOfBoundsError
    from voxel_snake.terminal import play

    try:
        config = _play_config(args)
    except (OSError, TypeError, ValueError) as err:
        return _fail("play", err)

    try:
        result = play(config)
    except (ValueError, OutOfBoundsError) as err:
        return _fail("play", err)
    if result.error is not None:
        logger.info("Session ended after %d ticks.", result.ticks)
        print(f"Game over after {result.ticks} ticks: {result.error}")  # noqa: T201
        return GAME_OVER_EXIT
    return 0


def _play_config(args: argparse.Namespace) -> GameConfig:
    """Build the play config from --config and the flag overrides."""
    from voxel_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.size is not None:
        overrides["grid_x"], overrides["grid_y"], overrides["grid_z"] = args.size
    if args.start is not None:
        overrides["start"] = args.start
    if args.food is not None:
        overrides["food"] = args.food
    if args.show_void:
        overrides["skip_void"] = False

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from voxel_snake.canvas import Canvas, render
    from voxel_snake.config import GameConfig
    from voxel_snake.engine import GameError
    from voxel_snake.grid import OutOfBoundsError
    from voxel_snake.level import new_game

    try:
        moves = parse_moves(args.moves)
    except ValueError as err:
        return _fail("simulate", err)

    x, y, z = args.size
    try:
        config = GameConfig(
            grid_x=x, grid_y=y, grid_z=z, start=args.start, food=args.food,
        )
        game = new_game(config)
    except (ValueError, OutOfBoundsError) as err:
        return _fail("simulate", err)

    ticks = 0
    error: GameError | None = None
    for direction in moves:
        try:
            game.update(direction)
        except GameError as err:
            error = err
            break
        ticks += 1

    outcome = {
        "ticks": ticks,
        "length": len(game.snake),
        "head": list(game.snake.head),
        "error": error.to_dict() if error else None,
    }
    print(json.dumps(outcome))  # noqa: T201

    if args.render:
        canvas = Canvas.for_grid(game.grid.dims)
        render(game, canvas, skip_void=config.skip_void, border=config.border)
        print("\n".join(canvas.lines()))  # noqa: T201

    return GAME_OVER_EXIT if error else 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``voxel-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        filename=args.log_file,
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "play" and args.log_file is None:
        # curses owns the terminal; only warnings reach stderr.
        logging.getLogger("voxel_snake").setLevel(logging.WARNING)

    handlers = {
        "play": _run_play,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
