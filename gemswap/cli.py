"""
Gemswap CLI - Command-line interface for the engine.

Usage:
    gemswap play      Show a board, read one move, apply it
    gemswap show      Print a (seeded) board
    gemswap shapes    Print the current matches (--json for the schema form)

Environment:
    GEMSWAP_WIDTH, GEMSWAP_HEIGHT   Default board size (10x10)
    GEMSWAP_SEED                    Default RNG seed (random if unset)
    GEMSWAP_LOG_LEVEL               Logging level (WARNING)
"""

import argparse
import logging
import os
import sys

from .api import GameService, MOVE_FORMAT
from .render import ASCII_GLYPHS, DEFAULT_GLYPHS, render_board, render_shapes

# Environment configuration
GEMSWAP_WIDTH = int(os.getenv("GEMSWAP_WIDTH", "10"))
GEMSWAP_HEIGHT = int(os.getenv("GEMSWAP_HEIGHT", "10"))
GEMSWAP_SEED = os.getenv("GEMSWAP_SEED")
GEMSWAP_LOG_LEVEL = os.getenv("GEMSWAP_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Gemswap - Tile-Matching Puzzle Rule Engine",
        prog="gemswap",
    )
    parser.add_argument("--log-level", default=GEMSWAP_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    board_args = argparse.ArgumentParser(add_help=False)
    board_args.add_argument("--width", type=int, default=GEMSWAP_WIDTH, help="Board width")
    board_args.add_argument("--height", type=int, default=GEMSWAP_HEIGHT, help="Board height")
    board_args.add_argument(
        "--seed",
        type=int,
        default=int(GEMSWAP_SEED) if GEMSWAP_SEED else None,
        help="RNG seed for the board",
    )
    board_args.add_argument("--ascii", action="store_true", help="Render with letters instead of emoji")

    # Play command
    play_parser = subparsers.add_parser("play", parents=[board_args], help="Play one move")
    play_parser.add_argument("--move", help=f"Move as {MOVE_FORMAT} (prompted if omitted)")
    play_parser.add_argument("--resolve", action="store_true", help="Clear matches after the move")

    # Show command
    subparsers.add_parser("show", parents=[board_args], help="Print a board")

    # Shapes command
    shapes_parser = subparsers.add_parser("shapes", parents=[board_args], help="Print current matches")
    shapes_parser.add_argument("--json", action="store_true", help="Print the board as JSON")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "show":
        return cmd_show(args)
    elif args.command == "shapes":
        return cmd_shapes(args)
    parser.print_help()
    return 1


def _new_service(args, auto_resolve: bool = False) -> GameService:
    if args.width <= 0 or args.height <= 0:
        print(f"Error: board size must be positive, got {args.width}x{args.height}")
        sys.exit(1)
    service = GameService(auto_resolve=auto_resolve)
    service.new_board(args.width, args.height, seed=args.seed)
    return service


def _glyphs(args):
    return ASCII_GLYPHS if args.ascii else DEFAULT_GLYPHS


def cmd_play(args) -> int:
    """Render, read a move, apply it, report matches."""
    service = _new_service(args, auto_resolve=args.resolve)
    glyphs = _glyphs(args)

    print(render_board(service.board, glyphs))

    text = args.move
    if text is None:
        text = input(f"please enter a move in the format {MOVE_FORMAT}: ")

    response = service.submit_move(text)
    if not response.success:
        logger.info("Move failed: %s", response.error.message)
        print(f"sorry, that move does not lead to a valid position. ({response.error.message})")
        return 1

    turn = service.last_turn
    print(render_board(service.board, glyphs))

    if turn.compounds:
        print(f"🎉 this board contains {len(turn.compounds)} compound shapes! 🎉")
    print(render_shapes(turn.shapes))
    if turn.resolution is not None:
        print(f"cleared {len(turn.resolution.cleared)} cells, placed {len(turn.resolution.markers)} bombs")
    return 0


def cmd_show(args) -> int:
    service = _new_service(args)
    print(render_board(service.board, _glyphs(args)))
    return 0


def cmd_shapes(args) -> int:
    service = _new_service(args)
    if args.json:
        print(service.board_state().model_dump_json(indent=2))
        return 0
    print(render_board(service.board, _glyphs(args)))
    print(render_shapes(service.board.get_shapes()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
