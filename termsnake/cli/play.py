#!/usr/bin/env python3
"""
Play Snake in the terminal.

Usage:
    termsnake
    termsnake --wall --tick-ms 80
    termsnake --player random --headless --max-ticks 500 --seed 7

Examples:
    # Classic game on a 20x20 board where the snake wraps around the edges
    termsnake

    # Walls are deadly; doubling back is allowed (and fatal)
    termsnake --wall --no-reversal-guard

    # Let the autopilot play without a terminal and print the result
    termsnake --player random --headless --max-ticks 1000

Keys: arrows or WASD to steer, Esc or q to quit.
Settings can also come from TERMSNAKE_* environment variables or a .env file.
"""

import argparse
import json
import logging
import random
import sys
from typing import Any, Dict, List, Optional

from termsnake.config import GameConfig, load_config
from termsnake.domain.constants import WALL
from termsnake.domain.errors import IOFault, LOSS_MESSAGES
from termsnake.game import SnakeGame
from termsnake.loop import STATUS_LOST, STATUS_QUIT, run_game
from termsnake.players.registry import AVAILABLE_PLAYERS, get_player_class, list_players
from termsnake.services.canvas import TextCanvas

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='termsnake',
        description='Terminal Snake',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=int, help='Board width in cells (default 20)')
    parser.add_argument('--height', type=int, help='Board height in cells (default 20)')
    parser.add_argument('--tick-ms', type=int, help='Milliseconds between snake moves (default 100)')
    parser.add_argument('--poll-ms', type=int, help='Longest wait for a key press per frame (default 10)')
    parser.add_argument('--wall', action='store_true',
                        help='Leaving the board loses instead of wrapping around')
    parser.add_argument('--no-reversal-guard', action='store_true',
                        help='Allow turning straight back into the snake')
    parser.add_argument('--seed', type=int, help='Seed for fruit placement and the autopilot')
    parser.add_argument('--player', choices=AVAILABLE_PLAYERS, default='keyboard',
                        help='Who steers the snake (default keyboard)')
    parser.add_argument('--list-players', action='store_true', help='List players and exit')
    parser.add_argument('--headless', action='store_true',
                        help='Run without a terminal UI and print the final board')
    parser.add_argument('--max-ticks', type=int, help='Stop after this many moves')
    parser.add_argument('--log-level', help='Logging level (default INFO)')
    parser.add_argument('--log-file', help='Write logs to this file')
    return parser


def configure_logging(config: GameConfig, headless: bool) -> None:
    """
    Set up logging once for the process.

    curses owns the screen during play, so logs only go to a file then;
    headless runs may log to stderr.
    """
    if config.log_file:
        handlers: List[logging.Handler] = [logging.FileHandler(config.log_file)]
    elif headless:
        handlers = [logging.StreamHandler(sys.stderr)]
    else:
        handlers = [logging.NullHandler()]

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, handlers=handlers)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return load_config(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        poll_ms=args.poll_ms,
        edge_policy=WALL if args.wall else None,
        reversal_guard=False if args.no_reversal_guard else None,
        seed=args.seed,
        log_level=args.log_level.upper() if args.log_level else None,
        log_file=args.log_file,
    )


def run_headless(game: SnakeGame, config: GameConfig, args: argparse.Namespace) -> Dict[str, Any]:
    """Play with the autopilot (or a scripted feed) on an in-memory canvas."""
    if args.player == 'keyboard':
        raise ValueError("The keyboard player needs a terminal; use --player random with --headless")

    player = get_player_class(args.player)(**_player_kwargs(args.player, config))
    canvas = TextCanvas(config.width, config.height)

    # Every iteration is one tick; there is no human to pace for
    result = run_game(
        game,
        player,
        canvas,
        tick_seconds=0.0,
        poll_seconds=0.0,
        max_ticks=args.max_ticks if args.max_ticks is not None else 1000,
    )
    result["board"] = game.print_board()
    return result


def run_terminal(game: SnakeGame, config: GameConfig, args: argparse.Namespace) -> Dict[str, Any]:
    """Play in the terminal; the session is restored before this returns."""
    from termsnake.players.keyboard_player import KeyboardPlayer
    from termsnake.services.curses_canvas import CursesCanvas
    from termsnake.services.terminal import terminal_session

    fallback = None
    if args.player != 'keyboard':
        fallback = get_player_class(args.player)(**_player_kwargs(args.player, config))

    with terminal_session() as stdscr:
        canvas = CursesCanvas(stdscr, config.width, config.height)
        player = KeyboardPlayer(stdscr, fallback=fallback)
        return run_game(
            game,
            player,
            canvas,
            tick_seconds=config.tick_seconds,
            poll_seconds=config.poll_seconds,
            max_ticks=args.max_ticks,
        )


def _player_kwargs(player_key: str, config: GameConfig) -> Dict[str, Any]:
    if player_key == 'random':
        return {"rng": random.Random(config.seed)}
    return {}


def format_result(result: Dict[str, Any]) -> str:
    if result["status"] == STATUS_LOST:
        message = LOSS_MESSAGES.get(result["reason"], result["reason"])
        return f"Game over: {message}. Score: {result['score']}"
    if result["status"] == STATUS_QUIT:
        return f"Quit. Score: {result['score']}"
    return f"Stopped after {result['ticks']} ticks. Score: {result['score']}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_players:
        for player in list_players():
            print(f"{player['key']:<10} {player['description']}")
        return 0

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(config, headless=args.headless)
    logger.info(
        "Starting %sx%s game (edge=%s, reversal_guard=%s, tick=%sms, player=%s)",
        config.width, config.height, config.edge_policy,
        config.reversal_guard, config.tick_ms, args.player,
    )

    try:
        game = SnakeGame(
            width=config.width,
            height=config.height,
            edge_policy=config.edge_policy,
            reversal_guard=config.reversal_guard,
            seed=config.seed,
        )
        if args.headless:
            result = run_headless(game, config, args)
        else:
            result = run_terminal(game, config, args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except IOFault as e:
        logger.exception("Terminal I/O failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.")
        return 130

    if args.headless:
        print(result["board"])
        print(json.dumps({k: v for k, v in result.items() if k != "board"}, indent=2))
    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
