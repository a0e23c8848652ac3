"""
Scoped terminal session.

Entering the session takes over the terminal: cursor hidden, raw unbuffered
input without echo, keypad decoding for arrow keys. Leaving it restores
cursor visibility and normal input mode, whether the block finished, raised,
or the process received SIGTERM.
"""

import curses
import logging
import os
import signal
from contextlib import contextmanager
from typing import Iterator

from termsnake.domain.errors import IOFault

logger = logging.getLogger(__name__)

# Color pair numbers used by CursesCanvas
PAIR_FLOOR = 1
PAIR_FRUIT = 2
PAIR_SNAKE = 3
PAIR_SCORE = 4


def _raise_system_exit(signum, frame):
    raise SystemExit(128 + signum)


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_FLOOR, curses.COLOR_WHITE, -1)
    curses.init_pair(PAIR_FRUIT, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_SNAKE, curses.COLOR_WHITE, -1)
    curses.init_pair(PAIR_SCORE, curses.COLOR_CYAN, -1)


def _set_cursor(visibility: int) -> None:
    try:
        curses.curs_set(visibility)
    except curses.error:
        # Some terminals (e.g. dumb ones) cannot change cursor visibility
        logger.debug("Terminal does not support cursor visibility %s", visibility)


@contextmanager
def terminal_session() -> Iterator["curses.window"]:
    """
    Take over the terminal for the duration of the block.

    Yields:
        The curses standard screen.

    Raises:
        IOFault: if the terminal cannot be initialised
    """
    # Report a lone Esc quickly instead of waiting for an escape sequence
    os.environ.setdefault("ESCDELAY", "25")

    try:
        stdscr = curses.initscr()
    except curses.error as e:
        raise IOFault(f"Could not initialise the terminal: {e}", cause=e) from e

    previous_handler = signal.signal(signal.SIGTERM, _raise_system_exit)
    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        _set_cursor(0)
        _init_colors()
        logger.debug("Terminal session started")
        yield stdscr
    except curses.error as e:
        raise IOFault(f"Terminal setup failed: {e}", cause=e) from e
    finally:
        signal.signal(signal.SIGTERM, previous_handler)
        stdscr.keypad(False)
        curses.noraw()
        curses.echo()
        _set_cursor(1)
        curses.endwin()
        logger.debug("Terminal session restored")
