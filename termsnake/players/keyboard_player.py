"""
Keyboard player - reads arrow keys / WASD from a curses window.
"""

import curses
from typing import Dict, Optional

from termsnake.domain.constants import DOWN, LEFT, QUIT, RIGHT, UP
from termsnake.domain.errors import IOFault
from termsnake.domain.game_state import GameState
from .base import Player

ESC = 27
CTRL_C = 3

KEY_BINDINGS: Dict[int, str] = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord("w"): UP,
    ord("W"): UP,
    ord("s"): DOWN,
    ord("S"): DOWN,
    ord("a"): LEFT,
    ord("A"): LEFT,
    ord("d"): RIGHT,
    ord("D"): RIGHT,
    ESC: QUIT,
    CTRL_C: QUIT,
    ord("q"): QUIT,
    ord("Q"): QUIT,
}


class KeyboardPlayer(Player):
    """
    Maps key presses on a curses window to input events.

    Unrecognised keys (and no key at all) produce None, unless a fallback
    player is given: then it steers whenever no key was pressed, and the
    keyboard can still take over or quit.
    """

    def __init__(self, window, fallback: Optional[Player] = None):
        self.window = window
        self.fallback = fallback

    def get_move(self, game_state: GameState, timeout: float = 0.0) -> Optional[str]:
        try:
            # curses wants whole milliseconds; 0 means non-blocking
            self.window.timeout(max(0, int(timeout * 1000)))
            key = self.window.getch()
        except curses.error as e:
            raise IOFault(f"Failed to read input: {e}", cause=e) from e

        if key == -1:
            if self.fallback is not None:
                return self.fallback.get_move(game_state, 0.0)
            return None
        return KEY_BINDINGS.get(key)
