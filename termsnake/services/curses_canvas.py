"""
Curses draw sink.

Each logical board column takes two terminal columns, with a one-column left
margin, so cell (x, y) is drawn at row y, column x * 2 + 1. The score sits to
the right of the board on the first row.
"""

import curses
from typing import Tuple

from termsnake.domain.constants import BODY, FLOOR, FRUIT, HEAD
from termsnake.domain.errors import IOFault
from .canvas import ROLE_CHARS, Canvas
from .terminal import PAIR_FLOOR, PAIR_FRUIT, PAIR_SCORE, PAIR_SNAKE


def cell_to_screen(position: Tuple[int, int]) -> Tuple[int, int]:
    """Return the (row, column) a board cell is drawn at."""
    x, y = position
    return (y, x * 2 + 1)


class CursesCanvas(Canvas):
    """Draws the game onto a curses window."""

    def __init__(self, window, width: int, height: int):
        self.window = window
        self.width = width
        self.height = height

        colors = curses.has_colors()
        self.attrs = {
            FLOOR: (curses.color_pair(PAIR_FLOOR) if colors else 0) | curses.A_DIM,
            FRUIT: (curses.color_pair(PAIR_FRUIT) if colors else 0) | curses.A_BOLD,
            HEAD: (curses.color_pair(PAIR_SNAKE) if colors else 0) | curses.A_BOLD,
            BODY: curses.color_pair(PAIR_SNAKE) if colors else 0,
        }
        self.score_attr = curses.color_pair(PAIR_SCORE) if colors else curses.A_BOLD

    def _write(self, row: int, col: int, text: str, attr: int) -> None:
        try:
            self.window.addstr(row, col, text, attr)
        except curses.error as e:
            raise IOFault(
                f"Failed to draw at row {row}, column {col} (terminal too small?)",
                cause=e,
            ) from e

    def clear(self) -> None:
        try:
            self.window.erase()
        except curses.error as e:
            raise IOFault(f"Failed to clear the terminal: {e}", cause=e) from e

    def draw_cell(self, position: Tuple[int, int], role: str) -> None:
        x, y = position
        # A wall-policy head can be one step off the board before the loss lands
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        row, col = cell_to_screen(position)
        self._write(row, col, ROLE_CHARS[role], self.attrs[role])

    def draw_score(self, score: int) -> None:
        self._write(0, self.width * 2 + 1, f"Score: {score}", self.score_attr)

    def draw_message(self, text: str) -> None:
        self._write(self.height + 1, 1, text, curses.A_BOLD)

    def flush(self) -> None:
        try:
            self.window.refresh()
        except curses.error as e:
            raise IOFault(f"Failed to refresh the terminal: {e}", cause=e) from e
