"""
Draw sinks for the game.

A canvas receives (position, role) pairs for floor, fruit and snake cells plus
the score, and shows them however it likes. SnakeGame.draw() emits cells in
overdraw order: floor first, then fruit, then score, then the snake.
"""

from typing import Dict, List, Optional, Tuple

from termsnake.domain.constants import BODY, FLOOR, FRUIT, HEAD
from termsnake.domain.game_state import BODY_CHAR, FLOOR_CHAR, FRUIT_CHAR, HEAD_CHAR

ROLE_CHARS: Dict[str, str] = {
    FLOOR: FLOOR_CHAR,
    FRUIT: FRUIT_CHAR,
    HEAD: HEAD_CHAR,
    BODY: BODY_CHAR,
}


class Canvas:
    """
    Base class/interface for draw sinks.

    Implementations raise IOFault when the underlying output fails.
    """

    def clear(self) -> None:
        raise NotImplementedError

    def draw_cell(self, position: Tuple[int, int], role: str) -> None:
        raise NotImplementedError

    def draw_score(self, score: int) -> None:
        raise NotImplementedError

    def draw_message(self, text: str) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        """Push everything drawn since the last flush to the output."""


class TextCanvas(Canvas):
    """
    In-memory canvas used for headless runs and tests.

    Cells outside the board are ignored, like the terminal canvas does.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid: List[List[str]] = []
        self.score: Optional[int] = None
        self.messages: List[str] = []
        self.frames = 0
        self.clear()

    def clear(self) -> None:
        self.grid = [[" " for _ in range(self.width)] for _ in range(self.height)]

    def draw_cell(self, position: Tuple[int, int], role: str) -> None:
        x, y = position
        if 0 <= x < self.width and 0 <= y < self.height:
            self.grid[y][x] = ROLE_CHARS[role]

    def draw_score(self, score: int) -> None:
        self.score = score

    def draw_message(self, text: str) -> None:
        self.messages.append(text)

    def flush(self) -> None:
        self.frames += 1

    def render(self) -> str:
        """Return the grid as text with the score on the first line."""
        lines = ["".join(row) for row in self.grid]
        if self.score is not None and lines:
            lines[0] = f"{lines[0]}  Score: {self.score}"
        return "\n".join(lines)
