"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import HEAD, RUNNING, WRAP

# Board symbols used by print_board()
FLOOR_CHAR = "."
FRUIT_CHAR = "F"
HEAD_CHAR = "O"
BODY_CHAR = "o"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: how many updates have run (0-based)
        segments: list of ((x, y), role) from head to tail
        direction: the snake's current direction
        fruit: (x, y) of the fruit
        score: fruits eaten so far
        width, height: board dimensions
        status: RUNNING or LOST
        edge_policy: WRAP or WALL
        death_reason: 'self', 'wall' or 'board_full' once lost
    """

    def __init__(
        self,
        tick: int,
        segments: List[Tuple[Tuple[int, int], str]],
        direction: str,
        fruit: Tuple[int, int],
        score: int,
        width: int,
        height: int,
        status: str = RUNNING,
        death_reason: Optional[str] = None,
        edge_policy: str = WRAP
    ):
        self.tick = tick
        self.segments = segments
        self.direction = direction
        self.fruit = fruit
        self.score = score
        self.width = width
        self.height = height
        self.status = status
        self.death_reason = death_reason
        self.edge_policy = edge_policy

    @property
    def snake_positions(self) -> List[Tuple[int, int]]:
        return [position for position, _ in self.segments]

    @property
    def head(self) -> Tuple[int, int]:
        return self.segments[0][0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = fruit
        O = snake head
        o = snake body
        Rows run top to bottom, matching the terminal layout.
        """
        board = [[FLOOR_CHAR for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.fruit
        board[fy][fx] = FRUIT_CHAR

        # Body first so the head wins if they overlap on a losing tick
        for (x, y), role in reversed(self.segments):
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = HEAD_CHAR if role == HEAD else BODY_CHAR

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, fruit={self.fruit}, "
            f"length={len(self.segments)}, score={self.score}, status={self.status}>"
        )
