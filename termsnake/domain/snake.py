"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board
from .constants import (
    BODY,
    DELTAS,
    EDGE_POLICIES,
    HEAD,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    OPPOSITES,
    VALID_MOVES,
    WRAP,
)


@dataclass
class Segment:
    """One cell of the snake's body, tagged HEAD or BODY."""

    x: int
    y: int
    kind: str = BODY

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class Snake:
    """
    Represents the player's snake.

    Attributes:
        segments: list of Segment, head at index 0, tail at the end
        direction: one of UP, DOWN, LEFT, RIGHT
        edge_policy: WRAP (coordinates wrap around) or WALL (leaving the board loses)
        reversal_guard: reject direction changes that double back into the neck
        growth_pending: a segment will be appended on the next advance()
    """

    def __init__(
        self,
        positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = INITIAL_DIRECTION,
        edge_policy: str = WRAP,
        reversal_guard: bool = True,
    ):
        if positions is None:
            positions = INITIAL_SNAKE
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        if edge_policy not in EDGE_POLICIES:
            raise ValueError(f"Unknown edge policy {edge_policy!r}.")

        self.segments: List[Segment] = [
            Segment(x, y, HEAD if i == 0 else BODY)
            for i, (x, y) in enumerate(positions)
        ]
        self.direction = direction
        self.edge_policy = edge_policy
        self.reversal_guard = reversal_guard
        self.growth_pending = False
        self._fruits_eaten = 0

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.segments[0].position

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [segment.position for segment in self.segments]

    @property
    def fruits_eaten(self) -> int:
        return self._fruits_eaten

    def __len__(self) -> int:
        return len(self.segments)

    def next_head(self, board: Board) -> Tuple[int, int]:
        """
        Position the head will occupy after the next advance().

        Under the wall policy the result may lie outside the board; that is
        reported by hit_edge() rather than clamped or wrapped here.
        """
        dx, dy = DELTAS[self.direction]
        x, y = self.head
        x, y = x + dx, y + dy

        if self.edge_policy == WRAP:
            x %= board.width
            y %= board.height

        return (x, y)

    def advance(self, board: Board) -> None:
        """
        Move the snake one cell in its current direction.

        Every segment behind the head takes the position its predecessor held
        before the move. If growth is pending, a new body segment is appended
        at the old tail position instead of that position being dropped.
        """
        old_positions = self.positions
        new_head = self.next_head(board)

        # Shift body toward the head
        for i in range(len(self.segments) - 1, 0, -1):
            self.segments[i].x, self.segments[i].y = old_positions[i - 1]

        if self.growth_pending:
            tail_x, tail_y = old_positions[-1]
            self.segments.append(Segment(tail_x, tail_y, BODY))
            self.growth_pending = False

        head = self.segments[0]
        head.x, head.y = new_head

    def add_segment(self) -> None:
        """Count a fruit and grow by one segment on the next advance()."""
        self._fruits_eaten += 1
        self.growth_pending = True

    def set_direction(self, direction: str) -> None:
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        # Doubling back would put the head straight onto the neck
        if self.reversal_guard and direction == OPPOSITES[self.direction]:
            return
        self.direction = direction

    def ate_fruit(self, fruit_position: Tuple[int, int]) -> bool:
        return self.head == tuple(fruit_position)

    def ate_itself(self) -> bool:
        head = self.head
        return any(
            segment.kind == BODY and segment.position == head
            for segment in self.segments
        )

    def hit_edge(self, board: Board) -> bool:
        """
        True when the head has left the board on any side.

        Only the wall policy can get here; wrapped heads always stay on the board.
        """
        return not board.contains(self.head)

    def has_segment_at(self, position: Tuple[int, int]) -> bool:
        position = tuple(position)
        return any(segment.position == position for segment in self.segments)

    def __repr__(self):
        return (
            f"<Snake head={self.head} length={len(self.segments)} "
            f"direction={self.direction} fruits={self._fruits_eaten}>"
        )
