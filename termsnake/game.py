"""
SnakeGame: owns the board, the fruit and the snake, and advances them one
tick at a time.
"""

import logging
import random
from typing import Optional, Tuple

from termsnake.domain.board import Board
from termsnake.domain.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FLOOR,
    FRUIT,
    INITIAL_SNAKE,
    LOST,
    RUNNING,
    WALL,
    WRAP,
)
from termsnake.domain.errors import GameOver
from termsnake.domain.game_state import GameState
from termsnake.domain.snake import Snake
from termsnake.services.canvas import Canvas

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - Snake
      - Fruit
      - Status (RUNNING -> LOST)
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        edge_policy: str = WRAP,
        reversal_guard: bool = True,
        snake: Optional[Snake] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        self.board = Board(width, height)
        self.rng = rng if rng is not None else random.Random(seed)

        if snake is None:
            if width < len(INITIAL_SNAKE) or self.board.size <= len(INITIAL_SNAKE):
                raise ValueError(
                    f"Board {width}x{height} is too small for the starting snake and a fruit."
                )
            snake = Snake(edge_policy=edge_policy, reversal_guard=reversal_guard)
        self.snake = snake
        # A snake handed in from outside carries its own rules
        self.edge_policy = snake.edge_policy

        self.status = RUNNING
        self.death_reason: Optional[str] = None
        self.tick = 0

        # The first fruit starts in the middle of the board
        self.fruit: Tuple[int, int] = self.board.center
        if self.snake.has_segment_at(self.fruit):
            self.respawn_fruit()

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def game_over(self) -> bool:
        return self.status == LOST

    @property
    def score(self) -> int:
        return self.snake.fruits_eaten

    def update(self) -> None:
        """
        Execute one tick:
          1) Lose if the head sits on the body
          2) Lose if the head left the board (wall policy)
          3) Grow if the head is on, or about to enter, the fruit cell
          4) Advance the snake
          5) Respawn an eaten fruit away from the moved snake

        Raises:
            GameOver: on loss, and on every call after the game is lost
        """
        if self.game_over:
            raise self._game_over_error()

        if self.snake.ate_itself():
            self.end_game("self")
        if self.edge_policy == WALL and self.snake.hit_edge(self.board):
            self.end_game("wall")

        # The first case only happens for a fruit placed under the head from outside
        eats_fruit = (
            self.snake.ate_fruit(self.fruit)
            or self.snake.next_head(self.board) == self.fruit
        )
        if eats_fruit:
            self.snake.add_segment()
            logger.debug("Fruit eaten at %s, score %s", self.fruit, self.score)

        self.snake.advance(self.board)
        self.tick += 1

        if eats_fruit:
            self.respawn_fruit()

    def respawn_fruit(self) -> None:
        """
        Move the fruit to a random cell not occupied by the snake.

        Sampling is retried until a free cell turns up. A snake covering the
        whole board leaves nowhere to go, which ends the game.
        """
        # Segments overlap for a tick after a bite, so count cells, not segments
        if len(set(self.snake.positions)) >= self.board.size:
            self.end_game("board_full")

        while True:
            cell = self.board.random_cell(self.rng)
            if not self.snake.has_segment_at(cell):
                self.fruit = cell
                logger.debug("Fruit respawned at %s", cell)
                return

    def set_fruit(self, position: Tuple[int, int]) -> None:
        """Place the fruit at a specific cell."""
        position = tuple(position)
        if not self.board.contains(position):
            raise ValueError(f"Fruit out of bounds at {position}.")
        if self.snake.has_segment_at(position):
            raise ValueError(f"Fruit would overlap the snake at {position}.")
        self.fruit = position

    def draw(self, canvas: Canvas) -> None:
        """
        Emit one frame: floor, fruit, score, then every snake segment.

        Later cells overdraw earlier ones, so the snake always shows on top.
        """
        for cell in self.board.cells():
            if cell == self.fruit or self.snake.has_segment_at(cell):
                continue
            canvas.draw_cell(cell, FLOOR)

        canvas.draw_cell(self.fruit, FRUIT)
        canvas.draw_score(self.score)

        for segment in self.snake.segments:
            canvas.draw_cell(segment.position, segment.kind)

        canvas.flush()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            segments=[(segment.position, segment.kind) for segment in self.snake.segments],
            direction=self.snake.direction,
            fruit=self.fruit,
            score=self.score,
            width=self.width,
            height=self.height,
            status=self.status,
            death_reason=self.death_reason,
            edge_policy=self.edge_policy
        )

    def print_board(self) -> str:
        return self.get_current_state().print_board()

    def end_game(self, reason: str) -> None:
        """Record the loss and raise GameOver."""
        self.status = LOST
        self.death_reason = reason
        logger.info(
            "Game over after %s ticks: %s (score %s)", self.tick, reason, self.score
        )
        raise self._game_over_error()

    def _game_over_error(self) -> GameOver:
        return GameOver(self.death_reason, score=self.score, ticks=self.tick)

    def __repr__(self):
        return (
            f"<SnakeGame {self.width}x{self.height} tick={self.tick} "
            f"score={self.score} status={self.status}>"
        )
