"""
Fixed-timestep loop driver.

Each iteration polls the player once (bounded by the poll timeout), runs at
most one game update when a full tick interval has elapsed, and draws one
frame regardless of whether anything changed.
"""

import logging
from typing import Any, Dict, Optional

from termsnake.domain.constants import (
    DEFAULT_POLL_MS,
    DEFAULT_TICK_MS,
    LOST,
    QUIT,
    VALID_MOVES,
)
from termsnake.domain.errors import GameOver
from termsnake.domain.timer import Timer
from termsnake.game import SnakeGame
from termsnake.players.base import Player
from termsnake.services.canvas import Canvas

logger = logging.getLogger(__name__)

# Result statuses
STATUS_LOST = LOST
STATUS_QUIT = "QUIT"
STATUS_STOPPED = "STOPPED"


def run_game(
    game: SnakeGame,
    player: Player,
    canvas: Canvas,
    timer: Optional[Timer] = None,
    tick_seconds: float = DEFAULT_TICK_MS / 1000,
    poll_seconds: float = DEFAULT_POLL_MS / 1000,
    max_ticks: Optional[int] = None
) -> Dict[str, Any]:
    """
    Drive a game until it is lost, the player quits, or max_ticks is reached.

    Args:
        game: The game to drive
        player: Input source polled once per iteration
        canvas: Draw sink receiving one frame per iteration
        timer: Pacing timer (a fresh Timer if omitted)
        tick_seconds: Interval between game updates; 0 updates every iteration
        poll_seconds: Upper bound on how long one input poll may block
        max_ticks: Stop after this many updates (headless runs)

    Returns:
        A dictionary summarizing the run (status, reason, score, ticks, length).

    Raises:
        IOFault: when the player or canvas fails; the loop stops immediately
    """
    if timer is None:
        timer = Timer()

    status = STATUS_STOPPED
    reason: Optional[str] = None

    canvas.clear()

    while True:
        timer.tick()

        # 1) input
        move = player.get_move(game.get_current_state(), poll_seconds)
        if move == QUIT:
            status = STATUS_QUIT
            reason = "quit"
            logger.info("Player quit after %s ticks", game.tick)
            break
        if move in VALID_MOVES:
            game.snake.set_direction(move)

        # 2) update at a fixed cadence
        delta = timer.delta()
        if delta is not None and delta >= tick_seconds:
            timer.reset()
            try:
                game.update()
            except GameOver as e:
                status = STATUS_LOST
                reason = e.reason
                game.draw(canvas)
                canvas.draw_message(f"Game over: {e.message}")
                canvas.flush()
                break

        # 3) draw every iteration
        game.draw(canvas)

        if max_ticks is not None and game.tick >= max_ticks:
            logger.info("Stopped after reaching %s ticks", max_ticks)
            break

    return {
        "status": status,
        "reason": reason,
        "score": game.score,
        "ticks": game.tick,
        "length": len(game.snake),
    }
