"""
Exceptions that end the game loop.
"""

from typing import Optional


LOSS_MESSAGES = {
    "self": "Snake ate itself",
    "wall": "Snake hit the wall",
    "board_full": "Board is full",
}


class GameOver(Exception):
    """
    The game reached a terminal outcome (self-collision, wall hit, full board).

    This is an intended result of play, not a fault.
    """

    def __init__(self, reason: str, score: int = 0, ticks: int = 0):
        self.reason = reason
        self.score = score
        self.ticks = ticks
        super().__init__(LOSS_MESSAGES.get(reason, reason))

    @property
    def message(self) -> str:
        return LOSS_MESSAGES.get(self.reason, self.reason)


class IOFault(Exception):
    """Reading input or writing to the draw sink failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
