"""
Base player interface for the game loop.
"""

from typing import Optional

from termsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    The loop driver asks the player for at most one event per iteration,
    given the current game state and how long it may wait for one.
    """

    def get_move(self, game_state: GameState, timeout: float = 0.0) -> Optional[str]:
        """
        Return the next input event.

        Args:
            game_state: Current state of the game
            timeout: Seconds the player may block waiting for input

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None for no event
        """
        raise NotImplementedError
