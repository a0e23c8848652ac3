"""
Scripted player - replays a fixed list of input events.
"""

from collections import deque
from typing import Iterable, Optional

from termsnake.domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the queued events one per call, then None forever.

    Useful for tests and demos where input has to be reproducible.
    """

    def __init__(self, events: Iterable[Optional[str]] = ()):
        self.events = deque(events)

    def get_move(self, game_state: GameState, timeout: float = 0.0) -> Optional[str]:
        if not self.events:
            return None
        return self.events.popleft()
