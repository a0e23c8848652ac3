"""
Player implementations for termsnake.

This module contains the input-source abstraction and the implementations
that steer the snake: the keyboard, a random autopilot and a scripted feed.
The keyboard player is loaded lazily through the registry since it needs
curses.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
