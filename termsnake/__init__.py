"""
termsnake - Snake in the terminal.

The game engine (domain, game, loop) is independent of curses; the terminal
adapters live in services/ and players/keyboard_player.py.
"""

from .game import SnakeGame
from .loop import run_game

__version__ = "0.1.0"

__all__ = [
    'SnakeGame',
    'run_game',
]
