"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal concerns (curses, raw input, drawing).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT, HEAD, BODY, WRAP, WALL
from .errors import GameOver, IOFault
from .board import Board
from .snake import Segment, Snake
from .timer import Timer
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT', 'HEAD', 'BODY', 'WRAP', 'WALL',
    'GameOver', 'IOFault',
    'Board',
    'Segment', 'Snake',
    'Timer',
    'GameState',
]
