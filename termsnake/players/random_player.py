"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from termsnake.domain.constants import DELTAS, OPPOSITES, QUIT, VALID_MOVES, WRAP
from termsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction that avoids walls and self-collisions.

    It never asks for the exact reverse of the current direction, so it
    behaves the same whether or not the reversal guard is on.
    """

    def __init__(self, rng: Optional[random.Random] = None, quit_after: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random()
        # Ask to quit once the game has run this many ticks
        self.quit_after = quit_after

    def get_move(self, game_state: GameState, timeout: float = 0.0) -> Optional[str]:
        if self.quit_after is not None and game_state.tick >= self.quit_after:
            return QUIT

        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]

        # Filter out moves that:
        # 1. Double back into the neck
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITES[game_state.direction]:
                continue

            dx, dy = DELTAS[move]
            new_x, new_y = head_x + dx, head_y + dy

            if game_state.edge_policy == WRAP:
                new_x %= game_state.width
                new_y %= game_state.height
            elif (new_x < 0 or new_x >= game_state.width or
                  new_y < 0 or new_y >= game_state.height):
                continue

            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        # Prefer to keep heading the same way when that is safe
        if game_state.direction in valid_moves and self.rng.random() < 0.7:
            return game_state.direction

        return self.rng.choice(valid_moves)
