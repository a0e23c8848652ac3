"""
Registry for input sources.

Maps player keys (e.g., 'keyboard', 'random') to player classes so the CLI
can pick one by name.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


# Lazy imports so headless runs never touch curses
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'keyboard', 'random', 'scripted'. If None or empty, returns keyboard.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "keyboard"

    player_key = player_key.strip()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> List[Dict[str, str]]:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "keyboard", "description": "Arrow keys or WASD; Esc or q quits"},
        {"key": "random", "description": "Autopilot that wanders while avoiding collisions"},
        {"key": "scripted", "description": "Replays a fixed list of events"},
    ]
