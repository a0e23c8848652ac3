"""
Game constants for termsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Input event that ends the game loop
QUIT = "QUIT"

# (dx, dy) per direction; y grows downwards like terminal rows
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Segment roles
HEAD = "HEAD"
BODY = "BODY"

# Cell roles understood by draw sinks
FLOOR = "FLOOR"
FRUIT = "FRUIT"

# Edge policies
WRAP = "wrap"
WALL = "wall"
EDGE_POLICIES = {WRAP, WALL}

# Game status
RUNNING = "RUNNING"
LOST = "LOST"

# Defaults
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_TICK_MS = 100
DEFAULT_POLL_MS = 10
INITIAL_SNAKE = [(2, 0), (1, 0), (0, 0)]
INITIAL_DIRECTION = RIGHT
