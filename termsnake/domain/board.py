"""
Board entity: the fixed-size grid the snake lives on.
"""

import random
from typing import Iterator, Tuple


class Board:
    """
    A width x height grid of cells addressed by (x, y).

    (0, 0) is the top-left cell; x grows to the right and y grows downwards.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)

    def contains(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every cell row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def random_cell(self, rng: random.Random) -> Tuple[int, int]:
        """Return a uniformly random cell (bounds inclusive of 0, exclusive of size)."""
        return (rng.randrange(self.width), rng.randrange(self.height))

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
