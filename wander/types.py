# wander/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (x, y) == (row, col)

# Direction indices for per-cell edge weights.
LEFT, UP, RIGHT, DOWN = 0, 1, 2, 3
DIRECTIONS = (LEFT, UP, RIGHT, DOWN)
DELTAS = ((0, -1), (-1, 0), (0, 1), (1, 0))

def opposite(d: int) -> int:
    return (d + 2) % 4

def step(c: Coord, d: int) -> Coord:
    dx, dy = DELTAS[d]
    return (c[0] + dx, c[1] + dy)
