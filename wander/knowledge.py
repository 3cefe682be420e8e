# wander/knowledge.py
from __future__ import annotations
import math
from typing import Iterator, List
from .types import Coord

def within_radius(position: Coord, cell: Coord, radius: float) -> bool:
    return math.hypot(position[0] - cell[0], position[1] - cell[1]) <= radius

class VisibilityField:
    """
    Agent's knowledge of the map:
    - a cell's true type is known once it has been inside the sensor radius
    - revealed cells never go back to unknown
    """
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._revealed: List[List[bool]] = [[False] * cols for _ in range(rows)]
        self._count = 0

    within_radius = staticmethod(within_radius)

    def is_revealed(self, c: Coord) -> bool:
        x, y = c
        return self._revealed[x][y]

    def reveal(self, position: Coord, radius: float) -> int:
        """Reveal every in-grid cell within radius of position; returns how many were new."""
        px, py = position
        r = int(math.floor(radius))
        new = 0
        for x in range(max(0, px - r), min(self.rows - 1, px + r) + 1):
            row = self._revealed[x]
            for y in range(max(0, py - r), min(self.cols - 1, py + r) + 1):
                if not row[y] and within_radius(position, (x, y), radius):
                    row[y] = True
                    new += 1
        self._count += new
        return new

    def revealed_count(self) -> int:
        return self._count

    def revealed_cells(self) -> Iterator[Coord]:
        for x in range(self.rows):
            for y in range(self.cols):
                if self._revealed[x][y]:
                    yield (x, y)
