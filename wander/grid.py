# wander/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple
import random
from .types import Coord, DIRECTIONS, DELTAS, opposite, step

@dataclass
class GridGraph:
    rows: int
    cols: int
    node_types: List[List[int]]        # 0=open, 1=wall, other=special
    weights: List[List[List[float]]]   # [x][y][direction] -> edge weight

    @staticmethod
    def empty(rows: int, cols: int) -> "GridGraph":
        types = [[0] * cols for _ in range(rows)]
        weights = [[[0.0, 0.0, 0.0, 0.0] for _ in range(cols)] for _ in range(rows)]
        return GridGraph(rows, cols, types, weights)

    @staticmethod
    def random(rows: int = 20, cols: int = 20, p_special: float = 0.15, p_wall: float = 0.10,
               special_types: Sequence[int] = (2, 3, 4), weight_range: Tuple[float, float] = (1.0, 5.0),
               seed: Optional[int] = None) -> "GridGraph":
        rng = random.Random(seed)
        g = GridGraph.empty(rows, cols)
        for x in range(rows):
            for y in range(cols):
                roll = rng.random()
                if roll < p_wall:
                    g.node_types[x][y] = 1
                elif roll < p_wall + p_special and special_types:
                    g.node_types[x][y] = rng.choice(list(special_types))
        lo, hi = weight_range
        for x in range(rows):
            for y in range(cols):
                # right and down only, set_edge fills the reverse direction
                for nb in ((x, y + 1), (x + 1, y)):
                    if g.in_bounds(nb):
                        g.set_edge((x, y), nb, round(rng.uniform(lo, hi), 2))
        return g

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.rows and 0 <= y < self.cols

    def _check(self, c: Coord) -> None:
        if not self.in_bounds(c):
            raise IndexError(f"cell {c} outside {self.rows}x{self.cols} grid")

    def node_type(self, c: Coord) -> int:
        self._check(c)
        x, y = c
        return self.node_types[x][y]

    def set_type(self, c: Coord, node_type: int) -> None:
        self._check(c)
        if node_type < 0:
            raise ValueError(f"node type must be non-negative, got {node_type}")
        x, y = c
        self.node_types[x][y] = node_type

    def weight(self, c: Coord, d: int) -> float:
        self._check(c)
        x, y = c
        return self.weights[x][y][d]

    def set_edge(self, a: Coord, b: Coord, w: float) -> None:
        """Assign weight w to both directed edges between adjacent cells a and b."""
        self._check(a)
        self._check(b)
        for d in DIRECTIONS:
            if step(a, d) == b:
                self.weights[a[0]][a[1]][d] = w
                self.weights[b[0]][b[1]][opposite(d)] = w
                return
        raise ValueError(f"cells {a} and {b} are not adjacent")

    def neighbor(self, c: Coord, d: int) -> Optional[Tuple[Coord, float]]:
        nb = step(c, d)
        if not self.in_bounds(nb):
            return None
        return nb, self.weights[c[0]][c[1]][d]

    def neighbors(self, c: Coord) -> Iterator[Tuple[int, Coord, float]]:
        x, y = c
        w = self.weights[x][y]
        for d, (dx, dy) in enumerate(DELTAS):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.rows and 0 <= ny < self.cols:
                yield d, (nx, ny), w[d]

    def cells(self) -> Iterator[Coord]:
        for x in range(self.rows):
            for y in range(self.cols):
                yield (x, y)
