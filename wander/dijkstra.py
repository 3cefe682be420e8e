# wander/dijkstra.py
from __future__ import annotations
from typing import Dict, List, Optional, Set, Tuple
import heapq
from .types import Coord
from .grid import GridGraph
from .overrides import TypeOverrideSet, OPEN, WALL
from .knowledge import VisibilityField

UNREACHABLE = 1e9

def traversable(grid: GridGraph, overrides: TypeOverrideSet, vis: VisibilityField, c: Coord) -> bool:
    """
    Planning rule for entering cell c.
    Walls never; open cells, overridden types and unrevealed cells always.
    """
    t = grid.node_types[c[0]][c[1]]
    if t == WALL:
        return False
    return t == OPEN or t in overrides or not vis.is_revealed(c)

class PlanResult:
    def __init__(self, source: Coord, destination: Coord, parent: Dict[Coord, Coord],
                 distance: float, expanded: Set[Coord]):
        self.source = source
        self.destination = destination
        self.parent = parent
        self.distance = distance
        self.expanded = expanded

    @property
    def reached(self) -> bool:
        return self.destination in self.parent

    def path_to(self, target: Optional[Coord] = None) -> Optional[List[Coord]]:
        """Forward path [source, ..., target] following the parent map, or None."""
        s = self.destination if target is None else target
        if s not in self.parent:
            return None
        path = [s]
        while s != self.source:
            s = self.parent[s]
            path.append(s)
        path.reverse()
        return path

def plan_path(
    source: Coord,
    destination: Coord,
    grid: GridGraph,
    overrides: TypeOverrideSet,
    vis: VisibilityField,
) -> PlanResult:
    """
    Dijkstra over the agent's current knowledge.
    Unknown cells are assumed passable; walls and revealed, non-overridden specials are not.
    Stops once the destination is settled.
    """
    openh: List[Tuple[float, int, Coord]] = []
    dist: Dict[Coord, float] = {source: 0.0}
    parent: Dict[Coord, Coord] = {source: source}
    closed: Set[Coord] = set()
    counter = 0

    heapq.heappush(openh, (0.0, counter, source))
    counter += 1

    while openh:
        d, _, s = heapq.heappop(openh)
        if s in closed:
            continue
        closed.add(s)

        if s == destination:
            break

        for _, nb, w in grid.neighbors(s):
            # never step straight back to where we came from
            if parent[s] == nb:
                continue
            if not traversable(grid, overrides, vis, nb):
                continue
            tentative = d + w
            if tentative < dist.get(nb, UNREACHABLE):
                dist[nb] = tentative
                parent[nb] = s
                heapq.heappush(openh, (tentative, counter, nb))
                counter += 1

    return PlanResult(source, destination, parent, dist.get(destination, UNREACHABLE), closed)

def shortest_distance(
    source: Coord,
    destination: Coord,
    grid: GridGraph,
    overrides: TypeOverrideSet,
    vis: VisibilityField,
) -> float:
    """Same search as plan_path without the parent map; UNREACHABLE if destination is cut off."""
    openh: List[Tuple[float, int, Coord]] = [(0.0, 0, source)]
    dist: Dict[Coord, float] = {source: 0.0}
    closed: Set[Coord] = set()
    counter = 1

    while openh:
        d, _, s = heapq.heappop(openh)
        if s in closed:
            continue
        closed.add(s)

        if s == destination:
            return d

        for _, nb, w in grid.neighbors(s):
            if not traversable(grid, overrides, vis, nb):
                continue
            tentative = d + w
            if tentative < dist.get(nb, UNREACHABLE):
                dist[nb] = tentative
                heapq.heappush(openh, (tentative, counter, nb))
                counter += 1

    return dist.get(destination, UNREACHABLE)
