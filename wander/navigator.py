# wander/navigator.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import logging
import time

from .types import Coord
from .grid import GridGraph
from .overrides import TypeOverrideSet, OPEN, WALL
from .knowledge import VisibilityField, within_radius
from .dijkstra import plan_path, shortest_distance, UNREACHABLE

logger = logging.getLogger(__name__)

# Logged and inserted when no offered type was eligible for a trial.
NONE_CHOSEN = -1

@dataclass
class Objective:
    destination: Coord
    offer: Optional[Tuple[int, ...]] = None  # consulted on the *next* objective

@dataclass
class RunStats:
    reached: int = 0
    impassable: int = 0
    abandoned: int = 0
    moves: int = 0
    replans: int = 0
    expansions: int = 0
    trials: int = 0
    chosen: List[int] = field(default_factory=list)
    elapsed_sec: float = 0.0
    path_taken: List[Coord] = field(default_factory=list)

class Navigator:
    """
    Walks a weighted grid under partial observability.

    Every objective runs PLAN -> TRACE -> ADVANCE or BLOCKED. A plan treats
    unrevealed cells as passable, so a traced path can contain risk cells:
    non-open cells whose type is not overridden. With no risk cells the whole
    path is walked. Otherwise the agent walks until one of them comes into
    sensor range, reports the path as impassable and plans again.
    """
    def __init__(self, grid: GridGraph, radius: float, start: Coord,
                 sink: Optional[Callable[[str], None]] = None,
                 overrides: Optional[TypeOverrideSet] = None):
        if not grid.in_bounds(start):
            raise IndexError(f"start {start} outside {grid.rows}x{grid.cols} grid")
        self.grid = grid
        self.radius = radius
        self.position: Coord = start
        self.objective = 1
        self.overrides = overrides if overrides is not None else TypeOverrideSet()
        self.visibility = VisibilityField(grid.rows, grid.cols)
        self.pending_offer: Optional[Tuple[int, ...]] = None
        self.sink = sink
        self.lines: List[str] = []
        self.stats = RunStats(path_taken=[start])

        self.visibility.reveal(start, radius)

    # ----------------- events -----------------
    def _emit(self, line: str) -> None:
        self.lines.append(line)
        if self.sink is not None:
            self.sink(line)

    def _move(self, c: Coord) -> None:
        self.position = c
        self.visibility.reveal(c, self.radius)
        self.stats.moves += 1
        self.stats.path_taken.append(c)
        self._emit(f"Moving to {c[0]}-{c[1]}")

    # ----------------- advisor offers -----------------
    def choose_offer(self, destination: Coord, offer: Optional[Sequence[int]] = None) -> int:
        """
        Trial every offered type that is not overridden yet and return the one
        giving the strictly smallest distance to destination; earlier offers
        win ties. NONE_CHOSEN if nothing was eligible.
        """
        candidates = self.pending_offer if offer is None else offer
        best = UNREACHABLE
        chosen = NONE_CHOSEN
        for t in candidates or ():
            if t == WALL or t in self.overrides:
                logger.debug("offer %d skipped (wall or already overridden)", t)
                continue
            with self.overrides.trial(t):
                d = shortest_distance(self.position, destination, self.grid, self.overrides, self.visibility)
            self.stats.trials += 1
            logger.debug("offer %d -> distance %.3f", t, d)
            if d < best:
                best = d
                chosen = t
        return chosen

    def _apply_pending_offer(self, destination: Coord) -> None:
        chosen = self.choose_offer(destination)
        self._emit(f"Number {chosen} is chosen!")
        self.overrides.add(chosen)
        self.stats.chosen.append(chosen)
        logger.info("objective %d: override set now %s", self.objective, self.overrides)

    # ----------------- travel -----------------
    def travel_to(self, destination: Coord, offer: Optional[Sequence[int]] = None) -> bool:
        """
        Process one objective. A pending offer from the previous objective is
        resolved first; the offer given here is kept for the next call.
        Returns True if the destination was reached.
        """
        if not self.grid.in_bounds(destination):
            raise IndexError(f"destination {destination} outside {self.grid.rows}x{self.grid.cols} grid")

        if self.pending_offer is not None:
            self._apply_pending_offer(destination)
        try:
            return self._travel(destination)
        finally:
            self.pending_offer = tuple(offer) if offer else None

    def _trace(self, parent, destination: Coord) -> Tuple[List[Coord], List[Coord]]:
        """Forward steps from the current position to destination, plus risk cells among them."""
        steps = [destination]
        risks: List[Coord] = []
        s = destination
        while True:
            prev = parent[s]
            if prev == self.position:
                break
            steps.append(prev)
            t = self.grid.node_types[prev[0]][prev[1]]
            if t != OPEN and t not in self.overrides:
                risks.append(prev)
            s = prev
        steps.reverse()
        return steps, risks

    def _risk_observed(self, risks: List[Coord]) -> bool:
        return any(within_radius(self.position, r, self.radius) for r in risks)

    def _travel(self, destination: Coord) -> bool:
        while True:
            plan = plan_path(self.position, destination, self.grid, self.overrides, self.visibility)
            self.stats.replans += 1
            self.stats.expansions += len(plan.expanded)

            if not plan.reached:
                logger.info("objective %d: %s unreachable from %s", self.objective, destination, self.position)
                self._emit("Path is impassable!")
                self.stats.impassable += 1
                self.stats.abandoned += 1
                return False

            steps, risks = self._trace(plan.parent, destination)
            logger.debug("objective %d: plan of %d steps, distance %.3f, %d risk cells",
                         self.objective, len(steps), plan.distance, len(risks))

            if not risks:
                for c in steps:
                    self._move(c)
                self._emit(f"Objective {self.objective} reached!")
                self.stats.reached += 1
                self.objective += 1
                return True

            revealed_before = self.visibility.revealed_count()
            observed = self._risk_observed(risks)
            for c in steps:
                if observed:
                    break
                self._move(c)
                observed = self._risk_observed(risks)

            self._emit("Path is impassable!")
            self.stats.impassable += 1

            if not observed or self.visibility.revealed_count() == revealed_before:
                # nothing new learned, another plan would be identical
                logger.warning("objective %d: no progress towards %s, giving up", self.objective, destination)
                self.stats.abandoned += 1
                return False
            logger.debug("objective %d: risk cell in sight at %s, replanning", self.objective, self.position)

    def run(self, objectives: Iterable[Objective]) -> RunStats:
        t0 = time.perf_counter()
        for obj in objectives:
            self.travel_to(obj.destination, obj.offer)
        self.stats.elapsed_sec += time.perf_counter() - t0
        return self.stats
