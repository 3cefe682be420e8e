# wander/loaders.py
"""
Readers and writers for the three scenario files.

nodes:       ``rows cols`` then ``x y type`` triples (unlisted cells are type 0)
edges:       ``x1-y1,x2-y2 weight`` per line, applied in both directions
objectives:  ``radius`` and ``startX startY``, then ``destX destY [t1 t2 ...]``
             where the trailing integers are an offer for the following objective
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple
import logging
import os

from .types import Coord
from .grid import GridGraph
from .navigator import Objective

logger = logging.getLogger(__name__)

@dataclass
class Scenario:
    grid: GridGraph
    radius: int
    start: Coord
    objectives: List[Objective]

def _tokens(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for lineno, line in enumerate(lines, 1):
        for tok in line.split():
            yield lineno, tok

def _int(tok: str, lineno: int, source: str) -> int:
    try:
        return int(tok)
    except ValueError:
        raise ValueError(f"{source}:{lineno}: expected an integer, got {tok!r}") from None

def read_nodes(lines: Iterable[str], source: str = "<nodes>") -> GridGraph:
    toks = list(_tokens(lines))
    if len(toks) < 2:
        raise ValueError(f"{source}: missing grid size")
    rows = _int(toks[0][1], toks[0][0], source)
    cols = _int(toks[1][1], toks[1][0], source)
    if rows <= 0 or cols <= 0:
        raise ValueError(f"{source}:{toks[0][0]}: grid size must be positive, got {rows}x{cols}")
    grid = GridGraph.empty(rows, cols)

    body = toks[2:]
    if len(body) % 3:
        raise ValueError(f"{source}:{body[-1][0]}: incomplete node entry")
    for i in range(0, len(body), 3):
        (ln, xs), (_, ys), (_, ts) = body[i:i + 3]
        c = (_int(xs, ln, source), _int(ys, ln, source))
        if not grid.in_bounds(c):
            raise ValueError(f"{source}:{ln}: cell {c} outside {rows}x{cols} grid")
        grid.set_type(c, _int(ts, ln, source))
    return grid

def _parse_cell(text: str, lineno: int, source: str) -> Coord:
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"{source}:{lineno}: bad cell {text!r}")
    return (_int(parts[0], lineno, source), _int(parts[1], lineno, source))

def read_edges(lines: Iterable[str], grid: GridGraph, source: str = "<edges>") -> GridGraph:
    for lineno, line in enumerate(lines, 1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2 or fields[0].count(",") != 1:
            raise ValueError(f"{source}:{lineno}: expected 'x1-y1,x2-y2 weight', got {line.strip()!r}")
        left, right = fields[0].split(",")
        a = _parse_cell(left, lineno, source)
        b = _parse_cell(right, lineno, source)
        try:
            w = float(fields[1])
            grid.set_edge(a, b, w)
        except (ValueError, IndexError) as e:
            raise ValueError(f"{source}:{lineno}: {e}") from None
    return grid

def read_objectives(lines: Iterable[str], source: str = "<objectives>") -> Tuple[int, Coord, List[Objective]]:
    it = iter(lines)
    header: List[Tuple[int, str]] = []
    lineno = 0
    # radius and start may be spread over the first lines
    for line in it:
        lineno += 1
        header.extend((lineno, t) for t in line.split())
        if len(header) >= 3:
            break
    if len(header) != 3:
        raise ValueError(f"{source}:{lineno}: expected 'radius' and 'startX startY'")
    radius, sx, sy = (_int(t, ln, source) for ln, t in header)

    objectives: List[Objective] = []
    for line in it:
        lineno += 1
        fields = [_int(t, lineno, source) for t in line.split()]
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"{source}:{lineno}: objective needs 'destX destY'")
        offer: Optional[Tuple[int, ...]] = tuple(fields[2:]) or None
        objectives.append(Objective((fields[0], fields[1]), offer))
    return radius, (sx, sy), objectives

def load_scenario(nodes_path: str, edges_path: str, objectives_path: str) -> Scenario:
    with open(nodes_path, "r") as f:
        grid = read_nodes(f, nodes_path)
    with open(edges_path, "r") as f:
        read_edges(f, grid, edges_path)
    with open(objectives_path, "r") as f:
        radius, start, objectives = read_objectives(f, objectives_path)
    logger.info("loaded %dx%d grid, %d objectives, radius %d", grid.rows, grid.cols, len(objectives), radius)
    return Scenario(grid, radius, start, objectives)

def save_scenario(sc: Scenario, out_dir: str) -> Tuple[str, str, str]:
    os.makedirs(out_dir, exist_ok=True)
    nodes = os.path.join(out_dir, "nodes.txt")
    edges = os.path.join(out_dir, "edges.txt")
    objs = os.path.join(out_dir, "objectives.txt")
    g = sc.grid
    with open(nodes, "w") as f:
        f.write(f"{g.rows} {g.cols}\n")
        for x, y in g.cells():
            f.write(f"{x} {y} {g.node_types[x][y]}\n")
    with open(edges, "w") as f:
        for x, y in g.cells():
            for nb, d in (((x, y + 1), 2), ((x + 1, y), 3)):
                if g.in_bounds(nb):
                    f.write(f"{x}-{y},{nb[0]}-{nb[1]} {g.weights[x][y][d]:g}\n")
    with open(objs, "w") as f:
        f.write(f"{sc.radius}\n{sc.start[0]} {sc.start[1]}\n")
        for o in sc.objectives:
            extra = "".join(f" {t}" for t in o.offer) if o.offer else ""
            f.write(f"{o.destination[0]} {o.destination[1]}{extra}\n")
    return nodes, edges, objs
