# wander/viz.py
from __future__ import annotations
import os
from typing import List, Optional, Tuple
try:
    from PIL import Image, ImageDraw
    PIL_AVAILABLE = True
except Exception:
    PIL_AVAILABLE = False

from .types import Coord
from .grid import GridGraph
from .knowledge import VisibilityField

WALL_COLOR = (0, 0, 0)
OPEN_COLOR = (240, 240, 240)
TRAIL_COLOR = (160, 190, 255)
START_COLOR = (100, 220, 120)
END_COLOR = (255, 170, 80)
SPECIAL_PALETTE = [
    (200, 120, 200), (120, 200, 200), (200, 200, 120),
    (220, 140, 110), (140, 110, 220), (110, 220, 140),
]

def type_color(t: int) -> Tuple[int, int, int]:
    if t == 0:
        return OPEN_COLOR
    if t == 1:
        return WALL_COLOR
    return SPECIAL_PALETTE[(t - 2) % len(SPECIAL_PALETTE)]

def shade(color: Tuple[int, int, int], factor: float = 0.45) -> Tuple[int, int, int]:
    return tuple(int(v * factor) for v in color)

def draw_run_png(grid: GridGraph,
                 visibility: Optional[VisibilityField],
                 trail: Optional[List[Coord]],
                 out_png: str,
                 cell: int = 10) -> bool:
    if not PIL_AVAILABLE:
        print("Pillow not installed; skipping PNG:", out_png)
        return False

    W, H = grid.cols * cell, grid.rows * cell
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    # terrain, darkened where the agent never looked
    for x in range(grid.rows):
        for y in range(grid.cols):
            x0, y0 = y * cell, x * cell
            color = type_color(grid.node_types[x][y])
            if visibility is not None and not visibility.is_revealed((x, y)):
                color = shade(color)
            drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=color)

    if trail:
        inset = max(1, cell // 4)
        for (x, y) in trail:
            x0, y0 = y * cell, x * cell
            drw.rectangle((x0 + inset, y0 + inset, x0 + cell - 1 - inset, y0 + cell - 1 - inset), fill=TRAIL_COLOR)
        for (x, y), color in ((trail[0], START_COLOR), (trail[-1], END_COLOR)):
            drw.rectangle((y * cell, x * cell, y * cell + cell - 1, x * cell + cell - 1), fill=color)

    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)
    return True
