import sys
from pathlib import Path
import pytest

# Ensure the repo root is on PYTHONPATH so `import wander` works in tests
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from wander.grid import GridGraph


def uniform_grid(rows, cols, weight=1.0, types=None):
    g = GridGraph.empty(rows, cols)
    for (x, y) in g.cells():
        for nb in ((x, y + 1), (x + 1, y)):
            if g.in_bounds(nb):
                g.set_edge((x, y), nb, weight)
    for c, t in (types or {}).items():
        g.set_type(c, t)
    return g


@pytest.fixture
def gate_grid():
    """3x3, gate of type 2 in the middle; edges touching the gate cost 1, all others 2."""
    g = uniform_grid(3, 3, weight=2.0, types={(1, 1): 2})
    for nb in ((0, 1), (1, 0), (1, 2), (2, 1)):
        g.set_edge((1, 1), nb, 1.0)
    return g
