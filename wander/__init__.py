# wander/__init__.py
from .types import Coord
from .grid import GridGraph
from .overrides import TypeOverrideSet
from .knowledge import VisibilityField, within_radius
from .dijkstra import plan_path, shortest_distance, traversable, PlanResult, UNREACHABLE
from .navigator import Navigator, Objective, RunStats, NONE_CHOSEN
from .loaders import Scenario, read_nodes, read_edges, read_objectives, load_scenario, save_scenario
from .viz import draw_run_png

__all__ = [
    "Coord", "GridGraph", "TypeOverrideSet", "VisibilityField", "within_radius",
    "plan_path", "shortest_distance", "traversable", "PlanResult", "UNREACHABLE",
    "Navigator", "Objective", "RunStats", "NONE_CHOSEN",
    "Scenario", "read_nodes", "read_edges", "read_objectives", "load_scenario", "save_scenario",
    "draw_run_png",
]
