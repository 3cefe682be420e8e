# wander/cli.py
from __future__ import annotations
import argparse, logging, os, os.path, random
from typing import List, Optional

from .grid import GridGraph
from .loaders import Scenario, load_scenario, save_scenario
from .logging_utils import setup_logging
from .navigator import Navigator, Objective, RunStats
from .viz import draw_run_png

def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:20s} | reached={s.reached:3d} | impassable={s.impassable:3d} | "
            f"moves={s.moves:5d} | replans={s.replans:4d} | expansions={s.expansions:7d} | "
            f"time={s.elapsed_sec*1000:7.1f} ms")

def run_scenario(sc: Scenario, out_path: str, png: Optional[str] = None) -> Navigator:
    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    with open(out_path, "w") as f:
        nav = Navigator(sc.grid, sc.radius, sc.start, sink=lambda line: f.write(line + "\n"))
        nav.run(sc.objectives)
    if png:
        draw_run_png(sc.grid, nav.visibility, nav.stats.path_taken, png)
    return nav

def random_scenario(rows: int, cols: int, p_special: float, p_wall: float, types: List[int],
                    n_objectives: int, radius: int, p_offer: float, seed: Optional[int]) -> Scenario:
    grid = GridGraph.random(rows, cols, p_special=p_special, p_wall=p_wall,
                            special_types=types, seed=seed)
    rng = random.Random(None if seed is None else seed + 1)
    start = (0, 0)
    grid.node_types[0][0] = 0
    free = [c for c in grid.cells() if grid.node_types[c[0]][c[1]] != 1 and c != start]
    objectives: List[Objective] = []
    for _ in range(n_objectives):
        dest = rng.choice(free)
        grid.node_types[dest[0]][dest[1]] = 0
        offer = None
        if types and rng.random() < p_offer:
            offer = tuple(rng.sample(types, rng.randint(1, len(types))))
        objectives.append(Objective(dest, offer))
    return Scenario(grid, radius, start, objectives)

def _load(args: argparse.Namespace, nodes: str, edges: str, objectives: str) -> Scenario:
    try:
        return load_scenario(nodes, edges, objectives)
    except (OSError, ValueError) as e:
        args.parser.error(str(e))

# -------- subcommands --------

def cmd_run(args: argparse.Namespace) -> None:
    sc = _load(args, args.nodes, args.edges, args.objectives)
    nav = run_scenario(sc, args.out, png=args.png or None)
    print("wrote", args.out)
    print(format_stats(os.path.basename(args.objectives), nav.stats))

def cmd_gen(args: argparse.Namespace) -> None:
    types = [int(t) for t in args.types.split(",") if t.strip()]
    for i in range(args.count):
        seed = (args.seed + i) if args.seed is not None else None
        sc = random_scenario(args.rows, args.cols, args.p_special, args.p_wall, types,
                             args.objectives, args.radius, args.p_offer, seed)
        out_dir = os.path.join(args.out, f"scenario_{i:03d}") if args.count > 1 else args.out
        for path in save_scenario(sc, out_dir):
            print("wrote", path)

def cmd_demo(args: argparse.Namespace) -> None:
    d = args.dir
    sc = _load(args, os.path.join(d, "nodes.txt"), os.path.join(d, "edges.txt"), os.path.join(d, "objectives.txt"))
    out_dir = args.out or d
    nav = run_scenario(sc, os.path.join(out_dir, "output.txt"), png=os.path.join(out_dir, "run.png"))
    print(format_stats(os.path.basename(os.path.normpath(d)), nav.stats))

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fog-of-war grid navigation with delayed advisor offers")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", type=str, default="")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("run", help="run a scenario and write the event log")
    r.add_argument("nodes")
    r.add_argument("edges")
    r.add_argument("objectives")
    r.add_argument("out")
    r.add_argument("--png", type=str, default="", help="also render the run to this PNG")
    r.set_defaults(func=cmd_run)

    g = sub.add_parser("gen", help="generate random scenarios")
    g.add_argument("--count", type=int, default=1)
    g.add_argument("--rows", type=int, default=20)
    g.add_argument("--cols", type=int, default=20)
    g.add_argument("--p-special", type=float, default=0.15)
    g.add_argument("--p-wall", type=float, default=0.10)
    g.add_argument("--types", type=str, default="2,3,4", help="comma separated special types")
    g.add_argument("--objectives", type=int, default=5)
    g.add_argument("--radius", type=int, default=2)
    g.add_argument("--p-offer", type=float, default=0.3)
    g.add_argument("--out", type=str, default="scenarios")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    d = sub.add_parser("demo", help="run the scenario in a folder and save output.txt + run.png")
    d.add_argument("--dir", type=str, required=True)
    d.add_argument("--out", type=str, default="")
    d.set_defaults(func=cmd_demo)

    return p

def main(argv: Optional[List[str]] = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    args.parser = ap
    setup_logging(getattr(logging, args.log_level), log_file=args.log_file or None)
    args.func(args)
