# wander/pygame_viewer.py (replay + fog-of-war)
from __future__ import annotations
import argparse
import os
from dataclasses import dataclass
from typing import List, Set

import pygame

from .types import Coord
from .grid import GridGraph
from .knowledge import VisibilityField
from .loaders import Scenario, load_scenario
from .navigator import Navigator
from .viz import type_color

@dataclass
class Colors:
    BG = (18, 18, 22)
    PLAYER = (220, 90, 90)
    GOAL = (90, 160, 220)
    TRAIL = (70, 170, 110)
    GRID = (60, 60, 70)

class Viewer:
    """
    Replays a finished navigator run one step at a time.
    Cells stay fogged until the replayed agent has had them in its radius.
    """
    def __init__(self, scenario: Scenario, nav: Navigator, cell_size: int = 28,
                 fps: int = 60, speed: float = 6.0):
        self.scenario = scenario
        self.grid: GridGraph = scenario.grid
        self.trail: List[Coord] = nav.stats.path_taken
        self.goals: Set[Coord] = {o.destination for o in scenario.objectives}
        self.cell = cell_size
        self.fps = fps
        self.speed_tiles_per_sec = speed
        self.fog_alpha = 200

        self.autoplay = False
        self.show_grid = False
        self._step_timer = 0.0

        W, H = self.grid.cols * self.cell, self.grid.rows * self.cell
        self.screen = pygame.display.set_mode((W, H), pygame.SCALED)
        pygame.display.set_caption("wander replay")
        self.clock = pygame.time.Clock()
        self._reset_state()

    def _recalculate_step_interval(self) -> None:
        self._step_interval = 1.0 / self.speed_tiles_per_sec

    def _reset_state(self) -> None:
        self.index = 0
        self.visibility = VisibilityField(self.grid.rows, self.grid.cols)
        self.visibility.reveal(self.trail[0], self.scenario.radius)
        self._recalculate_step_interval()

    def step(self) -> bool:
        if self.index + 1 >= len(self.trail):
            return False
        self.index += 1
        self.visibility.reveal(self.trail[self.index], self.scenario.radius)
        return True

    # ----------------- draw -----------------
    def draw(self) -> None:
        cell = self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        for x in range(self.grid.rows):
            for y in range(self.grid.cols):
                rect = pygame.Rect(y * cell, x * cell, cell, cell)
                scr.fill(type_color(self.grid.node_types[x][y]), rect)

        for (x, y) in self.trail[: self.index + 1]:
            rect = pygame.Rect(y * cell + cell // 4, x * cell + cell // 4, cell // 2, cell // 2)
            pygame.draw.rect(scr, Colors.TRAIL, rect, border_radius=4)

        for (x, y) in self.goals:
            goal_rect = pygame.Rect(y * cell + 4, x * cell + 4, cell - 8, cell - 8)
            pygame.draw.rect(scr, Colors.GOAL, goal_rect, width=3, border_radius=6)

        px, py = self.trail[self.index]
        player_rect = pygame.Rect(py * cell + 6, px * cell + 6, cell - 12, cell - 12)
        pygame.draw.rect(scr, Colors.PLAYER, player_rect, border_radius=8)

        fog = pygame.Surface((self.grid.cols * cell, self.grid.rows * cell), pygame.SRCALPHA)
        for (x, y) in self.grid.cells():
            if not self.visibility.is_revealed((x, y)):
                fog.fill((0, 0, 0, self.fog_alpha), pygame.Rect(y * cell, x * cell, cell, cell))
        scr.blit(fog, (0, 0))

        if self.show_grid:
            for i in range(self.grid.cols + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, self.grid.rows * cell))
            for i in range(self.grid.rows + 1):
                pygame.draw.line(scr, Colors.GRID, (0, i * cell), (self.grid.cols * cell, i * cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.autoplay = not self.autoplay
                    elif event.key == pygame.K_RIGHT:
                        self.step()
                    elif event.key == pygame.K_r:
                        self._reset_state()
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                    elif event.key == pygame.K_EQUALS or event.key == pygame.K_PLUS:
                        self.speed_tiles_per_sec = min(self.speed_tiles_per_sec + 1, 60)
                        self._recalculate_step_interval()
                    elif event.key == pygame.K_MINUS:
                        self.speed_tiles_per_sec = max(self.speed_tiles_per_sec - 1, 1)
                        self._recalculate_step_interval()

            if self.autoplay:
                self._step_timer += dt
                while self._step_timer >= self._step_interval:
                    self._step_timer -= self._step_interval
                    if not self.step():
                        self.autoplay = False
                        break

            self.draw()

def main():
    parser = argparse.ArgumentParser(description="Replay a wander run with fog-of-war")
    parser.add_argument("--dir", type=str, required=True, help="Folder with nodes.txt, edges.txt, objectives.txt")
    parser.add_argument("--cell", type=int, default=28, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--speed", type=float, default=6.0, help="Autoplay speed in tiles/sec")
    args = parser.parse_args()

    sc = load_scenario(*(os.path.join(args.dir, f) for f in ("nodes.txt", "edges.txt", "objectives.txt")))
    nav = Navigator(sc.grid, sc.radius, sc.start)
    nav.run(sc.objectives)
    print("\n".join(nav.lines))

    pygame.init()
    try:
        Viewer(sc, nav, cell_size=args.cell, fps=args.fps, speed=args.speed).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
