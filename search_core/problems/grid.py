# search_core/problems/grid.py
from __future__ import annotations
from typing import Dict, Optional, Set, Tuple

from .graph import GraphProblem

Coord = Tuple[int, int]

MOVES: Dict[str, Coord] = {"Up": (-1, 0), "Down": (1, 0), "Left": (0, -1), "Right": (0, 1)}


def grid_graph(rows: int, cols: int, walls: Set[Coord]) -> Dict[Coord, Dict[Coord, float]]:
    """Unit-cost adjacency between the open cells; neighbours listed in MOVES order."""
    graph: Dict[Coord, Dict[Coord, float]] = {}
    for r in range(rows):
        for c in range(cols):
            if (r, c) in walls:
                continue
            graph[(r, c)] = {
                (r + dr, c + dc): 1.0
                for dr, dc in MOVES.values()
                if 0 <= r + dr < rows and 0 <= c + dc < cols and (r + dr, c + dc) not in walls
            }
    return graph


class GridProblem(GraphProblem):
    """4-neighbour pathfinding; actions are compass moves and h is the Manhattan distance."""

    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Optional[Set[Coord]] = None):
        self.rows, self.cols = rows, cols
        self.walls = set(walls or ())
        super().__init__(start=start, goal=goal, graph=grid_graph(rows, cols, self.walls))

    def edge_action(self, s: Coord, v: Coord) -> str:
        delta = (v[0] - s[0], v[1] - s[1])
        return next(name for name, move in MOVES.items() if move == delta)

    def edge_target(self, s: Coord, a: str) -> Coord:
        dr, dc = MOVES[a]
        return (s[0] + dr, s[1] + dc)

    def heuristic(self, s: Coord) -> float:
        return float(abs(s[0] - self.goal[0]) + abs(s[1] - self.goal[1]))


def make_grid_problem() -> GridProblem:
    # 5x7, a wall segment between the start and the goal corner
    return GridProblem(rows=5, cols=7, start=(0, 0), goal=(4, 6),
                       walls={(1, 3), (2, 3), (3, 3), (3, 4)})
