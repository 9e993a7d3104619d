# search_core/problems/graph.py
# An explicit weighted graph as a search problem: states are vertices, actions follow edges.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Mapping, Optional, Tuple
from ..core.problem import Problem

Edge = Tuple[Hashable, Hashable]


@dataclass
class GraphProblem(Problem):
    """
    Search over ``graph``, an adjacency mapping ``{u: {v: cost}}``.

    By default an action is the edge ``(u, v)`` itself. Subclasses that name
    their moves differently override ``edge_action`` (edge -> action) and
    ``edge_target`` (action -> vertex); costs, goal test and applicability
    checks stay here.
    """
    start: Hashable
    goal: Hashable
    graph: Mapping[Hashable, Mapping[Hashable, float]]
    h: Optional[Mapping[Hashable, float]] = field(default=None)

    def initial_state(self): return self.start
    def is_goal(self, s) -> bool: return s == self.goal

    def edge_action(self, s, v):
        return (s, v)

    def edge_target(self, s, a):
        u, v = a
        if u != s:
            raise ValueError(f"action {a!r} is not applicable in state {s!r}")
        return v

    def actions(self, s) -> Iterable:
        # neighbour order is the mapping's insertion order
        return [self.edge_action(s, v) for v in self.graph.get(s, {})]

    def result(self, s, a):
        v = self.edge_target(s, a)
        if v not in self.graph.get(s, {}):
            raise ValueError(f"action {a!r} is not applicable in state {s!r}")
        return v

    def step_cost(self, s, a, s2) -> float:
        return float(self.graph[s][s2])

    def heuristic(self, s) -> float:
        if self.h is None:
            return 0.0
        return float(self.h.get(s, 0.0))


def adjacency(edges: Iterable[Tuple[Hashable, Hashable, float]],
              undirected: bool = False) -> Dict[Hashable, Dict[Hashable, float]]:
    """Turn (u, v, cost) triples into ``{u: {v: cost}}``; every endpoint becomes a key."""
    graph: Dict[Hashable, Dict[Hashable, float]] = {}
    for u, v, c in edges:
        graph.setdefault(u, {})[v] = c
        graph.setdefault(v, {})
        if undirected:
            graph[v][u] = c
    return graph


def from_edges(edges: Iterable[Tuple[Hashable, Hashable, float]], start, goal,
               undirected: bool = False, h: Optional[Mapping[Hashable, float]] = None) -> GraphProblem:
    """Build a GraphProblem from (u, v, cost) triples."""
    graph = adjacency(edges, undirected=undirected)
    graph.setdefault(start, {})
    graph.setdefault(goal, {})
    return GraphProblem(start=start, goal=goal, graph=graph, h=h)
