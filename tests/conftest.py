import math
import random

import pytest

from search_core.core.node import Node
from search_core.problems.graph import from_edges


@pytest.fixture
def path_graph():
    """A -> B -> C, unit costs, goal C."""
    return from_edges([("A", "B", 1), ("B", "C", 1)], start="A", goal="C")


@pytest.fixture
def unreachable_goal():
    """A <-> B cycle; the goal C has no incoming edge."""
    return from_edges([("A", "B", 1), ("B", "A", 1)], start="A", goal="C")


@pytest.fixture
def diamond():
    """The direct edge A -> C is dearer than going through B."""
    return from_edges(
        [("A", "B", 1), ("A", "C", 5), ("B", "C", 1), ("C", "D", 1)],
        start="A", goal="D",
    )


@pytest.fixture
def tie_graph():
    """Two equal-cost routes to G, via B (generated first) and via C."""
    return from_edges(
        [("A", "B", 1), ("A", "C", 1), ("B", "G", 1), ("C", "G", 1)],
        start="A", goal="G",
    )


class BoomError(RuntimeError):
    pass


class ExplodingProblem:
    """Step cost blows up for any move out of state 1."""

    def initial_state(self):
        return 0

    def is_goal(self, s):
        return s == 3

    def actions(self, s):
        return ["inc"] if s < 3 else []

    def result(self, s, a):
        return s + 1

    def step_cost(self, s, a, s2):
        if s == 1:
            raise BoomError(f"no cost for {s} -> {s2}")
        return 1.0


@pytest.fixture
def exploding_problem():
    return ExplodingProblem()


@pytest.fixture
def reference_cost():
    """Bellman-Ford cost from the start to the goal of a GraphProblem (inf if unreachable)."""
    def bellman_ford(problem):
        dist = {s: math.inf for s in problem.graph}
        dist[problem.start] = 0.0
        for _ in range(len(dist)):
            for u, nbrs in problem.graph.items():
                for v, c in nbrs.items():
                    if dist[u] + c < dist[v]:
                        dist[v] = dist[u] + c
        return dist[problem.goal]
    return bellman_ford


@pytest.fixture
def random_graph():
    """Factory for small seeded random digraphs with integer costs 0..9, start 0, goal n - 1."""
    def make(seed, n=7, m=14):
        rng = random.Random(seed)
        states = list(range(n))
        edges = []
        for _ in range(m):
            u, v = rng.sample(states, 2)
            edges.append((u, v, rng.randint(0, 9)))
        return from_edges(edges, start=0, goal=n - 1)
    return make


@pytest.fixture
def counting_node():
    """A Node subclass that records every node it builds."""
    class CountingNode(Node):
        built = []

        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            CountingNode.built.append(self)

    return CountingNode
