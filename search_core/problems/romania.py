# search_core/problems/romania.py
# The AIMA Romania road map as a GraphProblem whose actions are the names of the cities to drive to.
from __future__ import annotations
from typing import Dict, Mapping

from .graph import GraphProblem, adjacency

ROADS = [
    ("Arad", "Zerind", 75), ("Arad", "Sibiu", 140), ("Arad", "Timisoara", 118),
    ("Zerind", "Oradea", 71), ("Oradea", "Sibiu", 151),
    ("Sibiu", "Fagaras", 99), ("Sibiu", "Rimnicu Vilcea", 80),
    ("Timisoara", "Lugoj", 111), ("Lugoj", "Mehadia", 70), ("Mehadia", "Drobeta", 75),
    ("Drobeta", "Craiova", 120), ("Craiova", "Rimnicu Vilcea", 146), ("Craiova", "Pitesti", 138),
    ("Rimnicu Vilcea", "Pitesti", 97), ("Fagaras", "Bucharest", 211), ("Pitesti", "Bucharest", 101),
    ("Bucharest", "Giurgiu", 90), ("Bucharest", "Urziceni", 85),
    ("Urziceni", "Vaslui", 142), ("Urziceni", "Hirsova", 98), ("Hirsova", "Eforie", 86),
    ("Vaslui", "Iasi", 92), ("Iasi", "Neamt", 87),
]

# straight-line distance to Bucharest
SLD_TO_BUCHAREST: Dict[str, float] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}

ROMANIA: Mapping[str, Mapping[str, float]] = adjacency(ROADS, undirected=True)


class RomaniaProblem(GraphProblem):
    """Route finding between two cities; the only known heuristic is the distance to Bucharest."""

    def __init__(self, start: str = "Arad", goal: str = "Bucharest"):
        for city in (start, goal):
            if city not in ROMANIA:
                raise KeyError(f"unknown city: {city!r}")
        # any other goal gets h = 0, which stays admissible
        h = SLD_TO_BUCHAREST if goal == "Bucharest" else None
        super().__init__(start=start, goal=goal, graph=ROMANIA, h=h)

    def edge_action(self, s, v):
        return v

    def edge_target(self, s, a):
        return a


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    return RomaniaProblem(start=start, goal=goal)
