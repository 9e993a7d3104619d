# search_core/core/node.py
# Search-tree node shared by every algorithm, plus the factory functions that build root and child nodes.
from __future__ import annotations
import math
from typing import Any, Iterator, Optional
from .problem import Problem, State


class InvalidStepCost(ValueError):
    """A problem's step_cost returned something the engine cannot add up."""


class Node:
    """
    One node of the search tree.

    Children point at their parent; parents never point at children, so the
    tree can be dropped piecemeal while the path back to the root stays alive
    for as long as any node on it is referenced.
    """
    __slots__ = ("state", "parent", "action", "path_cost", "depth")

    def __init__(self, state, parent: Optional["Node"] = None, action=None,
                 path_cost: float = 0.0, depth: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = float(path_cost)
        self.depth = depth

    def __repr__(self) -> str:
        return f"<Node {self.state!r} g={self.path_cost:g} d={self.depth}>"

    @classmethod
    def root(cls, state) -> "Node":
        return cls(state)

    @classmethod
    def child(cls, problem: Problem, parent: "Node", action) -> "Node":
        """CHILD-NODE: apply ``action`` to ``parent.state`` and price the step."""
        s = parent.state
        s2 = problem.result(s, action)
        cost = _checked_cost(problem.step_cost(s, action, s2), s, action, s2)
        return cls(
            state=s2,
            parent=parent,
            action=action,
            path_cost=parent.path_cost + cost,
            depth=parent.depth + 1,
        )

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        for a in problem.actions(self.state):
            yield type(self).child(problem, self, a)


def _checked_cost(cost: Any, s: State, a: Any, s2: State) -> float:
    if cost is None:
        raise InvalidStepCost(
            f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
            "Check your problem's ACTIONS/RESULT/cost mapping."
        )
    cost = float(cost)
    if not math.isfinite(cost):
        raise InvalidStepCost(f"step_cost must be finite, got {cost!r} for (s={s!r}, a={a!r}, s'={s2!r})")
    return cost


def new_root(state) -> Node:
    return Node.root(state)


def new_child(problem: Problem, parent: Node, action) -> Node:
    return Node.child(problem, parent, action)
