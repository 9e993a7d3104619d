# Defines the interface every search problem supplies to the engine (states, actions, goals, costs, heuristic).
# search_core/core/problem.py
from __future__ import annotations
from typing import Callable, Hashable, Iterable, Optional, Protocol, TypeVar

State = Hashable
Action = Hashable

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")

Heuristic = Callable[[State], float]


class Problem(Protocol[S, A]):
    """Canonical AI search problem interface (atomic state-space view).

    States must support equality and hashing; actions are opaque. The engine
    never mutates either. Callbacks are expected to be pure; whatever they
    raise propagates out of the search unchanged.
    """
    def initial_state(self) -> S: ...
    def is_goal(self, s: S) -> bool: ...
    def actions(self, s: S) -> Iterable[A]: ...
    def result(self, s: S, a: A) -> S: ...
    def step_cost(self, s: S, a: A, s2: S) -> float: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: S) -> float: return 0.0


def zero_heuristic(s: State) -> float:
    return 0.0


def heuristic_for(problem, h: Optional[Heuristic] = None) -> Heuristic:
    """Pick the heuristic an informed search should use.

    An explicit ``h`` wins; otherwise the problem's own ``heuristic`` method
    if it has one; otherwise h = 0 (which turns RBFS into a uniform-cost walk).
    """
    if h is not None:
        return h
    if hasattr(problem, "heuristic"):
        def h_problem(s: State) -> float:
            val = problem.heuristic(s)
            return 0.0 if val is None else float(val)
        return h_problem
    return zero_heuristic
