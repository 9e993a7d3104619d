# search_core/algorithms/rbfs.py
# Recursive Best-First Search (RBFS): best-first behaviour in memory linear in the depth of the search.
# Each call explores one subtree under an f-limit and, when it has to give up, reports back the
# smallest f-value that exceeded the limit so the caller can rank that subtree against its siblings.
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Set, Type
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import Node
from ..core.problem import Heuristic, Problem, heuristic_for
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class SuccessorNode:
    """A Node plus the RBFS bookkeeping: g, h (computed once) and the live, backed-up f."""
    node: Node
    h: float
    f: float
    order: int = 0  # generation index among its siblings; breaks f ties

    @classmethod
    def wrap(cls, node: Node, h: Heuristic, order: int = 0) -> "SuccessorNode":
        hv = float(h(node.state))
        return cls(node=node, h=hv, f=node.path_cost + hv, order=order)

    @property
    def g(self) -> float:
        return self.node.path_cost

    @property
    def state(self):
        return self.node.state


class RBFSOutcome(NamedTuple):
    """Result of one RBFS call: the goal node (None on failure) and the revised f-limit."""
    goal: Optional[Node]
    f_limit: float

    @property
    def failed(self) -> bool:
        return self.goal is None


class _ExpansionLimit(Exception):
    pass


class RecursiveBestFirstSearch:
    """
    RBFS over a Problem with a heuristic on states.

    With an admissible heuristic the first solution found is optimal. States
    already on the current recursion path are not regenerated, so a finite
    state space always ends in a solution or a failure.

    The recursion uses the Python call stack, one frame per level of the
    search tree: very deep solutions can exhaust it, in which case the
    RecursionError reaches the caller (raise the recursion limit or bound the
    problem's depth and search again).
    """
    name = "RBFS"

    def __init__(self, h: Optional[Heuristic] = None, max_expansions: Optional[int] = None,
                 node_factory: Type[Node] = Node):
        self.h = h
        self.node_factory = node_factory
        self.max_expansions = max_expansions
        self.expanded = 0

    def search(self, problem: Problem) -> SearchResult:
        h = heuristic_for(problem, self.h)
        self.expanded = 0

        with MeasuredRun() as meter:
            root = SuccessorNode.wrap(self.node_factory.root(problem.initial_state()), h)
            logger.info("%s: start at %r, h=%g", self.name, root.state, root.h)
            try:
                outcome = self.rbfs(problem, root, math.inf, h, {root.state})
            except _ExpansionLimit:
                logger.info("%s: gave up after %d expansions", self.name, self.expanded)
                return SearchResult(self.name, False, [], float("inf"), self.expanded, meter.elapsed,
                                    meter.peak_kb, error="expansion limit reached")

            if not outcome.failed:
                actions, cost = reconstruct_path(outcome.goal)
                logger.info("%s: solved, cost=%g depth=%d expanded=%d", self.name, cost,
                            outcome.goal.depth, self.expanded)
                return SearchResult(self.name, True, actions, cost, self.expanded, meter.elapsed, meter.peak_kb)

        logger.info("%s: no solution, expanded=%d", self.name, self.expanded)
        return SearchResult(self.name, False, [], float("inf"), self.expanded, meter.elapsed, meter.peak_kb)

    def rbfs(self, problem: Problem, node: SuccessorNode, f_limit: float, h: Heuristic,
             on_path: Set) -> RBFSOutcome:
        if problem.is_goal(node.state):
            return RBFSOutcome(node.node, node.f)

        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            raise _ExpansionLimit()
        self.expanded += 1

        successors: List[SuccessorNode] = [
            SuccessorNode.wrap(child, h, order=i)
            for i, child in enumerate(node.node.expand(problem))
            if child.state not in on_path
        ]
        if not successors:
            return RBFSOutcome(None, math.inf)

        # update f with value from previous search, if any
        for s in successors:
            s.f = max(s.g + s.h, node.f)

        while True:
            successors.sort(key=lambda s: (s.f, s.order))
            best = successors[0]
            # an infinite best.f means every successor is a dead end, even under an infinite limit
            if best.f > f_limit or math.isinf(best.f):
                logger.debug("%s: backtrack from %r, f=%g > limit %g", self.name, node.state, best.f, f_limit)
                return RBFSOutcome(None, best.f)
            alternative = successors[1].f if len(successors) > 1 else best.f

            on_path.add(best.state)
            try:
                outcome = self.rbfs(problem, best, min(f_limit, alternative), h, on_path)
            finally:
                on_path.discard(best.state)
            best.f = outcome.f_limit
            if not outcome.failed:
                return outcome


def recursive_best_first_search(problem: Problem, h: Optional[Heuristic] = None,
                                max_expansions: Optional[int] = None,
                                node_factory: Type[Node] = Node) -> SearchResult:
    """
    RBFS: Recursive Best-First Search (linear memory).
    Mimics best-first with an f-limit; backs up best-alternative f-values on unwind.
    ``h`` maps a state to an estimate of its remaining cost; it defaults to
    ``problem.heuristic`` and then to 0. ``node_factory`` is the Node class
    used to build the search tree; its children come from ``expand``.
    """
    return RecursiveBestFirstSearch(h=h, max_expansions=max_expansions, node_factory=node_factory).search(problem)
