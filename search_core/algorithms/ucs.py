# search_core/algorithms/ucs.py
# Uniform-Cost Search on a graph: a path-cost priority frontier plus an explored set,
# with the decrease-key step that swaps in a cheaper path to a state still on the frontier.
from __future__ import annotations
import logging
from typing import Optional, Type
from ..core.frontiers import StateFrontier
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import InvalidStepCost, Node
from ..core.problem import Problem
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


def uniform_cost_search(problem: Problem, max_expansions: Optional[int] = None,
                        node_factory: Type[Node] = Node) -> SearchResult:
    """
    UNIFORM-COST-SEARCH: expand nodes in non-decreasing path-cost order.

    Returns the cheapest solution when step costs are non-negative and the
    goal is reachable, or a failure result once the frontier runs dry. Nodes
    with equal path cost are expanded first-in first-out. A negative step cost
    raises InvalidStepCost; errors raised by the problem propagate as-is.
    The search is not bounded unless ``max_expansions`` is given; the budget
    counts expansions, so a node popped off the frontier is still goal-tested
    once the budget is spent. ``node_factory`` is the Node class used to build
    the search tree.
    """
    name = "UCS"
    expanded = 0

    with MeasuredRun() as meter:
        root = node_factory.root(problem.initial_state())
        frontier = StateFrontier(key=lambda n: n.path_cost)
        frontier.push(root)
        explored = set()
        logger.info("%s: start at %r", name, root.state)

        while frontier:
            node = frontier.pop()  # chooses the lowest-cost node in frontier
            if problem.is_goal(node.state):
                actions, cost = reconstruct_path(node)
                logger.info("%s: solved, cost=%g depth=%d expanded=%d", name, cost, node.depth, expanded)
                return SearchResult(name, True, actions, cost, expanded, meter.elapsed, meter.peak_kb)

            if max_expansions is not None and expanded >= max_expansions:
                logger.info("%s: gave up after %d expansions", name, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error="expansion limit reached")

            explored.add(node.state)
            expanded += 1
            logger.debug("%s: expand %r", name, node)

            for child in node.expand(problem):
                if child.path_cost < node.path_cost:
                    raise InvalidStepCost(
                        f"uniform-cost search needs non-negative step costs; "
                        f"{node.state!r} --{child.action!r}--> {child.state!r} costs "
                        f"{child.path_cost - node.path_cost!r}"
                    )
                if child.state in explored:
                    continue
                queued = frontier.get(child.state)
                if queued is None:
                    frontier.push(child)
                elif child.path_cost < queued.path_cost:
                    # ties keep the node already queued
                    frontier.replace(child)
                    logger.debug("%s: cheaper path to %r (%g < %g)", name, child.state,
                                 child.path_cost, queued.path_cost)

    logger.info("%s: no solution, expanded=%d", name, expanded)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
