# search_core/core/utils.py
# Solution extraction: rebuild the action sequence from a goal node by following parent links.
from __future__ import annotations
from typing import List, Tuple
from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def solution_actions(node: Node) -> List:
    return reconstruct_path(node)[0]


def path_states(node: Node) -> List:
    """States from the root down to ``node``, inclusive."""
    states = []
    cur = node
    while cur is not None:
        states.append(cur.state)
        cur = cur.parent
    states.reverse()
    return states
