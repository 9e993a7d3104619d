# search_core/core/frontiers.py
from __future__ import annotations
import heapq
from typing import Callable, Dict, Iterator, List, Optional
from .node import Node

_REMOVED = object()  # placeholder for an entry superseded by replace()


class StateFrontier:
    """
    Min-heap of Nodes by key(node) that also indexes its nodes by state.

    At most one live entry per state. Equal keys pop in insertion order (the
    counter), and a replaced entry takes a fresh counter. Superseded heap
    entries are left in place and skipped on pop.
    """
    def __init__(self, key: Callable[[Node], float] = lambda n: n.path_cost):
        self.key = key
        self.h: List[list] = []
        self.counter = 0  # tie-breaker for stability
        self.entries: Dict[object, list] = {}

    def push(self, node: Node) -> None:
        if node.state in self.entries:
            raise ValueError(f"state {node.state!r} is already on the frontier")
        self.counter += 1
        entry = [self.key(node), self.counter, node]
        self.entries[node.state] = entry
        heapq.heappush(self.h, entry)

    def pop(self) -> Node:
        while self.h:
            _, _, node = heapq.heappop(self.h)
            if node is not _REMOVED:
                del self.entries[node.state]
                return node
        raise KeyError("pop from an empty frontier")

    def peek(self) -> Node:
        while self.h and self.h[0][2] is _REMOVED:
            heapq.heappop(self.h)
        if not self.h:
            raise KeyError("peek at an empty frontier")
        return self.h[0][2]

    def get(self, state) -> Optional[Node]:
        entry = self.entries.get(state)
        return None if entry is None else entry[2]

    def replace(self, node: Node) -> Node:
        """Swap the entry holding ``node.state`` for ``node``; returns the old node."""
        old = self.entries.pop(node.state)
        old_node = old[2]
        old[2] = _REMOVED
        self.push(node)
        return old_node

    def __contains__(self, state) -> bool:
        return state in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Node]:
        """Live nodes in no particular order."""
        return (entry[2] for entry in self.entries.values())
