from __future__ import annotations
from typing import Dict, List, Tuple
import heapq
import itertools

from astar_tiles.domains.grid import State
from astar_tiles.search.node import Node


class _Entry:
    __slots__ = ("node", "alive")

    def __init__(self, node: Node):
        self.node = node
        self.alive = True


class Frontier:
    """Open set ordered by f, ties broken by insertion order (oldest first).

    Several entries may wrap the same state (no decrease-key). remove(state)
    kills all of them lazily; dead entries are skipped when popped.
    """
    def __init__(self):
        self._heap: List[Tuple[int, int, _Entry]] = []
        self._counter = itertools.count()
        self._by_state: Dict[State, List[_Entry]] = {}
        self._live = 0
        self.peak = 0

    def __len__(self) -> int:
        return self._live

    def __bool__(self) -> bool:
        return self._live > 0

    def __contains__(self, s: State) -> bool:
        return s in self._by_state

    def contains(self, s: State) -> bool:
        return s in self

    def insert(self, node: Node) -> None:
        entry = _Entry(node)
        heapq.heappush(self._heap, (node.f, next(self._counter), entry))
        self._by_state.setdefault(node.state, []).append(entry)
        self._live += 1
        self.peak = max(self.peak, self._live)

    def extract_min(self) -> Node:
        while self._heap:
            _, _, entry = heapq.heappop(self._heap)
            if not entry.alive:
                continue
            entry.alive = False
            bucket = self._by_state[entry.node.state]
            bucket.remove(entry)
            if not bucket:
                del self._by_state[entry.node.state]
            self._live -= 1
            return entry.node
        raise IndexError("extract_min from an empty frontier")

    def remove(self, s: State) -> int:
        """Drop every open entry for s. Returns how many were dropped."""
        bucket = self._by_state.pop(s, [])
        for entry in bucket:
            entry.alive = False
        self._live -= len(bucket)
        return len(bucket)
