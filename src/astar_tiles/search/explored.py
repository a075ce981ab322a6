from __future__ import annotations
from typing import Dict, Iterator

from astar_tiles.domains.grid import State
from astar_tiles.search.node import Node


class ExploredSet:
    """Closed set. Holds each expanded node so parent chains stay reachable."""
    def __init__(self):
        self._nodes: Dict[State, Node] = {}

    def add(self, node: Node) -> None:
        self._nodes.setdefault(node.state, node)

    def __contains__(self, s: State) -> bool:
        return s in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[State]:
        return iter(self._nodes)

