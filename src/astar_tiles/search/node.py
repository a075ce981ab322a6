from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from astar_tiles.domains.grid import Grid, State


@dataclass(eq=False)
class Node:
    state: State
    g: int
    h: int
    parent: Optional["Node"] = None
    f: int = field(init=False)

    def __post_init__(self):
        self.f = self.g + self.h


def reconstruct_path(node: Optional[Node]) -> List[Grid]:
    """Walk parent links back to the root and return the grids start -> node."""
    path: List[Grid] = []
    while node is not None:
        path.append(node.state.grid)
        node = node.parent
    path.reverse()
    return path
