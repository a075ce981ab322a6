from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, Optional, Sequence

from astar_tiles.domains.grid import State, validate_pair
from astar_tiles.domains.puzzlen import NPuzzle


def bfs(start: Sequence[Sequence[int]], goal: Sequence[Sequence[int]],
        timeout_sec: float | None = None):
    """Brute-force breadth-first search; shortest path by move count, used as an optimality oracle."""
    s_grid, g_grid = validate_pair(start, goal)
    s0, goal_s = State.from_grid(s_grid), State.from_grid(g_grid)
    dom = NPuzzle(s0.n)
    t0 = perf_counter()
    q = deque([s0])
    parent: Dict[State, Optional[State]] = {s0: None}
    expanded = 0
    generated = 1
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"path": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "timeout"}
        s = q.popleft()
        expanded += 1
        if s == goal_s:
            path = []
            while s is not None:
                path.append(s.grid); s = parent[s]
            path.reverse()
            return {"path": path, "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        for s2, _ in dom.successors(s):
            generated += 1
            if s2 in parent: continue
            parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
