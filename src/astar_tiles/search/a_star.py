from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Union
from time import perf_counter

from astar_tiles.domains.grid import Grid, State, validate_pair
from astar_tiles.domains.puzzlen import NPuzzle
from astar_tiles.heuristics.strategy import Heuristic, HeuristicEvaluator
from astar_tiles.search.explored import ExploredSet
from astar_tiles.search.frontier import Frontier
from astar_tiles.search.node import Node, reconstruct_path

# Search lifecycle
READY = "ready"
EXPANDING = "expanding"
GOAL_FOUND = "goal_found"
EXHAUSTED = "exhausted"
TIMEOUT = "timeout"
UNSOLVABLE = "unsolvable"

TERMINAL = (GOAL_FOUND, EXHAUSTED, TIMEOUT, UNSOLVABLE)

_TERMINATION = {GOAL_FOUND: "ok", EXHAUSTED: "exhausted", TIMEOUT: "timeout", UNSOLVABLE: "unsolvable"}


class AStarSearch:
    """One A* run over an N×N sliding-tile board.

    Frontier, explored set and counters all live on the instance, so separate
    runs never share state. Drive it with run(), or step() one expansion at a time.
    """
    def __init__(
        self,
        start: Sequence[Sequence[int]],
        goal: Sequence[Sequence[int]],
        heuristic: Union[Heuristic, str] = Heuristic.MANHATTAN,
        timeout_sec: Optional[float] = None,
        check_solvable: bool = False,
        return_path: bool = True,
    ):
        start_grid, goal_grid = validate_pair(start, goal)
        self.start = State.from_grid(start_grid)
        self.goal = State.from_grid(goal_grid)
        self.puzzle = NPuzzle(self.start.n)
        self.heuristic = Heuristic.parse(heuristic)
        self.hfun = HeuristicEvaluator(self.goal, self.heuristic)
        self.timeout_sec = timeout_sec
        self.check_solvable = check_solvable
        self.return_path = return_path

        self.frontier = Frontier()
        self.explored = ExploredSet()
        self.generated = 1  # the root counts as generated
        self.duplicates = 0
        self.goal_node: Optional[Node] = None
        self.elapsed = 0.0

        h0 = self.hfun(self.start)
        self.frontier.insert(Node(self.start, g=0, h=h0))
        self.status = READY

    @property
    def expanded(self) -> int:
        return len(self.explored)

    def step(self) -> str:
        """Pop the best open node and either finish on it or expand it."""
        if self.status in TERMINAL:
            return self.status
        self.status = EXPANDING
        if not self.frontier:
            self.status = EXHAUSTED
            return self.status

        node = self.frontier.extract_min()
        self.explored.add(node)
        if node.state == self.goal:
            self.goal_node = node
            self.status = GOAL_FOUND
            return self.status

        self.frontier.remove(node.state)
        for s2, cost in self.puzzle.successors(node.state):
            self.generated += 1
            if s2 in self.explored:
                self.duplicates += 1
                continue
            self.frontier.insert(Node(s2, g=node.g + cost, h=self.hfun(s2), parent=node))

        if not self.frontier:
            self.status = EXHAUSTED
        return self.status

    def run(self) -> Dict[str, Any]:
        t0 = perf_counter()
        if self.check_solvable and not self.puzzle.is_solvable(self.start, self.goal):
            self.status = UNSOLVABLE
        while self.status not in TERMINAL:
            if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
                self.status = TIMEOUT
                break
            self.step()
        self.elapsed += perf_counter() - t0
        return self.result()

    def path(self) -> Optional[List[Grid]]:
        if self.goal_node is None:
            return None
        return reconstruct_path(self.goal_node)

    def result(self) -> Dict[str, Any]:
        solved = self.status == GOAL_FOUND
        return {
            "path": self.path() if solved and self.return_path else None,
            "g": self.goal_node.g if solved else None,
            "expanded": self.expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "peak_open": self.frontier.peak,
            "peak_closed": len(self.explored),
            "time": self.elapsed,
            "algorithm": "A*",
            "heuristic": self.heuristic.value,
            "termination": _TERMINATION.get(self.status, self.status),
        }


def a_star(
    start: Sequence[Sequence[int]],
    goal: Sequence[Sequence[int]],
    heuristic: Union[Heuristic, str] = Heuristic.MANHATTAN,
    timeout_sec: Optional[float] = None,
    check_solvable: bool = False,
    return_path: bool = True,
) -> Dict[str, Any]:
    """
    A* with instrumentation. Raises InvalidPuzzleError for malformed grids;
    an unsolvable pair comes back with path=None and termination != "ok".
    """
    return AStarSearch(
        start, goal, heuristic=heuristic, timeout_sec=timeout_sec,
        check_solvable=check_solvable, return_path=return_path,
    ).run()
