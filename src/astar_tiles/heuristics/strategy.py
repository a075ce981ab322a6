from __future__ import annotations
from enum import Enum
from typing import Union

from astar_tiles.domains.grid import InvalidPuzzleError, State
from astar_tiles.heuristics.manhattan import goal_positions, manhattan, manhattan_from
from astar_tiles.heuristics.misplaced import misplaced


class Heuristic(str, Enum):
    MISPLACED = "misplaced"
    MANHATTAN = "manhattan"

    @classmethod
    def parse(cls, value: Union["Heuristic", str]) -> "Heuristic":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(h.value for h in cls)
            raise ValueError(f"unknown heuristic {value!r} (choose from {names})") from None


def heuristic(s: State, goal: State, strategy: Union[Heuristic, str] = Heuristic.MANHATTAN) -> int:
    """Estimate of remaining moves from s to goal. Both strategies are admissible."""
    strategy = Heuristic.parse(strategy)
    if strategy is Heuristic.MISPLACED:
        return misplaced(s, goal)
    return manhattan(s, goal)


class HeuristicEvaluator:
    """One strategy bound to one goal for a whole search run.

    Goal positions are computed once here instead of on every call.
    """
    def __init__(self, goal: State, strategy: Union[Heuristic, str] = Heuristic.MANHATTAN):
        self.goal = goal
        self.strategy = Heuristic.parse(strategy)
        self._goal_pos = goal_positions(goal)

    def __call__(self, s: State) -> int:
        if s.n != self.goal.n:
            raise InvalidPuzzleError(f"state is {s.n}x{s.n}, goal is {self.goal.n}x{self.goal.n}")
        if self.strategy is Heuristic.MISPLACED:
            return misplaced(s, self.goal)
        return manhattan_from(s.tiles, s.n, self._goal_pos)
