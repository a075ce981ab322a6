from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple
import random

from astar_tiles.domains.grid import InvalidPuzzleError, State


class NPuzzle:
    """Generic N×N sliding-tile puzzle (0 is the blank)."""
    def __init__(self, n: int):
        if not isinstance(n, int) or n < 2:
            raise InvalidPuzzleError(f"board side must be an integer >= 2, got {n!r}")
        self.N = n
        self.size = n * n
        self.GOAL = State(tuple(list(range(1, self.size)) + [0]), n)
        # Blank moves in fixed order: up, down, left, right
        self._nei: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, n)
            moves = []
            if r > 0:       moves.append(i - n)
            if r < n - 1:   moves.append(i + n)
            if c > 0:       moves.append(i - 1)
            if c < n - 1:   moves.append(i + 1)
            self._nei[i] = tuple(moves)

    def _check(self, s: State) -> None:
        if s.n != self.N:
            raise InvalidPuzzleError(f"state is {s.n}x{s.n}, puzzle is {self.N}x{self.N}")

    # ---------- Core dynamics ----------
    def successors(self, s: State) -> Iterator[Tuple[State, int]]:
        """Lazily yield (next_state, cost) for each legal blank move. Unit edge costs."""
        z = s.blank
        for j in self._nei[z]:
            lst = list(s.tiles)
            lst[z], lst[j] = lst[j], lst[z]
            yield State(tuple(lst), self.N, s.cost + 1), 1

    def is_adjacent(self, a: State, b: State) -> bool:
        """True if b is reachable from a by exactly one blank move."""
        return any(nxt == b for nxt, _ in self.successors(a))

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int, goal: Optional[State] = None) -> State:
        """Depth-limited random walk from the goal with no immediate backtrack."""
        rng = random.Random(seed)
        s = goal if goal is not None else self.GOAL
        self._check(s)
        tiles = s.tiles
        last_blank = None
        for _ in range(depth):
            z = tiles.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(tiles)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            tiles = tuple(lst)
        return State(tiles, self.N)

    # ---------- Solvability ----------
    def parity(self, s: State) -> int:
        """Move-invariant parity of a board.
           - N odd: parity of inversions
           - N even: parity of (inversions + blank_row_from_bottom), row count 1-based
        """
        arr = [x for x in s.tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return inv % 2
        blank_row_from_bottom = self.N - s.blank // self.N
        return (inv + blank_row_from_bottom) % 2

    def is_solvable(self, s: State, goal: Optional[State] = None) -> bool:
        """A board can reach the goal iff both share the same parity."""
        goal = goal if goal is not None else self.GOAL
        self._check(s)
        self._check(goal)
        return self.parity(s) == self.parity(goal)


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, which flips parity."""
    lst = list(s.tiles)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return State(tuple(lst), s.n)
