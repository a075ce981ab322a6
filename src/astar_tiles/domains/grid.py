from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple, Optional

Grid = Tuple[Tuple[int, ...], ...]  # N rows of N tiles, 0 is blank


class InvalidPuzzleError(ValueError):
    """Raised before search when a grid (or a start/goal pair) is malformed."""


@dataclass(frozen=True)
class State:
    """Immutable board snapshot. Equality and hashing use the tiles only."""
    tiles: Tuple[int, ...]  # row-major, length n*n
    n: int
    cost: int = field(default=0, compare=False)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], cost: int = 0) -> "State":
        n = len(grid)
        return cls(tuple(int(t) for row in grid for t in row), n, cost)

    @property
    def grid(self) -> Grid:
        n = self.n
        return tuple(self.tiles[r * n:(r + 1) * n] for r in range(n))

    @property
    def blank(self) -> int:
        return self.tiles.index(0)

    def __str__(self) -> str:
        width = len(str(self.n * self.n - 1))
        return "\n".join(" ".join(f"{t:>{width}}" for t in row) for row in self.grid)


def validate_grid(grid: Sequence[Sequence[int]], n: Optional[int] = None) -> Grid:
    """Check that grid is square and holds each of 0..N²-1 exactly once.

    Returns the canonical tuple-of-rows form.
    """
    try:
        rows = tuple(tuple(row) for row in grid)
    except TypeError:
        raise InvalidPuzzleError("grid must be a sequence of rows") from None
    size = len(rows)
    if size < 2:
        raise InvalidPuzzleError(f"grid must be at least 2x2, got {size} row(s)")
    if n is not None and size != n:
        raise InvalidPuzzleError(f"expected a {n}x{n} grid, got {size} rows")
    for r, row in enumerate(rows):
        if len(row) != size:
            raise InvalidPuzzleError(f"row {r} has {len(row)} cells, expected {size}")
        for t in row:
            if isinstance(t, bool) or not isinstance(t, int):
                raise InvalidPuzzleError(f"row {r} holds a non-integer tile {t!r}")
    flat = sorted(t for row in rows for t in row)
    if flat != list(range(size * size)):
        raise InvalidPuzzleError(
            f"tiles must be a permutation of 0..{size * size - 1}, got {flat}"
        )
    return rows


def validate_pair(start: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> Tuple[Grid, Grid]:
    s = validate_grid(start)
    g = validate_grid(goal)
    if len(s) != len(g):
        raise InvalidPuzzleError(
            f"start is {len(s)}x{len(s)} but goal is {len(g)}x{len(g)}"
        )
    return s, g


def parse_tiles(text: str, n: int) -> Grid:
    """Parse whitespace/comma separated tiles ("1 2 3 4 0 6 7 5 8") into an n×n grid."""
    try:
        vals = [int(x) for x in text.replace(",", " ").split()]
    except ValueError as e:
        raise InvalidPuzzleError(f"could not parse tiles from {text!r}") from e
    if len(vals) != n * n:
        raise InvalidPuzzleError(f"expected {n * n} tiles, got {len(vals)}")
    return validate_grid([vals[r * n:(r + 1) * n] for r in range(n)], n)
