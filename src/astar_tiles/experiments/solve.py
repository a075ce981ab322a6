#!/usr/bin/env python3
from __future__ import annotations
import argparse, sys
from typing import List, Optional, Sequence, TextIO

from astar_tiles.domains.grid import Grid, InvalidPuzzleError, State, parse_tiles
from astar_tiles.domains.puzzlen import NPuzzle
from astar_tiles.search.a_star import a_star


def read_grids(stream: TextIO, n: int, boards: int = 2, prompt: bool = False) -> List[Grid]:
    """Read `boards` N×N boards of whitespace-separated tiles (start first, then goal)."""
    if prompt:
        print(f"Enter {'the initial and goal states' if boards == 2 else 'the initial state'} "
              f"({n * n} tiles each, 0 for the blank):")
    tokens = stream.read().replace(",", " ").split()
    k = n * n
    if len(tokens) != boards * k:
        raise InvalidPuzzleError(f"expected {boards * k} tiles on input, got {len(tokens)}")
    return [parse_tiles(" ".join(tokens[i * k:(i + 1) * k]), n) for i in range(boards)]


def format_grid(grid: Grid) -> str:
    return str(State.from_grid(grid))


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve one sliding-tile puzzle with A* and print the best path.")
    ap.add_argument("--n", type=int, default=3, help="Board side (N×N)")
    ap.add_argument("--start", default=None, help='Start tiles row-major, e.g. "1 2 3 4 0 6 7 5 8"')
    ap.add_argument("--goal", default=None, help="Goal tiles row-major (default: 1..N²-1 then blank)")
    ap.add_argument("--heuristic", choices=["misplaced", "manhattan"], default="manhattan")
    ap.add_argument("--timeout_sec", type=float, default=None)
    ap.add_argument("--check_solvable", action="store_true", help="Refuse parity-mismatched boards up front")
    args = ap.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    try:
        dom = NPuzzle(args.n)
        goal = parse_tiles(args.goal, args.n) if args.goal is not None else None
        if args.start is not None:
            start = parse_tiles(args.start, args.n)
        else:
            boards = read_grids(stdin, args.n, boards=1 if goal is not None else 2, prompt=stdin.isatty())
            start = boards[0]
            if goal is None:
                goal = boards[1]
        if goal is None:
            goal = dom.GOAL.grid
        res = a_star(start, goal, heuristic=args.heuristic,
                     timeout_sec=args.timeout_sec, check_solvable=args.check_solvable)
    except InvalidPuzzleError as e:
        ap.error(str(e))

    if res["path"] is None:
        print(f"No solution found ({res['termination']})")
        print(f"Number of nodes generated: {res['generated']}")
        print(f"Number of nodes expanded: {res['expanded']}")
        return 1

    print("*" * 17 + "Best Path" + "*" * 17)
    for grid in res["path"]:
        print(format_grid(grid))
        print()
    print(f"Moves: {res['g']}")
    print(f"Number of nodes generated: {res['generated']}")
    print(f"Number of nodes expanded: {res['expanded']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
