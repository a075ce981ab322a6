from typing import Dict, Tuple

from astar_tiles.domains.grid import State


def goal_positions(goal: State) -> Dict[int, Tuple[int, int]]:
    """tile -> (row, col) in the goal board."""
    return {t: divmod(idx, goal.n) for idx, t in enumerate(goal.tiles)}


def manhattan_from(tiles: Tuple[int, ...], n: int, goal_pos: Dict[int, Tuple[int, int]]) -> int:
    dist = 0
    for idx, tile in enumerate(tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def manhattan(s: State, goal: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    return manhattan_from(s.tiles, s.n, goal_positions(goal))
