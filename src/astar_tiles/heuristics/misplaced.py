from astar_tiles.domains.grid import State


def misplaced(s: State, goal: State) -> int:
    """Number of non-blank tiles not on their goal cell.

    The blank is never counted, so a board one move from the goal scores at most 1.
    """
    return sum(1 for t, gt in zip(s.tiles, goal.tiles) if t != 0 and t != gt)
