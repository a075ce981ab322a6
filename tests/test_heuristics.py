import pytest

from astar_tiles.domains.grid import InvalidPuzzleError, State
from astar_tiles.domains.puzzlen import NPuzzle
from astar_tiles.heuristics.manhattan import manhattan
from astar_tiles.heuristics.misplaced import misplaced
from astar_tiles.heuristics.strategy import Heuristic, HeuristicEvaluator, heuristic
from astar_tiles.search.bfs import bfs

GOAL = State.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
START = State.from_grid([[1, 2, 3], [4, 0, 6], [7, 5, 8]])


@pytest.mark.parametrize("strategy", list(Heuristic))
def test_goal_scores_zero(strategy):
    assert heuristic(GOAL, GOAL, strategy) == 0
    assert HeuristicEvaluator(GOAL, strategy)(GOAL) == 0


def test_two_move_example():
    assert misplaced(START, GOAL) == 2
    assert manhattan(START, GOAL) == 2
    for strategy in Heuristic:
        assert heuristic(START, GOAL, strategy) <= 2


def test_blank_is_not_counted():
    one_move = State.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    assert misplaced(one_move, GOAL) == 1
    assert manhattan(one_move, GOAL) == 1


def test_manhattan_uses_runtime_goal():
    goal = State.from_grid([[0, 1], [2, 3]])
    s = State.from_grid([[3, 1], [2, 0]])
    # tile 3 sits at (0,0), belongs at (1,1)
    assert manhattan(s, goal) == 2
    assert misplaced(s, goal) == 1


def test_parse_accepts_names_and_members():
    assert Heuristic.parse("Manhattan") is Heuristic.MANHATTAN
    assert Heuristic.parse(" misplaced ") is Heuristic.MISPLACED
    assert Heuristic.parse(Heuristic.MISPLACED) is Heuristic.MISPLACED
    with pytest.raises(ValueError, match="linear"):
        Heuristic.parse("linear")


def test_evaluator_matches_pure_function():
    dom = NPuzzle(4)
    goal = dom.GOAL
    for seed in range(10):
        s = dom.scramble(30, seed)
        for strategy in Heuristic:
            assert HeuristicEvaluator(goal, strategy)(s) == heuristic(s, goal, strategy)


def test_evaluator_rejects_wrong_size():
    with pytest.raises(InvalidPuzzleError):
        HeuristicEvaluator(GOAL)(State.from_grid([[1, 2], [3, 0]]))


def test_admissible_and_manhattan_dominates():
    dom = NPuzzle(3)
    for seed in range(8):
        s = dom.scramble(10, seed)
        true_cost = bfs(s.grid, GOAL.grid)["g"]
        mis = heuristic(s, GOAL, Heuristic.MISPLACED)
        man = heuristic(s, GOAL, Heuristic.MANHATTAN)
        assert 0 <= mis <= man <= true_cost
