import pytest

from astar_tiles.domains.grid import InvalidPuzzleError, State, parse_tiles, validate_grid, validate_pair

START = [[1, 2, 3], [4, 0, 6], [7, 5, 8]]


def test_state_roundtrips_grid_and_finds_blank():
    s = State.from_grid(START)
    assert s.n == 3
    assert s.tiles == (1, 2, 3, 4, 0, 6, 7, 5, 8)
    assert s.grid == ((1, 2, 3), (4, 0, 6), (7, 5, 8))
    assert s.blank == 4


def test_state_equality_ignores_cost():
    a = State.from_grid(START, cost=0)
    b = State.from_grid(START, cost=7)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_state_is_immutable():
    s = State.from_grid(START)
    with pytest.raises(AttributeError):
        s.tiles = (0,)


def test_state_str_renders_rows():
    assert str(State.from_grid([[1, 2], [3, 0]])) == "1 2\n3 0"


def test_validate_grid_returns_canonical_rows():
    assert validate_grid([[1, 2], [3, 0]]) == ((1, 2), (3, 0))


@pytest.mark.parametrize("grid", [
    [[0]],                                  # too small
    [[1, 2, 3], [4, 0, 6]],                 # not square
    [[1, 2], [3]],                          # ragged
    [[1, 1], [3, 0]],                       # duplicate tile
    [[1, 2], [3, 4]],                       # no blank
    [[1, 2], [3, "0"]],                     # non-integer
    [[1, 2], [3, True]],                    # bool is not a tile
    5,                                      # not a sequence
])
def test_validate_grid_rejects_malformed(grid):
    with pytest.raises(InvalidPuzzleError):
        validate_grid(grid)


def test_validate_grid_checks_expected_size():
    with pytest.raises(InvalidPuzzleError):
        validate_grid([[1, 2], [3, 0]], n=3)


def test_validate_pair_rejects_size_mismatch():
    with pytest.raises(InvalidPuzzleError, match="2x2"):
        validate_pair([[1, 2], [3, 0]], START)


def test_invalid_puzzle_error_is_value_error():
    assert issubclass(InvalidPuzzleError, ValueError)


def test_parse_tiles():
    assert parse_tiles("1 2 3 4 0 6 7 5 8", 3) == ((1, 2, 3), (4, 0, 6), (7, 5, 8))
    assert parse_tiles("1,2,3,0", 2) == ((1, 2), (3, 0))
    with pytest.raises(InvalidPuzzleError):
        parse_tiles("1 2 3", 2)
    with pytest.raises(InvalidPuzzleError):
        parse_tiles("a b c d", 2)
