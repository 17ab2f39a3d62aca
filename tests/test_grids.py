import pytest

from algokit.grids import (
    climb_stairs,
    min_path_sum,
    rob_circular,
    set_zeroes,
    solve_surrounded,
    unique_paths,
    unique_paths_with_obstacles,
)


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


@pytest.mark.parametrize("m, n", [(2, 3), (4, 5), (6, 2)])
def test_unique_paths_symmetric_and_recurrent(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)


def test_unique_paths_single_row():
    assert unique_paths(1, 9) == 1


def test_obstacles_free_grid_matches_unique_paths():
    grid = [[0] * 5 for _ in range(4)]
    assert unique_paths_with_obstacles(grid) == unique_paths(4, 5)


def test_obstacles_blocked_end():
    grid = [[0, 0], [0, 1]]
    assert unique_paths_with_obstacles(grid) == 0


def test_obstacles_blocked_start():
    grid = [[1, 0], [0, 0]]
    assert unique_paths_with_obstacles(grid) == 0


def test_obstacles_wall_cuts_grid():
    grid = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    assert unique_paths_with_obstacles(grid) == 0


def test_obstacles_single_corridor():
    grid = [[0, 1], [0, 0]]
    assert unique_paths_with_obstacles(grid) == 1


def test_obstacles_empty_raises():
    with pytest.raises(ValueError):
        unique_paths_with_obstacles([])


def test_min_path_sum_single_row():
    row = [4, 2, 7, 1]
    assert min_path_sum([row]) == sum(row)


def test_min_path_sum_single_column():
    grid = [[3], [1], [5]]
    assert min_path_sum(grid) == 3 + 1 + 5


def test_min_path_sum_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", [2, 5, 10, 30])
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_negative_raises():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_set_zeroes_clears_rows_and_columns():
    matrix = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    original = [list(row) for row in matrix]
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_set_zeroes_without_zero_is_unchanged():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_solve_surrounded_example():
    board = [list("XXXX"), list("XOOX"), list("XXOX"), list("XOXX")]
    solve_surrounded(board)
    assert board == [list("XXXX"), list("XXXX"), list("XXXX"), list("XOXX")]


def test_solve_surrounded_keeps_region_touching_border():
    board = [list("XOX"), list("XOX"), list("XXX")]
    solve_surrounded(board)
    assert board == [list("XOX"), list("XOX"), list("XXX")]


def test_solve_surrounded_all_open_stays():
    board = [list("OO"), list("OO")]
    solve_surrounded(board)
    assert board == [list("OO"), list("OO")]


def test_rob_circular_small_inputs():
    assert rob_circular([7]) == 7
    assert rob_circular([2, 9]) == 9
    assert rob_circular([2, 3, 2]) == 3


def test_rob_circular_example():
    assert rob_circular([1, 2, 3, 1]) == 4


def test_rob_circular_not_more_than_total():
    nums = [5, 1, 1, 5, 3, 8]
    assert rob_circular(nums) <= sum(nums)
    assert rob_circular(nums) >= max(nums)


def test_rob_circular_empty_raises():
    with pytest.raises(ValueError):
        rob_circular([])