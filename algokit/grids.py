"""Dynamic programming and flood fills over grids and small sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from math import comb


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m <= 0 or n <= 0:
        return 0
    return comb(m + n - 2, m - 1)


def _require_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths from corner to corner avoiding cells equal to 1."""
    _require_grid(grid)
    width = len(grid[0])
    if grid[-1][width - 1] == 1:
        return 0
    below = [0] * (width + 1)
    for i, row in enumerate(reversed(grid)):
        current = [0] * (width + 1)
        for j in range(width - 1, -1, -1):
            if row[j] == 1:
                current[j] = 0
            elif i == 0 and j == width - 1:
                current[j] = 1
            else:
                current[j] = current[j + 1] + below[j]
        below = current
    return below[0]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    _require_grid(grid)
    best: list[int] = []
    for i, row in enumerate(grid):
        current: list[int] = []
        for j, value in enumerate(row):
            if i == 0 and j == 0:
                current.append(value)
            elif i == 0:
                current.append(value + current[j - 1])
            elif j == 0:
                current.append(value + best[j])
            else:
                current.append(value + min(current[j - 1], best[j]))
        best = current
    return best[-1]


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def solve_surrounded(board: Sequence[MutableSequence[str]]) -> None:
    """Capture, in place, every region of 'O' cells not connected to the border."""
    if not board or not board[0]:
        return
    rows, cols = len(board), len(board[0])
    border = [(0, j) for j in range(cols)] + [(rows - 1, j) for j in range(cols)]
    border += [(i, 0) for i in range(rows)] + [(i, cols - 1) for i in range(rows)]
    stack = [cell for cell in border if board[cell[0]][cell[1]] == "O"]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < rows and 0 <= j < cols) or board[i][j] != "O":
            continue
        board[i][j] = "T"
        stack.extend([(i - 1, j), (i, j - 1), (i + 1, j), (i, j + 1)])
    for row in board:
        for j, cell in enumerate(row):
            if cell == "T":
                row[j] = "O"
            elif cell == "O":
                row[j] = "X"


def _rob_line(values: Sequence[int]) -> int:
    before, best = values[0], max(values[0], values[1])
    for value in values[2:]:
        before, best = best, max(best, before + value)
    return best


def rob_circular(nums: Sequence[int]) -> int:
    """Most loot from houses in a circle when no two neighbours may both be robbed."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))