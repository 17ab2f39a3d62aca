"""Binary searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from collections.abc import Sequence


def _find(nums: Sequence[int], lo: int, hi: int, target: int) -> int:
    """Binary search ``nums[lo..hi]`` (inclusive); return an index or -1."""
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def _rotation_point(nums: Sequence[int]) -> int:
    """Index of the smallest element of a rotated sorted sequence."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        elif nums[mid] < nums[hi]:
            hi = mid
        else:
            hi -= 1
    return lo


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    pivot = _rotation_point(nums)
    index = _find(nums, 0, pivot - 1, target)
    if index != -1:
        return index
    return _find(nums, pivot, len(nums) - 1, target)


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = last = -1

    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            first = mid
            hi = mid - 1
        elif nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1

    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            last = mid
            lo = mid + 1
        elif nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1

    return first, last


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` is, or would be inserted, in sorted ``nums``."""
    answer = len(nums)
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
            answer = mid
    return answer


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix whose rows are each sorted."""
    return any(_find(row, 0, len(row) - 1, target) != -1 for row in matrix)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence with repeats."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        while lo < hi and nums[lo] == nums[lo + 1]:
            lo += 1
        while lo < hi and nums[hi] == nums[hi - 1]:
            hi -= 1
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        elif nums[mid] < nums[hi]:
            hi = mid
        else:
            hi -= 1
    pivot = lo
    return (
        _find(nums, 0, pivot - 1, target) != -1
        or _find(nums, pivot, len(nums) - 1, target) != -1
    )


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("cannot find the minimum of an empty sequence")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return nums[lo]


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours."""
    if not nums:
        raise ValueError("cannot find a peak in an empty sequence")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix sorted along rows and columns."""
    if not matrix:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the ``k``-th positive integer missing from strictly increasing ``arr``."""
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] - (mid + 1) < k:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo + k


def find_peak_grid(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(row, col)`` of a cell larger than its four neighbours, or (-1, -1)."""
    lo, hi = 0, len(mat) - 1
    last = len(mat) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        row = mat[mid]
        col = max(range(len(row)), key=row.__getitem__)
        up = -1 if mid == 0 else mat[mid - 1][col]
        down = -1 if mid == last else mat[mid + 1][col]
        value = row[col]
        if value > up and value > down:
            return mid, col
        if value < up:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1, -1