"""Classic problems over flat integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import groupby, pairwise


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first index pair ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return i, j
    raise ValueError(f"no two numbers sum to {target}")


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Write the distinct values of ``nums`` in ascending order to its front.

    Returns how many distinct values there are; the rest of ``nums`` is untouched.
    """
    unique = sorted(set(nums))
    nums[: len(unique)] = unique
    return len(unique)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    n = len(nums)
    pivot = next((i - 1 for i in range(n - 1, 0, -1) if nums[i] > nums[i - 1]), -1)
    if pivot != -1:
        swap = next(j for j in range(n - 1, pivot, -1) if nums[j] > nums[pivot])
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """All subsets of ``nums``, keeping element order within each subset.

    Subsets without the earliest elements come first.
    """
    items = list(nums)
    bits = range(len(items) - 1, -1, -1)
    return [
        [item for bit, item in zip(bits, items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    best_buy = prices[0]
    profit = 0
    for price in prices[1:]:
        if price > profit:
            profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit


def _first_with_count(nums: Sequence[int], count: int) -> int | None:
    return next((value for value, seen in Counter(nums).items() if seen == count), None)


def single_number(nums: Sequence[int]) -> int:
    """Return the value that occurs exactly once, or 0 if there is none."""
    found = _first_with_count(nums, 1)
    return 0 if found is None else found


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times, or 0."""
    limit = len(nums) // 2
    return next((value for value, seen in Counter(nums).items() if seen > limit), 0)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    if not nums:
        return
    k %= len(nums)
    split = len(nums) - k
    nums[:] = list(nums[split:]) + list(nums[:split])


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values occurring more than ``len(nums) // 3`` times, in order of first appearance."""
    limit = len(nums) // 3
    return [value for value, seen in Counter(nums).items() if seen > limit]


def missing_number(nums: Sequence[int]) -> int:
    """Return the number from ``0..len(nums)`` that ``nums`` lacks."""
    values = sorted(nums)
    if not values or values[0] != 0:
        return 0
    for current, following in pairwise(values):
        if following != current + 1:
            return current + 1
    return len(values)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones, 0 if there are none."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the value that occurs exactly once, or -1 if there is none."""
    found = _first_with_count(nums, 1)
    return -1 if found is None else found


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous slices of ``nums`` that sum to ``k``."""
    seen = Counter({0: 1})
    running = 0
    total = 0
    for value in nums:
        running += value
        total += seen[running - k]
        seen[running] += 1
    return total


def rearrange_array(nums: Sequence[int]) -> list[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    Each sign keeps its original order; both signs must occur equally often.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("nums must hold as many negative as non-negative values")
    return [value for pair in zip(positives, negatives) for value in pair]