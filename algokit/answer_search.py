"""Binary search over the answer space for minimum feasible values."""

from __future__ import annotations

from collections.abc import Sequence


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _require_values(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def _fits_in_parts(nums: Sequence[int], k: int, limit: int) -> bool:
    total = 0
    parts = 1
    for value in nums:
        if value > limit:
            return False
        if total + value <= limit:
            total += value
        else:
            parts += 1
            total = value
    return parts <= k


def split_array(nums: Sequence[int], k: int) -> int:
    """Smallest possible largest sum when ``nums`` is cut into at most ``k`` parts.

    Returns -1 when no positive limit works.
    """
    if k == 1 and 1 <= len(nums) <= 2 and all(value == 0 for value in nums):
        return 0
    low, high = 1, sum(nums)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if _fits_in_parts(nums, k, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Slowest eating speed that finishes every pile within ``h`` hours."""
    _require_values(piles, "piles")
    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if sum(_ceil_div(pile, mid) for pile in piles) <= h:
            high = mid
        else:
            low = mid + 1
    return low


def _days_needed(weights: Sequence[int], capacity: int) -> int:
    load = 0
    days = 1
    for weight in weights:
        if load + weight <= capacity:
            load += weight
        else:
            days += 1
            load = weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that delivers ``weights`` in order within ``days`` days."""
    _require_values(weights, "weights")
    low, high = max(weights), sum(weights)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if _days_needed(weights, mid) <= days:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor whose rounded-up quotients sum to at most ``threshold``."""
    _require_values(nums, "nums")
    low, high = 1, max(nums)
    result = -1
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(value, mid) for value in nums) <= threshold:
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def _bouquets(bloom_day: Sequence[int], day: int, k: int) -> int:
    run = 0
    count = 0
    for bloom in bloom_day:
        run = run + 1 if bloom <= day else 0
        if run == k:
            count += 1
            run = 0
    return count


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Earliest day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    _require_values(bloom_day, "bloom_day")
    low, high = 1, max(bloom_day)
    result = -1
    while low <= high:
        mid = (low + high) // 2
        if _bouquets(bloom_day, mid, k) >= m:
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def minimum_time(time: Sequence[int], total_trips: int) -> int:
    """Least time in which buses with trip durations ``time`` make ``total_trips`` trips."""
    _require_values(time, "time")
    low, high = 1, min(time) * total_trips
    while low < high:
        mid = (low + high) // 2
        if sum(mid // duration for duration in time) >= total_trips:
            high = mid
        else:
            low = mid + 1
    return low