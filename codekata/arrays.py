"""Array puzzles: insert positions, pair sums, trapped water and colour sorting."""

from __future__ import annotations

from itertools import accumulate, combinations
from typing import MutableSequence, Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first pair of indices whose values add up to ``target``.

    Raises ValueError when no such pair exists.
    """
    for (i, first), (j, second) in combinations(enumerate(nums), 2):
        if first + second == target:
            return i, j
    raise ValueError(f"no two numbers add up to {target}")


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    if not height:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - level
        for left, right, level in zip(left_max, right_max, height)
    )


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    zero_index, two_index = 0, len(nums) - 1
    i = 0
    while i <= two_index:
        if nums[i] == 0:
            nums[i], nums[zero_index] = nums[zero_index], nums[i]
            zero_index += 1
            i += 1
        elif nums[i] == 2:
            nums[i], nums[two_index] = nums[two_index], nums[i]
            two_index -= 1
        else:
            i += 1