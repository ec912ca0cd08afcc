"""Array and matrix exercises: sums, merges, counting and traversal."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)`` with ``j < i`` whose values add to ``target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return index, partner
        seen[value] = index
    raise ValueError("no two values add up to the target")


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def merge_sorted_arrays(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if n == 0:
        return
    nums1[: m + n] = sorted(nums1[:m] + list(nums2[:n]))


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    prefix = suffix = 1
    for front, back in zip(nums, reversed(nums)):
        prefix *= front
        suffix *= back
        best = max(best, prefix, suffix)
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time (Boyer-Moore vote)."""
    values = iter(nums)
    try:
        candidate = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    count = 1
    for value in values:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = len(values) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(merge(left, right)), count


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]


def find_diagonal_order(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return matrix elements along anti-diagonals, alternating direction."""
    if not mat or not mat[0]:
        return []
    rows, cols = len(mat), len(mat[0])
    order: list[int] = []
    for diagonal in range(rows + cols - 1):
        indices = range(max(0, diagonal - cols + 1), min(diagonal, rows - 1) + 1)
        if diagonal % 2 == 0:
            indices = reversed(indices)
        order.extend(mat[i][diagonal - i] for i in indices)
    return order


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count contiguous runs whose values add up to ``k``."""
    prefix_counts = Counter({0: 1})
    total = 0
    result = 0
    for value in nums:
        total += value
        result += prefix_counts[total - k]
        prefix_counts[total] += 1
    return result


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return repeated values, then values of ``1..n*n`` absent from the grid."""
    if not grid:
        return []
    size = len(grid)
    counts = Counter(value for row in grid for value in row)
    repeated = sorted(value for value, count in counts.items() if count > 1)
    missing = [value for value in range(1, size * size + 1) if value not in counts]
    return repeated + missing