"""Binary-search based lookups over sorted and rotated sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours, or -1."""
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1

    lo, hi = 1, n - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[mid - 1] and nums[mid + 1] < nums[mid]:
            return mid
        if nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return nums[lo]


def _rotated_index(nums: Sequence[int], target: int, skip_duplicates: bool) -> int:
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if skip_duplicates and nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[mid] >= nums[lo]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    return _rotated_index(nums, target, skip_duplicates=False)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence with repeats."""
    return _rotated_index(nums, target, skip_duplicates=True) != -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``.

    Both are -1 when ``target`` is absent.
    """
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or where it would go."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted list of pairs."""
    if len(nums) == 1:
        return nums[0]

    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if mid != hi and nums[mid] == nums[mid + 1]:
            if mid % 2 == 0:
                lo = mid + 1
            else:
                hi = mid - 1
        elif mid != 0 and nums[mid] == nums[mid - 1]:
            if mid % 2 != 0:
                lo = mid + 1
            else:
                hi = mid - 1
        else:
            return nums[mid]
    raise ValueError("no element appears exactly once")


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1