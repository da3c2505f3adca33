"""Array problems: searching, scanning and in-place rearranging."""

from __future__ import annotations

from collections.abc import Sequence
from heapq import merge
from itertools import groupby


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if target - value in seen:
            return seen[target - value], index
        seen[value] = index
    raise ValueError(f"no two numbers add up to {target}")


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(merge(nums1, nums2))
    n = len(merged)
    if n == 0:
        raise ValueError("median of empty input")
    if n % 2 == 0:
        return (merged[n // 2 - 1] + merged[n // 2]) / 2
    return float(merged[n // 2])


def max_area(heights: Sequence[int]) -> int:
    """Return the most water a pair of vertical lines can hold."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front, in place.

    Returns how many distinct values there are; the rest of the list is
    left as it was.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated sorted sequence; -1 when absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_subarray of empty input")
    running = best = nums[0]
    for value in nums[1:]:
        running = value + running if running > 0 else value
        best = max(best, running)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            break
        reach = max(reach, index + step)
    return reach >= len(nums) - 1


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place."""
    nums.sort()