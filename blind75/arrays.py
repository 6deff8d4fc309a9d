"""Array and interval problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence

from blind75.union_find import UnionFind


@dataclass
class Interval:
    """A meeting time interval."""

    start: int
    end: int


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers, using boundary lengths."""
    lengths: dict[int, int] = {}
    best = 0
    for num in nums:
        if lengths.get(num, 0):
            continue
        left = lengths.get(num - 1, 0)
        right = lengths.get(num + 1, 0)
        total = left + right + 1
        lengths[num] = total
        best = max(best, total)
        lengths[num - left] = total
        lengths[num + right] = total
    return best


def longest_consecutive_union_find(nums: Sequence[int]) -> int:
    """Length of the longest consecutive run, by joining neighbours in a disjoint set."""
    if not nums:
        return 0
    uf = UnionFind(len(nums))
    index_of: dict[int, int] = {}
    for i, num in enumerate(nums):
        if num in index_of:
            continue
        index_of[num] = i
        if num + 1 in index_of:
            uf.union(i, index_of[num + 1])
        if num - 1 in index_of:
            uf.union(i, index_of[num - 1])
    sizes = Counter(uf.find(i) for i in range(len(nums)))
    return max(sizes.values())


def longest_consecutive_brute_force(nums: Sequence[int]) -> int:
    """Length of the longest consecutive run, walking forward from each run start."""
    if not nums:
        return 0
    present = set(nums)
    connected = {v for v in present if v - 1 in present or v + 1 in present}
    if not connected:
        return 1
    best = 0
    for start in connected:
        if start - 1 in connected:
            continue
        length = 1
        current = start + 1
        while current in connected:
            length += 1
            current += 1
        best = max(best, length)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a contiguous non-empty subarray."""
    if not nums:
        raise ValueError("max_product needs at least one number")
    smallest = largest = result = nums[0]
    for num in nums[1:]:
        if num < 0:
            smallest, largest = largest, smallest
        largest = max(num, largest * num)
        smallest = min(num, smallest * num)
        result = max(result, largest)
    return result


def find_min(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted array by binary search."""
    if not nums:
        raise ValueError("find_min needs at least one number")
    low, high = 0, len(nums) - 1
    while low < high:
        if nums[low] < nums[high]:
            return nums[low]
        mid = low + (high - low) // 2
        if nums[mid] >= nums[low]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def find_min_binary(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted array, looking for the drop point.

    Returns 0 for an empty array and -1 if no minimum is located.
    """
    n = len(nums)
    if n == 0:
        return 0
    if n == 1:
        return nums[0]
    if nums[-1] > nums[0]:
        return nums[0]
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[low] < nums[high]:
            return nums[low]
        at_end = mid == n - 1 and nums[mid - 1] > nums[mid]
        in_valley = 0 < mid < n - 1 and nums[mid - 1] > nums[mid] < nums[mid + 1]
        if at_end or in_valley:
            return nums[mid]
        if nums[mid] > nums[low] > nums[high]:
            low = mid + 1
        elif nums[mid] < nums[low] and nums[low] > nums[high]:
            high = mid - 1
        else:
            if nums[low] == nums[mid]:
                low += 1
            if nums[high] == nums[mid]:
                high -= 1
    return -1


def find_min_linear(nums: Sequence[int]) -> int:
    """Minimum by scanning every element."""
    if not nums:
        raise ValueError("find_min_linear needs at least one number")
    return min(nums)


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True if any value appears more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all other elements."""
    result = []
    prefix = 1
    for num in nums:
        result.append(prefix)
        prefix *= num
    postfix = 1
    for i in reversed(range(len(nums))):
        result[i] *= postfix
        postfix *= nums[i]
    return result


def missing_number(nums: Sequence[int]) -> int:
    """The one number of ``0..len(nums)`` absent from ``nums``."""
    xor = len(nums)
    for i, num in enumerate(nums):
        xor ^= i ^ num
    return xor


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first."""
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError(f"only {len(counts)} distinct values, cannot take {k}")
    return [value for value, _ in counts.most_common(k)]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, quadratic DP."""
    lengths: list[int] = []
    for i, num in enumerate(nums):
        best_before = max(
            (lengths[j] for j, prev in enumerate(nums[:i]) if prev < num), default=0
        )
        lengths.append(best_before + 1)
    return max(lengths, default=0)


def length_of_lis_fast(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence, patience sorting."""
    tails: list[int] = []
    for num in nums:
        i = bisect_left(tails, num)
        if i == len(tails):
            tails.append(num)
        else:
            tails[i] = num
    return len(tails)


def _sorted_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, ...]]:
    return sorted(tuple(interval) for interval in intervals)


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest intervals to remove so the rest do not overlap, by DP."""
    ordered = _sorted_intervals(intervals)
    if not ordered:
        return 0
    chain: list[int] = []
    for i, current in enumerate(ordered):
        best = max(
            (chain[j] for j, prev in enumerate(ordered[:i]) if current[0] >= prev[1]),
            default=0,
        )
        chain.append(best + 1)
    return len(ordered) - max(chain)


def erase_overlap_intervals_greedy(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest intervals to remove so the rest do not overlap, greedily."""
    ordered = _sorted_intervals(intervals)
    if not ordered:
        return 0
    kept = 1
    end = ordered[0][1]
    for interval in ordered[1:]:
        if interval[0] >= end:
            kept += 1
            end = interval[1]
        elif interval[1] < end:
            end = interval[1]
    return len(ordered) - kept


def can_attend_meetings(intervals: Iterable[Interval]) -> bool:
    """True if no two meetings overlap."""
    ordered = sorted(intervals, key=lambda interval: interval.start)
    return all(cur.start >= prev.end for prev, cur in pairwise(ordered))


def min_meeting_rooms(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest rooms needed to hold every ``[start, end)`` meeting."""
    deltas: Counter[int] = Counter()
    for start, end in intervals:
        if start < 0 or end < 0:
            raise ValueError("meeting times must not be negative")
        deltas[start] += 1
        deltas[end] -= 1
    rooms = in_use = 0
    for time in sorted(deltas):
        in_use += deltas[time]
        rooms = max(rooms, in_use)
    return rooms