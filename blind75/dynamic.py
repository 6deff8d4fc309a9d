"""Dynamic programming problems."""

from __future__ import annotations

from typing import Sequence


def rob_dp(nums: Sequence[int]) -> int:
    """Most money from non-adjacent houses, with a full DP table."""
    n = len(nums)
    if n == 0:
        return 0
    if n == 1:
        return nums[0]
    best = [nums[0], max(nums[0], nums[1])]
    for value in nums[2:]:
        best.append(max(best[-1], value + best[-2]))
    return best[-1]


def rob_two_vars(nums: Sequence[int]) -> int:
    """Most money from non-adjacent houses, keeping only two running values."""
    current = previous = 0
    for value in nums:
        current, previous = max(current, value + previous), current
    return current


def rob(nums: Sequence[int]) -> int:
    """Most money from non-adjacent houses, tracking even and odd positions."""
    even = odd = 0
    for i, value in enumerate(nums):
        if i % 2 == 0:
            even = max(even + value, odd)
        else:
            odd = max(even, odd + value)
    return max(even, odd)


def _rob_range(nums: Sequence[int], start: int, end: int) -> int:
    previous = nums[start]
    current = max(previous, nums[start + 1])
    for value in nums[start + 2 : end + 1]:
        current, previous = max(current, value + previous), current
    return current


def rob_circular(nums: Sequence[int]) -> int:
    """Most money from non-adjacent houses arranged in a circle."""
    n = len(nums)
    if n == 0:
        return 0
    if n == 1:
        return nums[0]
    if n == 2:
        return max(nums[0], nums[1])
    return max(_rob_range(nums, 0, n - 2), _rob_range(nums, 1, n - 1))


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 if it cannot be made."""
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] > amount else fewest[amount]