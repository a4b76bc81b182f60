"""Classic array and sequence problems."""

from __future__ import annotations

import heapq
from itertools import accumulate, groupby
from typing import List, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell (never negative)."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    highest = prices[-1]
    for price in reversed(prices[:-1]):
        best = max(best, highest - price)
        highest = max(highest, price)
    return best


def max_profit_multi(prices: Sequence[int]) -> int:
    """Best profit when any number of buy/sell transactions is allowed."""
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def move_zeroes(nums: List[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    non_zero = [x for x in nums if x != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def plus_one(digits: Sequence[int]) -> List[int]:
    """Add one to a number given as a list of decimal digits."""
    if not digits:
        return []
    value = int("".join(str(d) for d in digits)) + 1
    return [int(c) for c in str(value).zfill(len(digits))]


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Indices of two numbers adding to target; the last pair found wins.

    Returns ``[-1, -1]`` when no pair exists.
    """
    result = [-1, -1]
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            result = [seen[complement], index]
        else:
            seen.setdefault(value, index)
    return result


def two_sum_sorted(nums: Sequence[int], target: int) -> List[int]:
    """One-based indices of a pair in a sorted sequence summing to target, or []."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        total = nums[lo] + nums[hi]
        if total == target:
            return [lo + 1, hi + 1]
        if total < target:
            lo += 1
        else:
            hi -= 1
    return []


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given walls."""
    water = 0
    i, j = 0, len(height) - 1
    while i < j:
        h = min(height[i], height[j])
        water = max(water, (j - i) * h)
        while i < j and height[i] <= h:
            i += 1
        while i < j and height[j] <= h:
            j -= 1
    return water


def majority_element(nums: Sequence[int]) -> int:
    """Majority candidate found by a voting pass."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate, count = nums[0], 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count < 0:
            candidate, count = value, 1
    return candidate


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def sorted_squares(nums: Sequence[int]) -> List[int]:
    """Squares of the numbers, in ascending order."""
    return sorted(x * x for x in nums)


def merge_sorted(nums1: List[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n items of nums2 into the first m items of nums1, in place."""
    nums1[:] = list(heapq.merge(nums1[:m], nums2[:n]))


def product_except_self(nums: Sequence[int]) -> List[int]:
    """For each position, the product of all the other numbers."""
    prefix = [1, *accumulate(nums[:-1], lambda a, b: a * b)] if nums else []
    suffix = list(accumulate(reversed(nums[1:]), lambda a, b: a * b, initial=1))[::-1]
    return [p * s for p, s in zip(prefix, suffix)]


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped by an elevation map."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        max(0, min(lm, rm) - h) for lm, rm, h in zip(left_max, right_max, height)
    )


def three_sum(nums: Sequence[int]) -> List[List[int]]:
    """Zero-sum triplets, at most one for each first element of the sorted input."""
    ordered = sorted(nums)
    n = len(ordered)
    result: List[List[int]] = []
    if n < 3:
        return result
    for i in range(n - 1):
        lo, hi = i + 1, n - 1
        while lo < hi:
            if (
                i > 0
                and ordered[i] == ordered[i - 1]
                and result
                and ordered[lo] == result[-1][1]
            ):
                lo += 1
            total = ordered[i] + ordered[lo] + ordered[hi]
            if total == 0:
                result.append([ordered[i], ordered[lo], ordered[hi]])
                break
            if total > 0:
                hi -= 1
            else:
                lo += 1
    return result


def pascal_triangle(num_rows: int) -> List[List[int]]:
    """Rows of Pascal's triangle; at least two rows unless exactly one is asked."""
    rows = [[1]]
    if num_rows != 1:
        rows.append([1, 1])
    for _ in range(3, num_rows + 1):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def remove_duplicates(nums: List[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def min_operations(nums: Sequence[int], x: int) -> int:
    """Fewest items taken from either end summing to x, or -1."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    target = sum(nums) - x
    best = -1
    left = right = 0
    current = nums[0]
    while left < n and right < n:
        if current < target:
            right += 1
            if right == n:
                break
            current += nums[right]
        if current > target:
            current -= nums[left]
            left += 1
        if current == target:
            best = max(best, right - left + 1)
            right += 1
            if right == n:
                break
            current += nums[right]
    return -1 if best == -1 else n - best


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run with no repeated values."""
    seen: set[int] = set()
    current = best = left = 0
    for value in nums:
        while value in seen:
            current -= nums[left]
            seen.discard(nums[left])
            left += 1
        current += value
        seen.add(value)
        best = max(best, current)
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        length = 1
        while start + length in values:
            length += 1
        longest = max(longest, length)
    return longest


def max_product_pair(nums: Sequence[int]) -> int:
    """Maximum of (a - 1) * (b - 1) over the two largest numbers."""
    if len(nums) < 2:
        raise ValueError("need at least two numbers")
    first, second = heapq.nlargest(2, nums)
    return (first - 1) * (second - 1)


def number_of_steps(num: int) -> int:
    """Steps to reach zero by halving even numbers and decrementing odd ones."""
    steps = 0
    while num > 0:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps