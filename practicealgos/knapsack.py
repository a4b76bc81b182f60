"""Knapsack-style dynamic programming: subset sums, partitions, coins and rods."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Set

_MODULUS = 10**9 + 7


def _require_non_negative(values: Sequence[int], what: str) -> None:
    if any(v < 0 for v in values):
        raise ValueError(f"{what} must not contain negative values")


def _reachable_sums(values: Sequence[int], limit: int) -> Set[int]:
    """Every subset sum of values that does not exceed limit."""
    reachable = {0}
    for value in values:
        reachable |= {s + value for s in reachable if s + value <= limit}
    return reachable


def _count_subsets(
    values: Sequence[int], total: int, modulus: Optional[int] = None
) -> int:
    """Number of subsets (by position) of values summing to total."""
    ways = [1] + [0] * total
    for value in values:
        for j in range(total, value - 1, -1):
            ways[j] += ways[j - value]
            if modulus is not None:
                ways[j] %= modulus
    return ways[total]


def is_subset_sum(arr: Sequence[int], total: int) -> bool:
    """Whether some non-empty selection of arr (or any selection, for 0) sums to total.

    An empty arr never has a matching subset.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    _require_non_negative(arr, "arr")
    if not arr:
        return False
    return total in _reachable_sums(arr, total)


def can_partition(nums: Sequence[int]) -> bool:
    """Whether nums splits into two groups of equal sum."""
    _require_non_negative(nums, "nums")
    if len(nums) <= 1:
        return False
    whole = sum(nums)
    if whole % 2:
        return False
    half = whole // 2
    return half in _reachable_sums(nums, half)


def perfect_sum(arr: Sequence[int], total: int) -> int:
    """Number of subsets of arr summing to total, modulo 10**9 + 7."""
    if total < 0:
        raise ValueError("total must not be negative")
    _require_non_negative(arr, "arr")
    return _count_subsets(arr, total, _MODULUS) % _MODULUS


def min_difference(arr: Sequence[int]) -> int:
    """Smallest possible difference between the sums of two groups splitting arr."""
    _require_non_negative(arr, "arr")
    whole = sum(arr)
    best = max(_reachable_sums(arr, whole // 2))
    return whole - 2 * best


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Ways to sign each number with + or - so the signed sum equals target."""
    _require_non_negative(nums, "nums")
    target = abs(target)
    whole = sum(nums)
    if whole < target or (whole + target) % 2:
        return 0
    return _count_subsets(nums, (whole + target) // 2)


def count_coin_ways(coins: Sequence[int], target: int) -> int:
    """Number of coin combinations, with unlimited use of each coin, making target."""
    if target < 0:
        raise ValueError("target must not be negative")
    if any(c <= 0 for c in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def min_coins(coins: Sequence[int], value: int) -> int:
    """Fewest coins, each usable any number of times, making value; -1 if impossible."""
    if not coins:
        raise ValueError("coins must not be empty")
    if any(c <= 0 for c in coins):
        raise ValueError("coins must be positive")
    if value < 0:
        raise ValueError("value must not be negative")
    fewest: List[float] = [0.0] + [math.inf] * value
    for coin in coins:
        for amount in range(coin, value + 1):
            fewest[amount] = min(fewest[amount], fewest[amount - coin] + 1)
    result = fewest[value]
    return -1 if math.isinf(result) else int(result)


def cut_rod(price: Sequence[int]) -> int:
    """Best total price for a rod of length len(price), price[i] selling length i + 1."""
    length = len(price)
    best = [0] * (length + 1)
    for piece in range(1, length + 1):
        gain = price[piece - 1]
        for remaining in range(piece, length + 1):
            best[remaining] = max(best[remaining], gain + best[remaining - piece])
    return best[length]