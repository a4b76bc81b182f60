"""Dynamic programming on sequences: stairs, robberies, triangles and string alignment."""

from __future__ import annotations

from typing import List, Sequence


def climb_stairs(n: int) -> int:
    """Ways to climb n stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def _rob_line(nums: Sequence[int]) -> int:
    before, best = 0, 0
    for value in nums:
        before, best = best, max(before + value, best)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses in a row, never robbing two neighbours."""
    return _rob_line(nums)


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours too."""
    if len(nums) < 2:
        return nums[0] if nums else 0
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1 and paying for each step used."""
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(
            cost[i - 1] + one_back, cost[i - 2] + two_back
        )
    return one_back


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum, moving to an adjacent entry of the next row."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    below: List[int] = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[j], below[j + 1]) for j, value in enumerate(row)]
    return below[0]


def longest_common_subsequence(s1: str, s2: str) -> int:
    """Length of the longest subsequence common to both strings."""
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def min_delete_distance(word1: str, word2: str) -> int:
    """Fewest single-character deletions from either word to make them equal."""
    common = longest_common_subsequence(word1, word2)
    return len(word1) + len(word2) - 2 * common


def longest_common_substring(s1: str, s2: str) -> int:
    """Length of the longest contiguous run shared by both strings."""
    best = 0
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, start=1):
            run = previous[j - 1] + 1 if a == b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best