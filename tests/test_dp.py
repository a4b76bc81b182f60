import pytest

from practicealgos.dp import (
    climb_stairs,
    longest_common_subsequence,
    longest_common_substring,
    min_cost_climbing_stairs,
    min_delete_distance,
    minimum_total,
    rob,
    rob_circular,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(2, 15))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_value():
    assert climb_stairs(5) == 8


def test_climb_stairs_negative():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_rob_empty_and_single():
    assert rob([]) == 0
    assert rob([7]) == 7


def test_rob_two_houses_takes_larger():
    assert rob([3, 9]) == 9
    assert rob([9, 3]) == 9


def test_rob_alternate_houses():
    assert rob([5, 1, 5, 1, 5]) == 15


def test_rob_bounded_by_total():
    nums = [4, 2, 8, 3, 6, 1]
    assert rob(nums) <= sum(nums)
    assert rob(nums) >= max(nums)


def test_rob_circular_small():
    assert rob_circular([]) == 0
    assert rob_circular([6]) == 6
    assert rob_circular([2, 3, 2]) == 3


def test_rob_circular_never_exceeds_linear():
    nums = [5, 1, 5, 1, 5]
    assert rob_circular(nums) <= rob(nums)
    assert rob_circular(nums) == 10


def test_min_cost_climbing_stairs_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_climbing_stairs_zero_costs():
    assert min_cost_climbing_stairs([0, 0, 0, 0]) == 0


def test_min_cost_climbing_stairs_two_steps():
    assert min_cost_climbing_stairs([4, 9]) == 4


def test_minimum_total_example():
    triangle = [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]
    assert minimum_total(triangle) == 11
    assert triangle[0] == [2]


def test_minimum_total_single_row():
    assert minimum_total([[-3]]) == -3


def test_minimum_total_all_ones():
    triangle = [[1] * (i + 1) for i in range(6)]
    assert minimum_total(triangle) == 6


def test_minimum_total_empty():
    with pytest.raises(ValueError):
        minimum_total([])


def test_min_delete_distance_example():
    assert min_delete_distance("sea", "eat") == 2


def test_min_delete_distance_identity_and_empty():
    assert min_delete_distance("abc", "abc") == 0
    assert min_delete_distance("", "hello") == 5
    assert min_delete_distance("world", "") == 5


def test_min_delete_distance_symmetric():
    assert min_delete_distance("leetcode", "etco") == min_delete_distance(
        "etco", "leetcode"
    )


def test_lcs_properties():
    assert longest_common_subsequence("abcde", "abcde") == 5
    assert longest_common_subsequence("abc", "") == 0
    assert longest_common_subsequence("abc", "xaybzc") == 3
    assert longest_common_subsequence("abc", "def") == 0


def test_lcs_symmetric_and_bounded():
    a, b = "abcbdab", "bdcaba"
    assert longest_common_subsequence(a, b) == longest_common_subsequence(b, a)
    assert longest_common_subsequence(a, b) <= min(len(a), len(b))


def test_longest_common_substring_contained():
    assert longest_common_substring("xxabcdyy", "abcd") == 4
    assert longest_common_substring("abcd", "zzabcdzz") == 4


def test_longest_common_substring_disjoint_and_empty():
    assert longest_common_substring("abc", "xyz") == 0
    assert longest_common_substring("", "abc") == 0


def test_substring_not_longer_than_subsequence():
    a, b = "abcbdab", "bdcaba"
    assert longest_common_substring(a, b) <= longest_common_subsequence(a, b)