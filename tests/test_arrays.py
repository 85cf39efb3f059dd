import pytest

from leetkit.arrays import (
    get_smallest_string,
    largest_magic_square,
    length_of_lis,
    max_equal_freq,
    min_operations,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_hits_target(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_first_pair():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


def test_two_sum_no_pair():
    assert two_sum([1, 2], 10) == []


def test_lis_source_case():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4


@pytest.mark.parametrize("n", [1, 2, 7])
def test_lis_of_increasing_run(n):
    assert length_of_lis(list(range(n))) == n


def test_lis_constant():
    assert length_of_lis([7, 7, 7, 7, 7, 7, 7]) == 1


def test_lis_empty():
    assert length_of_lis([]) == 0


def test_lis_bounds():
    nums = [0, 1, 0, 3, 2, 3]
    assert 1 <= length_of_lis(nums) <= len(nums)


def test_max_equal_freq_source_case():
    assert max_equal_freq([2, 2, 1, 1, 5, 3, 3, 5]) == 7


def test_max_equal_freq_distinct_values():
    nums = [4, 1, 9, 6]
    assert max_equal_freq(nums) == len(nums)


def test_max_equal_freq_single_extra_value():
    nums = [1, 1, 2, 2, 3]
    assert max_equal_freq(nums) == len(nums)


def test_max_equal_freq_bounds():
    nums = [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5]
    assert 1 <= max_equal_freq(nums) <= len(nums)


def test_magic_square_source_grid():
    grid = [
        [7, 1, 4, 5, 6],
        [2, 5, 1, 6, 4],
        [1, 5, 4, 3, 2],
        [1, 2, 7, 3, 4],
    ]
    assert largest_magic_square(grid) == 3


def test_magic_square_uniform_grid():
    grid = [[5] * 4 for _ in range(3)]
    assert largest_magic_square(grid) == min(len(grid), len(grid[0]))


def test_magic_square_single_cell():
    assert largest_magic_square([[8]]) == 1


def test_magic_square_none_larger_than_one():
    assert largest_magic_square([[1, 2], [3, 4]]) == 1


def test_magic_square_empty():
    assert largest_magic_square([]) == 0


def test_min_operations_source_case():
    assert min_operations(["d1/", "d2/", "../", "d21/", "./"]) == 2


def test_min_operations_cannot_go_above_main():
    assert min_operations(["d1/", "../", "../", "../"]) == 0


def test_min_operations_stay():
    assert min_operations(["./", "./", "./"]) == 0


def test_min_operations_counts_descents():
    logs = [f"d{i}/" for i in range(5)]
    assert min_operations(logs) == len(logs)


def test_smallest_string_source_case():
    assert get_smallest_string("45320") == "43520"


def test_smallest_string_unchanged():
    assert get_smallest_string("001") == "001"


@pytest.mark.parametrize("s", ["45320", "001", "97531", "2468", "1"])
def test_smallest_string_invariants(s):
    result = get_smallest_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s
    assert sum(a != b for a, b in zip(result, s)) in (0, 2)