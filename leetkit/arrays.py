"""Problems over arrays, grids and strings."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` of the first pair summing to ``target``, or ``[]``."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def max_equal_freq(nums: Sequence[int]) -> int:
    """Longest prefix from which removing one element leaves equal frequencies."""
    count: Counter[int] = Counter()
    freq: Counter[int] = Counter()
    max_count = 0
    answer = 0
    for length, num in enumerate(nums, 1):
        if count[num]:
            freq[count[num]] -= 1
        count[num] += 1
        current = count[num]
        max_count = max(max_count, current)
        freq[current] += 1
        if (
            max_count == 1
            or (
                freq[max_count] == 1
                and (max_count - 1) * freq[max_count - 1] + max_count == length
            )
            or (freq[1] == 1 and freq[max_count] * max_count + 1 == length)
        ):
            answer = length
    return answer


def _is_magic(grid, row_sums, col_sums, top, left, size) -> bool:
    target = row_sums[top][left + size] - row_sums[top][left]
    if any(
        row_sums[r][left + size] - row_sums[r][left] != target
        for r in range(top, top + size)
    ):
        return False
    if any(
        col_sums[c][top + size] - col_sums[c][top] != target
        for c in range(left, left + size)
    ):
        return False
    diagonal = sum(grid[top + k][left + k] for k in range(size))
    anti_diagonal = sum(grid[top + k][left + size - 1 - k] for k in range(size))
    return diagonal == target and anti_diagonal == target


def largest_magic_square(grid: Sequence[Sequence[int]]) -> int:
    """Side of the largest square whose rows, columns and diagonals share a sum."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    row_sums = [list(accumulate(row, initial=0)) for row in grid]
    col_sums = [list(accumulate(column, initial=0)) for column in zip(*grid)]
    for size in range(min(rows, cols), 1, -1):
        for top in range(rows - size + 1):
            for left in range(cols - size + 1):
                if _is_magic(grid, row_sums, col_sums, top, left, size):
                    return size
    return 1


def min_operations(logs: Sequence[str]) -> int:
    """Depth below the main folder after following the folder change log."""
    depth = 0
    for entry in logs:
        if entry == "./":
            continue
        if entry == "../":
            depth = max(depth - 1, 0)
        else:
            depth += 1
    return depth


def get_smallest_string(s: str) -> str:
    """Swap the first adjacent same-parity pair that is out of order."""
    for i, (first, second) in enumerate(zip(s, s[1:])):
        if (ord(second) - ord(first)) % 2 == 0 and first > second:
            return s[:i] + second + first + s[i + 2:]
    return s