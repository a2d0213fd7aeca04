"""Dynamic-programming solutions to classic optimisation problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for char1 in text1:
        current = [0]
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def max_job_profit(
    start_times: Sequence[int],
    end_times: Sequence[int],
    profits: Sequence[int],
) -> int:
    """Return the best total profit from a set of non-overlapping jobs.

    A job may start at the moment another one ends.
    """
    if not len(start_times) == len(end_times) == len(profits):
        raise ValueError("start_times, end_times and profits must have equal length")
    jobs = sorted(zip(start_times, end_times, profits))
    starts = [start for start, _, _ in jobs]
    count = len(jobs)
    best = [0] * (count + 1)
    for i in range(count - 1, -1, -1):
        _, end, profit = jobs[i]
        following = bisect_left(starts, end, lo=i + 1)
        best[i] = max(best[i + 1], profit + best[following])
    return best[0]


def min_cut_cost(length: int, cuts: Sequence[int]) -> int:
    """Return the minimum total cost of cutting a stick at every given position.

    Each cut costs the length of the piece being cut.
    """
    points = sorted([*cuts, 0, length])
    size = len(points)
    cost = [[0] * size for _ in range(size)]
    for gap in range(2, size):
        for i in range(size - gap):
            j = i + gap
            cost[i][j] = points[j] - points[i] + min(
                cost[i][k] + cost[k][j] for k in range(i + 1, j)
            )
    return cost[0][size - 1]


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if none do.

    Every coin may be used any number of times.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            fewest[value] = min(fewest[value], fewest[value - coin] + 1)
    return -1 if fewest[amount] >= unreachable else fewest[amount]


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two subsets of equal sum."""
    if any(num < 0 for num in nums):
        raise ValueError("numbers must not be negative")
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    mask = (1 << (target + 1)) - 1
    reachable = 1
    for num in nums:
        reachable = (reachable | (reachable << num)) & mask
    return bool(reachable >> target & 1)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from top-left to bottom-right.

    The path moves only down or right.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    best: list[int] = []
    for row in grid:
        if not best:
            running = 0
            for value in row:
                running += value
                best.append(running)
            continue
        current: list[int] = []
        for j, value in enumerate(row):
            above = best[j]
            left = current[j - 1] if j else above
            current.append(value + min(above, left))
        best = current
    return best[-1]


def edit_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance between two words."""
    previous = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        current = [i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]