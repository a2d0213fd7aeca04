from collections import Counter

import pytest

from algosuite.backtracking import (
    combination_sum,
    combination_sum_unique,
    subsets_with_duplicates,
)


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize(
    "candidates,target", [([2, 3, 5], 8), ([7, 3, 2], 18), ([4, 6], 5), ([1], 4)]
)
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    as_tuples = [tuple(c) for c in result]
    assert len(set(as_tuples)) == len(result)
    order = {value: index for index, value in enumerate(candidates)}
    for combo in result:
        assert sum(combo) == target
        assert set(combo) <= set(candidates)
        positions = [order[v] for v in combo]
        assert positions == sorted(positions)


def test_combination_sum_unreachable():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_single_unit():
    assert combination_sum([1], 4) == [[1, 1, 1, 1]]


def test_combination_sum_rejects_zero():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_combination_sum_unique_worked_example():
    assert combination_sum_unique([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


@pytest.mark.parametrize(
    "candidates,target", [([2, 5, 2, 1, 2], 5), ([1, 1, 1, 2, 2], 4), ([3, 3, 3], 6)]
)
def test_combination_sum_unique_invariants(candidates, target):
    result = combination_sum_unique(candidates, target)
    available = Counter(candidates)
    assert len({tuple(c) for c in result}) == len(result)
    assert result == sorted(result)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert not Counter(combo) - available


def test_combination_sum_unique_keeps_input():
    candidates = [3, 1, 2]
    combination_sum_unique(candidates, 3)
    assert candidates == [3, 1, 2]


def test_subsets_worked_example():
    assert subsets_with_duplicates([1, 2, 2]) == [
        [1, 2, 2],
        [1, 2],
        [1],
        [2, 2],
        [2],
        [],
    ]


def test_subsets_distinct_count():
    nums = [4, 1, 3, 2]
    result = subsets_with_duplicates(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == sorted(nums)
    assert result[-1] == []


def test_subsets_all_equal():
    nums = [5, 5, 5]
    result = subsets_with_duplicates(nums)
    assert result == [nums[:k] for k in range(len(nums), -1, -1)]


@pytest.mark.parametrize("nums", [[1, 2, 2, 3, 3, 3], [0], [], [2, 1, 2, 1]])
def test_subsets_invariants(nums):
    result = subsets_with_duplicates(nums)
    available = Counter(nums)
    assert len({tuple(s) for s in result}) == len(result)
    expected_count = 1
    for count in available.values():
        expected_count *= count + 1
    assert len(result) == expected_count
    for subset in result:
        assert subset == sorted(subset)
        assert not Counter(subset) - available