"""Backtracking enumeration of combinations and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates summing to ``target``.

    Each candidate may be reused any number of times; combinations keep
    the order in which candidates were given.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    items = list(candidates)

    def search(i: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if i == len(items):
            if remaining == 0:
                yield list(chosen)
            return
        if remaining < 0:
            return
        yield from search(i, remaining - items[i], chosen + (items[i],))
        yield from search(i + 1, remaining, chosen)

    return list(search(0, target, ()))


def _next_distinct(items: list[int], i: int) -> int:
    i += 1
    while i < len(items) and items[i - 1] == items[i]:
        i += 1
    return i


def combination_sum_unique(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations summing to ``target``.

    Each candidate is used at most once and results are in sorted order.
    """
    items = sorted(candidates)

    def search(i: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if i == len(items):
            if remaining == 0:
                yield list(chosen)
            return
        if remaining < 0:
            return
        yield from search(i + 1, remaining - items[i], chosen + (items[i],))
        yield from search(_next_distinct(items, i), remaining, chosen)

    return list(search(0, target, ()))


def subsets_with_duplicates(nums: Sequence[int]) -> list[list[int]]:
    """Return all distinct subsets of ``nums``, each in sorted order."""
    items = sorted(nums)

    def search(i: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if i == len(items):
            yield list(chosen)
            return
        yield from search(i + 1, chosen + (items[i],))
        yield from search(_next_distinct(items, i), chosen)

    return list(search(0, ()))