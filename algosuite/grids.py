"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

Cell = TypeVar("Cell")

EMPTY = 0
FRESH = 1
ROTTEN = 2
LAND = "1"

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for d_row, d_col in _DIRECTIONS:
        next_row, next_col = row + d_row, col + d_col
        if 0 <= next_row < rows and 0 <= next_col < cols:
            yield next_row, next_col


def _distances_from(
    grid: Sequence[Sequence[Cell]], is_source: Callable[[Cell], bool]
) -> list[list[int]]:
    """Return each cell's step distance to the nearest source cell."""
    rows, cols = _dimensions(grid)
    distance = [[0 if is_source(cell) else -1 for cell in row] for row in grid]
    queue = deque(
        (r, c) for r, row in enumerate(distance) for c, value in enumerate(row) if value == 0
    )
    while queue:
        row, col = queue.popleft()
        for next_row, next_col in _neighbours(row, col, rows, cols):
            if distance[next_row][next_col] == -1:
                distance[next_row][next_col] = distance[row][col] + 1
                queue.append((next_row, next_col))
    return distance


def rotting_time(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); each minute rot spreads
    to the four neighbouring fresh oranges. The grid is not modified.
    """
    rows, cols = _dimensions(grid)
    state = [list(row) for row in grid]
    queue = deque(
        (r, c, 0)
        for r, row in enumerate(state)
        for c, cell in enumerate(row)
        if cell == ROTTEN
    )
    elapsed = 0
    while queue:
        row, col, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for next_row, next_col in _neighbours(row, col, rows, cols):
            if state[next_row][next_col] == FRESH:
                state[next_row][next_col] = ROTTEN
                queue.append((next_row, next_col, minute + 1))
    if any(FRESH in row for row in state):
        return -1
    return elapsed


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Assign heights maximising the peak: water is 0, neighbours differ by at most 1."""
    return _distances_from(is_water, lambda cell: cell == 1)


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the four-connected groups of ``"1"`` cells in the grid."""
    rows, cols = _dimensions(grid)
    seen = [[False] * cols for _ in range(rows)]
    islands = 0
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell != LAND or seen[row][col]:
                continue
            islands += 1
            seen[row][col] = True
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for next_row, next_col in _neighbours(r, c, rows, cols):
                    if not seen[next_row][next_col] and grid[next_row][next_col] == LAND:
                        seen[next_row][next_col] = True
                        queue.append((next_row, next_col))
    return islands


def distance_to_zero(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return each cell's distance to the nearest zero cell."""
    return _distances_from(mat, lambda cell: cell == 0)


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the region around (row, col) recoloured."""
    rows, cols = _dimensions(image)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError("start position lies outside the image")
    result = [list(line) for line in image]
    initial = image[row][col]
    result[row][col] = color
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for next_row, next_col in _neighbours(r, c, rows, cols):
            if image[next_row][next_col] == initial and result[next_row][next_col] != color:
                result[next_row][next_col] = color
                stack.append((next_row, next_col))
    return result