"""Searches and shortest paths over graphs given as edge or adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from string import ascii_lowercase

UNREACHABLE = 100_000_000


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Return the number of words in the shortest transformation sequence.

    Each step changes one letter to a lowercase letter and must produce a
    word from ``word_list``. Returns 0 when no sequence exists.
    """
    remaining = set(word_list)
    if end_word not in remaining:
        return 0
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i in range(len(word)):
            prefix, suffix = word[:i], word[i + 1 :]
            for letter in ascii_lowercase:
                candidate = prefix + letter + suffix
                if candidate in remaining:
                    remaining.discard(candidate)
                    queue.append((candidate, steps + 1))
    return 0


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Tell whether every course can be taken, i.e. the dependencies have no cycle."""
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, needed in prerequisites:
        adjacency[course].append(needed)
        indegree[needed] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    taken = 0
    while queue:
        node = queue.popleft()
        taken += 1
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return taken == num_courses


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Count connected components of a graph given as an adjacency matrix."""
    size = len(is_connected)
    adjacency: list[list[int]] = [[] for _ in range(size)]
    for i, row in enumerate(is_connected):
        for j, linked in enumerate(row):
            if i != j and linked:
                adjacency[i].append(j)
                adjacency[j].append(i)
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return provinces


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether the nodes of an adjacency-list graph can be two-coloured."""
    colour: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    size = len(graph)
    visited = [False] * size
    on_path = [False] * size
    for start in range(size):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if on_path[neighbour]:
                    # A cycle: every node on the current path stays unsafe.
                    stack.clear()
                    break
            else:
                on_path[node] = False
                stack.pop()
    return [node for node in range(size) if not on_path[node]]


def bellman_ford(
    vertex_count: int, edges: Sequence[Sequence[int]], source: int
) -> list[int]:
    """Return shortest distances from ``source`` over weighted directed edges.

    Edges are ``(u, v, weight)`` triples. Vertices that cannot be reached get
    ``UNREACHABLE``. Raises NegativeCycleError if a reachable negative cycle exists.
    """
    if not 0 <= source < vertex_count:
        raise IndexError("source vertex out of range")
    distance = [UNREACHABLE] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edges:
            if distance[u] != UNREACHABLE and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edges:
        if distance[u] != UNREACHABLE and distance[u] + weight < distance[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return distance