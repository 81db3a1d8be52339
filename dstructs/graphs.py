"""Graph algorithms: single-source and all-pairs shortest paths, topological sort, DFS and BFS."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence

INFINITE = 99


class CycleError(ValueError):
    """Raised when a topological order is asked of a graph that has a cycle."""


def _check_square(cost: Sequence[Sequence[int]]) -> int:
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("the cost matrix must be square")
    return n


def shortest_paths(
    cost: Sequence[Sequence[int]], source: int, infinite: int = INFINITE
) -> list[int | None]:
    """Return the shortest distance from source to every vertex.

    ``cost[u][v]`` is the weight of edge u -> v; a weight of ``infinite`` or more
    means there is no edge. Vertices that cannot be reached get None.
    """
    n = _check_square(cost)
    if not 0 <= source < n:
        raise IndexError(f"source {source} outside a graph of {n} vertices")
    dist = list(cost[source])
    dist[source] = 0
    selected = {source}
    while len(selected) < n:
        candidates = [v for v in range(n) if v not in selected and dist[v] < infinite]
        if not candidates:
            break
        nearest = min(candidates, key=dist.__getitem__)
        selected.add(nearest)
        for v in range(n):
            if v not in selected and dist[v] > dist[nearest] + cost[nearest][v]:
                dist[v] = dist[nearest] + cost[nearest][v]
    return [d if d < infinite else None for d in dist]


def topological_sort(successors: Mapping[int, Iterable[int]], count: int) -> list[int]:
    """Return a topological order of the vertices 1..count.

    ``successors`` maps a vertex to the vertices its edges lead to; vertices it
    does not mention have no outgoing edges. Ready vertices are taken last in,
    first out.
    """
    adjacency: dict[int, list[int]] = {v: [] for v in range(1, count + 1)}
    indegree = dict.fromkeys(adjacency, 0)
    for vertex, targets in successors.items():
        if vertex not in adjacency:
            raise ValueError(f"vertex {vertex} outside 1..{count}")
        for target in targets:
            if target not in adjacency:
                raise ValueError(f"vertex {target} outside 1..{count}")
            adjacency[vertex].append(target)
            indegree[target] += 1

    ready = [v for v in adjacency if indegree[v] == 0]
    order: list[int] = []
    for _ in range(count):
        if not ready:
            raise CycleError("the network contains a cycle; no topological order exists")
        vertex = ready.pop()
        order.append(vertex)
        for target in adjacency[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                ready.append(target)
    return order


def depth_first(graph: Mapping[Hashable, Iterable[Hashable]], start: Hashable) -> list[Hashable]:
    """Return the vertices in the order a depth-first search from start visits them."""
    order = [start]
    visited = {start}
    stack: list[Iterator[Hashable]] = [iter(graph.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(graph.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def breadth_first(graph: Mapping[Hashable, Iterable[Hashable]], start: Hashable) -> list[Hashable]:
    """Return the vertices in the order a breadth-first search from start visits them."""
    order = [start]
    visited = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in graph.get(vertex, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def floyd_shortest_paths(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    n = _check_square(cost)
    dist = [list(row) for row in cost]
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if dist[i][j] > dist[i][k] + dist[k][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist