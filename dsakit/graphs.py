"""Graph algorithms: breadth-first traversal and articulation points."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Graph:
    """A directed graph on vertices ``0 .. num_vertices - 1`` held as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def articulation_points(num_vertices: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, in ascending order, the cut vertices of an undirected graph on ``1 .. num_vertices``."""
    adjacency: list[list[int]] = [[] for _ in range(num_vertices + 1)]
    for a, b in edges:
        if not (1 <= a <= num_vertices and 1 <= b <= num_vertices):
            raise ValueError(f"edge ({a}, {b}) names a vertex outside 1..{num_vertices}")
        adjacency[a].append(b)
        adjacency[b].append(a)

    disc = [-1] * (num_vertices + 1)
    low = [-1] * (num_vertices + 1)
    parent = [-1] * (num_vertices + 1)
    children = [0] * (num_vertices + 1)
    points: set[int] = set()
    clock = 0

    for root in range(1, num_vertices + 1):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = clock
        clock += 1
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if disc[v] == -1:
                    children[u] += 1
                    parent[v] = u
                    disc[v] = low[v] = clock
                    clock += 1
                    stack.append((v, iter(adjacency[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if parent[p] == -1 and children[p] > 1:
                        points.add(p)
                    if parent[p] != -1 and low[u] >= disc[p]:
                        points.add(p)
    return sorted(points)