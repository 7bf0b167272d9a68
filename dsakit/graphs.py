"""Graph traversals, shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Sequence

Adjacency = Sequence[Sequence[int]]
WeightedEdge = Sequence[int]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range 0..{vertex_count - 1}")


def bfs(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Return vertices in breadth-first order from ``start``."""
    _check_vertex(start, len(adjacency))
    visited = [False] * len(adjacency)
    visited[start] = True
    order: list[int] = []
    pending = deque([start])
    while pending:
        current = pending.popleft()
        order.append(current)
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                pending.append(neighbour)
    return order


def dfs(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Return vertices in depth-first preorder from ``start``.

    Neighbours are explored in the order they are listed, exactly as a
    recursive traversal would visit them.
    """
    _check_vertex(start, len(adjacency))
    visited = [False] * len(adjacency)
    visited[start] = True
    order = [start]
    frames = [iter(adjacency[start])]
    while frames:
        for neighbour in frames[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                frames.append(iter(adjacency[neighbour]))
                break
        else:
            frames.pop()
    return order


def build_adjacency(
    vertex_count: int, edges: Sequence[WeightedEdge]
) -> list[list[tuple[int, int]]]:
    """Build an undirected adjacency list of ``(neighbour, weight)`` pairs."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def dijkstra(
    vertex_count: int, edges: Sequence[WeightedEdge], source: int
) -> list[float]:
    """Return shortest distances from ``source`` over undirected weighted edges.

    Unreachable vertices have distance ``math.inf``.
    """
    _check_vertex(source, vertex_count)
    adjacency = build_adjacency(vertex_count, edges)
    distances: list[float] = [math.inf] * vertex_count
    distances[source] = 0
    frontier: list[tuple[float, int]] = [(0, source)]
    while frontier:
        distance, u = heapq.heappop(frontier)
        if distance > distances[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = distances[u] + weight
            if candidate < distances[v]:
                distances[v] = candidate
                heapq.heappush(frontier, (candidate, v))
    return distances


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        _check_vertex(item, len(self._parent))
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True


def kruskal_mst(vertex_count: int, edges: Sequence[WeightedEdge]) -> int:
    """Return the total weight of a minimum spanning forest (Kruskal)."""
    components = DisjointSet(vertex_count)
    cost = 0
    used = 0
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if components.union(u, v):
            cost += weight
            used += 1
            if used == vertex_count - 1:
                break
    return cost


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return MST edges ``(parent, vertex, weight)`` for vertices 1..n-1.

    ``matrix`` is a square adjacency matrix where zero means no edge.
    Raises ValueError if the graph is not connected.
    """
    count = len(matrix)
    if any(len(row) != count for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if count == 0:
        return []
    key = [math.inf] * count
    parent = [-1] * count
    in_tree = [False] * count
    key[0] = 0
    for _ in range(count - 1):
        candidates = [v for v in range(count) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=lambda v: key[v])
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    if any(parent[v] == -1 for v in range(1, count)):
        raise ValueError("graph is not connected")
    return [(parent[v], v, matrix[parent[v]][v]) for v in range(1, count)]