"""Minimum spanning trees, bipartite checks and maximum bipartite matching."""

from __future__ import annotations

import math
import sys
from collections import deque
from collections.abc import Iterable
from operator import itemgetter

from algobasics.union_find import DisjointSet

WeightedEdge = tuple[int, int, int]


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError("a graph needs at least one node")


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is not in 1..{n}")


def _weighted(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    _check_count(n)
    result = []
    for a, b, w in edges:
        _check_node(a, n)
        _check_node(b, n)
        result.append((a, b, w))
    return result


def prim(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Weight of a minimum spanning tree of an undirected graph, or None.

    Uses Prim's algorithm on an adjacency matrix; None means the graph is
    not connected.
    """
    edge_list = _weighted(n, edges)
    matrix = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for a, b, w in edge_list:
        weight = min(w, matrix[a][b])
        matrix[a][b] = matrix[b][a] = weight
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    in_tree = [False] * (n + 1)
    total = 0
    for _ in range(n):
        start = min(
            (j for j in range(1, n + 1) if not in_tree[j]), key=dist.__getitem__
        )
        if dist[start] == math.inf:
            return None
        in_tree[start] = True
        total += dist[start]
        row = matrix[start]
        for j in range(1, n + 1):
            if row[j] < dist[j]:
                dist[j] = row[j]
    return total


def kruskal(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Weight of a minimum spanning tree by Kruskal's algorithm, or None.

    None means the graph is not connected.
    """
    edge_list = _weighted(n, edges)
    forest = DisjointSet(n)
    total = 0
    joined = 0
    for a, b, w in sorted(edge_list, key=itemgetter(2)):
        if forest.union(a, b):
            total += w
            joined += 1
    if joined < n - 1:
        return None
    return total


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph on nodes 1..n can be two-coloured."""
    _check_count(n)
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        graph[a].append(b)
        graph[b].append(a)
    color = [0] * (n + 1)
    for start in range(1, n + 1):
        if color[start]:
            continue
        color[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in graph[node]:
                if color[nxt] == 0:
                    color[nxt] = -color[node]
                    queue.append(nxt)
                elif color[nxt] == color[node]:
                    return False
    return True


def max_bipartite_matching(
    n1: int, n2: int, edges: Iterable[tuple[int, int]]
) -> int:
    """Size of a maximum matching between left nodes 1..n1 and right nodes 1..n2.

    Each edge (a, b) joins left node a to right node b; augmenting paths are
    found with the Hungarian method.
    """
    if n1 < 0 or n2 < 0:
        raise ValueError("node counts must not be negative")
    graph: list[list[int]] = [[] for _ in range(n1 + 1)]
    for a, b in edges:
        _check_node(a, n1)
        _check_node(b, n2)
        graph[a].append(b)
    match = [0] * (n2 + 1)

    def augment(left: int, visited: list[bool]) -> bool:
        for right in graph[left]:
            if visited[right]:
                continue
            visited[right] = True
            if match[right] == 0 or augment(match[right], visited):
                match[right] = left
                return True
        return False

    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, 2 * n1 + 100))
    try:
        return sum(augment(left, [False] * (n2 + 1)) for left in range(1, n1 + 1))
    finally:
        sys.setrecursionlimit(limit)