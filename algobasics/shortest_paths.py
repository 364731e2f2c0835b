"""Shortest paths: Dijkstra, Bellman-Ford, SPFA, negative cycles and Floyd."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int, int]


def _edges(n: int, edges: Iterable[Edge], *, non_negative: bool = False) -> list[Edge]:
    if n < 1:
        raise ValueError("a graph needs at least one node")
    result = []
    for a, b, w in edges:
        for node in (a, b):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is not in 1..{n}")
        if non_negative and w < 0:
            raise ValueError("edge weights must not be negative")
        result.append((a, b, w))
    return result


def _adjacency(n: int, edges: list[Edge]) -> list[list[tuple[int, int]]]:
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        graph[a].append((b, w))
    return graph


def _finite(value: float) -> int | None:
    return None if value == math.inf else value


def dijkstra_dense(n: int, edges: Iterable[Edge]) -> int | None:
    """Shortest distance from node 1 to node n using an adjacency matrix, or None."""
    edge_list = _edges(n, edges, non_negative=True)
    matrix = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for a, b, w in edge_list:
        matrix[a][b] = min(matrix[a][b], w)
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    for _ in range(n):
        start = min((j for j in range(1, n + 1) if not done[j]), key=dist.__getitem__)
        if dist[start] == math.inf:
            break
        done[start] = True
        row = matrix[start]
        for end in range(1, n + 1):
            dist[end] = min(dist[end], dist[start] + row[end])
    return _finite(dist[n])


def dijkstra_heap(n: int, edges: Iterable[Edge]) -> int | None:
    """Shortest distance from node 1 to node n using a binary heap, or None."""
    graph = _adjacency(n, _edges(n, edges, non_negative=True))
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    heap = [(0, 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for nxt, w in graph[node]:
            if d + w < dist[nxt]:
                dist[nxt] = d + w
                heapq.heappush(heap, (dist[nxt], nxt))
    return _finite(dist[n])


def bellman_ford(n: int, edges: Iterable[Edge], k: int) -> int | None:
    """Shortest distance from 1 to n using at most k edges, or None."""
    if k < 0:
        raise ValueError("edge limit must not be negative")
    edge_list = _edges(n, edges)
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    for _ in range(k):
        last = dist[:]
        for a, b, w in edge_list:
            dist[b] = min(dist[b], last[a] + w)
    return _finite(dist[n])


def spfa(n: int, edges: Iterable[Edge]) -> int | None:
    """Shortest distance from 1 to n with the queue-based Bellman-Ford, or None.

    Negative edges are allowed; the graph must have no negative cycle
    reachable from node 1.
    """
    graph = _adjacency(n, _edges(n, edges))
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    queued = [False] * (n + 1)
    queue = deque([1])
    queued[1] = True
    while queue:
        node = queue.popleft()
        queued[node] = False
        for nxt, w in graph[node]:
            if dist[node] + w < dist[nxt]:
                dist[nxt] = dist[node] + w
                if not queued[nxt]:
                    queued[nxt] = True
                    queue.append(nxt)
    return _finite(dist[n])


def has_negative_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Whether the graph holds a cycle of negative total weight anywhere."""
    graph = _adjacency(n, _edges(n, edges))
    dist = [0] * (n + 1)
    hops = [0] * (n + 1)
    queue = deque(range(1, n + 1))
    queued = [True] * (n + 1)
    while queue:
        node = queue.popleft()
        queued[node] = False
        for nxt, w in graph[node]:
            if dist[node] + w < dist[nxt]:
                dist[nxt] = dist[node] + w
                hops[nxt] = hops[node] + 1
                if hops[nxt] >= n:
                    return True
                if not queued[nxt]:
                    queued[nxt] = True
                    queue.append(nxt)
    return False


def floyd_warshall(n: int, edges: Iterable[Edge]) -> dict[tuple[int, int], int]:
    """Shortest distances between all pairs, keyed by (from, to).

    Pairs with no path are left out; every node reaches itself at distance 0
    unless a negative self-loop says otherwise.
    """
    edge_list = _edges(n, edges)
    dist = [[0 if i == j else math.inf for j in range(n + 1)] for i in range(n + 1)]
    for a, b, w in edge_list:
        dist[a][b] = min(dist[a][b], w)
    nodes = range(1, n + 1)
    for t in nodes:
        via = dist[t]
        for i in nodes:
            row = dist[i]
            to_t = row[t]
            if to_t == math.inf:
                continue
            for j in nodes:
                if to_t + via[j] < row[j]:
                    row[j] = to_t + via[j]
    return {(i, j): dist[i][j] for i in nodes for j in nodes if dist[i][j] != math.inf}