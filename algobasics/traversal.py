"""Graph and grid searches: BFS levels, mazes, backtracking and tree walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

UNREACHABLE = -1
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError("a graph needs at least one node")


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is not in 1..{n}")


def _directed(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        graph[a].append(b)
    return graph


def bfs_distance(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Fewest edges on a directed path from node 1 to node n, or -1."""
    _check_count(n)
    graph = _directed(n, edges)
    distance = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if nxt not in distance:
                distance[nxt] = distance[node] + 1
                queue.append(nxt)
    return distance.get(n, UNREACHABLE)


def maze_shortest_path(maze: Sequence[Sequence[int]]) -> int:
    """Fewest moves from the top-left to the bottom-right cell, or -1.

    Cells holding 0 are open, anything else is a wall; moves go up, down,
    left and right.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows differ in length")
    distance = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and maze[nx][ny] == 0
                and (nx, ny) not in distance
            ):
                distance[nx, ny] = distance[x, y] + 1
                queue.append((nx, ny))
    return distance.get((rows - 1, cols - 1), UNREACHABLE)


def permutations(n: int) -> list[tuple[int, ...]]:
    """All orderings of 1..n in lexicographic order."""
    if n < 0:
        raise ValueError("n must not be negative")
    used = [False] * n
    current: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        if len(current) == n:
            yield tuple(current)
            return
        for i in range(n):
            if not used[i]:
                used[i] = True
                current.append(i + 1)
                yield from extend()
                current.pop()
                used[i] = False

    return list(extend())


def n_queens(n: int) -> list[list[str]]:
    """Every placement of n non-attacking queens, as rows of '.' and 'Q'.

    Boards come in the order found by filling rows top to bottom and trying
    columns left to right.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    columns = [False] * n
    diagonals = [False] * (2 * n)
    anti_diagonals = [False] * (2 * n)
    placed: list[int] = []

    def board() -> list[str]:
        return ["." * c + "Q" + "." * (n - c - 1) for c in placed]

    def extend(row: int) -> Iterator[list[str]]:
        if row == n:
            yield board()
            return
        for col in range(n):
            d, u = row + col, n - row + col
            if columns[col] or diagonals[d] or anti_diagonals[u]:
                continue
            columns[col] = diagonals[d] = anti_diagonals[u] = True
            placed.append(col)
            yield from extend(row + 1)
            placed.pop()
            columns[col] = diagonals[d] = anti_diagonals[u] = False

    return list(extend(0))


def centroid_component_size(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Smallest possible largest component left after removing one node of a tree."""
    _check_count(n)
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        graph[a].append(b)
        graph[b].append(a)
    parent = {1: 0}
    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in graph[node]:
            if nxt not in parent:
                parent[nxt] = node
                stack.append(nxt)
    size = [0] * (n + 1)
    largest_child = [0] * (n + 1)
    best = n
    for node in reversed(order):
        size[node] += 1
        best = min(best, max(largest_child[node], n - size[node]))
        up = parent[node]
        if up:
            size[up] += size[node]
            largest_child[up] = max(largest_child[up], size[node])
    return best


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """A topological order of nodes 1..n, or None when the graph has a cycle."""
    _check_count(n)
    graph = _directed(n, edges)
    indegree = [0] * (n + 1)
    for targets in graph:
        for b in targets:
            indegree[b] += 1
    order = [node for node in range(1, n + 1) if indegree[node] == 0]
    for node in order:
        for nxt in reversed(graph[node]):
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                order.append(nxt)
    return order if len(order) == n else None


def left_child_right_sibling_height(parents: Sequence[int]) -> int:
    """Largest height of the tree rooted at 1 in left-child right-sibling form.

    parents[i] is the parent of node i + 2; children are ordered so that
    the tallest subtree hangs from the end of the sibling chain.
    """
    n = len(parents) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for child, parent in enumerate(parents, start=2):
        _check_node(parent, n)
        children[parent].append(child)
    order = [1]
    for node in order:
        order.extend(children[node])
    height = [0] * (n + 1)
    for node in reversed(order):
        kids = children[node]
        height[node] = max((height[k] for k in kids), default=0) + len(kids)
    return height[1]