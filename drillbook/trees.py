"""Checks on undirected graphs: whether they form a tree and where a tree's centres lie."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import DefaultDict, Iterator, List, Sequence, Tuple

Edges = Sequence[Sequence[int]]


def _undirected(edges: Edges) -> DefaultDict[int, List[int]]:
    graph: DefaultDict[int, List[int]] = defaultdict(list)
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    return graph


def _degrees(n: int, edges: Edges) -> List[int]:
    degree = [0] * n
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
    return degree


def valid_tree_dfs(n: int, edges: Edges) -> bool:
    """Tell whether ``n`` nodes and ``edges`` form a tree, by a DFS from node 0."""
    if n <= 0:
        return False
    if n == 1 and not edges:
        return True
    if len(edges) != n - 1:
        return False

    graph = _undirected(edges)
    visited = [False] * n
    visited[0] = True
    stack: List[Tuple[int, int, Iterator[int]]] = [(0, -1, iter(graph[0]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, node, iter(graph[neighbour])))
                break
            if neighbour != parent:
                return False
        else:
            stack.pop()
    return all(visited)


def valid_tree_bfs(n: int, edges: Edges) -> bool:
    """Tell whether ``n`` nodes and ``edges`` form a tree, by peeling off leaves."""
    if n <= 0:
        return False
    if n == 1 and not edges:
        return True
    if len(edges) != n - 1:
        return False

    graph = _undirected(edges)
    degree = _degrees(n, edges)
    leaves = deque(node for node in range(n) if degree[node] == 1)
    removed = 0
    seen = set()
    while leaves:
        node = leaves.popleft()
        removed += 1
        seen.add(node)
        for neighbour in graph[node]:
            degree[neighbour] -= 1
            if degree[neighbour] == 1:
                leaves.append(neighbour)
    return removed == n and len(seen) == n


def minimum_height_trees(n: int, edges: Edges) -> List[int]:
    """Return the roots that give a tree of minimum height.

    Leaves are pruned level by level until at most two nodes remain. A lone
    node with no edges yields an empty list. Raises ValueError when the edges
    leave nothing to prune, as happens when they contain a cycle.
    """
    graph = _undirected(edges)
    degree = _degrees(n, edges)
    leaves = deque(node for node in range(n) if degree[node] == 1)

    remaining = n
    while remaining > 2:
        if not leaves:
            raise ValueError("edges do not form a tree")
        level = len(leaves)
        remaining -= level
        for _ in range(level):
            node = leaves.popleft()
            for neighbour in graph[node]:
                degree[neighbour] -= 1
                if degree[neighbour] == 1:
                    leaves.append(neighbour)
    return list(leaves)