"""Two-colouring of graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Sequence, Tuple

Graph = Sequence[Sequence[int]]

_UNCOLOURED, _RED, _BLUE = 0, 1, 2


def _other(colour: int) -> int:
    return _BLUE if colour == _RED else _RED


def is_bipartite_dfs(graph: Graph) -> bool:
    """Tell whether the graph can be two-coloured, exploring depth first."""
    colour = [_UNCOLOURED] * len(graph)
    for start in range(len(graph)):
        if colour[start] != _UNCOLOURED:
            continue
        colour[start] = _RED
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if colour[neighbour] == _UNCOLOURED:
                    colour[neighbour] = _other(colour[node])
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if colour[neighbour] == colour[node]:
                    return False
            else:
                stack.pop()
    return True


def is_bipartite_bfs(graph: Graph) -> bool:
    """Tell whether the graph can be two-coloured, exploring breadth first."""
    colour = [_UNCOLOURED] * len(graph)
    for start in range(len(graph)):
        if colour[start] != _UNCOLOURED:
            continue
        colour[start] = _RED
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in graph[node]:
                if colour[neighbour] == _UNCOLOURED:
                    colour[neighbour] = _other(colour[node])
                    pending.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True