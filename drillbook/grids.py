"""Flood-fill problems on rectangular grids."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Sequence, Tuple

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

Cell = Tuple[int, int]


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_islands_dfs(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of orthogonally connected ``'1'`` cells, filling depth first."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    islands = 0
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != "1" or visited[row][col]:
                continue
            islands += 1
            visited[row][col] = True
            stack: List[Cell] = [(row, col)]
            while stack:
                r, c = stack.pop()
                for nr, nc in _neighbours(r, c, rows, cols):
                    if grid[nr][nc] == "1" and not visited[nr][nc]:
                        visited[nr][nc] = True
                        stack.append((nr, nc))
    return islands


def count_islands_bfs(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of orthogonally connected ``'1'`` cells, filling breadth first."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    islands = 0
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != "1" or visited[row][col]:
                continue
            visited[row][col] = True
            pending = deque([(row, col)])
            while pending:
                r, c = pending.popleft()
                for nr, nc in _neighbours(r, c, rows, cols):
                    if grid[nr][nc] == "1" and not visited[nr][nc]:
                        visited[nr][nc] = True
                        pending.append((nr, nc))
            islands += 1
    return islands


_EMPTY, _FRESH, _ROTTEN = 0, 1, 2


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); each minute rot spreads to
    orthogonal neighbours. The input grid is left unchanged.
    """
    if not grid:
        return 0
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])

    fresh = 0
    pending: deque[Cell] = deque()
    for row in range(rows):
        for col in range(cols):
            if cells[row][col] == _FRESH:
                fresh += 1
            elif cells[row][col] == _ROTTEN:
                pending.append((row, col))

    minutes = 0
    while pending and fresh > 0:
        minutes += 1
        for _ in range(len(pending)):
            r, c = pending.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if cells[nr][nc] == _FRESH:
                    cells[nr][nc] = _ROTTEN
                    pending.append((nr, nc))
                    fresh -= 1

    return minutes if fresh == 0 else -1