"""Course prerequisite scheduling and safe states in directed graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import DefaultDict, Iterator, List, Sequence, Tuple

Edges = Sequence[Sequence[int]]


def _successors(prerequisites: Edges) -> DefaultDict[int, List[int]]:
    """Map each course to the courses that need it; ``[a, b]`` means b comes before a."""
    graph: DefaultDict[int, List[int]] = defaultdict(list)
    for course, required in prerequisites:
        graph[required].append(course)
    return graph


def _kahn_order(n: int, prerequisites: Edges) -> List[int]:
    graph = _successors(prerequisites)
    indegree = [0] * n
    for course, _ in prerequisites:
        indegree[course] += 1
    ready = deque(course for course in range(n) if indegree[course] == 0)
    order: List[int] = []
    while ready:
        course = ready.popleft()
        order.append(course)
        for follower in graph[course]:
            indegree[follower] -= 1
            if indegree[follower] == 0:
                ready.append(follower)
    return order


def can_finish_bfs(num_courses: int, prerequisites: Edges) -> bool:
    """Tell whether all courses can be taken, using Kahn's algorithm."""
    if not prerequisites:
        return True
    return len(_kahn_order(num_courses, prerequisites)) == num_courses


def can_finish_dfs(num_courses: int, prerequisites: Edges) -> bool:
    """Tell whether all courses can be taken, by looking for a cycle with a DFS."""
    if not prerequisites or num_courses < 0:
        return True
    graph = _successors(prerequisites)
    visited = [False] * num_courses
    on_path = [False] * num_courses

    for start in range(num_courses):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, followers = stack[-1]
            for follower in followers:
                if on_path[follower]:
                    return False
                if not visited[follower]:
                    visited[follower] = on_path[follower] = True
                    stack.append((follower, iter(graph[follower])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return True


def _has_no_edges(n: int, prerequisites: Edges) -> bool:
    return n <= 0 or not prerequisites or not prerequisites[0]


def find_order_bfs(n: int, prerequisites: Edges) -> List[int]:
    """Return an order in which to take the courses, or [] if none exists.

    Also returns [] when there are no courses or no prerequisites.
    """
    if _has_no_edges(n, prerequisites):
        return []
    order = _kahn_order(n, prerequisites)
    return order if len(order) == n else []


def find_order_dfs(n: int, prerequisites: Edges) -> List[int]:
    """Return the reverse DFS post-order of the courses.

    Only unvisited courses are descended into, so a cycle is never reported;
    returns [] when there are no courses or no prerequisites.
    """
    if _has_no_edges(n, prerequisites):
        return []
    graph = _successors(prerequisites)
    visited = [False] * n
    post_order: List[int] = []

    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, followers = stack[-1]
            for follower in followers:
                if not visited[follower]:
                    visited[follower] = True
                    stack.append((follower, iter(graph[follower])))
                    break
            else:
                post_order.append(node)
                stack.pop()
    post_order.reverse()
    return post_order


_UNVISITED, _VISITING, _SAFE = 0, 1, 2


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> List[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    state = [_UNVISITED] * len(graph)

    def is_safe(start: int) -> bool:
        if state[start] != _UNVISITED:
            return state[start] == _SAFE
        state[start] = _VISITING
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, followers = stack[-1]
            for follower in followers:
                if state[follower] == _VISITING:
                    return False
                if state[follower] == _UNVISITED:
                    state[follower] = _VISITING
                    stack.append((follower, iter(graph[follower])))
                    break
            else:
                state[node] = _SAFE
                stack.pop()
        return True

    return [node for node in range(len(graph)) if is_safe(node)]