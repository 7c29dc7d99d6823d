"""Graph nodes, construction from adjacency lists, deep cloning and structural comparison."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence


@dataclass(eq=False)
class Node:
    """A graph node; nodes compare and hash by identity."""

    val: int = 0
    neighbors: List["Node"] = field(default_factory=list, repr=False)


def build_graph(adjacency: Sequence[Sequence[int]]) -> List[Node]:
    """Build nodes from an adjacency list with 1-based neighbour numbers.

    Node ``i`` gets value ``i``.
    """
    nodes = [Node(index) for index in range(len(adjacency))]
    for node, numbers in zip(nodes, adjacency):
        for number in numbers:
            if not 1 <= number <= len(nodes):
                raise ValueError(f"neighbour {number} is out of range")
            node.neighbors.append(nodes[number - 1])
    return nodes


def graphs_equal(a: Optional[Node], b: Optional[Node]) -> bool:
    """Tell whether ``b`` is a separate deep copy of the graph reachable from ``a``.

    Nodes must map one to one, carry equal values and list their neighbours
    in the same order; sharing any node between the two graphs fails.
    """
    mapping: Dict[Node, Node] = {}
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is None and y is None:
            continue
        if x is None or y is None:
            return False
        if x.val != y.val or x is y:
            return False
        if x in mapping:
            if mapping[x] is not y:
                return False
            continue
        mapping[x] = y
        if len(x.neighbors) != len(y.neighbors):
            return False
        stack.extend(reversed(list(zip(x.neighbors, y.neighbors))))
    return True


def clone_graph(root: Optional[Node]) -> Optional[Node]:
    """Return a deep copy of the graph reachable from ``root``."""
    if root is None:
        return None
    clones: Dict[Node, Node] = {root: Node(root.val)}
    pending = deque([root])
    while pending:
        current = pending.popleft()
        for child in current.neighbors:
            if child not in clones:
                clones[child] = Node(child.val)
                pending.append(child)
            clones[current].neighbors.append(clones[child])
    return clones[root]