import pytest

from drillbook.clone_graph import Node, build_graph, clone_graph, graphs_equal

SQUARE = [[2, 4], [1, 3], [2, 4], [1, 3]]


def _reachable(root):
    seen = {}
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen[id(node)] = node
        stack.extend(node.neighbors)
    return seen


def test_build_graph_links_nodes():
    nodes = build_graph(SQUARE)
    assert [n.val for n in nodes] == [0, 1, 2, 3]
    assert nodes[0].neighbors[0] is nodes[1]
    assert nodes[0].neighbors[1] is nodes[3]
    assert nodes[2].neighbors[1] is nodes[3]


def test_build_graph_empty():
    assert build_graph([]) == []


def test_build_graph_rejects_bad_neighbour():
    with pytest.raises(ValueError):
        build_graph([[0]])
    with pytest.raises(ValueError):
        build_graph([[2]])


def test_clone_equals_original():
    nodes = build_graph(SQUARE)
    copy = clone_graph(nodes[0])
    assert graphs_equal(nodes[0], copy)


def test_clone_shares_no_nodes():
    nodes = build_graph(SQUARE)
    copy = clone_graph(nodes[0])
    original_ids = set(_reachable(nodes[0]))
    copy_ids = set(_reachable(copy))
    assert len(copy_ids) == len(original_ids)
    assert original_ids.isdisjoint(copy_ids)


def test_clone_of_none():
    assert clone_graph(None) is None


def test_clone_single_node_with_self_loop():
    node = Node(7)
    node.neighbors.append(node)
    copy = clone_graph(node)
    assert copy.val == node.val
    assert copy.neighbors[0] is copy
    assert graphs_equal(node, copy)


def test_same_graph_is_not_a_copy():
    nodes = build_graph(SQUARE)
    assert not graphs_equal(nodes[0], nodes[0])


def test_both_none_are_equal():
    assert graphs_equal(None, None)


def test_one_none_is_unequal():
    assert not graphs_equal(Node(1), None)


def test_different_values_are_unequal():
    nodes = build_graph(SQUARE)
    copy = clone_graph(nodes[0])
    copy.neighbors[0].val += 100
    assert not graphs_equal(nodes[0], copy)


def test_different_sharing_is_unequal():
    shared = Node(1)
    left = Node(0, [shared, shared])
    right = Node(0, [Node(1), Node(1)])
    assert not graphs_equal(left, right)


def test_different_degree_is_unequal():
    left = Node(0, [Node(1)])
    right = Node(0, [])
    assert not graphs_equal(left, right)