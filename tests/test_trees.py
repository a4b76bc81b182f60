import pytest

from practicealgos.trees import (
    TreeNode,
    build_tree,
    check_mirror_tree,
    good_nodes,
    is_dead_end,
    is_sum_tree,
    level_order,
    lowest_common_ancestor,
    prune_tree,
    right_side_view,
)


def _nodes(root):
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(c for c in (node.left, node.right) if c)


def _find(root, value):
    return next(n for n in _nodes(root) if n.val == value)


def _contains(root, target):
    return any(n is target for n in _nodes(root))


def test_build_tree_empty():
    assert build_tree([]) is None


def test_build_tree_shape():
    root = build_tree([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3


BST = [6, 2, 8, 0, 4, 7, 9, None, None, 3, 5]


@pytest.mark.parametrize("pv,qv", [(2, 8), (2, 4), (3, 5), (0, 5), (7, 9), (5, 3)])
def test_lca_is_common_ancestor(pv, qv):
    root = build_tree(BST)
    p, q = _find(root, pv), _find(root, qv)
    lca = lowest_common_ancestor(root, p, q)
    assert _contains(lca, p) and _contains(lca, q)
    assert min(pv, qv) <= lca.val <= max(pv, qv)


def test_lca_node_is_own_ancestor():
    root = build_tree(BST)
    p, q = _find(root, 2), _find(root, 4)
    assert lowest_common_ancestor(root, p, q) is p


def test_right_side_view_is_last_of_each_level():
    root = build_tree([1, 2, 3, None, 5, None, 4, 8])
    levels = level_order(root)
    assert right_side_view(root) == [lvl[-1] for lvl in levels]


def test_right_side_view_empty():
    assert right_side_view(None) == []


def test_level_order_complete_tree_flattens_to_input():
    values = list(range(1, 11))
    levels = level_order(build_tree(values))
    assert [v for lvl in levels for v in lvl] == values
    assert [len(lvl) for lvl in levels] == [1, 2, 4, 3]


def test_level_order_empty():
    assert level_order(None) == []


def test_is_sum_tree_true():
    assert is_sum_tree(build_tree([26, 10, 3, 4, 6, None, 3])) is True


def test_is_sum_tree_false():
    assert is_sum_tree(build_tree([26, 10, 3, 4, 5, None, 3])) is False


def test_is_sum_tree_leaf_and_empty():
    assert is_sum_tree(TreeNode(7)) is True
    assert is_sum_tree(None) is True


def test_dead_end_found():
    assert is_dead_end(build_tree([8, 5, 9, 2, 7, None, None, 1])) is True


def test_dead_end_absent():
    assert is_dead_end(build_tree([8, 5, 11, 2, 7])) is False


def test_dead_end_empty():
    assert is_dead_end(None) is False


def test_prune_tree_removes_zero_subtrees():
    root = build_tree([1, None, 0, 0, 1])
    result = prune_tree(root)
    assert result is root
    assert result.right.left is None
    assert result.right.right.val == 1
    leaves = [n for n in _nodes(result) if not n.left and not n.right]
    assert all(leaf.val == 1 for leaf in leaves)


def test_prune_tree_keeps_all_ones():
    values = [1, 0, 1, 0, 0, 0, 1]
    ones_before = values.count(1)
    result = prune_tree(build_tree(values))
    assert sum(1 for n in _nodes(result) if n.val == 1) == ones_before
    leaves = [n for n in _nodes(result) if not n.left and not n.right]
    assert all(leaf.val == 1 for leaf in leaves)


def test_prune_tree_all_zero():
    assert prune_tree(build_tree([0, 0, 0])) is None


def test_good_nodes_example():
    assert good_nodes(build_tree([3, 1, 4, 3, None, 1, 5])) == 4


def test_good_nodes_equal_values_all_good():
    values = [2] * 6
    assert good_nodes(build_tree(values)) == len(values)


def test_good_nodes_decreasing_chain():
    root = build_tree([5, 4, None, 3, None, 2])
    assert good_nodes(root) == 1


def test_mirror_tree_true():
    assert check_mirror_tree(3, 2, [1, 2, 1, 3], [1, 3, 1, 2]) is True


def test_mirror_tree_false():
    assert check_mirror_tree(3, 2, [1, 2, 1, 3], [1, 2, 1, 3]) is False


def test_mirror_tree_unknown_parent():
    assert check_mirror_tree(3, 2, [1, 2, 1, 3], [2, 3, 1, 2]) is False