"""Binary tree problems: traversals, checks and transformations."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

_INT_MAX = 2**31 - 1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest common ancestor of two nodes in a binary search tree."""
    if p.val > q.val:
        p, q = q, p
    while root is not None:
        if p.val > root.val:
            root = root.right
        elif q.val < root.val:
            root = root.left
        else:
            return root
    return None


def _levels(root: Optional[TreeNode]) -> Iterable[List[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def right_side_view(root: Optional[TreeNode]) -> List[int]:
    """Values seen looking at the tree from the right, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def level_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Node values grouped by depth, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def is_sum_tree(root: Optional[TreeNode]) -> bool:
    """Whether every non-leaf node equals the sum of its subtrees."""

    def subtree_sum(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        if node.left is None and node.right is None:
            return node.val
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        if left is None or right is None or node.val != left + right:
            return None
        return left + right + node.val

    return subtree_sum(root) is not None


def is_dead_end(root: Optional[TreeNode]) -> bool:
    """Whether a BST of positive integers has a node below which nothing fits."""

    def solve(node: Optional[TreeNode], low: int, high: int) -> bool:
        if node is None:
            return False
        if low == high:
            return True
        return solve(node.left, low, node.val - 1) or solve(
            node.right, node.val + 1, high
        )

    return solve(root, 1, _INT_MAX)


def prune_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Remove, in place, every subtree that holds no 1; return the new root."""

    def removable(node: Optional[TreeNode]) -> bool:
        if node is None:
            return True
        left = removable(node.left)
        right = removable(node.right)
        if left:
            node.left = None
        if right:
            node.right = None
        return left and right and node.val == 0

    return None if removable(root) else root


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes not smaller than any node on their path from the root."""
    if root is None:
        return 0
    count = 0
    stack = [(root, root.val)]
    while stack:
        node, highest = stack.pop()
        if node.val >= highest:
            count += 1
            highest = node.val
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, highest))
    return count


def check_mirror_tree(n: int, e: int, a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether two n-ary trees, given as flat parent/child edge lists, mirror each other."""
    children: defaultdict[int, List[int]] = defaultdict(list)
    for parent, child in zip(a[: 2 * e : 2], a[1 : 2 * e : 2]):
        children[parent].append(child)
    for parent, child in zip(b[: 2 * e : 2], b[1 : 2 * e : 2]):
        stack = children[parent]
        if not stack or stack[-1] != child:
            return False
        stack.pop()
    return True