"""Binary tree nodes and classic tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from itertools import accumulate, pairwise
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    queue = deque([root])
    pending = iter(items[1:])
    while queue:
        node = queue.popleft()
        left_val = next(pending, None)
        right_val = next(pending, None)
        if left_val is not None:
            node.left = TreeNode(left_val)
            queue.append(node.left)
        if right_val is not None:
            node.right = TreeNode(right_val)
            queue.append(node.right)
    return root


def inorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order sequence."""
    return [node.val for node in _inorder_nodes(root)]


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return level values, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    left_to_right = True
    while level:
        values = [node.val for node in level]
        levels.append(values if left_to_right else values[::-1])
        left_to_right = not left_to_right
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def flatten(root: Optional[TreeNode]) -> None:
    """Relink the tree in place into a right-leaning chain in pre-order."""
    nodes = list(_preorder_nodes(root))
    for node, following in pairwise(nodes):
        node.left = None
        node.right = following
    if nodes:
        nodes[-1].left = None
        nodes[-1].right = None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _diameter_and_height(node: Optional[TreeNode]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diam, left_height = _diameter_and_height(node.left)
    right_diam, right_height = _diameter_and_height(node.right)
    diameter = max(left_height + right_height, left_diam, right_diam)
    return diameter, max(left_height, right_height) + 1


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    return _diameter_and_height(root)[0]


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether ``sub_root`` matches some node's whole subtree in ``root``."""
    if sub_root is None:
        return True
    return any(
        is_same_tree(node, sub_root)
        for node in _inorder_nodes(root)
        if node.val == sub_root.val
    )


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting gaps between its end nodes."""
    if root is None:
        return 0
    width = 0
    level = [(root, 0)]
    while level:
        first = level[0][1]
        width = max(width, level[-1][1] - first + 1)
        next_level = []
        for node, position in level:
            position -= first
            if node.left is not None:
                next_level.append((node.left, 2 * position + 1))
            if node.right is not None:
                next_level.append((node.right, 2 * position + 2))
        level = next_level
    return width


def min_diff_in_bst(root: Optional[TreeNode]) -> int:
    """Return the smallest difference between values of a search tree."""
    values = inorder_values(root)
    if len(values) < 2:
        raise ValueError("the tree needs at least two nodes")
    return min(b - a for a, b in pairwise(values))


def bst_to_gst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each value of a search tree with the sum of values not below it."""
    values = inorder_values(root)
    suffix_sums = list(accumulate(reversed(values)))[::-1]
    totals = dict(zip(values, suffix_sums))
    for node in _inorder_nodes(root):
        node.val = totals[node.val]
    return root