import pytest

from algodrills.trees import (
    TreeNode,
    bst_to_gst,
    build_tree,
    diameter_of_binary_tree,
    flatten,
    inorder_values,
    is_balanced,
    is_same_tree,
    is_subtree,
    is_symmetric,
    lowest_common_ancestor,
    min_diff_in_bst,
    width_of_binary_tree,
    zigzag_level_order,
)


def _find(node, value):
    if node is None:
        return None
    if node.val == value:
        return node
    return _find(node.left, value) or _find(node.right, value)


def _chain(length):
    root = TreeNode(0)
    node = root
    for value in range(1, length):
        node.left = TreeNode(value)
        node = node.left
    return root


def test_build_tree_inorder_of_search_tree_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    assert inorder_values(build_tree(values)) == sorted(values)


def test_build_tree_empty_and_none_root():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_is_same_tree():
    values = [1, 2, 3, None, 4]
    assert is_same_tree(build_tree(values), build_tree(values))
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert not is_same_tree(build_tree([1, 2, 1]), build_tree([1, 1, 2]))
    assert is_same_tree(None, None)
    assert not is_same_tree(build_tree([1]), None)


def test_is_symmetric():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


def test_zigzag_level_order_example():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert zigzag_level_order(root) == [[3], [20, 9], [15, 7]]


def test_zigzag_level_order_keeps_all_values():
    values = [1, 2, 3, 4, 5, 6, 7, 8]
    levels = zigzag_level_order(build_tree(values))
    assert sorted(v for level in levels for v in level) == sorted(values)
    assert zigzag_level_order(None) == []


def test_is_balanced():
    assert is_balanced(build_tree([3, 9, 20, None, None, 15, 7]))
    assert not is_balanced(build_tree([1, 2, 2, 3, 3, None, None, 4, 4]))
    assert is_balanced(None)
    assert not is_balanced(_chain(3))


def test_flatten_follows_preorder():
    values = [1, 2, 5, 3, 4, None, 6]
    root = build_tree(values)
    flatten(root)
    chain = []
    node = root
    while node is not None:
        assert node.left is None
        chain.append(node.val)
        node = node.right
    assert chain == sorted(v for v in values if v is not None)


def test_lowest_common_ancestor():
    root = build_tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    five, one, four = _find(root, 5), _find(root, 1), _find(root, 4)
    assert lowest_common_ancestor(root, five, one) is root
    assert lowest_common_ancestor(root, five, four) is five


def test_diameter_of_chain_counts_edges():
    length = 5
    assert diameter_of_binary_tree(_chain(length)) == length - 1
    assert diameter_of_binary_tree(None) == diameter_of_binary_tree(TreeNode(7))


def test_is_subtree():
    root = build_tree([3, 4, 5, 1, 2])
    assert is_subtree(root, build_tree([4, 1, 2]))
    bigger = build_tree([3, 4, 5, 1, 2, None, None, None, None, 0])
    assert not is_subtree(bigger, build_tree([4, 1, 2]))
    assert is_subtree(root, None)
    assert not is_subtree(None, build_tree([1]))


def test_width_of_binary_tree_example():
    assert width_of_binary_tree(build_tree([1, 3, 2, 5, 3, None, 9])) == 4


def test_width_of_perfect_tree_is_leaf_count():
    root = build_tree([1, 2, 3, 4, 5, 6, 7])
    assert width_of_binary_tree(root) == len(zigzag_level_order(root)[-1])


def test_min_diff_in_bst():
    assert min_diff_in_bst(build_tree([4, 2, 6, 1, 3])) == 1


def test_min_diff_in_bst_needs_two_nodes():
    with pytest.raises(ValueError):
        min_diff_in_bst(TreeNode(5))


def test_bst_to_gst_invariants():
    values = [4, 1, 6, 0, 2, 5, 7, None, None, None, 3, None, None, None, 8]
    present = [v for v in values if v is not None]
    root = bst_to_gst(build_tree(values))
    result = inorder_values(root)
    assert result[0] == sum(present)
    assert result[-1] == max(present)
    assert result == sorted(result, reverse=True)