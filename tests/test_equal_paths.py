from hypothesis import given
from hypothesis import strategies as st

from searchtrees.equal_paths import TreeNode, equal_paths


def _perfect(depth, counter=None):
    counter = counter if counter is not None else [0]
    counter[0] += 1
    node = TreeNode(counter[0])
    if depth > 0:
        node.left = _perfect(depth - 1, counter)
        node.right = _perfect(depth - 1, counter)
    return node


def test_empty_tree():
    assert equal_paths(None)


def test_single_node():
    assert equal_paths(TreeNode(1))


def test_only_left_child():
    assert equal_paths(TreeNode(1, TreeNode(2)))


def test_two_children():
    assert equal_paths(TreeNode(1, TreeNode(2), TreeNode(3)))


def test_only_right_child():
    assert equal_paths(TreeNode(1, None, TreeNode(3)))


def test_unequal_depths():
    root = TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))
    assert not equal_paths(root)


def test_unbalanced_chain_without_branching_is_equal():
    root = TreeNode(1, TreeNode(2, TreeNode(3, None, TreeNode(4))))
    assert equal_paths(root)


@given(st.integers(min_value=0, max_value=6))
def test_perfect_trees_have_equal_paths(depth):
    assert equal_paths(_perfect(depth))


@given(st.integers(min_value=1, max_value=6), st.booleans())
def test_extra_leaf_breaks_equality(depth, on_left):
    root = _perfect(depth)
    node = root
    while node.left is not None:
        node = node.left
    if on_left:
        node.left = TreeNode(0)
    else:
        node.right = TreeNode(0)
    assert not equal_paths(root)