import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from searchtrees.avl import AVLNode, AVLTree


def _check(tree):
    """Verify links, ordering and stored balances; return the tree height."""

    def walk(node, parent, low, high):
        if node is None:
            return 0
        assert isinstance(node, AVLNode)
        assert node.parent is parent
        if low is not None:
            assert node.key > low
        if high is not None:
            assert node.key < high
        left = walk(node.left, node, low, node.key)
        right = walk(node.right, node, node.key, high)
        assert node.balance == right - left
        assert abs(node.balance) <= 1
        return 1 + max(left, right)

    return walk(tree.root, None, None, None)


def test_demo_sequence():
    tree = AVLTree()
    tree.insert("a", 1)
    tree.insert("b", 2)
    assert list(tree) == [("a", 1), ("b", 2)]
    assert tree.find("b").item == ("b", 2)
    tree.remove("b")
    assert list(tree) == [("a", 1)]
    assert tree.find("b") is None


def test_ascending_inserts_rotate_to_middle_root():
    tree = AVLTree()
    for key in (1, 2, 3):
        tree.insert(key, str(key))
    assert tree.root.key == 2
    assert tree.root.left.key == 1
    assert tree.root.right.key == 3
    _check(tree)


def test_left_right_double_rotation():
    tree = AVLTree()
    for key in (3, 1, 2):
        tree.insert(key, key)
    assert tree.root.key == 2
    _check(tree)


def test_overwrite_keeps_size():
    tree = AVLTree()
    tree.insert(5, "x")
    tree.insert(5, "y")
    assert list(tree) == [(5, "y")]
    assert tree[5] == "y"


def test_remove_missing_is_noop():
    tree = AVLTree()
    for key in range(10):
        tree.insert(key, key)
    tree.remove(100)
    assert [k for k, _ in tree] == list(range(10))
    _check(tree)


def test_remove_node_with_two_children():
    tree = AVLTree()
    for key in range(1, 16):
        tree.insert(key, key * 10)
    root_key = tree.root.key
    tree.remove(root_key)
    assert root_key not in tree
    assert [k for k, _ in tree] == [k for k in range(1, 16) if k != root_key]
    _check(tree)


def test_remove_all_empties_tree():
    tree = AVLTree()
    keys = list(range(50))
    for key in keys:
        tree.insert(key, key)
    for key in keys:
        tree.remove(key)
        _check(tree)
    assert tree.empty()


def test_getitem_missing_raises():
    tree = AVLTree()
    tree.insert(1, 1)
    with pytest.raises(KeyError):
        tree[2]
    assert 2 not in tree
    assert list(tree) == [(1, 1)]
    assert tree[1] == 1


def test_sequential_inserts_stay_balanced():
    tree = AVLTree()
    for key in range(1000):
        tree.insert(key, key)
    assert tree.is_balanced()
    assert _check(tree) <= 15


@settings(max_examples=200)
@given(
    st.lists(
        st.tuples(st.booleans(), st.integers(min_value=-50, max_value=50)),
        max_size=200,
    )
)
def test_matches_dict_and_stays_balanced(ops):
    tree = AVLTree()
    model = {}
    for is_insert, key in ops:
        if is_insert:
            tree.insert(key, -key)
            model[key] = -key
        else:
            tree.remove(key)
            model.pop(key, None)
        _check(tree)
    assert list(tree) == sorted(model.items())
    assert tree.is_balanced()
    assert tree.empty() == (not model)