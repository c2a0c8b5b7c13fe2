"""A self-balancing AVL tree built on the plain binary search tree."""

from __future__ import annotations

from typing import Any, Optional

from searchtrees.bst import BinarySearchTree, Node


class AVLNode(Node):
    """A tree node that also records its balance: right height minus left height."""

    __slots__ = ("balance",)

    def __init__(self, key: Any, value: Any, parent: Optional["AVLNode"]) -> None:
        super().__init__(key, value, parent)
        self.balance = 0


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced by rotations."""

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key, overwriting the value if the key already exists."""
        if self.root is None:
            self.root = AVLNode(key, value, None)
            return

        current: Optional[AVLNode] = self.root  # type: ignore[assignment]
        parent: AVLNode = self.root  # type: ignore[assignment]
        while current is not None:
            parent = current
            if key < current.key:
                current = current.left  # type: ignore[assignment]
            elif key > current.key:
                current = current.right  # type: ignore[assignment]
            else:
                current.value = value
                return

        node = AVLNode(key, value, parent)
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node

        if parent.balance != 0:
            parent.balance = 0
        else:
            parent.balance = -1 if node is parent.left else 1
            self._insert_fix(parent, node)

    def remove(self, key: Any) -> None:
        """Remove a key, rebalancing on the way up; absent keys are ignored.

        A node with two children is first swapped with its predecessor.
        """
        node = self._internal_find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._node_swap(node, self._predecessor(node))

        parent = node.parent
        diff = 0
        if parent is not None:
            diff = 1 if parent.left is node else -1
        self._splice(node)
        self._remove_fix(parent, diff)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        if n1 is n2 or n1 is None or n2 is None:
            return
        super()._node_swap(n1, n2)
        n1.balance, n2.balance = n2.balance, n1.balance  # type: ignore[attr-defined]

    def _rotate_left(self, node: AVLNode) -> None:
        right = node.right
        if right is None:
            return
        node.right = right.left
        if right.left is not None:
            right.left.parent = node
        right.parent = node.parent
        if node.parent is None:
            self.root = right
        elif node is node.parent.left:
            node.parent.left = right
        else:
            node.parent.right = right
        right.left = node
        node.parent = right

    def _rotate_right(self, node: AVLNode) -> None:
        left = node.left
        if left is None:
            return
        node.left = left.right
        if left.right is not None:
            left.right.parent = node
        left.parent = node.parent
        if node.parent is None:
            self.root = left
        elif node is node.parent.left:
            node.parent.left = left
        else:
            node.parent.right = left
        left.right = node
        node.parent = left

    def _insert_fix(self, parent: AVLNode, node: AVLNode) -> None:
        while parent is not None:
            grand = parent.parent
            if grand is None:
                return
            if parent is grand.left:
                grand.balance -= 1
                if grand.balance == 0:
                    return
                if grand.balance == -1:
                    parent, node = grand, parent
                    continue
                if node is parent.left:
                    self._rotate_right(grand)
                    parent.balance = 0
                    grand.balance = 0
                else:
                    self._rotate_left(parent)
                    self._rotate_right(grand)
                    if node.balance == -1:
                        parent.balance, grand.balance = 0, 1
                    elif node.balance == 0:
                        parent.balance, grand.balance = 0, 0
                    else:
                        parent.balance, grand.balance = -1, 0
                    node.balance = 0
                return
            grand.balance += 1
            if grand.balance == 0:
                return
            if grand.balance == 1:
                parent, node = grand, parent
                continue
            if node is parent.right:
                self._rotate_left(grand)
                parent.balance = 0
                grand.balance = 0
            else:
                self._rotate_right(parent)
                self._rotate_left(grand)
                if node.balance == 1:
                    parent.balance, grand.balance = 0, -1
                elif node.balance == 0:
                    parent.balance, grand.balance = 0, 0
                else:
                    parent.balance, grand.balance = 1, 0
                node.balance = 0
            return

    def _remove_fix(self, node: Optional[AVLNode], diff: int) -> None:
        while node is not None:
            node.balance += diff
            parent = node.parent
            next_diff = 0
            if parent is not None:
                next_diff = 1 if node is parent.left else -1

            if node.balance == 0:
                node, diff = parent, next_diff
                continue
            if node.balance in (1, -1):
                return

            if node.balance == 2:
                right = node.right
                if right.balance >= 0:
                    self._rotate_left(node)
                    if right.balance == 0:
                        node.balance, right.balance = 1, -1
                        return
                    node.balance, right.balance = 0, 0
                else:
                    right_left = right.left
                    rl_balance = right_left.balance
                    self._rotate_right(right)
                    self._rotate_left(node)
                    if rl_balance == 1:
                        node.balance, right.balance = -1, 0
                    elif rl_balance == 0:
                        node.balance, right.balance = 0, 0
                    else:
                        node.balance, right.balance = 0, 1
                    right_left.balance = 0
            elif node.balance == -2:
                left = node.left
                if left.balance <= 0:
                    self._rotate_right(node)
                    if left.balance == 0:
                        node.balance, left.balance = -1, 1
                        return
                    node.balance, left.balance = 0, 0
                else:
                    left_right = left.right
                    lr_balance = left_right.balance
                    self._rotate_left(left)
                    self._rotate_right(node)
                    if lr_balance == -1:
                        node.balance, left.balance = 1, 0
                    elif lr_balance == 0:
                        node.balance, left.balance = 0, 0
                    else:
                        node.balance, left.balance = 0, -1
                    left_right.balance = 0
            node, diff = parent, next_diff