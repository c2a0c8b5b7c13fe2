"""An unbalanced binary search tree keyed by any totally ordered type."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Node:
    """A tree node holding a key, a value and links to its neighbours."""

    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: Optional["Node"]) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    @property
    def item(self) -> tuple:
        """The (key, value) pair stored in this node."""
        return (self.key, self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.value!r})"


class BinarySearchTree:
    """A binary search tree that is not rebalanced on insertion or removal."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key, overwriting the value if the key already exists."""
        if self.root is None:
            self.root = Node(key, value, None)
            return

        current: Optional[Node] = self.root
        parent = self.root
        while current is not None:
            if key == current.key:
                current.value = value
                return
            parent = current
            current = current.left if key < current.key else current.right

        node = Node(key, value, parent)
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node

    def remove(self, key: Any) -> None:
        """Remove a key; a node with two children is first swapped with its predecessor.

        Removing a key that is not present does nothing.
        """
        node = self._internal_find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._node_swap(node, self._predecessor(node))
        self._splice(node)

    def clear(self) -> None:
        """Remove every item from the tree."""
        self.root = None

    def is_balanced(self) -> bool:
        """Return True if every node's subtree heights differ by at most one."""
        heights: dict[int, int] = {}
        for node in self._postorder():
            left = heights.get(id(node.left), 0) if node.left is not None else 0
            right = heights.get(id(node.right), 0) if node.right is not None else 0
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True

    def empty(self) -> bool:
        """Return True if the tree holds no items."""
        return self.root is None

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None if it is absent."""
        return self._internal_find(key)

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes in ascending key order."""
        node = self._smallest_node()
        while node is not None:
            yield node
            node = self._successor(node)

    def __getitem__(self, key: Any) -> Any:
        node = self._internal_find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._internal_find(key) is not None

    def __iter__(self) -> Iterator[tuple]:
        for node in self.nodes():
            yield node.item

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _internal_find(self, key: Any) -> Optional[Node]:
        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def _smallest_node(self) -> Optional[Node]:
        current = self.root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current

    @staticmethod
    def _successor(current: Node) -> Optional[Node]:
        if current.right is not None:
            current = current.right
            while current.left is not None:
                current = current.left
            return current
        parent = current.parent
        while parent is not None and current is parent.right:
            current = parent
            parent = parent.parent
        return parent

    @staticmethod
    def _predecessor(current: Optional[Node]) -> Optional[Node]:
        if current is None:
            return None
        if current.left is not None:
            current = current.left
            while current.right is not None:
                current = current.right
            return current
        parent = current.parent
        while parent is not None and current is parent.left:
            current = parent
            parent = parent.parent
        return parent

    def _postorder(self) -> Iterator[Node]:
        stack: list[tuple[Node, bool]] = []
        if self.root is not None:
            stack.append((self.root, False))
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def _splice(self, node: Node) -> None:
        """Unlink a node that has at most one child, replacing it with that child."""
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes in the tree."""
        if n1 is n2 or n1 is None or n2 is None:
            return
        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1 is n1p.left
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2 is n2p.left

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self.root is n1:
            self.root = n2
        elif self.root is n2:
            self.root = n1