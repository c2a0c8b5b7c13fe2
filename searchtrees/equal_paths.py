"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A bare binary tree node with an integer key."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _leaf_depths(root: TreeNode) -> Iterator[int]:
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.left is None and node.right is None:
            yield depth
            continue
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))


def equal_paths(root: Optional[TreeNode]) -> bool:
    """Return True if all root-to-leaf paths have the same length.

    An empty tree counts as having equal paths.
    """
    if root is None:
        return True
    depths = _leaf_depths(root)
    first = next(depths)
    return all(depth == first for depth in depths)