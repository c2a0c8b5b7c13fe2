"""Text drawing of a binary search tree, with numbered placeholders for its items."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from searchtrees.bst import BinarySearchTree, Node

MAX_HEIGHT = 6
BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING

_EMPTY = "<empty tree>\n"
_CLIPPED = "(deeper levels omitted due to space limitations)\n"
_LEGEND = "Tree Placeholders:------------------\n"
_LOOKUP_FAILED = "<error: lookup failed>"


def _u16(value: int) -> int:
    return value % 65536


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _node_depth(root: Node, node: Optional[Node]) -> int:
    """Distance of node from root (1 for root), -1 if too deep, -2 if not below root."""
    dist = 1
    while node is not root:
        if node is None:
            return -2
        dist += 1
        node = node.parent
        if dist > MAX_HEIGHT:
            return -1
    return dist


def _subtree_height(root: Optional[Node], depth: int = 1) -> int:
    if root is None or depth > MAX_HEIGHT:
        return 0
    return 1 + max(
        _subtree_height(root.left, depth + 1),
        _subtree_height(root.right, depth + 1),
    )


def render(tree: BinarySearchTree, root: Optional[Node]) -> str:
    """Draw up to six levels of the subtree at root, followed by a placeholder legend."""
    if root is None:
        return _EMPTY

    height = _subtree_height(root)
    clipped = False
    if height > MAX_HEIGHT:
        height = MAX_HEIGHT
        clipped = True

    final_row_width = _u16(ELEMENT_WIDTH * 2 ** (height - 1) - PADDING)

    by_node: dict[int, int] = {}
    legend: list[tuple[object, int]] = []
    next_placeholder = 1
    for node in tree.nodes():
        if _node_depth(root, node) != -1:
            by_node[id(node)] = next_placeholder
            legend.append((node.key, next_placeholder))
            next_placeholder = (next_placeholder + 1) % 256

    def box(node: Optional[Node]) -> str:
        if node is None:
            return " " * BOX_WIDTH
        return f"[{by_node.get(id(node), 0):02d}]"

    out: list[str] = []
    margin = _u16(final_row_width // 2 - BOX_WIDTH // 2)
    padding = _u16(final_row_width - 2)
    row: list[Optional[Node]] = [root]

    for level in range(height):
        out.append(" " * margin + (" " * padding).join(box(n) for n in row) + "\n")

        padding = _u16(_trunc_div(padding - BOX_WIDTH, 2))
        margin = _u16(margin - (padding // 2 + 2))

        previous = row
        row = [
            child
            for n in previous
            for child in ((None, None) if n is None else (n.left, n.right))
        ]

        if level < height - 1:
            half = padding // 2
            parts = [" " * (margin + 2)]
            for n in previous:
                if n is None or n.left is None:
                    parts.append(" " * (half + 3))
                else:
                    parts.append("\u250c" + "\u2500" * (half - 1) + "\u2518  ")
                if n is None or n.right is None:
                    parts.append(" " * (half + 3))
                else:
                    parts.append("\u2514" + "\u2500" * (half - 1) + "\u2510  ")
                parts.append(" " * (padding + 2))
            out.append("".join(parts) + "\n")

    out.append("\n")
    if clipped:
        out.append(_CLIPPED)

    out.append(_LEGEND)
    for key, placeholder in legend:
        found = tree.find(key)
        value = _LOOKUP_FAILED if found is None else found.value
        out.append(f"[{placeholder:02d}] -> ({key}, {value})\n")

    return "".join(out)


def pretty_print(tree: BinarySearchTree, file: Optional[TextIO] = None) -> None:
    """Write the drawing of the whole tree and a blank line to file (stdout by default)."""
    stream = sys.stdout if file is None else file
    stream.write(render(tree, tree.root))
    stream.write("\n")