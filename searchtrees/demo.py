"""Small demonstrations of the search trees and of the equal-paths check."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from searchtrees.avl import AVLTree
from searchtrees.bst import BinarySearchTree
from searchtrees.equal_paths import TreeNode, equal_paths


def _exercise(tree: BinarySearchTree, title: str) -> list[str]:
    tree.insert("a", 1)
    tree.insert("b", 2)
    lines = [title]
    lines.extend(f"{key} {value}" for key, value in tree)
    lines.append("Found b" if "b" in tree else "Did not find b")
    lines.append("Erasing b")
    tree.remove("b")
    return lines


def tree_demo() -> str:
    """Insert, list, find and erase items in a plain and an AVL tree; return the report."""
    lines = _exercise(BinarySearchTree(), "Binary Search Tree contents:")
    lines.append("")
    lines.extend(_exercise(AVLTree(), "AVLTree contents:"))
    return "\n".join(lines) + "\n"


def _sample_trees() -> list[TreeNode]:
    return [
        TreeNode(1),
        TreeNode(1, TreeNode(2)),
        TreeNode(1, TreeNode(2), TreeNode(3)),
        TreeNode(1, None, TreeNode(3)),
        TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3)),
    ]


def equal_paths_demo() -> str:
    """Run the equal-paths check on five sample trees; return one line per tree."""
    return "".join(
        f"Test{number}: {int(equal_paths(root))}\n"
        for number, root in enumerate(_sample_trees(), start=1)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the search tree demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("trees", "paths", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.demo in ("trees", "all"):
        print(tree_demo(), end="")
    if args.demo in ("paths", "all"):
        print(equal_paths_demo(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())