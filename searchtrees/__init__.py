"""Binary search trees, AVL trees, an equal-paths check, a text tree printer and a demo."""

__version__ = "0.1.0"
__all__ = ["bst", "avl", "equal_paths", "pretty", "demo"]