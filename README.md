# searchtrees

Ordered key/value trees in pure Python, with no dependencies beyond the standard library:

- `searchtrees.bst.BinarySearchTree`: a plain binary search tree that is never rebalanced.
- `searchtrees.avl.AVLTree`: a self-balancing tree with the same interface.
- `searchtrees.equal_paths.equal_paths`: checks whether every leaf of a tree sits at the same depth.
- `searchtrees.pretty.render` / `pretty_print`: draw a tree as text, using numbered boxes joined by lines.

## Installation

```
pip install .
```

To install the test tools as well, run `pip install .[test]` and then `pytest`.

## Using the trees

```python
from searchtrees.avl import AVLTree

tree = AVLTree()
for key, value in [("c", 3), ("a", 1), ("b", 2)]:
    tree.insert(key, value)

tree.insert("a", 10)          # an existing key has its value overwritten
print(list(tree))             # [('a', 10), ('b', 2), ('c', 3)]
print("b" in tree, tree["b"]) # True 2
print(tree.is_balanced())     # True

tree.remove("b")              # removing a missing key does nothing
tree["zzz"]                   # raises KeyError
```

Both tree classes provide the following:

- `insert(key, value)` adds an item. If the key is already present, its value is replaced.
- `remove(key)` deletes a key. A node with two children is first swapped with its in-order predecessor.
- `find(key)` returns the `Node` that holds the key, or `None`. A node has the attributes `key`, `value`, `parent`, `left` and `right`, and `item` gives its `(key, value)` pair.
- `nodes()` yields the nodes in ascending key order. Iterating the tree yields `(key, value)` pairs in the same order.
- `tree[key]` returns the key's value and raises `KeyError` if the key is absent. `key in tree` tests whether the key is present.
- `empty()` reports whether the tree holds nothing, and `clear()` removes everything.
- `is_balanced()` is true when, at every node, the heights of the two subtrees differ by at most one.

`AVLTree` stores `AVLNode` objects. Each one carries a `balance`, which is the right subtree's height minus the left subtree's height. The tree rotates nodes after every insert and remove to keep each balance between -1 and 1.

Keys may be of any type that supports `<`, `>` and `==` among themselves.

## Equal paths

```python
from searchtrees.equal_paths import TreeNode, equal_paths

print(equal_paths(TreeNode(1, TreeNode(2), TreeNode(3))))                     # True
print(equal_paths(TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))))  # False
print(equal_paths(None))                                                      # True
```

`TreeNode` is a small dataclass with the fields `key`, `left` and `right`. It is separate from the search tree nodes.

## Printing

```python
import sys
from searchtrees.pretty import pretty_print, render

pretty_print(tree, sys.stdout)       # whole tree; writes to stdout if no file is given
text = render(tree, tree.find("a"))  # the subtree under one node, as a string
```

Each node is drawn as a box with a two-digit placeholder number. Below the drawing is a legend that maps each placeholder to `(key, value)`. The drawing shows at most six levels. If the tree is deeper, a line notes that the deeper levels were left out. An empty tree is drawn as `<empty tree>`.

## Demo

```
searchtrees-demo [trees|paths|all]
```

`trees` builds a small binary search tree and a small AVL tree. For each one it lists the contents, looks up a key and erases it. `paths` runs the equal-paths check on five sample trees and prints `TestN: 1` or `TestN: 0` for each. With no argument, both demos run. The same output is available as strings from `searchtrees.demo.tree_demo()` and `searchtrees.demo.equal_paths_demo()`.