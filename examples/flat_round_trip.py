#!/usr/bin/env python3
"""
Round trip between the nested and the flat representation.

This example demonstrates:
- Flattening a forest into parent-linked rows (e.g. for a database table)
- Rebuilding the forest from rows in arbitrary order
- How rows whose parent is missing are left out
"""

import random
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from forestlib import TreeNode, build_tree, flatten_tree, sequential_ids
from forestlib.sync import TreeWalker


def show(roots):
    walker = TreeWalker(roots)
    for node in walker:
        print(f"  {'  ' * walker.depth}{node.data}")


def main():
    roots = [
        TreeNode(data="fruit", children=[
            TreeNode(data="apple"),
            TreeNode(data="citrus", children=[TreeNode(data="lemon"), TreeNode(data="lime")]),
        ]),
        TreeNode(data="vegetables", children=[TreeNode(data="leek")]),
    ]
    print("Nested:")
    show(roots)

    rows = flatten_tree(roots, sequential_ids())
    print("\nFlat rows (id, parent, data):")
    for row in rows:
        print(f"  {row.id:>2} {str(row.parent):>4}  {row.data}")

    random.shuffle(rows)
    rows.append(TreeNode(data="orphan", id=99, parent=42))

    print("\nRebuilt from shuffled rows (the orphan row is dropped):")
    show(build_tree(rows))


if __name__ == "__main__":
    main()
