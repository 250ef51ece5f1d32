"""forestlib - nested/flat forest conversions and resumable tree walking.

forestlib converts forests between a nested representation (nodes hold
their children) and a flat one (nodes hold a parent id), and walks nested
forests one node at a time with the ability to skip subtrees and rewind.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from forestlib.sync import TreeWalker

Asynchronous (children resolved on demand):
    from forestlib.aio import AsyncTreeWalker
━━━━━━━━━━━━━━━━━━━━━━━━━━

The node model and the flatten/build conversions are available from both.
"""

__version__ = "0.1.0"

from . import sync
from . import aio

# Model and conversions are implementation independent
from ._common.node import (
    NO_PARENT,
    TreeNode,
    has_children,
    count_children,
    count_nodes,
    walk_tree,
)
from ._common.transform import flatten_tree, build_tree, sequential_ids

__all__ = [
    "__version__",
    "sync",
    "aio",
    "NO_PARENT",
    "TreeNode",
    "has_children",
    "count_children",
    "count_nodes",
    "walk_tree",
    "flatten_tree",
    "build_tree",
    "sequential_ids",
]
