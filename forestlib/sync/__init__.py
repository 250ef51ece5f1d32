"""Synchronous implementation of forestlib.

All components here operate in a blocking, synchronous manner over forests
whose children are already materialized.
"""

# Node model and conversions
from .._common.node import (
    NO_PARENT,
    TreeNode,
    has_children,
    count_children,
    count_nodes,
    walk_tree,
)
from .._common.transform import flatten_tree, build_tree, sequential_ids
from .._common.state import TreeWalkerProtocol

# Core components
from .core.walker import TreeWalker

# High-level API
from .api import (
    new_walker,
    iter_tree,
    collect_nodes,
    find_nodes,
)

__all__ = [
    # Model
    'NO_PARENT',
    'TreeNode',
    'has_children',
    'count_children',
    'count_nodes',
    'walk_tree',
    'flatten_tree',
    'build_tree',
    'sequential_ids',
    # Core
    'TreeWalker',
    'TreeWalkerProtocol',
    # API
    'new_walker',
    'iter_tree',
    'collect_nodes',
    'find_nodes',
]
