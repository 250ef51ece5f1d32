"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- The node model and its predicates (TreeNode, has_children, ...)
- Flatten/build conversions
- Walker state machine and configuration

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .node import (
    NO_PARENT,
    TreeNode,
    has_children,
    count_children,
    count_nodes,
    walk_tree,
)
from .transform import flatten_tree, build_tree, sequential_ids
from .state import Frame, WalkerState, TreeWalkerProtocol
from .config import AsyncWalkerOptions, DEFAULT_ASYNC_WALKER_OPTIONS

__all__ = [
    'NO_PARENT',
    'TreeNode',
    'has_children',
    'count_children',
    'count_nodes',
    'walk_tree',
    'flatten_tree',
    'build_tree',
    'sequential_ids',
    'Frame',
    'WalkerState',
    'TreeWalkerProtocol',
    'AsyncWalkerOptions',
    'DEFAULT_ASYNC_WALKER_OPTIONS',
]
