"""Asynchronous implementation of forestlib.

This package contains the async walker, whose children are resolved on
demand with async/await, so a forest can be walked while it is being
fetched. Resolutions are strictly sequential per walker.
"""

# Node model and conversions (shared with sync)
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

# Core abstractions
from .core import (
    AsyncTreeWalker,
    WalkerBusyError,
    ChildrenResolver,
)

# Error handling
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .error_handling import ErrorHandlingResolver, create_resilient_resolver

# High-level API
from .api import (
    new_async_walker,
    children_of,
    iter_tree_async,
    collect_nodes_async,
    count_nodes_async,
)

# Configuration (re-exported from _common)
from ..config import AsyncWalkerOptions, DEFAULT_ASYNC_WALKER_OPTIONS

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
    'AsyncTreeWalker',
    'WalkerBusyError',
    'ChildrenResolver',
    'TreeWalkerProtocol',
    # Error handling
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'ErrorHandlingResolver',
    'create_resilient_resolver',
    # Configuration
    'AsyncWalkerOptions',
    'DEFAULT_ASYNC_WALKER_OPTIONS',
    # High-level API
    'new_async_walker',
    'children_of',
    'iter_tree_async',
    'collect_nodes_async',
    'count_nodes_async',
]
