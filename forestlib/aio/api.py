"""High-level async API for forestlib.

Simple functional wrappers around ``AsyncTreeWalker`` for the common cases:
stream nodes, collect them, count them.
"""

import inspect
from typing import Any, AsyncIterator, Awaitable, Callable, List, Mapping, Optional, Sequence, Union

from ..config import AsyncWalkerOptions
from .core.walker import AsyncTreeWalker, ChildrenResolver


PruneFn = Callable[[Any], Union[bool, Awaitable[bool]]]
OptionsArg = Optional[Union[AsyncWalkerOptions, Mapping[str, Any]]]


def new_async_walker(
    nodes: Sequence[Any],
    resolve_children: ChildrenResolver,
    options: OptionsArg = None,
) -> AsyncTreeWalker:
    """Create an async walker positioned before the first root."""
    return AsyncTreeWalker(nodes, resolve_children, options)


def children_of(node: Any) -> Optional[Sequence[Any]]:
    """Resolver that reads ``node.children``, for already nested forests."""
    return getattr(node, "children", None)


async def iter_tree_async(
    nodes: Sequence[Any],
    resolve_children: ChildrenResolver = children_of,
    prune: Optional[PruneFn] = None,
    options: OptionsArg = None,
) -> AsyncIterator[Any]:
    """Stream the nodes of a forest in pre-order.

    Args:
        nodes: Root nodes
        resolve_children: Resolver for the children of a node (sync or async)
        prune: When it returns True (or an awaitable of True) for a node, the
            node is still yielded but none of its descendants are
        options: Walker options, see ``AsyncWalkerOptions``

    Yields:
        Nodes in pre-order, one resolution at a time

    Example:
        >>> async for node in iter_tree_async(roots, fetch_children):
        ...     print(node.data)
    """
    walker = AsyncTreeWalker(nodes, resolve_children, options)
    async for node in walker:
        if prune is not None:
            skip = prune(node)
            if inspect.isawaitable(skip):
                skip = await skip
            if skip:
                walker.abandon_subtree()
        yield node


async def collect_nodes_async(
    nodes: Sequence[Any],
    resolve_children: ChildrenResolver = children_of,
    prune: Optional[PruneFn] = None,
    options: OptionsArg = None,
) -> List[Any]:
    """Collect all nodes of a forest in pre-order (see ``iter_tree_async``)."""
    return [node async for node in iter_tree_async(nodes, resolve_children, prune, options)]


async def count_nodes_async(
    nodes: Sequence[Any],
    resolve_children: ChildrenResolver = children_of,
    prune: Optional[PruneFn] = None,
) -> int:
    """Count the nodes of a lazily resolved forest.

    Every node's children are resolved once. Pruned subtrees are not counted.

    Returns:
        Number of nodes visited
    """
    count = 0
    async for _ in iter_tree_async(nodes, resolve_children, prune):
        count += 1
    return count
