"""High-level API for synchronous forest walking.

This module provides simple, functional interfaces for common walks. These
functions wrap ``TreeWalker`` for ease of use in simple cases.
"""

from typing import Any, Callable, Iterator, List, Optional, Sequence

from .core.walker import TreeWalker


def new_walker(nodes: Sequence[Any]) -> TreeWalker:
    """Create a walker positioned before the first root."""
    return TreeWalker(nodes)


def iter_tree(
    nodes: Sequence[Any],
    prune: Optional[Callable[[Any], bool]] = None,
) -> Iterator[Any]:
    """Iterate a nested forest in pre-order.

    Args:
        nodes: Root nodes
        prune: When it returns True for a node, the node is still yielded
            but none of its descendants are

    Yields:
        Nodes in pre-order

    Example:
        >>> for node in iter_tree(roots, prune=lambda n: n.data == "vendor"):
        ...     print(node.data)
    """
    walker = TreeWalker(nodes)
    for node in walker:
        if prune is not None and prune(node):
            walker.abandon_subtree()
        yield node


def collect_nodes(
    nodes: Sequence[Any],
    prune: Optional[Callable[[Any], bool]] = None,
) -> List[Any]:
    """Collect all nodes of a forest in pre-order (see ``iter_tree``)."""
    return list(iter_tree(nodes, prune=prune))


def find_nodes(
    nodes: Sequence[Any],
    predicate: Callable[[Any], bool],
    prune: Optional[Callable[[Any], bool]] = None,
) -> List[Any]:
    """Find nodes that match a predicate.

    Args:
        nodes: Root nodes
        predicate: Function that returns True for matching nodes
        prune: Optional subtree filter (see ``iter_tree``)

    Returns:
        Matching nodes in pre-order
    """
    return [node for node in iter_tree(nodes, prune=prune) if predicate(node)]
