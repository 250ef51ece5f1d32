"""Conversions between the nested and the flat representation of a forest.

Both conversions mutate the caller's nodes in place and return the same node
objects arranged differently:

- ``flatten_tree`` assigns ``id`` and ``parent`` and drops ``children``
- ``build_tree`` assigns a fresh ``children`` list to every node it sees

Preconditions (not checked): ids are unique, ``id_to_str`` is injective over
the ids present, and the nested input is acyclic.
"""

import itertools
import logging
from typing import Any, Callable, Dict, Iterable, List, Sequence

from .node import NO_PARENT


logger = logging.getLogger(__name__)


def _flatten_node(node: Any, id_fn: Callable[[Any], Any], accum: List[Any]) -> None:
    node.id = id_fn(node)
    accum.append(node)

    children = getattr(node, "children", None)
    if children is None:
        return

    for child in children:
        child.parent = node.id
        _flatten_node(child, id_fn, accum)
    node.children = None


def flatten_tree(nodes: Sequence[Any], id_fn: Callable[[Any], Any]) -> List[Any]:
    """Flatten a nested forest into a list of parent-linked nodes.

    Every node is visited once in pre-order: ``id_fn(node)`` is stored on
    ``node.id``, each child gets ``parent`` set to that id, and the node's
    ``children`` is cleared. Roots get ``parent = NO_PARENT``.

    Args:
        nodes: Root nodes of the forest
        id_fn: Returns the identity of a node. Must be deterministic and
            produce ids that ``build_tree``'s ``id_to_str`` can tell apart.

    Returns:
        All nodes in pre-order (a root, then its subtree, then the next root)

    Example:
        >>> total = count_nodes(roots)
        >>> flat = flatten_tree(roots, sequential_ids())
        >>> len(flat) == total
        True
    """
    accum: List[Any] = []
    for node in nodes:
        node.parent = NO_PARENT
        _flatten_node(node, id_fn, accum)
    return accum


def build_tree(nodes: Iterable[Any], id_to_str: Callable[[Any], str] = str) -> List[Any]:
    """Rebuild a nested forest from parent-linked nodes.

    The input may be in any order; a child seen before its parent waits in a
    pending list keyed by the parent's id and is adopted when the parent
    shows up. A node whose parent never shows up stays pending and is left
    out of the result together with its whole subtree. This is tolerated,
    not an error.

    Args:
        nodes: Flat nodes carrying ``id`` and ``parent``
        id_to_str: Turns an id into a hashable key; must be injective over
            the ids present

    Returns:
        Root nodes, in input order. Child order follows input order.
    """
    nodes_by_id: Dict[str, Any] = {}
    orphans_by_parent: Dict[str, List[Any]] = {}
    roots: List[Any] = []

    for node in nodes:
        id_str = id_to_str(node.id)
        nodes_by_id[id_str] = node
        node.children = orphans_by_parent.pop(id_str, [])

        if node.parent is NO_PARENT:
            roots.append(node)
            continue

        parent_id_str = id_to_str(node.parent)
        parent = nodes_by_id.get(parent_id_str)
        if parent is not None:
            parent.children.append(node)
            continue

        orphans_by_parent.setdefault(parent_id_str, []).append(node)

    if orphans_by_parent:
        logger.debug(
            "build_tree: dropped %d orphan group(s) with missing parents %s",
            len(orphans_by_parent),
            sorted(orphans_by_parent),
        )

    return roots


def sequential_ids(start: int = 1) -> Callable[[Any], int]:
    """Create an id function that hands out increasing integers.

    Args:
        start: First id handed out

    Returns:
        Callable suitable as ``flatten_tree``'s ``id_fn``
    """
    counter = itertools.count(start)
    return lambda node: next(counter)
