"""Tree node model shared by the sync and aio walkers.

A forest is a plain list of root nodes. Every node may carry an ordered list
of children (the nested representation) or an ``id``/``parent`` pair (the flat
representation produced by ``flatten_tree``).

The helpers in this module read nodes by attribute only, so any object that
exposes a ``children`` attribute can be used in place of ``TreeNode``.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar


T = TypeVar("T")
IdT = TypeVar("IdT")

# Parent reference carried by roots in the flat representation.
NO_PARENT = None


@dataclass(eq=False)
class TreeNode(Generic[T, IdT]):
    """A node of a forest.

    Nodes compare by identity: two distinct nodes with the same payload are
    still two nodes of the forest.

    Attributes:
        data: Caller payload, never inspected by the library
        children: Ordered child nodes, or None when no children are
            materialized (yet). An empty list also means "no children".
        id: Identity assigned by ``flatten_tree`` (or by the caller before
            ``build_tree``)
        parent: Identity of the parent node, or NO_PARENT for roots. Only
            meaningful in the flat representation.
    """

    data: Optional[T] = None
    children: Optional[List["TreeNode[T, IdT]"]] = None
    id: Optional[IdT] = None
    parent: Optional[IdT] = field(default=NO_PARENT)

    def __repr__(self) -> str:
        """Short representation that does not recurse into children."""
        parts = [f"data={self.data!r}"]
        if self.id is not None:
            parts.append(f"id={self.id!r}")
        if self.parent is not NO_PARENT:
            parts.append(f"parent={self.parent!r}")
        if self.children is not None:
            parts.append(f"children={len(self.children)}")
        return f"{self.__class__.__name__}({', '.join(parts)})"


def has_children(node: Any) -> bool:
    """Check whether a node has at least one materialized child.

    Args:
        node: Node to check

    Returns:
        True if ``children`` is present and non-empty
    """
    children = getattr(node, "children", None)
    return bool(children)


def count_children(node: Any) -> int:
    """Number of materialized children of a node (0 when absent)."""
    children = getattr(node, "children", None)
    return len(children) if children else 0


def count_nodes(nodes: Sequence[Any]) -> int:
    """Count every node of a nested forest.

    The input must be acyclic; there is no cycle protection.

    Args:
        nodes: Root nodes

    Returns:
        Total number of nodes, roots included
    """
    return sum(1 + count_nodes(getattr(node, "children", None) or []) for node in nodes)


def walk_tree(nodes: Sequence[Any], visit: Callable[[Any], Any]) -> None:
    """Visit every node of a nested forest eagerly, in pre-order.

    There is no way to skip a subtree or stop early other than raising from
    ``visit``; exceptions propagate to the caller immediately. Use a
    ``TreeWalker`` when subtrees need to be skipped.

    Args:
        nodes: Root nodes
        visit: Called once per node, parent before children
    """
    for node in nodes:
        visit(node)
        if has_children(node):
            walk_tree(node.children, visit)
