"""Synchronous depth-first walker for nested forests.

The walker hands out one node per ``next()`` call in pre-order. Between calls
the caller may skip the subtree of the node it just received, or rewind to
the first root.
"""

import logging
from typing import Any, Iterator, Optional, Sequence

from ..._common.node import has_children
from ..._common.state import WalkerState


logger = logging.getLogger(__name__)


class TreeWalker:
    """Iterative pre-order walker over an already nested forest.

    Children are read from ``node.children``. The forest is held by
    reference; mutating children while a walk is in progress is undefined.

    Example:
        >>> walker = TreeWalker(roots)
        >>> node = walker.next()
        >>> while node is not None:
        ...     if node.data == "skip-me":
        ...         walker.abandon_subtree()
        ...     node = walker.next()
    """

    def __init__(self, nodes: Sequence[Any]):
        """Initialize walker positioned before the first root.

        Args:
            nodes: Root nodes
        """
        self._state = WalkerState(nodes)

    @property
    def roots(self) -> Sequence[Any]:
        return self._state.roots

    @property
    def depth(self) -> Optional[int]:
        """Depth of the node returned last (roots are 0), None if there is none."""
        return self._state.depth

    def next(self) -> Optional[Any]:
        """Move to the next node in pre-order and return it.

        Returns:
            The next node, or None when the forest is exhausted. Stays None
            until ``rewind()`` is called.
        """
        frame = self._state.seek()
        if frame is None:
            return None

        node = frame.nodes[frame.index]
        return self._state.take(frame, node.children if has_children(node) else None)

    def abandon_subtree(self) -> None:
        """Skip the descendants of the node returned last.

        Takes effect on the following ``next()``. Has no effect when that
        node has no children; calling it twice is the same as once.
        """
        logger.debug("abandon_subtree at depth %s", self._state.depth)
        self._state.abandon_subtree()

    def rewind(self) -> None:
        """Move back before the first root."""
        logger.debug("rewind %s", self.__class__.__name__)
        self._state.reset()

    def __iter__(self) -> Iterator[Any]:
        """Iterate the remaining nodes.

        ``abandon_subtree()`` may be called from inside the loop body.
        """
        while True:
            node = self.next()
            if node is None:
                return
            yield node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(roots={len(self._state.roots)}, depth={self.depth})"
