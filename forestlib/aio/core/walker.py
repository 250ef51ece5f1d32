"""Async depth-first walker with on-demand children resolution.

The forest does not have to be materialized up front: every time the walker
reaches a node it awaits ``resolve_children(node)`` and descends into the
result. Exactly one resolution is in flight per walker.
"""

import inspect
import logging
from collections.abc import Sequence as SequenceABC
from typing import Any, AsyncIterator, Awaitable, Callable, Mapping, Optional, Sequence, Union

from ..._common.config import AsyncWalkerOptions
from ..._common.state import WalkerState


logger = logging.getLogger(__name__)

ChildrenResolver = Callable[[Any], Union[Awaitable[Optional[Sequence[Any]]], Optional[Sequence[Any]]]]


class WalkerBusyError(RuntimeError):
    """Raised when ``next()`` is called while another ``next()`` is pending."""


class AsyncTreeWalker:
    """Pre-order walker whose children come from an async resolver.

    Yield order is the same deterministic pre-order as ``TreeWalker``,
    whatever the resolution latency.

    If ``resolve_children`` raises (or the pending ``next()`` is cancelled),
    the exception propagates unchanged and the walker is left exactly as it
    was before that ``next()``; calling ``next()`` again retries the same
    node.

    Example:
        >>> async def fetch(node):
        ...     return await api.list_children(node.id)
        >>> walker = AsyncTreeWalker(roots, fetch, {"save_children": True})
        >>> async for node in walker:
        ...     print(node.data)
    """

    def __init__(
        self,
        nodes: Sequence[Any],
        resolve_children: ChildrenResolver,
        options: Optional[Union[AsyncWalkerOptions, Mapping[str, Any]]] = None,
    ):
        """Initialize walker positioned before the first root.

        Args:
            nodes: Root nodes
            resolve_children: Returns (or returns an awaitable of) the
                children of a node; None or empty means no children
            options: AsyncWalkerOptions or a mapping such as
                ``{"save_children": True}``

        Raises:
            ValueError: If options are invalid
        """
        self._state = WalkerState(nodes)
        self._resolve_children = resolve_children
        self._options = AsyncWalkerOptions.from_value(options)
        self._busy = False

    @property
    def roots(self) -> Sequence[Any]:
        return self._state.roots

    @property
    def options(self) -> AsyncWalkerOptions:
        return self._options

    @property
    def depth(self) -> Optional[int]:
        """Depth of the node returned last (roots are 0), None if there is none."""
        return self._state.depth

    async def _resolve(self, node: Any) -> Optional[Sequence[Any]]:
        children = self._resolve_children(node)
        if inspect.isawaitable(children):
            children = await children
        if children is not None and not isinstance(children, SequenceABC):
            children = list(children)
        return children

    async def next(self) -> Optional[Any]:
        """Move to the next node in pre-order and return it.

        Suspends only while the children of the returned node are resolved.

        Returns:
            The next node, or None when the forest is exhausted. Stays None
            until ``rewind()`` is called.

        Raises:
            WalkerBusyError: If another ``next()`` of this walker is pending
        """
        if self._busy:
            raise WalkerBusyError(
                f"{self.__class__.__name__}.next() called while another next() is pending"
            )

        snapshot = self._state.snapshot()
        frame = self._state.seek()
        if frame is None:
            return None

        node = frame.nodes[frame.index]
        self._busy = True
        try:
            children = await self._resolve(node)
        except BaseException as e:
            logger.debug("resolve_children failed for %r, restoring walker state: %r", node, e)
            self._state.restore(snapshot)
            raise
        finally:
            self._busy = False

        if self._options.save_children:
            node.children = children
        return self._state.take(frame, children)

    def abandon_subtree(self) -> None:
        """Skip the descendants of the node returned last.

        Takes effect on the following ``next()``. Has no effect when that
        node resolved to no children; calling it twice is the same as once.
        """
        logger.debug("abandon_subtree at depth %s", self._state.depth)
        self._state.abandon_subtree()

    def rewind(self) -> None:
        """Move back before the first root.

        Children already written back with ``save_children`` stay on the
        nodes; they are resolved again on the next pass.
        """
        logger.debug("rewind %s", self.__class__.__name__)
        self._state.reset()

    async def __aiter__(self) -> AsyncIterator[Any]:
        """Iterate the remaining nodes.

        ``abandon_subtree()`` may be called from inside the loop body.
        """
        while True:
            node = await self.next()
            if node is None:
                return
            yield node

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(roots={len(self._state.roots)}, "
            f"depth={self.depth}, save_children={self._options.save_children})"
        )
