"""Traversal state shared by the sync and aio walkers.

Both walkers run the same state machine over an explicit stack of frames.
The machine lives in ``WalkerState``; each walker owns one and only adds the
step that obtains a node's children (read from the node, or awaited from a
resolver).

A frame pairs a sibling sequence with the index of the next unvisited
sibling. Two flags complete the state:

- ``subtree_abandoned``: the caller asked to skip the subtree of the node
  returned last
- ``pushed``: returning that node pushed a frame for its children
"""

from typing import Any, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


class Frame:
    """One level of the traversal stack."""

    __slots__ = ("nodes", "index")

    def __init__(self, nodes: Sequence[Any], index: int = 0):
        self.nodes = nodes
        self.index = index

    def exhausted(self) -> bool:
        return self.index >= len(self.nodes)

    def __repr__(self) -> str:
        return f"Frame(index={self.index}, size={len(self.nodes)})"


# (frames as (nodes, index) pairs, subtree_abandoned, pushed, depth)
Snapshot = Tuple[List[Tuple[Sequence[Any], int]], bool, bool, Optional[int]]


class WalkerState:
    """Explicit-stack pre-order traversal state.

    One ``next()`` of a walker is ``seek()`` followed by ``take()``. ``seek``
    never needs the children of anything, so the async walker does all of
    its frame popping before it suspends.
    """

    def __init__(self, roots: Sequence[Any]):
        """Initialize state positioned before the first root.

        Args:
            roots: Root nodes, kept by reference and reused by ``reset``
        """
        self.roots = roots
        self.reset()

    def reset(self) -> None:
        """Go back to the initial state (before the first root)."""
        self.stack: List[Frame] = [Frame(self.roots)]
        self.subtree_abandoned = False
        self.pushed = True
        self.depth: Optional[int] = None

    def abandon_subtree(self) -> None:
        self.subtree_abandoned = True

    def seek(self) -> Optional[Frame]:
        """Find the frame holding the next node to return.

        Pops the frame of an abandoned subtree, then pops exhausted frames
        until a frame with an unvisited node is on top.

        Returns:
            The top frame, positioned on the next node, or None when the
            traversal is done
        """
        while self.stack:
            if self.subtree_abandoned and self.pushed:
                self.stack.pop()
            self.subtree_abandoned = False
            self.pushed = False

            if not self.stack:
                break

            top = self.stack[-1]
            if not top.exhausted():
                return top
            self.stack.pop()

        self.depth = None
        return None

    def take(self, frame: Frame, children: Optional[Sequence[Any]]) -> Any:
        """Return the node ``frame`` is positioned on and step past it.

        Args:
            frame: Frame returned by the preceding ``seek()``
            children: Children of that node; a new frame is pushed for them
                when non-empty

        Returns:
            The node
        """
        node = frame.nodes[frame.index]
        self.depth = len(self.stack) - 1
        if children:
            self.stack.append(Frame(children))
            self.pushed = True
        frame.index += 1
        return node

    def snapshot(self) -> Snapshot:
        return (
            [(frame.nodes, frame.index) for frame in self.stack],
            self.subtree_abandoned,
            self.pushed,
            self.depth,
        )

    def restore(self, snapshot: Snapshot) -> None:
        frames, self.subtree_abandoned, self.pushed, self.depth = snapshot
        self.stack = [Frame(nodes, index) for nodes, index in frames]


@runtime_checkable
class TreeWalkerProtocol(Protocol):
    """Capability interface shared by ``TreeWalker`` and ``AsyncTreeWalker``.

    ``next()`` returns the next node in pre-order or None when done (the
    async walker returns an awaitable of that). ``abandon_subtree()`` skips
    the descendants of the node returned last. ``rewind()`` restarts from the
    first root.
    """

    def next(self) -> Any: ...

    def abandon_subtree(self) -> None: ...

    def rewind(self) -> None: ...
