"""Test fixtures for forestlib consumers.

These helpers build small forests from a compact literal and provide an
instrumented children resolver, so walker behavior can be verified without
a real remote source.
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Union

from .._common.node import TreeNode


ForestSpec = Sequence[Union[Any, tuple]]


def make_forest(spec: ForestSpec) -> List[TreeNode]:
    """Build a nested forest from a compact literal.

    A leaf is written as its payload; a node with children as a
    ``(payload, [children...])`` tuple. Leaves get ``children=None``.

    Example:
        >>> roots = make_forest([("A", ["B", "C"]), "D"])
        >>> [n.data for n in roots]
        ['A', 'D']
    """
    nodes = []
    for entry in spec:
        if isinstance(entry, tuple):
            data, children = entry
            nodes.append(TreeNode(data=data, children=make_forest(children)))
        else:
            nodes.append(TreeNode(data=entry))
    return nodes


def node_names(nodes: Iterable[Optional[Any]]) -> List[Any]:
    """Payloads of the given nodes; None entries stay None."""
    return [None if node is None else node.data for node in nodes]


def forest_shape(nodes: Optional[Sequence[Any]]) -> List[Any]:
    """Inverse of ``make_forest``: the compact literal of a forest.

    Empty and missing children both render as a leaf.
    """
    shape = []
    for node in nodes or []:
        if node.children:
            shape.append((node.data, forest_shape(node.children)))
        else:
            shape.append(node.data)
    return shape


class RecordingResolver:
    """Async children resolver that records how it is used.

    By default it serves ``node.children`` (or a ``children_by_name`` entry
    keyed by payload), so the forest can be stored apart from the nodes the
    walker sees.

    Attributes:
        calls: Payloads in the order resolution was requested
        in_flight: Resolutions currently pending
        max_in_flight: Highest number of overlapping resolutions observed
    """

    def __init__(
        self,
        children_by_name: Optional[Dict[Any, List[Any]]] = None,
        delays: Optional[Dict[Any, float]] = None,
        fail_on: Optional[Set[Any]] = None,
        fail_times: int = 1,
    ):
        """Initialize the resolver.

        Args:
            children_by_name: Children to serve per payload instead of
                ``node.children``
            delays: Seconds to sleep per payload before answering
            fail_on: Payloads whose resolution raises ``ConnectionError``
            fail_times: How many times each payload in ``fail_on`` fails
                before it starts succeeding
        """
        self.children_by_name = children_by_name
        self.delays = delays or {}
        self.fail_on = set(fail_on or ())
        self.fail_times = fail_times
        self.calls: List[Any] = []
        self.failures: Dict[Any, int] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, node: Any) -> Optional[List[Any]]:
        name = node.data
        self.calls.append(name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(name, 0))

            if name in self.fail_on and self.failures.get(name, 0) < self.fail_times:
                self.failures[name] = self.failures.get(name, 0) + 1
                raise ConnectionError(f"cannot resolve children of {name!r}")

            if self.children_by_name is not None:
                return self.children_by_name.get(name)
            return node.children
        finally:
            self.in_flight -= 1
