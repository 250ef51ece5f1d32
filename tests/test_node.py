"""Tests for the node model and its predicates."""

from types import SimpleNamespace

import pytest

from forestlib import (
    NO_PARENT,
    TreeNode,
    has_children,
    count_children,
    count_nodes,
    walk_tree,
)
from forestlib.testing import make_forest, node_names


@pytest.fixture
def forest():
    """Create a small test forest.

    Structure:
        A
        ├── B
        │   ├── B1
        │   └── B2
        └── C
        D
    """
    return make_forest([("A", [("B", ["B1", "B2"]), "C"]), "D"])


class TestTreeNode:
    """Test the TreeNode dataclass."""

    def test_defaults(self):
        node = TreeNode()
        assert node.data is None
        assert node.children is None
        assert node.id is None
        assert node.parent is NO_PARENT

    def test_identity_equality(self):
        """Nodes with equal payloads are still distinct nodes."""
        a = TreeNode(data="x")
        b = TreeNode(data="x")
        assert a != b
        assert a == a
        assert a in [a] and b not in [a]

    def test_repr_does_not_recurse(self, forest):
        text = repr(forest[0])
        assert "data='A'" in text
        assert "children=2" in text
        assert "B1" not in text

    def test_repr_flat_node(self):
        text = repr(TreeNode(data="x", id=3, parent=1))
        assert "id=3" in text
        assert "parent=1" in text


class TestPredicates:
    """Test has_children / count_children."""

    def test_absent_children(self):
        node = TreeNode(data="leaf")
        assert has_children(node) is False
        assert count_children(node) == 0

    def test_empty_children(self):
        node = TreeNode(data="leaf", children=[])
        assert has_children(node) is False
        assert count_children(node) == 0

    def test_with_children(self, forest):
        assert has_children(forest[0]) is True
        assert count_children(forest[0]) == 2
        assert count_children(forest[0].children[0]) == 2

    def test_duck_typed_nodes(self):
        """Any object with a children attribute works."""
        node = SimpleNamespace(children=[SimpleNamespace(children=None)])
        assert has_children(node)
        assert count_children(node) == 1
        assert not has_children(object())
        assert count_children(object()) == 0


class TestCountNodes:
    """Test count_nodes."""

    def test_empty_forest(self):
        assert count_nodes([]) == 0

    def test_counts_every_node(self, forest):
        assert count_nodes(forest) == 6

    def test_single_subtree(self, forest):
        assert count_nodes(forest[0].children) == 4


class TestWalkTree:
    """Test the eager pre-order visit."""

    def test_pre_order(self, forest):
        visited = []
        walk_tree(forest, visited.append)
        assert node_names(visited) == ["A", "B", "B1", "B2", "C", "D"]

    def test_empty_forest(self):
        visited = []
        walk_tree([], visited.append)
        assert visited == []

    def test_visit_exception_propagates_immediately(self, forest):
        visited = []

        def visit(node):
            visited.append(node.data)
            if node.data == "B1":
                raise KeyError("stop")

        with pytest.raises(KeyError):
            walk_tree(forest, visit)

        assert visited == ["A", "B", "B1"]
