"""Tests for the high-level sync and async APIs."""

import pytest

import forestlib
from forestlib.sync import (
    TreeWalker,
    collect_nodes,
    find_nodes,
    iter_tree,
    new_walker,
)
from forestlib.aio import (
    AsyncTreeWalker,
    collect_nodes_async,
    count_nodes_async,
    iter_tree_async,
    new_async_walker,
)
from forestlib.testing import RecordingResolver, make_forest, node_names


TREE = [("src", [("vendor", ["lib1", "lib2"]), "main"]), ("docs", ["index"])]


class TestSyncApi:
    """Functional wrappers around TreeWalker."""

    def test_new_walker(self):
        walker = new_walker(make_forest(TREE))
        assert isinstance(walker, TreeWalker)
        assert walker.next().data == "src"

    def test_iter_tree(self):
        assert node_names(iter_tree(make_forest(TREE))) == [
            "src", "vendor", "lib1", "lib2", "main", "docs", "index",
        ]

    def test_iter_tree_prune_yields_pruned_node(self):
        names = node_names(iter_tree(make_forest(TREE), prune=lambda n: n.data == "vendor"))
        assert names == ["src", "vendor", "main", "docs", "index"]

    def test_collect_nodes(self):
        roots = make_forest(TREE)
        assert collect_nodes(roots, prune=lambda n: n.data == "src") == [roots[0], roots[1], roots[1].children[0]]

    def test_find_nodes(self):
        found = find_nodes(make_forest(TREE), lambda n: n.data.startswith("lib"))
        assert node_names(found) == ["lib1", "lib2"]

    def test_find_nodes_respects_prune(self):
        found = find_nodes(
            make_forest(TREE),
            lambda n: n.data.startswith("lib"),
            prune=lambda n: n.data == "vendor",
        )
        assert found == []


class TestAsyncApi:
    """Functional wrappers around AsyncTreeWalker."""

    def test_new_async_walker(self):
        walker = new_async_walker(make_forest(TREE), RecordingResolver(), {"save_children": True})
        assert isinstance(walker, AsyncTreeWalker)
        assert walker.options.save_children is True

    @pytest.mark.asyncio
    async def test_iter_tree_async_default_resolver(self):
        names = [node.data async for node in iter_tree_async(make_forest(TREE))]
        assert names == ["src", "vendor", "lib1", "lib2", "main", "docs", "index"]

    @pytest.mark.asyncio
    async def test_iter_tree_async_sync_prune(self):
        resolver = RecordingResolver()
        names = [
            node.data
            async for node in iter_tree_async(make_forest(TREE), resolver, prune=lambda n: n.data == "vendor")
        ]
        assert names == ["src", "vendor", "main", "docs", "index"]
        assert "lib1" not in resolver.calls

    @pytest.mark.asyncio
    async def test_iter_tree_async_async_prune(self):
        async def prune(node):
            return node.data == "src"

        nodes = await collect_nodes_async(make_forest(TREE), RecordingResolver(), prune=prune)
        assert node_names(nodes) == ["src", "docs", "index"]

    @pytest.mark.asyncio
    async def test_collect_nodes_async_save_children(self):
        roots = make_forest(TREE)
        all_nodes = collect_nodes(roots)
        children = {node.data: node.children for node in all_nodes if node.children}
        for node in all_nodes:
            node.children = None

        await collect_nodes_async(roots, RecordingResolver(children), options={"save_children": True})
        assert node_names(roots[0].children) == ["vendor", "main"]

    @pytest.mark.asyncio
    async def test_count_nodes_async(self):
        roots = make_forest(TREE)
        assert await count_nodes_async(roots) == forestlib.count_nodes(roots)

    @pytest.mark.asyncio
    async def test_count_nodes_async_with_prune(self):
        count = await count_nodes_async(make_forest(TREE), prune=lambda n: n.data == "docs")
        assert count == 6


class TestPackageSurface:
    """Top-level package exports."""

    def test_version(self):
        assert forestlib.__version__

    def test_shared_exports(self):
        assert forestlib.sync.flatten_tree is forestlib.aio.flatten_tree is forestlib.flatten_tree
        assert forestlib.sync.TreeNode is forestlib.TreeNode
