#!/usr/bin/env python3
"""
Basic async walk over a directory tree whose children are fetched on demand.

This example demonstrates:
- Resolving children lazily (here: listing directories in a worker thread)
- Skipping uninteresting subtrees with abandon_subtree()
- Keeping resolved children on the nodes with save_children
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from forestlib import TreeNode, count_nodes
from forestlib.aio import AsyncTreeWalker, create_resilient_resolver

SKIP = {".git", "__pycache__", "node_modules", ".venv"}


async def list_directory(node: TreeNode):
    """Resolve the children of a directory node."""
    path: Path = node.data
    if not path.is_dir():
        return None
    loop = asyncio.get_running_loop()
    entries = await loop.run_in_executor(None, lambda: sorted(path.iterdir()))
    return [TreeNode(data=entry) for entry in entries]


async def main():
    """Walk a directory and print it as an indented tree."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    roots = [TreeNode(data=root_path)]

    resolver = create_resilient_resolver(list_directory, verbose=True)
    walker = AsyncTreeWalker(roots, resolver, {"save_children": True})

    async for node in walker:
        print(f"{'  ' * walker.depth}{node.data.name or node.data}")
        if node.data.name in SKIP or walker.depth >= 3:
            walker.abandon_subtree()

    print(f"\nMaterialized {count_nodes(roots):,} nodes")


if __name__ == "__main__":
    print("forestlib - Basic Async Walk Example")
    print("=" * 50)
    asyncio.run(main())
