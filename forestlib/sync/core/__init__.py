"""Core abstractions for synchronous forest walking."""

from .walker import TreeWalker

__all__ = [
    "TreeWalker",
]
