"""Core abstractions for async forest walking.

The walker here awaits a caller-supplied resolver for the children of every
node, so trees can be fetched lazily from slow or remote sources.
"""

from .walker import AsyncTreeWalker, WalkerBusyError, ChildrenResolver

__all__ = [
    'AsyncTreeWalker',
    'WalkerBusyError',
    'ChildrenResolver',
]
