"""
Error handling resolver wrapper for forestlib.

This module provides the ErrorHandlingResolver that wraps a children
resolver and delegates failures to pluggable policies.
"""

import inspect
import logging
from typing import Any, Optional, Sequence

from .core.walker import ChildrenResolver
from .error_policies import ErrorPolicy, FailFastPolicy


logger = logging.getLogger(__name__)


class ErrorHandlingResolver:
    """
    Resolver that wraps another resolver and handles its errors through policies.

    Instances are callables and can be passed anywhere a ``resolve_children``
    is expected. The wrapped resolver is called exactly once per invocation;
    the policy decides whether a failure propagates or turns the node into
    a leaf.

    ``asyncio.CancelledError`` is never handed to a policy.
    """

    def __init__(self, base_resolver: ChildrenResolver, policy: Optional[ErrorPolicy] = None):
        """
        Initialize the error handling resolver.

        Args:
            base_resolver: The resolver to wrap (sync or async)
            policy: Error handling policy (defaults to FailFastPolicy)
        """
        self._base_resolver = base_resolver
        self._policy = policy or FailFastPolicy()

    async def __call__(self, node: Any) -> Optional[Sequence[Any]]:
        try:
            children = self._base_resolver(node)
            if inspect.isawaitable(children):
                children = await children
            return children
        except Exception as e:
            logger.debug("resolver failed for %r, delegating to %s", node, self._policy.__class__.__name__)
            return await self._policy.handle(e, node)

    def get_policy(self) -> ErrorPolicy:
        """
        Get the current error policy.

        Returns:
            The configured ErrorPolicy instance
        """
        return self._policy

    def set_policy(self, policy: ErrorPolicy) -> None:
        """
        Change the error policy.

        Args:
            policy: The new ErrorPolicy to use
        """
        self._policy = policy

    def get_base_resolver(self) -> ChildrenResolver:
        """
        Get the wrapped base resolver.

        Returns:
            The underlying resolver being wrapped
        """
        return self._base_resolver

    def __repr__(self) -> str:
        """String representation."""
        return f"ErrorHandlingResolver({self._base_resolver!r}, policy={self._policy.__class__.__name__})"


def create_resilient_resolver(
    base_resolver: ChildrenResolver,
    strict: bool = False,
    verbose: bool = True,
) -> ErrorHandlingResolver:
    """
    Convenience function to create an error-handling resolver.

    Args:
        base_resolver: The resolver to wrap
        strict: If True, use FailFastPolicy; if False, use ContinueOnErrorsPolicy
        verbose: If True, print warnings for errors (only applies when strict=False)

    Returns:
        An ErrorHandlingResolver configured appropriately
    """
    from .error_policies import ContinueOnErrorsPolicy

    if strict:
        policy = FailFastPolicy()
    else:
        policy = ContinueOnErrorsPolicy(verbose=verbose)

    return ErrorHandlingResolver(base_resolver, policy)
