"""
Error handling policies for children resolvers.

This module provides a flexible error handling system through the Policy pattern,
allowing callers to decide what a failed ``resolve_children`` call means for
their walk. The walker itself never swallows or retries a failure; policies
are opt-in and wrap the caller's resolver (see ``ErrorHandlingResolver``).
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


def _describe(node: Any) -> Any:
    """Best-effort label for a node in error records."""
    for attr in ("id", "data"):
        value = getattr(node, attr, None)
        if value is not None:
            return value
    return node


class ErrorPolicy(ABC):
    """
    Base class for resolver error policies.

    Subclasses either re-raise the error (stopping the walk at the current
    ``next()``) or return the children to use instead.
    """

    @abstractmethod
    async def handle(self, error: Exception, node: Any) -> Optional[List[Any]]:
        """
        Handle an error raised while resolving the children of a node.

        Args:
            error: The exception that was raised
            node: The node whose children were being resolved

        Returns:
            Children to use in place of the failed result (usually an empty
            list, making the node a leaf), or re-raises the exception to
            stop the walk.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error.

    This is the default behavior and matches an unwrapped resolver: the
    error propagates out of ``next()`` and the walker can be retried.
    """

    async def handle(self, error: Exception, node: Any) -> Optional[List[Any]]:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that records every error and treats the failing node as a leaf.

    Useful for collecting all errors and presenting them at the end of a
    walk over an unreliable source.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []
        self.skipped_nodes: List[Any] = []

    async def handle(self, error: Exception, node: Any) -> Optional[List[Any]]:
        """Silently record the error and return no children."""
        self._record(error, node)
        return []

    def _record(self, error: Exception, node: Any) -> Dict[str, Any]:
        record = {
            'node': _describe(node),
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.errors.append(record)
        self.skipped_nodes.append(node)
        return record

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'skipped_nodes': len(self.skipped_nodes),
            'by_type': by_type,
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that warns about errors and continues the walk.

    Same bookkeeping as ``CollectErrorsPolicy``; additionally prints a
    warning to stderr for every failure when ``verbose`` is set.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    async def handle(self, error: Exception, node: Any) -> Optional[List[Any]]:
        """Record the error, warn if verbose, and return no children."""
        record = self._record(error, node)
        if self.verbose:
            print(
                f"\nWARNING: Skipping children of '{record['node']}': {error}",
                file=sys.stderr,
            )
        return []


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some failures are expected but too many indicate
    a systemic problem that should halt the walk.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    async def handle(self, error: Exception, node: Any) -> Optional[List[Any]]:
        """Return no children while under the threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(
                f"\nWARNING [{self.error_count}/{self.max_errors}]: "
                f"Error resolving children of '{_describe(node)}': {error}",
                file=sys.stderr,
            )
        return []
