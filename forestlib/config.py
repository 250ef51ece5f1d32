"""Public configuration module for forestlib.

Re-exports the walker configuration from the _common package so both the
sync and aio packages (and users) import it from one stable place.
"""

from ._common.config import AsyncWalkerOptions, DEFAULT_ASYNC_WALKER_OPTIONS

__all__ = [
    'AsyncWalkerOptions',
    'DEFAULT_ASYNC_WALKER_OPTIONS',
]
