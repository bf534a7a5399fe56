"""
Exceptions
==========

Error types raised by the scroll-mapping engine.

Out-of-range queries are never errors (they clamp). The only failures are
caller contract violations: malformed intervals and querying a mapping
that has not been built.
"""


class ChronoscrollError(Exception):
    """Base class for chronoscroll errors."""
    pass


class InvalidIntervalError(ChronoscrollError, ValueError):
    """Raised when an interval ends before it starts."""
    pass


class MappingNotBuiltError(ChronoscrollError, RuntimeError):
    """Raised when a mapper is queried before its first build."""
    pass
