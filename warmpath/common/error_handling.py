"""
Centralized error handling for the connection-strategy engine.

Error taxonomy:
- missing signal: absent profile fields, resolved locally to a 0 sub-score
- unsupported capability: optional graph accessor method missing, stage skipped
- not found: target absent from the graph, reported in the strategy reasoning
- accessor failure: the only fatal condition, raised as GraphAccessorError
"""

import logging
from contextlib import contextmanager
from typing import Optional


class WarmpathError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(WarmpathError, ValueError):
    """Raised when configuration values are out of range."""


class GraphAccessorError(WarmpathError):
    """
    Raised when a graph accessor call rejects or times out.

    Without graph data no strategy can be evaluated, so this propagates to
    the caller as a failure of the whole lookup.
    """

    def __init__(self, operation: str, message: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"[{operation}] {message}")


@contextmanager
def log_on_exception(logger: logging.Logger, operation: str, level: int = logging.WARNING):
    """
    Log a failing block at the given level, then re-raise.

    Usage:
        with log_on_exception(logger, "load graph", level=logging.ERROR):
            data = json.load(f)
    """
    try:
        yield
    except Exception as e:
        logger.log(level, f"[{operation}] Failed: {e}")
        raise
