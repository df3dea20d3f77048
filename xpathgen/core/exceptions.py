from __future__ import annotations

"""Exception classes raised by path computation.

Every error is local to the single call that raised it: there is no retry
and no partial result. Callers catch :class:`NodePathError` to handle all of
them uniformly.
"""

from typing import Any, Optional


class NodePathError(Exception):
    """Base exception for all path computation errors.

    Carries the offending node (a view or raw provider object) when one is
    available, plus the underlying cause if the error wraps another one.
    """

    def __init__(self, message: str, node: Optional[Any] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.node = node
        self.cause = cause


class InvalidArgumentError(NodePathError, ValueError):
    """Raised for a null node, a node lacking required parent context, an
    object no adapter understands, or a malformed path string.
    """
    pass


class UnaddressableNodeError(NodePathError):
    """Raised when a document-type node is requested.

    XPath has no construct that selects a DOCTYPE declaration.
    """
    pass


class DetachedNodeError(NodePathError):
    """Raised for an attribute whose owner element cannot be resolved."""
    pass


class NodeNotFoundError(NodePathError):
    """Raised when evaluating a path against a document selects nothing."""

    def __init__(self, path: str, cause: Optional[Exception] = None) -> None:
        self.path = path
        super().__init__(f"No node matches path '{path}'", cause=cause)
