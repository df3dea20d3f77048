from __future__ import annotations

"""Node classification predicates shared by the locator and path builder.

All helpers are pure and accept either a :class:`NodeView` or a raw provider
node. They never raise: ``None`` and objects no adapter recognises yield
``False`` (or ``None`` for :func:`local_name`).
"""

from typing import Any, Optional

from xpathgen.core.adapters import NodeView, adapt
from xpathgen.core.exceptions import InvalidArgumentError
from xpathgen.core.models import NodeKind

__all__ = [
    "XMLNS_NAMESPACE",
    "is_empty_text",
    "is_namespace_attribute",
    "is_text",
    "local_name",
]

XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"


def _view(node: Any) -> Optional[NodeView]:
    if node is None:
        return None
    try:
        return adapt(node)
    except InvalidArgumentError:
        # Not a node of any supported provider
        return None


def is_text(node: Any) -> bool:
    """Return True if *node* is a text or CDATA node."""
    view = _view(node)
    return view is not None and view.kind.is_text_like


def is_empty_text(node: Any) -> bool:
    """Return True if *node* is a zero-length text node.

    CDATA sections never count as empty text, and whitespace such as a lone
    newline is content like any other.
    """
    view = _view(node)
    if view is None:
        return False
    return view.kind is NodeKind.TEXT and len(view.value or "") == 0


def is_namespace_attribute(node: Any) -> bool:
    """Return True if *node* is a namespace declaration (``xmlns``/``xmlns:p``)."""
    view = _view(node)
    if view is None:
        return False
    if view.namespace_uri is not None:
        return view.namespace_uri == XMLNS_NAMESPACE or view.local_name == "xmlns"
    # Tree built without namespace awareness
    return view.name == "xmlns"


def local_name(node: Any) -> Optional[str]:
    """Return the local name of *node*, falling back to its qualified name."""
    view = _view(node)
    if view is None:
        return None
    return view.local_name or view.name
