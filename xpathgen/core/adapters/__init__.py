"""Tree provider adapters.

:func:`adapt` turns whatever the caller holds (a DOM node, an lxml element,
tree or XPath string result, or an existing :class:`NodeView`) into a view.
"""

from typing import Any

from xpathgen.core.adapters.base import NodeView
from xpathgen.core.adapters.dom import DomNodeView, is_dom_node
from xpathgen.core.adapters.lxml_tree import (
    LxmlAttributeView,
    LxmlDocTypeView,
    LxmlDocumentView,
    LxmlElementView,
    LxmlTextView,
    adapt_lxml,
    is_lxml_object,
)
from xpathgen.core.exceptions import InvalidArgumentError

__all__ = [
    "DomNodeView",
    "LxmlAttributeView",
    "LxmlDocTypeView",
    "LxmlDocumentView",
    "LxmlElementView",
    "LxmlTextView",
    "NodeView",
    "adapt",
]


def adapt(obj: Any) -> NodeView:
    """Return a :class:`NodeView` for *obj*.

    Raises :class:`InvalidArgumentError` for ``None`` and for objects no
    adapter recognises.
    """
    if obj is None:
        raise InvalidArgumentError("Node cannot be None")
    if isinstance(obj, NodeView):
        return obj
    if is_dom_node(obj):
        return DomNodeView(obj)
    if is_lxml_object(obj):
        return adapt_lxml(obj)
    raise InvalidArgumentError(f"Unsupported node object: {type(obj).__name__}", node=obj)
