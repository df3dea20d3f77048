from __future__ import annotations

"""Adapter for W3C DOM trees (``xml.dom.minidom`` and compatible).

DOM keeps adjacent text and CDATA nodes, zero-length text nodes and the
DOCTYPE as separate children, so these trees exercise every coalescing rule
of the sibling locator.
"""

from typing import Hashable, Optional, Tuple
from xml.dom import Node

from xpathgen.core.adapters.base import NodeView
from xpathgen.core.exceptions import InvalidArgumentError
from xpathgen.core.models import NodeKind

__all__ = ["DomNodeView", "is_dom_node"]

_KIND_BY_NODE_TYPE = {
    Node.ELEMENT_NODE: NodeKind.ELEMENT,
    Node.ATTRIBUTE_NODE: NodeKind.ATTRIBUTE,
    Node.TEXT_NODE: NodeKind.TEXT,
    Node.CDATA_SECTION_NODE: NodeKind.CDATA,
    Node.COMMENT_NODE: NodeKind.COMMENT,
    Node.PROCESSING_INSTRUCTION_NODE: NodeKind.PROCESSING_INSTRUCTION,
    Node.DOCUMENT_NODE: NodeKind.DOCUMENT,
    Node.DOCUMENT_TYPE_NODE: NodeKind.DOCUMENT_TYPE,
}


def is_dom_node(obj: object) -> bool:
    return isinstance(obj, Node)


class DomNodeView(NodeView):
    """View over one ``xml.dom.Node``."""

    __slots__ = ("_node", "_kind")

    def __init__(self, node: Node) -> None:
        kind = _KIND_BY_NODE_TYPE.get(node.nodeType)
        if kind is None:
            raise InvalidArgumentError(
                f"Unsupported DOM node type {node.nodeType} ({node.nodeName})", node=node
            )
        self._node = node
        self._kind = kind

    @property
    def identity(self) -> Hashable:
        return id(self._node)

    @property
    def raw(self) -> Node:
        return self._node

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._node.nodeName

    @property
    def local_name(self) -> Optional[str]:
        return self._node.localName

    @property
    def namespace_uri(self) -> Optional[str]:
        return self._node.namespaceURI

    @property
    def value(self) -> Optional[str]:
        return self._node.nodeValue

    @property
    def parent(self) -> Optional[NodeView]:
        parent = self._node.parentNode
        return DomNodeView(parent) if parent is not None else None

    @property
    def owner_element(self) -> Optional[NodeView]:
        if self._kind is not NodeKind.ATTRIBUTE:
            return None
        owner = self._node.ownerElement
        return DomNodeView(owner) if owner is not None else None

    @property
    def children(self) -> Tuple[NodeView, ...]:
        if self._kind is NodeKind.ATTRIBUTE:
            # Attr children hold the value text, they are not tree children
            return ()
        return tuple(DomNodeView(child) for child in self._node.childNodes)
