from __future__ import annotations

"""Adapter for ``lxml`` trees.

lxml folds character data into ``.text`` and ``.tail`` strings and keeps
attributes in a mapping, so this module exposes them as *virtual* nodes:

* :class:`LxmlTextView` for a non-empty ``.text`` (inside an element) or
  ``.tail`` (after a sibling); each is already one coalesced text run.
* :class:`LxmlAttributeView` for one attribute of an element.
* :class:`LxmlDocumentView` for the ``_ElementTree``; its children are the
  top-level comments and PIs, the DOCTYPE (when present) and the root.

Identity is anchored on the owning ``_Element`` proxies, which lxml keeps
stable while referenced.
"""

from typing import Hashable, List, Optional, Tuple, Union

from lxml import etree as ET  # type: ignore

from xpathgen.core.adapters.base import NodeView
from xpathgen.core.exceptions import InvalidArgumentError
from xpathgen.core.models import NodeKind

__all__ = [
    "LxmlAttributeView",
    "LxmlDocTypeView",
    "LxmlDocumentView",
    "LxmlElementView",
    "LxmlTextView",
    "adapt_lxml",
    "is_lxml_object",
]

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def is_lxml_object(obj: object) -> bool:
    return isinstance(obj, (ET._Element, ET._ElementTree, ET._ElementUnicodeResult))


def adapt_lxml(obj: Union[ET._Element, ET._ElementTree, ET._ElementUnicodeResult]) -> NodeView:
    """Wrap an lxml element, tree, or XPath smart-string result."""
    if isinstance(obj, ET._ElementTree):
        return LxmlDocumentView(obj)
    if isinstance(obj, ET._Element):
        return LxmlElementView(obj)
    if isinstance(obj, ET._ElementUnicodeResult):
        owner = obj.getparent()
        if owner is None:
            raise InvalidArgumentError("XPath string result is not attached to a node", node=obj)
        if obj.is_attribute:
            return LxmlAttributeView(owner, obj.attrname)
        if obj.is_text or obj.is_tail:
            return LxmlTextView(owner, is_tail=bool(obj.is_tail))
        raise InvalidArgumentError("XPath string result is neither text nor attribute", node=obj)
    raise InvalidArgumentError(f"Not an lxml node: {type(obj).__name__}", node=obj)


def _qualified_name(element: ET._Element, clark_name: str) -> str:
    """Return ``prefix:local`` for a ``{ns}local`` name, using in-scope prefixes."""
    qname = ET.QName(clark_name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in (element.nsmap or {}).items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _parent_of_element(element: ET._Element) -> NodeView:
    parent = element.getparent()
    if parent is not None:
        return LxmlElementView(parent)
    return LxmlDocumentView(element.getroottree())


class LxmlElementView(NodeView):
    """Element, comment or processing instruction."""

    __slots__ = ("_el",)

    def __init__(self, element: ET._Element) -> None:
        if isinstance(element, ET._Entity):
            raise InvalidArgumentError("Entity references are not supported", node=element)
        self._el = element

    @property
    def identity(self) -> Hashable:
        return id(self._el)

    @property
    def raw(self) -> ET._Element:
        return self._el

    @property
    def kind(self) -> NodeKind:
        if isinstance(self._el, ET._Comment):
            return NodeKind.COMMENT
        if isinstance(self._el, ET._ProcessingInstruction):
            return NodeKind.PROCESSING_INSTRUCTION
        return NodeKind.ELEMENT

    @property
    def name(self) -> str:
        kind = self.kind
        if kind is NodeKind.COMMENT:
            return "#comment"
        if kind is NodeKind.PROCESSING_INSTRUCTION:
            return self._el.target
        local = ET.QName(self._el).localname
        return f"{self._el.prefix}:{local}" if self._el.prefix else local

    @property
    def local_name(self) -> Optional[str]:
        if self.kind is not NodeKind.ELEMENT:
            return None
        return ET.QName(self._el).localname

    @property
    def namespace_uri(self) -> Optional[str]:
        if self.kind is not NodeKind.ELEMENT:
            return None
        return ET.QName(self._el).namespace

    @property
    def value(self) -> Optional[str]:
        if self.kind is NodeKind.ELEMENT:
            return None
        return self._el.text or ""

    @property
    def parent(self) -> Optional[NodeView]:
        return _parent_of_element(self._el)

    @property
    def children(self) -> Tuple[NodeView, ...]:
        if self.kind is not NodeKind.ELEMENT:
            return ()
        out: List[NodeView] = []
        if self._el.text:
            out.append(LxmlTextView(self._el, is_tail=False))
        for child in self._el:
            out.append(LxmlElementView(child))
            if child.tail:
                out.append(LxmlTextView(child, is_tail=True))
        return tuple(out)

    def attribute(self, name: str) -> "LxmlAttributeView":
        """Return the view of attribute *name* (Clark notation for namespaced names)."""
        if name not in self._el.attrib:
            raise InvalidArgumentError(f"Element has no attribute '{name}'", node=self._el)
        return LxmlAttributeView(self._el, name)


class LxmlTextView(NodeView):
    """The ``.text`` of *anchor* (``is_tail=False``) or its ``.tail``."""

    __slots__ = ("_anchor", "_is_tail")

    def __init__(self, anchor: ET._Element, is_tail: bool) -> None:
        self._anchor = anchor
        self._is_tail = is_tail

    @property
    def identity(self) -> Hashable:
        return (id(self._anchor), self._is_tail)

    @property
    def raw(self) -> ET._Element:
        return self._anchor

    @property
    def is_tail(self) -> bool:
        return self._is_tail

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT

    @property
    def name(self) -> str:
        return "#text"

    @property
    def value(self) -> Optional[str]:
        text = self._anchor.tail if self._is_tail else self._anchor.text
        return text or ""

    @property
    def parent(self) -> Optional[NodeView]:
        if self._is_tail:
            return _parent_of_element(self._anchor)
        return LxmlElementView(self._anchor)


class LxmlAttributeView(NodeView):
    """One attribute of *element*; *key* is the attribute's Clark name."""

    __slots__ = ("_el", "_key")

    def __init__(self, element: Optional[ET._Element], key: str) -> None:
        self._el = element
        self._key = key

    @property
    def identity(self) -> Hashable:
        return (id(self._el), self._key)

    @property
    def raw(self) -> Optional[ET._Element]:
        return self._el

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ATTRIBUTE

    @property
    def name(self) -> str:
        if self._el is None:
            return ET.QName(self._key).localname
        return _qualified_name(self._el, self._key)

    @property
    def local_name(self) -> Optional[str]:
        return ET.QName(self._key).localname

    @property
    def namespace_uri(self) -> Optional[str]:
        return ET.QName(self._key).namespace

    @property
    def value(self) -> Optional[str]:
        if self._el is None:
            return None
        return self._el.get(self._key)

    @property
    def parent(self) -> Optional[NodeView]:
        return None

    @property
    def owner_element(self) -> Optional[NodeView]:
        return LxmlElementView(self._el) if self._el is not None else None


class LxmlDocTypeView(NodeView):
    """The DOCTYPE declaration recorded in a tree's ``docinfo``."""

    __slots__ = ("_tree", "_root")

    def __init__(self, tree: ET._ElementTree) -> None:
        self._tree = tree
        self._root = tree.getroot()

    @property
    def identity(self) -> Hashable:
        return id(self._root)

    @property
    def raw(self) -> ET._ElementTree:
        return self._tree

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DOCUMENT_TYPE

    @property
    def name(self) -> str:
        return self._tree.docinfo.root_name or ""

    @property
    def value(self) -> Optional[str]:
        return self._tree.docinfo.doctype

    @property
    def parent(self) -> Optional[NodeView]:
        return LxmlDocumentView(self._tree)


class LxmlDocumentView(NodeView):
    """The document node of an ``_ElementTree``.

    Holds the root proxy so that views of the same document compare equal
    however the tree object was obtained.
    """

    __slots__ = ("_tree", "_root")

    def __init__(self, tree: ET._ElementTree) -> None:
        self._tree = tree
        self._root = tree.getroot()

    @property
    def identity(self) -> Hashable:
        return id(self._root)

    @property
    def raw(self) -> ET._ElementTree:
        return self._tree

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DOCUMENT

    @property
    def name(self) -> str:
        return "#document"

    @property
    def parent(self) -> Optional[NodeView]:
        return None

    @property
    def children(self) -> Tuple[NodeView, ...]:
        root = self._root
        if root is None:
            return ()
        out: List[NodeView] = []
        if self._tree.docinfo.doctype:
            out.append(LxmlDocTypeView(self._tree))
        out.extend(LxmlElementView(el) for el in reversed(list(root.itersiblings(preceding=True))))
        out.append(LxmlElementView(root))
        out.extend(LxmlElementView(el) for el in root.itersiblings())
        return tuple(out)
