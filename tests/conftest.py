"""Shared fixtures for the xpathgen test-suite.

Trees are built with ``xml.dom.minidom`` (keeps adjacent text nodes, empty
text and DOCTYPE nodes as separate children) and ``lxml`` (used as the
standards-compliant XPath evaluator for round-trip checks).
"""

import logging
import sys
from pathlib import Path
from typing import Iterator, List
from xml.dom import Node, minidom

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lxml import etree as ET

from xpathgen.config import ConfigManager
from xpathgen.core.adapters import LxmlAttributeView, NodeView, adapt
from xpathgen.core.classifier import is_namespace_attribute, is_text
from xpathgen.core.models import NodeKind
from xpathgen.core.path_builder import get_path, get_text_location
from xpathgen.core.resolver import resolve_path

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

USAGE_XML = "<a>aa<b attr='test'>b<!-- comment -->c<c/></b>d</a>"


def parse_dom(xml: str) -> minidom.Document:
    return minidom.parseString(xml)


def parse_lxml(xml: str) -> ET._ElementTree:
    return ET.fromstring(xml.encode("utf-8")).getroottree()


def dom_to_lxml(doc: minidom.Document) -> ET._ElementTree:
    """Serialise a DOM and re-parse it, coalescing text the way XPath sees it."""
    return ET.fromstring(doc.toxml(encoding="utf-8")).getroottree()


def iter_dom_nodes(node: Node) -> Iterator[Node]:
    """Yield *node*, its attributes and all descendants in document order."""
    yield node
    if node.nodeType == Node.ELEMENT_NODE:
        for attr in node.attributes.values():
            yield attr
    for child in node.childNodes:
        yield from iter_dom_nodes(child)


def iter_views(view: NodeView) -> Iterator[NodeView]:
    """Yield *view*, its attributes (lxml) and all descendant views."""
    yield view
    if view.kind is NodeKind.ELEMENT and isinstance(view.raw, ET._Element):
        for key in view.raw.attrib.keys():
            yield LxmlAttributeView(view.raw, key)
    for child in view.children:
        yield from iter_views(child)


def assert_dom_round_trip(node: Node, lxml_tree: ET._ElementTree) -> str:
    """Compute the path of a DOM *node* and check lxml selects the same node.

    For text-like nodes the selected text node must contain the node's own
    content at the reported char offset.
    """
    path = get_path(node)
    found = resolve_path(lxml_tree, path)
    view = adapt(node)

    if is_text(node):
        location = get_text_location(node)
        assert location.path == path
        start = location.char_offset - 1
        content = view.value
        merged = found.value or ""
        assert merged[start:start + len(content)] == content, (
            f"{merged!r} does not contain {content!r} at {location.char_offset}"
        )
    elif view.kind is NodeKind.DOCUMENT:
        assert found.kind is NodeKind.DOCUMENT
    else:
        assert found.kind is view.kind, f"{path}: {found!r} is not {view!r}"
        if view.kind is NodeKind.ELEMENT or view.kind is NodeKind.ATTRIBUTE:
            assert found.local_name == (view.local_name or view.name)
        if view.kind is not NodeKind.ELEMENT:
            assert (found.value or "") == (view.value or "")
    return path


@pytest.fixture
def usage_dom() -> minidom.Document:
    return parse_dom(USAGE_XML)


@pytest.fixture
def usage_lxml() -> ET._ElementTree:
    return parse_lxml(USAGE_XML)


@pytest.fixture
def parent_dom():
    """Empty ``<parent/>`` document element to append hand-built children to."""
    doc = minidom.Document()
    parent = doc.createElement("parent")
    doc.appendChild(parent)
    return doc, parent


@pytest.fixture
def dom_round_trip():
    """Check every addressable node of a DOM document round-trips via lxml."""
    def _check(doc: minidom.Document) -> List[str]:
        tree = dom_to_lxml(doc)
        paths = []
        for node in iter_dom_nodes(doc):
            if node.nodeType == Node.DOCUMENT_TYPE_NODE or is_namespace_attribute(node):
                continue
            if node.nodeType == Node.TEXT_NODE and node.data == "":
                continue
            paths.append(assert_dom_round_trip(node, tree))
        return paths
    return _check


@pytest.fixture(autouse=True)
def reset_singletons(tmp_path, monkeypatch):
    """Isolate ConfigManager from the real home directory between tests."""
    monkeypatch.setenv("XPATHGEN_CONFIG_DIR", str(tmp_path / "user-config"))
    ConfigManager.reset()
    yield
    ConfigManager.reset()
