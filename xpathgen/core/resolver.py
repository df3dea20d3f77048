from __future__ import annotations

"""Validate generated paths and evaluate them against lxml documents.

Diff/patch consumers store paths produced by
:func:`xpathgen.core.path_builder.get_path` and later need the node back.
Evaluation is delegated to lxml's XPath engine, so the result is exactly
what any standards-compliant evaluator would return.
"""

import logging
import re
from typing import Any, Optional, Union

from lxml import etree as ET  # type: ignore

from xpathgen.core.adapters import LxmlAttributeView, LxmlDocumentView, NodeView, adapt
from xpathgen.core.adapters.lxml_tree import XML_NAMESPACE
from xpathgen.core.exceptions import InvalidArgumentError, NodeNotFoundError

__all__ = [
    "PATH_PATTERN",
    "is_valid_path",
    "resolve_path",
]

logger = logging.getLogger(__name__)

_STEP = r"(?:node\(\)\[[1-9][0-9]*\]|@[^\s/\[\]@()]+)"
PATH_PATTERN = re.compile(rf"^(?:/|(?:/{_STEP})+)$")


def is_valid_path(path: Any) -> bool:
    """Return True if *path* matches the generated-path grammar.

    ``Path := "/" | "/" Step ("/" Step)*`` with
    ``Step := "node()[" Integer "]" | "@" Name``.
    """
    return isinstance(path, str) and PATH_PATTERN.match(path) is not None


def _attribute_key(element: ET._Element, name: str) -> Optional[str]:
    """Return the Clark name for ``@name`` using prefixes in scope on *element*."""
    prefix, sep, local = name.rpartition(":")
    if not sep:
        return name
    uri = XML_NAMESPACE if prefix == "xml" else (element.nsmap or {}).get(prefix)
    if uri is None:
        return None
    return f"{{{uri}}}{local}"


def _resolve_attribute(tree: ET._ElementTree, path: str, element_path: str, name: str) -> NodeView:
    # Prefixes are bound per element: locate the owner, then use its nsmap
    if not element_path or "/@" in element_path:
        raise NodeNotFoundError(path)
    try:
        owners = tree.xpath(element_path)
    except ET.XPathEvalError as exc:
        raise NodeNotFoundError(path, cause=exc) from exc
    if not owners or not isinstance(owners[0], ET._Element) or not isinstance(owners[0].tag, str):
        raise NodeNotFoundError(path)
    owner = owners[0]
    key = _attribute_key(owner, name)
    if key is None or key not in owner.attrib:
        raise NodeNotFoundError(path)
    return LxmlAttributeView(owner, key)


def resolve_path(document: Union[ET._ElementTree, ET._Element], path: str) -> NodeView:
    """Evaluate *path* against the lxml *document* and return the selected node.

    *document* may be the tree or any element of it; generated paths are
    absolute. Text results come back as the view of the coalesced text run.

    Raises :class:`InvalidArgumentError` for a path outside the grammar and
    :class:`NodeNotFoundError` when nothing is selected.
    """
    if not is_valid_path(path):
        raise InvalidArgumentError(f"Malformed path: {path!r}")
    if document is None:
        raise InvalidArgumentError("Document cannot be None")

    tree = document if isinstance(document, ET._ElementTree) else document.getroottree()
    if path == "/":
        return LxmlDocumentView(tree)

    element_path, sep, name = path.rpartition("/@")
    if sep:
        return _resolve_attribute(tree, path, element_path, name)

    try:
        result = tree.xpath(path)
    except ET.XPathEvalError as exc:
        raise NodeNotFoundError(path, cause=exc) from exc

    if not result:
        raise NodeNotFoundError(path)
    if len(result) > 1:
        # Cannot happen for node()[n] steps; guard against hand-written input
        logger.warning("Path %s selected %d nodes, using the first", path, len(result))
    return adapt(result[0])
