from __future__ import annotations

"""Unique positional XPath generation.

Paths use the generic ``node()`` test at every level, so a single rule
covers elements, text, comments and processing instructions alike::

    <a>aa<b attr="test">b<!--comment-->c<c/></b>d</a>

    "aa"          /node()[1]/node()[1]
    <b>           /node()[1]/node()[2]
    @attr         /node()[1]/node()[2]/@attr
    <!--comment-->/node()[1]/node()[2]/node()[2]

For text nodes the path may select a larger, coalesced text node; use
:func:`get_text_location` to also obtain the character offset.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from xpathgen.config import ConfigManager
from xpathgen.core.adapters import NodeView, adapt
from xpathgen.core.exceptions import (
    DetachedNodeError,
    InvalidArgumentError,
    UnaddressableNodeError,
)
from xpathgen.core.models import NodeKind, TextLocation
from xpathgen.core.sibling_locator import SiblingLocator

__all__ = [
    "PathBuilder",
    "get_path",
    "get_text_location",
]

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


class PathBuilder:
    """Builds ``/node()[i]/...`` paths, dispatching on node kind.

    Parameters
    ----------
    locator
        Sibling locator to use. Defaults to a memoizing one, so a builder
        must not be reused across tree mutations; see
        :class:`~xpathgen.core.sibling_locator.SiblingLocator`.
    """

    def __init__(self, locator: Optional[SiblingLocator] = None) -> None:
        self._locator = locator if locator is not None else SiblingLocator()
        self._rules: Dict[NodeKind, Callable[[NodeView], str]] = {
            NodeKind.ATTRIBUTE: self._attribute_path,
            NodeKind.DOCUMENT: self._document_path,
            NodeKind.DOCUMENT_TYPE: self._doctype_path,
            NodeKind.ELEMENT: self._child_path,
            NodeKind.TEXT: self._child_path,
            NodeKind.CDATA: self._child_path,
            NodeKind.COMMENT: self._child_path,
            NodeKind.PROCESSING_INSTRUCTION: self._child_path,
        }

    @classmethod
    def from_config(cls, config: Optional[ConfigManager] = None) -> "PathBuilder":
        """Create a builder using the ``locator`` section of the configuration."""
        options = (config or ConfigManager()).get_locator_options()
        return cls(SiblingLocator(memoize=bool(options.get("memoize", True))))

    @property
    def locator(self) -> SiblingLocator:
        return self._locator

    @property
    def handled_kinds(self) -> frozenset:
        return frozenset(self._rules)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_path(self, node: Any) -> str:
        """Return the XPath that uniquely selects *node*.

        Raises
        ------
        InvalidArgumentError
            *node* is ``None``, unsupported, or lacks a parent.
        UnaddressableNodeError
            *node* is a document-type node.
        DetachedNodeError
            *node* is an attribute without an owner element.
        """
        view = adapt(node)
        path = self._rules[view.kind](view)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Path computed: node=%r path=%s", view, path)
        return path

    def get_text_location(self, node: Any) -> TextLocation:
        """Return the path of the text node containing *node* and the offset
        at which *node*'s own content starts.
        """
        view = adapt(node)
        if not view.kind.is_text_like:
            raise InvalidArgumentError(
                f"Text location requested for {view.kind.value} node", node=node
            )
        path = self.get_path(view)
        char_offset = self._locator.char_offset(view)
        return TextLocation(path, char_offset if char_offset is not None else 1)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def _attribute_path(self, view: NodeView) -> str:
        owner = view.owner_element
        if owner is None:
            raise DetachedNodeError(f"Attribute '{view.name}' has no owner element", node=view.raw)
        return f"{self.get_path(owner)}/@{view.name}"

    def _document_path(self, view: NodeView) -> str:
        return ROOT_PATH

    def _doctype_path(self, view: NodeView) -> str:
        raise UnaddressableNodeError(
            "DocumentType nodes cannot be identified with XPath", node=view.raw
        )

    def _child_path(self, view: NodeView) -> str:
        steps: List[str] = []
        current = view
        while True:
            parent = current.parent
            if parent is None:
                raise InvalidArgumentError("Node must have parent", node=current.raw)
            steps.append(f"node()[{self._locator.child_number(current)}]")
            if parent.kind is NodeKind.DOCUMENT:
                break
            current = parent
        return "/" + "/".join(reversed(steps))


def get_path(node: Any) -> str:
    """Return the unique XPath of *node* using a fresh, non-memoizing builder."""
    return PathBuilder(SiblingLocator(memoize=False)).get_path(node)


def get_text_location(node: Any) -> TextLocation:
    """Return :class:`TextLocation` of a text or CDATA *node*."""
    return PathBuilder(SiblingLocator(memoize=False)).get_text_location(node)
