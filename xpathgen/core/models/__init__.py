from __future__ import annotations

"""Value objects shared across the xpathgen core.

Free of provider-specific code so the same objects are used whichever tree
implementation (xml.dom, lxml) the caller hands in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["NodeKind", "SiblingIndex", "TextLocation"]


class NodeKind(Enum):
    """Node kinds the path rules distinguish between."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    TEXT = "text"
    CDATA = "cdata"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing-instruction"
    DOCUMENT = "document"
    DOCUMENT_TYPE = "document-type"

    @property
    def is_text_like(self) -> bool:
        return self in (NodeKind.TEXT, NodeKind.CDATA)


@dataclass(frozen=True)
class SiblingIndex:
    """XPath position of one node among its siblings.

    Attributes
    ----------
    child_number
        1-based index under ``node()`` addressing, counted over the logical
        (coalesced) sibling list.
    char_offset
        1-based position of the node's own content inside the merged text
        run addressed by *child_number*. ``None`` for nodes that are not
        text-like.
    """

    child_number: int
    char_offset: Optional[int] = None


@dataclass(frozen=True)
class TextLocation:
    """Where a text or CDATA node's content lives in the XPath data model."""

    path: str
    char_offset: int
