from __future__ import annotations

"""XPath ``node()`` sibling indexing.

A DOM child list and the XPath data model disagree on what a "child" is:

* adjacent text and CDATA siblings form one XPath text node,
* zero-length text nodes do not exist in XPath,
* the DOCTYPE is not a node XPath can select.

This module reconciles the two. Index arithmetic runs on a
:class:`SiblingSnapshot`, an immutable capture of the parent's child list
taken when the index is requested. A snapshot never observes later tree
mutations; results computed before a mutation are stale afterwards and it
is the caller's job not to interleave queries with mutation.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from xpathgen.core.adapters import NodeView, adapt
from xpathgen.core.exceptions import InvalidArgumentError
from xpathgen.core.models import NodeKind, SiblingIndex

__all__ = [
    "SiblingEntry",
    "SiblingLocator",
    "SiblingSnapshot",
    "compute_sibling_index",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiblingEntry:
    """What the index arithmetic needs to know about one sibling."""

    kind: NodeKind
    length: int = 0

    @property
    def is_text(self) -> bool:
        return self.kind.is_text_like

    @property
    def is_empty_text(self) -> bool:
        return self.kind is NodeKind.TEXT and self.length == 0


@dataclass(frozen=True)
class SiblingSnapshot:
    """Immutable copy of a parent's child list plus the target's position.

    Attributes
    ----------
    entries
        One :class:`SiblingEntry` per physical child, in document order.
    position
        0-based physical position of the target node in *entries*.
    """

    entries: Tuple[SiblingEntry, ...]
    position: int

    def __post_init__(self) -> None:
        if not 0 <= self.position < len(self.entries):
            raise InvalidArgumentError(
                f"Position {self.position} outside sibling list of length {len(self.entries)}"
            )

    @classmethod
    def capture(cls, node: Any) -> "SiblingSnapshot":
        """Snapshot the siblings of *node*.

        Raises :class:`InvalidArgumentError` if *node* is ``None``, has no
        parent, or is not among its parent's children.
        """
        view = adapt(node)
        parent = view.parent
        if parent is None:
            raise InvalidArgumentError("Node must have parent", node=node)

        entries = []
        position = -1
        for i, sibling in enumerate(parent.children):
            if position < 0 and sibling == view:
                position = i
            length = len(sibling.value or "") if sibling.kind.is_text_like else 0
            entries.append(SiblingEntry(sibling.kind, length))

        if position < 0:
            raise InvalidArgumentError("Node is not among its parent's children", node=node)
        return cls(tuple(entries), position)

    def is_countable(self, i: int) -> bool:
        """Return True if the sibling at *i* starts a new XPath child.

        Not countable: a text-like node continuing a coalesced run, an empty
        text node, a DOCTYPE. Continuation is judged against the nearest
        preceding sibling that is not empty text.
        """
        current = self.entries[i]
        if current.is_empty_text:
            return False
        if current.kind is NodeKind.DOCUMENT_TYPE:
            return False
        if current.is_text:
            previous = self._previous_visible(i)
            if previous is not None and previous.is_text:
                return False
        return True

    def _previous_visible(self, i: int) -> Optional[SiblingEntry]:
        for j in range(i - 1, -1, -1):
            if not self.entries[j].is_empty_text:
                return self.entries[j]
        return None


def _child_number(snapshot: SiblingSnapshot) -> int:
    child_number = 1
    for i in range(snapshot.position):
        if snapshot.is_countable(i):
            child_number += 1
    # A non-countable target shares the number of the run that absorbs it
    if not snapshot.is_countable(snapshot.position):
        child_number -= 1
    return child_number


def _char_offset(snapshot: SiblingSnapshot) -> Optional[int]:
    if not snapshot.entries[snapshot.position].is_text:
        return None
    offset = 1
    for i in range(snapshot.position - 1, -1, -1):
        entry = snapshot.entries[i]
        if not entry.is_text:
            break
        offset += entry.length
    return offset


def compute_sibling_index(snapshot: SiblingSnapshot) -> SiblingIndex:
    """Compute the XPath child number and char offset for a snapshot's target.

    For a zero-length text node with no countable sibling before it the
    returned child number does not address anything (it may be 0); such
    nodes are not separately addressable in XPath.
    """
    return SiblingIndex(_child_number(snapshot), _char_offset(snapshot))


class SiblingLocator:
    """Computes :class:`SiblingIndex` values, optionally memoized per node.

    With *memoize* enabled an index is computed once per node for the
    lifetime of the locator. Create a new locator (or call :meth:`clear`)
    after mutating the tree.
    """

    def __init__(self, memoize: bool = True) -> None:
        self._memoize = memoize
        self._cache: Dict[NodeView, SiblingIndex] = {}

    @property
    def memoize(self) -> bool:
        return self._memoize

    def index(self, node: Any) -> SiblingIndex:
        """Return the sibling index of *node*.

        Raises :class:`InvalidArgumentError` if *node* is ``None`` or has no
        parent.
        """
        view = adapt(node)
        if self._memoize:
            cached = self._cache.get(view)
            if cached is not None:
                return cached

        snapshot = SiblingSnapshot.capture(view)
        result = compute_sibling_index(snapshot)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Sibling index: node=%r position=%d siblings=%d child_number=%d char_offset=%s",
                view, snapshot.position, len(snapshot.entries),
                result.child_number, result.char_offset,
            )

        if self._memoize:
            self._cache[view] = result
        return result

    def child_number(self, node: Any) -> int:
        return self.index(node).child_number

    def char_offset(self, node: Any) -> Optional[int]:
        return self.index(node).char_offset

    def clear(self) -> None:
        """Forget all memoized indices."""
        self._cache.clear()
