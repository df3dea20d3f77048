from __future__ import annotations

"""Read-only tree interface consumed by the path algorithms.

A :class:`NodeView` wraps exactly one node of an externally-owned tree. The
core only ever reads through views; it never mutates the tree and never
keeps a view beyond the call (or locator) that created it.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional, Tuple

from xpathgen.core.models import NodeKind

__all__ = ["NodeView"]


class NodeView(ABC):
    """Provider-neutral view of a single XML node.

    Two views are equal, and hash equally, when they wrap the same underlying
    node. Subclasses define identity through :attr:`identity`.
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def identity(self) -> Hashable:
        """Key that is equal for two views of the same node."""

    @property
    @abstractmethod
    def raw(self) -> Any:
        """The provider object this view wraps."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeView):
            return NotImplemented
        return type(self) is type(other) and self.identity == other.identity

    def __hash__(self) -> int:
        return hash((type(self), self.identity))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind.value} {self.name!r}>"

    # ------------------------------------------------------------------
    # Node properties
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Qualified name (``prefix:local`` where a prefix is in use)."""

    @property
    def local_name(self) -> Optional[str]:
        """Namespace-local name, ``None`` when the tree lacks namespace info."""
        return None

    @property
    def namespace_uri(self) -> Optional[str]:
        return None

    @property
    def value(self) -> Optional[str]:
        """Textual content of text-like, comment, PI and attribute nodes."""
        return None

    @property
    @abstractmethod
    def parent(self) -> Optional["NodeView"]:
        """Containing node, ``None`` for documents and detached nodes.

        Attributes have no parent; see :attr:`owner_element`.
        """

    @property
    def owner_element(self) -> Optional["NodeView"]:
        return None

    @property
    def children(self) -> Tuple["NodeView", ...]:
        """Children in document order, as physically stored by the provider."""
        return ()
