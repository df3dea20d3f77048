"""Path computation core: node views, sibling indexing and path building.

Nothing in this package performs I/O or parsing; it reads trees built by an
external provider (``xml.dom.minidom`` or ``lxml``).
"""

from .classifier import (
    XMLNS_NAMESPACE,
    is_empty_text,
    is_namespace_attribute,
    is_text,
    local_name,
)
from .exceptions import (
    DetachedNodeError,
    InvalidArgumentError,
    NodeNotFoundError,
    NodePathError,
    UnaddressableNodeError,
)
from .models import NodeKind, SiblingIndex, TextLocation
from .path_builder import PathBuilder, get_path, get_text_location
from .resolver import is_valid_path, resolve_path
from .sibling_locator import SiblingLocator, SiblingSnapshot, compute_sibling_index

__all__ = [
    "DetachedNodeError",
    "InvalidArgumentError",
    "NodeKind",
    "NodeNotFoundError",
    "NodePathError",
    "PathBuilder",
    "SiblingIndex",
    "SiblingLocator",
    "SiblingSnapshot",
    "TextLocation",
    "UnaddressableNodeError",
    "XMLNS_NAMESPACE",
    "compute_sibling_index",
    "get_path",
    "get_text_location",
    "is_empty_text",
    "is_namespace_attribute",
    "is_text",
    "is_valid_path",
    "local_name",
    "resolve_path",
]
