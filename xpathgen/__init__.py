"""Top-level package for xpathgen.

Computes a unique, purely positional XPath (``/node()[i]/...``) for any
addressable node of a parsed XML tree. Front-ends should depend on the names
re-exported here rather than importing internal modules directly.
"""

from .core import (  # re-export for convenience
    DetachedNodeError,
    InvalidArgumentError,
    NodeKind,
    NodeNotFoundError,
    NodePathError,
    PathBuilder,
    SiblingIndex,
    SiblingLocator,
    TextLocation,
    UnaddressableNodeError,
    get_path,
    get_text_location,
    is_empty_text,
    is_namespace_attribute,
    is_text,
    local_name,
    resolve_path,
)

__all__: list[str] = [
    "DetachedNodeError",
    "InvalidArgumentError",
    "NodeKind",
    "NodeNotFoundError",
    "NodePathError",
    "PathBuilder",
    "SiblingIndex",
    "SiblingLocator",
    "TextLocation",
    "UnaddressableNodeError",
    "get_path",
    "get_text_location",
    "is_empty_text",
    "is_namespace_attribute",
    "is_text",
    "local_name",
    "resolve_path",
]
