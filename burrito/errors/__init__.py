"""
errors/ - Wrapped errors, error groups and chain queries
"""

from .node import (
    CallSite,
    ErrorNode,
    capture_site,
    new_leaf,
    new_leaf_formatted,
    wrap,
    wrap_formatted,
    pass_error,
)

from .group import (
    ErrorGroup,
    group,
)

from .walker import (
    is_error_node,
    as_error_node,
    iter_chain,
    walk,
    root_cause,
    has_tag,
    get_tags,
    get_property,
    has_property,
    get_all_messages,
)

__all__ = [
    # Nodes
    "CallSite",
    "ErrorNode",
    "capture_site",
    "new_leaf",
    "new_leaf_formatted",
    "wrap",
    "wrap_formatted",
    "pass_error",
    # Groups
    "ErrorGroup",
    "group",
    # Walker
    "is_error_node",
    "as_error_node",
    "iter_chain",
    "walk",
    "root_cause",
    "has_tag",
    "get_tags",
    "get_property",
    "has_property",
    "get_all_messages",
]
