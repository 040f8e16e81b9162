"""
burrito - Wrap errors with context

Basic usage:
    >>> from burrito import new_leaf, wrap
    >>> err = wrap(wrap(new_leaf("root cause"), "step two"), "step one")
    >>> print(err)
    step one
    [+]: step two
    [+]: root cause

Grouping errors raised during cleanup:
    >>> from burrito import group
    >>> err = group(main_error, cleanup_error)

Stack traces:
    >>> from burrito import set_stack_trace
    >>> set_stack_trace(True)
"""

__version__ = "0.2.0"

from .errors import (
    CallSite,
    ErrorNode,
    ErrorGroup,
    new_leaf,
    new_leaf_formatted,
    wrap,
    wrap_formatted,
    pass_error,
    group,
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

from .rendering import render

from .bootstrap import (
    BurritoConfig,
    ConfigError,
    load_config,
    get_config,
    set_config,
    reset_config,
    set_stack_trace,
    config_override,
)

__all__ = [
    "__version__",
    # Errors
    "CallSite",
    "ErrorNode",
    "ErrorGroup",
    "new_leaf",
    "new_leaf_formatted",
    "wrap",
    "wrap_formatted",
    "pass_error",
    "group",
    # Queries
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
    # Rendering
    "render",
    # Configuration
    "BurritoConfig",
    "ConfigError",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "set_stack_trace",
    "config_override",
]
