"""
rendering/ - Text output for error chains and groups
"""

from .renderer import (
    OUTER_CONTINUATION,
    NESTED_CONTINUATION,
    render,
    render_node,
    render_group,
)
from .colors import Colors

__all__ = [
    "OUTER_CONTINUATION",
    "NESTED_CONTINUATION",
    "render",
    "render_node",
    "render_group",
    "Colors",
]
