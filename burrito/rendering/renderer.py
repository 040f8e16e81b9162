"""
rendering/renderer.py - Render error chains as text

Output is ordered outermost wrap first, root cause last:

    step one
    [+]: step two
    [+]: root cause

Continuation lines of multi-line messages are prefixed with ">>" so they
can't be mistaken for a new entry of the chain. With stack traces enabled
every node is followed by "   [function] file:line".
"""

from __future__ import annotations
from typing import List, Optional
import logging

from burrito.bootstrap.config import BurritoConfig, get_config
from burrito.errors.node import ErrorNode
from burrito.errors.group import ErrorGroup
from .colors import red, yellow

logger = logging.getLogger("burrito.rendering")


OUTER_CONTINUATION = "   >> "
NESTED_CONTINUATION = "  >> "
TRACE_INDENT = "   "
CAUSE_MARKER = "+"


def _indent_lines(text: str, marker: str, color: bool) -> str:
    return text.replace("\n", "\n" + yellow(marker, color))


def _nested_entry(text: str, color: bool) -> str:
    return (
        f"\n[{red(CAUSE_MARKER, color)}]: "
        f"{_indent_lines(text, NESTED_CONTINUATION, color)}"
    )


def _trace_segment(node: ErrorNode) -> str:
    return f"\n{TRACE_INDENT}{node.site}"


def render_node(node: ErrorNode, config: Optional[BurritoConfig] = None) -> str:
    """Render an ErrorNode chain."""
    if config is None:
        config = get_config()
    logger.debug(f"Rendering error chain from {node.site.file}:{node.site.line}")
    color = config.use_color

    show_trace = config.show_stack_trace
    if node.stack_trace_override is not None:
        show_trace = node.stack_trace_override

    parts: List[str] = []
    current: Optional[BaseException] = node
    while current is not None:
        if not isinstance(current, ErrorNode):
            parts.append(_nested_entry(render(current, config), color))
            break

        outermost = current is node
        if current.message is not None:
            if outermost:
                parts.append(_indent_lines(current.message, OUTER_CONTINUATION, color))
            else:
                parts.append(_nested_entry(current.message, color))

        node_trace = show_trace
        if not outermost and current.stack_trace_override is not None:
            node_trace = current.stack_trace_override
        if node_trace and (outermost or current.message is not None):
            parts.append(_trace_segment(current))

        current = current.cause

    return "".join(parts)


def render_group(err: ErrorGroup, config: Optional[BurritoConfig] = None) -> str:
    """Render the primary error, the banner, then every other error."""
    if config is None:
        config = get_config()
    logger.debug(f"Rendering group of {len(err)} errors")
    banner = red(config.group_error_text, config.use_color)
    text = f"{render(err.primary, config)}\n{banner}"
    for other in err.additional:
        text = f"{text}\n\n{render(other, config)}"
    return text


def render(err: Optional[BaseException], config: Optional[BurritoConfig] = None) -> str:
    """
    Render any error as text.

    Args:
        err: ErrorNode chain, ErrorGroup or any other exception
        config: Rendering configuration, defaults to the process-wide one

    Returns:
        Rendered text, "" for None
    """
    if err is None:
        return ""
    if isinstance(err, ErrorNode):
        return render_node(err, config)
    if isinstance(err, ErrorGroup):
        return render_group(err, config)
    return str(err)
