"""
errors/node.py - Error node and construction API

An ErrorNode is one step of a causal chain: an optional message added at a
wrapping site, the call site itself, and the error it wraps. Tags and
properties can be attached after construction; message, cause and site
never change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING
import os
import sys
import logging

if TYPE_CHECKING:
    from burrito.bootstrap.config import BurritoConfig

logger = logging.getLogger("burrito.errors")


@dataclass(frozen=True)
class CallSite:
    """Where a node was created."""

    file: str       # base name only
    line: int
    function: str   # module-qualified __qualname__

    def __str__(self) -> str:
        return f"[{self.function}] {self.file}:{self.line}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "function": self.function,
        }


def capture_site(depth: int = 1) -> CallSite:
    """
    Capture the call site `depth` frames above the caller.

    capture_site(0) describes the function calling capture_site,
    capture_site(1) its caller, and so on.
    """
    frame = sys._getframe(depth + 1)
    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    qualname = getattr(code, "co_qualname", code.co_name)
    function = f"{module}.{qualname}" if module else qualname
    return CallSite(
        file=os.path.basename(code.co_filename),
        line=frame.f_lineno,
        function=function,
    )


class ErrorNode(Exception):
    """
    A wrapped error with context.

    Args:
        message: Text added at this wrapping step, None for a pass-through.
        cause: Wrapped error. Another ErrorNode continues the chain, any
            other exception (or None) ends it.
        site: Call site; captured from the caller when omitted.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        site: Optional[CallSite] = None,
    ) -> None:
        if cause is not None and not isinstance(cause, BaseException):
            raise TypeError(
                f"cause must be an exception, got {type(cause).__name__}"
            )
        super().__init__(message if message is not None else "")
        self._message = message
        self._cause = cause
        self._site = site if site is not None else capture_site(1)
        self.stack_trace_override: Optional[bool] = None
        self.tags: List[str] = []
        self.properties: Dict[str, Any] = {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def site(self) -> CallSite:
        return self._site

    @property
    def is_terminal(self) -> bool:
        """True when the chain ends at this node."""
        return not isinstance(self._cause, ErrorNode)

    def add_tag(self, tag: str) -> None:
        """Add a tag to this node."""
        self.tags.append(tag)

    def add_property(self, key: str, value: Any) -> None:
        """Set a property on this node, replacing any previous value."""
        self.properties[key] = value

    def force_stack_trace(self, enabled: bool) -> None:
        """Override the global stack trace setting for this node."""
        self.stack_trace_override = enabled

    def clear_stack_trace_override(self) -> None:
        self.stack_trace_override = None

    def has_tag(self, tag: str) -> bool:
        """True if this node or any node it wraps carries the tag."""
        from .walker import has_tag
        return has_tag(self, tag)

    def render(self, config: Optional["BurritoConfig"] = None) -> str:
        from burrito.rendering.renderer import render
        return render(self, config)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ErrorNode(message={self._message!r}, cause={self._cause!r}, "
            f"site={self._site.file}:{self._site.line})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self._message,
            "site": self._site.to_dict(),
            "tags": list(self.tags),
            "properties": dict(self.properties),
            "stack_trace_override": self.stack_trace_override,
            "cause": (
                self._cause.to_dict()
                if isinstance(self._cause, ErrorNode)
                else (str(self._cause) if self._cause is not None else None)
            ),
        }


def _require_cause(cause: Optional[BaseException], operation: str) -> None:
    if cause is None:
        raise TypeError(f"{operation}() requires an error to wrap, got None")


def _new_node(cause: Optional[BaseException], message: Optional[str]) -> ErrorNode:
    """Build a node attributed to the caller of the public constructor."""
    # frames: _new_node -> public constructor -> user code
    site = capture_site(2)
    node = ErrorNode(message, cause, site)
    logger.debug(f"Created error node at {site.file}:{site.line}")
    return node


def new_leaf(message: str) -> ErrorNode:
    """Create an error with a call site from text."""
    return _new_node(None, message)


def new_leaf_formatted(message: str, *args: Any) -> ErrorNode:
    """Create an error with a call site from printf-style formatted text."""
    return _new_node(None, message % args)


def wrap(cause: BaseException, message: str) -> ErrorNode:
    """Wrap an error with a call site and additional text."""
    _require_cause(cause, "wrap")
    return _new_node(cause, message)


def wrap_formatted(cause: BaseException, message: str, *args: Any) -> ErrorNode:
    """Wrap an error with a call site and additional formatted text."""
    _require_cause(cause, "wrap_formatted")
    return _new_node(cause, message % args)


def pass_error(cause: BaseException) -> ErrorNode:
    """Add a call site to an error without any additional text."""
    _require_cause(cause, "pass_error")
    site = capture_site(1)
    node = ErrorNode(None, cause, site)
    logger.debug(f"Passed error through {site.file}:{site.line}")
    return node
