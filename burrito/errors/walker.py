"""
errors/walker.py - Chain traversal and queries

Tags are searched along the whole chain; properties are read from the
outermost node only.
"""

from __future__ import annotations
from typing import Any, Callable, Iterator, List, Optional

from .node import ErrorNode


Visitor = Callable[[ErrorNode], bool]

_MISSING = object()


def is_error_node(err: Any) -> bool:
    return isinstance(err, ErrorNode)


def as_error_node(err: Any) -> Optional[ErrorNode]:
    """Return err as an ErrorNode, or None if it is some other error."""
    if isinstance(err, ErrorNode):
        return err
    return None


def iter_chain(err: Optional[BaseException]) -> Iterator[ErrorNode]:
    """Yield the ErrorNodes of a chain, outermost first."""
    current = err
    while isinstance(current, ErrorNode):
        yield current
        current = current.cause


def walk(err: Optional[BaseException], visit: Visitor) -> bool:
    """
    Visit every ErrorNode of the chain, outermost first.

    The terminal error, if it is not an ErrorNode, is not visited.

    Args:
        err: Start of the chain
        visit: Called per node; returning True stops the walk

    Returns:
        True if the visitor stopped the walk
    """
    for node in iter_chain(err):
        if visit(node):
            return True
    return False


def root_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Innermost error of the chain."""
    last: Optional[BaseException] = err
    for node in iter_chain(err):
        last = node
        if node.cause is not None:
            last = node.cause
    return last


def has_tag(err: Optional[BaseException], tag: str) -> bool:
    """True if any node of the chain carries the tag."""
    return walk(err, lambda node: tag in node.tags)


def get_tags(err: Optional[BaseException]) -> List[str]:
    """All tags of the chain, outermost node first."""
    tags: List[str] = []
    for node in iter_chain(err):
        tags.extend(node.tags)
    return tags


def get_property(err: Optional[BaseException], key: str, default: Any = None) -> Any:
    """Property of the outermost node; nodes further down are not searched."""
    node = as_error_node(err)
    if node is None:
        return default
    return node.properties.get(key, default)


def has_property(err: Optional[BaseException], key: str) -> bool:
    return get_property(err, key, _MISSING) is not _MISSING


def get_all_messages(err: Optional[BaseException]) -> List[str]:
    """
    Messages of the chain, outermost first.

    If the chain ends in an error that is not an ErrorNode, its text is the
    last element.
    """
    messages: List[str] = []
    terminal: Optional[BaseException] = err if not is_error_node(err) else None
    for node in iter_chain(err):
        if node.message is not None:
            messages.append(node.message)
        if node.is_terminal:
            terminal = node.cause
    if terminal is not None:
        messages.append(str(terminal))
    return messages
