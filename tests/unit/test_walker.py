"""
Unit tests for errors/walker.py

Tests chain traversal, tag and property lookup, and message collection.
"""

from burrito.errors.group import group
from burrito.errors.node import new_leaf, wrap, pass_error
from burrito.errors.walker import (
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


def _chain():
    """outer -> middle -> leaf, no opaque terminal."""
    leaf = new_leaf("leaf")
    middle = wrap(leaf, "middle")
    outer = wrap(middle, "outer")
    return outer, middle, leaf


class TestTypeHelpers:
    """Test node discrimination."""

    def test_is_error_node(self):
        assert is_error_node(new_leaf("x"))
        assert not is_error_node(ValueError("x"))
        assert not is_error_node(None)

    def test_as_error_node(self):
        node = new_leaf("x")
        assert as_error_node(node) is node
        assert as_error_node(ValueError("x")) is None


class TestWalk:
    """Test generic traversal."""

    def test_stop_immediately(self):
        """Test a visitor that always stops visits one node."""
        outer, _, _ = _chain()
        visited = []

        def visit(node):
            visited.append(node)
            return True

        assert walk(outer, visit) is True
        assert visited == [outer]

    def test_visit_all(self):
        """Test a visitor that never stops visits every node."""
        outer, middle, leaf = _chain()
        visited = []

        def visit(node):
            visited.append(node)
            return False

        assert walk(outer, visit) is False
        assert visited == [outer, middle, leaf]

    def test_terminal_not_visited(self):
        """Test the opaque terminal error is not visited."""
        terminal = ValueError("root")
        err = wrap(wrap(terminal, "a"), "b")
        visited = []
        walk(err, lambda node: visited.append(node) or False)
        assert len(visited) == 2
        assert terminal not in visited

    def test_walk_plain_exception(self):
        """Test walking a non-node visits nothing."""
        visited = []
        assert walk(ValueError("x"), lambda node: visited.append(node) or False) is False
        assert visited == []

    def test_iter_chain(self):
        outer, middle, leaf = _chain()
        assert list(iter_chain(outer)) == [outer, middle, leaf]
        assert list(iter_chain(None)) == []


class TestRootCause:
    """Test finding the innermost error."""

    def test_opaque_root(self):
        terminal = ValueError("root")
        assert root_cause(wrap(wrap(terminal, "a"), "b")) is terminal

    def test_node_root(self):
        outer, _, leaf = _chain()
        assert root_cause(outer) is leaf

    def test_plain_exception(self):
        err = ValueError("x")
        assert root_cause(err) is err


class TestTags:
    """Test chain-wide tag lookup."""

    def test_tag_on_inner_node(self):
        """Test tags on any node are found from the outside."""
        outer, middle, leaf = _chain()
        leaf.add_tag("disk")
        assert has_tag(outer, "disk")
        assert has_tag(middle, "disk")

    def test_tag_not_found(self):
        """Test absent tags, including chains without tags."""
        outer, middle, _ = _chain()
        assert not has_tag(outer, "disk")
        middle.add_tag("network")
        assert not has_tag(outer, "disk")

    def test_tag_on_outer_not_seen_by_inner(self):
        """Test queries only walk inward."""
        outer, middle, _ = _chain()
        outer.add_tag("api")
        assert not has_tag(middle, "api")

    def test_tag_on_plain_exception(self):
        assert not has_tag(ValueError("x"), "any")

    def test_get_tags(self):
        outer, middle, leaf = _chain()
        outer.add_tag("a")
        leaf.add_tag("c")
        middle.add_tag("b")
        assert get_tags(outer) == ["a", "b", "c"]


class TestProperties:
    """Test outermost-only property lookup."""

    def test_outer_property(self):
        err = wrap(ValueError("x"), "outer")
        err.add_property("status", 503)
        assert get_property(err, "status") == 503
        assert has_property(err, "status")

    def test_missing_property(self):
        err = new_leaf("x")
        assert get_property(err, "status") is None
        assert get_property(err, "status", "n/a") == "n/a"
        assert not has_property(err, "status")

    def test_property_hidden_by_wrap(self):
        """Test wrapping hides the inner node's properties."""
        inner = new_leaf("inner")
        inner.add_property("status", 503)
        inner.add_tag("http")
        outer = wrap(inner, "outer")
        assert get_property(outer, "status") is None
        assert not has_property(outer, "status")
        assert has_tag(outer, "http")

    def test_none_value_is_present(self):
        """Test a property set to None still exists."""
        err = new_leaf("x")
        err.add_property("body", None)
        assert has_property(err, "body")

    def test_plain_exception(self):
        assert get_property(ValueError("x"), "status") is None
        assert not has_property(ValueError("x"), "status")


class TestGetAllMessages:
    """Test message collection."""

    def test_chain_of_nodes(self):
        outer, _, _ = _chain()
        assert get_all_messages(outer) == ["outer", "middle", "leaf"]

    def test_opaque_terminal_last(self):
        err = wrap(wrap(ValueError("root"), "a"), "b")
        assert get_all_messages(err) == ["b", "a", "root"]

    def test_pass_error_skipped(self):
        err = wrap(pass_error(ValueError("root")), "outer")
        assert get_all_messages(err) == ["outer", "root"]

    def test_group_terminal(self):
        grouped = group(ValueError("a"), ValueError("b"))
        err = wrap(grouped, "outer")
        assert get_all_messages(err) == ["outer", str(grouped)]

    def test_plain_exception(self):
        assert get_all_messages(ValueError("x")) == ["x"]
