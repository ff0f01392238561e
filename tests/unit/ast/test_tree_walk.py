"""Unit tests for the walk driver and NodeVisitor."""

from __future__ import annotations

import sys

import pytest

from md2confluence.ast import Node, NodeType, NodeVisitor, WalkStatus, new_node, walk


def _record(root: Node, status_for=None) -> list[tuple[str, bool]]:
    events: list[tuple[str, bool]] = []

    def visitor(node: Node, entering: bool) -> WalkStatus:
        events.append((node.literal or node.type.value, entering))
        if status_for is not None:
            return status_for(node, entering)
        return WalkStatus.GO_TO_NEXT

    walk(root, visitor)
    return events


def _sample_tree() -> Node:
    return new_node(
        NodeType.DOCUMENT,
        new_node(
            NodeType.PARAGRAPH,
            Node(NodeType.TEXT, literal="a"),
            new_node(NodeType.STRONG, Node(NodeType.TEXT, literal="b")),
        ),
        Node(NodeType.HORIZONTAL_RULE),
    )


@pytest.mark.unit
class TestWalk:
    """Tests for walk."""

    def test_document_order(self) -> None:
        """Containers get enter and exit events around their children."""
        assert _record(_sample_tree()) == [
            ("Document", True),
            ("Paragraph", True),
            ("a", True),
            ("Strong", True),
            ("b", True),
            ("Strong", False),
            ("Paragraph", False),
            ("HorizontalRule", True),
            ("Document", False),
        ]

    def test_empty_container_gets_both_events(self) -> None:
        """A childless container is still entered and exited."""
        doc = new_node(NodeType.DOCUMENT, Node(NodeType.IMAGE, destination="x.png"))
        assert _record(doc) == [("Document", True), ("Image", True), ("Image", False), ("Document", False)]

    def test_leaf_root(self) -> None:
        """A leaf root produces a single event."""
        assert _record(Node(NodeType.TEXT, literal="only")) == [("only", True)]

    def test_subtree_walk_stops_at_root(self) -> None:
        """Walking a subtree never visits the root's siblings or parent."""
        doc = _sample_tree()
        paragraph = doc.first_child
        events = _record(paragraph)
        assert events[0] == ("Paragraph", True)
        assert events[-1] == ("Paragraph", False)
        assert ("HorizontalRule", True) not in events

    def test_skip_children(self) -> None:
        """SKIP_CHILDREN skips descendants but still delivers the exit event."""

        def status_for(node: Node, entering: bool) -> WalkStatus:
            if node.type is NodeType.PARAGRAPH and entering:
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.GO_TO_NEXT

        assert _record(_sample_tree(), status_for) == [
            ("Document", True),
            ("Paragraph", True),
            ("Paragraph", False),
            ("HorizontalRule", True),
            ("Document", False),
        ]

    def test_terminate(self) -> None:
        """TERMINATE stops the walk immediately."""

        def status_for(node: Node, entering: bool) -> WalkStatus:
            return WalkStatus.TERMINATE if node.literal == "a" else WalkStatus.GO_TO_NEXT

        assert _record(_sample_tree(), status_for) == [("Document", True), ("Paragraph", True), ("a", True)]

    def test_deep_nesting_does_not_recurse(self) -> None:
        """Nesting deeper than the recursion limit is walked iteratively."""
        root = Node(NodeType.DOCUMENT)
        current = root
        depth = sys.getrecursionlimit() + 100
        for _ in range(depth):
            current = current.append_child(Node(NodeType.BLOCK_QUOTE))

        count = 0

        def visitor(node: Node, entering: bool) -> WalkStatus:
            nonlocal count
            count += 1
            return WalkStatus.GO_TO_NEXT

        walk(root, visitor)
        assert count == 2 * (depth + 1)

    def test_node_walk_method(self) -> None:
        """Node.walk delegates to walk."""
        events: list[bool] = []
        Node(NodeType.DOCUMENT).walk(lambda node, entering: events.append(entering) or WalkStatus.GO_TO_NEXT)
        assert events == [True, False]


class _TextCollector(NodeVisitor):
    def __init__(self) -> None:
        self.literals: list[str] = []

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        if node.type is NodeType.TEXT:
            self.literals.append(node.literal)
        return WalkStatus.GO_TO_NEXT


@pytest.mark.unit
class TestNodeVisitor:
    """Tests for the NodeVisitor base class."""

    def test_visit_tree(self) -> None:
        """visit_tree drives visit through the whole tree."""
        collector = _TextCollector()
        collector.visit_tree(_sample_tree())
        assert collector.literals == ["a", "b"]

    def test_visit_is_abstract(self) -> None:
        """NodeVisitor cannot be instantiated without visit."""
        with pytest.raises(TypeError):
            NodeVisitor()  # type: ignore[abstract]
