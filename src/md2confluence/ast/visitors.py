#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the walk driver that feeds a visitor callback with
``(node, entering)`` pairs, and the abstract base class for visitors that
react to those events.

The walk is iterative, so deeply nested documents do not hit the
interpreter's recursion limit.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable

from md2confluence.ast.nodes import Node


class WalkStatus(Enum):
    """Continuation signal returned by a visitor.

    Attributes
    ----------
    GO_TO_NEXT
        Continue with the next node in document order
    SKIP_CHILDREN
        Do not descend into the current container; its exit event is still delivered
    TERMINATE
        Stop the walk immediately

    """

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


Visitor = Callable[[Node, bool], WalkStatus]


def walk(root: Node, visitor: Visitor) -> None:
    """Walk the tree rooted at ``root`` depth-first.

    Container nodes produce an entering event before their children and an
    exiting event after them, even when they have no children. Leaf nodes
    produce a single entering event.

    Parameters
    ----------
    root : Node
        Root of the subtree to walk
    visitor : Visitor
        Callback invoked with ``(node, entering)``

    Examples
    --------
        >>> from md2confluence.ast import NodeType, new_node
        >>> doc = new_node(NodeType.DOCUMENT, new_node(NodeType.TEXT, literal="hi"))
        >>> events = []
        >>> walk(doc, lambda n, e: events.append((n.type.value, e)) or WalkStatus.GO_TO_NEXT)
        >>> events
        [('Document', True), ('Text', True), ('Document', False)]

    """
    node: Node | None = root
    entering = True

    while node is not None:
        status = visitor(node, entering)
        if status is WalkStatus.TERMINATE:
            return

        if entering and node.is_container:
            if node.first_child is not None and status is not WalkStatus.SKIP_CHILDREN:
                node = node.first_child
            else:
                entering = False
            continue

        if node is root:
            return

        if node.next is not None:
            node = node.next
            entering = True
        else:
            node = node.parent
            entering = False


class NodeVisitor(ABC):
    """Abstract base class for walk-driven visitors.

    Subclasses implement ``visit`` and are handed to ``walk`` directly, or
    through ``visit_tree``.

    Examples
    --------
    Counting text runs:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit(self, node, entering):
        ...         if node.type is NodeType.TEXT:
        ...             self.count += 1
        ...         return WalkStatus.GO_TO_NEXT

    """

    @abstractmethod
    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Handle one traversal event.

        Parameters
        ----------
        node : Node
            The node being visited
        entering : bool
            True on entry, False on exit

        Returns
        -------
        WalkStatus
            How the walk should continue

        """

    def visit_tree(self, root: Node) -> None:
        """Walk ``root`` with this visitor."""
        walk(root, self.visit)
