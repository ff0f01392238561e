#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/ast/nodes.py
"""AST node classes for document representation.

This module defines the tree that the markdown parser produces and the
Confluence renderer consumes. A node is a tagged variant: a single ``Node``
class whose ``type`` discriminant is one of the ``NodeType`` members, with
the payload fields relevant to that type.

Node Hierarchy
--------------
Container nodes are visited twice by the walk (on entry and on exit):
    - Document, Paragraph, Heading, BlockQuote, List, ListItem
    - Table, TableHead, TableBody, TableRow, TableCell
    - Emphasis, Strong, Strikethrough, Link, Image

Leaf nodes are visited once:
    - Text, Code, CodeBlock, HorizontalRule
    - SoftLineBreak, HardLineBreak, RawHTMLBlock, RawHTMLInline

Every non-root node has exactly one parent, and ordered sibling links
(``prev``/``next``) are available for lookahead decisions.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from md2confluence.ast.visitors import Visitor


class NodeType(str, Enum):
    """Discriminant of a ``Node``."""

    DOCUMENT = "Document"
    TEXT = "Text"
    PARAGRAPH = "Paragraph"
    HEADING = "Heading"
    EMPHASIS = "Emphasis"
    STRONG = "Strong"
    STRIKETHROUGH = "Strikethrough"
    CODE = "Code"
    CODE_BLOCK = "CodeBlock"
    LINK = "Link"
    IMAGE = "Image"
    LIST = "List"
    LIST_ITEM = "ListItem"
    BLOCK_QUOTE = "BlockQuote"
    HORIZONTAL_RULE = "HorizontalRule"
    TABLE = "Table"
    TABLE_HEAD = "TableHead"
    TABLE_BODY = "TableBody"
    TABLE_ROW = "TableRow"
    TABLE_CELL = "TableCell"
    SOFT_LINE_BREAK = "SoftLineBreak"
    HARD_LINE_BREAK = "HardLineBreak"
    RAW_HTML_BLOCK = "RawHTMLBlock"
    RAW_HTML_INLINE = "RawHTMLInline"

    @property
    def is_container(self) -> bool:
        """Whether nodes of this type are visited on both entry and exit."""
        return self not in _LEAF_TYPES

    def __str__(self) -> str:
        return self.value


_LEAF_TYPES = frozenset(
    {
        NodeType.TEXT,
        NodeType.CODE,
        NodeType.CODE_BLOCK,
        NodeType.HORIZONTAL_RULE,
        NodeType.SOFT_LINE_BREAK,
        NodeType.HARD_LINE_BREAK,
        NodeType.RAW_HTML_BLOCK,
        NodeType.RAW_HTML_INLINE,
    }
)


@dataclass(eq=False)
class Node:
    """A single element of the document tree.

    Parameters
    ----------
    type : NodeType
        Node discriminant
    literal : str, default = ""
        Text payload for Text, Code, CodeBlock and raw HTML nodes. Image
        nodes keep their alt text here.
    info : str, default = ""
        Info string of a fenced code block (language or macro tag)
    destination : str or None, default = None
        Link or image target
    title : str, default = ""
        Link or image title
    level : int, default = 0
        Heading level (1-6)
    ordered : bool, default = False
        List flag, set on both List and ListItem nodes
    is_header : bool, default = False
        Whether a TableCell belongs to the header row

    Notes
    -----
    Nodes compare by identity. Tree links are maintained by
    ``append_child`` and are excluded from ``repr``.

    """

    type: NodeType
    literal: str = ""
    info: str = ""
    destination: Optional[str] = None
    title: str = ""
    level: int = 0
    ordered: bool = False
    is_header: bool = False

    parent: Optional[Node] = field(default=None, repr=False)
    first_child: Optional[Node] = field(default=None, repr=False)
    last_child: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)
    next: Optional[Node] = field(default=None, repr=False)

    @property
    def is_container(self) -> bool:
        """Whether the walk visits this node on both entry and exit."""
        return self.type not in _LEAF_TYPES

    @property
    def children(self) -> Iterator[Node]:
        """Iterate over the direct children in document order."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next

    def unlink(self) -> None:
        """Detach this node from its parent and siblings."""
        if self.prev is not None:
            self.prev.next = self.next
        elif self.parent is not None:
            self.parent.first_child = self.next

        if self.next is not None:
            self.next.prev = self.prev
        elif self.parent is not None:
            self.parent.last_child = self.prev

        self.parent = None
        self.prev = None
        self.next = None

    def append_child(self, child: Node) -> Node:
        """Append ``child`` as the last child of this node.

        Parameters
        ----------
        child : Node
            Node to attach. It is unlinked from any previous position first.

        Returns
        -------
        Node
            The appended child, for chaining

        """
        child.unlink()
        child.parent = self
        if self.last_child is not None:
            self.last_child.next = child
            child.prev = self.last_child
        else:
            self.first_child = child
        self.last_child = child
        return child

    def walk(self, visitor: Visitor) -> None:
        """Walk the subtree rooted at this node.

        Parameters
        ----------
        visitor : Visitor
            Callback invoked with ``(node, entering)``

        """
        from md2confluence.ast.visitors import walk

        walk(self, visitor)


def new_node(node_type: NodeType, *children: Node, **fields: object) -> Node:
    """Create a node of ``node_type`` and append ``children`` to it.

    Parameters
    ----------
    node_type : NodeType
        Discriminant of the new node
    *children : Node
        Children to append in order
    **fields : object
        Payload fields forwarded to ``Node``

    Returns
    -------
    Node
        The new, linked node

    """
    node = Node(node_type, **fields)  # type: ignore[arg-type]
    for child in children:
        node.append_child(child)
    return node
