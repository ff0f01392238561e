#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/ast/builder.py
"""Builder helpers for constructing AST structures.

This module provides a fluent document builder and small factory functions
for inline nodes. They make it possible to assemble linked trees by hand,
for example to render content that never existed as markdown, or to build
shapes the markdown parser cannot produce (heading level 7, orphan list
items, raw HTML in odd places).

"""

from __future__ import annotations

from typing import Sequence

from md2confluence.ast.nodes import Node, NodeType, new_node

InlineContent = Sequence["Node | str"]


def _inline(content: InlineContent) -> list[Node]:
    """Convert bare strings in ``content`` to Text nodes."""
    return [text(item) if isinstance(item, str) else item for item in content]


def text(literal: str) -> Node:
    """Create a Text node."""
    return Node(NodeType.TEXT, literal=literal)


def emphasis(*content: Node | str) -> Node:
    """Create an Emphasis node wrapping ``content``."""
    return new_node(NodeType.EMPHASIS, *_inline(content))


def strong(*content: Node | str) -> Node:
    """Create a Strong node wrapping ``content``."""
    return new_node(NodeType.STRONG, *_inline(content))


def strikethrough(*content: Node | str) -> Node:
    """Create a Strikethrough node wrapping ``content``."""
    return new_node(NodeType.STRIKETHROUGH, *_inline(content))


def code(literal: str) -> Node:
    """Create an inline Code node."""
    return Node(NodeType.CODE, literal=literal)


def link(destination: str | None, *content: Node | str, title: str = "") -> Node:
    """Create a Link node.

    Parameters
    ----------
    destination : str or None
        Link target; ``None`` renders the link without a target
    *content : Node or str
        Link text
    title : str, default = ""
        Link title

    Returns
    -------
    Node
        Link node

    """
    return new_node(NodeType.LINK, *_inline(content), destination=destination, title=title)


def image(destination: str | None, alt_text: str = "", title: str = "") -> Node:
    """Create an Image node with its alt text stored as the literal."""
    return Node(NodeType.IMAGE, destination=destination, literal=alt_text, title=title)


def hard_break() -> Node:
    """Create a HardLineBreak node."""
    return Node(NodeType.HARD_LINE_BREAK)


def soft_break() -> Node:
    """Create a SoftLineBreak node."""
    return Node(NodeType.SOFT_LINE_BREAK)


def html_inline(raw: str) -> Node:
    """Create a RawHTMLInline node."""
    return Node(NodeType.RAW_HTML_INLINE, literal=raw)


def paragraph(*content: Node | str) -> Node:
    """Create a Paragraph node wrapping ``content``."""
    return new_node(NodeType.PARAGRAPH, *_inline(content))


def list_item(*children: Node | str, ordered: bool = False) -> Node:
    """Create a ListItem node.

    Bare strings become single-paragraph item bodies, matching how the
    markdown parser shapes tight list items.

    """
    blocks = [paragraph(child) if isinstance(child, str) else child for child in children]
    return new_node(NodeType.LIST_ITEM, *blocks, ordered=ordered)


def list_node(*items: Node | str, ordered: bool = False) -> Node:
    """Create a List node whose items inherit the ``ordered`` flag."""
    built = [list_item(item, ordered=ordered) if isinstance(item, str) else item for item in items]
    for item in built:
        item.ordered = ordered
    return new_node(NodeType.LIST, *built, ordered=ordered)


def table(header: Sequence[InlineContent | str], rows: Sequence[Sequence[InlineContent | str]]) -> Node:
    """Create a Table node with a head row and body rows.

    Parameters
    ----------
    header : sequence
        Header cell contents; each entry is a string or a sequence of inline nodes
    rows : sequence of sequence
        Body rows, each a sequence of cell contents

    Returns
    -------
    Node
        Table node containing TableHead and, when ``rows`` is non-empty, TableBody

    """

    def _cell(content: InlineContent | str, is_header: bool) -> Node:
        inlines = [text(content)] if isinstance(content, str) else _inline(content)
        return new_node(NodeType.TABLE_CELL, *inlines, is_header=is_header)

    head_row = new_node(NodeType.TABLE_ROW, *(_cell(cell, True) for cell in header))
    node = new_node(NodeType.TABLE, new_node(NodeType.TABLE_HEAD, head_row))

    if rows:
        body = new_node(
            NodeType.TABLE_BODY,
            *(new_node(NodeType.TABLE_ROW, *(_cell(cell, False) for cell in row)) for row in rows),
        )
        node.append_child(body)

    return node


class DocumentBuilder:
    """Fluent builder for Document trees.

    Examples
    --------
    Building a simple document:

        >>> doc = (
        ...     DocumentBuilder()
        ...     .heading(1, "Title")
        ...     .paragraph("Hello ", strong("world"))
        ...     .get_document()
        ... )

    """

    def __init__(self) -> None:
        """Initialize the builder with an empty Document."""
        self.document = Node(NodeType.DOCUMENT)

    def add(self, node: Node) -> DocumentBuilder:
        """Append an arbitrary block node to the document."""
        self.document.append_child(node)
        return self

    def heading(self, level: int, *content: Node | str) -> DocumentBuilder:
        """Append a heading.

        Parameters
        ----------
        level : int
            Heading level; values outside 1-6 are clamped at render time
        *content : Node or str
            Inline content

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        return self.add(new_node(NodeType.HEADING, *_inline(content), level=level))

    def paragraph(self, *content: Node | str) -> DocumentBuilder:
        """Append a paragraph."""
        return self.add(paragraph(*content))

    def code_block(self, literal: str, info: str = "") -> DocumentBuilder:
        """Append a fenced code block.

        Parameters
        ----------
        literal : str
            Code content, written verbatim
        info : str, default = ""
            Language or macro tag

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        return self.add(Node(NodeType.CODE_BLOCK, literal=literal, info=info))

    def block_quote(self, *children: Node) -> DocumentBuilder:
        """Append a block quote containing ``children``."""
        return self.add(new_node(NodeType.BLOCK_QUOTE, *children))

    def list(self, *items: Node | str, ordered: bool = False) -> DocumentBuilder:
        """Append a list; bare strings become single-paragraph items."""
        return self.add(list_node(*items, ordered=ordered))

    def table(
        self, header: Sequence[InlineContent | str], rows: Sequence[Sequence[InlineContent | str]] = ()
    ) -> DocumentBuilder:
        """Append a table."""
        return self.add(table(header, rows))

    def horizontal_rule(self) -> DocumentBuilder:
        """Append a horizontal rule."""
        return self.add(Node(NodeType.HORIZONTAL_RULE))

    def html_block(self, raw: str) -> DocumentBuilder:
        """Append a raw HTML block."""
        return self.add(Node(NodeType.RAW_HTML_BLOCK, literal=raw))

    def get_document(self) -> Node:
        """Return the built Document node."""
        return self.document
