#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/renderers/confluence.py
"""Confluence wiki markup rendering from AST.

This module provides the ConfluenceRenderer class, which converts a markdown
document tree to Confluence wiki markup. The renderer is driven by the walk
in ``md2confluence.ast.visitors``: every node produces an entering event,
and container nodes also produce an exiting event. Each event maps to a
fixed set of output tokens given the node type, the phase and a few lookups
on the parent, the next sibling and the list nesting depth.

Output goes through two writers. Tracked writes remember the length of the
chunk they wrote, and the suppressible line break only fires when the last
tracked write was non-empty. Plain writes (escaped text, code-block bodies,
hard breaks and the spaces after heading and list-item tags) leave that
length untouched, so a document made only of text gets no trailing newline.

"""

from __future__ import annotations

import logging
from typing import Callable

from md2confluence.ast import Node, NodeType, NodeVisitor, WalkStatus
from md2confluence.constants import (
    CODE_TAG,
    EMPHASIS_TAG,
    HEADING_TAGS,
    HORIZONTAL_RULE_TAG,
    IMAGE_TAG,
    INFORMATION_MACROS,
    INLINE_CODE_CLOSE,
    INLINE_CODE_OPEN,
    LINK_CLOSE_TAG,
    LINK_SEPARATOR,
    LINK_TAG,
    MACRO_CLOSE,
    MACRO_OPEN,
    NEWLINE,
    ORDERED_ITEM_TAG,
    QUOTE_TAG,
    SPACE,
    STRIKETHROUGH_TAG,
    STRONG_TAG,
    TABLE_TAG,
    UNORDERED_ITEM_TAG,
)
from md2confluence.exceptions import UnknownNodeTypeError
from md2confluence.options.confluence import ConfluenceRendererOptions, RenderFlag
from md2confluence.renderers.base import BaseRenderer
from md2confluence.utils.decorators import debug_timer
from md2confluence.utils.escape import write_escaped

logger = logging.getLogger(__name__)

NodeHandler = Callable[[Node, bool], None]


def heading_tag_from_level(level: int) -> str:
    """Return the heading tag for ``level``, clamped into 1-6.

    Examples
    --------
        >>> heading_tag_from_level(2)
        'h2.'
        >>> heading_tag_from_level(9)
        'h6.'

    """
    index = min(max(level, 1), len(HEADING_TAGS)) - 1
    return HEADING_TAGS[index]


class ConfluenceRenderer(NodeVisitor, BaseRenderer):
    r"""Render AST nodes to Confluence wiki markup.

    A renderer holds the output and traversal state for one document.
    Every render starts from a clean buffer, so an instance may be reused
    sequentially, but it must not be shared between concurrent renders.

    Parameters
    ----------
    options : ConfluenceRendererOptions or None, default = None
        Confluence rendering options
    flags : RenderFlag or None, default = None
        Shortcut that overrides ``options.flags``

    Examples
    --------
    Basic usage:

        >>> from md2confluence.ast import DocumentBuilder
        >>> doc = DocumentBuilder().heading(1, "Title").paragraph("Body").get_document()
        >>> ConfluenceRenderer().render_to_string(doc)
        'h1. Title\nBody\n\n'

    Driving the renderer from an external walk:

        >>> from md2confluence.ast import walk
        >>> renderer = ConfluenceRenderer(flags=RenderFlag.INFORMATION_MACROS)
        >>> walk(doc, renderer.render_node)
        >>> renderer.getvalue()
        'h1. Title\nBody\n\n'

    """

    def __init__(self, options: ConfluenceRendererOptions | None = None, *, flags: RenderFlag | None = None):
        """Initialize the Confluence renderer with options."""
        BaseRenderer._validate_options_type(options, ConfluenceRendererOptions, "confluence")
        options = options or ConfluenceRendererOptions()
        if flags is not None:
            options = options.create_updated(flags=flags)
        BaseRenderer.__init__(self, options)
        self.options: ConfluenceRendererOptions = options

        self._output: list[str] = []
        self._last_output_len: int = 0
        self._item_level: int = 0

        self._handlers: dict[NodeType, NodeHandler] = {
            NodeType.DOCUMENT: self._visit_noop,
            NodeType.TEXT: self._visit_text,
            NodeType.PARAGRAPH: self._visit_paragraph,
            NodeType.HEADING: self._visit_heading,
            NodeType.EMPHASIS: self._visit_emphasis,
            NodeType.STRONG: self._visit_strong,
            NodeType.STRIKETHROUGH: self._visit_strikethrough,
            NodeType.CODE: self._visit_code,
            NodeType.CODE_BLOCK: self._visit_code_block,
            NodeType.LINK: self._visit_link,
            NodeType.IMAGE: self._visit_image,
            NodeType.LIST: self._visit_list,
            NodeType.LIST_ITEM: self._visit_list_item,
            NodeType.BLOCK_QUOTE: self._visit_block_quote,
            NodeType.HORIZONTAL_RULE: self._visit_horizontal_rule,
            NodeType.TABLE: self._visit_table,
            NodeType.TABLE_HEAD: self._visit_noop,
            NodeType.TABLE_BODY: self._visit_noop,
            NodeType.TABLE_ROW: self._visit_table_row,
            NodeType.TABLE_CELL: self._visit_table_cell,
            NodeType.SOFT_LINE_BREAK: self._visit_noop,
            NodeType.HARD_LINE_BREAK: self._visit_hard_break,
            NodeType.RAW_HTML_BLOCK: self._visit_noop,
            NodeType.RAW_HTML_INLINE: self._visit_noop,
        }

    @property
    def flags(self) -> RenderFlag:
        """Active render flags."""
        return self.options.flags

    @property
    def last_output_len(self) -> int:
        """Length of the most recent tracked write; 0 before any."""
        return self._last_output_len

    @property
    def item_level(self) -> int:
        """Current list nesting depth."""
        return self._item_level

    def getvalue(self) -> str:
        """Return everything written since the last reset."""
        return "".join(self._output)

    def reset(self) -> None:
        """Discard the output and traversal state."""
        self._output = []
        self._last_output_len = 0
        self._item_level = 0

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to Confluence wiki markup.

        Parameters
        ----------
        doc : Node
            Root of the tree, normally a Document node

        Returns
        -------
        str
            Confluence wiki markup

        Raises
        ------
        UnknownNodeTypeError
            If the tree contains a node type the renderer does not know

        """
        self.reset()
        logger.debug(f"Rendering Confluence markup with flags {self.flags!r}")
        with debug_timer(logger, "Rendering (confluence)"):
            self.visit_tree(doc)
        return self.getvalue()

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Handle one walk event; see ``render_node``."""
        return self.render_node(node, entering)

    def render_node(self, node: Node, entering: bool) -> WalkStatus:
        """Render a single node event.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True on entry, False on exit

        Returns
        -------
        WalkStatus
            Always ``WalkStatus.GO_TO_NEXT``

        Raises
        ------
        UnknownNodeTypeError
            If ``node.type`` is not a known node type

        """
        handler = self._handlers.get(node.type)
        if handler is None:
            raise UnknownNodeTypeError(node.type)
        handler(node, entering)
        return WalkStatus.GO_TO_NEXT

    # -- output primitives -------------------------------------------------

    def _write(self, text: str) -> None:
        self._output.append(text)

    def _out(self, text: str) -> None:
        self._output.append(text)
        self._last_output_len = len(text)

    def _cr(self) -> None:
        if self._last_output_len > 0:
            self._out(NEWLINE)

    def _esc(self, text: str) -> None:
        write_escaped(self._write, text, ignore_macro_escaping=self.options.ignore_macro_escaping)

    # -- node handlers -----------------------------------------------------

    def _visit_noop(self, node: Node, entering: bool) -> None:
        pass

    def _visit_text(self, node: Node, entering: bool) -> None:
        self._esc(node.literal)

    def _visit_hard_break(self, node: Node, entering: bool) -> None:
        self._write(NEWLINE)

    def _visit_emphasis(self, node: Node, entering: bool) -> None:
        self._out(EMPHASIS_TAG)

    def _visit_strong(self, node: Node, entering: bool) -> None:
        self._out(STRONG_TAG)

    def _visit_strikethrough(self, node: Node, entering: bool) -> None:
        self._out(STRIKETHROUGH_TAG)

    def _visit_code(self, node: Node, entering: bool) -> None:
        # Confluence still interprets markup inside {{...}}
        self._out(INLINE_CODE_OPEN)
        self._esc(node.literal)
        self._out(INLINE_CODE_CLOSE)

    def _visit_heading(self, node: Node, entering: bool) -> None:
        if entering:
            self._out(heading_tag_from_level(node.level))
            self._write(SPACE)
        else:
            self._cr()

    def _visit_block_quote(self, node: Node, entering: bool) -> None:
        self._out(QUOTE_TAG)
        self._cr()
        if not entering:
            self._cr()

    def _code_block_tags(self, info: str) -> tuple[str, str]:
        """Return the (opening, closing) macro bodies for a code block."""
        if info and self.options.information_macros and info in INFORMATION_MACROS:
            return info, info
        if info:
            return f"{CODE_TAG}:{info}", CODE_TAG
        return CODE_TAG, CODE_TAG

    def _visit_code_block(self, node: Node, entering: bool) -> None:
        open_tag, close_tag = self._code_block_tags(node.info)
        self._out(MACRO_OPEN + open_tag + MACRO_CLOSE)
        self._cr()
        self._write(node.literal)
        self._out(MACRO_OPEN + close_tag + MACRO_CLOSE)
        self._cr()
        self._cr()

    def _visit_image(self, node: Node, entering: bool) -> None:
        if not node.destination:
            return
        if entering:
            self._out(IMAGE_TAG + node.destination)
        else:
            self._out(IMAGE_TAG)

    def _visit_link(self, node: Node, entering: bool) -> None:
        if entering:
            self._out(LINK_TAG)
            return
        if node.destination:
            self._out(LINK_SEPARATOR + node.destination)
        self._out(LINK_CLOSE_TAG)

    def _visit_list(self, node: Node, entering: bool) -> None:
        if entering:
            self._item_level += 1
            return
        self._item_level -= 1
        if self._item_level == 0:
            self._cr()

    def _visit_list_item(self, node: Node, entering: bool) -> None:
        if not entering:
            return

        parent = node.parent
        ordered = parent.ordered if parent is not None and parent.type == NodeType.LIST else node.ordered
        bullet = ORDERED_ITEM_TAG if ordered else UNORDERED_ITEM_TAG

        if self._item_level > 0:
            self._out(bullet * self._item_level)
        self._write(SPACE)

    def _visit_horizontal_rule(self, node: Node, entering: bool) -> None:
        self._cr()
        self._out(HORIZONTAL_RULE_TAG)
        self._cr()

    def _visit_table(self, node: Node, entering: bool) -> None:
        if not entering:
            self._cr()

    def _visit_table_row(self, node: Node, entering: bool) -> None:
        parent_type = node.parent.type if node.parent is not None else None
        if parent_type == NodeType.TABLE_HEAD:
            self._out(TABLE_TAG)
            if not entering:
                self._cr()
        elif parent_type == NodeType.TABLE_BODY and not entering:
            self._out(TABLE_TAG)
            self._cr()

    def _visit_table_cell(self, node: Node, entering: bool) -> None:
        # Header cells are closed as well as opened, giving ||a||b|| rows
        if node.is_header or entering:
            self._out(TABLE_TAG)

    def _visit_paragraph(self, node: Node, entering: bool) -> None:
        if entering:
            return

        if node.next is not None and node.next.type == NodeType.PARAGRAPH:
            self._write(NEWLINE + NEWLINE)
            return

        if node.parent is None or node.parent.type != NodeType.LIST_ITEM:
            self._cr()
        self._cr()
