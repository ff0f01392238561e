#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown documents to the linked node
tree using the mistune parser. Mistune produces a token stream; each token
type is mapped onto exactly one node type, with two adjustments:

- Soft line breaks are folded into the surrounding text as ``"\\n"`` and
  adjacent text runs are merged, so a paragraph of plain lines becomes a
  single Text node.
- Table header cells sit directly under ``table_head`` in mistune's
  output, so the header row node is synthesized.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from md2confluence.ast import Node, NodeType, new_node
from md2confluence.constants import DEPS_MARKDOWN, MAX_HEADING_LEVEL
from md2confluence.exceptions import ParsingError
from md2confluence.options.markdown import MarkdownParserOptions
from md2confluence.parsers.base import BaseParser
from md2confluence.utils.decorators import debug_timer, requires_dependencies
from md2confluence.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

Token = dict[str, Any]
TokenHandler = Callable[[Token], "Node | None"]

# Every newline breaks the line; an optional backslash or run of spaces before it is consumed.
HARD_WRAP_LINEBREAK_PATTERN = r"(?:\\| *)\n\s*"


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")
        >>> [child.type.value for child in doc.children]
        ['Heading', 'Paragraph']

    With hard wraps:

        >>> options = MarkdownParserOptions().with_extensions("hard_wrap")
        >>> doc = MarkdownToAstConverter(options).parse("a\nb")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._block_handlers: dict[str, TokenHandler] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            # block_text is used for tight list items - treat like paragraph
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "table": self._process_table,
            "thematic_break": self._process_thematic_break,
            "block_html": self._process_html_block,
            "blank_line": self._skip_token,
        }
        self._inline_handlers: dict[str, TokenHandler] = {
            "text": self._handle_text_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "emphasis": self._handle_emphasis_token,
            "strong": self._handle_strong_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "inline_html": self._handle_inline_html_token,
        }

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, source: Union[str, bytes]) -> Node:
        """Parse Markdown input into a Document tree.

        Parameters
        ----------
        source : str or bytes
            Markdown text; bytes are decoded with encoding detection

        Returns
        -------
        Node
            Document node

        Raises
        ------
        ParsingError
            If mistune produces a token this converter does not handle

        """
        markdown_content = self._load_text_content(source)

        import mistune

        logger.debug(f"Parsing markdown with extensions {self.options.extensions}")
        plugins: list[Any] = list(self.options.plugins)
        if self.options.hard_wrap:
            plugins.append(_backslash_hard_wrap)
        markdown = mistune.create_markdown(
            plugins=plugins,
            renderer=None,  # We'll process tokens ourselves
            hard_wrap=self.options.hard_wrap,
        )

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)
            document = Node(NodeType.DOCUMENT)
            _append_children(document, self._process_tokens(tokens))

        return document

    def _process_tokens(self, tokens: list[Token]) -> list[Node]:
        """Process a list of block-level mistune tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._dispatch(token, self._block_handlers, "block")
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_tokens(self, tokens: list[Token]) -> list[Node]:
        """Process a list of inline mistune tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._dispatch(token, self._inline_handlers, "inline")
            if node is not None:
                nodes.append(node)
        return nodes

    @staticmethod
    def _dispatch(token: Token, handlers: dict[str, TokenHandler], stage: str) -> Node | None:
        token_type = token.get("type", "")
        handler = handlers.get(token_type)
        if handler is None:
            raise ParsingError(f"Unsupported {stage} markdown token {token_type!r}", parsing_stage=stage)
        return handler(token)

    def _container(self, node_type: NodeType, token: Token, inline: bool, **fields: Any) -> Node:
        """Create a container node whose children come from ``token``."""
        node = new_node(node_type, **fields)
        children = token.get("children", [])
        if inline:
            _append_children(node, self._process_inline_tokens(children))
        else:
            _append_children(node, self._process_tokens(children))
        return node

    # -- block tokens ------------------------------------------------------

    def _skip_token(self, token: Token) -> None:
        return None

    def _process_heading(self, token: Token) -> Node:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Node
            Heading node

        """
        level = token.get("attrs", {}).get("level", 1)
        level = min(max(level, 1), MAX_HEADING_LEVEL)
        return self._container(NodeType.HEADING, token, inline=True, level=level)

    def _process_paragraph(self, token: Token) -> Node:
        return self._container(NodeType.PARAGRAPH, token, inline=True)

    def _process_code_block(self, token: Token) -> Node:
        """Process code block token.

        Only the first word of the info string is kept, and only when it is
        a plain language identifier, since it is written into a macro tag.
        A non-empty body always ends with a newline; indented blocks come
        from mistune without one.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        Node
            CodeBlock node

        """
        info_string = token.get("attrs", {}).get("info") or ""
        parts = info_string.strip().split(maxsplit=1)
        info = sanitize_language_identifier(parts[0]) if parts else ""
        literal = token.get("raw", "")
        if literal and not literal.endswith("\n"):
            literal += "\n"
        return Node(NodeType.CODE_BLOCK, literal=literal, info=info)

    def _process_block_quote(self, token: Token) -> Node:
        return self._container(NodeType.BLOCK_QUOTE, token, inline=False)

    def _process_list(self, token: Token) -> Node:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered)

        Returns
        -------
        Node
            List node; its items carry the same ``ordered`` flag

        """
        ordered = bool(token.get("attrs", {}).get("ordered", False))
        node = new_node(NodeType.LIST, ordered=ordered)
        for item_token in token.get("children", []):
            if item_token.get("type") == "blank_line":
                continue
            if item_token.get("type") != "list_item":
                raise ParsingError(
                    f"Unexpected token {item_token.get('type')!r} inside list", parsing_stage="block"
                )
            node.append_child(self._container(NodeType.LIST_ITEM, item_token, inline=False, ordered=ordered))
        return node

    def _process_table(self, token: Token) -> Node:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token with 'table_head' and optional 'table_body' children

        Returns
        -------
        Node
            Table node

        """
        table = new_node(NodeType.TABLE)

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head (no intermediate table_row)
                head_row = new_node(NodeType.TABLE_ROW)
                for cell_token in section.get("children", []):
                    head_row.append_child(self._process_table_cell(cell_token, is_header=True))
                table.append_child(new_node(NodeType.TABLE_HEAD, head_row))
            elif section_type == "table_body":
                body = new_node(NodeType.TABLE_BODY)
                for row_token in section.get("children", []):
                    row = new_node(NodeType.TABLE_ROW)
                    for cell_token in row_token.get("children", []):
                        row.append_child(self._process_table_cell(cell_token, is_header=False))
                    body.append_child(row)
                table.append_child(body)
            else:
                raise ParsingError(f"Unexpected token {section_type!r} inside table", parsing_stage="block")

        return table

    def _process_table_cell(self, token: Token, is_header: bool) -> Node:
        return self._container(NodeType.TABLE_CELL, token, inline=True, is_header=is_header)

    def _process_thematic_break(self, token: Token) -> Node:
        return Node(NodeType.HORIZONTAL_RULE)

    def _process_html_block(self, token: Token) -> Node:
        return Node(NodeType.RAW_HTML_BLOCK, literal=token.get("raw", ""))

    # -- inline tokens -----------------------------------------------------

    def _handle_text_token(self, token: Token) -> Node:
        """Handle text token."""
        return Node(NodeType.TEXT, literal=token.get("raw", ""))

    def _handle_softbreak_token(self, token: Token) -> Node:
        """Handle softbreak token; the newline is kept inside the text run."""
        return Node(NodeType.TEXT, literal="\n")

    def _handle_linebreak_token(self, token: Token) -> Node:
        """Handle linebreak token."""
        return Node(NodeType.HARD_LINE_BREAK)

    def _handle_emphasis_token(self, token: Token) -> Node:
        """Handle emphasis token."""
        return self._container(NodeType.EMPHASIS, token, inline=True)

    def _handle_strong_token(self, token: Token) -> Node:
        """Handle strong token."""
        return self._container(NodeType.STRONG, token, inline=True)

    def _handle_strikethrough_token(self, token: Token) -> Node:
        """Handle strikethrough token."""
        return self._container(NodeType.STRIKETHROUGH, token, inline=True)

    def _handle_codespan_token(self, token: Token) -> Node:
        """Handle codespan token."""
        return Node(NodeType.CODE, literal=token.get("raw", ""))

    def _handle_link_token(self, token: Token) -> Node:
        """Handle link token; an empty URL becomes an absent destination."""
        attrs = token.get("attrs", {})
        url = attrs.get("url") or None
        title = attrs.get("title") or ""
        return self._container(NodeType.LINK, token, inline=True, destination=url, title=title)

    def _handle_image_token(self, token: Token) -> Node:
        """Handle image token."""
        attrs = token.get("attrs", {})
        url = attrs.get("url") or None
        title = attrs.get("title") or ""
        # Alt text is in children, not attrs
        alt_text = "".join(child.get("raw", "") for child in token.get("children", []) if child.get("type") == "text")
        return Node(NodeType.IMAGE, destination=url, title=title, literal=alt_text)

    def _handle_inline_html_token(self, token: Token) -> Node:
        """Handle inline_html token."""
        return Node(NodeType.RAW_HTML_INLINE, literal=token.get("raw", ""))


def _append_children(parent: Node, children: list[Node]) -> None:
    """Append ``children`` to ``parent``, merging adjacent Text nodes."""
    for child in children:
        last = parent.last_child
        if child.type is NodeType.TEXT and last is not None and last.type is NodeType.TEXT:
            last.literal += child.literal
        else:
            parent.append_child(child)


def _parse_linebreak(inline: Any, m: Any, state: Any) -> int:
    state.append_token({"type": "linebreak"})
    return m.end()


def _backslash_hard_wrap(md: Any) -> None:
    """Mistune plugin letting a trailing backslash end a line under ``hard_wrap``.

    Mistune's hard-wrap break pattern only eats spaces before the newline,
    leaving the backslash of ``line\\`` in the text.
    """
    md.inline.register("linebreak", HARD_WRAP_LINEBREAK_PATTERN, _parse_linebreak)


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Node:
    r"""Convert Markdown to a Document tree.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Node
        Document node

    Examples
    --------
    >>> from md2confluence.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(list(doc.children))
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
