#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of three components:

- nodes: the tagged ``Node`` type and its ``NodeType`` discriminant
- visitors: the walk driver and the visitor base class
- builder: helpers for constructing linked trees by hand

Examples
--------
Basic usage:

    >>> from md2confluence.ast import DocumentBuilder, strong
    >>> from md2confluence.renderers.confluence import ConfluenceRenderer
    >>>
    >>> doc = DocumentBuilder().heading(1, "Title").paragraph("Hello ", strong("world")).get_document()
    >>> ConfluenceRenderer().render_to_string(doc)
    'h1. Title\\nHello *world*\\n\\n'

"""

from __future__ import annotations

from md2confluence.ast.builder import (
    DocumentBuilder,
    code,
    emphasis,
    hard_break,
    html_inline,
    image,
    link,
    list_item,
    list_node,
    paragraph,
    soft_break,
    strikethrough,
    strong,
    table,
    text,
)
from md2confluence.ast.nodes import Node, NodeType, new_node
from md2confluence.ast.visitors import NodeVisitor, Visitor, WalkStatus, walk

__all__ = [
    "DocumentBuilder",
    "Node",
    "NodeType",
    "NodeVisitor",
    "Visitor",
    "WalkStatus",
    "code",
    "emphasis",
    "hard_break",
    "html_inline",
    "image",
    "link",
    "list_item",
    "list_node",
    "new_node",
    "paragraph",
    "soft_break",
    "strikethrough",
    "strong",
    "table",
    "text",
    "walk",
]
