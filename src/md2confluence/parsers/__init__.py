#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2confluence/parsers/__init__.py
"""Parsers that turn source documents into the md2confluence node tree.

Available parsers:
- MarkdownToAstConverter: Parse Markdown with mistune (requires mistune)

"""

from md2confluence.parsers.base import BaseParser
from md2confluence.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "BaseParser",
    "MarkdownToAstConverter",
    "markdown_to_ast",
]
