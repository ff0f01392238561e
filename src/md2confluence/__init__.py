"""md2confluence - Convert Markdown documents to Confluence wiki markup.

md2confluence parses Markdown with mistune into a linked node tree and
renders that tree to the wiki markup understood by Confluence's legacy
editor: ``h1.`` headings, ``{quote}`` and ``{code}`` macros, ``||header||``
tables, ``*``/``#`` lists and backslash-escaped special characters.

Requirements
------------
- Python 3.10+
- mistune 3 for markdown parsing

Examples
--------
Basic conversion:

    >>> from md2confluence import to_confluence
    >>> to_confluence("# Section\\nhello, world.\\n")
    b'h1. Section\\nhello, world.\\n\\n'

Rendering a hand-built tree:

    >>> from md2confluence import ConfluenceRenderer, RenderFlag
    >>> from md2confluence.ast import DocumentBuilder
    >>> doc = DocumentBuilder().code_block("Careful\\n", info="warning").get_document()
    >>> ConfluenceRenderer(flags=RenderFlag.INFORMATION_MACROS).render_to_string(doc)
    '{warning}\\nCareful\\n{warning}\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2confluence requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from md2confluence.api import to_confluence, to_confluence_string
from md2confluence.exceptions import (
    DependencyError,
    InvalidOptionsError,
    Md2ConfluenceError,
    ParsingError,
    RenderingError,
    UnknownNodeTypeError,
    ValidationError,
)
from md2confluence.options import ConfluenceRendererOptions, MarkdownParserOptions, RenderFlag
from md2confluence.parsers import MarkdownToAstConverter, markdown_to_ast
from md2confluence.renderers import ConfluenceRenderer

__all__ = [
    "__version__",
    "to_confluence",
    "to_confluence_string",
    "markdown_to_ast",
    "ConfluenceRenderer",
    "ConfluenceRendererOptions",
    "MarkdownParserOptions",
    "MarkdownToAstConverter",
    "RenderFlag",
    "Md2ConfluenceError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnknownNodeTypeError",
    "DependencyError",
]
