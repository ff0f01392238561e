#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2confluence/renderers/__init__.py
"""AST renderers for converting document trees to output markup.

Available renderers:
- ConfluenceRenderer: Render to Confluence wiki markup

Examples
--------
Render a hand-built tree:

    >>> from md2confluence.ast import DocumentBuilder
    >>> from md2confluence.renderers import ConfluenceRenderer
    >>> doc = DocumentBuilder().horizontal_rule().get_document()
    >>> ConfluenceRenderer().render(doc)
    b'----\\n'

"""

from md2confluence.renderers.base import BaseRenderer
from md2confluence.renderers.confluence import ConfluenceRenderer, heading_tag_from_level

__all__ = [
    "BaseRenderer",
    "ConfluenceRenderer",
    "heading_tag_from_level",
]
