#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2confluence.

Each stage of the pipeline has its own frozen Options dataclass: the
markdown parser selects extensions, and the Confluence renderer carries
its bit flags.
"""

from __future__ import annotations

from md2confluence.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2confluence.options.confluence import ALL_RENDER_FLAGS, ConfluenceRendererOptions, RenderFlag
from md2confluence.options.markdown import MarkdownParserOptions

__all__ = [
    "ALL_RENDER_FLAGS",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConfluenceRendererOptions",
    "MarkdownParserOptions",
    "RenderFlag",
]
