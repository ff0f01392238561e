#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/constants.py
"""Constants and default values for the md2confluence library.

This module centralizes the wiki markup tokens, dependency declarations and
parser defaults used across the md2confluence library.

Constants are organized by category:
1. Confluence Markup Tokens - tags emitted by the renderer
2. Information Macros - code fence tags mapped to callout macros
3. Markdown Parsing - supported mistune extensions
4. Security Constants - code fence sanitization settings
5. Dependencies - package requirements checked at runtime
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Confluence Markup Tokens
# =============================================================================

QUOTE_TAG = "{quote}"
CODE_TAG = "code"
IMAGE_TAG = "!"
STRONG_TAG = "*"
STRIKETHROUGH_TAG = "-"
EMPHASIS_TAG = "_"
LINK_TAG = "["
LINK_CLOSE_TAG = "]"
LINK_SEPARATOR = "|"
UNORDERED_ITEM_TAG = "*"
ORDERED_ITEM_TAG = "#"
HORIZONTAL_RULE_TAG = "----"
TABLE_TAG = "|"
INLINE_CODE_OPEN = "{{"
INLINE_CODE_CLOSE = "}}"
MACRO_OPEN = "{"
MACRO_CLOSE = "}"

HEADING_TAGS = ("h1.", "h2.", "h3.", "h4.", "h5.", "h6.")
MAX_HEADING_LEVEL = len(HEADING_TAGS)

NEWLINE = "\n"
SPACE = " "

# Characters that Confluence wiki markup treats as formatting
CONFLUENCE_SPECIAL_CHARS = "*_-+^~{![]()"
MACRO_DELIMITER = "{"

# =============================================================================
# Information Macros
# =============================================================================

InformationMacro = Literal["info", "tip", "note", "warning"]
INFORMATION_MACROS: tuple[InformationMacro, ...] = ("info", "tip", "note", "warning")

# =============================================================================
# Markdown Parsing
# =============================================================================

MarkdownExtension = Literal["strikethrough", "table", "url", "hard_wrap"]

# Extensions enabled by the entry point before caller-supplied ones
STANDARD_EXTENSIONS: tuple[MarkdownExtension, ...] = ("strikethrough", "table", "url")
SUPPORTED_EXTENSIONS: tuple[MarkdownExtension, ...] = ("strikethrough", "table", "url", "hard_wrap")

# Extensions that toggle a parser setting rather than load a mistune plugin
PARSER_SETTING_EXTENSIONS = frozenset({"hard_wrap"})

# =============================================================================
# Security Constants
# =============================================================================

SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_+\-]+$"
MAX_LANGUAGE_IDENTIFIER_LENGTH = 50

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

DEFAULT_OUTPUT_ENCODING = "utf-8"
DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")
