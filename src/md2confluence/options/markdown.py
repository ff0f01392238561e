#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines which mistune extensions the markdown parser enables.
"""
# src/md2confluence/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2confluence.constants import (
    PARSER_SETTING_EXTENSIONS,
    STANDARD_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
    MarkdownExtension,
)
from md2confluence.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    extensions : tuple of str, default ("strikethrough", "table", "url")
        Parser extensions to enable:
        - "strikethrough": ``~~text~~`` spans
        - "table": GFM pipe tables
        - "url": bare URLs become links
        - "hard_wrap": every newline inside a paragraph is a hard line break

    Examples
    --------
    Adding hard wraps to the standard set:
        >>> options = MarkdownParserOptions().with_extensions("hard_wrap")
        >>> options.hard_wrap
        True

    """

    extensions: tuple[MarkdownExtension, ...] = field(
        default=STANDARD_EXTENSIONS,
        metadata={
            "help": "Parser extensions to enable: strikethrough, table, url, hard_wrap",
            "choices": list(SUPPORTED_EXTENSIONS),
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate the extension names.

        Raises
        ------
        ValueError
            If an extension is not supported.

        """
        super().__post_init__()
        extensions = tuple(dict.fromkeys(self.extensions))
        unknown = [name for name in extensions if name not in SUPPORTED_EXTENSIONS]
        if unknown:
            raise ValueError(
                f"Unsupported markdown extension(s): {', '.join(unknown)}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )
        object.__setattr__(self, "extensions", extensions)

    def with_extensions(self, *names: MarkdownExtension) -> MarkdownParserOptions:
        """Return a copy with ``names`` appended to the enabled extensions."""
        return self.create_updated(extensions=self.extensions + tuple(names))

    @property
    def plugins(self) -> list[str]:
        """Mistune plugin names for the enabled extensions."""
        return [name for name in self.extensions if name not in PARSER_SETTING_EXTENSIONS]

    @property
    def hard_wrap(self) -> bool:
        """Whether newlines inside paragraphs become hard line breaks."""
        return "hard_wrap" in self.extensions
