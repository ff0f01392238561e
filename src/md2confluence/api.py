#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/api.py
"""Public conversion functions for md2confluence.

The entry points parse markdown with mistune and render the resulting tree
with a fresh ``ConfluenceRenderer``. Nothing is cached between calls.

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from md2confluence.constants import DEFAULT_OUTPUT_ENCODING, STANDARD_EXTENSIONS, MarkdownExtension
from md2confluence.options.confluence import ConfluenceRendererOptions, RenderFlag
from md2confluence.options.markdown import MarkdownParserOptions
from md2confluence.parsers.markdown import MarkdownToAstConverter
from md2confluence.renderers.confluence import ConfluenceRenderer

logger = logging.getLogger(__name__)


def to_confluence_string(
    source: Union[str, bytes],
    extensions: Iterable[MarkdownExtension] = (),
    *,
    flags: RenderFlag = RenderFlag.INFORMATION_MACROS,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[ConfluenceRendererOptions] = None,
) -> str:
    r"""Convert markdown to Confluence wiki markup text.

    Parameters
    ----------
    source : str or bytes
        Markdown source; bytes are decoded with encoding detection
    extensions : iterable of str, default = ()
        Extensions enabled on top of strikethrough, table and url
    flags : RenderFlag, default = RenderFlag.INFORMATION_MACROS
        Render flags; ignored when ``renderer_options`` is given
    parser_options : MarkdownParserOptions, optional
        Parser options; ``extensions`` are appended to them
    renderer_options : ConfluenceRendererOptions, optional
        Renderer options; take precedence over ``flags``

    Returns
    -------
    str
        Confluence wiki markup

    Raises
    ------
    ValueError
        If an extension name or a flag is not supported
    InvalidOptionsError
        If an options object has the wrong type
    ParsingError
        If the markdown cannot be converted to a tree
    UnknownNodeTypeError
        If the tree holds a node the renderer does not know

    Examples
    --------
        >>> to_confluence_string("# Section\nhello, world.\n")
        'h1. Section\nhello, world.\n\n'
        >>> to_confluence_string("```tip\nUse the API\n```")
        '{tip}\nUse the API\n{tip}\n\n'

    """
    if parser_options is None:
        parser_options = MarkdownParserOptions(extensions=STANDARD_EXTENSIONS)
    extensions = tuple(extensions)
    if extensions:
        parser_options = parser_options.with_extensions(*extensions)

    if renderer_options is None:
        renderer_options = ConfluenceRendererOptions(flags=flags)

    logger.debug(f"Converting markdown to Confluence (extensions={parser_options.extensions})")
    document = MarkdownToAstConverter(parser_options).parse(source)
    return ConfluenceRenderer(renderer_options).render_to_string(document)


def to_confluence(
    source: Union[str, bytes],
    extensions: Iterable[MarkdownExtension] = (),
    *,
    flags: RenderFlag = RenderFlag.INFORMATION_MACROS,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[ConfluenceRendererOptions] = None,
) -> bytes:
    r"""Convert markdown to Confluence wiki markup bytes.

    Accepts the same arguments as ``to_confluence_string`` and returns the
    markup encoded as UTF-8.

    Examples
    --------
        >>> to_confluence("**strong text**")
        b'*strong text*\n\n'
        >>> to_confluence("*-_+", flags=RenderFlag.NONE)
        b'\\*\\-\\_\\+'

    """
    markup = to_confluence_string(
        source,
        extensions,
        flags=flags,
        parser_options=parser_options,
        renderer_options=renderer_options,
    )
    return markup.encode(DEFAULT_OUTPUT_ENCODING)
