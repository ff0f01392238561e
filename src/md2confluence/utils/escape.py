#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/utils/escape.py
"""Confluence wiki markup escaping.

Characters that Confluence interprets as formatting are prefixed with a
backslash. The escape sequence for each character comes from a 256-entry
table indexed by code point; code points past the table never need
escaping.

"""

from __future__ import annotations

from typing import Callable, Optional

from md2confluence.constants import CONFLUENCE_SPECIAL_CHARS, MACRO_DELIMITER

ESCAPE_TABLE_SIZE = 256


def _build_escape_table() -> tuple[Optional[str], ...]:
    table: list[Optional[str]] = [None] * ESCAPE_TABLE_SIZE
    for char in CONFLUENCE_SPECIAL_CHARS:
        table[ord(char)] = "\\" + char
    return tuple(table)


CONFLUENCE_ESCAPE_TABLE = _build_escape_table()


def write_escaped(write: Callable[[str], object], text: str, ignore_macro_escaping: bool = False) -> None:
    r"""Write ``text`` through ``write`` with Confluence special characters escaped.

    The text is scanned once, left to right. Unescaped runs are flushed as
    slices, so a text with no special characters costs a single write.

    Parameters
    ----------
    write : callable
        Sink receiving the output chunks
    text : str
        Raw text payload
    ignore_macro_escaping : bool, default False
        Leave ``{`` unescaped so inline wiki macros survive

    Examples
    --------
        >>> chunks = []
        >>> write_escaped(chunks.append, "a*b")
        >>> "".join(chunks)
        'a\\*b'

    """
    table = CONFLUENCE_ESCAPE_TABLE
    start = 0
    for end, char in enumerate(text):
        code_point = ord(char)
        if code_point >= ESCAPE_TABLE_SIZE:
            continue
        escape_seq = table[code_point]
        if escape_seq is None:
            continue
        if ignore_macro_escaping and char == MACRO_DELIMITER:
            continue
        if start < end:
            write(text[start:end])
        write(escape_seq)
        start = end + 1

    if start < len(text):
        write(text[start:])


def escape_confluence(text: str, ignore_macro_escaping: bool = False) -> str:
    r"""Escape Confluence special characters in text content.

    Parameters
    ----------
    text : str
        Text to escape
    ignore_macro_escaping : bool, default False
        Leave ``{`` unescaped

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_confluence("*-_+")
        '\\*\\-\\_\\+'
        >>> escape_confluence("{toc}", ignore_macro_escaping=True)
        '{toc}'

    """
    if not text:
        return text

    chunks: list[str] = []
    write_escaped(chunks.append, text, ignore_macro_escaping=ignore_macro_escaping)
    return "".join(chunks)
