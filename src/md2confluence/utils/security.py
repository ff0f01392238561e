#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Security utilities for md2confluence.

Code fence info strings end up inside a Confluence macro tag
(``{code:<info>}``), so they are restricted to a safe character set before
they reach the renderer.
"""

import logging
import re

from md2confluence.constants import MAX_LANGUAGE_IDENTIFIER_LENGTH, SAFE_LANGUAGE_IDENTIFIER_PATTERN

logger = logging.getLogger(__name__)


def sanitize_language_identifier(language: str) -> str:
    r"""Sanitize a code fence language identifier to prevent macro injection.

    Parameters
    ----------
    language : str
        Raw language identifier string to sanitize

    Returns
    -------
    str
        Sanitized language identifier, or empty string if invalid

    Examples
    --------
    >>> sanitize_language_identifier("python")
    'python'
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("java}{html")
    ''
    >>> sanitize_language_identifier("x" * 100)
    ''

    """
    if not language:
        return ""

    language = language.strip()

    if len(language) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            f"Language identifier exceeds maximum length ({MAX_LANGUAGE_IDENTIFIER_LENGTH}): {language[:50]}..."
        )
        return ""

    if not re.match(SAFE_LANGUAGE_IDENTIFIER_PATTERN, language):
        logger.warning(
            f"Blocked potentially dangerous language identifier containing invalid characters: {language[:50]}"
        )
        return ""

    return language
