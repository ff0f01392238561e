#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns source text into the linked node tree that renderers walk.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from md2confluence.ast import Node
from md2confluence.exceptions import InvalidOptionsError, ValidationError
from md2confluence.options.base import BaseParserOptions
from md2confluence.utils.encoding import ensure_text

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from md2confluence.ast import DocumentBuilder
        >>> class PlainTextParser(BaseParser):
        ...     def parse(self, source):
        ...         return DocumentBuilder().paragraph(self._load_text_content(source)).get_document()

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, source: Union[str, bytes]) -> Node:
        """Parse ``source`` into a Document tree.

        Parameters
        ----------
        source : str or bytes
            Document source; bytes are decoded with encoding detection

        Returns
        -------
        Node
            Document node

        Raises
        ------
        ParsingError
            If the source cannot be converted
        DependencyError
            If a required dependency is missing

        """

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(source: Union[str, bytes, bytearray]) -> str:
        """Return ``source`` as text.

        Raises
        ------
        ValidationError
            If ``source`` is neither text nor bytes

        """
        try:
            return ensure_text(source)
        except TypeError as e:
            raise ValidationError(str(e), parameter_name="source", parameter_value=type(source).__name__) from e
