#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from,
providing a consistent interface for turning a document tree into output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from md2confluence.ast import Node
from md2confluence.constants import DEFAULT_OUTPUT_ENCODING
from md2confluence.exceptions import InvalidOptionsError
from md2confluence.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the tree rooted at ``doc`` to a string.

        Parameters
        ----------
        doc : Node
            Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render(self, doc: Node) -> bytes:
        """Render the tree rooted at ``doc`` to UTF-8 bytes.

        Parameters
        ----------
        doc : Node
            Document node to render

        Returns
        -------
        bytes
            Rendered document

        """
        return self.render_to_string(doc).encode(DEFAULT_OUTPUT_ENCODING)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
