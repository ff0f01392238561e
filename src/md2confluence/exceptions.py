#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2confluence library.

This module defines specialized exception classes for the error conditions
that can occur while parsing markdown and rendering Confluence wiki markup.

Exception Hierarchy
-------------------
- Md2ConfluenceError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (markdown parsing failures)

  - RenderingError (output generation failures)
    - UnknownNodeTypeError (node tag outside the renderer's dispatch table)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2ConfluenceError(Exception):
    """Base exception class for all md2confluence-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2ConfluenceError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing MarkdownParserOptions to the Confluence renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"'{converter_name}' expects options of type '{expected_type.__name__}', "
                f"but received '{received_type.__name__}'."
            )

        super().__init__(
            message=message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2ConfluenceError):
    """Exception raised when markdown input cannot be turned into a tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2ConfluenceError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeTypeError(RenderingError):
    """Exception raised when the renderer receives a node tag it cannot handle.

    This signals a version mismatch between the tree producer and the
    renderer. The render is aborted rather than silently dropping content.

    Parameters
    ----------
    node_type : Any
        The unrecognized node type tag

    Attributes
    ----------
    node_type : Any
        The offending tag

    """

    def __init__(self, node_type: Any):
        """Initialize the error with the offending node type."""
        super().__init__(f"Unknown node type {node_type!r}", rendering_stage="dispatch")
        self.node_type = node_type


class DependencyError(Md2ConfluenceError):
    """Exception raised when the markdown parser's dependency is unusable.

    Raised by ``requires_dependencies`` before parsing starts, either because
    the package cannot be imported or because the installed release is
    older than the one md2confluence was written against.

    Parameters
    ----------
    converter_name : str
        Stage that needs the packages, e.g. ``"markdown"``
    missing_packages : list[tuple[str, str]]
        ``(install_name, version_spec)`` for packages that failed to import
    version_mismatches : list[tuple[str, str, str]], optional
        ``(install_name, version_spec, installed_version)`` for packages whose
        installed release does not satisfy the requirement
    original_import_error : ImportError, optional
        The first ImportError raised while importing the packages

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []

        problems = [f"{name}{spec} is not installed" for name, spec in missing_packages]
        problems += [
            f"{name}{spec} is required but {installed} is installed" for name, spec, installed in version_mismatches
        ]
        requirements = [(name, spec) for name, spec in missing_packages]
        requirements += [(name, spec) for name, spec, _ in version_mismatches]
        install_args = " ".join(f'"{name}{spec}"' if spec else name for name, spec in requirements)

        message = f"Converting {converter_name} input needs: " + "; ".join(problems)
        if install_args:
            message += f"\nInstall with: pip install --upgrade {install_args}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
