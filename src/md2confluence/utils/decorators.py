#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/utils/decorators.py
"""Utility decorators for md2confluence parsers and renderers.

This module provides the dependency guard used by the markdown parser and
a DEBUG-level timing helper shared by the parser and the renderer.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Optional, Tuple

from md2confluence.exceptions import DependencyError
from md2confluence.utils.packages import check_version_requirement


def _find_unmet_requirements(
    converter_name: str, packages: List[Tuple[str, str, str]]
) -> Optional[DependencyError]:
    """Import each package and compare its version; return the error to raise, if any."""
    missing: List[Tuple[str, str]] = []
    too_old: List[Tuple[str, str, str]] = []
    first_import_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_import_error = first_import_error or e
            continue

        if not version_spec:
            continue
        satisfied, installed = check_version_requirement(install_name, version_spec)
        if not satisfied:
            too_old.append((install_name, version_spec, installed or "unknown"))

    if not missing and not too_old:
        return None
    return DependencyError(converter_name, missing, too_old, original_import_error=first_import_error)


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Guard a parse method behind an import and version check.

    The check runs on every call, before the wrapped method, so the lazy
    ``import mistune`` inside the parser never fails with a bare ImportError.

    Parameters
    ----------
    converter_name : str
        Stage named in the error message, e.g. ``"markdown"``
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` entries. ``version_spec``
        is a PEP 440 specifier such as ``">=3.0.0"``, or ``""`` to accept any
        installed release.

    Returns
    -------
    Callable
        Decorator for the method

    Raises
    ------
    DependencyError
        If a package cannot be imported or its installed release does not
        satisfy ``version_spec``.

    Examples
    --------
        >>> class Parser:
        ...     @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ...     def parse(self, source):
        ...         import mistune
        ...         return mistune.create_markdown(renderer=None).parse(source)

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            error = _find_unmet_requirements(converter_name, packages)
            if error is not None:
                raise error from error.original_import_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (confluence)")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Parsing (markdown)"):
        ...     doc = parser.parse(source)
        ... # Logs: "Parsing (markdown) completed in 0.01s" at DEBUG level

    Notes
    -----
    Only measures time when the logger has DEBUG level enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
