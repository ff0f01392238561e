#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/utils/packages.py
"""Installed-distribution lookups backing the parser's dependency guard."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed release of ``package_name``, or None when absent.

    ``package_name`` is the distribution name pip knows, e.g. ``"mistune"``.
    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Test the installed release of a distribution against a specifier.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        PEP 440 specifier, e.g. ``">=3.0.0"``

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement holds, and the installed release. A missing
        distribution or an unparsable release string never satisfies it.

    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None

    try:
        return Version(installed) in SpecifierSet(version_spec), installed
    except InvalidVersion:
        return False, installed
