"""Pytest configuration and shared fixtures for the md2confluence test suite.

This module registers the test markers, the Hypothesis profiles and the
fixtures shared by the unit and integration tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from md2confluence.options import RenderFlag
from md2confluence.renderers import ConfluenceRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def renderer() -> ConfluenceRenderer:
    """Provide a renderer with no flags set."""
    return ConfluenceRenderer()


@pytest.fixture
def macro_renderer() -> ConfluenceRenderer:
    """Provide a renderer with information macros enabled."""
    return ConfluenceRenderer(flags=RenderFlag.INFORMATION_MACROS)
