"""Unit tests for the dependency guard, the timing helper and version checks."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import md2confluence.utils.decorators
from md2confluence.exceptions import DependencyError
from md2confluence.utils.decorators import debug_timer, requires_dependencies
from md2confluence.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the requires_dependencies decorator."""

    def test_missing_package_raises_error(self) -> None:
        """A missing package raises DependencyError naming it."""

        @requires_dependencies("markdown", [("nonexistent-package", "nonexistent_md2c_pkg", "")])
        def sample_function() -> str:
            return "success"

        with pytest.raises(DependencyError) as exc_info:
            sample_function()

        assert exc_info.value.converter_name == "markdown"
        assert ("nonexistent-package", "") in exc_info.value.missing_packages
        assert exc_info.value.original_import_error is not None
        assert "pip install" in str(exc_info.value)

    def test_version_mismatch_raises_error(self) -> None:
        """An installed package with the wrong version raises DependencyError."""
        with patch("md2confluence.utils.decorators.importlib.import_module"):
            with patch.object(
                md2confluence.utils.decorators, "check_version_requirement", return_value=(False, "2.0.3")
            ):

                @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
                def sample_function() -> str:
                    return "success"

                with pytest.raises(DependencyError) as exc_info:
                    sample_function()

                assert exc_info.value.missing_packages == []
                assert ("mistune", ">=3.0.0", "2.0.3") in exc_info.value.version_mismatches

    def test_correct_version_succeeds(self) -> None:
        """A satisfied requirement lets the call through."""
        with patch("md2confluence.utils.decorators.importlib.import_module"):
            with patch.object(
                md2confluence.utils.decorators, "check_version_requirement", return_value=(True, "3.0.2")
            ):

                @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"

    def test_no_version_spec_skips_version_check(self) -> None:
        """An empty version spec accepts any installed version."""
        with patch("md2confluence.utils.decorators.importlib.import_module"):
            with patch.object(md2confluence.utils.decorators, "check_version_requirement") as mock_check:

                @requires_dependencies("markdown", [("some-package", "some_package", "")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"
                mock_check.assert_not_called()

    def test_wrapped_function_metadata_preserved(self) -> None:
        """functools.wraps keeps the wrapped name."""

        @requires_dependencies("markdown", [])
        def parse_something() -> None:
            pass

        assert parse_something.__name__ == "parse_something"


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """A completion message is logged at DEBUG level."""
        logger = logging.getLogger("md2confluence.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="md2confluence.tests.timer"):
            with debug_timer(logger, "Rendering (confluence)"):
                pass

        assert any("Rendering (confluence) completed in" in record.message for record in caplog.records)

    def test_silent_when_debug_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged above DEBUG level."""
        logger = logging.getLogger("md2confluence.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="md2confluence.tests.timer_quiet"):
            with debug_timer(logger, "Parsing (markdown)"):
                pass

        assert not any("Parsing (markdown)" in record.message for record in caplog.records)


@pytest.mark.unit
class TestPackageVersions:
    """Test installed-package version helpers."""

    def test_missing_package_has_no_version(self) -> None:
        """An uninstalled distribution has no version."""
        assert get_package_version("nonexistent-md2confluence-package") is None

    def test_missing_package_fails_requirement(self) -> None:
        """A missing distribution never meets a requirement."""
        assert check_version_requirement("nonexistent-md2confluence-package", ">=1.0") == (False, None)

    def test_requirement_comparison(self) -> None:
        """Versions are compared with packaging specifiers."""
        with patch("md2confluence.utils.packages.get_package_version", return_value="3.0.2"):
            assert check_version_requirement("mistune", ">=3.0.0") == (True, "3.0.2")
            assert check_version_requirement("mistune", "<3") == (False, "3.0.2")

    def test_unparsable_version_fails_requirement(self) -> None:
        """A release string that is not PEP 440 never meets a requirement."""
        with patch("md2confluence.utils.packages.get_package_version", return_value="not-a-version"):
            assert check_version_requirement("mistune", ">=3.0.0") == (False, "not-a-version")

    def test_installed_mistune_meets_requirement(self) -> None:
        """The declared mistune dependency satisfies the parser requirement."""
        meets, installed = check_version_requirement("mistune", ">=3.0.0")
        assert meets
        assert installed is not None
