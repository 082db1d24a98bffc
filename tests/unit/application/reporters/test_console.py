"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() sections
- Listing output
"""

import pytest

from lodash_build.application.reporters.console import ConsoleConfig, ConsoleReporter
from tests.factories import make_closure


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_variables is True
        assert config.show_properties is True
        assert config.width == 120

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 20"):
            ConsoleConfig(width=10)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        output = ConsoleReporter().report(make_closure())
        assert "BUILD CLOSURE" in output

    def test_report_lists_every_section(self) -> None:
        closure = make_closure(
            functions=("collect", "map"),
            variables=("reWords",),
            properties=("support",),
        )
        output = ConsoleReporter().report(closure)
        assert "FUNCTIONS" in output
        assert "collect" in output
        assert "VARIABLES" in output
        assert "reWords" in output
        assert "PROPERTIES" in output
        assert "support" in output

    def test_hidden_sections(self) -> None:
        closure = make_closure(variables=("reWords",), properties=("support",))
        config = ConsoleConfig(show_variables=False, show_properties=False)
        output = ConsoleReporter(config).report(closure)
        assert "VARIABLES" not in output
        assert "PROPERTIES" not in output

    def test_excluded_section_only_when_present(self) -> None:
        assert "EXCLUDED" not in ConsoleReporter().report(make_closure())
        closure = make_closure(excluded=frozenset({"keys"}))
        output = ConsoleReporter().report(closure)
        assert "EXCLUDED" in output
        assert "keys" in output

    def test_empty_section_marked(self) -> None:
        output = ConsoleReporter().report(make_closure(functions=()))
        assert "(none)" in output

    def test_report_listing(self) -> None:
        output = ConsoleReporter().report_listing("coreFuncs", ("filter", "map"))
        assert "coreFuncs" in output
        assert "filter" in output
