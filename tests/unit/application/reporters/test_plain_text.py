"""Tests for PlainTextReporter."""

from lodash_build.application.reporters.plain_text import PlainTextReporter
from tests.factories import make_closure


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_summary(self) -> None:
        closure = make_closure(
            functions=("baseMap", "map"),
            variables=("reWords",),
            seeds=frozenset({"map"}),
        )
        output = PlainTextReporter().report(closure)
        assert "Build Closure" in output
        assert "  Functions: 2" in output
        assert "    Dependencies: 1" in output
        assert "  Variables: 1" in output

    def test_one_name_per_line(self) -> None:
        output = PlainTextReporter().report(make_closure(functions=("baseMap", "map")))
        lines = output.splitlines()
        assert "  baseMap" in lines
        assert "  map" in lines

    def test_report_listing_is_bare(self) -> None:
        output = PlainTextReporter().report_listing("coreFuncs", ("filter", "map"))
        assert output == "filter\nmap\n"

    def test_report_listing_empty(self) -> None:
        assert PlainTextReporter().report_listing("coreFuncs", ()) == ""
