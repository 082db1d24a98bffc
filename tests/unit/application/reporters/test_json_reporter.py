"""Tests for JSONReporter."""

import json

from lodash_build.application.reporters.json_reporter import JSONReporter
from tests.factories import make_closure


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_schema(self) -> None:
        closure = make_closure(
            functions=("baseMap", "map"),
            variables=("reWords",),
            properties=("support",),
            seeds=frozenset({"map"}),
            excluded=frozenset({"keys"}),
        )
        data = json.loads(JSONReporter().report(closure))
        assert data["functions"] == ["baseMap", "map"]
        assert data["variables"] == ["reWords"]
        assert data["properties"] == ["support"]
        assert data["seeds"] == ["map"]
        assert data["excluded"] == ["keys"]
        assert data["summary"] == {
            "functions": 2,
            "dependencies": 1,
            "variables": 1,
            "properties": 1,
            "excluded": 1,
        }

    def test_compact_output(self) -> None:
        output = JSONReporter(indent=None).report(make_closure())
        assert "\n" not in output

    def test_report_listing(self) -> None:
        output = JSONReporter().report_listing("exports", ("amd", "node"))
        assert json.loads(output) == {"exports": ["amd", "node"]}
