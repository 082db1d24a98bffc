"""Tests for presentation/cli/main.py."""

import json

from click.testing import CliRunner

from lodash_build import __version__
from lodash_build.presentation.cli.main import cli


def invoke(*args: str):
    """Invoke the CLI with logging silenced so output is only the report."""
    return CliRunner().invoke(cli, ["--silent", *args])


class TestCliGroup:
    """Tests for group-level options."""

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_and_silent_conflict(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "--silent", "check"])
        assert result.exit_code == 2


class TestResolveCommand:
    """Tests for lodash-build resolve."""

    def test_json_output(self) -> None:
        result = invoke("resolve", "--format", "json", "include=chain")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "chain" in data["functions"]
        assert data["seeds"] == ["chain"]

    def test_text_output(self) -> None:
        result = invoke("resolve", "--format", "text", "include=each")
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert "  each" in lines
        assert "  forEach" in lines

    def test_console_output(self) -> None:
        result = invoke("resolve", "category=chain")
        assert result.exit_code == 0, result.output
        assert "BUILD CLOSURE" in result.output

    def test_build_flags_pass_through(self) -> None:
        result = invoke("resolve", "--format", "json", "-d", "-o", "dist/lodash.js", "include=map")
        assert result.exit_code == 0, result.output
        assert "map" in json.loads(result.output)["functions"]

    def test_minus_wins(self) -> None:
        result = invoke("resolve", "--format", "json", "include=map", "minus=map")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "map" not in data["functions"]
        assert "collect" in data["excluded"]

    def test_preset(self) -> None:
        result = invoke("resolve", "--format", "json", "backbone")
        assert result.exit_code == 0, result.output
        assert "bind" in json.loads(result.output)["functions"]

    def test_invalid_token(self) -> None:
        result = invoke("resolve", "bogus")
        assert result.exit_code == 1
        assert "Invalid argument passed: bogus" in result.output

    def test_contradictory_options(self) -> None:
        result = invoke("resolve", "-c", "-o", "lodash.js")
        assert result.exit_code == 1
        assert "cannot be combined with --output" in result.output


class TestListingCommand:
    """Tests for lodash-build listing."""

    def test_every_listing_with_size(self) -> None:
        result = invoke("listing")
        assert result.exit_code == 0, result.output
        assert "funcs: " in result.output
        assert "minificationWhitelist: " in result.output

    def test_one_listing_as_text(self) -> None:
        result = invoke("listing", "exports")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["amd", "global", "iojs", "node", "umd"]

    def test_one_listing_as_json(self) -> None:
        result = invoke("listing", "--format", "json", "topLevelDeps")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"topLevelDeps": ["main"]}

    def test_all_listings_as_json(self) -> None:
        result = invoke("listing", "--format", "json")
        assert result.exit_code == 0, result.output
        assert "includes" in json.loads(result.output)

    def test_unknown_listing(self) -> None:
        result = invoke("listing", "nope")
        assert result.exit_code == 2


class TestCategoriesCommand:
    """Tests for lodash-build categories."""

    def test_text(self) -> None:
        result = invoke("categories")
        assert result.exit_code == 0, result.output
        assert "Chain" in result.output
        assert "thru" in result.output

    def test_json(self) -> None:
        result = invoke("categories", "--json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "tap" in data["Chain"]


class TestCheckCommand:
    """Tests for lodash-build check."""

    def test_real_tables_pass(self) -> None:
        result = invoke("check")
        assert result.exit_code == 0, result.output
        assert "Dependency graph OK" in result.output
        assert "functions:" in result.output
        assert "cycle:" in result.output
