"""Tests for domain/model/build_options.py."""

from pathlib import Path

import pytest

from lodash_build.domain.exceptions import BuildOptionsError
from lodash_build.domain.model.build_options import BuildOptions


class TestBuildOptionsDefaults:
    """Tests for default options."""

    def test_writes_both_outputs(self) -> None:
        options = BuildOptions()
        assert options.writes_development
        assert options.writes_production
        assert options.module_format is None

    def test_development_only(self) -> None:
        options = BuildOptions(development_only=True)
        assert options.writes_development
        assert not options.writes_production

    def test_production_only(self) -> None:
        options = BuildOptions(production_only=True)
        assert not options.writes_development
        assert options.writes_production


class TestBuildOptionsModuleFormat:
    """Tests for modularized builds."""

    def test_first_exports_value_wins(self) -> None:
        options = BuildOptions(exports=("node", "amd"), modularize=True)
        assert options.module_format == "node"

    def test_no_module_format_without_modularize(self) -> None:
        options = BuildOptions(exports=("amd", "node"))
        assert options.module_format is None

    def test_npm_with_modularize(self) -> None:
        options = BuildOptions(exports=("npm",), modularize=True)
        assert options.module_format == "npm"


class TestBuildOptionsFailFirst:
    """Tests for FAIL-FIRST validation in BuildOptions."""

    def test_unknown_export_format_raises(self) -> None:
        with pytest.raises(BuildOptionsError, match="unknown module format\\(s\\) commonjs"):
            BuildOptions(exports=("commonjs",))

    def test_es_requires_modularize(self) -> None:
        with pytest.raises(BuildOptionsError, match="es may only be used with the modularize"):
            BuildOptions(exports=("es",))

    def test_development_and_production_raise(self) -> None:
        with pytest.raises(BuildOptionsError, match="cannot be combined with --production"):
            BuildOptions(development_only=True, production_only=True)

    def test_stdout_and_output_raise(self) -> None:
        with pytest.raises(BuildOptionsError, match="cannot be combined with --output"):
            BuildOptions(stdout=True, output_path=Path("lodash.custom.js"))

    def test_source_map_url_requires_source_map(self) -> None:
        with pytest.raises(BuildOptionsError, match="requires --source-map"):
            BuildOptions(source_map_url="foo.map")

    def test_error_carries_option(self) -> None:
        with pytest.raises(BuildOptionsError) as exc_info:
            BuildOptions(exports=("es",))
        assert exc_info.value.option == "exports"
