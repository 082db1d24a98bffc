"""Tests for domain/model/preset.py and special_sets.py."""

import pytest

from lodash_build.domain.model.preset import Preset
from lodash_build.domain.model.special_sets import SpecialSets


class TestPreset:
    """Tests for Preset."""

    def test_scope_is_names(self) -> None:
        preset = Preset(name="core", names=("map", "filter"))
        assert preset.scope == frozenset({"map", "filter"})

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            Preset(name="", names=("map",))

    def test_no_names_raises(self) -> None:
        with pytest.raises(ValueError, match="preset 'core' must name at least one function"):
            Preset(name="core", names=())

    def test_duplicate_names_raise(self) -> None:
        with pytest.raises(ValueError, match="preset 'core' has duplicate names"):
            Preset(name="core", names=("map", "map"))


class TestSpecialSets:
    """Tests for SpecialSets."""

    def test_defaults_are_empty(self) -> None:
        special = SpecialSets()
        assert special.core == frozenset()
        assert special.export_formats == ()

    def test_function_lists(self) -> None:
        special = SpecialSets(core=frozenset({"map"}), complex_vars=frozenset({"reWords"}))
        lists = special.function_lists()
        assert lists["core"] == frozenset({"map"})
        assert "complex_vars" not in lists

    def test_inlinable_overlap_raises(self) -> None:
        with pytest.raises(ValueError, match="names both inlinable and uninlinable"):
            SpecialSets(
                inlinable=frozenset({"baseEach"}),
                uninlinable_helpers=frozenset({"baseEach"}),
            )

    def test_duplicate_export_formats_raise(self) -> None:
        with pytest.raises(ValueError, match="duplicate export formats"):
            SpecialSets(export_formats=("amd", "amd"))
