"""Tests for domain/model/alias_table.py."""

import pytest

from lodash_build.domain.model.alias_table import AliasTable


class TestAliasTableFromCanonical:
    """Tests for building the table from canonical → aliases."""

    def test_reverse_map_is_derived(self) -> None:
        table = AliasTable.from_canonical({"reduce": ("foldl", "inject"), "map": ("collect",)})
        assert table.alias_to_real == {"foldl": "reduce", "inject": "reduce", "collect": "map"}

    def test_empty_alias_lists_dropped(self) -> None:
        table = AliasTable.from_canonical({"identity": ()})
        assert "identity" not in table.real_to_alias
        assert len(table) == 0

    def test_empty(self) -> None:
        table = AliasTable.empty()
        assert len(table) == 0
        assert table.aliases == frozenset()


class TestAliasTableLookups:
    """Tests for alias lookups."""

    def test_canonical_of_alias(self) -> None:
        table = AliasTable.from_canonical({"forEach": ("each",)})
        assert table.canonical("each") == "forEach"

    def test_canonical_passes_through_other_names(self) -> None:
        table = AliasTable.from_canonical({"forEach": ("each",)})
        assert table.canonical("forEach") == "forEach"
        assert table.canonical("unknown") == "unknown"

    def test_aliases_of_keeps_declaration_order(self) -> None:
        table = AliasTable.from_canonical({"reduce": ("foldl", "inject")})
        assert table.aliases_of("reduce") == ("foldl", "inject")
        assert table.aliases_of("foldl") == ()

    def test_is_alias(self) -> None:
        table = AliasTable.from_canonical({"forEach": ("each",)})
        assert table.is_alias("each")
        assert not table.is_alias("forEach")

    def test_iter_yields_alias_canonical_pairs(self) -> None:
        table = AliasTable.from_canonical({"forEach": ("each",), "map": ("collect",)})
        assert sorted(table) == [("collect", "map"), ("each", "forEach")]


class TestAliasTableFailFirst:
    """Tests for FAIL-FIRST validation in AliasTable."""

    def test_self_alias_raises(self) -> None:
        with pytest.raises(ValueError, match="'map' is declared as its own alias"):
            AliasTable.from_canonical({"map": ("map",)})

    def test_alias_chain_raises(self) -> None:
        with pytest.raises(ValueError, match="alias 'each' of 'forEach' is itself aliased"):
            AliasTable.from_canonical({"forEach": ("each",), "each": ("eachy",)})

    def test_alias_mapped_twice_raises(self) -> None:
        with pytest.raises(ValueError, match="alias 'x' maps to both 'a' and 'b'"):
            AliasTable.from_canonical({"a": ("x",), "b": ("x",)})

    def test_reverse_map_drift_raises(self) -> None:
        with pytest.raises(ValueError, match="alias_to_real does not mirror real_to_alias"):
            AliasTable(real_to_alias={"forEach": ("each",)}, alias_to_real={})
