"""Tests for infrastructure/loader.py against the real lodash tables."""

import logging

import pytest

from lodash_build.application.services import ClosureEngine, ListingBuilder, NameResolver
from lodash_build.domain.model.build_request import BuildRequest
from lodash_build.domain.model.graph import detect_cycles
from lodash_build.infrastructure import load_lodash_graph, load_presets, underscore_names
from lodash_build.infrastructure.data.presets import LODASH_ONLY_FUNCS


class TestLoadLodashGraph:
    """Tests for the memoised store."""

    def test_memoised(self) -> None:
        assert load_lodash_graph() is load_lodash_graph()

    def test_logs_once_when_built(self, caplog: pytest.LogCaptureFixture) -> None:
        load_lodash_graph.cache_clear()
        with caplog.at_level(logging.INFO, logger="lodash_build.infrastructure.loader"):
            load_lodash_graph()
            load_lodash_graph()
        messages = [r.getMessage() for r in caplog.records if "loaded dependency graph" in r.getMessage()]
        assert len(messages) == 1

    def test_categories(self) -> None:
        graph = load_lodash_graph()
        assert graph.categories.labels == (
            "Array",
            "Chain",
            "Collection",
            "Function",
            "Object",
            "String",
            "Utility",
        )

    def test_aliases(self) -> None:
        resolver = NameResolver(load_lodash_graph())
        assert resolver.resolve_canonical("each") == "forEach"
        assert resolver.resolve_canonical("head") == "first"
        assert resolver.aliases_of("reduce") == frozenset({"foldl", "inject"})

    def test_graph_has_cycles(self) -> None:
        assert detect_cycles(load_lodash_graph().func_graph) != ()

    def test_every_public_name_is_known(self) -> None:
        graph = load_lodash_graph()
        assert graph.public_names <= graph.universe

    def test_template_settings_is_not_a_function(self) -> None:
        listing = ListingBuilder(load_lodash_graph())
        assert "templateSettings" not in listing.funcs()
        assert "templateSettings" in load_lodash_graph().public_names


class TestLodashClosures:
    """Closure scenarios over the real tables."""

    def test_chain_category(self) -> None:
        graph = load_lodash_graph()
        result = ClosureEngine(graph).compute(BuildRequest.category("chain"))
        assert {"chain", "tap", "thru", "lodash"} <= set(result.functions)

    def test_array_category_is_union_of_member_closures(self) -> None:
        graph = load_lodash_graph()
        engine = ClosureEngine(graph)
        by_category = set(engine.compute(BuildRequest.category("Array")).functions)
        union: set[str] = set()
        for name in graph.categories.members("Array"):
            union.update(engine.compute(BuildRequest.include(name)).functions)
        assert by_category == union

    def test_default_minus_is_array(self) -> None:
        graph = load_lodash_graph()
        result = ClosureEngine(graph).compute(BuildRequest.default(minus=("isArray", "isArrayLike")))
        assert "isArray" not in result
        assert "isArrayLike" not in result
        assert "difference" in result

    def test_default_build_closes_over_dependencies(self) -> None:
        graph = load_lodash_graph()
        result = ClosureEngine(graph).compute(BuildRequest.default())
        for name in result.functions:
            for dep in graph.func_deps(graph.aliases.canonical(name)):
                assert dep in result


class TestLoadPresets:
    """Tests for preset profiles."""

    def test_preset_names(self) -> None:
        assert tuple(load_presets()) == ("backbone", "core", "underscore")

    def test_core_preset_is_core_list(self) -> None:
        graph = load_lodash_graph()
        assert frozenset(load_presets(graph)["core"].names) == graph.special.core

    def test_underscore_excludes_lodash_only(self) -> None:
        names = set(underscore_names(load_lodash_graph()))
        assert "map" in names
        assert "collect" in names
        assert not names & set(LODASH_ONLY_FUNCS)

    def test_underscore_drops_aliases_of_dropped_functions(self) -> None:
        names = underscore_names(load_lodash_graph())
        assert "callback" not in names
        assert "iteratee" not in names

    def test_underscore_is_sorted(self) -> None:
        names = underscore_names(load_lodash_graph())
        assert list(names) == sorted(names)

    def test_backbone_preset_builds(self) -> None:
        graph = load_lodash_graph()
        preset = load_presets(graph)["backbone"]
        result = ClosureEngine(graph).compute(BuildRequest(default_names=preset.names))
        assert {"bind", "each", "forEach", "mixin"} <= set(result.functions)
