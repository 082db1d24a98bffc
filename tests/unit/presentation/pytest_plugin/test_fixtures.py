"""Tests for presentation/pytest_plugin fixtures."""

from collections.abc import Mapping

from lodash_build.application.services import ClosureEngine, ListingBuilder, NameResolver
from lodash_build.domain.model.build_request import BuildRequest
from lodash_build.domain.model.dependency_graph import DependencyGraph
from lodash_build.domain.model.preset import Preset
from lodash_build.infrastructure import load_lodash_graph
from lodash_build.presentation.pytest_plugin.fixtures import (  # noqa: F401
    lodash_engine,
    lodash_graph,
    lodash_listing,
    lodash_presets,
    lodash_resolver,
)


class TestPluginFixtures:
    """Tests for the session fixtures."""

    def test_graph_is_loaded_store(self, lodash_graph: DependencyGraph) -> None:
        assert isinstance(lodash_graph, DependencyGraph)
        assert lodash_graph.has_function("chain")
        assert load_lodash_graph().functions == lodash_graph.functions

    def test_resolver(self, lodash_resolver: NameResolver) -> None:
        assert lodash_resolver.resolve_canonical("each") == "forEach"

    def test_engine(self, lodash_engine: ClosureEngine) -> None:
        result = lodash_engine.compute(BuildRequest.include("tap"))
        assert result.functions == ("tap",)

    def test_listing(self, lodash_listing: ListingBuilder) -> None:
        assert lodash_listing.top_level_names() == ("main",)

    def test_presets(self, lodash_presets: Mapping[str, Preset]) -> None:
        assert set(lodash_presets) == {"backbone", "core", "underscore"}

    def test_engine_shares_resolver(
        self, lodash_engine: ClosureEngine, lodash_resolver: NameResolver
    ) -> None:
        assert lodash_engine.resolver is lodash_resolver
