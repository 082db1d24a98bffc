"""pytest fixtures for build configuration tests.

Session-scoped: the dependency graph store is read-only and shared.
Override lodash_graph in a conftest.py to test against other tables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lodash_build.application.services import ClosureEngine, ListingBuilder, NameResolver
from lodash_build.infrastructure import load_lodash_graph, load_presets

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lodash_build.domain.model.dependency_graph import DependencyGraph
    from lodash_build.domain.model.preset import Preset


@pytest.fixture(scope="session")
def lodash_graph() -> DependencyGraph:
    """Validated lodash dependency graph store.

    Returns:
        The memoised DependencyGraph from load_lodash_graph()
    """
    return load_lodash_graph()


@pytest.fixture(scope="session")
def lodash_resolver(lodash_graph: DependencyGraph) -> NameResolver:
    """Name resolver over lodash_graph."""
    return NameResolver(lodash_graph)


@pytest.fixture(scope="session")
def lodash_engine(lodash_graph: DependencyGraph, lodash_resolver: NameResolver) -> ClosureEngine:
    """Closure engine over lodash_graph."""
    return ClosureEngine(lodash_graph, lodash_resolver)


@pytest.fixture(scope="session")
def lodash_listing(lodash_graph: DependencyGraph) -> ListingBuilder:
    """Listing builder over lodash_graph."""
    return ListingBuilder(lodash_graph)


@pytest.fixture(scope="session")
def lodash_presets(lodash_graph: DependencyGraph) -> Mapping[str, Preset]:
    """Preset profiles derived from lodash_graph."""
    return load_presets(lodash_graph)
