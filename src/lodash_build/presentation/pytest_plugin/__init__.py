"""pytest plugin for lodash_build.

Provides fixtures for build configuration tests:
    lodash_graph: Validated dependency graph store
    lodash_resolver: NameResolver over lodash_graph
    lodash_engine: ClosureEngine over lodash_graph
    lodash_listing: ListingBuilder over lodash_graph
    lodash_presets: Preset profiles (core, backbone, underscore)
"""

# Register fixtures from fixtures module
from lodash_build.presentation.pytest_plugin.fixtures import (
    lodash_engine,
    lodash_graph,
    lodash_listing,
    lodash_presets,
    lodash_resolver,
)

__all__ = [
    "lodash_engine",
    "lodash_graph",
    "lodash_listing",
    "lodash_presets",
    "lodash_resolver",
]

