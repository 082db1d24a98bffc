"""Store construction: raw mapping tables → validated DependencyGraph.

The store is built and validated once per process. A malformed table
fails here, before any build request is served.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from lodash_build.domain.model.dependency_graph import DependencyGraph
from lodash_build.domain.model.preset import Preset
from lodash_build.domain.model.special_sets import SpecialSets
from lodash_build.infrastructure.data import lodash_mapping as mapping
from lodash_build.infrastructure.data import presets as preset_data

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@functools.cache
def load_lodash_graph() -> DependencyGraph:
    """Build the lodash dependency graph store.

    Memoised: every call returns the same read-only instance.

    Returns:
        Validated DependencyGraph

    Raises:
        GraphIntegrityError: If the mapping tables are inconsistent
    """
    special = SpecialSets(
        lax_semver=frozenset(mapping.LAX_SEMVER_DEPS),
        placeholder=frozenset(mapping.PLACEHOLDER_FUNCS),
        top_level=frozenset(mapping.TOP_LEVEL_DEPS),
        core=frozenset(mapping.CORE_FUNCS),
        inlinable=frozenset(mapping.INLINABLE_FUNCS),
        uninlinable_helpers=frozenset(mapping.UNINLINABLE_HELPERS),
        complex_vars=frozenset(mapping.COMPLEX_VARS),
        export_formats=mapping.EXPORT_FORMATS,
    )
    graph = DependencyGraph.from_tables(
        mapping.FUNC_DEPS,
        var_deps=mapping.VAR_DEPS,
        obj_deps=mapping.OBJ_DEPS,
        categories=mapping.CATEGORIES,
        aliases=mapping.ALIASES,
        special=special,
        non_functions=frozenset(mapping.NON_FUNCTIONS),
        public_properties=frozenset(mapping.PUBLIC_PROPERTIES),
        prototype_properties=frozenset(mapping.PROTOTYPE_PROPERTIES),
        support_keys=frozenset(mapping.SUPPORT_KEYS),
        template_settings_keys=frozenset(mapping.TEMPLATE_SETTINGS_KEYS),
        reserved_identifiers=frozenset(mapping.RESERVED_IDENTIFIERS),
    )
    logger.info(
        "loaded dependency graph: %d functions, %d aliases, %d categories",
        len(graph.functions),
        len(graph.aliases),
        len(graph.categories.labels),
    )
    return graph


def underscore_names(graph: DependencyGraph) -> tuple[str, ...]:
    """Public functions Underscore also provides.

    Public callable names minus lodash-only functions. An alias is kept
    only when its canonical function is kept too.
    """
    lodash_only = frozenset(preset_data.LODASH_ONLY_FUNCS)
    candidates = {
        name
        for name in graph.public_names - graph.non_functions - graph.special.top_level
        if name not in lodash_only
    }
    aliases = graph.aliases
    return tuple(
        sorted(
            name
            for name in candidates
            if not aliases.is_alias(name) or aliases.canonical(name) in candidates
        )
    )


def load_presets(graph: DependencyGraph | None = None) -> Mapping[str, Preset]:
    """Build the preset profiles.

    Args:
        graph: Store to derive profiles from. Default: load_lodash_graph().

    Returns:
        Preset name → Preset, sorted by name
    """
    graph = graph or load_lodash_graph()
    descriptions = preset_data.PRESET_DESCRIPTIONS
    names = {
        "backbone": tuple(sorted(preset_data.BACKBONE_DEPENDENCIES)),
        "core": tuple(sorted(graph.special.core)),
        "underscore": underscore_names(graph),
    }
    return {
        name: Preset(name=name, names=members, description=descriptions[name])
        for name, members in sorted(names.items())
    }
