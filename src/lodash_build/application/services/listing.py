"""Derived listings over the dependency graph store.

Each listing is recomputed from the read-only store on every call and
returned as a sorted tuple of strings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from lodash_build.domain.model.dependency_graph import DependencyGraph
    from lodash_build.domain.model.resolved_closure import ResolvedClosure

logger = logging.getLogger(__name__)

# Listing names, as the build scripts and packaging refer to them.
LISTING_NAMES: tuple[str, ...] = (
    "funcs",
    "varDeps",
    "objDeps",
    "categories",
    "includes",
    "uninlinables",
    "minificationWhitelist",
    "laxSemVerDeps",
    "placeholderFuncs",
    "topLevelDeps",
    "coreFuncs",
    "complexVars",
    "exports",
)


def _sorted(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(names)))


class ListingBuilder:
    """Builds the named listings consumed by the rewriter, tests and packaging."""

    def __init__(self, graph: DependencyGraph) -> None:
        """Initialize builder.

        Args:
            graph: Dependency graph store
        """
        self._graph = graph

    # -------------------------------------------------------------------------
    # Graph listings
    # -------------------------------------------------------------------------

    def funcs(self) -> tuple[str, ...]:
        """All callable functions: graph nodes minus variables, properties, objects."""
        return _sorted(self._graph.callable_functions)

    def var_deps(self) -> tuple[str, ...]:
        """Every variable dependency of any function."""
        return _sorted(self._graph.variables)

    def obj_deps(self) -> tuple[str, ...]:
        """Every object property dependency of any function."""
        return _sorted(self._graph.properties)

    def categories(self) -> tuple[str, ...]:
        """All category labels."""
        return self._graph.categories.labels

    def default_includes(self) -> tuple[str, ...]:
        """Functions included when nothing is excluded.

        Callable functions that are on the public surface (aliases
        resolved to their canonical names).
        """
        aliases = self._graph.aliases
        public = {aliases.canonical(name) for name in self._graph.public_names}
        return _sorted(public & self._graph.callable_functions)

    def uninlinable_names(self, closure: ResolvedClosure | None = None) -> tuple[str, ...]:
        """Identifiers that must stay standalone rather than be inlined.

        (included names - inlinable names) ∪ template-setting keys
        ∪ hard-coded helpers.

        Args:
            closure: Build whose functions count as included.
                None = default_includes().
        """
        if closure is None:
            included = frozenset(self.default_includes())
        else:
            included = frozenset(closure.functions)

        special = self._graph.special
        return _sorted(
            (included - special.inlinable)
            | self._graph.template_settings_keys
            | special.uninlinable_helpers
        )

    def minification_whitelist(self) -> tuple[str, ...]:
        """Identifiers minifiers must not rename.

        Public property names ∪ prototype property names ∪ support keys
        ∪ template-setting keys ∪ reserved identifiers.
        """
        graph = self._graph
        names = (
            graph.public_names
            | graph.public_properties
            | graph.prototype_properties
            | graph.support_keys
            | graph.template_settings_keys
            | graph.reserved_identifiers
        )
        logger.debug("minification whitelist: %d names", len(names))
        return _sorted(names)

    # -------------------------------------------------------------------------
    # Special set pass-throughs
    # -------------------------------------------------------------------------

    def lax_semver_names(self) -> tuple[str, ...]:
        """Dependencies whose changes do not warrant a minor version bump."""
        return _sorted(self._graph.special.lax_semver)

    def placeholder_names(self) -> tuple[str, ...]:
        """Functions that support argument placeholders."""
        return _sorted(self._graph.special.placeholder)

    def top_level_names(self) -> tuple[str, ...]:
        """Dependencies only valid at the top level."""
        return _sorted(self._graph.special.top_level)

    def core_names(self) -> tuple[str, ...]:
        """Functions shipped in the "core" build."""
        return _sorted(self._graph.special.core)

    def complex_vars(self) -> tuple[str, ...]:
        """Variables with complex assignments."""
        return _sorted(self._graph.special.complex_vars)

    def export_formats(self) -> tuple[str, ...]:
        """Default ways to export the lodash function."""
        return _sorted(self._graph.special.export_formats)

    def get(self, name: str) -> tuple[str, ...]:
        """Get one listing by name.

        Args:
            name: One of LISTING_NAMES

        Raises:
            KeyError: If name is not a listing
        """
        getters = self._getters()
        if name not in getters:
            raise KeyError(f"unknown listing '{name}'; expected one of {', '.join(LISTING_NAMES)}")
        return getters[name]()

    def all_listings(self) -> dict[str, tuple[str, ...]]:
        """Every listing by name, in LISTING_NAMES order."""
        return {name: getter() for name, getter in self._getters().items()}

    def _getters(self) -> dict[str, Callable[[], tuple[str, ...]]]:
        return {
            "funcs": self.funcs,
            "varDeps": self.var_deps,
            "objDeps": self.obj_deps,
            "categories": self.categories,
            "includes": self.default_includes,
            "uninlinables": self.uninlinable_names,
            "minificationWhitelist": self.minification_whitelist,
            "laxSemVerDeps": self.lax_semver_names,
            "placeholderFuncs": self.placeholder_names,
            "topLevelDeps": self.top_level_names,
            "coreFuncs": self.core_names,
            "complexVars": self.complex_vars,
            "exports": self.export_formats,
        }
