"""Name resolution: aliases, categories, and raw string tagging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lodash_build.domain.model.name import CategoryRef, FunctionRef

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from lodash_build.domain.model.dependency_graph import DependencyGraph
    from lodash_build.domain.model.name import Name

logger = logging.getLogger(__name__)


class NameResolver:
    """Resolves aliases and category labels against a dependency graph.

    Stateless apart from the read-only graph. Never raises for unknown
    names: they pass through unchanged and are filtered later against
    the function universe.
    """

    def __init__(self, graph: DependencyGraph) -> None:
        """Initialize resolver.

        Args:
            graph: Dependency graph store to resolve against
        """
        self._graph = graph

    @property
    def graph(self) -> DependencyGraph:
        """Dependency graph store this resolver reads."""
        return self._graph

    def resolve_canonical(self, name: str) -> str:
        """Get canonical name for an alias; other names pass through."""
        return self._graph.aliases.canonical(name)

    def aliases_of(self, canonical_name: str) -> frozenset[str]:
        """Get aliases of a canonical name. Empty set for none."""
        return frozenset(self._graph.aliases.aliases_of(canonical_name))

    def expand(self, names: Sequence[str]) -> tuple[str, ...]:
        """Expand each name to its canonical name followed by all its aliases.

        Input order is kept and duplicates are allowed.

        Example:
            expand(["each", "map"]) → ("forEach", "each", "map", "collect")
        """
        result: list[str] = []
        for name in names:
            real = self.resolve_canonical(name)
            result.append(real)
            result.extend(self._graph.aliases.aliases_of(real))
        return tuple(result)

    def category_members(self, label: str) -> tuple[str, ...]:
        """Get member names of a category (label is capitalized first).

        Returns:
            Member canonical names, or empty if the category is unknown
        """
        return self._graph.categories.members(label)

    def parse(self, token: str) -> Name:
        """Tag a raw string as a function or a category.

        Only an exact match of a known category label ("Chain") is a
        category; everything else is a function name.
        """
        if token in self._graph.categories.categories:
            return CategoryRef(token)
        return FunctionRef(token)

    def parse_all(self, tokens: Iterable[str]) -> tuple[Name, ...]:
        """Tag every non-empty raw string, see parse()."""
        return tuple(self.parse(token) for token in tokens if token)

    def expand_categories(
        self,
        names: Iterable[Name],
        scope: frozenset[str] | None = None,
    ) -> tuple[str, ...]:
        """Replace category refs by their member function names.

        Idempotent: a sequence without category refs comes back unchanged.
        Nested categories are flattened by CategoryMap.members.

        Args:
            names: Function and category refs
            scope: If given, category members outside it are dropped.
                Explicit function refs are never limited by scope.

        Returns:
            Function names in input order (duplicates kept)
        """
        scope_canonical = (
            None if scope is None else frozenset(self.resolve_canonical(n) for n in scope)
        )

        result: list[str] = []
        for name in names:
            match name:
                case CategoryRef(label=label):
                    members = self.category_members(label)
                    if scope_canonical is not None:
                        members = tuple(
                            m for m in members if self.resolve_canonical(m) in scope_canonical
                        )
                    logger.debug("category %s expanded to %d names", label, len(members))
                    result.extend(members)
                case FunctionRef(name=function):
                    result.append(function)
        return tuple(result)
