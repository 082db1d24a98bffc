"""Closure engine: build request → retained functions, variables, properties."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lodash_build.application.services.resolver import NameResolver
from lodash_build.domain.model.enums import BaseMode
from lodash_build.domain.model.resolved_closure import ResolvedClosure

if TYPE_CHECKING:
    from lodash_build.domain.model.build_request import BuildRequest
    from lodash_build.domain.model.dependency_graph import DependencyGraph

logger = logging.getLogger(__name__)


class ClosureEngine:
    """Computes the dependency closure of a build request.

    Pure: no I/O, no mutable state shared between calls. One engine can
    serve any number of requests, from any number of threads.

    Pipeline (fixed order):
        1. base set (include names, category labels, or default surface)
        2. category expansion of base, plus and minus operands
        3. plus: union
        4. minus: difference, aliases included; minus always wins
        5. transitive closure over func-deps, minus names blocked
        6. alias expansion and universe filter (unknown names dropped)

    Never raises for user input: unknown names, empty requests and
    contradictory plus/minus degrade to the nearest well-defined set.
    """

    def __init__(self, graph: DependencyGraph, resolver: NameResolver | None = None) -> None:
        """Initialize engine.

        Args:
            graph: Dependency graph store
            resolver: Name resolver. Default: NameResolver over graph.
        """
        self._graph = graph
        self._resolver = resolver or NameResolver(graph)

    @property
    def resolver(self) -> NameResolver:
        """Name resolver used for alias and category expansion."""
        return self._resolver

    def compute(self, request: BuildRequest) -> ResolvedClosure:
        """Compute the closure of one build request.

        Args:
            request: Build request

        Returns:
            Sorted, duplicate-free functions (canonical names and aliases),
            variables and properties to retain.
        """
        resolver = self._resolver
        graph = self._graph

        base = self._base_names(request)
        plus = resolver.expand(resolver.expand_categories(request.plus_names))
        minus = resolver.expand(resolver.expand_categories(request.minus_names))

        excluded = frozenset(minus)
        working = [name for name in (*base, *plus) if name not in excluded]

        seeds = frozenset(resolver.resolve_canonical(name) for name in working)
        seeds = (seeds & graph.functions) - excluded

        closure = graph.func_graph.reachable(seeds, blocked=excluded)

        variables: set[str] = set()
        properties: set[str] = set()
        for name in closure:
            variables.update(graph.var_deps_of(name))
            properties.update(graph.obj_deps_of(name))

        universe = graph.universe
        functions = frozenset(resolver.expand(sorted(closure))) & universe
        functions -= excluded

        logger.debug(
            "closure: %d seeds, %d functions, %d variables, %d properties, %d excluded",
            len(seeds),
            len(functions),
            len(variables),
            len(properties),
            len(excluded),
        )

        return ResolvedClosure(
            functions=tuple(sorted(functions)),
            variables=tuple(sorted(variables)),
            properties=tuple(sorted(properties)),
            seeds=seeds,
            excluded=excluded,
        )

    def _base_names(self, request: BuildRequest) -> tuple[str, ...]:
        """Step 1 + 2: base set with categories expanded."""
        if request.base_mode is BaseMode.DEFAULT:
            if request.default_names is not None:
                return request.default_names
            return tuple(sorted(self._graph.public_names))

        return self._resolver.expand_categories(request.base_names, request.scope)
