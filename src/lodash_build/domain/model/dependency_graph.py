"""Dependency graph store: the static, validated build tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from lodash_build.domain.exceptions.graph import GraphIntegrityError
from lodash_build.domain.model.alias_table import AliasTable
from lodash_build.domain.model.category_map import CategoryMap
from lodash_build.domain.model.graph import DiGraph
from lodash_build.domain.model.special_sets import SpecialSets

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

PRIVATE_PREFIX = "_"


@dataclass(frozen=True, slots=True)
class DependencyGraph:
    """Read-only dependency tables for one library source.

    Nodes: canonical function names (public functions, internal helpers,
    top-level snippets). Edges: A → B means A needs function B.
    Variables and object properties are leaves attached to functions.

    Constructed once per process and shared by every build request.
    Integrity is checked on construction; any violation raises
    GraphIntegrityError listing every problem found.

    Attributes:
        functions: Declared canonical function names
        func_graph: Function → functions it depends on
        var_deps: Function → free variables it references
        obj_deps: Function → lodash object properties it references
        categories: Category label → member names
        aliases: Alias ⟷ canonical relation
        special: Cross-cutting identifier lists
        non_functions: Public names that are objects, not functions
        public_properties: Public lodash properties outside the graph
        prototype_properties: Wrapper prototype properties beyond mixins
        support_keys: Keys of the lodash.support object
        template_settings_keys: Keys of lodash.templateSettings
        reserved_identifiers: Identifiers minifiers must never rename
    """

    functions: frozenset[str]
    func_graph: DiGraph[str]
    var_deps: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))
    obj_deps: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))
    categories: CategoryMap = field(default_factory=CategoryMap.empty)
    aliases: AliasTable = field(default_factory=AliasTable.empty)
    special: SpecialSets = field(default_factory=SpecialSets)
    non_functions: frozenset[str] = frozenset()
    public_properties: frozenset[str] = frozenset()
    prototype_properties: frozenset[str] = frozenset()
    support_keys: frozenset[str] = frozenset()
    template_settings_keys: frozenset[str] = frozenset()
    reserved_identifiers: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        problems = tuple(self._integrity_problems())
        if problems:
            raise GraphIntegrityError(problems)

    def _integrity_problems(self) -> Iterator[str]:
        functions = self.functions

        for target in sorted(self.func_graph.nodes - functions):
            sources = ", ".join(sorted(self.func_graph.predecessors(target)))
            yield f"func-dep target '{target}' of '{sources}' is not a declared function"

        for kind, table in (("var-dep", self.var_deps), ("obj-dep", self.obj_deps)):
            for name in sorted(set(table) - functions):
                yield f"{kind} source '{name}' is not a declared function"

        for alias, real in sorted(self.aliases):
            if not self.has_function(real):
                yield f"alias '{alias}' points to unknown function '{real}'"
            if alias in functions:
                yield f"alias '{alias}' shadows a declared function"

        for label in self.categories.labels:
            for member in self.categories.members(label):
                if self.aliases.canonical(member) not in functions:
                    yield f"category '{label}' member '{member}' is not a known function"

        universe = self.universe
        for list_name, members in sorted(self.special.function_lists().items()):
            for member in sorted(members - universe):
                yield f"{list_name} entry '{member}' is not a known function"

        for name in sorted(self.non_functions - functions):
            yield f"non-function '{name}' is not a declared graph node"

        variables = self.variables
        for name in sorted(self.special.complex_vars - variables):
            yield f"complex var '{name}' is not a referenced variable"

        for name in sorted(self.special.uninlinable_helpers - functions - variables):
            yield f"uninlinable helper '{name}' is neither a function nor a variable"

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def has_function(self, name: str) -> bool:
        """Check if name is a declared canonical function. O(1)."""
        return name in self.functions

    def func_deps(self, name: str) -> frozenset[str]:
        """Functions that name depends on directly. O(1)."""
        return self.func_graph.successors(name)

    def var_deps_of(self, name: str) -> frozenset[str]:
        """Variables that name references directly. O(1)."""
        return self.var_deps.get(name, frozenset())

    def obj_deps_of(self, name: str) -> frozenset[str]:
        """Object properties that name references directly. O(1)."""
        return self.obj_deps.get(name, frozenset())

    # -------------------------------------------------------------------------
    # Derived name sets
    # -------------------------------------------------------------------------

    @property
    def universe(self) -> frozenset[str]:
        """Every known function name: canonical names plus their aliases."""
        aliases = frozenset(alias for alias, real in self.aliases if real in self.functions)
        return self.functions | aliases

    @property
    def variables(self) -> frozenset[str]:
        """Every variable referenced by any function."""
        return frozenset(var for deps in self.var_deps.values() for var in deps)

    @property
    def properties(self) -> frozenset[str]:
        """Every object property referenced by any function."""
        return frozenset(prop for deps in self.obj_deps.values() for prop in deps)

    @property
    def public_names(self) -> frozenset[str]:
        """The public surface: category members, top-level names, their aliases.

        Names with the private prefix are never public.
        """
        canonical = {
            self.aliases.canonical(name)
            for name in self.categories.all_members() | self.special.top_level
        }
        names = set(canonical)
        for name in canonical:
            names.update(self.aliases.aliases_of(name))
        return frozenset(name for name in names if not name.startswith(PRIVATE_PREFIX))

    @property
    def callable_functions(self) -> frozenset[str]:
        """Declared functions that are callable (non-function objects removed)."""
        return self.functions - self.non_functions - self.variables - self.properties

    @classmethod
    def from_tables(
        cls,
        func_deps: Mapping[str, tuple[str, ...]],
        *,
        var_deps: Mapping[str, tuple[str, ...]] | None = None,
        obj_deps: Mapping[str, tuple[str, ...]] | None = None,
        categories: Mapping[str, tuple[str, ...]] | None = None,
        aliases: Mapping[str, tuple[str, ...]] | None = None,
        special: SpecialSets | None = None,
        **extras: frozenset[str],
    ) -> DependencyGraph:
        """Build and validate the store from plain tables.

        Args:
            func_deps: Function → function dependencies (keys declare functions)
            var_deps: Function → variable dependencies
            obj_deps: Function → object property dependencies
            categories: Category label → member names
            aliases: Canonical name → aliases
            special: Cross-cutting identifier lists
            **extras: Remaining frozenset fields (non_functions, support_keys, ...)

        Returns:
            Validated DependencyGraph

        Raises:
            GraphIntegrityError: If the tables are inconsistent
        """
        declared = frozenset(func_deps)
        edges = ((name, dep) for name, deps in func_deps.items() for dep in deps)

        try:
            alias_table = AliasTable.from_canonical(aliases or {})
            category_map = CategoryMap.from_names(categories or {})
        except ValueError as e:
            raise GraphIntegrityError([str(e)]) from e

        return cls(
            functions=declared,
            func_graph=DiGraph.from_edges(edges, extra_nodes=declared),
            var_deps=_freeze(var_deps),
            obj_deps=_freeze(obj_deps),
            categories=category_map,
            aliases=alias_table,
            special=special or SpecialSets(),
            **extras,
        )


def _freeze(table: Mapping[str, tuple[str, ...]] | None) -> Mapping[str, frozenset[str]]:
    """Freeze a name → names table, dropping empty entries."""
    frozen = {name: frozenset(deps) for name, deps in (table or {}).items() if deps}
    return MappingProxyType(frozen)
