"""Resolved closure: the identifiers one build must retain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolvedClosure:
    """Result of one closure computation.

    Handed to the source rewriter, which decides how to strip or keep
    source text for each identifier. Request-scoped; never shared.

    Invariants (FAIL-FIRST):
    - functions, variables and properties are sorted and duplicate-free
    - No excluded name appears in functions

    Attributes:
        functions: Retained canonical names plus their aliases
        variables: Free variables referenced by retained functions
        properties: Object properties referenced by retained functions
        seeds: Canonical names requested before the transitive walk
        excluded: Names removed by minus (canonical names and aliases)
    """

    functions: tuple[str, ...]
    variables: tuple[str, ...]
    properties: tuple[str, ...]
    seeds: frozenset[str] = frozenset()
    excluded: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for field_name in ("functions", "variables", "properties"):
            values = getattr(self, field_name)
            if list(values) != sorted(set(values)):
                raise ValueError(f"{field_name} must be sorted and duplicate-free")

        leaked = self.excluded.intersection(self.functions)
        if leaked:
            raise ValueError(f"excluded names present in functions: {sorted(leaked)}")

    def __contains__(self, name: object) -> bool:
        """Check if a function name (canonical or alias) is retained."""
        return name in self.functions

    @property
    def is_empty(self) -> bool:
        """Check if nothing is retained."""
        return not (self.functions or self.variables or self.properties)

    @property
    def dependencies(self) -> frozenset[str]:
        """Functions pulled in transitively rather than requested."""
        return frozenset(self.functions) - self.seeds

    @classmethod
    def empty(cls) -> ResolvedClosure:
        """Create closure that retains nothing."""
        return cls(functions=(), variables=(), properties=())
