"""Bidirectional alias relation."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


@dataclass(frozen=True, slots=True)
class AliasTable:
    """Alias ⟷ canonical name relation.

    Built from the canonical → aliases direction only; the reverse map is
    derived, so the two directions cannot drift apart.

    Invariants (FAIL-FIRST):
    - Every alias maps to exactly one canonical name
    - An alias is never itself a canonical name with aliases (no chains)
    - A canonical name is never its own alias

    Attributes:
        real_to_alias: Canonical name → aliases (declaration order)
        alias_to_real: Alias → canonical name (derived)
    """

    real_to_alias: Mapping[str, tuple[str, ...]]
    alias_to_real: Mapping[str, str]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        derived: dict[str, str] = {}
        for real, aliases in self.real_to_alias.items():
            for alias in aliases:
                if alias == real:
                    raise ValueError(f"'{real}' is declared as its own alias")
                if alias in self.real_to_alias:
                    raise ValueError(f"alias '{alias}' of '{real}' is itself aliased")
                if alias in derived:
                    raise ValueError(
                        f"alias '{alias}' maps to both '{derived[alias]}' and '{real}'"
                    )
                derived[alias] = real

        if derived != dict(self.alias_to_real):
            raise ValueError("alias_to_real does not mirror real_to_alias")

    def canonical(self, name: str) -> str:
        """Resolve alias to canonical name. Unknown names pass through. O(1)."""
        return self.alias_to_real.get(name, name)

    def aliases_of(self, name: str) -> tuple[str, ...]:
        """Get aliases of a canonical name. Empty for none. O(1)."""
        return self.real_to_alias.get(name, ())

    def is_alias(self, name: str) -> bool:
        """Check if name is an alias. O(1)."""
        return name in self.alias_to_real

    @property
    def aliases(self) -> frozenset[str]:
        """All alias names."""
        return frozenset(self.alias_to_real)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Iterate (alias, canonical) pairs."""
        return iter(self.alias_to_real.items())

    def __len__(self) -> int:
        return len(self.alias_to_real)

    @classmethod
    def from_canonical(cls, real_to_alias: Mapping[str, tuple[str, ...]]) -> AliasTable:
        """Build table from canonical → aliases declarations.

        Args:
            real_to_alias: Canonical name → aliases

        Returns:
            AliasTable with derived reverse map

        Raises:
            ValueError: If the declarations violate an invariant
        """
        frozen = {real: tuple(aliases) for real, aliases in real_to_alias.items() if aliases}
        derived = {alias: real for real, aliases in frozen.items() for alias in aliases}
        return cls(
            real_to_alias=MappingProxyType(frozen),
            alias_to_real=MappingProxyType(derived),
        )

    @classmethod
    def empty(cls) -> AliasTable:
        """Create table with no aliases."""
        return cls(real_to_alias=MappingProxyType({}), alias_to_real=MappingProxyType({}))
