"""Category label → member names."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from lodash_build.domain.model.name import CategoryRef, FunctionRef

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lodash_build.domain.model.name import Name


@dataclass(frozen=True, slots=True)
class CategoryMap:
    """Named groups of public functions.

    Members are usually FunctionRef. A CategoryRef member nests another
    category; members() flattens nesting and tolerates cycles.

    Invariants (FAIL-FIRST):
    - Labels are in capitalized form ("Array", not "array")

    Attributes:
        categories: Label → member names (declaration order)
    """

    categories: Mapping[str, tuple[Name, ...]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for label in self.categories:
            if not label:
                raise ValueError("category label must not be empty")
            if label != label.capitalize():
                raise ValueError(f"category label '{label}' must be capitalized")

    @staticmethod
    def normalize(label: str) -> str:
        """Normalize a requested label for lookup ("ARRAY" → "Array")."""
        return label.capitalize()

    def members(self, label: str) -> tuple[str, ...]:
        """Get member function names of a category, nested categories flattened.

        Args:
            label: Category label, any case

        Returns:
            Member function names in declaration order, without duplicates.
            Empty if the category is unknown.
        """
        result: dict[str, None] = {}
        self._collect(self.normalize(label), result, set())
        return tuple(result)

    def _collect(self, label: str, result: dict[str, None], seen: set[str]) -> None:
        if label in seen:
            return
        seen.add(label)
        for member in self.categories.get(label, ()):
            match member:
                case CategoryRef(label=nested):
                    self._collect(self.normalize(nested), result, seen)
                case FunctionRef(name=name):
                    result.setdefault(name, None)

    @property
    def labels(self) -> tuple[str, ...]:
        """All category labels, sorted."""
        return tuple(sorted(self.categories))

    def all_members(self) -> frozenset[str]:
        """Union of every category's member function names."""
        return frozenset(name for label in self.categories for name in self.members(label))

    @classmethod
    def from_names(cls, categories: Mapping[str, tuple[str, ...]]) -> CategoryMap:
        """Build map from plain member strings.

        A member string that exactly matches another declared label is
        tagged as a nested CategoryRef; everything else is a FunctionRef.

        Args:
            categories: Label → member strings

        Returns:
            CategoryMap with tagged members
        """
        labels = frozenset(categories)
        tagged: dict[str, tuple[Name, ...]] = {}
        for label, members in categories.items():
            tagged[label] = tuple(
                CategoryRef(member) if member in labels else FunctionRef(member)
                for member in members
            )
        return cls(categories=MappingProxyType(tagged))

    @classmethod
    def empty(cls) -> CategoryMap:
        """Create map with no categories."""
        return cls(categories=MappingProxyType({}))
