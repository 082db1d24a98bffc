"""Requested names: a function name or a category label.

Raw strings are tagged once, at the edge, so a function that happens to
share a category label's spelling is never mistaken for the category.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class FunctionRef:
    """Reference to a function by canonical name or alias.

    Attributes:
        name: Function name (must not be empty)
    """

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CategoryRef:
    """Reference to a category of functions.

    Attributes:
        label: Category label as requested (must not be empty).
            Matching is case-insensitive, see CategoryMap.members.
    """

    label: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.label:
            raise ValueError("label must not be empty")

    def __str__(self) -> str:
        return self.label


Name: TypeAlias = FunctionRef | CategoryRef
