"""Preset build profiles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Preset:
    """Named build profile.

    A preset supplies the base set when no include=/category= is given,
    and limits category expansion to its own names.

    Attributes:
        name: Command word selecting the preset (must not be empty)
        names: Function names of the profile (must not be empty)
        description: One-line help text
    """

    name: str
    names: tuple[str, ...]
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.names:
            raise ValueError(f"preset '{self.name}' must name at least one function")
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"preset '{self.name}' has duplicate names")

    @property
    def scope(self) -> frozenset[str]:
        """Names category expansion is limited to."""
        return frozenset(self.names)
