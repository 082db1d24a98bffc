"""Named subsets of identifiers with cross-cutting build semantics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpecialSets:
    """Cross-cutting identifier lists.

    Attributes:
        lax_semver: Changing these does not require a minor version bump
        placeholder: Functions that accept argument placeholders
        top_level: Dependencies only valid at the top level of the source
        core: Functions shipped in the "core" build
        inlinable: Included functions small enough to inline into callers
        uninlinable_helpers: Helpers and variables that always stay standalone
        complex_vars: Variables whose assignments span several statements
        export_formats: Default ways to export the lodash function
    """

    lax_semver: frozenset[str] = frozenset()
    placeholder: frozenset[str] = frozenset()
    top_level: frozenset[str] = frozenset()
    core: frozenset[str] = frozenset()
    inlinable: frozenset[str] = frozenset()
    uninlinable_helpers: frozenset[str] = frozenset()
    complex_vars: frozenset[str] = frozenset()
    export_formats: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        overlap = self.inlinable & self.uninlinable_helpers
        if overlap:
            raise ValueError(f"names both inlinable and uninlinable: {sorted(overlap)}")
        if len(set(self.export_formats)) != len(self.export_formats):
            raise ValueError(f"duplicate export formats: {self.export_formats}")

    def function_lists(self) -> dict[str, frozenset[str]]:
        """Lists whose members must be function names or aliases.

        Returns:
            List name → members, for graph integrity checks
        """
        return {
            "lax_semver": self.lax_semver,
            "placeholder": self.placeholder,
            "top_level": self.top_level,
            "core": self.core,
            "inlinable": self.inlinable,
        }
