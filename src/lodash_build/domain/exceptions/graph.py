"""Dependency graph integrity exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lodash_build.domain.exceptions.base import LodashBuildError

if TYPE_CHECKING:
    from collections.abc import Iterable


class GraphIntegrityError(LodashBuildError):
    """Hand-authored dependency tables are inconsistent.

    Raised once, when the dependency graph store is constructed.
    This is a maintenance bug in the tables, never a user error.

    Attributes:
        problems: Every violated invariant, sorted (must not be empty)
    """

    def __init__(self, problems: Iterable[str]) -> None:
        collected = tuple(sorted(problems))
        # FAIL-FIRST validation
        if not collected:
            raise ValueError("problems must not be empty")

        self.problems = collected
        lines = "\n".join(f"  - {problem}" for problem in collected)
        super().__init__(f"Dependency graph has {len(collected)} problem(s):\n{lines}")
