"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lodash_build.domain.model.resolved_closure import ResolvedClosure


class ReporterProtocol(Protocol):
    """Protocol for closure and listing reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: ResolvedClosure) -> str:
        """Format a resolved closure as string.

        Args:
            result: Closure to format.

        Returns:
            Formatted string representation.
        """
        ...

    def report_listing(self, name: str, values: Sequence[str]) -> str:
        """Format one named listing as string.

        Args:
            name: Listing name (e.g. "funcs")
            values: Sorted listing entries

        Returns:
            Formatted string representation.
        """
        ...
