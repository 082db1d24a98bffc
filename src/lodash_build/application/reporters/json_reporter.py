"""JSON reporter: ResolvedClosure → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lodash_build.domain.model.resolved_closure import ResolvedClosure


class JSONReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema matches ResolvedClosure 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: ResolvedClosure) -> str:
        """Format resolved closure as JSON string.

        Args:
            result: Closure to format.

        Returns:
            JSON string with functions, variables, properties and summary.
        """
        data = {
            "functions": list(result.functions),
            "variables": list(result.variables),
            "properties": list(result.properties),
            "seeds": sorted(result.seeds),
            "excluded": sorted(result.excluded),
            "summary": _build_summary(result),
        }
        return json.dumps(data, indent=self._indent)

    def report_listing(self, name: str, values: Sequence[str]) -> str:
        """Format one listing as a JSON object {name: [...]}."""
        return json.dumps({name: list(values)}, indent=self._indent)


def _build_summary(result: ResolvedClosure) -> dict[str, int]:
    """Build summary counts."""
    return {
        "functions": len(result.functions),
        "dependencies": len(result.dependencies),
        "variables": len(result.variables),
        "properties": len(result.properties),
        "excluded": len(result.excluded),
    }
