"""Plain text reporter.

Stdlib-only reporter for simple text output, one name per line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lodash_build.domain.model.resolved_closure import ResolvedClosure

_RULE_WIDTH = 70


class PlainTextReporter:
    """Plain text reporter.

    Listings come out one entry per line with no decoration, so the
    output can be piped into other tools.
    """

    def report(self, result: ResolvedClosure) -> str:
        """Format resolved closure as plain text.

        Args:
            result: Closure to format.

        Returns:
            Sectioned text with a summary and one name per line.
        """
        lines: list[str] = ["=" * _RULE_WIDTH, "Build Closure", "=" * _RULE_WIDTH, ""]
        lines.append("Summary:")
        lines.append(f"  Functions: {len(result.functions)}")
        lines.append(f"    Requested: {len(result.seeds)}")
        lines.append(f"    Dependencies: {len(result.dependencies)}")
        lines.append(f"  Variables: {len(result.variables)}")
        lines.append(f"  Properties: {len(result.properties)}")
        lines.append(f"  Excluded: {len(result.excluded)}")

        sections = (
            ("Functions", result.functions),
            ("Variables", result.variables),
            ("Properties", result.properties),
        )
        for title, names in sections:
            lines.append("")
            lines.append("-" * _RULE_WIDTH)
            lines.append(f"{title} ({len(names)}):")
            lines.append("-" * _RULE_WIDTH)
            lines.extend(f"  {name}" for name in names)

        lines.append("=" * _RULE_WIDTH)
        return "\n".join(lines) + "\n"

    def report_listing(self, name: str, values: Sequence[str]) -> str:
        """Format one listing as one entry per line."""
        return "".join(f"{value}\n" for value in values)
