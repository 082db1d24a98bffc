"""Console reporter: ResolvedClosure → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.columns import Columns
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lodash_build.domain.model.resolved_closure import ResolvedClosure


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_variables: Show the variables section.
        show_properties: Show the object properties section.
        width: Console width in columns.
    """

    show_variables: bool = True
    show_properties: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ResolvedClosure) -> str:
        """Format resolved closure as rich formatted string.

        Args:
            result: Closure to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = self._console(output)

        self._render_summary(console, result)
        self._render_names(console, "FUNCTIONS", result.functions)

        if self._config.show_variables:
            self._render_names(console, "VARIABLES", result.variables)
        if self._config.show_properties:
            self._render_names(console, "PROPERTIES", result.properties)

        if result.excluded:
            self._render_names(console, "EXCLUDED", tuple(sorted(result.excluded)), style="red")

        return output.getvalue()

    def report_listing(self, name: str, values: Sequence[str]) -> str:
        """Format one listing as rich formatted string."""
        output = StringIO()
        console = self._console(output)
        self._render_names(console, name, values)
        return output.getvalue()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

    def _render_summary(self, console: Console, result: ResolvedClosure) -> None:
        """Render header with counts."""
        console.print()
        console.rule("[bold]BUILD CLOSURE[/bold]")
        console.print()

        table = Table(show_header=True, header_style="bold")
        table.add_column("Kind")
        table.add_column("Count", justify="right")
        table.add_row("functions", str(len(result.functions)))
        table.add_row("  requested", str(len(result.seeds)))
        table.add_row("  dependencies", str(len(result.dependencies)))
        table.add_row("variables", str(len(result.variables)))
        table.add_row("properties", str(len(result.properties)))
        table.add_row("excluded", str(len(result.excluded)))
        console.print(table)
        console.print()

    def _render_names(
        self,
        console: Console,
        title: str,
        names: Sequence[str],
        *,
        style: str = "cyan",
    ) -> None:
        """Render one titled block of names in columns."""
        console.print(f"[bold]{title}[/bold] ({len(names)})")
        if names:
            console.print(Columns([f"[{style}]{name}[/{style}]" for name in names], padding=(0, 2)))
        else:
            console.print("  [dim](none)[/dim]")
        console.print()
