"""lodash-build CLI entry point."""

from __future__ import annotations

import json
import logging
from typing import IO, TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler

from lodash_build import __version__
from lodash_build.application.reporters import (
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from lodash_build.application.services import (
    LISTING_NAMES,
    ClosureEngine,
    CommandParser,
    ListingBuilder,
    NameResolver,
)
from lodash_build.domain.exceptions import LodashBuildError
from lodash_build.domain.model.graph import detect_cycles
from lodash_build.infrastructure import load_lodash_graph, load_presets

if TYPE_CHECKING:
    from lodash_build.application.reporters import ReporterProtocol
    from lodash_build.domain.model.dependency_graph import DependencyGraph

logger = logging.getLogger(__name__)

console = Console()

FORMATS = ("console", "json", "text")


class CLIError(click.ClickException):
    """Build error shown in red on stderr, exit code 1."""

    def show(self, file: IO[Any] | None = None) -> None:
        err_console = Console(file=file, stderr=file is None)
        err_console.print(
            f"Error: {self.format_message()}",
            style="bold red",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def configure_logging(level: int) -> None:
    """Route all log records through one rich handler on stderr."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def _reporter(output_format: str) -> ReporterProtocol:
    match output_format:
        case "json":
            return JSONReporter()
        case "text":
            return PlainTextReporter()
        case _:
            return ConsoleReporter()


def _load_graph() -> DependencyGraph:
    try:
        return load_lodash_graph()
    except LodashBuildError as e:
        raise CLIError(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="lodash-build")
@click.option("--verbose", is_flag=True, help="Show debug logging")
@click.option("-s", "--silent", is_flag=True, help="Only show warnings and errors")
def cli(verbose: bool, silent: bool) -> None:
    """lodash-build: compute what a custom lodash build keeps.

    Build commands use the lodash vocabulary, for example:

        lodash-build resolve include=each,filter,map minus=isArray
    """
    if verbose and silent:
        raise click.UsageError("--verbose cannot be combined with --silent")
    if verbose:
        configure_logging(logging.DEBUG)
    elif silent:
        configure_logging(logging.WARNING)
    else:
        configure_logging(logging.INFO)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="console",
    show_default=True,
    help="Output format",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def resolve(output_format: str, tokens: tuple[str, ...]) -> None:
    """Resolve a build command to the functions, variables and properties kept.

    TOKENS are lodash build command words: a preset (core, backbone,
    underscore), include=, category=, plus=, minus=, exports=, iife=,
    template=, settings=, moduleId=, strict, modularize, -c, -d, -p,
    -s, -m [url], -o path.
    """
    graph = _load_graph()
    resolver = NameResolver(graph)
    parser = CommandParser(resolver, load_presets(graph))

    try:
        parsed = parser.parse(tokens)
    except LodashBuildError as e:
        raise CLIError(str(e)) from e

    if parsed.options.silent:
        logging.getLogger().setLevel(logging.WARNING)
    if parsed.options.module_format is not None:
        logger.info("modularized build, module format: %s", parsed.options.module_format)

    result = ClosureEngine(graph, resolver).compute(parsed.request)
    logger.info(
        "build keeps %d functions, %d variables, %d properties",
        len(result.functions),
        len(result.variables),
        len(result.properties),
    )
    click.echo(_reporter(output_format).report(result), nl=False)


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="text",
    show_default=True,
    help="Output format",
)
@click.argument("name", required=False, type=click.Choice(LISTING_NAMES))
def listing(output_format: str, name: str | None) -> None:
    """Print one derived listing, or every listing name with its size."""
    builder = ListingBuilder(_load_graph())

    if name is not None:
        click.echo(_reporter(output_format).report_listing(name, builder.get(name)), nl=False)
        return

    listings = builder.all_listings()
    if output_format == "json":
        click.echo(json.dumps({key: list(values) for key, values in listings.items()}, indent=2))
        return
    for key, values in listings.items():
        click.echo(f"{key}: {len(values)}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def categories(as_json: bool) -> None:
    """Print every category with its members."""
    graph = _load_graph()
    members = {label: graph.categories.members(label) for label in graph.categories.labels}

    if as_json:
        click.echo(json.dumps({label: list(names) for label, names in members.items()}, indent=2))
        return
    for label, names in members.items():
        console.print(f"[bold]{label}[/bold] ({len(names)})")
        console.print("  " + ", ".join(names), markup=False, highlight=False)


@cli.command()
def check() -> None:
    """Validate the dependency tables and print their size."""
    graph = _load_graph()
    cycles = detect_cycles(graph.func_graph)

    console.print("[green]Dependency graph OK[/green]")
    console.print(f"  functions:   {len(graph.functions)}")
    console.print(f"  edges:       {graph.func_graph.edge_count}")
    console.print(f"  aliases:     {len(graph.aliases)}")
    console.print(f"  categories:  {len(graph.categories.labels)}")
    console.print(f"  variables:   {len(graph.variables)}")
    console.print(f"  properties:  {len(graph.properties)}")
    console.print(f"  public:      {len(graph.public_names)}")
    for cycle in cycles:
        console.print(
            f"  cycle:       {', '.join(sorted(cycle))}", markup=False, highlight=False
        )
