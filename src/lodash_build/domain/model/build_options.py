"""Build options that do not affect the dependency closure.

The source rewriter and minifier consume these; the closure engine
never looks at them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lodash_build.domain.exceptions.command import BuildOptionsError

if TYPE_CHECKING:
    from pathlib import Path

# Every accepted exports= value.
MODULE_FORMATS: frozenset[str] = frozenset(
    {"amd", "es", "global", "iojs", "node", "none", "npm", "umd"}
)

# exports= values that only make sense for modularized builds.
MODULARIZE_ONLY_FORMATS: frozenset[str] = frozenset({"es", "npm"})


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Output options of one build command.

    Invariants (FAIL-FIRST, raise BuildOptionsError):
    - exports values are known module formats
    - "es" and "npm" require modularize
    - development_only and production_only are mutually exclusive
    - stdout and output_path are mutually exclusive

    Attributes:
        preset: Selected preset name. None = no preset.
        exports: Requested export formats. Empty = library defaults.
        iife: Code replacing the IIFE that wraps lodash
        template: File pattern of templates to precompile
        settings: Template settings used when precompiling
        module_id: AMD module ID
        strict: Emit an ES strict mode build
        modularize: Split lodash into modules
        development_only: Write only the non-minified output (-d)
        production_only: Write only the minified output (-p)
        stdout: Write output to standard output (-c)
        silent: Skip status updates (-s)
        source_map: Generate a source map (-m)
        source_map_url: Optional source map URL given after -m
        output_path: Output path given with -o
    """

    preset: str | None = None
    exports: tuple[str, ...] = ()
    iife: str | None = None
    template: str | None = None
    settings: str | None = None
    module_id: str | None = None
    strict: bool = False
    modularize: bool = False
    development_only: bool = False
    production_only: bool = False
    stdout: bool = False
    silent: bool = False
    source_map: bool = False
    source_map_url: str | None = None
    output_path: Path | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        unknown = [value for value in self.exports if value not in MODULE_FORMATS]
        if unknown:
            raise BuildOptionsError(
                "exports",
                f"unknown module format(s) {', '.join(unknown)}; "
                f"expected one of {', '.join(sorted(MODULE_FORMATS))}",
            )

        if not self.modularize:
            restricted = sorted(MODULARIZE_ONLY_FORMATS.intersection(self.exports))
            if restricted:
                raise BuildOptionsError(
                    "exports",
                    f"{' & '.join(restricted)} may only be used with the modularize command",
                )

        if self.development_only and self.production_only:
            raise BuildOptionsError(
                "--development", "cannot be combined with --production"
            )

        if self.stdout and self.output_path is not None:
            raise BuildOptionsError("--stdout", "cannot be combined with --output")

        if self.source_map_url is not None and not self.source_map:
            raise BuildOptionsError("source_map_url", "requires --source-map")

    @property
    def module_format(self) -> str | None:
        """Module format of a modularized build: the first exports value."""
        if not self.modularize or not self.exports:
            return None
        return self.exports[0]

    @property
    def writes_development(self) -> bool:
        """Check if the non-minified output is written."""
        return not self.production_only

    @property
    def writes_production(self) -> bool:
        """Check if the minified output is written."""
        return not self.development_only
