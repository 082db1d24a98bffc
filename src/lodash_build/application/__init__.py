"""Application layer for build configuration.

- services: name resolution, closure computation, listings, command parsing
- reporters: output formatting (Console, JSON, PlainText)
"""

from lodash_build.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
    ReporterProtocol,
)
from lodash_build.application.services import (
    ClosureEngine,
    CommandParser,
    ListingBuilder,
    NameResolver,
    ParsedCommand,
    split_values,
)

__all__ = [
    # Services
    "ClosureEngine",
    "CommandParser",
    "ListingBuilder",
    "NameResolver",
    "ParsedCommand",
    "split_values",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
