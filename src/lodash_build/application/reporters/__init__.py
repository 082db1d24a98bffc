"""Reporters for resolved closures and listings.

Every reporter returns str; the caller decides the destination.
"""

from lodash_build.application.reporters.console import ConsoleConfig, ConsoleReporter
from lodash_build.application.reporters.json_reporter import JSONReporter
from lodash_build.application.reporters.plain_text import PlainTextReporter
from lodash_build.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
