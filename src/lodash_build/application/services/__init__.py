"""Application services for build configuration.

NameResolver and ClosureEngine compute what a build keeps;
ListingBuilder derives the named listings; CommandParser turns
command tokens into requests.
"""

from lodash_build.application.services.closure_engine import ClosureEngine
from lodash_build.application.services.command_parser import (
    CommandParser,
    ParsedCommand,
    split_values,
)
from lodash_build.application.services.listing import LISTING_NAMES, ListingBuilder
from lodash_build.application.services.resolver import NameResolver

__all__ = [
    "LISTING_NAMES",
    "ClosureEngine",
    "CommandParser",
    "ListingBuilder",
    "NameResolver",
    "ParsedCommand",
    "split_values",
]
