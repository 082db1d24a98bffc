"""lodash_build domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, graphlib, collections
"""

from lodash_build.domain.exceptions import (
    BuildOptionsError,
    GraphIntegrityError,
    InvalidCommandError,
    LodashBuildError,
)
from lodash_build.domain.model import (
    AliasTable,
    BaseMode,
    BuildOptions,
    BuildRequest,
    CategoryMap,
    CategoryRef,
    DependencyGraph,
    DiGraph,
    FunctionRef,
    Name,
    Preset,
    ResolvedClosure,
    SpecialSets,
)

__all__ = [
    # Exceptions
    "LodashBuildError",
    "GraphIntegrityError",
    "InvalidCommandError",
    "BuildOptionsError",
    # Names
    "Name",
    "FunctionRef",
    "CategoryRef",
    # Store
    "DiGraph",
    "AliasTable",
    "CategoryMap",
    "SpecialSets",
    "DependencyGraph",
    # Requests and results
    "BaseMode",
    "BuildRequest",
    "BuildOptions",
    "Preset",
    "ResolvedClosure",
]
