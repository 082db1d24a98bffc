"""Domain exceptions."""

from lodash_build.domain.exceptions.base import LodashBuildError
from lodash_build.domain.exceptions.command import BuildOptionsError, InvalidCommandError
from lodash_build.domain.exceptions.graph import GraphIntegrityError

__all__ = [
    "LodashBuildError",
    "GraphIntegrityError",
    "InvalidCommandError",
    "BuildOptionsError",
]
