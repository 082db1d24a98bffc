"""Domain model entities."""

from lodash_build.domain.model.alias_table import AliasTable
from lodash_build.domain.model.build_options import MODULE_FORMATS, BuildOptions
from lodash_build.domain.model.build_request import BuildRequest
from lodash_build.domain.model.category_map import CategoryMap
from lodash_build.domain.model.dependency_graph import DependencyGraph
from lodash_build.domain.model.enums import BaseMode
from lodash_build.domain.model.graph import DiGraph, detect_cycles
from lodash_build.domain.model.name import CategoryRef, FunctionRef, Name
from lodash_build.domain.model.preset import Preset
from lodash_build.domain.model.resolved_closure import ResolvedClosure
from lodash_build.domain.model.special_sets import SpecialSets

__all__ = [
    # Graph
    "DiGraph",
    "detect_cycles",
    # Names
    "Name",
    "FunctionRef",
    "CategoryRef",
    # Store
    "AliasTable",
    "CategoryMap",
    "SpecialSets",
    "DependencyGraph",
    # Requests
    "BaseMode",
    "BuildRequest",
    "BuildOptions",
    "MODULE_FORMATS",
    "Preset",
    # Results
    "ResolvedClosure",
]
