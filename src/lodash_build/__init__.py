"""lodash_build - dependency closure resolver for custom lodash builds."""

__version__ = "0.1.0"

from lodash_build.application.services import ClosureEngine, ListingBuilder, NameResolver
from lodash_build.domain.model import BuildRequest, ResolvedClosure
from lodash_build.infrastructure import load_lodash_graph, load_presets

__all__ = [
    "BuildRequest",
    "ClosureEngine",
    "ListingBuilder",
    "NameResolver",
    "ResolvedClosure",
    "__version__",
    "load_lodash_graph",
    "load_presets",
]
