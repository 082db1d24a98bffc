"""Infrastructure: static tables and store construction."""

from lodash_build.infrastructure.loader import load_lodash_graph, load_presets, underscore_names

__all__ = [
    "load_lodash_graph",
    "load_presets",
    "underscore_names",
]
