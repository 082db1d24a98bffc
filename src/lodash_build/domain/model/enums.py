"""Domain enumerations."""

from enum import Enum


class BaseMode(Enum):
    """How the base set of a build request is chosen.

    INCLUDE: explicit include= names (may also carry category refs)
    CATEGORY: category= labels only
    DEFAULT: nothing requested, use the public surface or preset names
    """

    INCLUDE = "include"
    CATEGORY = "category"
    DEFAULT = "default"
