"""Base exceptions for lodash_build domain."""


class LodashBuildError(Exception):
    """Root exception for all lodash_build errors.

    All domain exceptions inherit from this.
    Allows catching all lodash_build-specific errors.
    """
