"""lodash-build command line interface."""

from lodash_build.presentation.cli.main import cli

__all__ = ["cli"]
