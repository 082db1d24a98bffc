"""Build command exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lodash_build.domain.exceptions.base import LodashBuildError

if TYPE_CHECKING:
    from collections.abc import Iterable


class InvalidCommandError(LodashBuildError):
    """Unrecognized build command arguments.

    Attributes:
        arguments: Offending arguments in the order given (must not be empty)
    """

    def __init__(self, arguments: Iterable[str]) -> None:
        collected = tuple(arguments)
        # FAIL-FIRST validation
        if not collected:
            raise ValueError("arguments must not be empty")

        self.arguments = collected
        noun = "argument" if len(collected) == 1 else "arguments"
        super().__init__(f"Invalid {noun} passed: {', '.join(collected)}")


class BuildOptionsError(LodashBuildError):
    """Contradictory or unsupported build options.

    Attributes:
        option: Name of the offending option (must not be empty)
        reason: Why the option is rejected (must not be empty)
    """

    def __init__(self, option: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(f"Invalid option '{option}': {reason}")
