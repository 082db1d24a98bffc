"""Build command parser: lodash-style tokens → BuildRequest + BuildOptions.

Accepts the original command vocabulary, for example::

    core include=each,filter,map plus=Chain minus=tap exports=amd -o dist/lodash.js

Comma-separated values are split here; the closure engine only ever
sees lists of names.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lodash_build.domain.exceptions.command import BuildOptionsError, InvalidCommandError
from lodash_build.domain.model.build_options import BuildOptions
from lodash_build.domain.model.build_request import BuildRequest
from lodash_build.domain.model.enums import BaseMode
from lodash_build.domain.model.name import CategoryRef

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from lodash_build.application.services.resolver import NameResolver
    from lodash_build.domain.model.name import Name
    from lodash_build.domain.model.preset import Preset

logger = logging.getLogger(__name__)

_RE_SPLIT = re.compile(r",\s*")

_KEY_VALUE_OPTIONS = frozenset(
    {"include", "category", "plus", "minus", "exports", "iife", "template", "settings", "moduleId"}
)

_FLAG_WORDS = frozenset({"strict", "modularize"})

_SHORT_FLAGS: dict[str, str] = {
    "-c": "stdout",
    "--stdout": "stdout",
    "-d": "development_only",
    "--development": "development_only",
    "-p": "production_only",
    "--production": "production_only",
    "-s": "silent",
    "--silent": "silent",
}

_SOURCE_MAP_FLAGS = frozenset({"-m", "--source-map"})
_OUTPUT_FLAGS = frozenset({"-o", "--output"})


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """A fully parsed build command.

    Attributes:
        request: Name operations for the closure engine
        options: Output options for the rewriter and minifier
    """

    request: BuildRequest
    options: BuildOptions


def split_values(value: str) -> tuple[str, ...]:
    """Split a comma-separated option value, dropping empty entries."""
    return tuple(part.strip() for part in _RE_SPLIT.split(value) if part.strip())


class CommandParser:
    """Parses build command tokens.

    Raises InvalidCommandError listing every unrecognized token, and
    BuildOptionsError for contradictory options.
    """

    def __init__(self, resolver: NameResolver, presets: Mapping[str, Preset]) -> None:
        """Initialize parser.

        Args:
            resolver: Resolver used to tag names as functions or categories
            presets: Preset name → preset
        """
        self._resolver = resolver
        self._presets = presets

    def parse(self, tokens: Sequence[str]) -> ParsedCommand:
        """Parse pre-split command tokens.

        Args:
            tokens: Command-line tokens (shell already split on whitespace)

        Returns:
            ParsedCommand with request and options

        Raises:
            InvalidCommandError: If any token is not recognized
            BuildOptionsError: If options contradict each other
        """
        values: dict[str, list[str]] = {}
        flags: dict[str, bool] = {}
        presets: list[str] = []
        invalid: list[str] = []
        output_path: Path | None = None
        source_map_url: str | None = None

        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1

            key, sep, value = token.partition("=")
            if sep and key in _KEY_VALUE_OPTIONS:
                values.setdefault(key, []).append(value)
            elif token in self._presets:
                presets.append(token)
            elif token in _FLAG_WORDS:
                flags[token] = True
            elif token in _SHORT_FLAGS:
                flags[_SHORT_FLAGS[token]] = True
            elif token in _OUTPUT_FLAGS:
                if index >= len(tokens):
                    invalid.append(token)
                else:
                    output_path = Path(tokens[index])
                    index += 1
            elif token in _SOURCE_MAP_FLAGS:
                flags["source_map"] = True
                if index < len(tokens) and self._is_free_value(tokens[index]):
                    source_map_url = tokens[index]
                    index += 1
            else:
                invalid.append(token)

        if invalid:
            raise InvalidCommandError(invalid)
        if len(presets) > 1:
            raise BuildOptionsError("preset", f"{' & '.join(presets)} cannot be combined")

        preset = self._presets[presets[0]] if presets else None
        request = self._build_request(values, preset)
        options = BuildOptions(
            preset=preset.name if preset else None,
            exports=self._last_list(values, "exports"),
            iife=self._last(values, "iife"),
            template=self._last(values, "template"),
            settings=self._last(values, "settings"),
            module_id=self._last(values, "moduleId"),
            strict=flags.get("strict", False),
            modularize=flags.get("modularize", False),
            development_only=flags.get("development_only", False),
            production_only=flags.get("production_only", False),
            stdout=flags.get("stdout", False),
            silent=flags.get("silent", False),
            source_map=flags.get("source_map", False),
            source_map_url=source_map_url,
            output_path=output_path,
        )
        logger.debug("parsed %d tokens: mode=%s", len(tokens), request.base_mode.value)
        return ParsedCommand(request=request, options=options)

    def _build_request(self, values: Mapping[str, list[str]], preset: Preset | None) -> BuildRequest:
        resolver = self._resolver
        include = resolver.parse_all(self._all_list(values, "include"))
        categories: tuple[Name, ...] = tuple(
            CategoryRef(label.capitalize()) for label in self._all_list(values, "category")
        )
        plus = resolver.parse_all(self._all_list(values, "plus"))
        minus = resolver.parse_all(self._all_list(values, "minus"))
        scope = preset.scope if preset else None

        if include:
            return BuildRequest(
                base_mode=BaseMode.INCLUDE,
                base_names=include + categories,
                plus_names=plus,
                minus_names=minus,
                scope=scope,
            )
        if categories:
            return BuildRequest(
                base_mode=BaseMode.CATEGORY,
                base_names=categories,
                plus_names=plus,
                minus_names=minus,
                scope=scope,
            )
        return BuildRequest(
            plus_names=plus,
            minus_names=minus,
            default_names=preset.names if preset else None,
        )

    def _is_free_value(self, token: str) -> bool:
        """Check if token is a bare value rather than a command word."""
        return not (
            token.startswith("-")
            or "=" in token
            or token in self._presets
            or token in _FLAG_WORDS
        )

    @staticmethod
    def _all_list(values: Mapping[str, list[str]], key: str) -> tuple[str, ...]:
        return tuple(name for value in values.get(key, ()) for name in split_values(value))

    @staticmethod
    def _last_list(values: Mapping[str, list[str]], key: str) -> tuple[str, ...]:
        given = values.get(key)
        return split_values(given[-1]) if given else ()

    @staticmethod
    def _last(values: Mapping[str, list[str]], key: str) -> str | None:
        given = values.get(key)
        return given[-1] if given else None
