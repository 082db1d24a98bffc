"""Build request: what one closure computation is asked to resolve."""

from __future__ import annotations

from dataclasses import dataclass

from lodash_build.domain.model.enums import BaseMode
from lodash_build.domain.model.name import CategoryRef, FunctionRef, Name


@dataclass(frozen=True, slots=True)
class BuildRequest:
    """One build's name operations, applied in a fixed order.

    base → category expansion → plus → minus → closure → universe filter.

    Invariants (FAIL-FIRST):
    - DEFAULT mode carries no base names
    - CATEGORY mode carries only category refs
    - An empty INCLUDE or CATEGORY base is allowed and resolves to nothing

    Attributes:
        base_mode: How the base set is chosen
        base_names: Names of the base set (functions and/or categories)
        plus_names: Names added after the base set
        minus_names: Names removed last; always wins over base and plus
        scope: Limits category expansion of the base set (preset builds).
            None = no limit.
        default_names: Base set used in DEFAULT mode. None = public surface.
    """

    base_mode: BaseMode = BaseMode.DEFAULT
    base_names: tuple[Name, ...] = ()
    plus_names: tuple[Name, ...] = ()
    minus_names: tuple[Name, ...] = ()
    scope: frozenset[str] | None = None
    default_names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.base_mode is BaseMode.DEFAULT and self.base_names:
            raise ValueError("DEFAULT base mode must not carry base names")
        if self.base_mode is BaseMode.CATEGORY:
            functions = [str(n) for n in self.base_names if not isinstance(n, CategoryRef)]
            if functions:
                raise ValueError(f"CATEGORY base mode got function names: {functions}")

    @classmethod
    def include(
        cls,
        *names: str,
        plus: tuple[str, ...] = (),
        minus: tuple[str, ...] = (),
    ) -> BuildRequest:
        """Request explicit function names (convenience for plain strings)."""
        return cls(
            base_mode=BaseMode.INCLUDE,
            base_names=tuple(FunctionRef(n) for n in names),
            plus_names=tuple(FunctionRef(n) for n in plus),
            minus_names=tuple(FunctionRef(n) for n in minus),
        )

    @classmethod
    def category(
        cls,
        *labels: str,
        plus: tuple[str, ...] = (),
        minus: tuple[str, ...] = (),
    ) -> BuildRequest:
        """Request whole categories (convenience for plain strings)."""
        return cls(
            base_mode=BaseMode.CATEGORY,
            base_names=tuple(CategoryRef(label) for label in labels),
            plus_names=tuple(FunctionRef(n) for n in plus),
            minus_names=tuple(FunctionRef(n) for n in minus),
        )

    @classmethod
    def default(
        cls,
        *,
        plus: tuple[str, ...] = (),
        minus: tuple[str, ...] = (),
    ) -> BuildRequest:
        """Request the full public surface (convenience for plain strings)."""
        return cls(
            plus_names=tuple(FunctionRef(n) for n in plus),
            minus_names=tuple(FunctionRef(n) for n in minus),
        )
