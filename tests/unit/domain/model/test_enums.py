"""Tests for domain/model/enums.py."""

from lodash_build.domain.model.enums import BaseMode


class TestBaseMode:
    """Tests for BaseMode enum."""

    def test_include_exists(self) -> None:
        assert BaseMode.INCLUDE is not None

    def test_category_exists(self) -> None:
        assert BaseMode.CATEGORY is not None

    def test_default_exists(self) -> None:
        assert BaseMode.DEFAULT is not None

    def test_all_values_unique(self) -> None:
        values = [m.value for m in BaseMode]
        assert len(values) == len(set(values))

    def test_has_three_members(self) -> None:
        assert len(BaseMode) == 3

    def test_lookup_by_value(self) -> None:
        assert BaseMode("include") is BaseMode.INCLUDE
