"""Tests for domain/model/build_request.py."""

import pytest

from lodash_build.domain.model.build_request import BuildRequest
from lodash_build.domain.model.enums import BaseMode
from lodash_build.domain.model.name import CategoryRef, FunctionRef


class TestBuildRequestConstructors:
    """Tests for the plain-string convenience constructors."""

    def test_include(self) -> None:
        request = BuildRequest.include("map", "filter", minus=("keys",))
        assert request.base_mode is BaseMode.INCLUDE
        assert request.base_names == (FunctionRef("map"), FunctionRef("filter"))
        assert request.minus_names == (FunctionRef("keys"),)
        assert request.plus_names == ()

    def test_category(self) -> None:
        request = BuildRequest.category("Array", plus=("chain",))
        assert request.base_mode is BaseMode.CATEGORY
        assert request.base_names == (CategoryRef("Array"),)
        assert request.plus_names == (FunctionRef("chain"),)

    def test_default(self) -> None:
        request = BuildRequest.default(minus=("isArray",))
        assert request.base_mode is BaseMode.DEFAULT
        assert request.base_names == ()
        assert request.scope is None
        assert request.default_names is None


class TestBuildRequestFailFirst:
    """Tests for FAIL-FIRST validation in BuildRequest."""

    def test_default_with_base_names_raises(self) -> None:
        with pytest.raises(ValueError, match="DEFAULT base mode must not carry base names"):
            BuildRequest(base_names=(FunctionRef("map"),))

    def test_include_without_names_allowed(self) -> None:
        request = BuildRequest(base_mode=BaseMode.INCLUDE)
        assert request.base_names == ()

    def test_category_without_names_allowed(self) -> None:
        request = BuildRequest(base_mode=BaseMode.CATEGORY)
        assert request.base_names == ()

    def test_category_with_function_names_raises(self) -> None:
        with pytest.raises(ValueError, match="CATEGORY base mode got function names"):
            BuildRequest(
                base_mode=BaseMode.CATEGORY,
                base_names=(CategoryRef("Array"), FunctionRef("map")),
            )

    def test_include_may_mix_categories(self) -> None:
        request = BuildRequest(
            base_mode=BaseMode.INCLUDE,
            base_names=(FunctionRef("map"), CategoryRef("Chain")),
        )
        assert len(request.base_names) == 2
