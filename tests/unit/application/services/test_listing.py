"""Tests for application/services/listing.py."""

import pytest

from lodash_build.application.services.listing import LISTING_NAMES
from lodash_build.domain.model.build_request import BuildRequest
from tests.factories import MAP_CLOSURE, make_engine, make_listing, make_sample_graph


class TestListingBuilderGraphListings:
    """Tests for listings derived from the graph alone."""

    def test_funcs_exclude_non_functions(self) -> None:
        funcs = make_listing().funcs()
        assert "templateSettings" not in funcs
        assert "chain" in funcs
        assert len(funcs) == 18

    def test_var_deps(self) -> None:
        assert make_listing().var_deps() == ("MAX_SAFE_INTEGER", "arrayTag", "nativeKeys", "objToString")

    def test_obj_deps(self) -> None:
        assert make_listing().obj_deps() == ("support",)

    def test_categories(self) -> None:
        assert make_listing().categories() == ("Chain", "Collection", "Lang", "Object", "Utility")

    def test_default_includes(self) -> None:
        assert make_listing().default_includes() == (
            "chain",
            "filter",
            "forEach",
            "identity",
            "isArray",
            "keys",
            "main",
            "map",
            "tap",
            "thru",
        )


class TestListingBuilderUninlinables:
    """Tests for uninlinable_names."""

    def test_default_build(self) -> None:
        assert make_listing().uninlinable_names() == (
            "baseEach",
            "chain",
            "escape",
            "filter",
            "forEach",
            "isArray",
            "keys",
            "main",
            "map",
            "tap",
            "thru",
            "variable",
        )

    def test_for_closure(self) -> None:
        graph = make_sample_graph()
        closure = make_engine(graph).compute(BuildRequest.include("map"))
        assert closure.functions == MAP_CLOSURE
        names = make_listing(graph).uninlinable_names(closure)
        assert "identity" not in names
        assert {"baseEach", "escape", "variable", "map", "collect"} <= set(names)
        assert "chain" not in names


class TestListingBuilderWhitelist:
    """Tests for minification_whitelist."""

    def test_contains_every_source(self) -> None:
        whitelist = set(make_listing().minification_whitelist())
        assert {"map", "collect", "templateSettings"} <= whitelist
        assert {"VERSION", "value", "funcNames", "escape", "variable", "Array"} <= whitelist

    def test_internal_helpers_not_protected(self) -> None:
        whitelist = make_listing().minification_whitelist()
        assert "baseEach" not in whitelist

    def test_sorted(self) -> None:
        whitelist = make_listing().minification_whitelist()
        assert list(whitelist) == sorted(whitelist)


class TestListingBuilderPassThroughs:
    """Tests for special set pass-throughs."""

    def test_special_sets(self) -> None:
        listing = make_listing()
        assert listing.lax_semver_names() == ("isLength",)
        assert listing.placeholder_names() == ("map",)
        assert listing.top_level_names() == ("main",)
        assert listing.core_names() == ("filter", "map")
        assert listing.complex_vars() == ("arrayTag",)
        assert listing.export_formats() == ("amd", "node")


class TestListingBuilderLookup:
    """Tests for get and all_listings."""

    def test_all_listings_keys(self) -> None:
        assert tuple(make_listing().all_listings()) == LISTING_NAMES

    def test_get_matches_method(self) -> None:
        listing = make_listing()
        assert listing.get("includes") == listing.default_includes()

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="unknown listing 'nope'"):
            make_listing().get("nope")

    def test_recomputed_per_call(self) -> None:
        listing = make_listing()
        assert listing.all_listings() == listing.all_listings()
