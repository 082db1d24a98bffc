"""Tests for domain/exceptions/base.py."""

import pytest

from lodash_build.domain.exceptions import (
    BuildOptionsError,
    GraphIntegrityError,
    InvalidCommandError,
    LodashBuildError,
)


class TestLodashBuildError:
    """Tests for LodashBuildError base exception."""

    def test_is_exception(self) -> None:
        assert issubclass(LodashBuildError, Exception)

    def test_can_raise_and_catch(self) -> None:
        with pytest.raises(LodashBuildError, match="test message"):
            raise LodashBuildError("test message")

    @pytest.mark.parametrize(
        "error_class",
        [GraphIntegrityError, InvalidCommandError, BuildOptionsError],
    )
    def test_subclasses_share_root(self, error_class: type[Exception]) -> None:
        assert issubclass(error_class, LodashBuildError)
