"""Tests for the lazy top-level API in formstate/__init__.py."""

import pytest

import formstate


class TestLazyImports:
    @pytest.mark.parametrize("name", formstate.__all__)
    def test_every_public_name_resolves(self, name: str) -> None:
        assert getattr(formstate, name) is not None

    def test_store_is_same_class(self) -> None:
        from formstate.store import FormStore

        assert formstate.FormStore is FormStore

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            formstate.Nope  # noqa: B018

    def test_version(self) -> None:
        assert formstate.__version__ == "0.1.0"
