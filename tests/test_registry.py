"""Tests for formstate.registry — the per-form path -> rules table."""

import pytest

from formstate.registry import FieldRegistry
from formstate.validation import Required, RuleSet

REQUIRED = RuleSet(required=Required())


class TestFieldRegistry:
    def test_empty(self) -> None:
        registry = FieldRegistry()
        assert len(registry) == 0
        assert registry.lookup("name") is None

    def test_declare_and_lookup(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        assert registry.lookup("name") is REQUIRED
        assert "name" in registry

    def test_latest_declaration_wins(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        registry.declare("name", RuleSet())
        assert registry.lookup("name") == RuleSet()
        assert len(registry) == 1

    def test_forget(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        registry.forget("name")
        assert "name" not in registry

    def test_forget_unknown_is_noop(self) -> None:
        FieldRegistry().forget("missing")

    def test_iteration_in_declaration_order(self) -> None:
        registry = FieldRegistry()
        for path in ("name", "email", "address.street"):
            registry.declare(path, RuleSet())
        registry.declare("name", REQUIRED)
        assert list(registry) == ["name", "email", "address.street"]

    def test_snapshot_is_read_only(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        with pytest.raises(TypeError):
            registry.snapshot()["email"] = REQUIRED  # type: ignore[index]

    def test_snapshot_is_detached(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        snapshot = registry.snapshot()
        registry.declare("email", REQUIRED)
        registry.forget("name")
        assert dict(snapshot) == {"name": REQUIRED}

    def test_repr(self) -> None:
        registry = FieldRegistry()
        registry.declare("name", REQUIRED)
        assert repr(registry) == "FieldRegistry(['name'])"
