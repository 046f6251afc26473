"""Field registry — the path -> rule set table of one form.

Each ``FormStore`` owns its own registry, so independent forms never
share rules. Re-declaring a path replaces its rules; UI bindings that
re-register on every render therefore stay idempotent.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from formstate.validation.ruleset import RuleSet


class FieldRegistry:
    """Mutable mapping of field path to its latest ``RuleSet``.

    Iteration follows first-declaration order, which is also the order
    submit-time validation reports errors in.
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules: dict[str, RuleSet] = {}

    def declare(self, path: str, rules: RuleSet) -> None:
        """Store *rules* for *path*, replacing any earlier declaration."""
        self._rules[path] = rules

    def forget(self, path: str) -> None:
        """Drop the rules for *path*. Unknown paths are ignored."""
        self._rules.pop(path, None)

    def lookup(self, path: str) -> RuleSet | None:
        """Return the rules declared for *path*, or None."""
        return self._rules.get(path)

    def snapshot(self) -> Mapping[str, RuleSet]:
        """Read-only copy of the whole table."""
        return MappingProxyType(dict(self._rules))

    def __contains__(self, path: object) -> bool:
        return path in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"FieldRegistry({list(self._rules)!r})"
