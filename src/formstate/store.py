"""Form state store — values, errors, touched and dirty flags for one form.

The store is the only component with observable mutable state. Every
operation runs to completion, replaces whatever it changes (the value
document and the three path-keyed maps are never edited in place), then
notifies listeners. A snapshot read before an operation therefore stays
exactly as it was.

Usage::

    store = FormStore()
    name = store.register("name", required=True)
    email = store.register("email", required=True, pattern=EMAIL_RE)

    name.on_change(InputEvent(InputTarget(value="")))
    name.on_blur()
    store.errors            # {"name": "This field is required"}

    on_submit = store.handle_submit(save)
    on_submit(event)        # save(values) runs only if every field passes

Field lifecycle::

    unregistered -> registered -> {dirty, touched} -> removed (= unregistered)

``remove_field()`` clears the value, error, touched and dirty entries and
the rules of a path in a single transition.
"""

import copy
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from formstate.binding import FieldBinding, event_value, prevent_default
from formstate.config import FormConfig
from formstate.errors import RuleSetError
from formstate.paths import get_value, remove_value, set_value, split_path
from formstate.reactive import ChangeEvent, ChangeListeners, Listener
from formstate.registry import FieldRegistry
from formstate.validation import ValidationResult, evaluate
from formstate.validation.ruleset import RuleSet

logger = logging.getLogger("formstate.store")


@dataclass(frozen=True, slots=True)
class FormState:
    """Read-only snapshot of a store: ``(values, errors, touched, dirty)``."""

    values: Mapping[str, Any]
    errors: Mapping[str, str]
    touched: Mapping[str, bool]
    dirty: Mapping[str, bool]


def _without(mapping: dict[str, Any], path: str) -> dict[str, Any]:
    """Copy of *mapping* minus *path* (the same dict if *path* is absent)."""
    if path not in mapping:
        return mapping
    return {key: item for key, item in mapping.items() if key != path}


class FormStore:
    """Single-form state engine.

    Not thread-safe: operations are expected to arrive one at a time from
    the UI event loop, in event order.
    """

    __slots__ = (
        "_config",
        "_dirty",
        "_elements",
        "_errors",
        "_listeners",
        "_registry",
        "_touched",
        "_values",
    )

    def __init__(self, config: FormConfig | None = None) -> None:
        self._config = config or FormConfig()
        self._registry = FieldRegistry()
        self._listeners = ChangeListeners()
        self._values: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._touched: dict[str, bool] = {}
        self._dirty: dict[str, bool] = {}
        self._elements: dict[str, Any] = {}

    # -- Snapshot --

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    @property
    def values(self) -> Mapping[str, Any]:
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def touched(self) -> Mapping[str, bool]:
        return MappingProxyType(self._touched)

    @property
    def dirty(self) -> Mapping[str, bool]:
        return MappingProxyType(self._dirty)

    @property
    def state(self) -> FormState:
        """Consistent snapshot of all four maps."""
        return FormState(
            values=self.values,
            errors=self.errors,
            touched=self.touched,
            dirty=self.dirty,
        )

    def element(self, path: str) -> Any:
        """Element reference attached through a binding's ``ref``, or None."""
        return self._elements.get(path)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with a ``ChangeEvent`` after every operation.

        Returns a callable that unsubscribes the listener.
        """
        return self._listeners.subscribe(listener)

    def _emit(self, operation: str, *paths: str) -> None:
        self._listeners.emit(ChangeEvent(operation=operation, changed_paths=frozenset(paths)))

    # -- Registration --

    def register(
        self,
        path: str,
        rules: RuleSet | Mapping[str, Any] | None = None,
        **options: Any,
    ) -> FieldBinding:
        """Declare *path* with its validation rules and return its handlers.

        Rules may be passed as a mapping, a ``RuleSet`` or keywords::

            store.register("name", {"required": True})
            store.register("name", required=True)

        Registering the same path again replaces its rules.

        Raises:
            RuleSetError: If the rules are malformed.
            PathError: If *path* is malformed.
        """
        split_path(path)
        if options:
            if isinstance(rules, RuleSet):
                msg = "Pass either a RuleSet or rule keywords, not both"
                raise RuleSetError(msg)
            rules = {**(rules or {}), **options}
        self._registry.declare(path, RuleSet.from_options(rules))
        logger.debug("Registered field %r", path)

        def on_change(event: Any) -> None:
            self.change(path, event)

        def on_blur() -> None:
            self.blur(path)

        def ref(element: Any) -> None:
            self._attach(path, element)

        self._emit("register", path)
        return FieldBinding(path=path, on_change=on_change, on_blur=on_blur, ref=ref)

    def _attach(self, path: str, element: Any) -> None:
        if element is None:
            self._elements = _without(self._elements, path)
        else:
            self._elements = {**self._elements, path: element}

    # -- Values --

    def set_field_value(self, path: str, value: Any) -> None:
        """Store *value* at *path* and mark the field dirty.

        Does not validate; errors and touched flags are left alone.
        """
        self._values = set_value(self._values, path, value)
        if not self._dirty.get(path):
            self._dirty = {**self._dirty, path: True}
        logger.debug("Set field %r", path)
        self._emit("set", path)

    def change(self, path: str, event: Any) -> None:
        """Apply a UI change event to *path* (see ``formstate.binding``)."""
        self.set_field_value(path, event_value(event))

    def load(self, values: Mapping[str, Any]) -> None:
        """Set every ``path -> value`` pair of *values*, in order.

        Keys are dot paths. Each path is marked dirty and listeners are
        notified once per path.
        """
        for path, value in values.items():
            self.set_field_value(path, value)

    def remove_field(self, path: str) -> None:
        """Forget *path* entirely: value, error, touched, dirty and rules."""
        self._values = remove_value(self._values, path)
        self._errors = _without(self._errors, path)
        self._touched = _without(self._touched, path)
        self._dirty = _without(self._dirty, path)
        self._elements = _without(self._elements, path)
        self._registry.forget(path)
        logger.debug("Removed field %r", path)
        self._emit("remove", path)

    # -- Validation --

    def blur(self, path: str) -> None:
        """Mark *path* touched and validate its current value.

        Only paths that are registered or have been set are marked touched.
        """
        if (path in self._registry or path in self._dirty) and not self._touched.get(path):
            self._touched = {**self._touched, path: True}
        error = evaluate(get_value(self._values, path), self._registry.lookup(path), self._config)
        if error:
            self._errors = {**self._errors, path: error}
        else:
            self._errors = _without(self._errors, path)
        logger.debug("Blurred field %r (error=%r)", path, error)
        self._emit("blur", path)

    def validate(self) -> ValidationResult:
        """Validate every registered field and rebuild the error map.

        Errors for paths that are no longer registered are dropped. The
        result carries a detached copy of the values, so nothing done to it
        reaches the store or an earlier snapshot.
        """
        errors: dict[str, str] = {}
        for path, rules in self._registry.snapshot().items():
            error = evaluate(get_value(self._values, path), rules, self._config)
            if error:
                errors[path] = error
        changed = set(self._errors) | set(errors)
        self._errors = errors
        logger.debug("Validated %d field(s), %d error(s)", len(self._registry), len(errors))
        self._emit("validate", *changed)
        return ValidationResult(values=copy.deepcopy(self._values), errors=self.errors)

    def submit(self, on_valid: Callable[[Mapping[str, Any]], Any]) -> bool:
        """Validate all fields; call ``on_valid(values)`` only if none fail.

        Returns:
            True if *on_valid* was called.
        """
        result = self.validate()
        if not result:
            return False
        on_valid(result.values)
        return True

    def handle_submit(self, on_valid: Callable[[Mapping[str, Any]], Any]) -> Callable[..., bool]:
        """Build a submit-event handler around ``submit(on_valid)``.

        The handler cancels the event's default action first::

            form.on("submit", store.handle_submit(save))
        """

        def handler(event: Any = None) -> bool:
            prevent_default(event)
            return self.submit(on_valid)

        return handler

    def __repr__(self) -> str:
        return (
            f"FormStore(fields={len(self._registry)}, errors={len(self._errors)}, "
            f"dirty={len(self._dirty)}, touched={len(self._touched)})"
        )
