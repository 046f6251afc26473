"""UI binding contract — the only place that knows what an event looks like.

A change event exposes ``target.value`` and, for checkboxes,
``target.checked``. A submit event may expose ``prevent_default()`` (or
``preventDefault()`` when it comes from a JS bridge). A blur needs no
payload. Targets may be objects or plain mappings::

    event_value(InputEvent(InputTarget(value="alice")))        # "alice"
    event_value({"target": {"type": "checkbox", "checked": 1}})  # True

The dataclasses below implement the contract for server-side callers
and tests that have no real UI toolkit at hand.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

_NO_TARGET = object()


def _attr(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def event_value(event: Any) -> Any:
    """Extract the field value carried by a change event.

    Checkbox targets contribute ``bool(target.checked)``, every other
    target its ``value``. An object without a ``target`` is taken to be
    the value itself.
    """
    target = _attr(event, "target", _NO_TARGET)
    if target is _NO_TARGET:
        return event
    if _attr(target, "type") == "checkbox":
        return bool(_attr(target, "checked", False))
    return _attr(target, "value")


def prevent_default(event: Any) -> None:
    """Cancel the default action of a submit event, if it has one."""
    if event is None:
        return
    cancel = getattr(event, "prevent_default", None) or getattr(event, "preventDefault", None)
    if callable(cancel):
        cancel()


# ---------------------------------------------------------------------------
# Concrete events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class InputTarget:
    """The element a change event came from."""

    value: Any = ""
    checked: bool = False
    type: str = "text"


@dataclass(frozen=True, slots=True)
class InputEvent:
    """A change event: ``InputEvent(InputTarget(value="alice"))``."""

    target: InputTarget


@dataclass(slots=True)
class SubmitEvent:
    """A form submission event that records whether its default was prevented."""

    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


# ---------------------------------------------------------------------------
# Field binding
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """Handlers for one registered field, ready to attach to an input.

    Returned by ``FormStore.register()``::

        binding = store.register("email", required=True)
        input.on("change", binding.on_change)
        input.on("blur", binding.on_blur)
        binding.ref(input)

    ``ref`` stores an opaque element reference on the store; the store
    never looks inside it.
    """

    path: str
    on_change: Callable[[Any], None]
    on_blur: Callable[[], None]
    ref: Callable[[Any], None] = field(repr=False)
