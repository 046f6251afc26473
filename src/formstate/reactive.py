"""Change notifications — tell a re-render layer which paths moved.

The store itself schedules nothing. After every committed operation it
emits one ``ChangeEvent`` to its listeners, synchronously and in
subscription order. What a listener does with it (re-render, push over
SSE, record for a test) is up to the listener.

Example::

    store = FormStore()

    def on_change(event: ChangeEvent) -> None:
        if "email" in event.changed_paths:
            rerender_email_field(store.state)

    unsubscribe = store.subscribe(on_change)
    ...
    unsubscribe()
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """Emitted by a store after a state transition.

    Attributes:
        operation: Name of the store operation (``"set"``, ``"blur"``,
            ``"remove"``, ``"validate"``, ``"register"``).
        changed_paths: Field paths whose value, error, touched or dirty
            entry may have changed.
    """

    operation: str
    changed_paths: frozenset[str]


type Listener = Callable[[ChangeEvent], None]


class ChangeListeners:
    """Ordered set of listeners for one store.

    Not thread-safe: a form store is driven from a single event loop.
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Add *listener*; return a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: ChangeEvent) -> None:
        """Deliver *event* to every listener. Listener errors propagate."""
        for listener in tuple(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
