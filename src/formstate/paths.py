"""Dot-path access into nested form values.

A path such as ``"address.street"`` or ``"hobbies.0"`` addresses one
location in a document built from dicts, lists and scalar leaves. A
segment made only of ASCII digits is an index; anything else is a key.

All writes are copy-on-write: the containers from the root down to the
changed node are shallow-copied and everything off that path is shared
with the previous document. Callers holding an older document never see
a later change.

Missing intermediate containers are created on demand. Whether a new
container is a list or a dict is decided once per write, from the *first*
segment of the path. A list is never created under a key segment; that
container becomes a dict instead::

    set_value({}, "address.street", "Main St")
    # {"address": {"street": "Main St"}}

    set_value({}, "tags.0", "python")
    # {"tags": {"0": "python"}}  -- "tags" is a key, so dicts are created

    set_value({"tags": []}, "tags.0", "python")
    # {"tags": ["python"]}       -- the existing list is kept

    set_value({}, "0.name", "Ada")
    # {"0": {"name": "Ada"}}    -- "name" cannot index a list
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from formstate.errors import PathError

SEPARATOR = "."


def split_path(path: str) -> tuple[str, ...]:
    """Split *path* into its segments.

    Raises:
        PathError: If the path or any of its segments is empty.
    """
    if not path:
        raise PathError(path, "path must not be empty")
    segments = tuple(path.split(SEPARATOR))
    if not all(segments):
        raise PathError(path, "path segments must not be empty")
    return segments


def is_index(segment: str) -> bool:
    """True if *segment* is a base-10 non-negative integer."""
    return segment.isascii() and segment.isdigit()


def is_container(node: object) -> bool:
    """True for mappings and non-string sequences."""
    return _is_mapping(node) or _is_sequence(node)


def _is_mapping(node: object) -> bool:
    return isinstance(node, Mapping)


def _is_sequence(node: object) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

_MISSING = object()


def _child(node: Any, segment: str) -> Any:
    """Return the child of *node* at *segment*, or ``_MISSING``."""
    if _is_mapping(node):
        return node.get(segment, _MISSING)
    if _is_sequence(node):
        if not is_index(segment):
            return _MISSING
        index = int(segment)
        if index < len(node):
            return node[index]
    return _MISSING


def get_value(document: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return the value at *path*, or *default* if any segment does not resolve.

    A missing path is not an error: missing keys, indexes out of range and
    scalars met half-way all yield *default*.
    """
    node: Any = document
    for segment in split_path(path):
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


# ---------------------------------------------------------------------------
# Write
# ---------------------------------------------------------------------------


def _with_child(node: Any, segment: str, child: Any, path: str) -> Any:
    """Return a shallow copy of *node* with *segment* set to *child*."""
    if _is_sequence(node):
        if not is_index(segment):
            raise PathError(path, f"segment {segment!r} cannot index a sequence")
        index = int(segment)
        items = list(node)
        if index >= len(items):
            # Pad the gap so the index exists
            items.extend([None] * (index + 1 - len(items)))
        items[index] = child
        return items
    updated = dict(node)
    updated[segment] = child
    return updated


def _assign(
    node: Any,
    segments: tuple[str, ...],
    value: Any,
    factory: Callable[[], Any],
    path: str,
) -> Any:
    head, rest = segments[0], segments[1:]
    if not rest:
        return _with_child(node, head, value, path)
    current = _child(node, head)
    if not is_container(current):
        # A list can only hold index segments
        current = factory() if factory is dict or is_index(rest[0]) else {}
    return _with_child(node, head, _assign(current, rest, value, factory, path), path)


def set_value(document: Mapping[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Return a new document with *value* stored at *path*.

    Ancestors that do not exist (or hold a scalar) are replaced by new
    containers: lists if the first segment of *path* is an index, dicts
    otherwise, and always a dict when the next segment is a key. Writing
    past the end of a list pads it with ``None``.

    Raises:
        PathError: If *path* is malformed, or a key segment addresses an
            existing list.
    """
    segments = split_path(path)
    factory = list if is_index(segments[0]) else dict
    return _assign(document, segments, value, factory, path)


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


def _replace(node: Any, segments: tuple[str, ...], replacement: Any, path: str) -> Any:
    """Copy-on-write *replacement* into *node* at *segments* (which must resolve)."""
    if not segments:
        return replacement
    head, rest = segments[0], segments[1:]
    return _with_child(node, head, _replace(_child(node, head), rest, replacement, path), path)


def remove_value(document: Mapping[str, Any], path: str) -> Mapping[str, Any]:
    """Return a new document without the leaf at *path*.

    Removing from a list shifts later elements down; removing the only
    element leaves an empty list in place rather than dropping the field.
    Removing from a dict deletes the key. If *path* does not resolve,
    *document* is returned as-is.
    """
    segments = split_path(path)
    parents, last = segments[:-1], segments[-1]

    parent: Any = document
    for segment in parents:
        parent = _child(parent, segment)
        if parent is _MISSING:
            return document

    if _child(parent, last) is _MISSING:
        return document

    if _is_sequence(parent):
        index = int(last)
        trimmed: Any = [item for i, item in enumerate(parent) if i != index]
    else:
        trimmed = {key: item for key, item in parent.items() if key != last}

    return _replace(document, parents, trimmed, path)
