"""Built-in predicates for the ``validate`` rule.

Each predicate follows the custom-validator protocol::

    def check(value: Any) -> bool | str:
        '''Return True if valid, or an error message.'''

Parameterized predicates are factory functions that return a predicate::

    store.register("title", required=True, validate=max_length(200))

Empty and non-string values pass, so presence stays the job of the
``required`` rule. Use ``chain()`` to run several predicates in order.
"""

import re
from collections.abc import Callable
from typing import Any

from formstate.validation.ruleset import Predicate


def _text(value: Any) -> str | None:
    """Return *value* if it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int, message: str | None = None) -> Predicate:
    """String must be at most *n* characters."""

    def check(value: Any) -> bool | str:
        text = _text(value)
        if text is not None and len(text) > n:
            return message or f"Must be at most {n} characters"
        return True

    return check


def min_length(n: int, message: str | None = None) -> Predicate:
    """String must be at least *n* characters."""

    def check(value: Any) -> bool | str:
        text = _text(value)
        if text is not None and len(text) < n:
            return message or f"Must be at least {n} characters"
        return True

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")


def email(value: Any) -> bool | str:
    """Value must be a valid email address (basic format check)."""
    text = _text(value)
    if text is not None and not _EMAIL_RE.fullmatch(text):
        return "Must be a valid email address"
    return True


# Scheme and host structure only
_URL_RE = re.compile(r"https?://[^\s/$.?#].\S*", re.IGNORECASE)


def url(value: Any) -> bool | str:
    """Value must be a valid URL (http/https)."""
    text = _text(value)
    if text is not None and not _URL_RE.fullmatch(text):
        return "Must be a valid URL"
    return True


def matches(pattern: str, message: str | None = None) -> Predicate:
    """Value must fully match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: Any) -> bool | str:
        text = _text(value)
        if text is not None and not compiled.fullmatch(text):
            return message or f"Must match pattern: {pattern}"
        return True

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Predicate:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: Any) -> bool | str:
        text = _text(value)
        if text is not None and text not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return True

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def integer(value: Any) -> bool | str:
    """Value must be a valid integer."""
    text = _text(value)
    if text is None:
        return True
    try:
        int(text)
    except ValueError:
        return "Must be a whole number"
    return True


def number(value: Any) -> bool | str:
    """Value must be a valid number (int or float)."""
    text = _text(value)
    if text is None:
        return True
    try:
        float(text)
    except ValueError:
        return "Must be a number"
    return True


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def chain(*predicates: Callable[[Any], Any]) -> Predicate:
    """Run *predicates* in order; the first failing result is returned."""

    def check(value: Any) -> Any:
        for predicate in predicates:
            result = predicate(value)
            if isinstance(result, str) or not result:
                return result
        return True

    return check
