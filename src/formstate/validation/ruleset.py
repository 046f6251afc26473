"""Rule set types and their normalization.

A rule set is written the short way and normalized once, at registration::

    {"required": True}
    {"required": {"value": True, "message": "Name is required"}}
    {"pattern": r"\\d{5}"}
    {"pattern": {"value": re.compile(r"\\d{5}"), "message": "Five digits"}}
    {"validate": lambda v: v != "admin" or "Reserved name"}
    {"validate": {"validator": is_adult, "message": "Must be 18+"}}

``RuleSet.from_options()`` turns any of these into frozen dataclasses, so
evaluation never has to guess at shapes.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from formstate.errors import RuleSetError

# A custom check: returns True (or any truthy non-string) when valid,
# an error message string or a falsy value otherwise.
type Predicate = Callable[[Any], Any]

RULE_NAMES = frozenset({"required", "pattern", "validate"})


@dataclass(frozen=True, slots=True)
class Required:
    """Field must hold a truthy value."""

    value: bool = True
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Pattern:
    """Textual values must fully match ``regex``."""

    regex: re.Pattern[str]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Validate:
    """Custom predicate.

    ``message`` is set only for the ``{"validator": ..., "message": ...}``
    form; its presence changes how a failing result is reported (see
    ``formstate.validation.evaluate``).
    """

    validator: Predicate
    message: str | None = None
    explicit: bool = False


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Normalized validation rules for one field path."""

    required: Required | None = None
    pattern: Pattern | None = None
    validate: Validate | None = None

    @classmethod
    def from_options(cls, options: "RuleSet | Mapping[str, Any] | None" = None) -> "RuleSet":
        """Normalize *options* into a ``RuleSet``.

        Raises:
            RuleSetError: On unknown rule names or unsupported rule shapes.
        """
        if options is None:
            return cls()
        if isinstance(options, RuleSet):
            return options
        if not isinstance(options, Mapping):
            msg = f"Rule set must be a mapping or RuleSet, got {type(options).__name__}"
            raise RuleSetError(msg)

        unknown = set(options) - RULE_NAMES
        if unknown:
            names = ", ".join(sorted(unknown))
            msg = f"Unknown validation rule(s): {names}"
            raise RuleSetError(msg)

        return cls(
            required=_required(options.get("required")),
            pattern=_pattern(options.get("pattern")),
            validate=_validate(options.get("validate")),
        )

    def __bool__(self) -> bool:
        return any((self.required, self.pattern, self.validate))


def _required(option: Any) -> Required | None:
    if option is None or isinstance(option, Required):
        return option
    if isinstance(option, bool):
        return Required(value=option)
    if isinstance(option, Mapping):
        return Required(value=bool(option.get("value", True)), message=option.get("message"))
    msg = f"'required' must be a bool or {{value, message}} mapping, got {option!r}"
    raise RuleSetError(msg)


def _compile(regex: Any) -> re.Pattern[str]:
    if isinstance(regex, re.Pattern):
        return regex
    if isinstance(regex, str):
        try:
            return re.compile(regex)
        except re.error as e:
            msg = f"'pattern' is not a valid regular expression: {e}"
            raise RuleSetError(msg) from e
    msg = f"'pattern' must be a str or compiled regex, got {regex!r}"
    raise RuleSetError(msg)


def _pattern(option: Any) -> Pattern | None:
    if option is None or isinstance(option, Pattern):
        return option
    if isinstance(option, Mapping):
        if "value" not in option:
            msg = "'pattern' mapping needs a 'value' regex"
            raise RuleSetError(msg)
        return Pattern(regex=_compile(option["value"]), message=option.get("message"))
    return Pattern(regex=_compile(option))


def _validate(option: Any) -> Validate | None:
    if option is None or isinstance(option, Validate):
        return option
    if callable(option):
        return Validate(validator=option)
    if isinstance(option, Mapping):
        validator = option.get("validator")
        if not callable(validator):
            msg = "'validate' mapping needs a callable 'validator'"
            raise RuleSetError(msg)
        return Validate(validator=validator, message=option.get("message"), explicit=True)
    msg = f"'validate' must be callable or a {{validator, message}} mapping, got {option!r}"
    raise RuleSetError(msg)
