"""Field validation — declarative rules, one message per field.

Usage::

    from formstate.validation import RuleSet, evaluate, max_length

    rules = RuleSet.from_options({
        "required": True,
        "pattern": {"value": r"[a-z]+", "message": "Lowercase only"},
        "validate": max_length(20),
    })
    evaluate("", rules)       # "This field is required"
    evaluate("ABC", rules)    # "Lowercase only"
    evaluate("abc", rules)    # None
"""

from typing import Any

from formstate.config import FormConfig
from formstate.validation.result import ValidationResult
from formstate.validation.rules import (
    chain,
    email,
    integer,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    url,
)
from formstate.validation.ruleset import Pattern, Predicate, Required, RuleSet, Validate

__all__ = [
    "Pattern",
    "Predicate",
    "Required",
    "RuleSet",
    "Validate",
    "ValidationResult",
    "chain",
    "email",
    "evaluate",
    "integer",
    "matches",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "url",
]

_DEFAULT_CONFIG = FormConfig()


def evaluate(value: Any, rules: RuleSet | None, config: FormConfig | None = None) -> str | None:
    """Check *value* against *rules* and return the first error message.

    Rules run in a fixed order and stop at the first failure:

    1. ``required`` — fails on any falsy value (``None``, ``""``, ``False``,
       ``0``, empty containers).
    2. ``pattern`` — fails when a string value does not fully match.
       Non-string values are not checked.
    3. ``validate`` — the custom predicate. A string result is the error;
       a falsy result falls back to the configured message. When the rule
       carries its own message, that message is reported for any failing
       result instead.

    Args:
        value: The field's current value (``None`` when absent).
        rules: The field's normalized rule set, or None.
        config: Supplies default messages. Defaults to ``FormConfig()``.

    Returns:
        The error message, or ``None`` if the value is valid. An empty
        message counts as valid.

    Exceptions raised by a custom predicate propagate to the caller.
    """
    if not rules:
        return None
    config = config or _DEFAULT_CONFIG

    required = rules.required
    if required is not None and required.value and not value:
        return required.message or config.required_message

    pattern = rules.pattern
    if pattern is not None and isinstance(value, str) and not pattern.regex.fullmatch(value):
        return pattern.message or config.pattern_message

    custom = rules.validate
    if custom is not None:
        result = custom.validator(value)
        failed = isinstance(result, str) or not result
        if failed:
            if custom.explicit:
                message = custom.message or str(result)
            elif isinstance(result, str):
                message = result
            else:
                message = config.invalid_message
            return message or None

    return None
