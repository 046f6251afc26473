"""Tests for formstate.validation — rule sets, evaluate() and built-in predicates."""

import re

import pytest

from formstate.config import FormConfig
from formstate.errors import RuleSetError
from formstate.validation import (
    Pattern,
    Required,
    RuleSet,
    Validate,
    ValidationResult,
    chain,
    email,
    evaluate,
    integer,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    url,
)

EMAIL_RE = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)


def rules(**options: object) -> RuleSet:
    return RuleSet.from_options(options)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


class TestRuleSetFromOptions:
    def test_none(self) -> None:
        assert RuleSet.from_options(None) == RuleSet()

    def test_empty_is_falsy(self) -> None:
        assert not RuleSet.from_options({})

    def test_passthrough(self) -> None:
        ruleset = RuleSet(required=Required())
        assert RuleSet.from_options(ruleset) is ruleset

    def test_required_bool(self) -> None:
        assert rules(required=True).required == Required(value=True)

    def test_required_mapping(self) -> None:
        ruleset = rules(required={"value": True, "message": "Name please"})
        assert ruleset.required == Required(value=True, message="Name please")

    def test_pattern_string_compiled(self) -> None:
        ruleset = rules(pattern=r"\d+")
        assert isinstance(ruleset.pattern, Pattern)
        assert ruleset.pattern.regex.pattern == r"\d+"

    def test_pattern_mapping(self) -> None:
        ruleset = rules(pattern={"value": EMAIL_RE, "message": "Bad email"})
        assert ruleset.pattern == Pattern(regex=EMAIL_RE, message="Bad email")

    def test_validate_callable(self) -> None:
        ruleset = rules(validate=bool)
        assert ruleset.validate == Validate(validator=bool)

    def test_validate_mapping(self) -> None:
        ruleset = rules(validate={"validator": bool, "message": "Nope"})
        assert ruleset.validate == Validate(validator=bool, message="Nope", explicit=True)

    def test_unknown_rule(self) -> None:
        with pytest.raises(RuleSetError, match="Unknown validation rule"):
            RuleSet.from_options({"min": 3})

    def test_bad_required(self) -> None:
        with pytest.raises(RuleSetError, match="'required'"):
            rules(required="yes")

    def test_bad_regex(self) -> None:
        with pytest.raises(RuleSetError, match="not a valid regular expression"):
            rules(pattern="(")

    def test_pattern_mapping_without_value(self) -> None:
        with pytest.raises(RuleSetError, match="'value'"):
            rules(pattern={"message": "x"})

    def test_validate_mapping_without_callable(self) -> None:
        with pytest.raises(RuleSetError, match="callable"):
            rules(validate={"validator": "nope"})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(RuleSetError):
            RuleSet.from_options(["required"])  # type: ignore[arg-type]

    def test_rule_set_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            rules(validate=42)


# ---------------------------------------------------------------------------
# required
# ---------------------------------------------------------------------------


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", False, 0, [], {}])
    def test_falsy_fails(self, value: object) -> None:
        assert evaluate(value, rules(required=True)) == "This field is required"

    def test_truthy_passes(self) -> None:
        assert evaluate("Ada", rules(required=True)) is None

    def test_disabled(self) -> None:
        assert evaluate("", rules(required=False)) is None

    def test_disabled_mapping(self) -> None:
        assert evaluate("", rules(required={"value": False, "message": "x"})) is None

    def test_custom_message(self) -> None:
        assert evaluate("", rules(required={"value": True, "message": "Name please"})) == (
            "Name please"
        )


# ---------------------------------------------------------------------------
# pattern
# ---------------------------------------------------------------------------


class TestPattern:
    def test_invalid_email(self) -> None:
        assert evaluate("invalidemail", rules(pattern=EMAIL_RE)) == "Invalid format"

    def test_valid_email(self) -> None:
        assert evaluate("john@example.com", rules(pattern=EMAIL_RE)) is None

    def test_full_match_required(self) -> None:
        assert evaluate("abc1", rules(pattern=r"[a-z]+")) == "Invalid format"

    def test_custom_message(self) -> None:
        ruleset = rules(pattern={"value": r"\d{5}", "message": "Five digits"})
        assert evaluate("123", ruleset) == "Five digits"

    def test_non_text_skipped(self) -> None:
        assert evaluate(42, rules(pattern=r"[a-z]+")) is None
        assert evaluate(None, rules(pattern=r"[a-z]+")) is None

    def test_empty_string_checked(self) -> None:
        assert evaluate("", rules(pattern=r"[a-z]+")) == "Invalid format"


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_string_result_is_error(self) -> None:
        ruleset = rules(validate=lambda v: v != "admin" or "Reserved name")
        assert evaluate("admin", ruleset) == "Reserved name"

    def test_true_passes(self) -> None:
        assert evaluate("ada", rules(validate=lambda v: True)) is None

    def test_truthy_non_bool_passes(self) -> None:
        assert evaluate("ada", rules(validate=lambda v: 1)) is None

    def test_false_gives_default(self) -> None:
        assert evaluate("ada", rules(validate=lambda v: False)) == "Invalid value"

    def test_none_gives_default(self) -> None:
        assert evaluate("ada", rules(validate=lambda v: None)) == "Invalid value"

    def test_empty_string_result_passes(self) -> None:
        assert evaluate("ada", rules(validate=lambda v: "")) is None

    def test_explicit_message(self) -> None:
        ruleset = rules(validate={"validator": lambda v: False, "message": "Must be 18+"})
        assert evaluate(12, ruleset) == "Must be 18+"

    def test_explicit_message_overrides_string(self) -> None:
        ruleset = rules(validate={"validator": lambda v: "inner", "message": "outer"})
        assert evaluate("x", ruleset) == "outer"

    def test_explicit_without_message_stringifies(self) -> None:
        ruleset = rules(validate={"validator": lambda v: False})
        assert evaluate("x", ruleset) == "False"

    def test_explicit_passes(self) -> None:
        ruleset = rules(validate={"validator": lambda v: True, "message": "x"})
        assert evaluate("x", ruleset) is None

    def test_receives_absent_value(self) -> None:
        seen: list[object] = []
        evaluate(None, rules(validate=lambda v: seen.append(v) or True))
        assert seen == [None]

    def test_exception_propagates(self) -> None:
        def broken(value: object) -> bool:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            evaluate("x", rules(validate=broken))


# ---------------------------------------------------------------------------
# Ordering, purity, config
# ---------------------------------------------------------------------------


class TestEvaluate:
    def test_no_rules(self) -> None:
        assert evaluate("", None) is None
        assert evaluate("", RuleSet()) is None

    def test_required_short_circuits(self) -> None:
        calls: list[object] = []
        ruleset = rules(required=True, pattern=r"\d+", validate=lambda v: calls.append(v))
        assert evaluate("", ruleset) == "This field is required"
        assert calls == []

    def test_pattern_before_validate(self) -> None:
        calls: list[object] = []
        ruleset = rules(pattern=r"\d+", validate=lambda v: calls.append(v))
        assert evaluate("abc", ruleset) == "Invalid format"
        assert calls == []

    def test_idempotent(self) -> None:
        ruleset = rules(required=True, pattern=EMAIL_RE)
        assert evaluate("invalidemail", ruleset) == evaluate("invalidemail", ruleset)

    def test_value_not_mutated(self) -> None:
        value = ["a"]
        evaluate(value, rules(required=True, validate=lambda v: True))
        assert value == ["a"]

    def test_config_messages(self) -> None:
        config = FormConfig(
            required_message="Fill me",
            pattern_message="Wrong shape",
            invalid_message="Rejected",
        )
        assert evaluate("", rules(required=True), config) == "Fill me"
        assert evaluate("x", rules(pattern=r"\d"), config) == "Wrong shape"
        assert evaluate("x", rules(validate=lambda v: False), config) == "Rejected"

    def test_rule_message_beats_config(self) -> None:
        config = FormConfig(required_message="Fill me")
        ruleset = rules(required={"value": True, "message": "Name please"})
        assert evaluate("", ruleset, config) == "Name please"


class TestValidationResult:
    def test_valid(self) -> None:
        result = ValidationResult(values={"a": 1}, errors={})
        assert result.is_valid
        assert result

    def test_invalid(self) -> None:
        result = ValidationResult(values={}, errors={"a": "This field is required"})
        assert not result.is_valid
        assert not result


# ---------------------------------------------------------------------------
# Built-in predicates
# ---------------------------------------------------------------------------


class TestBuiltinPredicates:
    def test_max_length(self) -> None:
        assert max_length(5)("hello") is True
        assert max_length(5)("123456") == "Must be at most 5 characters"

    def test_min_length(self) -> None:
        assert min_length(3)("abc") is True
        assert min_length(3)("ab") == "Must be at least 3 characters"

    def test_length_custom_message(self) -> None:
        assert max_length(1, message="Too long")("ab") == "Too long"

    def test_email(self) -> None:
        assert email("user@example.com") is True
        assert email("userexample.com") == "Must be a valid email address"

    def test_url(self) -> None:
        assert url("https://example.com/path?q=1") is True
        assert url("ftp://example.com") == "Must be a valid URL"

    def test_matches(self) -> None:
        assert matches(r"\d{3}")("123") is True
        assert matches(r"\d+", message="Numbers only")("abc") == "Numbers only"

    def test_one_of(self) -> None:
        assert one_of("red", "green")("red") is True
        assert one_of("red", "green")("blue") == "Must be one of: green, red"

    def test_integer(self) -> None:
        assert integer("-7") is True
        assert integer("3.14") == "Must be a whole number"

    def test_number(self) -> None:
        assert number("3.14") is True
        assert number("abc") == "Must be a number"

    @pytest.mark.parametrize("predicate", [email, url, integer, number, max_length(0)])
    def test_empty_and_non_text_pass(self, predicate) -> None:
        assert predicate("") is True
        assert predicate(None) is True

    def test_chain_first_failure(self) -> None:
        check = chain(min_length(3), max_length(5))
        assert check("ab") == "Must be at least 3 characters"
        assert check("abcdef") == "Must be at most 5 characters"
        assert check("abcd") is True

    def test_chain_with_evaluate(self) -> None:
        ruleset = rules(required=True, validate=chain(email, max_length(10)))
        assert evaluate("someone@example.com", ruleset) == "Must be at most 10 characters"
        assert evaluate("a@b.co", ruleset) is None
