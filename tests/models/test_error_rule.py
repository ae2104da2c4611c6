"""Tests for the ErrorRule model."""

import pytest
from pydantic import ValidationError

from fmrl.models.error_rule import ErrorRule, ErrorRuleAction, normalize_error_code


class TestNormalizeErrorCode:
    """Tests for normalize_error_code()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (102, "102"),
            (0, "0"),
            ("401", "401"),
            ("", None),
            (None, None),
        ],
    )
    def test_valid(self, value, expected):
        assert normalize_error_code(value) == expected

    @pytest.mark.parametrize(
        "value", [-1, True, "12a", "\u0661\u0662", 1.5, ["1"], " 102", "102 ", "   "]
    )
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            normalize_error_code(value)


def test_defaults():
    """A bare rule quiets and matches nothing specific."""
    rule = ErrorRule()
    assert rule.action is ErrorRuleAction.QUIET
    assert rule.error_code is None
    assert rule.message_contains == ()
    assert not rule.has_match_logic()


def test_action_from_string():
    assert ErrorRule(action="ignore").action is ErrorRuleAction.IGNORE


def test_invalid_action():
    with pytest.raises(ValidationError):
        ErrorRule(action="drop")


def test_message_contains_accepts_string():
    rule = ErrorRule(message_contains="Field")
    assert rule.message_contains == ("Field",)
    assert rule.has_match_logic()


def test_message_contains_drops_empty_entries():
    rule = ErrorRule(message_contains=["", "abc", ""])
    assert rule.message_contains == ("abc",)


def test_message_contains_rejects_non_strings():
    with pytest.raises(ValidationError):
        ErrorRule(message_contains=["abc", 1])


def test_empty_strings_are_unset():
    rule = ErrorRule(message_starts_with="", location_ends_with="", error_code="")
    assert rule.message_starts_with is None
    assert rule.location_ends_with is None
    assert not rule.has_match_logic()


def test_unknown_keys_ignored():
    rule = ErrorRule.model_validate({"error_code": 1, "comment": "legacy"})
    assert rule.error_code == "1"


@pytest.mark.parametrize(
    "field",
    [
        "message_starts_with",
        "message_ends_with",
        "location_contains",
        "location_starts_with",
        "location_ends_with",
    ],
)
def test_each_field_counts_as_match_logic(field):
    assert ErrorRule(**{field: "x"}).has_match_logic()


def test_rule_is_frozen():
    rule = ErrorRule(error_code=1)
    with pytest.raises(ValidationError):
        rule.action = ErrorRuleAction.IGNORE


@pytest.mark.parametrize("code", [" 102", "102 ", "   "])
def test_whitespace_error_code_rejected(code):
    """Padded or blank codes are config mistakes, not "any code"."""
    with pytest.raises(ValidationError):
        ErrorRule.model_validate({"error_code": code, "action": "ignore"})
