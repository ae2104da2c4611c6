"""Error rule data models for fmrl.

Error rules let users quiet or ignore specific error shapes. Every match
field that is set must hold for the rule to apply (an AND query), so a rule
can be as specific as "code 102, message starts with 'Field', location ends
with '.fmp12'".
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Fields that decide whether a rule matches. A rule with none of them set
# would match every error line.
MATCH_FIELDS = (
    "error_code",
    "message_contains",
    "message_starts_with",
    "message_ends_with",
    "location_contains",
    "location_starts_with",
    "location_ends_with",
)


def normalize_error_code(value: Any) -> Optional[str]:
    """Normalize a configured error code to its string form.

    Accepts a non-negative integer or a string of digits. An empty string
    means "any code" and becomes None.

    Raises:
        ValueError: If the value is not a valid error code.
    """
    if value is None:
        return None
    # bool is an int subclass, but true/false is never a valid code
    if isinstance(value, bool):
        raise ValueError(f"error_code must be a number, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"error_code must not be negative, got {value}")
        return str(value)
    if isinstance(value, str):
        if value == "":
            return None
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"error_code must only contain digits, got {value!r}")
        return value
    raise ValueError(f"error_code must be a number or a string of digits, got {value!r}")


class ErrorRuleAction(str, Enum):
    """What to do with an error line that matches a rule.

    QUIET suppresses the desktop notification and beep for the line.
    IGNORE does the same, drops the line from the notification batch, and
    wins over any QUIET match.
    """

    QUIET = "quiet"
    IGNORE = "ignore"


class ErrorRule(BaseModel):
    """A user configured match rule for error lines.

    Attributes:
        error_code: Exact error code to match. None matches any error code.
        message_contains: Substrings that must all appear in the message.
        message_starts_with: Required message prefix.
        message_ends_with: Required message suffix.
        location_contains: Substring that must appear in the filename column.
        location_starts_with: Required filename prefix.
        location_ends_with: Required filename suffix.
        action: The action to apply when every set field matches.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    error_code: Optional[str] = None
    message_contains: tuple[str, ...] = ()
    message_starts_with: Optional[str] = None
    message_ends_with: Optional[str] = None
    location_contains: Optional[str] = None
    location_starts_with: Optional[str] = None
    location_ends_with: Optional[str] = None
    action: ErrorRuleAction = ErrorRuleAction.QUIET

    @field_validator("error_code", mode="before")
    @classmethod
    def _normalize_error_code(cls, value: Any) -> Optional[str]:
        return normalize_error_code(value)

    @field_validator("message_contains", mode="before")
    @classmethod
    def _normalize_message_contains(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("message_contains must be a string or a list of strings")
        for item in value:
            if not isinstance(item, str):
                raise ValueError(
                    f"message_contains entries must be strings, got {item!r}"
                )
        # empty substrings match everything, drop them
        return tuple(item for item in value if item)

    @field_validator(
        "message_starts_with",
        "message_ends_with",
        "location_contains",
        "location_starts_with",
        "location_ends_with",
        mode="before",
    )
    @classmethod
    def _empty_string_is_unset(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    def has_match_logic(self) -> bool:
        """Check whether any match field is set.

        Returns:
            False when only the action is set, True otherwise.
        """
        return any(getattr(self, name) for name in MATCH_FIELDS)
