"""Data models for fmrl."""

from fmrl.models.error_rule import (
    MATCH_FIELDS,
    ErrorRule,
    ErrorRuleAction,
    normalize_error_code,
)
from fmrl.models.line import ClassifiedLine, LineCategory, LogLine

__all__ = [
    "MATCH_FIELDS",
    "ClassifiedLine",
    "ErrorRule",
    "ErrorRuleAction",
    "LineCategory",
    "LogLine",
    "normalize_error_code",
]
