"""Locale rule tables for Import.log exports.

FileMaker writes Import.log in the user's interface language. Each locale
module describes its phrases with a LocaleRuleSet, and the queries below OR
across all of them so the export language never has to be configured.

To add a language, create a module exposing ``RULES`` and append it to
``LOCALE_RULES``.
"""

from __future__ import annotations

from fmrl.locales import de, en, es, fr, it, ja, ko, nl, pt, sv, zh
from fmrl.locales.base import LocaleRuleSet
from fmrl.models.line import LogLine

LOCALE_RULES: tuple[LocaleRuleSet, ...] = (
    en.RULES,
    de.RULES,
    es.RULES,
    fr.RULES,
    it.RULES,
    ja.RULES,
    ko.RULES,
    nl.RULES,
    pt.RULES,
    sv.RULES,
    zh.RULES,
)


def contains_warning_text(line: LogLine) -> bool:
    """Check whether a non-error line's message is a known warning.

    Args:
        line: The parsed log line.

    Returns:
        True if any locale recognizes the message as a warning. Always
        False for error lines.
    """
    if line.code != "0":
        return False
    return any(rules.contains_warning_text(line.message) for rules in LOCALE_RULES)


def is_operation_start(line: LogLine) -> bool:
    """Check whether a line announces the start of an import."""
    if line.code != "0":
        return False
    return any(rules.is_operation_start(line.message) for rules in LOCALE_RULES)


def is_header(raw_line: str) -> bool:
    """Check whether a raw line ends with any locale's column header row."""
    return any(rules.is_header(raw_line) for rules in LOCALE_RULES)


__all__ = [
    "LOCALE_RULES",
    "LocaleRuleSet",
    "contains_warning_text",
    "is_header",
    "is_operation_start",
]
