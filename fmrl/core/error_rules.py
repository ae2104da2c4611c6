"""Error rule loading and matching for fmrl.

This module provides:
- ErrorRuleLoader: For parsing and validating error rule entries
- get_action / apply_error_rules: For evaluating rules against error lines
- ErrorRuleMatcher: A loaded rule list plus the legacy quiet code list

Rules are matched only against error lines (code other than "0").
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional, Sequence

import tomli
from pydantic import ValidationError

from fmrl.models.error_rule import ErrorRule, ErrorRuleAction
from fmrl.models.line import LogLine


class ErrorRuleValidationError(Exception):
    """Exception raised for invalid error rule entries.

    Attributes:
        message: Error description
        path: Path to the file the rule came from (if available)
        rule_index: Index of the rule entry with the error (if available)
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        rule_index: Optional[int] = None,
    ):
        self.path = path
        self.rule_index = rule_index

        parts = []
        if path:
            parts.append(f"Error in {path}")
        if rule_index is not None:
            parts.append(f"error rule {rule_index + 1}")
        if parts:
            full_message = f"{' '.join(parts)}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


def _describe_validation_error(error: ValidationError) -> str:
    """Turn a pydantic ValidationError into a one line description."""
    descriptions = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "rule"
        message = detail["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        descriptions.append(f"{location}: {message}")
    return "; ".join(descriptions)


class ErrorRuleLoader:
    """Loader for error rule lists.

    Rules are usually part of the main config file, under ``[errors]``:

        [[errors.rules]]
        error_code = 102                  # Optional: exact error code
        message_contains = ["Field"]      # Optional: all must appear
        message_starts_with = "Field"     # Optional
        message_ends_with = "."           # Optional
        location_contains = "Contacts"    # Optional
        location_starts_with = "file:"    # Optional
        location_ends_with = ".fmp12"     # Optional
        action = "quiet"                  # "quiet" or "ignore"

    A standalone rule file holds the same entries, either as a TOML
    ``[[rules]]`` array or as a JSON list.

    Example usage:
        loader = ErrorRuleLoader()
        rules = loader.load_entries([{"error_code": "102", "action": "ignore"}])
    """

    def load(self, path: Path) -> list[ErrorRule]:
        """Load rules from a standalone TOML or JSON rule file.

        Raises:
            ErrorRuleValidationError: If the file can't be parsed or an entry
                is invalid
            FileNotFoundError: If the file doesn't exist
        """
        if not path.exists():
            raise FileNotFoundError(f"Error rule file not found: {path}")

        content = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise ErrorRuleValidationError(f"Invalid JSON: {e}", path=path) from e
            entries = data.get("rules", []) if isinstance(data, dict) else data
        else:
            try:
                data = tomli.loads(content)
            except tomli.TOMLDecodeError as e:
                raise ErrorRuleValidationError(f"Invalid TOML: {e}", path=path) from e
            entries = data.get("rules", [])

        return self.load_entries(entries, path=path)

    def load_entries(
        self,
        entries: object,
        path: Optional[Path] = None,
    ) -> list[ErrorRule]:
        """Validate a list of rule dictionaries.

        Args:
            entries: List of rule mappings, as parsed from TOML or JSON.
            path: Optional source path for error reporting.

        Returns:
            The parsed rules, in order. Rules without match logic are kept;
            use remove_no_match_rules() to drop them.

        Raises:
            ErrorRuleValidationError: If the list or any entry is invalid.
        """
        # TOML returns a dict for a single [rules] table
        if isinstance(entries, dict):
            entries = [entries]
        if not isinstance(entries, list):
            raise ErrorRuleValidationError(
                "Error rules must be a list of tables", path=path
            )

        rules: list[ErrorRule] = []
        for i, entry in enumerate(entries):
            rules.append(self.load_entry(entry, index=i, path=path))
        return rules

    def load_entry(
        self,
        entry: object,
        index: Optional[int] = None,
        path: Optional[Path] = None,
    ) -> ErrorRule:
        """Validate a single rule mapping."""
        if not isinstance(entry, dict):
            raise ErrorRuleValidationError(
                f"Error rule must be a table, got {type(entry).__name__}",
                path=path,
                rule_index=index,
            )
        try:
            return ErrorRule.model_validate(entry)
        except ValidationError as e:
            raise ErrorRuleValidationError(
                _describe_validation_error(e),
                path=path,
                rule_index=index,
            ) from e

    def load_json(self, content: str, index: Optional[int] = None) -> ErrorRule:
        """Parse a single rule from a JSON object string, e.g. from the CLI."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ErrorRuleValidationError(
                f"Invalid JSON: {e}", rule_index=index
            ) from e
        return self.load_entry(data, index=index)


def remove_no_match_rules(rules: Iterable[ErrorRule]) -> list[ErrorRule]:
    """Drop rules that only set an action.

    Such a rule would match every error line, which is almost always a
    mistake in the config rather than an intent to silence everything.
    """
    return [rule for rule in rules if rule.has_match_logic()]


def get_action(rule: ErrorRule, line: LogLine) -> Optional[ErrorRuleAction]:
    """Evaluate one rule against a line.

    Args:
        rule: The rule to evaluate.
        line: The parsed log line.

    Returns:
        The rule's action if every set field matches, otherwise None.
        Always None for non-error lines.
    """
    if line.code == "0":
        return None

    if rule.error_code is not None and rule.error_code != line.code:
        return None

    for substring in rule.message_contains:
        if substring not in line.message:
            return None

    if rule.message_starts_with is not None and not line.message.startswith(
        rule.message_starts_with
    ):
        return None

    if rule.message_ends_with is not None and not line.message.endswith(
        rule.message_ends_with
    ):
        return None

    if rule.location_contains is not None and rule.location_contains not in line.filename:
        return None

    if rule.location_starts_with is not None and not line.filename.startswith(
        rule.location_starts_with
    ):
        return None

    if rule.location_ends_with is not None and not line.filename.endswith(
        rule.location_ends_with
    ):
        return None

    return rule.action


def apply_error_rules(
    rules: Sequence[ErrorRule],
    line: LogLine,
) -> Optional[ErrorRuleAction]:
    """Resolve the action for a line across an ordered rule list.

    The first matching IGNORE rule wins outright. QUIET matches are
    remembered and returned only if no IGNORE rule matches.

    Args:
        rules: Rules in configured order.
        line: The parsed log line.

    Returns:
        IGNORE, QUIET, or None if no rule matches.
    """
    result: Optional[ErrorRuleAction] = None
    for rule in rules:
        action = get_action(rule, line)
        if action is ErrorRuleAction.IGNORE:
            return ErrorRuleAction.IGNORE
        if action is ErrorRuleAction.QUIET:
            result = ErrorRuleAction.QUIET
    return result


class ErrorRuleMatcher:
    """Resolves actions for error lines from rules and quiet error codes.

    The quiet code list is the older, simpler way to silence errors: any
    error line whose code is listed behaves as if a QUIET rule matched.

    Example usage:
        matcher = ErrorRuleMatcher(rules, quiet_codes=["102"])
        action = matcher.resolve(line)
    """

    def __init__(
        self,
        rules: Sequence[ErrorRule] = (),
        quiet_codes: Iterable[str] = (),
        allow_catch_all: bool = False,
    ):
        """Initialize the matcher.

        Args:
            rules: Rules in configured order.
            quiet_codes: Error codes whose notifications should be quieted.
            allow_catch_all: Keep rules without match logic instead of
                dropping them. Such rules match every error line.
        """
        self._rules = list(rules) if allow_catch_all else remove_no_match_rules(rules)
        self._quiet_codes = frozenset(quiet_codes)

    @property
    def rules(self) -> list[ErrorRule]:
        """Get the rules in effect."""
        return self._rules

    @property
    def quiet_codes(self) -> frozenset[str]:
        return self._quiet_codes

    def resolve(self, line: LogLine) -> Optional[ErrorRuleAction]:
        """Resolve the action for a line.

        Returns:
            IGNORE if any IGNORE rule matches, QUIET if a QUIET rule matches
            or the code is in the quiet list, otherwise None.
        """
        action = apply_error_rules(self._rules, line)
        if action is None and line.code != "0" and line.code in self._quiet_codes:
            return ErrorRuleAction.QUIET
        return action
