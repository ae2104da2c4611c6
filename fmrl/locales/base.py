"""The LocaleRuleSet record shared by every locale module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class LocaleRuleSet:
    """Predicates describing one language's Import.log phrases.

    Each locale module builds exactly one of these. The predicates only look
    at text, never at error codes; callers decide which lines they apply to.

    Attributes:
        locale: Language code, e.g. "en".
        warning_already_exists: Message reports that an object already exists.
        warning_created_and_imported_automatically: Message reports an
            external data source or file reference that was created
            automatically.
        warning_used_instead_same_file: Message reports a file reference
            reused because it points at the same file.
        is_header: Raw line ends with the localized column header row.
        is_operation_start: Message announces the start of an import.
    """

    locale: str
    warning_already_exists: Predicate
    warning_created_and_imported_automatically: Predicate
    warning_used_instead_same_file: Predicate
    is_header: Predicate
    is_operation_start: Predicate

    def contains_warning_text(self, message: str) -> bool:
        return (
            self.warning_already_exists(message)
            or self.warning_created_and_imported_automatically(message)
            or self.warning_used_instead_same_file(message)
        )
