"""Italian Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Indicatore data e ora\tNomefile\tErrore\tMessaggio"


def _already_exists(message: str) -> bool:
    return message.endswith("già esistente.") or "esiste già" in message


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("creato e importato automaticamente.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith("perché si riferisce allo stesso file.")


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith((" avviata", " avviate"))


RULES = LocaleRuleSet(
    locale="it",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
