"""German Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Zeitstempel\tDateiname\tFehler\tMeldung"


def _already_exists(message: str) -> bool:
    return message.endswith("bereits existiert.")


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("automatisch erstellt und importiert.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith(
        "stattdessen verwendet, da er sich auf die gleiche Datei bezieht."
    )


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith(" begonnen")


RULES = LocaleRuleSet(
    locale="de",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
