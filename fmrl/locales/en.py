"""English Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Timestamp\tFilename\tError\tMessage"


def _already_exists(message: str) -> bool:
    return message.endswith("already exists.")


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("created and imported automatically.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith("used instead since it refers to the same file.")


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith(" started")


RULES = LocaleRuleSet(
    locale="en",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
