"""French Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Horodatage\tNomFichier\tErreur\tMessage"


def _already_exists(message: str) -> bool:
    return message.endswith("existe déjà.")


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("créée et importée automatiquement.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith(
        "utilisée en remplacement, car elle fait référence au même fichier."
    )


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith((" démarrée", " démarrées"))


RULES = LocaleRuleSet(
    locale="fr",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
