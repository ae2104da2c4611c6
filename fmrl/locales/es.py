"""Spanish Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Fecha y hora\tNombre de archivo\tError\tMensaje"


def _already_exists(message: str) -> bool:
    # some messages name the existing object after the phrase
    return (
        message.endswith("ya existe.")
        or "” pues ya existe un" in message
        or "” porque ya existe un" in message
    )


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("creada e importada automáticamente.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith("ya que se refiere al mismo archivo.")


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith(" iniciada")


RULES = LocaleRuleSet(
    locale="es",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
