"""Portuguese Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "Carimbo de data/hora\tNome do arquivo\tErro\tMensagem"


def _already_exists(message: str) -> bool:
    return (
        message.endswith("já existe.")
        or "”, pois já existe uma função nomeada " in message
        or "já existe uma lista de valor com nome “" in message
    )


def _created_and_imported_automatically(message: str) -> bool:
    return message.endswith("criada e importada automaticamente.")


def _used_instead_same_file(message: str) -> bool:
    return message.endswith("foi usada, pois faz referência ao mesmo arquivo.")


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith((" iniciada", " iniciadas"))


RULES = LocaleRuleSet(
    locale="pt",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
