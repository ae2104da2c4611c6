"""Simplified Chinese Import.log phrases.

Unlike the other locales, the operation start phrase comes first in the
message, so it is matched as a prefix.
"""

from fmrl.locales.base import LocaleRuleSet

HEADER = "时间戳\t文件名\t错误\t信息"


def _already_exists(message: str) -> bool:
    return "名为 “" in message


def _created_and_imported_automatically(message: str) -> bool:
    return "自动创建并导入丢失的文件参考" in message


def _used_instead_same_file(message: str) -> bool:
    return "因为参考同一文件，所以使用文件参考" in message


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.startswith(("开始从剪贴板导", "导入操作已开始"))


RULES = LocaleRuleSet(
    locale="zh",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
