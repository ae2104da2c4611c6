"""Japanese Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "タイムスタンプ\tファイル名\tエラー\tメッセージ"


def _already_exists(message: str) -> bool:
    return message.endswith(("はすでに存在します。", "としてインポートされました。"))


def _created_and_imported_automatically(message: str) -> bool:
    return "自動的に作成およびインポートされたファイル参照" in message


def _used_instead_same_file(message: str) -> bool:
    return "同じファイルを参照しているため、ファイル参照" in message


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith(
        (" のインポートを開始しました", "インポート処理が開始されました")
    )


RULES = LocaleRuleSet(
    locale="ja",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
