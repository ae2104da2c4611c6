"""Korean Import.log phrases."""

from fmrl.locales.base import LocaleRuleSet

HEADER = "타임 스탬프\t파일 이름\t오류\t메시지"

# The double period variant shows up in real exports.
_ALREADY_EXISTS_SUFFIXES = (
    "이미 존재합니다.",
    "이미 존재합니다..",
    "”인 값 목록이 이미 존재함).",
    "”은(는) 이미 존재합니다).",
)


def _already_exists(message: str) -> bool:
    return message.endswith(_ALREADY_EXISTS_SUFFIXES)


def _created_and_imported_automatically(message: str) -> bool:
    return "자동으로 생성되고 가져왔습니다." in message


def _used_instead_same_file(message: str) -> bool:
    return "같은 파일을 참조하므로 대신 파일 참조" in message


def _is_header(raw_line: str) -> bool:
    return raw_line.endswith(HEADER)


def _is_operation_start(message: str) -> bool:
    return message.endswith((" 가져오기가 시작됨", "가져오기 작업 시작됨"))


RULES = LocaleRuleSet(
    locale="ko",
    warning_already_exists=_already_exists,
    warning_created_and_imported_automatically=_created_and_imported_automatically,
    warning_used_instead_same_file=_used_instead_same_file,
    is_header=_is_header,
    is_operation_start=_is_operation_start,
)
