"""Line classification for Import.log.

Each physical line is split into its four tab-separated columns and tagged
as a header, error, warning, success, or other line. Classification is a
pure function of the line text.
"""

from __future__ import annotations

import re
from datetime import datetime

from fmrl.locales import contains_warning_text, is_header
from fmrl.models.line import ClassifiedLine, LineCategory, LogLine

# Date and time at the start of a field. Anything after the time (fractional
# seconds, a UTC offset, a trailing "Z") is accepted without inspection.
_TIMESTAMP_PREFIX = re.compile(
    r"^(?P<year>\d{4})-?(?P<month>\d{2})-?(?P<day>\d{2})"
    r"[T ]"
    r"(?P<hour>\d{2}):?(?P<minute>\d{2})(?::?(?P<second>\d{2}))?"
)


def is_timestamp(value: str) -> bool:
    """Check whether a field starts with an ISO 8601 style date and time.

    The date and time may be separated by a space or a "T".

    Args:
        value: The candidate timestamp field.

    Returns:
        True if the field starts with a valid calendar date and time.
    """
    match = _TIMESTAMP_PREFIX.match(value)
    if match is None:
        return False
    try:
        datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
        )
    except ValueError:
        return False
    return True


def replace_lone_cr_with_crlf(text: str) -> str:
    """Rewrite every CR that is followed by something other than LF to CRLF.

    Multi-line calculation errors are written with bare CRs between lines.
    A CR at the very end of the text is left alone because nothing follows
    it.

    >>> replace_lone_cr_with_crlf("a\\rb\\r\\nc\\r")
    'a\\r\\nb\\r\\nc\\r'
    """
    if "\r" not in text:
        return text

    parts: list[str] = []
    previous = ""
    for char in text:
        if previous == "\r" and char != "\n":
            parts.append("\n")
        parts.append(char)
        previous = char
    return "".join(parts)


def split_fields(raw_line: str) -> LogLine:
    """Split a raw line into its four columns.

    The message keeps any tabs it contains. Missing columns are empty.
    """
    fields = raw_line.split("\t", 3)
    fields.extend([""] * (4 - len(fields)))
    timestamp, filename, code, message = fields
    return LogLine(timestamp=timestamp, filename=filename, code=code, message=message)


def classify(raw_line: str) -> ClassifiedLine:
    """Classify a single physical log line.

    Args:
        raw_line: One line of Import.log without its line terminator.

    Returns:
        ClassifiedLine tagged with the line's category. Header, error,
        warning and success lines carry the parsed columns.
    """
    line = split_fields(raw_line)

    if is_timestamp(line.timestamp):
        if line.code != "0":
            line = line.model_copy(
                update={"message": replace_lone_cr_with_crlf(line.message)}
            )
            return ClassifiedLine(category=LineCategory.ERROR, raw=raw_line, line=line)
        if contains_warning_text(line):
            return ClassifiedLine(category=LineCategory.WARNING, raw=raw_line, line=line)
        return ClassifiedLine(category=LineCategory.SUCCESS, raw=raw_line, line=line)

    # headers are rare, so only check once the timestamp test fails
    if is_header(raw_line):
        return ClassifiedLine(category=LineCategory.HEADER, raw=raw_line, line=line)

    return ClassifiedLine(category=LineCategory.OTHER, raw=raw_line)
