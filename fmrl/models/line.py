"""LogLine and ClassifiedLine data models for fmrl.

A LogLine holds the four tab-separated columns of an Import.log line.
The classifier wraps it in a ClassifiedLine tagged with its category.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LineCategory(str, Enum):
    """The category a raw log line is classified into."""

    HEADER = "header"
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"
    OTHER = "other"


class LogLine(BaseModel):
    """The four columns of an import log line.

    Attributes:
        timestamp: First column, the time the entry was written.
        filename: Second column, the source file or location of the import.
        code: Third column. "0" means success; anything else is an error
            code. Kept as a string so rules can match it verbatim.
        message: Fourth column, may contain tabs and carriage returns.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: str = ""
    filename: str = ""
    code: str = ""
    message: str = ""

    @property
    def is_error(self) -> bool:
        return self.code != "0"

    def to_tsv(self) -> str:
        """Join the columns back together with tabs."""
        return "\t".join((self.timestamp, self.filename, self.code, self.message))


class ClassifiedLine(BaseModel):
    """A raw line together with its category.

    Header, Error, Warning and Success lines carry a LogLine. Other lines
    carry only the raw text.
    """

    model_config = ConfigDict(frozen=True)

    category: LineCategory
    raw: str
    line: Optional[LogLine] = None

    @property
    def is_error(self) -> bool:
        return self.category is LineCategory.ERROR

    @property
    def is_warning(self) -> bool:
        return self.category is LineCategory.WARNING

    @property
    def is_header(self) -> bool:
        return self.category is LineCategory.HEADER
