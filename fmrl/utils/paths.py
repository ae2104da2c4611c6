"""Locating Import.log.

FileMaker writes Import.log next to the file being imported into, or into
the user's Documents folder for hosted files.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "Import.log"


class LogPathSource(Enum):
    """Where the log path came from."""

    CUSTOM = "custom"
    CURRENT_DIR = "current directory"
    DOCS_DIR = "documents directory"


@dataclass(frozen=True)
class LogPath:
    """A resolved log path and how it was found."""

    path: Path
    source: LogPathSource

    @property
    def message(self) -> str:
        """Status message for implicitly chosen paths, empty otherwise."""
        if self.source is LogPathSource.CUSTOM:
            return ""
        return f"using {self.source.value}: {self.path}"


def documents_dir() -> Path:
    return Path.home() / "Documents"


def find_import_log(
    path: Optional[str] = None,
    use_docs_dir: bool = False,
    cwd: Optional[Path] = None,
) -> LogPath:
    """Resolve which log file to read.

    Args:
        path: Explicit path given by the user. Used as is.
        use_docs_dir: Look for Import.log in ~/Documents.
        cwd: Directory to search instead of the current working directory.

    Returns:
        The resolved LogPath.

    Raises:
        FileNotFoundError: If no explicit path was given and Import.log
            doesn't exist in the searched directory.
    """
    if path:
        return LogPath(Path(path), LogPathSource.CUSTOM)

    if use_docs_dir:
        candidate = documents_dir() / LOG_FILE_NAME
        if candidate.exists():
            return LogPath(candidate, LogPathSource.DOCS_DIR)
        raise FileNotFoundError(
            f"couldn't find {LOG_FILE_NAME} in the documents directory ({candidate.parent}). "
            "Use --help for more info"
        )

    candidate = (cwd or Path.cwd()) / LOG_FILE_NAME
    if candidate.exists():
        return LogPath(candidate, LogPathSource.CURRENT_DIR)
    raise FileNotFoundError(
        f"couldn't find {LOG_FILE_NAME} in the current directory ({candidate.parent}). "
        "Use --help for more info"
    )
