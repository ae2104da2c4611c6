"""Follow a growing log file.

LogTailer reads whatever has been appended since the last read and hands
back complete lines. The watch loop polls the file; a file that shrinks or
disappears is read again from the start.
"""

from __future__ import annotations

import codecs
import time
from pathlib import Path
from threading import Event
from typing import Iterator, Optional

from fmrl.logging import get_logger

logger = get_logger(__name__)

_BOM = "\ufeff"


class LogTailer:
    """Incrementally read lines from a log file.

    Lines are split on LF; a single CR before the LF is dropped. Any CRs
    inside a line are kept for the classifier to deal with. An incomplete
    last line is held back until its newline arrives, unless the read is
    flushed.

    Example usage:
        tailer = LogTailer(Path("Import.log"))
        for line in tailer.read_lines(flush=True):
            print(line)
    """

    def __init__(self, path: Path, poll_interval: float = 0.1):
        """Initialize the tailer.

        Args:
            path: The log file to follow.
            poll_interval: Seconds between checks for new data in follow().
        """
        self.path = path
        self.poll_interval = poll_interval
        self._reset()

    def _reset(self) -> None:
        self._position = 0
        self._pending = ""
        self._at_start = True
        # keeps the bytes of a character split across two reads
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def position(self) -> int:
        """Byte offset of the next read."""
        return self._position

    def read_lines(self, flush: bool = False) -> list[str]:
        """Read the lines appended since the previous call.

        Args:
            flush: Also return a trailing line that has no newline yet.

        Returns:
            New complete lines, without line terminators.

        Raises:
            OSError: If the file can't be opened or read.
        """
        size = self.path.stat().st_size
        if size < self._position:
            logger.info("log file shrank, reading from the start", path=str(self.path))
            self._reset()

        with open(self.path, "rb") as f:
            f.seek(self._position)
            data = f.read()
            self._position = f.tell()

        text = self._decoder.decode(data, final=flush)
        if self._at_start and text:
            self._at_start = False
            if text.startswith(_BOM):
                text = text[len(_BOM):]

        text = self._pending + text
        lines = text.split("\n")
        self._pending = lines.pop()
        if flush and self._pending:
            lines.append(self._pending)
            self._pending = ""

        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def follow(self, stop: Optional[Event] = None) -> Iterator[str]:
        """Yield new lines as they are appended, until stop is set.

        Only data written after the current position is returned, so call
        read_lines() first to consume the existing contents.
        """
        while stop is None or not stop.is_set():
            try:
                lines = self.read_lines()
            except FileNotFoundError:
                logger.debug("log file missing, waiting", path=str(self.path))
                self._reset()
                lines = []
            yield from lines
            if stop is not None:
                if stop.wait(self.poll_interval):
                    break
            else:
                time.sleep(self.poll_interval)
