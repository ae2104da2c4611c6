"""Batched desktop notifications for new errors and warnings.

Events are pushed from the main thread as lines are processed. A background
thread collects them and, once no new event has arrived for the debounce
interval, sends a single notification summarizing the burst.
"""

from __future__ import annotations

import queue
import shutil
import subprocess
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from fmrl.logging import get_logger

logger = get_logger(__name__)

APP_NAME = "fmrl"

# how often an idle batcher checks whether it should stop
_IDLE_POLL_INTERVAL = 0.1


class NotificationKind(Enum):
    """The kind of line that triggered a notification event."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """A desktop notification ready to be sent."""

    summary: str
    body: str


NotificationSender = Callable[[Notification], None]


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def build_notification(error_count: int, warning_count: int) -> Notification:
    """Build the notification for a batch of events.

    Args:
        error_count: Number of error events in the batch.
        warning_count: Number of warning events in the batch.

    Returns:
        Notification whose summary reflects the most severe kind present
        and whose body counts both kinds, e.g. "2 errors and 1 warning".
    """
    if error_count > 0:
        summary = f"❌ {APP_NAME} Errors 🌈"
    elif warning_count > 0:
        summary = f"⚠️ {APP_NAME} Warnings 🌈"
    else:
        summary = ""

    parts = []
    if error_count > 0:
        parts.append(f"{error_count} error{_plural(error_count)}")
    if warning_count > 0:
        parts.append(f"{warning_count} warning{_plural(warning_count)}")

    return Notification(summary=summary, body=" and ".join(parts))


def _applescript_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def send_desktop_notification(notification: Notification) -> None:
    """Show a notification using the platform's notification tool.

    Uses osascript on macOS and notify-send elsewhere. Delivery problems are
    logged and otherwise ignored so they never interrupt the log output.
    """
    if sys.platform == "darwin":
        script = (
            f"display notification {_applescript_string(notification.body)} "
            f"with title {_applescript_string(notification.summary)}"
        )
        command = ["osascript", "-e", script]
    else:
        if shutil.which("notify-send") is None:
            logger.debug("notify-send not found, skipping notification")
            return
        command = ["notify-send", "--app-name", APP_NAME, notification.summary, notification.body]

    try:
        subprocess.run(command, check=True, capture_output=True, timeout=10)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("couldn't send desktop notification", error=str(e))


class NotificationBatcher:
    """Collects notification events and sends one notification per burst.

    Every event restarts the debounce timer, so a steady stream of lines
    (a paste of many records, or a backed up log) is reported once it
    settles.

    Example usage:
        batcher = NotificationBatcher(send_desktop_notification)
        batcher.start()
        batcher.push(NotificationKind.ERROR)
    """

    def __init__(
        self,
        sender: NotificationSender,
        debounce_interval: float = 0.5,
    ):
        """Initialize the batcher.

        Args:
            sender: Called with each batched notification, on the batcher's
                thread.
            debounce_interval: Seconds of quiet required before a batch is
                sent.
        """
        self._sender = sender
        self._debounce_interval = debounce_interval
        self._events: queue.Queue[NotificationKind] = queue.Queue()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the background thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run, name="fmrl-notifications", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the background thread, sending any pending batch first."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def push(self, kind: NotificationKind) -> None:
        """Queue an event for the next batch."""
        self._events.put(kind)

    def _send(self, error_count: int, warning_count: int) -> None:
        notification = build_notification(error_count, warning_count)
        try:
            self._sender(notification)
        except Exception:
            logger.exception("notification sender failed")

    def _run(self) -> None:
        error_count = 0
        warning_count = 0

        while True:
            pending = error_count or warning_count
            timeout = self._debounce_interval if pending else _IDLE_POLL_INTERVAL
            try:
                kind = self._events.get(timeout=timeout)
            except queue.Empty:
                if pending:
                    self._send(error_count, warning_count)
                    error_count = 0
                    warning_count = 0
                elif self._stop.is_set():
                    return
                continue

            if kind is NotificationKind.ERROR:
                error_count += 1
            else:
                warning_count += 1
