"""Audible alerts for new errors."""

from __future__ import annotations

import subprocess
import sys
from typing import Optional

from rich.console import Console

from fmrl.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MACOS_SOUND = "/System/Library/Sounds/Tink.aiff"


def clamp_volume(volume: float) -> float:
    """Volumes outside 0..1 fall back to full volume."""
    if not 0.0 <= volume <= 1.0:
        return 1.0
    return volume


def beep(path: str = "", volume: float = 1.0, console: Optional[Console] = None) -> None:
    """Play the alert sound.

    On macOS the sound file is played with afplay. Elsewhere, or when afplay
    is unavailable, the terminal bell is rung instead.

    Args:
        path: Sound file to play. Empty uses the system default.
        volume: Playback volume between 0 and 1.
        console: Console used for the terminal bell.
    """
    if sys.platform == "darwin":
        command = ["afplay", "-v", str(clamp_volume(volume)), path or DEFAULT_MACOS_SOUND]
        try:
            # don't wait for playback, the next lines keep printing
            subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
            return
        except OSError as e:
            logger.debug("afplay failed, using terminal bell", error=str(e))

    (console or Console(stderr=True)).bell()
