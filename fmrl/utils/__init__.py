"""Utility modules for fmrl."""

from fmrl.utils.paths import LOG_FILE_NAME, LogPath, LogPathSource, find_import_log

__all__ = ["LOG_FILE_NAME", "LogPath", "LogPathSource", "find_import_log"]
