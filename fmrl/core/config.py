"""Configuration loading and parsing for fmrl.

This module provides the ConfigLoader class for reading TOML (or JSON)
configuration files and the Config dataclass for storing configuration
values.

Example config.toml:

    [colors.timestamp]
    foreground = "green"

    [colors.error]
    foreground = "#ffcc00"
    background = "rgb(40, 40, 40)"

    [notifications]
    enabled = true
    debounce_ms = 500

    [beep]
    enabled = true
    path = "/System/Library/Sounds/Tink.aiff"
    volume = 0.5

    [errors]
    quiet = [102, "401"]

    [[errors.rules]]
    error_code = 102
    message_contains = ["Field"]
    action = "ignore"
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomli

from fmrl.core.colors import build_style, parse_color
from fmrl.core.error_rules import ErrorRuleLoader
from fmrl.logging import get_logger
from fmrl.models.error_rule import ErrorRule, normalize_error_code

logger = get_logger(__name__)

CONFIG_DIR_NAME = "fmrl"
CONFIG_FILE_NAMES = ("config.toml", "config.json")


class ConfigError(Exception):
    """Exception raised for configuration parsing errors.

    Attributes:
        message: Error description
        line: Line number where error occurred (if available)
        path: Path to the config file (if available)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        path: Optional[Path] = None
    ):
        self.line = line
        self.path = path

        parts = []
        if path:
            parts.append(f"Error in {path}")
        if line is not None:
            parts.append(f"at line {line}")
        if parts:
            full_message = f"{' '.join(parts)}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


def _section(data: dict, name: str) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


@dataclass
class ColorConfig:
    """Foreground and background for one column, as rich color strings."""

    foreground: str = ""
    background: str = ""

    @property
    def style(self) -> str:
        return build_style(self.foreground, self.background)

    @classmethod
    def from_dict(cls, data: dict, name: str = "") -> "ColorConfig":
        """Create ColorConfig from a dictionary, validating both colors."""
        try:
            return cls(
                foreground=parse_color(str(data.get("foreground", ""))),
                background=parse_color(str(data.get("background", ""))),
            )
        except ValueError as e:
            raise ConfigError(f"[colors.{name}] {e}") from e


@dataclass
class ColorsConfig:
    """Per-column color overrides for success lines."""

    timestamp: ColorConfig = field(default_factory=ColorConfig)
    filename: ColorConfig = field(default_factory=ColorConfig)
    error: ColorConfig = field(default_factory=ColorConfig)
    message: ColorConfig = field(default_factory=ColorConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "ColorsConfig":
        """Create ColorsConfig from a dictionary."""
        return cls(
            timestamp=ColorConfig.from_dict(_section(data, "timestamp"), "timestamp"),
            filename=ColorConfig.from_dict(_section(data, "filename"), "filename"),
            error=ColorConfig.from_dict(_section(data, "error"), "error"),
            message=ColorConfig.from_dict(_section(data, "message"), "message"),
        )


@dataclass
class NotificationConfig:
    """Desktop notification settings."""

    enabled: bool = True
    debounce_ms: int = 500

    @classmethod
    def from_dict(cls, data: dict) -> "NotificationConfig":
        """Create NotificationConfig from a dictionary."""
        debounce_ms = data.get("debounce_ms", 500)
        if isinstance(debounce_ms, bool) or not isinstance(debounce_ms, int) or debounce_ms < 0:
            raise ConfigError(
                f"[notifications] debounce_ms must be a non-negative integer, got {debounce_ms!r}"
            )
        return cls(
            enabled=bool(data.get("enabled", True)),
            debounce_ms=debounce_ms,
        )


@dataclass
class BeepConfig:
    """Audible alert settings.

    An empty path uses the platform's default alert sound.
    """

    enabled: bool = False
    path: str = ""
    volume: float = 1.0

    @classmethod
    def from_dict(cls, data: dict) -> "BeepConfig":
        """Create BeepConfig from a dictionary."""
        volume = data.get("volume", 1.0)
        if isinstance(volume, bool) or not isinstance(volume, (int, float)):
            raise ConfigError(f"[beep] volume must be a number, got {volume!r}")
        return cls(
            enabled=bool(data.get("enabled", False)),
            path=str(data.get("path", "")),
            volume=float(volume),
        )


@dataclass
class ErrorsConfig:
    """Error suppression settings.

    Attributes:
        quiet: Error codes whose notifications and beeps are suppressed.
        allow_catch_all_rules: Keep rules that only set an action. Such
            rules match every error line, so they are dropped by default.
        rules: Error rules in configured order.
    """

    quiet: list[str] = field(default_factory=list)
    allow_catch_all_rules: bool = False
    rules: list[ErrorRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, path: Optional[Path] = None) -> "ErrorsConfig":
        """Create ErrorsConfig from a dictionary.

        Raises:
            ConfigError: If a quiet code is invalid.
            ErrorRuleValidationError: If a rule entry is invalid.
        """
        quiet_values = data.get("quiet", [])
        if not isinstance(quiet_values, list):
            quiet_values = [quiet_values]

        quiet: list[str] = []
        for value in quiet_values:
            try:
                code = normalize_error_code(value)
            except ValueError as e:
                raise ConfigError(f"[errors] quiet: {e}", path=path) from e
            if code is not None:
                quiet.append(code)

        return cls(
            quiet=quiet,
            allow_catch_all_rules=bool(data.get("allow_catch_all_rules", False)),
            rules=ErrorRuleLoader().load_entries(data.get("rules", []), path=path),
        )


@dataclass
class Config:
    """Complete fmrl configuration.

    Attributes:
        colors: Column colors for success lines
        notifications: Desktop notification settings
        beep: Audible alert settings
        errors: Error rules and quiet codes
        path: File the config was loaded from, if any
    """

    colors: ColorsConfig = field(default_factory=ColorsConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    beep: BeepConfig = field(default_factory=BeepConfig)
    errors: ErrorsConfig = field(default_factory=ErrorsConfig)
    path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict, path: Optional[Path] = None) -> "Config":
        """Create Config from a dictionary.

        Args:
            data: Dictionary parsed from TOML or JSON
            path: Source file, used in error messages

        Returns:
            Config instance with values from dictionary
        """
        if not isinstance(data, dict):
            raise ConfigError("Config must be a table at the top level", path=path)
        try:
            return cls(
                colors=ColorsConfig.from_dict(_section(data, "colors")),
                notifications=NotificationConfig.from_dict(_section(data, "notifications")),
                beep=BeepConfig.from_dict(_section(data, "beep")),
                errors=ErrorsConfig.from_dict(_section(data, "errors"), path=path),
                path=path,
            )
        except ConfigError as e:
            if e.path is None and path is not None:
                raise ConfigError(str(e), path=path) from e
            raise


class ConfigLoader:
    """Loader for fmrl configuration files.

    Example usage:
        loader = ConfigLoader()
        config = loader.load(Path("config.toml"))

        # Or fall back to the user config, then defaults
        config = loader.load_default()
    """

    def load(self, path: Optional[Path]) -> Config:
        """Load configuration from a TOML or JSON file.

        Files ending in ".json" are parsed as JSON, everything else as TOML.

        Args:
            path: Path to the configuration file, or None to use defaults

        Returns:
            Config instance with values from file or defaults

        Raises:
            ConfigError: If the file exists but contains invalid TOML/JSON
                or invalid values
            ErrorRuleValidationError: If an error rule entry is invalid
            FileNotFoundError: If the path is specified but file doesn't exist
        """
        if path is None:
            return Config()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"couldn't read config file: {e}", path=path) from e

        if path.suffix.lower() == ".json":
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise ConfigError(e.msg, line=e.lineno, path=path) from e
        else:
            try:
                data = tomli.loads(content)
            except tomli.TOMLDecodeError as e:
                line = self._extract_line_number(str(e))
                raise ConfigError(str(e), line=line, path=path) from e

        logger.debug("config loaded", path=str(path))
        return Config.from_dict(data, path=path)

    def load_default(self, config_dir: Optional[Path] = None) -> Config:
        """Load the user config if one exists, otherwise return defaults.

        A missing user config is not an error.
        """
        path = self.discover(config_dir)
        if path is None:
            logger.debug("no user config found, using defaults")
            return Config()
        return self.load(path)

    def discover(self, config_dir: Optional[Path] = None) -> Optional[Path]:
        """Find the user config file.

        Looks for config.toml, then config.json, in ~/.config/fmrl.

        Args:
            config_dir: Directory to search instead of the default.

        Returns:
            Path of the first config file found, or None.
        """
        if config_dir is None:
            config_dir = default_config_dir()
        for name in CONFIG_FILE_NAMES:
            candidate = config_dir / name
            if candidate.is_file():
                return candidate
        return None

    def _extract_line_number(self, error_message: str) -> Optional[int]:
        """Extract line number from tomli error message.

        Args:
            error_message: The error message from tomli

        Returns:
            Line number if found, None otherwise
        """
        # tomli error messages often contain "at line N" or "line N"
        match = re.search(r"(?:at )?line (\d+)", error_message, re.IGNORECASE)
        if match:
            return int(match.group(1))
        return None


def default_config_dir() -> Path:
    """The directory holding the user config, ~/.config/fmrl."""
    return Path.home() / ".config" / CONFIG_DIR_NAME
