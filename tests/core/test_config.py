"""Tests for fmrl configuration loading."""

import pytest

from fmrl.core.config import (
    BeepConfig,
    Config,
    ConfigError,
    ConfigLoader,
    ErrorsConfig,
    NotificationConfig,
    default_config_dir,
)
from fmrl.core.error_rules import ErrorRuleValidationError
from fmrl.models.error_rule import ErrorRuleAction


class TestConfigLoader:
    """Tests for ConfigLoader.load() method."""

    def test_load_full_config(self, tmp_path):
        """Load a config file with every section defined."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('''
[colors.timestamp]
foreground = "cyan"

[colors.error]
foreground = "#FFCC00"
background = "rgb(40, 40, 40)"

[notifications]
enabled = false
debounce_ms = 250

[beep]
enabled = true
path = "/tmp/sound.aiff"
volume = 0.5

[errors]
quiet = [102, "401"]

[[errors.rules]]
error_code = 3
message_contains = ["Field"]
action = "ignore"
''')

        config = ConfigLoader().load(config_file)

        assert config.path == config_file
        assert config.colors.timestamp.foreground == "cyan"
        assert config.colors.error.style == "#ffcc00 on #282828"
        assert config.notifications.enabled is False
        assert config.notifications.debounce_ms == 250
        assert config.beep.enabled is True
        assert config.beep.path == "/tmp/sound.aiff"
        assert config.beep.volume == 0.5
        assert config.errors.quiet == ["102", "401"]
        assert config.errors.rules[0].error_code == "3"
        assert config.errors.rules[0].action is ErrorRuleAction.IGNORE

    def test_load_empty_config(self, tmp_path):
        """An empty config file gives defaults."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("")

        config = ConfigLoader().load(config_file)

        assert config.notifications == NotificationConfig()
        assert config.beep == BeepConfig()
        assert config.errors == ErrorsConfig()
        assert config.colors.message.style == ""

    def test_load_json_config(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"errors": {"quiet": ["7"], "allow_catch_all_rules": true}}')

        config = ConfigLoader().load(config_file)

        assert config.errors.quiet == ["7"]
        assert config.errors.allow_catch_all_rules is True

    def test_load_none_returns_defaults(self):
        config = ConfigLoader().load(None)
        assert config.path is None
        assert config.beep.enabled is False

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load(tmp_path / "missing.toml")

    def test_invalid_toml_reports_line(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[beep]\nenabled = true\nvolume = \n')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load(config_file)

        assert exc_info.value.path == config_file
        assert exc_info.value.line == 3
        assert str(config_file) in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"beep": ')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load(config_file)

        assert exc_info.value.line == 1

    def test_invalid_color(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[colors.filename]\nforeground = "#abc"\n')

        with pytest.raises(ConfigError, match="6 characters"):
            ConfigLoader().load(config_file)

    def test_invalid_quiet_code(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[errors]\nquiet = ["abc"]\n')

        with pytest.raises(ConfigError, match="quiet"):
            ConfigLoader().load(config_file)

    def test_invalid_rule(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[[errors.rules]]\naction = "delete"\n')

        with pytest.raises(ErrorRuleValidationError) as exc_info:
            ConfigLoader().load(config_file)

        assert exc_info.value.path == config_file
        assert exc_info.value.rule_index == 0

    def test_section_must_be_table(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('beep = true\n')

        with pytest.raises(ConfigError, match=r"\[beep\] must be a table"):
            ConfigLoader().load(config_file)


class TestConfigDiscovery:
    """Tests for finding the user config file."""

    def test_discover_toml_first(self, config_dir):
        (config_dir / "config.json").write_text("{}")
        (config_dir / "config.toml").write_text("")

        assert ConfigLoader().discover(config_dir) == config_dir / "config.toml"

    def test_discover_json(self, config_dir):
        (config_dir / "config.json").write_text("{}")

        assert ConfigLoader().discover(config_dir) == config_dir / "config.json"

    def test_discover_nothing(self, config_dir):
        assert ConfigLoader().discover(config_dir) is None

    def test_load_default_without_config(self, config_dir):
        config = ConfigLoader().load_default(config_dir)
        assert config == Config()

    def test_load_default_with_config(self, config_dir):
        (config_dir / "config.toml").write_text('[notifications]\ndebounce_ms = 0\n')

        config = ConfigLoader().load_default(config_dir)

        assert config.notifications.debounce_ms == 0
        assert config.path == config_dir / "config.toml"

    def test_default_config_dir_is_under_home(self, isolated_home):
        assert default_config_dir() == isolated_home / ".config" / "fmrl"


class TestSectionValidation:
    """Tests for individual section from_dict() validation."""

    def test_negative_debounce(self):
        with pytest.raises(ConfigError, match="debounce_ms"):
            NotificationConfig.from_dict({"debounce_ms": -1})

    def test_volume_must_be_number(self):
        with pytest.raises(ConfigError, match="volume"):
            BeepConfig.from_dict({"volume": "loud"})

    def test_single_quiet_code(self):
        errors = ErrorsConfig.from_dict({"quiet": 102})
        assert errors.quiet == ["102"]
