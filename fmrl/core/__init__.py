"""Core logic for fmrl.

This module provides the core functionality:
- classify: Line classification into header/error/warning/success/other
- ErrorRuleLoader, ErrorRuleMatcher: Error rule parsing and evaluation
- ConfigLoader: Configuration file loading
- LogTailer: Incremental reading of a growing log file
- NotificationBatcher: Debounced desktop notifications

LineProcessor lives in fmrl.core.processor and is not re-exported here,
since it depends on the renderer.
"""

from fmrl.core.classifier import (
    classify,
    is_timestamp,
    replace_lone_cr_with_crlf,
    split_fields,
)
from fmrl.core.config import (
    BeepConfig,
    ColorConfig,
    ColorsConfig,
    Config,
    ConfigError,
    ConfigLoader,
    ErrorsConfig,
    NotificationConfig,
)
from fmrl.core.error_rules import (
    ErrorRuleLoader,
    ErrorRuleMatcher,
    ErrorRuleValidationError,
    apply_error_rules,
    get_action,
    remove_no_match_rules,
)
from fmrl.core.notifications import (
    Notification,
    NotificationBatcher,
    NotificationKind,
    build_notification,
)
from fmrl.core.tail import LogTailer

__all__ = [
    "BeepConfig",
    "ColorConfig",
    "ColorsConfig",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "ErrorRuleLoader",
    "ErrorRuleMatcher",
    "ErrorRuleValidationError",
    "ErrorsConfig",
    "LogTailer",
    "Notification",
    "NotificationBatcher",
    "NotificationConfig",
    "NotificationKind",
    "apply_error_rules",
    "build_notification",
    "classify",
    "get_action",
    "is_timestamp",
    "remove_no_match_rules",
    "replace_lone_cr_with_crlf",
    "split_fields",
]
