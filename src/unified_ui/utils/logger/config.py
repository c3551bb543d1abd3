"""
Environment-driven logging configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEBUG_ENV = "UNIFIED_UI_DEBUG"
LOG_LEVEL_ENV = "UNIFIED_UI_LOG_LEVEL"
LOG_CONSOLE_ENV = "UNIFIED_UI_LOG_CONSOLE"
LOG_DIR_ENV = "UNIFIED_UI_LOG_DIR"

HUMAN_LOG_FILE = "unified-ui.log"
JSON_LOG_FILE = "unified-ui.json"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

MB = 1024 * 1024


@dataclass
class LogConfig:
    """Logging knobs for the library.

    Nothing is written to disk unless ``log_dir`` is set.
    """

    log_dir: Optional[Path] = None
    human_log_max_bytes: int = 5 * MB
    human_log_backup_count: int = 3
    json_log_max_bytes: int = 10 * MB
    json_log_backup_count: int = 2
    default_level: int = logging.INFO
    console_enabled: bool = False

    @property
    def file_logging_enabled(self) -> bool:
        return self.log_dir is not None

    @property
    def human_log_path(self) -> Optional[Path]:
        return self._in_log_dir(HUMAN_LOG_FILE)

    @property
    def json_log_path(self) -> Optional[Path]:
        return self._in_log_dir(JSON_LOG_FILE)

    def _in_log_dir(self, filename: str) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / filename


def _env_flag(name: str) -> Optional[bool]:
    """True/False for 1|true|yes / 0|false|no, None when unset or unrecognised."""
    value = os.environ.get(name, "").strip().lower()
    if value in ("1", "true", "yes"):
        return True
    if value in ("0", "false", "no"):
        return False
    return None


def get_config() -> LogConfig:
    """Build a LogConfig from UNIFIED_UI_* environment variables.

    UNIFIED_UI_DEBUG turns on debug level and console output. An explicit
    UNIFIED_UI_LOG_LEVEL or UNIFIED_UI_LOG_CONSOLE wins over it.
    UNIFIED_UI_LOG_DIR enables the rotating log files.
    """
    config = LogConfig()

    if _env_flag(DEBUG_ENV):
        config.default_level = logging.DEBUG
        config.console_enabled = True

    level = LEVELS.get(os.environ.get(LOG_LEVEL_ENV, "").strip().lower())
    if level is not None:
        config.default_level = level

    console = _env_flag(LOG_CONSOLE_ENV)
    if console is not None:
        config.console_enabled = console

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        config.log_dir = Path(log_dir).expanduser()

    return config


def ensure_log_directory(config: LogConfig) -> Optional[Path]:
    """Create ``config.log_dir`` if set; returns it (or None)."""
    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
    return config.log_dir
