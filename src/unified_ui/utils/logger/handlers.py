"""
Handler wiring for the library logger.

Without a log directory or console output the library logger only carries a
NullHandler and lets records propagate to whatever the host application set
up. Once it owns handlers it stops propagating.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LogConfig, ensure_log_directory, get_config
from .formatters import HumanFormatter, JsonFormatter


def rotating_handler(
    path: Path, max_bytes: int, backups: int, formatter: logging.Formatter
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def console_handler(config: LogConfig) -> logging.StreamHandler:
    """stderr output: everything in debug mode, warnings and up otherwise."""
    handler = logging.StreamHandler(sys.stderr)
    verbose = config.default_level <= logging.DEBUG
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(HumanFormatter())
    return handler


def build_handlers(config: LogConfig, console: bool) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if ensure_log_directory(config) is not None:
        handlers += [
            rotating_handler(
                config.human_log_path,
                config.human_log_max_bytes,
                config.human_log_backup_count,
                HumanFormatter(),
            ),
            rotating_handler(
                config.json_log_path,
                config.json_log_max_bytes,
                config.json_log_backup_count,
                JsonFormatter(),
            ),
        ]
    if console:
        handlers.append(console_handler(config))
    return handlers


def setup_handlers(
    logger: logging.Logger,
    config: Optional[LogConfig] = None,
    include_console: Optional[bool] = None,
) -> None:
    """Replace the handlers on ``logger``.

    Args:
        logger: Logger to configure; existing handlers are closed and dropped.
        config: Defaults to the environment (get_config()).
        include_console: Overrides ``config.console_enabled`` when given.
    """
    config = config or get_config()
    console = config.console_enabled if include_console is None else include_console

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = build_handlers(config, console)
    for handler in handlers:
        logger.addHandler(handler)

    logger.propagate = not handlers
    if not handlers:
        logger.addHandler(logging.NullHandler())
    logger.setLevel(config.default_level)
