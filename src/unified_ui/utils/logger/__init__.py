"""
Logging for unified-ui widgets.

Every widget module logs through a child of the ``unified_ui`` logger:

    from unified_ui.utils.logger import get_logger

    logger = get_logger("notification")
    logger.debug("Timer armed", extra={"widget": "toast"})

By default records go to the host application's logging tree. Set
``UNIFIED_UI_LOG_DIR`` (or pass a LogConfig to setup_logging) to get rotating
human and JSON files; ``UNIFIED_UI_DEBUG=1`` adds verbose stderr output.
"""

import logging
from typing import Any, Optional

from .config import LogConfig, get_config, ensure_log_directory
from .handlers import setup_handlers

ROOT_LOGGER_NAME = "unified_ui"

_root: Optional[logging.Logger] = None


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """(Re)configure the ``unified_ui`` logger and return it.

    Args:
        config: Defaults to the environment, see get_config().
    """
    global _root
    _root = logging.getLogger(ROOT_LOGGER_NAME)
    setup_handlers(_root, config or get_config())
    return _root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """``unified_ui.<name>``, or the library root when no name is given.

    The first call configures logging from the environment.
    """
    root = _root or setup_logging()
    if not name:
        return root
    return root.getChild(name)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().error(msg, *args, **kwargs)


def exception(msg: str, *args: Any, **kwargs: Any) -> None:
    """error() with the active traceback attached."""
    get_logger().exception(msg, *args, **kwargs)


__all__ = [
    "ROOT_LOGGER_NAME",
    "LogConfig",
    "get_config",
    "ensure_log_directory",
    "setup_logging",
    "get_logger",
    "debug",
    "info",
    "warn",
    "error",
    "exception",
]
