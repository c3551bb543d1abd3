"""
Persisted defaults shared by every widget (~/.config/unified-ui/settings.json)
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from .logger import get_logger

logger = get_logger("settings")

CONFIG_DIR = os.path.expanduser("~/.config/unified-ui")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass
class Settings:
    """Defaults a widget falls back to when the caller leaves an option unset"""

    # Notification auto-dismiss delay in ms; 0 keeps notifications open
    notification_duration_ms: int = 5000
    notification_position: str = "bottom-right"

    modal_close_on_overlay_click: bool = True

    table_striped: bool = True
    table_hover: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Build from decoded JSON, dropping unknown keys and wrong-typed values"""
        defaults = cls()
        accepted = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = type(getattr(defaults, f.name))
            # bool is an int subclass; keep it out of the int fields
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                logger.warning(
                    "Ignoring setting %s=%r, expected %s",
                    f.name,
                    value,
                    expected.__name__,
                )
                continue
            accepted[f.name] = value
        return cls(**accepted)

    def save(self):
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            f.write(json.dumps(asdict(self), indent=2))

    @classmethod
    def load(cls) -> "Settings":
        """Read CONFIG_FILE; a missing or unreadable file gives the defaults"""
        if not os.path.isfile(CONFIG_FILE):
            return cls()
        try:
            with open(CONFIG_FILE) as f:
                return cls.from_dict(json.load(f))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not load %s, using defaults: %s", CONFIG_FILE, e)
            return cls()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide Settings, loaded on first use"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def save_settings():
    """Persist the process-wide Settings if they were ever loaded"""
    if _settings is not None:
        _settings.save()
