"""
Pytest configuration and shared fixtures for unified_ui tests.

This module provides:
- Offscreen Qt platform so widget tests run headless
- Isolated settings (no reads or writes under the real home directory)
- A sized parent widget for overlay tests
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from PyQt6.QtWidgets import QWidget  # noqa: E402

from unified_ui.utils import settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Fresh default Settings backed by a temporary config file."""
    config_dir = tmp_path / "config"
    with (
        patch.object(settings, "CONFIG_DIR", str(config_dir)),
        patch.object(settings, "CONFIG_FILE", str(config_dir / "settings.json")),
        patch.object(settings, "_settings", settings.Settings()),
    ):
        yield settings.get_settings()


@pytest.fixture
def host(qtbot):
    """Shown 1000x800 parent widget for notifications and modals."""
    widget = QWidget()
    widget.resize(1000, 800)
    qtbot.addWidget(widget)
    widget.show()
    qtbot.waitExposed(widget)
    return widget
