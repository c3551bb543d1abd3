"""
Tests for settings management module.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from unified_ui.utils import settings
from unified_ui.utils.settings import Settings, get_settings, save_settings
from unified_ui.widgets.notification import Notification


def config_file() -> Path:
    return Path(settings.CONFIG_FILE)


class TestSettings:
    """Tests for Settings dataclass"""

    def test_default_values(self):
        """Settings should carry the widget defaults"""
        s = Settings()
        assert s.notification_duration_ms == 5000
        assert s.notification_position == "bottom-right"
        assert s.modal_close_on_overlay_click is True
        assert s.table_striped is True
        assert s.table_hover is True

    def test_custom_values(self):
        s = Settings(notification_duration_ms=3000, table_hover=False)
        assert s.notification_duration_ms == 3000
        assert s.table_hover is False


class TestSettingsSave:
    """Tests for Settings.save() method"""

    def test_save_creates_directory_and_writes_file(self):
        """save() should create config directory and write JSON file"""
        Settings(notification_duration_ms=2500).save()

        assert Path(settings.CONFIG_DIR).exists()
        data = json.loads(config_file().read_text())
        assert data["notification_duration_ms"] == 2500
        assert data["notification_position"] == "bottom-right"

    def test_save_overwrites_existing_file(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text('{"notification_duration_ms": 1}')

        Settings(notification_duration_ms=7000).save()

        data = json.loads(config_file().read_text())
        assert data["notification_duration_ms"] == 7000


class TestSettingsLoad:
    """Tests for Settings.load() class method"""

    def test_load_returns_defaults_when_file_missing(self):
        assert Settings.load() == Settings()

    def test_load_reads_existing_file(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text('{"notification_position": "top-left", "table_striped": false}')

        s = Settings.load()

        assert s.notification_position == "top-left"
        assert s.table_striped is False
        assert s.notification_duration_ms == 5000

    def test_load_filters_obsolete_fields(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text(
            json.dumps({"notification_duration_ms": 800, "theme": "dark"})
        )

        s = Settings.load()

        assert s.notification_duration_ms == 800
        assert not hasattr(s, "theme")

    def test_load_returns_defaults_on_invalid_json(self, caplog):
        config_file().parent.mkdir(parents=True)
        config_file().write_text("not valid json {{{")

        assert Settings.load() == Settings()
        assert "using defaults" in caplog.text

    def test_load_returns_defaults_when_file_is_not_an_object(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text("[1, 2, 3]")

        assert Settings.load() == Settings()

    @pytest.mark.parametrize(
        "key,value",
        [
            ("notification_duration_ms", "3000"),
            ("notification_duration_ms", True),
            ("table_striped", "no"),
            ("modal_close_on_overlay_click", "false"),
            ("notification_position", 3),
        ],
    )
    def test_load_drops_wrong_typed_values(self, caplog, key, value):
        config_file().parent.mkdir(parents=True)
        config_file().write_text(json.dumps({key: value, "table_hover": False}))

        s = Settings.load()

        assert getattr(s, key) == getattr(Settings(), key)
        assert s.table_hover is False
        assert f"Ignoring setting {key}" in caplog.text

    def test_notification_builds_after_wrong_typed_duration(self, qtbot):
        config_file().parent.mkdir(parents=True)
        config_file().write_text('{"notification_duration_ms": "3000"}')
        settings._settings = None

        toast = Notification("Saved")
        qtbot.addWidget(toast)

        assert toast.duration_ms() == 5000

    def test_from_dict_ignores_unknown_keys(self):
        s = Settings.from_dict({"table_hover": False, "legacy": 1})

        assert s == Settings(table_hover=False)

    def test_load_returns_defaults_on_read_error(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text('{"notification_duration_ms": 800}')

        with patch("builtins.open", side_effect=PermissionError("Access denied")):
            assert Settings.load() == Settings()


class TestGetSettings:
    """Tests for get_settings() function"""

    def test_get_settings_lazy_loads(self):
        config_file().parent.mkdir(parents=True)
        config_file().write_text('{"notification_duration_ms": 750}')
        settings._settings = None

        s = get_settings()

        assert s.notification_duration_ms == 750
        assert settings._settings is s

    def test_get_settings_returns_cached_instance(self):
        assert get_settings() is get_settings()


class TestSaveSettings:
    """Tests for save_settings() function"""

    def test_save_settings_does_nothing_when_not_loaded(self):
        settings._settings = None
        with patch.object(Settings, "save") as mock_save:
            save_settings()
            mock_save.assert_not_called()

    def test_save_settings_saves_loaded_settings(self):
        get_settings().table_hover = False

        save_settings()

        data = json.loads(config_file().read_text())
        assert data["table_hover"] is False
