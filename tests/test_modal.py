"""
Tests for unified_ui.widgets.modal

The overlay gate closes only for presses whose target is the overlay itself.
"""

from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QLabel
from PyQt6.QtCore import QPoint, Qt

from unified_ui.errors import MissingCallbackError
from unified_ui.widgets.modal import CLOSE_LABEL, Modal


@pytest.fixture
def on_close():
    return MagicMock()


@pytest.fixture
def modal(host, on_close):
    return Modal("Edit user", on_close=on_close, is_open=True, parent=host)


class TestModalOpenState:
    def test_closed_renders_nothing(self, host, on_close):
        dialog = Modal("Edit", on_close=on_close, parent=host)

        assert not dialog.is_open()
        assert dialog.isHidden()

    def test_open_covers_parent(self, host, modal):
        assert modal.is_open()
        assert not modal.isHidden()
        assert modal.geometry() == host.rect()

    def test_set_open(self, modal):
        modal.set_open(False)
        assert modal.isHidden()

        modal.set_open(True)
        assert not modal.isHidden()

    def test_title(self, modal):
        assert modal.title() == "Edit user"

    def test_content(self, host, on_close):
        body = QLabel("Are you sure?")
        dialog = Modal("Confirm", on_close=on_close, is_open=True, content=body, parent=host)

        assert dialog.isAncestorOf(body)
        assert dialog.panel().isAncestorOf(body)


class TestOverlayGate:
    """handle_overlay_click() decides by hit target."""

    def test_overlay_target_requests_close(self, modal, on_close):
        assert modal.handle_overlay_click(modal) is True
        on_close.assert_called_once_with()

    def test_panel_target_ignored(self, modal, on_close):
        assert modal.handle_overlay_click(modal.panel()) is False
        on_close.assert_not_called()

    def test_panel_descendant_ignored(self, host, on_close):
        body = QLabel("Body")
        dialog = Modal("Edit", on_close=on_close, is_open=True, content=body, parent=host)

        assert dialog.handle_overlay_click(body) is False
        assert dialog.handle_overlay_click(dialog.close_button()) is False
        on_close.assert_not_called()

    def test_gate_off(self, host, on_close):
        dialog = Modal(
            "Edit", on_close=on_close, is_open=True, close_on_overlay_click=False, parent=host
        )

        assert dialog.handle_overlay_click(dialog) is False
        on_close.assert_not_called()

    def test_gate_default_from_settings(self, host, on_close, isolated_settings):
        isolated_settings.modal_close_on_overlay_click = False
        dialog = Modal("Edit", on_close=on_close, is_open=True, parent=host)

        assert dialog.close_on_overlay_click() is False

    def test_does_not_hide_itself(self, modal):
        modal.handle_overlay_click(modal)

        assert modal.is_open()
        assert not modal.isHidden()

    def test_signal(self, qtbot, modal):
        with qtbot.waitSignal(modal.close_requested, timeout=1000):
            modal.handle_overlay_click(modal)

    def test_missing_handler_raises_on_close(self, host):
        dialog = Modal("Edit", is_open=True, parent=host)

        with pytest.raises(MissingCallbackError):
            dialog.handle_overlay_click(dialog)


class TestOverlayMouse:
    """Real presses routed through mousePressEvent."""

    def test_press_on_backdrop(self, qtbot, modal, on_close):
        qtbot.mouseClick(modal, Qt.MouseButton.LeftButton, pos=QPoint(5, 5))

        on_close.assert_called_once_with()

    def test_press_inside_panel(self, qtbot, modal, on_close):
        qtbot.mouseClick(modal.panel(), Qt.MouseButton.LeftButton, pos=QPoint(5, 5))

        on_close.assert_not_called()


class TestCloseButton:
    def test_close_button_always_requests_close(self, host, on_close):
        dialog = Modal(
            "Edit", on_close=on_close, is_open=True, close_on_overlay_click=False, parent=host
        )

        dialog.close_button().click()

        on_close.assert_called_once_with()

    def test_accessible_name(self, modal):
        assert modal.close_button().accessibleName() == CLOSE_LABEL


class TestModalWidth:
    @pytest.mark.parametrize(
        "size,expected",
        [("sm", 400), ("md", 500), ("LG", 600), ("xl", 800), ("giant", 500)],
    )
    def test_size_table(self, host, on_close, size, expected):
        dialog = Modal("Edit", on_close=on_close, size=size, parent=host)

        assert dialog.requested_width() == expected

    @pytest.mark.parametrize("width,expected", [(700, 700), ("720px", 720), ("wide", 500), (0, 500)])
    def test_explicit_width_overrides_size(self, host, on_close, width, expected):
        dialog = Modal("Edit", on_close=on_close, width=width, size="md", parent=host)

        assert dialog.requested_width() == expected

    def test_capped_to_overlay(self, qtbot, host, on_close):
        host.resize(500, 400)
        dialog = Modal("Edit", on_close=on_close, is_open=True, size="xl", parent=host)
        qtbot.waitUntil(lambda: dialog.width() == host.width())

        assert dialog.panel_width() == int(host.width() * 0.9)
        qtbot.waitUntil(lambda: dialog.panel().width() == dialog.panel_width())

    def test_not_capped_when_room(self, qtbot, modal):
        assert modal.panel_width() == 500
        qtbot.waitUntil(lambda: modal.panel().width() == 500)
