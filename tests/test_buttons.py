"""
Tests for unified_ui.widgets.buttons
"""

from unittest.mock import MagicMock

import pytest

from unified_ui.errors import MissingCallbackError
from unified_ui.styles import ACTION_BUTTON_SIZES, BASIC_BUTTON_VARIANTS, COLORS
from unified_ui.widgets.buttons import (
    PROCESSING_TEXT,
    ActionButtons,
    Button,
    FormButtons,
)


class TestButton:
    def test_click_calls_handler(self, qtbot):
        on_click = MagicMock()
        button = Button("Go", on_click=on_click)
        qtbot.addWidget(button)

        button.click()

        on_click.assert_called_once_with()

    @pytest.mark.parametrize("variant", ["primary", "secondary", "success", "danger"])
    def test_variant_color(self, qtbot, variant):
        button = Button("Go", variant=variant)
        qtbot.addWidget(button)

        assert button.color() == BASIC_BUTTON_VARIANTS[variant]

    def test_unknown_variant_is_primary(self, qtbot):
        button = Button("Go", variant="ghost")
        qtbot.addWidget(button)

        assert button.color() == COLORS["primary"]


class TestActionButtons:
    """One control per provided callback, in view, edit, delete order."""

    def test_delete_only(self, qtbot):
        actions = ActionButtons(on_delete=MagicMock())
        qtbot.addWidget(actions)

        rendered = actions.buttons()

        assert len(rendered) == 1
        name, button = rendered[0]
        assert name == "delete"
        assert button.toolTip() == "Delete"
        assert button.accessibleName() == "Delete"

    def test_order_is_fixed(self, qtbot):
        actions = ActionButtons(on_delete=MagicMock(), on_view=MagicMock(), on_edit=MagicMock())
        qtbot.addWidget(actions)

        assert [name for name, _ in actions.buttons()] == ["view", "edit", "delete"]

    def test_none_provided(self, qtbot):
        actions = ActionButtons()
        qtbot.addWidget(actions)

        assert actions.buttons() == []

    def test_custom_titles(self, qtbot):
        actions = ActionButtons(on_view=MagicMock(), view_title="Open invoice")
        qtbot.addWidget(actions)

        _, button = actions.buttons()[0]
        assert button.toolTip() == "Open invoice"
        assert button.accessibleName() == "Open invoice"
        assert button.objectName() == "action-view"

    def test_clicks_route_to_callbacks(self, qtbot):
        on_view, on_edit = MagicMock(), MagicMock()
        actions = ActionButtons(on_view=on_view, on_edit=on_edit)
        qtbot.addWidget(actions)

        dict(actions.buttons())["edit"].click()

        on_edit.assert_called_once_with()
        on_view.assert_not_called()

    @pytest.mark.parametrize("size,expected", [("sm", "sm"), ("LG", "lg"), ("huge", "md")])
    def test_sizes(self, qtbot, size, expected):
        actions = ActionButtons(on_view=MagicMock(), size=size)
        qtbot.addWidget(actions)

        assert actions.icon_size() == ACTION_BUTTON_SIZES[expected]["icon_size"]


class TestFormButtons:
    """Enable rules and callbacks for the submit/cancel pair."""

    @pytest.fixture
    def buttons(self, qtbot):
        widget = FormButtons(on_cancel=MagicMock(), on_submit=MagicMock(), submit_text="Create")
        qtbot.addWidget(widget)
        return widget

    def test_idle(self, buttons):
        assert buttons.cancel_button().isEnabled()
        assert buttons.submit_button().isEnabled()
        assert buttons.submit_button().text() == "Create"

    def test_loading(self, buttons):
        buttons.set_loading(True)

        assert buttons.is_loading()
        assert not buttons.cancel_button().isEnabled()
        assert not buttons.submit_button().isEnabled()
        assert buttons.submit_button().text() == PROCESSING_TEXT

    def test_loading_cleared(self, buttons):
        buttons.set_loading(True)
        buttons.set_loading(False)

        assert buttons.cancel_button().isEnabled()
        assert buttons.submit_button().text() == "Create"

    def test_disabled(self, buttons):
        buttons.set_disabled(True)

        assert buttons.cancel_button().isEnabled()
        assert not buttons.submit_button().isEnabled()
        assert buttons.submit_button().text() == "Create"

    def test_constructor_flags(self, qtbot):
        widget = FormButtons(loading=True, disabled=True)
        qtbot.addWidget(widget)

        assert not widget.submit_button().isEnabled()
        assert not widget.cancel_button().isEnabled()

    def test_submit(self, qtbot, buttons):
        with qtbot.waitSignal(buttons.submitted, timeout=1000):
            buttons.submit_button().click()

        buttons._on_submit.assert_called_once_with()

    def test_cancel(self, qtbot, buttons):
        with qtbot.waitSignal(buttons.cancelled, timeout=1000):
            buttons.cancel_button().click()

        buttons._on_cancel.assert_called_once_with()

    def test_submit_variant(self, qtbot):
        widget = FormButtons(on_submit=MagicMock(), submit_variant="danger")
        qtbot.addWidget(widget)

        assert widget.submit_color() == COLORS["danger"]

    def test_missing_submit_handler_raises_on_submit(self, qtbot):
        widget = FormButtons(on_cancel=MagicMock())
        qtbot.addWidget(widget)

        with pytest.raises(MissingCallbackError) as exc_info:
            widget._handle_submit()

        assert exc_info.value.component == "FormButtons"
        assert exc_info.value.callback == "on_submit"

    def test_missing_cancel_handler_raises_on_cancel(self, qtbot):
        widget = FormButtons(on_submit=MagicMock())
        qtbot.addWidget(widget)

        with pytest.raises(MissingCallbackError):
            widget._handle_cancel()
