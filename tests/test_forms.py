"""
Tests for unified_ui.widgets.forms
"""

from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QComboBox, QLineEdit, QPlainTextEdit
from PyQt6.QtCore import QDate, QTime

from unified_ui.errors import MissingCallbackError
from unified_ui.widgets.forms import (
    CHOICE,
    MULTI_LINE,
    SINGLE_LINE,
    DateRangePicker,
    FormField,
    Input,
    Option,
    RangeValue,
    Select,
    TimeRangePicker,
    field_shape,
    generate_id,
    normalize_options,
)

ROLES = [
    {"value": "admin", "label": "Administrator"},
    ("editor", "Editor"),
    "viewer",
]


class TestFieldShape:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("select", CHOICE),
            ("SELECT", CHOICE),
            ("textarea", MULTI_LINE),
            ("text", SINGLE_LINE),
            ("email", SINGLE_LINE),
            ("password", SINGLE_LINE),
            ("number", SINGLE_LINE),
            ("date", SINGLE_LINE),
            ("color", SINGLE_LINE),
            (None, SINGLE_LINE),
        ],
    )
    def test_shapes(self, kind, expected):
        assert field_shape(kind) == expected


class TestHelpers:
    def test_generate_id_unique(self):
        ids = {generate_id("form-field") for _ in range(100)}
        assert len(ids) == 100
        assert all(i.startswith("form-field-") for i in ids)

    def test_normalize_options(self):
        assert normalize_options(ROLES) == [
            Option("admin", "Administrator"),
            Option("editor", "Editor"),
            Option("viewer", "viewer"),
        ]

    def test_normalize_none(self):
        assert normalize_options(None) == []


class TestFormField:
    """One control per field, chosen by kind."""

    @pytest.mark.parametrize(
        "kind,control_type",
        [
            ("select", QComboBox),
            ("textarea", QPlainTextEdit),
            ("text", QLineEdit),
            ("email", QLineEdit),
            ("number", QLineEdit),
        ],
    )
    def test_control_for_kind(self, qtbot, kind, control_type):
        field = FormField("Label", kind=kind, on_change=MagicMock())
        qtbot.addWidget(field)

        assert isinstance(field.control(), control_type)
        assert len(field.findChildren(control_type)) == 1

    @pytest.mark.parametrize("kind", ["password", "Password", "PASSWORD"])
    def test_password_echo(self, qtbot, kind):
        field = FormField("Password", kind=kind, on_change=MagicMock())
        qtbot.addWidget(field)

        assert field.control().echoMode() == QLineEdit.EchoMode.Password

    def test_non_string_kind_echoes_normally(self, qtbot):
        field = FormField("Code", kind=None, on_change=MagicMock())
        qtbot.addWidget(field)

        assert field.control().echoMode() == QLineEdit.EchoMode.Normal

    def test_label_bound_to_control(self, qtbot):
        field = FormField("Email", on_change=MagicMock())
        qtbot.addWidget(field)

        assert field.label_widget().buddy() is field.control()
        assert field.control().objectName() == field.field_id()
        assert field.control().accessibleName() == "Email"

    def test_ids_unique_per_instance(self, qtbot):
        first = FormField("A", on_change=MagicMock())
        second = FormField("B", on_change=MagicMock())
        qtbot.addWidget(first)
        qtbot.addWidget(second)

        assert first.field_id() != second.field_id()
        assert first.field_id().startswith("form-field-")

    def test_explicit_id(self, qtbot):
        field = FormField("A", on_change=MagicMock(), field_id="email")
        qtbot.addWidget(field)

        assert field.field_id() == "email"

    def test_required_marker(self, qtbot):
        required = FormField("Name", required=True, on_change=MagicMock())
        optional = FormField("Nickname", on_change=MagicMock())
        qtbot.addWidget(required)
        qtbot.addWidget(optional)

        assert required.has_required_marker()
        assert not optional.has_required_marker()

    def test_error_message(self, qtbot):
        field = FormField("Name", error="Name is required", on_change=MagicMock())
        qtbot.addWidget(field)

        assert field.error() == "Name is required"
        assert not field._error_label.isHidden()

        field.set_error(None)

        assert field.error() is None
        assert field._error_label.isHidden()

    def test_typing_calls_on_change(self, qtbot):
        on_change = MagicMock()
        field = FormField("Name", on_change=on_change)
        qtbot.addWidget(field)

        with qtbot.waitSignal(field.value_changed, timeout=1000) as blocker:
            field.control().setText("Ada")

        on_change.assert_called_with("Ada")
        assert blocker.args == ["Ada"]

    def test_textarea_change(self, qtbot):
        on_change = MagicMock()
        field = FormField("Notes", kind="textarea", on_change=on_change)
        qtbot.addWidget(field)

        field.control().setPlainText("hello")

        on_change.assert_called_with("hello")

    def test_set_value_is_silent(self, qtbot):
        on_change = MagicMock()
        field = FormField("Name", value="Ada", on_change=on_change)
        qtbot.addWidget(field)

        field.set_value("Grace")

        assert field.value() == "Grace"
        on_change.assert_not_called()

    def test_select_options_and_change(self, qtbot):
        on_change = MagicMock()
        field = FormField("Role", kind="select", options=ROLES, value="editor", on_change=on_change)
        qtbot.addWidget(field)

        combo = field.control()
        assert combo.count() == 3
        assert field.value() == "editor"

        combo.setCurrentIndex(2)

        on_change.assert_called_once_with("viewer")

    def test_select_placeholder(self, qtbot):
        field = FormField(
            "Role",
            kind="select",
            options=ROLES,
            placeholder="Choose a role",
            on_change=MagicMock(),
        )
        qtbot.addWidget(field)

        assert field.control().count() == 4
        assert field.control().currentText() == "Choose a role"
        assert field.value() == ""

    def test_change_without_handler_raises(self, qtbot):
        field = FormField("Name")
        qtbot.addWidget(field)

        with pytest.raises(MissingCallbackError):
            field._emit_change("x")


class TestInputAndSelect:
    def test_input_is_single_line(self, qtbot):
        field = Input("Search", kind="textarea", on_change=MagicMock())
        qtbot.addWidget(field)

        assert isinstance(field.control(), QLineEdit)
        assert field.field_id().startswith("input-")

    def test_select(self, qtbot):
        on_change = MagicMock()
        field = Select("Role", options=ROLES, value="admin", on_change=on_change)
        qtbot.addWidget(field)

        assert isinstance(field.control(), QComboBox)
        assert field.value() == "admin"
        assert field.field_id().startswith("select-")


class TestDateRangePicker:
    def test_initial_values(self, qtbot):
        picker = DateRangePicker(
            "Created", start="2024-01-01", end="2024-01-31", on_change=MagicMock()
        )
        qtbot.addWidget(picker)

        assert picker.value() == RangeValue("2024-01-01", "2024-01-31")

    def test_change_reports_both_ends(self, qtbot):
        on_change = MagicMock()
        picker = DateRangePicker(
            "Created", start="2024-01-01", end="2024-01-31", on_change=on_change
        )
        qtbot.addWidget(picker)

        picker.end_editor().setDate(QDate(2024, 2, 15))

        on_change.assert_called_once_with(RangeValue("2024-01-01", "2024-02-15"))

    def test_invalid_value_uses_today(self, qtbot):
        picker = DateRangePicker("Created", start="not a date", on_change=MagicMock())
        qtbot.addWidget(picker)

        assert picker.start_editor().date() == QDate.currentDate()


class TestTimeRangePicker:
    def test_initial_values(self, qtbot):
        picker = TimeRangePicker("Hours", start="09:00", end="17:30", on_change=MagicMock())
        qtbot.addWidget(picker)

        assert picker.value() == RangeValue("09:00", "17:30")

    def test_change(self, qtbot):
        on_change = MagicMock()
        picker = TimeRangePicker("Hours", start="09:00", end="17:30", on_change=on_change)
        qtbot.addWidget(picker)

        with qtbot.waitSignal(picker.range_changed, timeout=1000):
            picker.start_editor().setTime(QTime(8, 15))

        on_change.assert_called_once_with(RangeValue("08:15", "17:30"))

    def test_missing_value_is_midnight(self, qtbot):
        picker = TimeRangePicker("Hours", on_change=MagicMock())
        qtbot.addWidget(picker)

        assert picker.value() == RangeValue("00:00", "00:00")
