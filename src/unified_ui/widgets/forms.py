"""
Form widgets: labeled field, standalone input/select, date and time ranges.

All inputs are controlled: the caller passes ``value`` and ``on_change``;
set_value() updates the display without calling ``on_change`` back.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Iterable, NamedTuple, Optional, Union

from PyQt6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QTimeEdit,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import QDate, QTime, pyqtSignal

from ..errors import require_callback
from ..styles import COLORS, FONTS, RADIUS, SPACING, UI

SINGLE_LINE = "single-line"
MULTI_LINE = "multi-line"
CHOICE = "choice"

# Original input types collapse onto three shapes
_KIND_SHAPES = {
    "select": CHOICE,
    "textarea": MULTI_LINE,
    CHOICE: CHOICE,
    MULTI_LINE: MULTI_LINE,
}


def field_shape(kind: Optional[str]) -> str:
    """Shape rendered for a field kind; anything unknown is single-line."""
    if not isinstance(kind, str):
        return SINGLE_LINE
    return _KIND_SHAPES.get(kind.lower(), SINGLE_LINE)


def generate_id(prefix: str) -> str:
    """Unique control id, e.g. ``form-field-3f2a9c01b7de``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class Option:
    value: Any
    label: str


OptionLike = Union[Option, dict, str, tuple]


def normalize_options(options: Optional[Iterable[OptionLike]]) -> list[Option]:
    """Accept Option, {"value", "label"} dicts, (value, label) tuples or plain strings."""
    if options is None:
        return []
    result = []
    for opt in options:
        if isinstance(opt, Option):
            result.append(opt)
        elif isinstance(opt, dict):
            value = opt.get("value")
            label = opt.get("label")
            result.append(Option(value, str(label if label is not None else value)))
        elif isinstance(opt, tuple) and len(opt) == 2:
            result.append(Option(opt[0], str(opt[1])))
        else:
            result.append(Option(opt, str(opt)))
    return result


class FormField(QWidget):
    """Labeled form control.

    ``kind`` selects exactly one control: "select" renders a combo box,
    "textarea" a multi-line editor, and every other kind (text, password,
    email, number, date) a single-line input. Required fields get a red
    asterisk; enforcing "required" is left to the host form.
    """

    value_changed = pyqtSignal(object)

    ID_PREFIX = "form-field"
    CONTROL_PADDING = "8px 12px"
    CONTROL_RADIUS = RADIUS["sm"]
    LABEL_GAP = SPACING["sm"]

    def __init__(
        self,
        label: str,
        kind: str = "text",
        value: Any = "",
        on_change: Optional[Callable[[Any], None]] = None,
        required: bool = False,
        options: Optional[Iterable[OptionLike]] = None,
        placeholder: str = "",
        error: Optional[str] = None,
        field_id: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._kind = kind
        self._shape = field_shape(kind)
        self._on_change = on_change
        self._required = required
        self._placeholder = placeholder
        self._options = normalize_options(options)
        self._field_id = field_id or generate_id(self.ID_PREFIX)
        self._error: Optional[str] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, SPACING["md"])
        layout.setSpacing(self.LABEL_GAP)

        label_row = QHBoxLayout()
        label_row.setSpacing(SPACING["xs"])
        self._label = QLabel(label)
        self._label.setStyleSheet(f"""
            font-weight: {FONTS["weight_medium"]};
            color: {COLORS["dark"]};
        """)
        label_row.addWidget(self._label)

        self._required_marker: Optional[QLabel] = None
        if required:
            self._required_marker = QLabel("*")
            self._required_marker.setStyleSheet(f"color: {COLORS['danger']};")
            label_row.addWidget(self._required_marker)
        label_row.addStretch()
        layout.addLayout(label_row)

        self._control = self._build_control()
        self._control.setObjectName(self._field_id)
        self._control.setAccessibleName(label)
        self._control.setProperty("required", required)
        self._label.setBuddy(self._control)
        layout.addWidget(self._control)

        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(f"""
            margin-top: 4px;
            color: {COLORS["danger"]};
            font-size: {FONTS["size_xs"]}px;
        """)
        layout.addWidget(self._error_label)

        self.set_value(value)
        self.set_error(error)

    # ------------------------------------------------------------
    # Control construction
    # ------------------------------------------------------------

    def _build_control(self) -> QWidget:
        if self._shape == CHOICE:
            combo = QComboBox()
            if self._placeholder:
                combo.addItem(self._placeholder, "")
            for opt in self._options:
                combo.addItem(opt.label, opt.value)
            combo.currentIndexChanged.connect(
                lambda _index: self._emit_change(combo.currentData())
            )
            return combo

        if self._shape == MULTI_LINE:
            editor = QPlainTextEdit()
            editor.setPlaceholderText(self._placeholder)
            editor.setMinimumHeight(UI["textarea_min_height"])
            editor.textChanged.connect(lambda: self._emit_change(editor.toPlainText()))
            return editor

        line = QLineEdit()
        line.setPlaceholderText(self._placeholder)
        if isinstance(self._kind, str) and self._kind.lower() == "password":
            line.setEchoMode(QLineEdit.EchoMode.Password)
        line.textChanged.connect(self._emit_change)
        return line

    def _apply_control_style(self) -> None:
        border = COLORS["danger"] if self._error else COLORS["border_input"]
        self._control.setStyleSheet(f"""
            border: 1px solid {border};
            border-radius: {self.CONTROL_RADIUS}px;
            padding: {self.CONTROL_PADDING};
            font-size: {FONTS["size_sm"]}px;
            background-color: {COLORS["bg_surface"]};
        """)

    # ------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------

    def field_id(self) -> str:
        return self._field_id

    def shape(self) -> str:
        return self._shape

    def control(self) -> QWidget:
        return self._control

    def label_widget(self) -> QLabel:
        return self._label

    def is_required(self) -> bool:
        return self._required

    def has_required_marker(self) -> bool:
        return self._required_marker is not None

    def value(self) -> Any:
        if isinstance(self._control, QComboBox):
            return self._control.currentData()
        if isinstance(self._control, QPlainTextEdit):
            return self._control.toPlainText()
        return self._control.text()

    def set_value(self, value: Any) -> None:
        """Show ``value`` without notifying ``on_change``."""
        self._control.blockSignals(True)
        try:
            if isinstance(self._control, QComboBox):
                index = self._control.findData(value)
                if index < 0 and self._placeholder:
                    index = 0
                self._control.setCurrentIndex(index)
            elif isinstance(self._control, QPlainTextEdit):
                self._control.setPlainText("" if value is None else str(value))
            else:
                self._control.setText("" if value is None else str(value))
        finally:
            self._control.blockSignals(False)

    def error(self) -> Optional[str]:
        return self._error

    def set_error(self, error: Optional[str]) -> None:
        self._error = error or None
        self._error_label.setText(self._error or "")
        self._error_label.setVisible(self._error is not None)
        self._apply_control_style()

    def _emit_change(self, value: Any) -> None:
        require_callback(self._on_change, type(self).__name__, "on_change")(value)
        self.value_changed.emit(value)


class Input(FormField):
    """Standalone single-line input."""

    ID_PREFIX = "input"
    CONTROL_PADDING = "10px 12px"
    CONTROL_RADIUS = RADIUS["input"]
    LABEL_GAP = 6

    def __init__(
        self,
        label: str,
        value: Any = "",
        on_change: Optional[Callable[[Any], None]] = None,
        kind: str = "text",
        placeholder: str = "",
        required: bool = False,
        field_id: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        if field_shape(kind) != SINGLE_LINE:
            kind = "text"
        super().__init__(
            label,
            kind=kind,
            value=value,
            on_change=on_change,
            required=required,
            placeholder=placeholder,
            field_id=field_id,
            parent=parent,
        )


class Select(FormField):
    """Standalone choice input."""

    ID_PREFIX = "select"
    CONTROL_PADDING = "10px 12px"
    CONTROL_RADIUS = RADIUS["input"]
    LABEL_GAP = 6

    def __init__(
        self,
        label: str,
        value: Any = "",
        on_change: Optional[Callable[[Any], None]] = None,
        options: Iterable[OptionLike] = (),
        placeholder: str = "",
        required: bool = False,
        field_id: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(
            label,
            kind="select",
            value=value,
            on_change=on_change,
            required=required,
            options=options,
            placeholder=placeholder,
            field_id=field_id,
            parent=parent,
        )


class RangeValue(NamedTuple):
    start: str
    end: str


class _RangePicker(QWidget):
    """Label over two side-by-side editors reporting a RangeValue."""

    range_changed = pyqtSignal(object)

    def __init__(
        self,
        label: str,
        start: str = "",
        end: str = "",
        on_change: Optional[Callable[[RangeValue], None]] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._on_change = on_change

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._label = QLabel(label)
        self._label.setStyleSheet(f"font-weight: {FONTS['weight_semibold']};")
        layout.addWidget(self._label)

        row = QHBoxLayout()
        row.setSpacing(SPACING["sm"])
        self._start_editor = self._create_editor(start)
        self._end_editor = self._create_editor(end)
        self._start_editor.setAccessibleName(f"{label} from")
        self._end_editor.setAccessibleName(f"{label} to")
        for editor in (self._start_editor, self._end_editor):
            editor.setStyleSheet("padding: 6px;")
            row.addWidget(editor, 1)
        layout.addLayout(row)
        self._label.setBuddy(self._start_editor)

    def _create_editor(self, value: str) -> QWidget:
        raise NotImplementedError

    def _editor_value(self, editor: QWidget) -> str:
        raise NotImplementedError

    def value(self) -> RangeValue:
        return RangeValue(
            self._editor_value(self._start_editor),
            self._editor_value(self._end_editor),
        )

    def start_editor(self) -> QWidget:
        return self._start_editor

    def end_editor(self) -> QWidget:
        return self._end_editor

    def _emit_change(self) -> None:
        value = self.value()
        require_callback(self._on_change, type(self).__name__, "on_change")(value)
        self.range_changed.emit(value)


class DateRangePicker(_RangePicker):
    """From/to date pair; values are ISO dates (yyyy-MM-dd)."""

    FORMAT = "yyyy-MM-dd"

    def _create_editor(self, value: str) -> QWidget:
        editor = QDateEdit()
        editor.setCalendarPopup(True)
        editor.setDisplayFormat(self.FORMAT)
        date = QDate.fromString(value, self.FORMAT) if value else QDate()
        editor.setDate(date if date.isValid() else QDate.currentDate())
        editor.dateChanged.connect(lambda _date: self._emit_change())
        return editor

    def _editor_value(self, editor: QWidget) -> str:
        return editor.date().toString(self.FORMAT)


class TimeRangePicker(_RangePicker):
    """From/to time pair; values are 24h times (HH:mm)."""

    FORMAT = "HH:mm"

    def _create_editor(self, value: str) -> QWidget:
        editor = QTimeEdit()
        editor.setDisplayFormat(self.FORMAT)
        time = QTime.fromString(value, self.FORMAT) if value else QTime()
        editor.setTime(time if time.isValid() else QTime(0, 0))
        editor.timeChanged.connect(lambda _time: self._emit_change())
        return editor

    def _editor_value(self, editor: QWidget) -> str:
        return editor.time().toString(self.FORMAT)
