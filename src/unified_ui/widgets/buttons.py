"""
Button widgets: single button, row action buttons, form submit/cancel pair.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget
from PyQt6.QtCore import Qt, QSize, pyqtSignal

from ..errors import require_callback
from ..styles import (
    ACTION_BUTTON_SIZES,
    BASIC_BUTTON_VARIANTS,
    BUTTON_VARIANTS,
    COLORS,
    FONTS,
    RADIUS,
    SPACING,
    resolve,
    variant_color,
)
from .icons import ICONS

PROCESSING_TEXT = "Processing..."


class Button(QPushButton):
    """Solid button colored by variant (primary, secondary, success, danger)."""

    def __init__(
        self,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        variant: str = "primary",
        parent: QWidget | None = None,
    ):
        super().__init__(text, parent)
        self._color = variant_color(variant, BASIC_BUTTON_VARIANTS)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(f"""
            QPushButton {{
                padding: 10px 20px;
                background-color: {self._color};
                color: {COLORS["text_inverse"]};
                border: none;
                border-radius: {RADIUS["md"]}px;
                font-size: {FONTS["size_sm"]}px;
                font-weight: {FONTS["weight_semibold"]};
            }}
        """)
        if on_click is not None:
            self.clicked.connect(lambda _checked=False: on_click())

    def color(self) -> str:
        return self._color


class ActionButtons(QWidget):
    """View / edit / delete icon buttons for a table row.

    One button per provided callback, always in view, edit, delete order.
    Each button exposes its title as tooltip and accessible name.
    """

    ACTIONS = {
        "view": ("view", COLORS["action_view_bg"], COLORS["action_view"]),
        "edit": ("edit", COLORS["action_edit_bg"], COLORS["action_edit"]),
        "delete": ("delete", COLORS["action_delete_bg"], COLORS["action_delete"]),
    }

    def __init__(
        self,
        on_view: Optional[Callable[[], None]] = None,
        on_edit: Optional[Callable[[], None]] = None,
        on_delete: Optional[Callable[[], None]] = None,
        view_title: str = "View",
        edit_title: str = "Edit",
        delete_title: str = "Delete",
        size: str = "md",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        size_style = resolve(ACTION_BUTTON_SIZES, size)
        self._icon_size = size_style["icon_size"]

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING["sm"])
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._buttons: list[tuple[str, QPushButton]] = []
        for action, callback, title in (
            ("view", on_view, view_title),
            ("edit", on_edit, edit_title),
            ("delete", on_delete, delete_title),
        ):
            if callback is None:
                continue
            button = self._make_button(action, title, size_style["padding"])
            button.clicked.connect(lambda _checked=False, cb=callback: cb())
            self._buttons.append((action, button))
            layout.addWidget(button)

    def _make_button(self, action: str, title: str, padding: int) -> QPushButton:
        icon_key, bg, fg = self.ACTIONS[action]
        button = QPushButton(ICONS[icon_key].glyph)
        button.setObjectName(f"action-{action}")
        button.setToolTip(title)
        button.setAccessibleName(title)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        side = self._icon_size + 2 * padding
        button.setFixedSize(QSize(side, side))
        button.setStyleSheet(f"""
            QPushButton {{
                padding: {padding}px;
                background-color: {bg};
                color: {fg};
                border: none;
                border-radius: {RADIUS["sm"]}px;
                font-size: {self._icon_size}px;
            }}
        """)
        return button

    def buttons(self) -> list[tuple[str, QPushButton]]:
        """Rendered (action, button) pairs in display order."""
        return list(self._buttons)

    def icon_size(self) -> int:
        return self._icon_size


class FormButtons(QWidget):
    """Right-aligned cancel and submit buttons.

    Cancel is disabled while loading; submit is disabled while loading or
    disabled, and reads "Processing..." while loading.
    """

    cancelled = pyqtSignal()
    submitted = pyqtSignal()

    def __init__(
        self,
        on_cancel: Optional[Callable[[], None]] = None,
        on_submit: Optional[Callable[[], None]] = None,
        submit_text: str = "Save",
        cancel_text: str = "Cancel",
        submit_variant: str = "primary",
        loading: bool = False,
        disabled: bool = False,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._on_cancel = on_cancel
        self._on_submit = on_submit
        self._submit_text = submit_text
        self._loading = loading
        self._disabled = disabled
        self._submit_color = variant_color(submit_variant, BUTTON_VARIANTS)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, SPACING["lg"], 0, 0)
        layout.setSpacing(SPACING["md"])
        layout.addStretch()

        self._cancel_button = QPushButton(cancel_text)
        self._cancel_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._cancel_button.setStyleSheet(f"""
            QPushButton {{
                padding: 8px 16px;
                border: 1px solid {COLORS["light"]};
                border-radius: {RADIUS["sm"]}px;
                background-color: {COLORS["bg_surface"]};
                color: {COLORS["dark"]};
            }}
            QPushButton:hover {{
                background-color: {COLORS["light"]};
            }}
        """)
        self._cancel_button.clicked.connect(self._handle_cancel)
        layout.addWidget(self._cancel_button)

        self._submit_button = QPushButton(submit_text)
        self._submit_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._submit_button.setDefault(True)
        self._submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self._submit_button)

        self._refresh()

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        self._refresh()

    def set_disabled(self, disabled: bool) -> None:
        self._disabled = disabled
        self._refresh()

    def is_loading(self) -> bool:
        return self._loading

    def cancel_button(self) -> QPushButton:
        return self._cancel_button

    def submit_button(self) -> QPushButton:
        return self._submit_button

    def submit_color(self) -> str:
        return self._submit_color

    def _refresh(self) -> None:
        self._cancel_button.setEnabled(not self._loading)
        self._submit_button.setEnabled(not (self._loading or self._disabled))
        self._submit_button.setText(PROCESSING_TEXT if self._loading else self._submit_text)

        opacity_color = self._submit_color
        if self._disabled:
            # 70% opacity on the submit color
            opacity_color = f"rgba({_hex_to_rgb(self._submit_color)}, 0.7)"
        self._submit_button.setStyleSheet(f"""
            QPushButton {{
                padding: 8px 16px;
                border: none;
                border-radius: {RADIUS["sm"]}px;
                background-color: {opacity_color};
                color: {COLORS["text_inverse"]};
            }}
        """)

    def _handle_cancel(self) -> None:
        require_callback(self._on_cancel, "FormButtons", "on_cancel")()
        self.cancelled.emit()

    def _handle_submit(self) -> None:
        require_callback(self._on_submit, "FormButtons", "on_submit")()
        self.submitted.emit()


def _hex_to_rgb(color: str) -> str:
    value = color.lstrip("#")
    return ", ".join(str(int(value[i : i + 2], 16)) for i in (0, 2, 4))
