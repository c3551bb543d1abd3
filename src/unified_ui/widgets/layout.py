"""
Layout widgets: page shell, page header, statistics grid and controls bar.
"""

from typing import Callable, Optional, Sequence

from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QPushButton,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QColor, QIcon, QPainter, QPixmap, QResizeEvent

from ..styles import COLORS, SPACING, FONTS, RADIUS, UI, PRIMARY_GRADIENT
from .icons import ICONS


class PageContainer(QFrame):
    """Page background with generous padding."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("page-container")
        self.setStyleSheet(f"""
            QFrame#page-container {{
                background-color: {COLORS["bg_page"]};
            }}
        """)

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        self._layout.setSpacing(0)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)

    def add_widget(self, widget: QWidget) -> None:
        self._layout.addWidget(widget)


class PageHeader(QWidget):
    """Page header with title, optional subtitle and optional actions."""

    def __init__(
        self,
        title: str,
        subtitle: Optional[str] = None,
        actions: Optional[QWidget] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, SPACING["lg"])
        layout.setSpacing(SPACING["md"])

        text_col = QVBoxLayout()
        text_col.setSpacing(SPACING["sm"])

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_3xl"]}px;
            font-weight: {FONTS["weight_bold"]};
            color: {COLORS["dark"]};
        """)
        text_col.addWidget(self._title)

        self._subtitle: Optional[QLabel] = None
        if subtitle is not None:
            self._subtitle = QLabel(subtitle)
            self._subtitle.setStyleSheet(f"""
                font-size: {FONTS["size_md"]}px;
                color: {COLORS["text_muted"]};
            """)
            text_col.addWidget(self._subtitle)

        layout.addLayout(text_col)
        layout.addStretch()

        self._actions = actions
        if actions is not None:
            layout.addWidget(actions, alignment=Qt.AlignmentFlag.AlignVCenter)

    def title(self) -> str:
        return self._title.text()

    def subtitle(self) -> Optional[str]:
        return self._subtitle.text() if self._subtitle is not None else None


class StatsGrid(QWidget):
    """Grid of stat cards that reflows to fit as many columns as possible.

    Mirrors ``repeat(auto-fit, minmax(min_width, 1fr))``: each column is at
    least ``min_width`` wide, and there is always at least one column.
    """

    def __init__(
        self,
        min_width: int = UI["stats_grid_min_width"],
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._min_width = min_width
        self._cards: list[QWidget] = []
        self._columns = 1

        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(0, 0, 0, SPACING["lg"])
        self._grid.setHorizontalSpacing(SPACING["md"])
        self._grid.setVerticalSpacing(SPACING["md"])

    def column_count(self, width: int) -> int:
        gap = SPACING["md"]
        return max(1, (width + gap) // (self._min_width + gap))

    def columns(self) -> int:
        return self._columns

    def add_card(self, card: QWidget) -> None:
        self._cards.append(card)
        self._reflow(self._columns)

    def cards(self) -> list[QWidget]:
        return list(self._cards)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        columns = self.column_count(event.size().width())
        if columns != self._columns:
            self._reflow(columns)

    def _reflow(self, columns: int) -> None:
        for card in self._cards:
            self._grid.removeWidget(card)
        for i in range(self._grid.columnCount()):
            self._grid.setColumnStretch(i, 0)

        self._columns = columns
        for index, card in enumerate(self._cards):
            row, col = divmod(index, columns)
            self._grid.addWidget(card, row, col)
        for i in range(columns):
            self._grid.setColumnStretch(i, 1)


class ControlsBar(QFrame):
    """Search field, extra controls and an optional add button."""

    def __init__(
        self,
        search_value: str = "",
        on_search_change: Optional[Callable[[str], None]] = None,
        on_add_click: Optional[Callable[[], None]] = None,
        add_button_text: str = "Add Item",
        search_placeholder: str = "Search...",
        additional_controls: Sequence[QWidget] = (),
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("controls-bar")
        self._on_search_change = on_search_change

        self.setStyleSheet(f"""
            QFrame#controls-bar {{
                background-color: {COLORS["bg_surface"]};
                border: 1px solid {COLORS["border_default"]};
                border-radius: {RADIUS["lg"]}px;
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["md"])

        self._search = QLineEdit()
        self._search.setText(search_value)
        self._search.setPlaceholderText(search_placeholder)
        self._search.setAccessibleName("Search")
        self._search.setMinimumWidth(200)
        self._search.addAction(
            _glyph_action(self._search, ICONS["search"].glyph),
            QLineEdit.ActionPosition.LeadingPosition,
        )
        self._search.setStyleSheet(f"""
            QLineEdit {{
                padding: 10px 12px;
                border: 1px solid {COLORS["border_input"]};
                border-radius: {RADIUS["md"]}px;
                font-size: {FONTS["size_sm"]}px;
                background-color: {COLORS["bg_surface"]};
            }}
        """)
        self._search.textChanged.connect(self._emit_search)
        layout.addWidget(self._search, 1)

        for control in additional_controls:
            layout.addWidget(control)

        self._add_button: Optional[QPushButton] = None
        if on_add_click is not None:
            self._add_button = QPushButton(f"{ICONS['plus'].glyph}  {add_button_text}")
            self._add_button.setCursor(Qt.CursorShape.PointingHandCursor)
            self._add_button.setStyleSheet(f"""
                QPushButton {{
                    padding: 10px 20px;
                    background: {PRIMARY_GRADIENT};
                    color: {COLORS["text_inverse"]};
                    border: none;
                    border-radius: {RADIUS["md"]}px;
                    font-size: {FONTS["size_sm"]}px;
                    font-weight: {FONTS["weight_semibold"]};
                }}
            """)
            self._add_button.clicked.connect(lambda _checked=False: on_add_click())
            layout.addWidget(self._add_button)

    def _emit_search(self, text: str) -> None:
        if self._on_search_change is not None:
            self._on_search_change(text)

    def search_field(self) -> QLineEdit:
        return self._search

    def add_button(self) -> Optional[QPushButton]:
        return self._add_button


def _glyph_action(parent: QWidget, glyph: str) -> QAction:
    pixmap = QPixmap(16, 16)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setPen(QColor(COLORS["text_muted"]))
    painter.drawText(pixmap.rect(), Qt.AlignmentFlag.AlignCenter, glyph)
    painter.end()
    return QAction(QIcon(pixmap), "", parent)
