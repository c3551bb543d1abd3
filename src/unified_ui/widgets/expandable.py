"""
Collapsible panel: a clickable header over a body that shows only while open.
"""

from PyQt6.QtWidgets import QWidget, QFrame, QLabel, QVBoxLayout, QHBoxLayout
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent

from ..styles import COLORS, SPACING, FONTS, RADIUS
from .icons import ICONS

HEADER_PADDING_V = 12


class _PanelHeader(QFrame):
    clicked = pyqtSignal()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class CollapsiblePanel(QWidget):
    """Titled panel whose content shows only while open.

    ``is_open`` only seeds the state; afterwards header clicks (or toggle())
    flip it and ``toggled`` reports the new value.
    """

    toggled = pyqtSignal(bool)

    def __init__(
        self,
        title: str,
        is_open: bool = False,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._open = is_open

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, SPACING["md"])
        outer.setSpacing(0)
        outer.addWidget(self._build_header(title))
        outer.addWidget(self._build_content())

        self._sync()

    def _build_header(self, title: str) -> QFrame:
        self._header = _PanelHeader()
        self._header.setObjectName("panel-header")
        self._header.setCursor(Qt.CursorShape.PointingHandCursor)
        self._header.setStyleSheet(f"""
            QFrame#panel-header {{
                background-color: {COLORS["bg_panel_header"]};
                border: 1px solid {COLORS["border_panel"]};
                border-radius: {RADIUS["md"]}px;
            }}
            QLabel {{
                border: none;
            }}
        """)
        self._header.clicked.connect(self.toggle)

        row = QHBoxLayout(self._header)
        row.setContentsMargins(
            SPACING["md"], HEADER_PADDING_V, SPACING["md"], HEADER_PADDING_V
        )
        row.setSpacing(SPACING["sm"])

        label = QLabel(title)
        label.setStyleSheet(
            f"font-size: {FONTS['size_md']}px;"
            f" font-weight: {FONTS['weight_semibold']};"
            f" color: {COLORS['text_primary']};"
        )
        row.addWidget(label, stretch=1)

        self._indicator = QLabel()
        self._indicator.setFixedWidth(16)
        self._indicator.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._indicator.setStyleSheet(
            f"font-size: {FONTS['size_xs']}px; color: {COLORS['text_muted']};"
        )
        row.addWidget(self._indicator)
        return self._header

    def _build_content(self) -> QFrame:
        self._content = QFrame()
        self._content.setObjectName("panel-content")
        self._content.setStyleSheet(f"""
            QFrame#panel-content {{
                background-color: {COLORS["bg_surface"]};
                border: 1px solid {COLORS["border_panel"]};
                border-top: none;
            }}
        """)
        self._body = QVBoxLayout(self._content)
        margin = SPACING["md"]
        self._body.setContentsMargins(margin, margin, margin, margin)
        self._body.setSpacing(SPACING["xs"])
        return self._content

    def _sync(self) -> None:
        self._content.setVisible(self._open)
        glyph = ICONS["chevron_up" if self._open else "chevron_down"].glyph
        self._indicator.setText(glyph)

    def add_widget(self, widget: QWidget) -> None:
        self._body.addWidget(widget)

    def clear(self) -> None:
        """Remove and schedule deletion of every body widget."""
        for index in reversed(range(self._body.count())):
            widget = self._body.takeAt(index).widget()
            if widget is not None:
                widget.deleteLater()

    def toggle(self) -> None:
        self._open = not self._open
        self._sync()
        self.toggled.emit(self._open)

    def is_open(self) -> bool:
        return self._open

    def indicator(self) -> str:
        return self._indicator.text()

    def header(self) -> QFrame:
        return self._header

    def content(self) -> QFrame:
        return self._content
