"""
Feedback widgets: empty-state placeholder and loading spinner.
"""

from typing import Optional

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt, QRectF, QTimer
from PyQt6.QtGui import QColor, QHideEvent, QPainter, QPaintEvent, QPen, QShowEvent

from ..styles import COLORS, SPACING, FONTS, LOADING_SIZES, UI, resolve
from .icons import Icon


class EmptyState(QWidget):
    """Centered placeholder with optional icon, description and action."""

    def __init__(
        self,
        icon: Optional[Icon] = None,
        title: str = "",
        description: Optional[str] = None,
        action: Optional[QWidget] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setMaximumWidth(UI["empty_max_width"])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(SPACING["sm"])

        self._icon: Optional[QWidget] = None
        if icon is not None:
            self._icon = icon.render(UI["empty_icon_size"], COLORS["text_subtle"])
            layout.addWidget(self._icon, alignment=Qt.AlignmentFlag.AlignCenter)
            layout.addSpacing(SPACING["sm"])

        self._title = QLabel(title)
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_lg"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["dark"]};
        """)
        layout.addWidget(self._title)

        self._description: Optional[QLabel] = None
        if description is not None:
            self._description = QLabel(description)
            self._description.setWordWrap(True)
            self._description.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._description.setStyleSheet(f"""
                font-size: {FONTS["size_sm"]}px;
                color: {COLORS["text_muted"]};
                margin-bottom: {SPACING["md"]}px;
            """)
            layout.addWidget(self._description)

        if action is not None:
            layout.addWidget(action, alignment=Qt.AlignmentFlag.AlignCenter)


class Loading(QWidget):
    """Spinning ring: a faint full track and a solid quarter arc."""

    TRACK_ALPHA = 0x20

    def __init__(
        self,
        size: str = "md",
        color: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        size_style = resolve(LOADING_SIZES, size)
        self._diameter = size_style["diameter"]
        self._border_width = size_style["border_width"]
        self._color = QColor(color or COLORS["primary"])
        self._angle = 0

        self.setFixedSize(self._diameter, self._diameter)

        self._timer = QTimer(self)
        self._timer.setInterval(UI["spinner_step_ms"])
        self._timer.timeout.connect(self._advance)

    def diameter(self) -> int:
        return self._diameter

    def border_width(self) -> int:
        return self._border_width

    def is_spinning(self) -> bool:
        return self._timer.isActive()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self._timer.start()

    def hideEvent(self, event: QHideEvent) -> None:
        self._timer.stop()
        super().hideEvent(event)

    def _advance(self) -> None:
        self._angle = (self._angle + UI["spinner_step_deg"]) % 360
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        inset = self._border_width / 2
        rect = QRectF(
            inset, inset, self._diameter - self._border_width, self._diameter - self._border_width
        )

        track = QColor(self._color)
        track.setAlpha(self.TRACK_ALPHA)
        painter.setPen(QPen(track, self._border_width))
        painter.drawEllipse(rect)

        painter.setPen(QPen(self._color, self._border_width))
        # Qt angles are in 1/16th of a degree, counter-clockwise from 3 o'clock
        painter.drawArc(rect, (90 - self._angle) * 16, -90 * 16)
        painter.end()
