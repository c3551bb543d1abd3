"""
Card widgets for metrics display.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QGraphicsDropShadowEffect,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor

from ..styles import COLORS, SPACING, FONTS, RADIUS, UI, PRIMARY_GRADIENT
from .icons import Icon, ICONS


class StatCard(QFrame):
    """Statistic card: title, large value, optional trend, icon tile."""

    TRENDS = {
        "up": (ICONS["arrow_up"].glyph, COLORS["success"]),
        "down": (ICONS["arrow_down"].glyph, COLORS["danger"]),
    }

    def __init__(
        self,
        title: str,
        value: str | int | float,
        icon: Icon,
        color: Optional[str] = None,
        gradient: Optional[str] = None,
        trend: Optional[str] = None,
        trend_value: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("stat-card")

        self.setStyleSheet(f"""
            QFrame#stat-card {{
                background-color: {COLORS["bg_surface"]};
                border: 1px solid {COLORS["border_default"]};
                border-radius: {RADIUS["lg"]}px;
            }}
        """)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(6)
        shadow.setXOffset(0)
        shadow.setYOffset(1)
        shadow.setColor(QColor(0, 0, 0, 26))
        self.setGraphicsEffect(shadow)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["md"])

        text_col = QVBoxLayout()
        text_col.setSpacing(SPACING["xs"])

        self._title_label = QLabel(title)
        self._title_label.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            font-weight: {FONTS["weight_medium"]};
            color: {COLORS["text_muted"]};
            background: transparent;
            border: none;
        """)
        text_col.addWidget(self._title_label)

        self._value_label = QLabel(str(value))
        self._value_label.setStyleSheet(f"""
            font-size: {FONTS["size_2xl"]}px;
            font-weight: {FONTS["weight_bold"]};
            color: {color or COLORS["dark"]};
            background: transparent;
            border: none;
        """)
        text_col.addWidget(self._value_label)

        self._trend_label: Optional[QLabel] = None
        if trend is not None:
            arrow, trend_color = self.TRENDS.get(trend, self.TRENDS["down"])
            text = f"{arrow} {trend_value}" if trend_value else arrow
            self._trend_label = QLabel(text)
            self._trend_label.setStyleSheet(f"""
                font-size: {FONTS["size_xs"]}px;
                color: {trend_color};
                margin-top: {SPACING["sm"]}px;
                background: transparent;
                border: none;
            """)
            text_col.addWidget(self._trend_label)

        layout.addLayout(text_col)
        layout.addStretch()

        box = UI["stat_icon_box"]
        self._icon_tile = QFrame()
        self._icon_tile.setObjectName("stat-icon")
        self._icon_tile.setFixedSize(box, box)
        self._icon_tile.setStyleSheet(f"""
            QFrame#stat-icon {{
                background: {gradient or PRIMARY_GRADIENT};
                border-radius: {RADIUS["md"]}px;
            }}
        """)
        tile_layout = QVBoxLayout(self._icon_tile)
        tile_layout.setContentsMargins(0, 0, 0, 0)
        tile_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        tile_layout.addWidget(icon.render(UI["stat_icon_size"], COLORS["text_inverse"]))
        layout.addWidget(self._icon_tile, alignment=Qt.AlignmentFlag.AlignVCenter)

    def set_value(self, value: str | int | float) -> None:
        self._value_label.setText(str(value))

    def value(self) -> str:
        return self._value_label.text()

    def has_trend(self) -> bool:
        return self._trend_label is not None
