"""
Avatar and contact-info widgets.
"""

from typing import Optional

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QHBoxLayout, QWidget
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPainterPath, QPixmap

from ..styles import AVATAR_SIZES, CONTACT_SIZES, COLORS, FONTS, PRIMARY_GRADIENT, resolve
from ..utils.logger import get_logger
from .icons import Icon, ICONS

logger = get_logger("avatar")

FALLBACK_INITIAL = "A"


def circular_pixmap(source: QPixmap, diameter: int) -> QPixmap:
    """Scale ``source`` to cover a circle of ``diameter`` and clip it."""
    scaled = source.scaled(
        diameter,
        diameter,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    result = QPixmap(diameter, diameter)
    result.fill(Qt.GlobalColor.transparent)

    painter = QPainter(result)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    path = QPainterPath()
    path.addEllipse(0, 0, diameter, diameter)
    painter.setClipPath(path)
    x = (diameter - scaled.width()) // 2
    y = (diameter - scaled.height()) // 2
    painter.drawPixmap(x, y, scaled)
    painter.end()
    return result


class Avatar(QFrame):
    """Circular avatar.

    Resolution order, first match wins:
        1. ``src``: image filling the circle
        2. ``icon``: icon at half the diameter, white
        3. first character of ``name`` upper-cased, or "A"
    """

    def __init__(
        self,
        src: Optional[str] = None,
        icon: Optional[Icon] = None,
        name: Optional[str] = None,
        gradient: Optional[str] = None,
        size: str = "md",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("avatar")
        size_style = resolve(AVATAR_SIZES, size)
        diameter = size_style["diameter"]
        self._diameter = diameter
        self.setFixedSize(diameter, diameter)

        background = "transparent" if src is not None else (gradient or PRIMARY_GRADIENT)
        self.setStyleSheet(f"""
            QFrame#avatar {{
                background: {background};
                border-radius: {diameter // 2}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._content: QWidget
        if src is not None:
            self._mode = "image"
            pixmap = QPixmap(src)
            if pixmap.isNull():
                logger.warning("Avatar image could not be loaded: %s", src)
            label = QLabel()
            label.setFixedSize(diameter, diameter)
            label.setAccessibleName(name or "")
            if not pixmap.isNull():
                label.setPixmap(circular_pixmap(pixmap, diameter))
            self._content = label
        elif icon is not None:
            self._mode = "icon"
            self._content = icon.render(diameter // 2, COLORS["text_inverse"])
        else:
            self._mode = "initial"
            label = QLabel(self.initial_for(name))
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet(f"""
                color: {COLORS["text_inverse"]};
                font-weight: {FONTS["weight_bold"]};
                font-size: {size_style["font_size"]}px;
                background: transparent;
            """)
            self._content = label

        layout.addWidget(self._content)

    @staticmethod
    def initial_for(name: Optional[str]) -> str:
        if not name:
            return FALLBACK_INITIAL
        return name[0].upper()

    def mode(self) -> str:
        """Which content was rendered: "image", "icon" or "initial"."""
        return self._mode

    def diameter(self) -> int:
        return self._diameter

    def content(self) -> QWidget:
        return self._content


class ContactInfo(QWidget):
    """Stacked email and phone rows; absent values are omitted."""

    def __init__(
        self,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        mail_icon: Optional[Icon] = None,
        phone_icon: Optional[Icon] = None,
        size: str = "md",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        size_style = resolve(CONTACT_SIZES, size)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._rows: dict[str, QLabel] = {}
        entries = (
            ("email", email, mail_icon or ICONS["mail"]),
            ("phone", phone, phone_icon or ICONS["phone"]),
        )
        for key, value, icon in entries:
            if value is None:
                continue
            row = QHBoxLayout()
            row.setSpacing(6)
            row.addWidget(icon.render(size_style["icon_size"], COLORS["text_muted"]))
            text = QLabel(value)
            text.setStyleSheet(f"""
                font-size: {size_style["font_size"]}px;
                color: {COLORS["text_secondary"]};
            """)
            row.addWidget(text)
            row.addStretch()
            layout.addLayout(row)
            self._rows[key] = text

    def rows(self) -> list[str]:
        """Keys of the rendered rows, in display order."""
        return list(self._rows)

    def text_for(self, key: str) -> Optional[str]:
        label = self._rows.get(key)
        return label.text() if label is not None else None
