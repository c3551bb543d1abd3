"""
Icon capability.

Components never draw icons themselves. Anything with
``render(size, color) -> QWidget`` can be passed where an icon is expected;
GlyphIcon is the built-in implementation backed by a unicode character.
"""

from typing import Protocol, runtime_checkable

from PyQt6.QtWidgets import QLabel, QWidget
from PyQt6.QtCore import Qt


@runtime_checkable
class Icon(Protocol):
    """Renderable icon supplied by the caller."""

    def render(self, size: int, color: str) -> QWidget: ...


class GlyphIcon:
    """Icon drawn as a single unicode glyph in a QLabel."""

    def __init__(self, glyph: str, name: str = ""):
        self.glyph = glyph
        self.name = name or glyph

    def render(self, size: int, color: str) -> QWidget:
        label = QLabel(self.glyph)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFixedSize(size, size)
        label.setStyleSheet(f"""
            font-size: {max(size - 2, 1)}px;
            color: {color};
            background: transparent;
            border: none;
        """)
        label.setProperty("icon_name", self.name)
        return label

    def __repr__(self) -> str:
        return f"GlyphIcon({self.name!r})"


ICONS = {
    "plus": GlyphIcon("+", "plus"),
    "search": GlyphIcon("⌕", "search"),
    "view": GlyphIcon("◉", "view"),
    "edit": GlyphIcon("✎", "edit"),
    "delete": GlyphIcon("🗑", "delete"),
    "close": GlyphIcon("×", "close"),
    "check": GlyphIcon("✓", "check"),
    "exclamation": GlyphIcon("!", "exclamation"),
    "mail": GlyphIcon("✉", "mail"),
    "phone": GlyphIcon("☎", "phone"),
    "chevron_up": GlyphIcon("▲", "chevron_up"),
    "chevron_down": GlyphIcon("▼", "chevron_down"),
    "arrow_up": GlyphIcon("↑", "arrow_up"),
    "arrow_down": GlyphIcon("↓", "arrow_down"),
}
