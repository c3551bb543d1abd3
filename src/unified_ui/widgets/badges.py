"""
Status badge widget.
"""

from typing import Optional

from PyQt6.QtWidgets import QLabel, QWidget
from PyQt6.QtCore import Qt

from ..styles import BADGE_SIZES, FONTS, RADIUS, resolve, status_category, status_colors


class StatusBadge(QLabel):
    """Pill label colored by status category.

    The displayed text is ``status`` verbatim; the color comes from
    ``variant`` (matched case-insensitively) and the padding from ``size``.
    """

    def __init__(
        self,
        status: str,
        variant: Optional[str] = None,
        size: str = "md",
        parent: QWidget | None = None,
    ):
        super().__init__(status, parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._size = size
        self._variant: Optional[str] = None
        self.set_variant(variant)

    def set_variant(self, variant: Optional[str]) -> None:
        self._variant = variant
        bg, fg = status_colors(variant)
        size_style = resolve(BADGE_SIZES, self._size)
        self.setStyleSheet(f"""
            QLabel {{
                padding: {size_style["padding_v"]}px {size_style["padding_h"]}px;
                font-size: {size_style["font_size"]}px;
                font-weight: {FONTS["weight_semibold"]};
                background-color: {bg};
                color: {fg};
                border-radius: {RADIUS["pill"]}px;
            }}
        """)

    def category(self) -> str:
        """Color category the current variant resolved to."""
        return status_category(self._variant)

    def colors(self) -> tuple[str, str]:
        return status_colors(self._variant)
