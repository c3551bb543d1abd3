"""
Modal dialog drawn over its parent.

The modal is controlled: it never hides itself. Closing is a request sent to
``on_close``; the owner answers with set_open(False).

Overlay gate: a press closes the modal only when the hit target is the
overlay itself (never the panel or anything inside it) and
``close_on_overlay_click`` is on.
"""

from typing import Callable, Optional, Union

from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent

from ..errors import require_callback
from ..styles import (
    COLORS,
    FONTS,
    MODAL_MAX_HEIGHT_RATIO,
    MODAL_MAX_WIDTH_RATIO,
    MODAL_WIDTHS,
    RADIUS,
    SPACING,
    resolve,
)
from ..utils.logger import get_logger
from ..utils.settings import get_settings
from .icons import ICONS

logger = get_logger("modal")

CLOSE_LABEL = "Close modal"


def _parse_width(width: Union[int, str, None]) -> Optional[int]:
    """Accept 700 or "700px"; anything else means no override."""
    if width is None or isinstance(width, bool):
        return None
    if isinstance(width, int):
        return width if width > 0 else None
    if isinstance(width, str):
        text = width.strip().lower().removesuffix("px").strip()
        if text.isdigit() and int(text) > 0:
            return int(text)
    logger.warning("Ignoring unsupported modal width %r", width)
    return None


class Modal(QWidget):
    """Overlay with a centered panel holding a title, close button and body.

    Args:
        title: Header text.
        on_close: Close request handler; required once a close fires.
        is_open: Initial visibility.
        width: Explicit panel width (int or "NNNpx"); overrides ``size``.
        size: sm, md, lg or xl (unknown -> md).
        close_on_overlay_click: None uses the configured default (True).
        content: Optional body widget.
    """

    close_requested = pyqtSignal()

    def __init__(
        self,
        title: str,
        on_close: Optional[Callable[[], None]] = None,
        is_open: bool = False,
        width: Union[int, str, None] = None,
        size: str = "md",
        close_on_overlay_click: Optional[bool] = None,
        content: Optional[QWidget] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        settings = get_settings()
        self._title = title
        self._on_close = on_close
        self._close_on_overlay_click = (
            settings.modal_close_on_overlay_click
            if close_on_overlay_click is None
            else close_on_overlay_click
        )
        self._requested_width = _parse_width(width) or resolve(MODAL_WIDTHS, size)
        self._open = False

        self.setObjectName("modal-overlay")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
            QWidget#modal-overlay {{
                background-color: {COLORS["bg_overlay"]};
            }}
        """)

        self._setup_ui()
        if content is not None:
            self.add_widget(content)

        if parent is not None:
            parent.installEventFilter(self)

        self.set_open(is_open)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._panel = QFrame()
        self._panel.setObjectName("modal-panel")
        self._panel.setStyleSheet(f"""
            QFrame#modal-panel {{
                background-color: {COLORS["bg_surface"]};
                border-radius: {RADIUS["lg"]}px;
            }}
        """)
        layout.addWidget(self._panel, alignment=Qt.AlignmentFlag.AlignCenter)

        panel_layout = QVBoxLayout(self._panel)
        panel_layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        panel_layout.setSpacing(SPACING["lg"])

        header = QHBoxLayout()
        header.setSpacing(SPACING["sm"])
        self._title_label = QLabel(self._title)
        self._title_label.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["dark"]};
        """)
        header.addWidget(self._title_label)
        header.addStretch()

        self._close_button = QPushButton(ICONS["close"].glyph)
        self._close_button.setAccessibleName(CLOSE_LABEL)
        self._close_button.setToolTip(CLOSE_LABEL)
        self._close_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._close_button.setStyleSheet(f"""
            QPushButton {{
                background: none;
                border: none;
                color: {COLORS["text_muted"]};
                font-size: {FONTS["size_2xl"]}px;
                padding: 4px;
            }}
        """)
        self._close_button.clicked.connect(self._request_close)
        header.addWidget(self._close_button)
        panel_layout.addLayout(header)

        self._body = QWidget()
        self._body_layout = QVBoxLayout(self._body)
        self._body_layout.setContentsMargins(0, 0, 0, 0)
        self._body_layout.setSpacing(SPACING["md"])

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(self._body)
        panel_layout.addWidget(scroll)

        self._apply_panel_bounds()

    # ------------------------------------------------------------
    # Open state
    # ------------------------------------------------------------

    def set_open(self, is_open: bool) -> None:
        self._open = is_open
        if is_open:
            self._fill_parent()
            self.show()
            self.raise_()
        else:
            self.hide()

    def is_open(self) -> bool:
        return self._open

    def close_on_overlay_click(self) -> bool:
        return self._close_on_overlay_click

    def set_close_on_overlay_click(self, enabled: bool) -> None:
        self._close_on_overlay_click = enabled

    # ------------------------------------------------------------
    # Content and geometry
    # ------------------------------------------------------------

    def add_widget(self, widget: QWidget) -> None:
        self._body_layout.addWidget(widget)

    def title(self) -> str:
        return self._title_label.text()

    def panel(self) -> QFrame:
        return self._panel

    def close_button(self) -> QPushButton:
        return self._close_button

    def requested_width(self) -> int:
        return self._requested_width

    def panel_width(self) -> int:
        """Requested width capped at 90% of the overlay width."""
        available = self.width()
        if available <= 0:
            return self._requested_width
        return min(self._requested_width, int(available * MODAL_MAX_WIDTH_RATIO))

    def _apply_panel_bounds(self) -> None:
        self._panel.setFixedWidth(self.panel_width())
        if self.height() > 0:
            self._panel.setMaximumHeight(int(self.height() * MODAL_MAX_HEIGHT_RATIO))

    def _fill_parent(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._apply_panel_bounds()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._fill_parent()
        return super().eventFilter(watched, event)

    # ------------------------------------------------------------
    # Closing
    # ------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        target = self.childAt(event.position().toPoint())
        self.handle_overlay_click(target if target is not None else self)
        event.accept()

    def handle_overlay_click(self, target: QWidget) -> bool:
        """Gate a press by its hit target; returns True if a close was requested."""
        if target is not self or not self._close_on_overlay_click:
            return False
        self._request_close()
        return True

    def _request_close(self) -> None:
        require_callback(self._on_close, "Modal", "on_close")()
        self.close_requested.emit()
